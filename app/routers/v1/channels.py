"""
Роутер для работы с URL (slug) каналов.

Предоставляет HTTP API для нормализации и проверки slug,
а также для диалога смены URL канала.
"""

from app.core.dependencies.channels import ChannelURLServiceDep
from app.routers.base import BaseRouter
from app.schemas.base import ErrorResponseSchema
from app.schemas.v1.channels import (
    ChangeURLDialogOpenSchema,
    ChangeURLDialogPropsSchema,
    ChangeURLDialogResponseSchema,
    ChangeURLDialogSubmitSchema,
    ChangeURLSubmitResponseSchema,
    NormalizedSlugResponseSchema,
    ShortenedURLResponseSchema,
    ShortenURLRequestSchema,
    SlugInputRequestSchema,
    SlugValidationResponseSchema,
)


DIALOG_NOT_FOUND_RESPONSES = {
    404: {"model": ErrorResponseSchema, "description": "Диалог не найден, закрыт или истёк"},
}


class ChannelURLRouter(BaseRouter):
    """
    Роутер для проверки URL каналов.

    Endpoints:
        POST /channels/url/normalize - Нормализовать ввод
        POST /channels/url/validate - Проверить slug перед сохранением
        POST /channels/url/shorten - Сократить URL для отображения
    """

    def __init__(self):
        super().__init__(prefix="channels/url", tags=["Channels - URL"])

    def configure(self):
        @self.router.post(
            path="/normalize",
            response_model=NormalizedSlugResponseSchema,
            description="""\
## ⌨️ Нормализовать ввод

Обрезает пробелы, удаляет символы кроме `[A-Za-z0-9-_]` и приводит к нижнему регистру.
Вызывается на каждое изменение поля.
""",
        )
        async def normalize_url(
            data: SlugInputRequestSchema,
            service: ChannelURLServiceDep,
        ) -> NormalizedSlugResponseSchema:
            return NormalizedSlugResponseSchema(data=service.normalize(data.url))

        @self.router.post(
            path="/validate",
            response_model=SlugValidationResponseSchema,
            description="""\
## ✅ Проверить slug

Возвращает `valid` с принятым slug или `invalid` со списком нарушенных правил
в порядке проверки. Недопустимый slug не является ошибкой HTTP.

### Returns:
- **success** — slug принят
- **data.status** — `valid` / `invalid`
- **data.violations** — нарушения (для `invalid`)
""",
        )
        async def validate_url(
            data: SlugInputRequestSchema,
            service: ChannelURLServiceDep,
        ) -> SlugValidationResponseSchema:
            result = service.validate(data.url)
            return SlugValidationResponseSchema(
                success=result.is_valid,
                message=None if result.is_valid else "URL не прошёл проверку",
                data=result,
            )

        @self.router.post(
            path="/shorten",
            response_model=ShortenedURLResponseSchema,
            description="""\
## ✂️ Сократить URL

Сокращает URL команды для отображения перед полем ввода.
""",
        )
        async def shorten_url(
            data: ShortenURLRequestSchema,
            service: ChannelURLServiceDep,
        ) -> ShortenedURLResponseSchema:
            return ShortenedURLResponseSchema(data=service.shorten(data.url, data.get_length))


class ChangeURLDialogRouter(BaseRouter):
    """
    Роутер для диалога смены URL канала.

    Endpoints:
        POST /channels/url/dialogs - Открыть диалог
        GET /channels/url/dialogs/{dialog_id} - Состояние диалога
        PUT /channels/url/dialogs/{dialog_id}/props - Внешнее обновление свойств
        PATCH /channels/url/dialogs/{dialog_id}/url - Ввод пользователя
        POST /channels/url/dialogs/{dialog_id}/submit - Отправить
        POST /channels/url/dialogs/{dialog_id}/cancel - Отменить
    """

    def __init__(self):
        super().__init__(prefix="channels/url/dialogs", tags=["Channels - Change URL dialog"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=ChangeURLDialogResponseSchema,
            status_code=201,
            description="""\
## 🪟 Открыть диалог смены URL

Создаёт диалог с текущим URL канала и URL команды.
Возвращает всё необходимое для отрисовки: сокращённый адрес, подсказку,
ограничение длины поля и задержку подсказки.
""",
        )
        async def open_dialog(
            data: ChangeURLDialogOpenSchema,
            service: ChannelURLServiceDep,
        ) -> ChangeURLDialogResponseSchema:
            dialog = await service.open_dialog(data)
            return ChangeURLDialogResponseSchema(message="Диалог открыт", data=dialog)

        @self.router.get(
            path="/{dialog_id}",
            responses=DIALOG_NOT_FOUND_RESPONSES,
            response_model=ChangeURLDialogResponseSchema,
            description="## 🪟 Состояние диалога",
        )
        async def get_dialog(
            dialog_id: str,
            service: ChannelURLServiceDep,
        ) -> ChangeURLDialogResponseSchema:
            return ChangeURLDialogResponseSchema(data=await service.get_dialog(dialog_id))

        @self.router.put(
            path="/{dialog_id}/props",
            responses=DIALOG_NOT_FOUND_RESPONSES,
            response_model=ChangeURLDialogResponseSchema,
            description="""\
## 🔄 Внешнее обновление свойств

Применяются только переданные поля. `current_url` игнорируется,
пока пользователь редактирует поле.
""",
        )
        async def update_props(
            dialog_id: str,
            data: ChangeURLDialogPropsSchema,
            service: ChannelURLServiceDep,
        ) -> ChangeURLDialogResponseSchema:
            # null допустим только для server_error (сброс ошибки)
            props = {
                key: value
                for key, value in data.model_dump(include=data.model_fields_set).items()
                if value is not None or key == "server_error"
            }
            return ChangeURLDialogResponseSchema(data=await service.update_props(dialog_id, props))

        @self.router.patch(
            path="/{dialog_id}/url",
            responses=DIALOG_NOT_FOUND_RESPONSES,
            response_model=ChangeURLDialogResponseSchema,
            description="## ⌨️ Ввод пользователя в поле URL",
        )
        async def change_url(
            dialog_id: str,
            data: SlugInputRequestSchema,
            service: ChannelURLServiceDep,
        ) -> ChangeURLDialogResponseSchema:
            return ChangeURLDialogResponseSchema(data=await service.change_url(dialog_id, data.url))

        @self.router.post(
            path="/{dialog_id}/submit",
            responses=DIALOG_NOT_FOUND_RESPONSES,
            response_model=ChangeURLSubmitResponseSchema,
            description="""\
## 💾 Отправить диалог

Недопустимый slug возвращает `success=false` и нарушения в `data.dialog.error`,
диалог остаётся открытым. Принятый slug сохраняется, диалог закрывается.
Если URL уже занят, ошибка попадает в `data.dialog.server_error`.
""",
        )
        async def submit_dialog(
            dialog_id: str,
            service: ChannelURLServiceDep,
            data: ChangeURLDialogSubmitSchema | None = None,
        ) -> ChangeURLSubmitResponseSchema:
            url = data.url if data else None
            submit = await service.submit(dialog_id, url)
            return ChangeURLSubmitResponseSchema(
                success=submit.submitted,
                message="URL сохранён" if submit.submitted else None,
                data=submit,
            )

        @self.router.post(
            path="/{dialog_id}/cancel",
            responses=DIALOG_NOT_FOUND_RESPONSES,
            response_model=ChangeURLDialogResponseSchema,
            description="## ✖️ Отменить диалог",
        )
        async def cancel_dialog(
            dialog_id: str,
            service: ChannelURLServiceDep,
        ) -> ChangeURLDialogResponseSchema:
            return ChangeURLDialogResponseSchema(
                message="Диалог закрыт",
                data=await service.cancel(dialog_id),
            )
