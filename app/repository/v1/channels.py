"""
In-memory репозитории для URL каналов.

- ChangeURLDialogRepository: открытые диалоги смены URL с поддержкой TTL
- ChannelURLRepository: занятые URL каналов в разрезе команд

Данные живут в памяти процесса и теряются при перезапуске.
"""

import logging
import time
from typing import TYPE_CHECKING

from app.core.exceptions import ChannelURLTakenError

if TYPE_CHECKING:
    from app.services.v1.change_url_dialog import ChangeURLDialog

logger = logging.getLogger(__name__)


class ChangeURLDialogRepository:
    """
    Хранилище открытых диалогов с поддержкой TTL.

    TTL продлевается при каждом сохранении диалога.

    Attributes:
        ttl (int): Время жизни диалога в секундах.
        _storage (Dict): Диалоги по идентификатору.
        _expiry (Dict): Время истечения (timestamp) по идентификатору.

    Example:
        >>> repository = ChangeURLDialogRepository(ttl=1800)
        >>> await repository.save(dialog)
        >>> dialog = await repository.get(dialog.dialog_id)
    """

    def __init__(self, ttl: int = 1800):
        self.ttl = ttl
        self._storage: dict[str, "ChangeURLDialog"] = {}
        self._expiry: dict[str, float] = {}

    def _is_expired(self, dialog_id: str) -> bool:
        if dialog_id not in self._expiry:
            return True

        return time.time() > self._expiry[dialog_id]

    def _cleanup(self, dialog_id: str) -> None:
        self._storage.pop(dialog_id, None)
        self._expiry.pop(dialog_id, None)

    def _purge_expired(self) -> int:
        """Удаляет все истёкшие диалоги, возвращает их количество."""
        expired = [dialog_id for dialog_id in self._expiry if self._is_expired(dialog_id)]
        for dialog_id in expired:
            self._cleanup(dialog_id)
        if expired:
            logger.debug("Dialog PURGE: %d expired", len(expired))
        return len(expired)

    async def save(self, dialog: "ChangeURLDialog") -> None:
        """
        Сохранить диалог и продлить его TTL.

        Заодно удаляет все истёкшие диалоги.

        Args:
            dialog: Диалог для сохранения.
        """
        self._purge_expired()

        self._storage[dialog.dialog_id] = dialog
        self._expiry[dialog.dialog_id] = time.time() + self.ttl
        logger.debug("Dialog SET: %s (TTL=%ds)", dialog.dialog_id, self.ttl)

    async def get(self, dialog_id: str) -> "ChangeURLDialog | None":
        """
        Получить диалог по идентификатору.

        Args:
            dialog_id: Идентификатор диалога.

        Returns:
            ChangeURLDialog | None: Диалог или None если не найден/истёк.
        """
        if dialog_id not in self._storage:
            logger.debug("Dialog MISS: %s (not found)", dialog_id)
            return None

        if self._is_expired(dialog_id):
            logger.debug("Dialog MISS: %s (expired)", dialog_id)
            self._cleanup(dialog_id)
            return None

        return self._storage[dialog_id]

    async def delete(self, dialog_id: str) -> bool:
        """
        Удалить диалог.

        Returns:
            bool: True если диалог был удалён.
        """
        if dialog_id in self._storage:
            self._cleanup(dialog_id)
            logger.debug("Dialog DELETE: %s", dialog_id)
            return True

        return False

    async def count(self) -> int:
        """Количество неистёкших диалогов (истёкшие удаляются)."""
        self._purge_expired()
        return len(self._storage)


class ChannelURLRepository:
    """
    Реестр занятых URL каналов по командам.

    Attributes:
        _channels (Dict): URL команды -> множество URL её каналов.
    """

    def __init__(self):
        self._channels: dict[str, set[str]] = {}

    async def exists(self, team_url: str, url: str) -> bool:
        """Проверить, занят ли URL в команде."""
        return url in self._channels.get(team_url, set())

    async def add(self, team_url: str, url: str) -> None:
        """Зарегистрировать URL канала в команде."""
        self._channels.setdefault(team_url, set()).add(url)

    async def rename(self, team_url: str, old_url: str, new_url: str) -> None:
        """
        Сменить URL канала.

        Args:
            team_url: URL команды.
            old_url: Текущий URL канала (пустой для нового канала).
            new_url: Новый URL канала.

        Raises:
            ChannelURLTakenError: Если new_url занят другим каналом команды.
        """
        if new_url == old_url:
            return

        if await self.exists(team_url, new_url):
            raise ChannelURLTakenError(url=new_url, team_url=team_url)

        urls = self._channels.setdefault(team_url, set())
        urls.discard(old_url)
        urls.add(new_url)
        logger.info("URL канала изменён: %s -> %s", old_url or "<new>", new_url, extra={"team_url": team_url})
