"""Tests for the channel URL service and in-memory repositories."""

import asyncio
import time

import pytest

from app.core.exceptions import ChangeURLDialogNotFoundError, ChannelURLTakenError
from app.repository.v1.channels import ChangeURLDialogRepository, ChannelURLRepository
from app.schemas.v1.channels import ChangeURLDialogOpenSchema, SlugRule
from app.services.v1.change_url_dialog import ChangeURLDialog

TEAM_URL = "https://chat.example.com/my-team"


def open_dialog(service, current_url: str = "town-square"):
    return asyncio.run(
        service.open_dialog(ChangeURLDialogOpenSchema(current_url=current_url, current_team_url=TEAM_URL))
    )


class TestDialogRepository:
    def test_save_get_delete(self):
        repository = ChangeURLDialogRepository(ttl=60)
        dialog = ChangeURLDialog(dialog_id="d-1", current_team_url=TEAM_URL)

        asyncio.run(repository.save(dialog))
        assert asyncio.run(repository.get("d-1")) is dialog
        assert asyncio.run(repository.count()) == 1

        assert asyncio.run(repository.delete("d-1")) is True
        assert asyncio.run(repository.get("d-1")) is None
        assert asyncio.run(repository.delete("d-1")) is False

    def test_expired_dialog_is_dropped(self, monkeypatch):
        repository = ChangeURLDialogRepository(ttl=10)
        asyncio.run(repository.save(ChangeURLDialog(dialog_id="d-1", current_team_url=TEAM_URL)))

        now = time.time()
        monkeypatch.setattr(time, "time", lambda: now + 11)

        assert asyncio.run(repository.get("d-1")) is None
        assert asyncio.run(repository.count()) == 0

    def test_save_purges_abandoned_dialogs(self, monkeypatch):
        repository = ChangeURLDialogRepository(ttl=10)
        for index in range(100):
            asyncio.run(repository.save(ChangeURLDialog(dialog_id=f"d-{index}", current_team_url=TEAM_URL)))

        now = time.time()
        monkeypatch.setattr(time, "time", lambda: now + 11)
        asyncio.run(repository.save(ChangeURLDialog(dialog_id="fresh", current_team_url=TEAM_URL)))

        assert list(repository._storage) == ["fresh"]
        assert list(repository._expiry) == ["fresh"]


class TestChannelRepository:
    def test_rename_moves_url(self):
        repository = ChannelURLRepository()
        asyncio.run(repository.add(TEAM_URL, "old"))

        asyncio.run(repository.rename(TEAM_URL, old_url="old", new_url="new"))

        assert asyncio.run(repository.exists(TEAM_URL, "new")) is True
        assert asyncio.run(repository.exists(TEAM_URL, "old")) is False

    def test_rename_to_same_url_is_noop(self):
        repository = ChannelURLRepository()
        asyncio.run(repository.add(TEAM_URL, "same"))

        asyncio.run(repository.rename(TEAM_URL, old_url="same", new_url="same"))

        assert asyncio.run(repository.exists(TEAM_URL, "same")) is True

    def test_taken_url(self):
        repository = ChannelURLRepository()
        asyncio.run(repository.add(TEAM_URL, "taken"))

        with pytest.raises(ChannelURLTakenError) as exc_info:
            asyncio.run(repository.rename(TEAM_URL, old_url="mine", new_url="taken"))

        assert exc_info.value.status_code == 409
        assert exc_info.value.url == "taken"

    def test_urls_are_scoped_by_team(self):
        repository = ChannelURLRepository()
        asyncio.run(repository.add(TEAM_URL, "general"))

        asyncio.run(repository.rename("https://chat.example.com/other", old_url="", new_url="general"))

        assert asyncio.run(repository.exists("https://chat.example.com/other", "general")) is True


class TestChannelURLService:
    def test_normalize_validate_shorten(self, service):
        assert service.normalize(" Town Square ").url == "townsquare"
        assert service.validate("validslug").is_valid
        assert service.validate("a").rules == [SlugRule.TOO_SHORT]
        assert service.shorten("https://chat.io/team").short_url == "https://chat.io/team/"

    def test_open_and_get_dialog(self, service):
        dialog = open_dialog(service)

        fetched = asyncio.run(service.get_dialog(dialog.dialog_id))

        assert fetched == dialog
        assert asyncio.run(service.count_dialogs()) == 1

    def test_unknown_dialog(self, service):
        with pytest.raises(ChangeURLDialogNotFoundError):
            asyncio.run(service.get_dialog("missing"))

    def test_submit_valid_closes_dialog(self, service, channel_repository):
        dialog = open_dialog(service)
        asyncio.run(service.change_url(dialog.dialog_id, "New-Name"))

        submit = asyncio.run(service.submit(dialog.dialog_id))

        assert submit.submitted is True
        assert submit.result.url == "new-name"
        assert asyncio.run(channel_repository.exists(TEAM_URL, "new-name")) is True
        assert asyncio.run(service.count_dialogs()) == 0

    def test_submit_invalid_keeps_dialog(self, service):
        dialog = open_dialog(service)
        asyncio.run(service.change_url(dialog.dialog_id, "ab__cd"))

        submit = asyncio.run(service.submit(dialog.dialog_id))

        assert submit.submitted is False
        assert submit.result.rules == [SlugRule.NO_DOUBLE_UNDERSCORE]
        assert submit.dialog.has_error is True

        stored = asyncio.run(service.get_dialog(dialog.dialog_id))
        assert stored.current_url == "ab__cd"
        assert stored.user_edit is True

    def test_submit_taken_url_sets_server_error(self, service, channel_repository):
        asyncio.run(channel_repository.add(TEAM_URL, "general"))
        dialog = open_dialog(service)

        submit = asyncio.run(service.submit(dialog.dialog_id, url="general"))

        assert submit.submitted is False
        assert submit.result.is_valid
        assert submit.dialog.server_error == "A channel with that URL already exists."
        assert submit.dialog.error == ["A channel with that URL already exists."]
        assert asyncio.run(service.count_dialogs()) == 1

    def test_taken_url_stays_as_draft(self, service, channel_repository):
        asyncio.run(channel_repository.add(TEAM_URL, "general"))
        dialog = open_dialog(service)
        asyncio.run(service.change_url(dialog.dialog_id, "general"))
        asyncio.run(service.submit(dialog.dialog_id))

        updated = asyncio.run(service.update_props(dialog.dialog_id, {"current_url": "town-square"}))

        assert updated.user_edit is True
        assert updated.current_url == "general"
        assert updated.server_error == "A channel with that URL already exists."

    def test_update_props_respects_user_edit(self, service):
        dialog = open_dialog(service)
        asyncio.run(service.change_url(dialog.dialog_id, "draft"))

        updated = asyncio.run(service.update_props(dialog.dialog_id, {"current_url": "external", "title": "Rename"}))

        assert updated.current_url == "draft"
        assert updated.title == "Rename"

    def test_cancel_closes_dialog(self, service):
        dialog = open_dialog(service)

        cancelled = asyncio.run(service.cancel(dialog.dialog_id))

        assert cancelled.user_edit is False
        with pytest.raises(ChangeURLDialogNotFoundError):
            asyncio.run(service.get_dialog(dialog.dialog_id))
