"""Tests for the Telegram bot handlers."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bot import main as bot_main


def _make_update(text: str) -> MagicMock:
    update = MagicMock()
    update.message.text = text
    update.message.reply_text = AsyncMock()
    update.message.reply_photo = AsyncMock()
    update.message.chat.send_action = AsyncMock()
    update.effective_user.id = 42
    update.effective_user.first_name = "Анна"
    return update


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bot_main, "send_typing_action", AsyncMock())


def test_guide_text_lists_numbers_and_lines() -> None:
    text = bot_main.format_guide_text()

    assert "<b>1 Лидер</b>" in text
    assert "<code>1590</code> Линия упорства" in text


def test_receive_date_sends_report_and_grid() -> None:
    update = _make_update("1981-12-07")

    asyncio.run(bot_main.receive_date(update, MagicMock()))

    update.message.reply_photo.assert_awaited_once()
    photo = update.message.reply_photo.await_args.kwargs["photo"]
    assert photo.startswith(b"\x89PNG")
    report = update.message.reply_text.await_args.args[0]
    assert "Мастер-число: 11" in report


def test_receive_date_rejects_invalid_input() -> None:
    update = _make_update("1981/12")

    asyncio.run(bot_main.receive_date(update, MagicMock()))

    update.message.reply_photo.assert_not_awaited()
    assert "Неверный формат даты" in update.message.reply_text.await_args.args[0]


def test_start_greets_user() -> None:
    update = _make_update("/start")

    asyncio.run(bot_main.start(update, MagicMock()))

    assert "Анна" in update.message.reply_text.await_args.args[0]


def test_main_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bot_main.settings, "telegram_bot_token", None)

    with pytest.raises(RuntimeError):
        bot_main.main()
