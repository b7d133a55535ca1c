"""Tests for the Telegram front-end helpers."""

import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import Chat, Message, Update, User
from telegram.ext import MessageHandler

from tassist.config import Config
from tassist.core.model import ModelManager
from tassist.logic import LogicManager
from tassist.telegram_bot import (
    MAX_MESSAGE_LENGTH,
    AuthFilter,
    build_reply,
    create_application,
    help_handler,
    make_command_handler,
    split_message,
    unauthorized_handler,
)


class TestAuthFilter:
    def test_open_when_no_users_configured(self):
        assert AuthFilter([]).filter(MagicMock()) is True

    def test_allows_listed_user(self):
        message = MagicMock()
        message.from_user.id = 42
        assert AuthFilter([42]).filter(message) is True

    def test_rejects_other_user(self):
        message = MagicMock()
        message.from_user.id = 7
        assert AuthFilter([42]).filter(message) is False

    def test_rejects_anonymous(self):
        message = MagicMock()
        message.from_user = None
        assert AuthFilter([42]).filter(message) is False


class TestBuildReply:
    def test_feedback_and_listing(self, model):
        reply = build_reply(LogicManager(model), "find bob")
        assert reply.startswith("1 persons listed!\n\n1. Bob Choo;")

    def test_error_message(self):
        assert build_reply(LogicManager(ModelManager()), "oops") == "Unknown command"

    def test_empty_list(self):
        reply = build_reply(LogicManager(ModelManager()), "list")
        assert reply == "Listed all persons\n\nNo persons to show."

    def test_help(self):
        reply = build_reply(LogicManager(ModelManager()), "help")
        assert "delete: Deletes the person" in reply


class TestSplitMessage:
    def test_short(self):
        assert split_message("hi") == ["hi"]

    def test_long(self):
        chunks = split_message("x" * (MAX_MESSAGE_LENGTH + 1))
        assert [len(c) for c in chunks] == [MAX_MESSAGE_LENGTH, 1]


class TestCreateApplication:
    def test_requires_token(self):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN not configured"):
            create_application(Config(telegram_bot_token=""))

    def test_only_new_messages_run_commands(self, tmp_path):
        config = Config(telegram_bot_token="123:abc", data_file=str(tmp_path / "addressbook.json"))
        app = create_application(config)
        handler = next(h for h in app.handlers[0] if isinstance(h, MessageHandler))
        message = Message(
            message_id=1,
            date=datetime.now(timezone.utc),
            chat=Chat(id=1, type="private"),
            from_user=User(id=1, first_name="Amy", is_bot=False),
            text="list",
        )
        assert handler.check_update(Update(update_id=1, message=message))
        assert not handler.check_update(Update(update_id=2, edited_message=message))


def make_update(text="list", edited=False):
    update = MagicMock()
    message = MagicMock()
    message.text = text
    message.reply_text = AsyncMock()
    update.effective_message = message
    # Edited messages arrive with update.message unset
    update.message = None if edited else message
    return update


class TestCommandHandler:
    def test_replies_with_result(self, model):
        update = make_update("find bob")
        asyncio.run(make_command_handler(LogicManager(model))(update, MagicMock()))
        reply = update.effective_message.reply_text.await_args.args[0]
        assert reply.startswith("1 persons listed!")

    def test_edited_message_uses_effective_message(self, model):
        update = make_update("list", edited=True)
        asyncio.run(make_command_handler(LogicManager(model))(update, MagicMock()))
        update.effective_message.reply_text.assert_awaited_once()

    def test_no_message_is_ignored(self):
        update = MagicMock()
        update.effective_message = None
        update.message = None
        logic = MagicMock()
        asyncio.run(make_command_handler(logic)(update, MagicMock()))
        logic.execute.assert_not_called()

    def test_long_reply_is_split(self):
        logic = MagicMock()
        logic.execute.return_value.show_help = False
        logic.execute.return_value.exit = False
        logic.execute.return_value.feedback = "x" * (MAX_MESSAGE_LENGTH + 10)
        logic.get_filtered_person_list.return_value = []
        update = make_update("list")
        asyncio.run(make_command_handler(logic)(update, MagicMock()))
        assert update.effective_message.reply_text.await_count == 2


class TestHelpAndUnauthorizedHandlers:
    def test_help_on_edited_message(self):
        update = make_update("/help", edited=True)
        asyncio.run(help_handler(update, MagicMock()))
        assert "Send any TAssist command" in update.effective_message.reply_text.await_args.args[0]

    def test_unauthorized_without_message(self):
        update = MagicMock()
        update.effective_message = None
        asyncio.run(unauthorized_handler(update, MagicMock()))

    def test_unauthorized_reply(self):
        update = make_update("list", edited=True)
        asyncio.run(unauthorized_handler(update, MagicMock()))
        assert "Unauthorized" in update.effective_message.reply_text.await_args.args[0]
