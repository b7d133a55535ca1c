"""TAssist Telegram Bot.

Every text message is run as a TAssist command and the bot replies with the
feedback and the listed persons.
"""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from .config import Config, load_config
from .core.commands import CommandResult, help_text
from .core.exceptions import TAssistError
from .logic import LogicManager, format_person_list, get_store, load_model

logger = logging.getLogger(__name__)

# Telegram rejects messages longer than 4096 characters
MAX_MESSAGE_LENGTH = 4000


class AuthFilter(filters.MessageFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def filter(self, message) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = message.from_user
        if user is None:
            return False
        return user.id in self.allowed_users


def build_reply(logic: LogicManager, text: str) -> str:
    """Execute text and build the reply message."""
    try:
        result: CommandResult = logic.execute(text)
    except TAssistError as e:
        return str(e)

    if result.show_help:
        return f"{result.feedback}\n\n{help_text()}"
    if result.exit:
        return "There is nothing to exit here. Just stop sending messages."

    persons = logic.get_filtered_person_list()
    listing = format_person_list(persons) if persons else "No persons to show."
    return f"{result.feedback}\n\n{listing}"


def split_message(text: str) -> list[str]:
    return [text[i : i + MAX_MESSAGE_LENGTH] for i in range(0, len(text), MAX_MESSAGE_LENGTH)]


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start and /help."""
    message = update.effective_message
    if message is None:
        return
    await message.reply_text(
        "Send any TAssist command as a message, e.g. 'list' or 'delete 2'.\n\n" + help_text()
    )


def make_command_handler(logic: LogicManager):
    """Create the handler that runs a plain text message as a TAssist command."""

    async def command_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        message = update.effective_message
        if message is None or message.text is None:
            logger.debug(f"Ignoring update {update.update_id} without message text")
            return
        reply = build_reply(logic, message.text)
        for chunk in split_message(reply):
            await message.reply_text(chunk)

    return command_handler


async def unauthorized_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user = update.effective_user
    if user is not None:
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
    message = update.effective_message
    if message is None:
        return
    await message.reply_text(
        "Unauthorized. This bot is private.\n"
        "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in tassist.conf"
    )


def create_application(config: Config | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to tassist.conf"
        )

    store = get_store(config)
    logic = LogicManager(load_model(store), store)

    app = Application.builder().token(config.telegram_bot_token).build()
    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", help_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(
        MessageHandler(
            filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND & auth_filter,
            make_command_handler(logic),
        )
    )

    # Add catch-all for unauthorized users if we have an allowlist
    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def run_bot(config: Config | None = None):
    """Run the Telegram bot."""
    if config is None:
        config = load_config()

    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting TAssist Telegram bot...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)
