"""Supa Sleuth Link Helper Bot - Main Application Entry Point."""

import logging
import sys

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from .commands import command_names, telegram_commands
from .config import Settings, settings
from .handlers import error_handler, fallback_message, link_command


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
)
# httpx logs every getUpdates poll at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

# New messages and channel posts; edits are not answered
INBOUND_MESSAGES = filters.UpdateType.MESSAGE | filters.UpdateType.CHANNEL_POST


async def publish_commands(application: Application) -> None:
    """
    Publish the command menu shown by Telegram clients.

    A failure here is logged and the bot keeps running without
    an updated menu.

    Args:
        application: Initialized application
    """
    try:
        await application.bot.set_my_commands(telegram_commands())
    except TelegramError as e:
        logger.error(f"Failed to set bot commands: {e.message}")
        return

    logger.info("Bot commands menu updated successfully.")


class BotApplication:
    """Main bot application class."""

    def __init__(self, config: Settings | None = None) -> None:
        """
        Initialize bot application.

        Args:
            config: Settings to use, defaults to the environment-loaded settings
        """
        self.settings = config or settings

    def create_application(self) -> Application:
        """
        Create and configure the Telegram application.

        Returns:
            Configured Application instance

        Raises:
            ValueError: If the bot token is not configured
        """
        if not self.settings.bot_token:
            raise ValueError(
                "BOT_TOKEN not set. Please set the environment variable "
                "or add it to a .env file."
            )

        app = (
            Application.builder()
            .token(self.settings.bot_token)
            .post_init(publish_commands)
            .build()
        )

        # One handler for every menu command, routed through the dispatcher
        app.add_handler(
            CommandHandler(command_names(), link_command, filters=INBOUND_MESSAGES)
        )

        # Plain text and unregistered commands
        app.add_handler(
            MessageHandler(INBOUND_MESSAGES & filters.TEXT, fallback_message)
        )

        app.add_error_handler(error_handler)

        return app

    def run(self) -> None:
        """Run the bot until SIGINT or SIGTERM."""
        app = self.create_application()

        logger.info("Starting bot...")

        # run_polling installs the stop signal handlers and shuts down cleanly
        app.run_polling(
            allowed_updates=Update.ALL_TYPES,
            drop_pending_updates=self.settings.drop_pending_updates,
        )

        logger.info("Bot stopped.")


def main() -> None:
    """Main entry point."""
    bot = BotApplication()

    if not bot.settings.bot_token:
        logger.error(
            "Error: BOT_TOKEN not set. Please set the environment variable "
            "or add it to a .env file."
        )
        sys.exit(1)

    try:
        bot.run()
    except Exception as e:
        logger.error(f"Failed to start bot: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
