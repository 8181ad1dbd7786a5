"""Global error handler for update processing."""

import logging

from telegram import Update
from telegram.error import NetworkError, TelegramError
from telegram.ext import ContextTypes

from ..dispatcher import apology_reply


logger = logging.getLogger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Log a failed update and apologise to the affected chat.

    Errors never propagate from here, so one bad update doesn't stop
    the handling of the next ones.

    Args:
        update: Update that caused the error, if any
        context: Bot context carrying the raised error
    """
    error = context.error
    update_id = update.update_id if isinstance(update, Update) else None
    logger.error(f"Error while handling update {update_id}:")

    # NetworkError subclasses TelegramError, check it first
    if isinstance(error, NetworkError):
        logger.error(f"Could not contact Telegram: {error}", exc_info=error)
    elif isinstance(error, TelegramError):
        logger.error(f"Error in request: {error.message}", exc_info=error)
    else:
        logger.error(f"Unknown error: {error}", exc_info=error)

    if not isinstance(update, Update) or update.effective_message is None:
        return

    reply = apology_reply()
    try:
        await update.effective_message.reply_text(reply.text, parse_mode=reply.parse_mode)
    except Exception as e:
        logger.error(f"Failed to send error message to user: {e}")
