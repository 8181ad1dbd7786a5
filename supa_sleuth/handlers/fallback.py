"""Fallback handler for anything that isn't a known command."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from ..dispatcher import fallback_reply


logger = logging.getLogger(__name__)


async def fallback_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Point the user back at the command menu.

    Args:
        update: Telegram update object
        context: Bot context
    """
    message = update.effective_message
    if message is None:
        return

    chat_id = update.effective_chat.id if update.effective_chat else None
    logger.info(
        f"Received non-command text from chat ID {chat_id}: {message.text}"
    )

    reply = fallback_reply()
    await message.reply_text(reply.text, parse_mode=reply.parse_mode)
