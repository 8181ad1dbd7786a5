"""Command handler bridging Telegram updates and the dispatcher."""

import logging

from telegram import Message, Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from ..commands import Command
from ..dispatcher import Reply, dispatch


logger = logging.getLogger(__name__)


async def safe_reply(message: Message, reply: Reply) -> None:
    """
    Safely send a reply, falling back to plain text if Markdown parsing fails.

    Args:
        message: Telegram message object
        reply: Reply payload to send
    """
    try:
        await message.reply_text(reply.text, parse_mode=reply.parse_mode)
    except BadRequest as e:
        if reply.parse_mode and "can't parse entities" in str(e).lower():
            logger.warning(f"Markdown parsing failed, sending as plain text: {e}")
            await message.reply_text(reply.text)
        else:
            raise


def command_argument(text: str | None) -> str | None:
    """
    Extract the text that follows a slash command.

    Inner spacing is kept so rejected input can be echoed verbatim.

    Args:
        text: Full message text, e.g. "/scan@SupaBot  abc"

    Returns:
        Stripped argument text, or None if there is none
    """
    if not text:
        return None

    parts = text.strip().split(maxsplit=1)
    if len(parts) < 2:
        return None

    return parts[1].strip() or None


def command_name(text: str) -> str:
    """Return the bare command name from "/name@bot args" text."""
    first = text.strip().split(maxsplit=1)[0]
    return first.lstrip("/").split("@", 1)[0].lower()


async def link_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle every bot command through the dispatcher.

    Args:
        update: Telegram update object
        context: Bot context
    """
    message = update.effective_message
    if message is None or not message.text:
        return

    name = command_name(message.text)
    command = Command.from_name(name)
    if command is None:
        # CommandHandler only routes known names here
        logger.warning(f"Ignoring unregistered command /{name}")
        return

    argument = command_argument(message.text)
    chat_id = update.effective_chat.id if update.effective_chat else None

    if command is Command.SCAN:
        logger.info(f'Received /scan (match: "{argument or ""}") from chat ID: {chat_id}')
    else:
        logger.info(f"Received /{name} from chat ID: {chat_id}")

    await safe_reply(message, dispatch(command, argument))
