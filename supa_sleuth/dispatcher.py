"""Command dispatcher mapping parsed commands to reply payloads."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from telegram.constants import ParseMode

from .commands import Command
from .links import Action, link_for
from .validation import is_valid_address


class Formatting(Enum):
    """How Telegram should render a reply."""

    PLAIN_TEXT = "plain"
    RICH_TEXT = "rich"


@dataclass(frozen=True)
class Reply:
    """Outbound reply payload."""

    text: str
    formatting: Formatting = Formatting.PLAIN_TEXT

    @property
    def parse_mode(self) -> str | None:
        if self.formatting is Formatting.RICH_TEXT:
            return ParseMode.MARKDOWN
        return None


class UnknownCommandError(ValueError):
    """Raised when dispatch is asked for a command it doesn't know."""


HELP_TEXT = """🕵️ **Supa Sleuth Link Helper** 🕵️‍♀️

Use these commands to get quick links to Supa Pump tools:

**Trading & Earning:**
/buy - 🛒 Get $SUPA on SupaSwap
/stake - 💰 Stake your $SUPA tokens
/save - 🏦 Earn yield with Supa Save

**Exploring & Info:**
/scan <token address> - 🔍 Look up token details on SupaScan
/seek - 🧭 Explore transactions with Supa Seek

**Utilities:**
/secret - 🤫 Create encrypted memos with Supa Secret
/register - 🌐 Register your '.supa' subdomain

**Help:**
/help - ❓ Show this list of commands again

Happy sleuthing! ✨
"""

SCAN_USAGE = "Usage: `/scan <token_address>`"

FALLBACK_TEXT = "I only understand commands listed in the menu. Try /help"

APOLOGY_TEXT = "Sorry, something went wrong processing your request."

# Label shown above the link for each argument-free link command
LINK_LABELS: MappingProxyType[Command, tuple[str, Action]] = MappingProxyType({
    Command.BUY: ("🛒 **Buy $SUPA:**", Action.BUY),
    Command.SAVE: ("💰 **Supa Save (Earn Yield):**", Action.SAVE),
    Command.SEEK: ("🔎 **Supa Seek (Block Explorer):**", Action.SEEK),
    Command.SECRET: ("🤫 **Supa Secret (Encrypted Memos):**", Action.SECRET),
    Command.STAKE: ("🔒 **Stake $SUPA:**", Action.STAKE),
    Command.REGISTER: ("🏷️ **Register .supa Subdomain:**", Action.REGISTER),
})


def _scan_reply(argument: str | None) -> Reply:
    token_address = (argument or "").strip()

    if not token_address:
        return Reply(
            f"Please provide a token address after the command.\n\n{SCAN_USAGE}",
            Formatting.RICH_TEXT,
        )

    if not is_valid_address(token_address):
        return Reply(
            f"⚠️ That doesn't look like a valid Solana address: `{token_address}`\n"
            f"Please check and try again.\n\n{SCAN_USAGE}",
            Formatting.RICH_TEXT,
        )

    scan_url = f"{link_for(Action.SCAN_BASE)}{token_address}"
    return Reply(
        f"🔍 **SupaScan for {token_address}:**\n{scan_url}",
        Formatting.RICH_TEXT,
    )


def dispatch(name: str | Command, argument: str | None = None) -> Reply:
    """
    Build the reply for a bot command.

    Args:
        name: Command name without the leading slash, or a Command
        argument: Text following the command, if any

    Returns:
        Reply to send back to the chat

    Raises:
        UnknownCommandError: If the name is not one of the bot's commands
    """
    command = name if isinstance(name, Command) else Command.from_name(name)
    if command is None:
        raise UnknownCommandError(f"Unknown command: {name!r}")

    if command in (Command.START, Command.HELP):
        return Reply(HELP_TEXT, Formatting.RICH_TEXT)

    if command is Command.SCAN:
        return _scan_reply(argument)

    label, action = LINK_LABELS[command]
    return Reply(f"{label}\n{link_for(action)}", Formatting.RICH_TEXT)


def fallback_reply() -> Reply:
    """Reply for any message that isn't a known command."""
    return Reply(FALLBACK_TEXT)


def apology_reply() -> Reply:
    """Reply sent when handling an update failed."""
    return Reply(APOLOGY_TEXT)
