"""Bot command catalogue shared by dispatch and menu registration."""

from dataclasses import dataclass
from enum import Enum

from telegram import BotCommand


@dataclass(frozen=True)
class BotCommandInfo:
    """Menu entry for a single command."""

    command: str
    description: str


class Command(Enum):
    """Enum of bot commands (single source of truth)."""

    START = BotCommandInfo("start", "Show welcome")
    HELP = BotCommandInfo("help", "help message")
    BUY = BotCommandInfo("buy", "Get link to buy $SUPA")
    SCAN = BotCommandInfo("scan", "Scan token (needs address)")
    SAVE = BotCommandInfo("save", "Get Supa Save link")
    SEEK = BotCommandInfo("seek", "Get Supa Seek link")
    SECRET = BotCommandInfo("secret", "Get Supa Secret link")
    STAKE = BotCommandInfo("stake", "Get link to stake $SUPA")
    REGISTER = BotCommandInfo("register", "Get link to register .supa subdomain")

    @property
    def command_name(self) -> str:
        return self.value.command

    @classmethod
    def from_name(cls, name: str) -> "Command | None":
        """
        Resolve a command by its slash name.

        Args:
            name: Command name without the leading slash

        Returns:
            Matching Command, or None if the name is unknown
        """
        normalized = name.strip().lower()
        for entry in cls:
            if entry.value.command == normalized:
                return entry
        return None


def command_names() -> list[str]:
    """Return all command names in menu order."""
    return [entry.value.command for entry in Command]


def telegram_commands() -> list[BotCommand]:
    """Return commands formatted for Telegram's set_my_commands."""
    return [
        BotCommand(entry.value.command, entry.value.description)
        for entry in Command
    ]
