"""Static Supa Pump link table."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Action(str, Enum):
    """Link-producing actions."""

    BUY = "buy"
    SCAN_BASE = "scan_base"
    SAVE = "save"
    SEEK = "seek"
    SECRET = "secret"
    STAKE = "stake"
    REGISTER = "register"


@dataclass(frozen=True)
class LinkEntry:
    """Destination URL for a single action."""

    action: Action
    url: str


_ENTRIES = (
    LinkEntry(Action.BUY, "https://swap.supapump.fun/"),
    LinkEntry(Action.SCAN_BASE, "https://scan.supapump.fun/token/"),
    LinkEntry(Action.SAVE, "https://save.supapump.fun/"),
    LinkEntry(Action.SEEK, "https://seek.supapump.fun/"),
    LinkEntry(Action.SECRET, "https://secret.supapump.fun/"),
    LinkEntry(Action.STAKE, "https://stake.smithii.io/supa"),
    LinkEntry(Action.REGISTER, "https://www.sns.id/sub-registrar/supapump"),
)

LINKS: MappingProxyType[Action, LinkEntry] = MappingProxyType(
    {entry.action: entry for entry in _ENTRIES}
)


def link_for(action: Action) -> str:
    """
    Look up the URL for an action.

    Args:
        action: Action to resolve

    Returns:
        Destination URL. For SCAN_BASE this is a prefix that still
        needs the token address appended.
    """
    return LINKS[action].url
