"""Tests for the command catalogue."""

from telegram import BotCommand

from supa_sleuth.commands import Command, command_names, telegram_commands


class TestCommandCatalogue:
    """Test suite for Command."""

    def test_command_names_in_menu_order(self):
        """Verify the nine commands are listed in menu order."""
        assert command_names() == [
            "start",
            "help",
            "buy",
            "scan",
            "save",
            "seek",
            "secret",
            "stake",
            "register",
        ]

    def test_from_name_resolves_known_commands(self):
        """Verify names resolve to their enum members."""
        assert Command.from_name("scan") is Command.SCAN
        assert Command.from_name("REGISTER") is Command.REGISTER
        assert Command.from_name(" help ") is Command.HELP

    def test_from_name_unknown_returns_none(self):
        """Verify unknown names resolve to None."""
        assert Command.from_name("foo") is None
        assert Command.from_name("") is None

    def test_telegram_commands(self):
        """Verify menu entries are Telegram BotCommand objects."""
        commands = telegram_commands()

        assert len(commands) == 9
        assert all(isinstance(c, BotCommand) for c in commands)
        assert commands[3].command == "scan"
        assert commands[3].description == "Scan token (needs address)"
