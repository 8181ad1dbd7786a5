"""Supa Sleuth Link Helper - Telegram bot for Supa Pump links."""

__version__ = "0.1.0"
