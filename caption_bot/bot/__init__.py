"""
Bot command handling module.

This module contains all Telegram bot command processing logic including:
- Command parsing
- Message templates
- Command handlers
- Command routing
"""

from caption_bot.bot.parser import parse_command
from caption_bot.bot.router import process_command, process_update

__all__ = ["parse_command", "process_command", "process_update"]
