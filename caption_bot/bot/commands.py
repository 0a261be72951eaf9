"""
Bot command handlers.

This module contains all individual command handler functions. Each handler
sends exactly one reply and returns the Bot API result of that send.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from caption_bot.bot.messages import (
    get_caption_set_message,
    get_fallback_message,
    get_help_message,
    get_process_all_message,
    get_set_caption_usage_message,
    get_unknown_command_message,
    get_welcome_message,
)
from caption_bot.models.update import ChatId

if TYPE_CHECKING:
    # Avoid importing the Telegram stack just for annotations
    from caption_bot.services.telegram_client import TelegramResponder

logger = logging.getLogger(__name__)


async def handle_start_command(chat_id: ChatId, args: str, responder: "TelegramResponder") -> Dict[str, Any]:
    """Handle /start command - welcome message."""
    return await responder.send_message(chat_id, get_welcome_message())


async def handle_help_command(chat_id: ChatId, args: str, responder: "TelegramResponder") -> Dict[str, Any]:
    """Handle /help command - show available commands."""
    return await responder.send_message(chat_id, get_help_message())


async def handle_set_caption_command(chat_id: ChatId, args: str, responder: "TelegramResponder") -> Dict[str, Any]:
    """
    Handle /set_caption command.

    Confirms the caption exactly as given. Nothing is stored.

    Args:
        chat_id: Telegram chat ID
        args: Caption text following the command, untrimmed
        responder: Client used to send the reply

    Returns:
        Bot API result of the reply
    """
    if not args.strip():
        return await responder.send_message(chat_id, get_set_caption_usage_message())

    logger.info(f"Caption requested for chat_id {chat_id}")
    return await responder.send_message(chat_id, get_caption_set_message(args))


async def handle_unknown_command(chat_id: ChatId, command: str, responder: "TelegramResponder") -> Dict[str, Any]:
    """
    Handle unknown commands.

    Args:
        chat_id: Telegram chat ID
        command: Unknown command name
        responder: Client used to send the reply
    """
    logger.info(f"Unknown command '{command}' from chat_id {chat_id}")
    return await responder.send_message(chat_id, get_unknown_command_message())


async def handle_process_all(chat_id: ChatId, responder: "TelegramResponder") -> Dict[str, Any]:
    """Handle the plain-text 'all' request - acknowledge batch processing."""
    return await responder.send_message(chat_id, get_process_all_message())


async def handle_plain_text(chat_id: ChatId, responder: "TelegramResponder") -> Dict[str, Any]:
    """Handle any other text message."""
    return await responder.send_message(chat_id, get_fallback_message())
