"""
Command routing logic.

This module handles routing of webhook updates and parsed commands to their
respective handlers.
"""

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from caption_bot.bot.commands import (
    handle_help_command,
    handle_plain_text,
    handle_process_all,
    handle_set_caption_command,
    handle_start_command,
    handle_unknown_command,
)
from caption_bot.bot.parser import parse_command
from caption_bot.models.update import ChatId, Update

if TYPE_CHECKING:
    from caption_bot.services.telegram_client import TelegramResponder

logger = logging.getLogger(__name__)

CommandHandler = Callable[[ChatId, str, "TelegramResponder"], Awaitable[Dict[str, Any]]]

# Names are matched case-sensitively
COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "start": handle_start_command,
    "help": handle_help_command,
    "set_caption": handle_set_caption_command,
}


async def process_command(
    chat_id: ChatId,
    message_text: str,
    responder: "TelegramResponder",
) -> Dict[str, Any]:
    """
    Route message text to the matching handler and send one reply.

    Slash commands go to their handler or the unknown-command reply. Other
    text equal to "all" in any case gets the batch acknowledgement, and
    everything else gets the fallback reply.

    Args:
        chat_id: Telegram chat ID
        message_text: Non-empty message text from user
        responder: Client used to send the reply

    Returns:
        Bot API result of the reply
    """
    command = parse_command(message_text)

    if command is not None:
        handler = COMMAND_HANDLERS.get(command.name)
        if handler is None:
            return await handle_unknown_command(chat_id, command.name, responder)
        logger.info(f"Routing /{command.name} from chat_id {chat_id}")
        return await handler(chat_id, command.args, responder)

    if message_text.lower() == "all":
        logger.info(f"Batch request from chat_id {chat_id}")
        return await handle_process_all(chat_id, responder)

    return await handle_plain_text(chat_id, responder)


async def process_update(update: Update, responder: "TelegramResponder") -> Optional[Dict[str, Any]]:
    """
    Process one webhook update.

    Args:
        update: Parsed webhook update
        responder: Client used to send the reply

    Returns:
        Bot API result of the reply, or None if the update was ignored
    """
    message = update.message
    if message is None:
        logger.warning(f"Update {update.update_id} does not contain a message, ignoring")
        return None

    if not message.text:
        logger.warning(f"No text in message from chat_id {message.chat_id}, ignoring")
        return None

    return await process_command(message.chat_id, message.text, responder)
