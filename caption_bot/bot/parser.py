"""
Command parsing utilities.

This module handles parsing of Telegram bot commands from message text.
"""

import re
from typing import Optional

from caption_bot.models.update import Command

_NAME_END = re.compile(r"\s")


def parse_command(message_text: str) -> Optional[Command]:
    """
    Parse command from message text.

    The command name runs from after the leading '/' to the first whitespace
    character. The argument string is everything after the name and one
    separator character, untrimmed. Names keep their case.

    Args:
        message_text: Message text from Telegram

    Returns:
        Command, or None if the text is not a command

    Examples:
        >>> parse_command("/help")
        Command(name='help', args='')
        >>> parse_command("/set_caption Hello {file_name}")
        Command(name='set_caption', args='Hello {file_name}')
        >>> parse_command("hello") is None
        True
    """
    if not message_text or not message_text.startswith("/"):
        return None

    match = _NAME_END.search(message_text, 1)
    name = message_text[1:match.start()] if match else message_text[1:]
    args = message_text[len(name) + 2:]

    return Command(name=name, args=args)
