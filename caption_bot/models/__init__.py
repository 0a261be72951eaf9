"""
Data models for the application.

This module contains all data models used throughout the application.
"""

from caption_bot.models.update import (
    Command,
    InvalidUpdateError,
    Message,
    OutboundReply,
    SendOptions,
    Update,
)

__all__ = ["Command", "InvalidUpdateError", "Message", "OutboundReply", "SendOptions", "Update"]
