"""
Services layer.

This module contains the outbound Telegram client used to deliver replies.
"""

from caption_bot.services.telegram_client import TelegramResponder

__all__ = ["TelegramResponder"]
