"""
Telegram bot client service.

This module provides functionality for sending messages via Telegram bot API.
"""

import logging
from typing import Any, Dict, List, Optional

from telegram import Bot
from telegram.error import TelegramError
from telegram.request import HTTPXRequest

from caption_bot.config.settings import Config
from caption_bot.models.update import ChatId, OutboundReply, SendOptions

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, and Bot API URLs contain the token
logging.getLogger("httpx").setLevel(logging.WARNING)


class TelegramResponder:
    """
    Sends bot replies through the Bot API ``sendMessage`` method.

    Use as an async context manager so the HTTP clients it opens are closed
    within the event loop that used them.
    """

    def __init__(self, config: Config, bot: Optional[Bot] = None):
        """
        Initialize the responder.

        Args:
            config: Immutable bot configuration (token, API base URL, timeout)
            bot: Pre-built Bot instance; created lazily from config when omitted.
                An injected bot is not closed by this responder.
        """
        self.config = config
        self._bot = bot
        self._requests: List[HTTPXRequest] = []

    @property
    def bot(self) -> Bot:
        if self._bot is None:
            self.config.validate()
            timeout = self.config.TELEGRAM_SEND_TIMEOUT
            self._requests = [
                HTTPXRequest(connect_timeout=timeout, read_timeout=timeout, write_timeout=timeout),
                HTTPXRequest(),
            ]
            self._bot = Bot(
                token=self.config.TELEGRAM_BOT_TOKEN,
                base_url=self.config.TELEGRAM_API_BASE_URL,
                request=self._requests[0],
                get_updates_request=self._requests[1],
            )
        return self._bot

    async def aclose(self) -> None:
        """Close the HTTP clients opened for the lazily built bot."""
        requests, self._requests = self._requests, []
        for request in requests:
            await request.shutdown()

    async def __aenter__(self) -> "TelegramResponder":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def send_message(
        self,
        chat_id: ChatId,
        text: str,
        options: Optional[SendOptions] = None,
    ) -> Dict[str, Any]:
        """
        Send a message to a chat via Telegram bot.

        Args:
            chat_id: Telegram chat ID to send message to
            text: Message text to send
            options: Optional send fields; ``options.extra`` is merged last

        Returns:
            The sent message as a Bot API JSON object

        Raises:
            TelegramError: On network failure, timeout or a Bot API error
        """
        reply = OutboundReply(chat_id=chat_id, text=text, options=options or SendOptions())
        return await self.send(reply)

    async def send(self, reply: OutboundReply) -> Dict[str, Any]:
        """
        Send a prepared reply. See ``send_message``.

        Optional fields go on the wire exactly as ``SendOptions.to_payload``
        builds them, passed through ``api_kwargs``.
        """
        timeout = self.config.TELEGRAM_SEND_TIMEOUT
        try:
            message = await self.bot.send_message(
                chat_id=reply.chat_id,
                text=reply.text,
                read_timeout=timeout,
                write_timeout=timeout,
                connect_timeout=timeout,
                api_kwargs=reply.options.to_payload(),
            )
        except TelegramError as e:
            logger.error(f"Telegram error sending message to chat {reply.chat_id}: {e}")
            raise

        logger.info(f"Successfully sent message to chat {reply.chat_id}")
        return message.to_dict()
