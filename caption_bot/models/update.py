"""
Telegram update data models.

This module contains data models for inbound webhook updates, parsed
commands and outbound replies.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

ChatId = Union[int, str]


class InvalidUpdateError(ValueError):
    """Raised when a webhook payload does not have the shape of a Telegram update."""


@dataclass(frozen=True)
class Message:
    """Model for the part of a Telegram message the bot reads."""
    chat_id: ChatId
    text: str = ""
    message_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Message":
        """
        Build a message from the ``message`` object of an update.

        Args:
            data: Decoded ``message`` JSON object

        Returns:
            Message instance

        Raises:
            InvalidUpdateError: If the message or its chat is malformed
        """
        if not isinstance(data, dict):
            raise InvalidUpdateError("Update message must be a JSON object")

        chat = data.get("chat")
        if not isinstance(chat, dict) or chat.get("id") is None:
            raise InvalidUpdateError("Message does not contain chat.id")

        text = data.get("text")
        return cls(
            chat_id=chat["id"],
            text=text if isinstance(text, str) else "",
            message_id=data.get("message_id"),
        )


@dataclass(frozen=True)
class Update:
    """Model for a single webhook update."""
    update_id: Optional[int] = None
    message: Optional[Message] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Update":
        """
        Build an update from the decoded webhook body.

        Only the ``message`` field is interpreted; other update kinds leave
        ``message`` as None.

        Raises:
            InvalidUpdateError: If the payload is not a JSON object or its
                message is malformed
        """
        if not isinstance(data, dict):
            raise InvalidUpdateError("Update must be a JSON object")

        raw_message = data.get("message")
        message = Message.from_dict(raw_message) if raw_message is not None else None
        return cls(update_id=data.get("update_id"), message=message)


@dataclass(frozen=True)
class Command:
    """Model for a slash command parsed from message text."""
    name: str
    args: str = ""


@dataclass(frozen=True)
class SendOptions:
    """
    Optional ``sendMessage`` fields.

    Named fields override the defaults. ``extra`` is merged last, verbatim,
    and wins on any key collision, ``parse_mode`` included.
    """
    parse_mode: Optional[str] = "HTML"
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    disable_web_page_preview: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Return the optional fields as they go on the wire, extra last."""
        payload: Dict[str, Any] = {}
        if self.parse_mode is not None:
            payload["parse_mode"] = self.parse_mode
        if self.disable_notification is not None:
            payload["disable_notification"] = self.disable_notification
        if self.protect_content is not None:
            payload["protect_content"] = self.protect_content
        if self.disable_web_page_preview is not None:
            payload["link_preview_options"] = {"is_disabled": self.disable_web_page_preview}
        if self.reply_to_message_id is not None:
            payload["reply_parameters"] = {"message_id": self.reply_to_message_id}
        payload.update(self.extra)
        return payload


@dataclass(frozen=True)
class OutboundReply:
    """Model for one reply sent back to a chat."""
    chat_id: ChatId
    text: str
    options: SendOptions = field(default_factory=SendOptions)
