"""
HTTP boundary for API Gateway events.
"""

from caption_bot.web.dispatcher import dispatch, handle_webhook_update, is_api_gateway_event

__all__ = ["dispatch", "handle_webhook_update", "is_api_gateway_event"]
