"""
Request dispatching for API Gateway events.

This module routes inbound HTTP requests to webhook processing, the health
check, the API stub or the static page.
"""

import asyncio
import base64
import json
import logging
import time
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Tuple

from caption_bot.bot.router import process_update
from caption_bot.config.settings import Config
from caption_bot.models.update import Update
from caption_bot.services.telegram_client import TelegramResponder
from caption_bot.web.pages import INDEX_HTML
from caption_bot.web.responses import html_response, json_response

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook"
HEALTH_PATHS = ("/health", "/api/health")
API_PREFIX = "/api/"

ResponderFactory = Callable[[], TelegramResponder]

# Container start, reported as uptime by the health check
_STARTED_AT = time.monotonic()


def is_api_gateway_event(event: Dict[str, Any]) -> bool:
    """
    Check if the event is from API Gateway.

    Args:
        event: Lambda event object

    Returns:
        True if event is from API Gateway, False otherwise
    """
    return (
        "httpMethod" in event or
        "requestContext" in event or
        "rawPath" in event or
        ("path" in event and "body" in event)
    )


def _request_line(event: Dict[str, Any]) -> Tuple[str, str]:
    """Extract (method, path) from a REST (v1) or HTTP API (v2) event."""
    context = event.get("requestContext") or {}
    path = event.get("path") or context.get("path") or event.get("rawPath") or "/"
    method = event.get("httpMethod") or (context.get("http") or {}).get("method") or "GET"
    return method.upper(), path


def _decode_body(event: Dict[str, Any]) -> Any:
    """
    Decode the webhook body.

    API Gateway sends the body as a JSON string at top level; custom setups
    may put it under requestContext.body or pass it already decoded.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    body = event.get("body")
    if body is None:
        body = (event.get("requestContext") or {}).get("body", "")
    if isinstance(body, str):
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        return json.loads(body)
    return body


def format_uptime(seconds: float) -> str:
    """Format elapsed seconds as H:MM:SS."""
    return str(timedelta(seconds=int(seconds)))


def handle_health(config: Config) -> Dict[str, Any]:
    """Build the health check response."""
    return json_response(200, {
        "status": "ok",
        "bot_running": True,
        "bot_status": config.BOT_STATUS,
        "uptime": format_uptime(time.monotonic() - _STARTED_AT),
    })


def handle_api_request(path: str) -> Dict[str, Any]:
    """API namespace stub. No endpoints are defined."""
    logger.info(f"API request to {path} is not implemented")
    return json_response(404, {"error": "Not implemented"})


async def _process_webhook(update: Update, responder_factory: ResponderFactory) -> Optional[Dict[str, Any]]:
    # The responder is built inside the running loop so its HTTP client
    # belongs to this invocation only, and is closed before the loop is
    async with responder_factory() as responder:
        return await process_update(update, responder)


def handle_webhook_update(event: Dict[str, Any], responder_factory: ResponderFactory) -> Dict[str, Any]:
    """
    Handle webhook update from API Gateway.

    Args:
        event: API Gateway event object
        responder_factory: Builds the client used to send the reply

    Returns:
        API Gateway response dictionary
    """
    try:
        update = Update.from_dict(_decode_body(event))
        asyncio.run(_process_webhook(update, responder_factory))
        return json_response(200, {"status": "ok"})

    except Exception as e:
        logger.exception(f"Error handling webhook update: {e}")
        return json_response(500, {"status": "error", "message": str(e) or type(e).__name__})


def dispatch(event: Dict[str, Any], config: Config, responder_factory: ResponderFactory) -> Dict[str, Any]:
    """
    Route an API Gateway event by path and method.

    Args:
        event: API Gateway event object
        config: Bot configuration
        responder_factory: Builds the client used to send webhook replies

    Returns:
        API Gateway response dictionary
    """
    method, path = _request_line(event)
    logger.info(f"{method} {path}")

    if path == WEBHOOK_PATH and method == "POST":
        return handle_webhook_update(event, responder_factory)

    if path in HEALTH_PATHS:
        return handle_health(config)

    if path.startswith(API_PREFIX):
        return handle_api_request(path)

    return html_response(200, INDEX_HTML)
