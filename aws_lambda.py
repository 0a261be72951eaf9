#!/usr/bin/env python3
"""
AWS Lambda entry point for the Telegram Caption Bot.

API Gateway (proxy integration) forwards every HTTP request here:
    - POST /webhook: Telegram update, answered via the Bot API
    - GET /health, GET /api/health: health check
    - /api/*: not implemented
    - anything else: static placeholder page

Required Environment Variables:
    - TELEGRAM_BOT_TOKEN: Telegram bot token

Optional Environment Variables:
    - TELEGRAM_API_BASE_URL: Bot API base URL (default: https://api.telegram.org/bot)
    - TELEGRAM_SEND_TIMEOUT: Timeout in seconds for sending a reply (default: 5)
    - BOT_STATUS: Status string reported by the health check
    - LOG_LEVEL: Logging level (default: INFO)
"""

import logging
import sys

from caption_bot.config import config
from caption_bot.services.telegram_client import TelegramResponder
from caption_bot.web.dispatcher import dispatch, is_api_gateway_event
from caption_bot.web.responses import json_response

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    stream=sys.stdout,
    force=True,
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def make_responder() -> TelegramResponder:
    return TelegramResponder(config)


def lambda_handler(event, context):
    try:
        if not isinstance(event, dict) or not is_api_gateway_event(event):
            logger.warning("Unsupported event type - expected an API Gateway request")
            return json_response(400, {"status": "error", "message": "Unsupported event"})

        return dispatch(event, config, make_responder)

    except Exception as e:
        logger.exception(f"Error in lambda_handler: {e}")
        return json_response(500, {"status": "error", "message": str(e) or type(e).__name__})
