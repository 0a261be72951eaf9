"""
API Gateway proxy response helpers.
"""

import json
from typing import Any, Dict


def json_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Build a JSON proxy response."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json"
        },
        "body": json.dumps(payload),
    }


def html_response(status_code: int, html: str) -> Dict[str, Any]:
    """Build an HTML proxy response."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "text/html; charset=utf-8"
        },
        "body": html,
    }
