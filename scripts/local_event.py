"""Invoke the Lambda handler locally with a sample Telegram update."""

import json
import sys

from aws_lambda import lambda_handler

text = sys.argv[1] if len(sys.argv) > 1 else "/start"

# Standard API Gateway Lambda proxy integration event structure
# Body is at top level as a JSON string
test_event = {
    "httpMethod": "POST",
    "path": "/webhook",
    "body": json.dumps({
        "update_id": 788190251,
        "message": {
            "message_id": 1333,
            "from": {
                "id": 87575599,
                "is_bot": False,
                "first_name": "N",
                "username": "captionfan",
                "language_code": "en"
            },
            "chat": {
                "id": 427988146,
                "first_name": "N",
                "username": "captionfan",
                "type": "private"
            },
            "date": 1633935457,
            "text": text,
        }
    }),
    "requestContext": {
        "path": "/webhook",
        "requestId": "test-request-id",
        "httpMethod": "POST"
    }
}

result = lambda_handler(test_event, {})
print(json.dumps(result, indent=2))
