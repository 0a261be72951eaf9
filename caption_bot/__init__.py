"""Telegram caption bot served from AWS Lambda."""
