"""
Configuration module.

This module provides configuration management for the application.
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from caption_bot.config.settings import Config

# Read once per container; passed explicitly to the services that need it
config = Config.from_env()

__all__ = ["Config", "config"]
