"""
Message templates for bot responses.

This module contains all message templates used by the bot commands.
"""


def get_welcome_message() -> str:
    """Get welcome message for /start command."""
    return "Welcome to the Caption Bot! Use /help to see available commands."


def get_help_message() -> str:
    """Get help message for /help command."""
    return (
        "📚 <b>Command Reference</b>\n\n"
        "<b>Channel Commands:</b>\n"
        "• /set_caption - Set custom caption\n"
        "• /use_template - Apply a saved template\n"
        "• /delcaption - Reset to default caption\n"
        "• all - Update captions for all media\n\n"
        "<b>Template Commands:</b>\n"
        "• /save_template - Save a caption template\n"
        "• /templates - List all your saved templates\n"
        "• /view_template - View a specific template\n"
        "• /delete_template - Delete a template"
    )


def get_set_caption_usage_message() -> str:
    """Get usage prompt for /set_caption without a caption."""
    return "Please provide a caption text. Example: /set_caption Check out this {file_name}!"


def get_caption_set_message(caption: str) -> str:
    """Get confirmation message for /set_caption."""
    return f"Caption set to: {caption}"


def get_unknown_command_message() -> str:
    """Get message for unknown command."""
    return "Unknown command. Use /help to see available commands."


def get_process_all_message() -> str:
    """Get acknowledgement for the 'all' batch request."""
    return "Processing all media messages in the channel. This may take some time..."


def get_fallback_message() -> str:
    """Get reply for plain text that is not a command."""
    return "I can help you manage captions for your media. Use /help to see available commands."
