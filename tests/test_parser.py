import pytest

from caption_bot.bot.parser import parse_command
from caption_bot.models.update import Command


@pytest.mark.parametrize("text", ["", "hello", "all", "help", " /start", "start/"])
def test_non_slash_text_is_not_a_command(text: str) -> None:
    assert parse_command(text) is None


def test_command_without_args() -> None:
    assert parse_command("/help") == Command(name="help", args="")


def test_command_with_args() -> None:
    assert parse_command("/set_caption Hello {file_name}") == Command(
        name="set_caption", args="Hello {file_name}"
    )


def test_args_are_not_trimmed() -> None:
    command = parse_command("/set_caption  padded ")
    assert command == Command(name="set_caption", args=" padded ")


def test_name_keeps_case() -> None:
    assert parse_command("/Start").name == "Start"


def test_bare_slash_has_empty_name() -> None:
    assert parse_command("/") == Command(name="", args="")


def test_name_ends_at_any_whitespace() -> None:
    assert parse_command("/set_caption\nline two") == Command(
        name="set_caption", args="line two"
    )
