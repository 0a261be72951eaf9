import dataclasses

import pytest

from caption_bot.config.settings import Config


def test_from_env_reads_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:secret")
    monkeypatch.setenv("TELEGRAM_SEND_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("BOT_STATUS", raising=False)
    monkeypatch.delenv("TELEGRAM_API_BASE_URL", raising=False)

    cfg = Config.from_env()

    assert cfg.TELEGRAM_BOT_TOKEN == "123:secret"
    assert cfg.TELEGRAM_SEND_TIMEOUT == 2.5
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.BOT_STATUS == "Running on AWS Lambda"
    assert cfg.TELEGRAM_API_BASE_URL == "https://api.telegram.org/bot"


def test_blank_timeout_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_SEND_TIMEOUT", " ")
    assert Config.from_env().TELEGRAM_SEND_TIMEOUT == 5.0


def test_bad_timeout_is_reported_by_validate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:secret")
    monkeypatch.setenv("TELEGRAM_SEND_TIMEOUT", "soon")

    cfg = Config.from_env()

    assert cfg.TELEGRAM_SEND_TIMEOUT == 5.0
    with pytest.raises(ValueError, match="TELEGRAM_SEND_TIMEOUT must be a number"):
        cfg.validate()


@pytest.mark.parametrize("timeout", [0.0, -1.0, float("nan")])
def test_non_positive_timeout_is_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match="TELEGRAM_SEND_TIMEOUT must be positive"):
        Config(TELEGRAM_BOT_TOKEN="x", TELEGRAM_SEND_TIMEOUT=timeout).validate()


def test_validate_names_missing_token() -> None:
    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        Config().validate()
    assert Config(TELEGRAM_BOT_TOKEN="x").validate() is True


def test_repr_masks_token() -> None:
    cfg = Config(TELEGRAM_BOT_TOKEN="123:secret")
    assert "secret" not in repr(cfg)
    assert "secret" not in str(cfg)


def test_config_is_immutable() -> None:
    cfg = Config(TELEGRAM_BOT_TOKEN="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.TELEGRAM_BOT_TOKEN = "y"
