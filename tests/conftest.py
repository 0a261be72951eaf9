from typing import Iterator

import pytest

from caption_bot.config.settings import Config
from caption_bot.services.telegram_client import TelegramResponder
from tests.fakes import FakeBot, FakeBotApiServer, FakeResponder


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def config() -> Config:
    return Config(TELEGRAM_BOT_TOKEN="123:abcDEF_ghij", TELEGRAM_SEND_TIMEOUT=3.0)


@pytest.fixture
def fake_responder() -> FakeResponder:
    return FakeResponder()


@pytest.fixture
def fake_bot() -> FakeBot:
    return FakeBot()


@pytest.fixture
def responder(config: Config, fake_bot: FakeBot) -> TelegramResponder:
    return TelegramResponder(config, bot=fake_bot)


@pytest.fixture
def bot_api() -> Iterator[FakeBotApiServer]:
    server = FakeBotApiServer()
    server.start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def wire_config(bot_api: FakeBotApiServer) -> Config:
    return Config(
        TELEGRAM_BOT_TOKEN="123456:SECRETTOKENvalue",
        TELEGRAM_API_BASE_URL=bot_api.base_url,
        TELEGRAM_SEND_TIMEOUT=3.0,
    )
