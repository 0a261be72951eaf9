import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs

from caption_bot.models.update import ChatId, SendOptions


class FakeResponder:
    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    async def send_message(
        self, chat_id: ChatId, text: str, options: Optional[SendOptions] = None
    ) -> Dict[str, Any]:
        self.calls.append({"chat_id": chat_id, "text": text, "options": options})
        return {"message_id": len(self.calls), "chat": {"id": chat_id}, "text": text}


class _FakeMessage:
    def __init__(self, data: Dict[str, Any]) -> None:
        self._data = data

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)


class FakeBot:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.error = error

    async def send_message(self, **kwargs: Any) -> _FakeMessage:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return _FakeMessage(
            {"message_id": 1, "chat": {"id": kwargs["chat_id"]}, "text": kwargs["text"]}
        )


def make_update(text: Optional[str] = None, chat_id: ChatId = 42) -> Dict[str, Any]:
    message: Dict[str, Any] = {"message_id": 7, "chat": {"id": chat_id, "type": "private"}}
    if text is not None:
        message["text"] = text
    return {"update_id": 1001, "message": message}


class _BotApiHandler(BaseHTTPRequestHandler):
    server: "FakeBotApiServer"

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        raw = self.rfile.read(length).decode("utf-8")
        fields = {key: values[0] for key, values in parse_qs(raw).items()}
        self.server.requests.append({"path": self.path, "fields": fields})

        chat_id: Any = fields.get("chat_id", "0")
        if chat_id.lstrip("-").isdigit():
            chat_id = int(chat_id)
        result = {
            "message_id": len(self.server.requests),
            "date": 1700000000,
            "chat": {"id": chat_id, "type": "private"},
            "text": fields.get("text", ""),
        }
        body = json.dumps({"ok": True, "result": result}).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


class FakeBotApiServer(ThreadingHTTPServer):
    """Local stand-in for the Bot API that answers every method with a message."""

    daemon_threads = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _BotApiHandler)
        self.requests: List[Dict[str, Any]] = []
        self._thread = threading.Thread(target=self.serve_forever, daemon=True)

    @property
    def base_url(self) -> str:
        return f"http://127.0.0.1:{self.server_address[1]}/bot"

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self.shutdown()
        self.server_close()
        self._thread.join(timeout=5)
