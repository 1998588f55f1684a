import json

import httpx
import pytest

from sensei.commands import AppState
from sensei.ollama import OllamaClient
from sensei.store import Store


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{(tmp_path / 'sensei.db').as_posix()}"


@pytest.fixture
def store(database_url):
    store = Store(database_url)
    store.initialize()
    yield store
    store.dispose()


class RecordingChatServer:
    """Stands in for the Ollama server; remembers every request body it receives."""

    def __init__(self, reply: str = "Nf3 develops a piece.") -> None:
        self.reply = reply
        self.requests: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        return httpx.Response(
            200,
            json={
                "model": self.requests[-1]["model"],
                "message": {"role": "assistant", "content": self.reply},
                "done": True,
            },
        )


@pytest.fixture
def chat_server():
    return RecordingChatServer()


@pytest.fixture
def chat_client(chat_server):
    return OllamaClient(
        base_url="http://ollama.test:11434",
        default_model="qwen2.5:14b",
        transport=httpx.MockTransport(chat_server),
    )


@pytest.fixture
def state(store, chat_client):
    return AppState(store, chat_client=chat_client)
