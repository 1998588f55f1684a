"""Client for the local Ollama chat endpoint."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from .config import settings
from .errors import DecodeError, NetworkError
from .schemas import ChatMessage, OllamaChatResponse

logger = logging.getLogger(__name__)

COACH_SYSTEM_PROMPT = (
    "あなたはチェスの先生です。局面の評価と最善手を日本語で解説してください。"
    "初心者にもわかりやすく、戦略的なポイントを含めてください。"
)


def build_analysis_prompt(fen: str, evaluation: float, best_move: str) -> str:
    return (
        f"局面（FEN）: {fen}\n"
        f"評価値: {evaluation:.2f}\n"
        f"最善手: {best_move}\n\n"
        "この局面について解説してください。"
    )


def build_analysis_messages(fen: str, evaluation: float, best_move: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=COACH_SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_analysis_prompt(fen, evaluation, best_move)),
    ]


class OllamaClient:
    """Stateless bridge to ``POST /api/chat``; every call is an independent round trip."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.default_model = default_model or settings.ollama_model
        self.timeout = settings.ollama_timeout if timeout is None else timeout
        self._transport = transport

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/api/chat"

    async def chat(self, model: str, messages: Sequence[ChatMessage]) -> str:
        payload = {
            "model": model,
            "messages": [message.model_dump() for message in messages],
            "stream": False,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.chat_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Chat server returned %s for model %s", exc.response.status_code, model)
            raise NetworkError(
                f"chat server returned HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Chat request to %s failed: %s", self.chat_url, exc)
            raise NetworkError(f"chat request to {self.chat_url} failed: {exc}") from exc

        try:
            body = OllamaChatResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"unexpected chat response: {exc}") from exc
        return body.message.content

    async def analyze_position(self, fen: str, evaluation: float, best_move: str) -> str:
        messages = build_analysis_messages(fen, evaluation, best_move)
        return await self.chat(self.default_model, messages)
