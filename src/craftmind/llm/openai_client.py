from __future__ import annotations

from typing import Any, Optional, Sequence

from openai import OpenAI

from craftmind import config
from craftmind import logger as logger_mod
from craftmind.keys import KeyStore
from craftmind.text import strict_format

from ._overflow import is_context_overflow, is_overflow_error
from .base import ChatModel
from .dialects import Dialect, DirectDialect, ProxiedDialect
from .errors import ContextOverflowError, LLMError
from .types import TurnLike, as_message

log = logger_mod.get_logger()


class GPT(ChatModel):
    """OpenAI chat/embedding client for the agent loop.

    Supports two dialects:
    - direct OpenAI (optionally with a custom base URL and organization)
    - Azure-style deployments (``is_azure=True``), model encoded in the URL

    ``send`` never raises for provider errors: on context overflow it drops the
    oldest turn and tries again, and anything else yields ``FALLBACK_MESSAGE``.
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        url: Optional[str] = None,
        is_azure: bool = False,
        *,
        keys: KeyStore | None = None,
    ):
        self.model_name = model_name
        self.is_azure = is_azure

        self._dialect: Dialect
        if is_azure:
            if not url or not model_name:
                raise LLMError("Azure deployments need both a url and a model name")
            self._dialect = ProxiedDialect.from_keys(url, model_name, store=keys)
        else:
            self._dialect = DirectDialect.from_keys(url, store=keys)

        self._client = OpenAI(**self._dialect.client_kwargs())

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def _is_reasoning_model(self) -> bool:
        return (
            isinstance(self._dialect, DirectDialect)
            and config.REASONING_MODEL_MARKER in (self.model_name or "")
        )

    def build_payload(
        self,
        turns: Sequence[TurnLike],
        system_message: str,
        stop_seq: str = config.DEFAULT_STOP_SEQUENCE,
    ) -> dict[str, Any]:
        messages = [{"role": "system", "content": system_message}]
        messages += [as_message(t) for t in turns]

        payload: dict[str, Any] = {"messages": messages, "stop": stop_seq}
        if self._dialect.includes_model:
            payload["model"] = self.model_name or config.DEFAULT_CHAT_MODEL

        if self._is_reasoning_model():
            payload["messages"] = strict_format(messages)
            del payload["stop"]
        return payload

    def _complete(self, payload: dict[str, Any]) -> str:
        log.info(
            f"Awaiting {'Azure ' if self.is_azure else ''}OpenAI api response..."
        )
        completion = self._client.chat.completions.create(**payload)
        choice = completion.choices[0]
        if is_context_overflow(finish_reason=choice.finish_reason):
            raise ContextOverflowError()
        log.info("Received.")
        return choice.message.content or ""

    def send(
        self,
        turns: Sequence[TurnLike],
        system_message: str,
        stop_seq: str = config.DEFAULT_STOP_SEQUENCE,
    ) -> str:
        turns = list(turns)
        while True:
            try:
                return self._complete(
                    self.build_payload(turns, system_message, stop_seq)
                )
            except Exception as e:  # noqa: BLE001
                if is_overflow_error(e) and len(turns) > 1:
                    log.warning(
                        "Context length exceeded, trying again with shorter context."
                    )
                    turns = turns[1:]
                    continue
                log.error(f"OpenAI request failed: {e!r}")
                return config.FALLBACK_MESSAGE

    def embed(self, text: str) -> list[float]:
        resp = self._client.embeddings.create(
            model=self.model_name or config.DEFAULT_EMBEDDING_MODEL,
            input=text,
            encoding_format="float",
        )
        return resp.data[0].embedding
