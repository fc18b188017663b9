from __future__ import annotations

from typing import Protocol, Sequence

from craftmind import config

from .types import TurnLike


class ChatModel(Protocol):
    """What the agent loop needs from a chat provider."""

    def send(
        self,
        turns: Sequence[TurnLike],
        system_message: str,
        stop_seq: str = config.DEFAULT_STOP_SEQUENCE,
    ) -> str:
        raise NotImplementedError

    def embed(self, text: str) -> list[float]:
        raise NotImplementedError
