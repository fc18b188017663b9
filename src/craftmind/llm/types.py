from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Turn:
    """One message of a chat transcript."""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


TurnLike = Union[Turn, Mapping[str, Any]]


def as_message(turn: TurnLike) -> dict[str, Any]:
    """Return the `{role, content}` dict the chat endpoint expects."""
    if isinstance(turn, Turn):
        return turn.to_dict()
    return {"role": turn["role"], "content": turn["content"]}
