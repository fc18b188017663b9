"""Chat-completion and embedding access for the agent loop.

Design goals:
- Keep the provider SDK isolated behind a small `send` / `embed` interface.
- Never let a chat failure reach the agent: trim history on overflow, else
  fall back to a fixed reply.
- Let embedding errors propagate; callers handle those directly.
"""

from ._overflow import is_context_overflow, is_overflow_error
from .dialects import DirectDialect, ProxiedDialect
from .errors import ContextOverflowError, LLMError
from .factory import build_llm
from .openai_client import GPT
from .types import Turn

__all__ = [
    "GPT",
    "ContextOverflowError",
    "DirectDialect",
    "LLMError",
    "ProxiedDialect",
    "Turn",
    "build_llm",
    "is_context_overflow",
    "is_overflow_error",
]
