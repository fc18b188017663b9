from __future__ import annotations

from typing import Optional

from .errors import LLMError
from .openai_client import GPT


def build_llm(
    *, provider: str, model: Optional[str] = None, url: Optional[str] = None
) -> GPT:
    """Factory for provider clients.

    Providers:
    - openai (direct)
    - azure (deployment-scoped; needs url and model)

    Extend by adding new provider clients and mapping here.
    """

    p = provider.lower().strip()
    if p == "openai":
        return GPT(model, url)
    if p == "azure":
        return GPT(model, url, is_azure=True)

    raise LLMError(f"Unknown LLM provider: {provider}")
