"""Request-shaping conventions for the two ways of reaching the chat API.

- DirectDialect: the provider's own endpoint. The model goes in the payload;
  an organization header is added when an org id is configured.
- ProxiedDialect: a deployment-scoped endpoint (Azure OpenAI style). The model
  is implied by the URL path, the API version travels as a query parameter,
  and the key is sent in an ``api-key`` header.

Both are resolved from the key service once, at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from craftmind import keys as keys_mod
from craftmind.keys import KeyStore


@dataclass(frozen=True)
class DirectDialect:
    api_key: str
    organization: Optional[str] = None
    base_url: Optional[str] = None

    includes_model = True

    @classmethod
    def from_keys(
        cls, url: Optional[str] = None, *, store: KeyStore | None = None
    ) -> "DirectDialect":
        store = store or keys_mod.default_store()
        organization = (
            store.get_key("OPENAI_ORG_ID") if store.has_key("OPENAI_ORG_ID") else None
        )
        return cls(
            api_key=store.get_key("OPENAI_API_KEY"),
            organization=organization,
            base_url=url or None,
        )

    def client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"api_key": self.api_key}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if self.organization:
            kwargs["organization"] = self.organization
        return kwargs


@dataclass(frozen=True)
class ProxiedDialect:
    api_key: str
    api_version: str
    base_url: str

    includes_model = False

    @classmethod
    def from_keys(
        cls, url: str, model: str, *, store: KeyStore | None = None
    ) -> "ProxiedDialect":
        store = store or keys_mod.default_store()
        return cls(
            api_key=store.get_key("AZURE_OPENAI_API_KEY"),
            api_version=store.get_key("AZURE_OPENAI_VERSION"),
            base_url=f"{url}/openai/deployments/{model}",
        )

    def client_kwargs(self) -> dict[str, Any]:
        return {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "default_query": {"api-version": self.api_version},
            "default_headers": {"api-key": self.api_key},
        }


Dialect = Union[DirectDialect, ProxiedDialect]
