import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure the package under test (src/craftmind) is importable without an
# editable install.
repo_root = Path(__file__).resolve().parents[2]
src_path = str(repo_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


def completion(content="ok", finish_reason="stop"):
    """Shape of an OpenAI chat completion, as far as the client reads it."""
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                finish_reason=finish_reason,
                message=SimpleNamespace(role="assistant", content=content),
            )
        ]
    )


class FakeOpenAI:
    """In-memory stand-in for `openai.OpenAI`.

    `replies` holds completions or exceptions; the last one repeats once the
    list runs out.
    """

    instances: list["FakeOpenAI"] = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.replies: list = [completion()]
        self.chat_calls: list[dict] = []
        self.embed_calls: list[dict] = []
        self.embed_reply = SimpleNamespace(
            data=[
                SimpleNamespace(embedding=[0.1, 0.2, 0.3]),
                SimpleNamespace(embedding=[9.0]),
            ]
        )
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))
        self.embeddings = SimpleNamespace(create=self._embed)
        FakeOpenAI.instances.append(self)

    def _create(self, **payload):
        self.chat_calls.append(payload)
        idx = min(len(self.chat_calls), len(self.replies)) - 1
        reply = self.replies[idx]
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def _embed(self, **payload):
        self.embed_calls.append(payload)
        if isinstance(self.embed_reply, BaseException):
            raise self.embed_reply
        return self.embed_reply


@pytest.fixture
def fake_openai(monkeypatch):
    FakeOpenAI.instances = []
    monkeypatch.setattr("craftmind.llm.openai_client.OpenAI", FakeOpenAI)
    return FakeOpenAI


@pytest.fixture
def write_keys(tmp_path, monkeypatch):
    """Factory: write a keys.json and return a KeyStore reading it.

    Provider env vars are cleared so only the file counts.
    """
    from craftmind.keys import KeyStore

    for name in (
        "OPENAI_API_KEY",
        "OPENAI_ORG_ID",
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_VERSION",
    ):
        monkeypatch.delenv(name, raising=False)

    def _factory(keys: dict) -> KeyStore:
        path = tmp_path / "keys.json"
        path.write_text(json.dumps(keys), encoding="utf-8")
        return KeyStore(path)

    return _factory


@pytest.fixture
def make_completion():
    return completion
