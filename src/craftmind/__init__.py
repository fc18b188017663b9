"""craftmind

Glue between a game-playing agent and the services it talks to:

    from craftmind import GPT

    gpt = GPT("gpt-4o-mini")
    reply = gpt.send(history, "You are a helpful Minecraft bot.")

`GPT` handles chat completions (with overflow recovery) and embeddings;
`Camera` saves screenshots of a bot's view.
"""

from .camera import Camera
from .keys import MissingKeyError, get_key, has_key
from .llm import GPT, Turn, build_llm
from .text import strict_format

__all__ = [
    "GPT",
    "Camera",
    "MissingKeyError",
    "Turn",
    "build_llm",
    "get_key",
    "has_key",
    "strict_format",
]
