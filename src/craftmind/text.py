from __future__ import annotations

from typing import Any, Iterable, Mapping

FILLER = {"role": "user", "content": "_"}


def strict_format(messages: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Reshape a transcript for models with strict role/ordering rules.

    - system turns become user turns prefixed with "SYSTEM: "
    - back-to-back assistant turns get a filler user turn between them
    - other back-to-back turns of the same role are merged
    - the result always starts with a user turn

    The input messages are not modified.
    """

    out: list[dict[str, str]] = []
    prev_role = None
    for msg in messages:
        role = msg["role"]
        content = (msg.get("content") or "").strip()
        if role == "system":
            role = "user"
            content = "SYSTEM: " + content

        if role == prev_role and role == "assistant":
            out.append(dict(FILLER))
            out.append({"role": role, "content": content})
        elif role == prev_role:
            out[-1]["content"] += "\n" + content
        else:
            out.append({"role": role, "content": content})
        prev_role = role

    if not out or out[0]["role"] != "user":
        out.insert(0, dict(FILLER))
    return out
