"""Client for an OpenAI-compatible chat completion endpoint."""

from __future__ import annotations

import json
from typing import Sequence

import requests

from aicoder.config import ChatRequest, Config, Message, get_config


class ChatError(Exception):
    """Raised when a chat completion cannot be obtained."""


_session: requests.Session | None = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def chat_completion(
    messages: Sequence[Message],
    model: str = "",
    temperature: float = 0.0,
    config: Config | None = None,
) -> str:
    """Send the messages and return the content of the first choice."""
    cfg = config if config is not None else get_config()
    request = ChatRequest(
        messages=list(messages),
        model=model or cfg.model,
        temperature=temperature,
        response_format="json_object",
    )
    headers = {"Content-Type": "application/json"}
    if cfg.type == "azure":
        headers["api-key"] = cfg.key
    else:
        headers["Authorization"] = "Bearer " + cfg.key

    try:
        response = _get_session().post(
            cfg.endpoint, data=json.dumps(request.to_dict()), headers=headers
        )
    except requests.RequestException as exc:
        raise ChatError(str(exc)) from exc

    if response.status_code != 200:
        raise ChatError(f"Error: {response.status_code} {response.reason}".rstrip())

    try:
        body = response.json()
    except ValueError as exc:
        raise ChatError(f"invalid response body: {exc}") from exc

    try:
        content = body["choices"][0]["message"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise ChatError("response holds no choices") from exc
    if content is None:
        return ""
    if not isinstance(content, str):
        raise ChatError("response content is not a string")
    return content


def dispose_client() -> None:
    """Close the pooled HTTP connections."""
    global _session
    if _session is not None:
        _session.close()
        _session = None