"""Configuration loading and the data types exchanged with the chat API."""

from __future__ import annotations

import json
import sys
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable

CONFIG_FILE_NAME = "aicoder.json"
_REQUIRED = ("endpoint", "key", "model", "code_system_prompt", "refactor_system_prompt")


class ConfigError(Exception):
    """Raised when the configuration cannot be found, read or validated."""


def _get(data: Any, key: str, kind: type, default: Any) -> Any:
    """Fetch an optional field of a JSON object, checking its type."""
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


@dataclass
class Config:
    """Settings for talking to the chat completion endpoint."""

    endpoint: str = ""
    key: str = ""
    model: str = ""
    type: str = ""
    code_system_prompt: str = ""
    refactor_system_prompt: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        try:
            return cls(**{f.name: _get(data, f.name, str, "") for f in fields(cls)})
        except ValueError as exc:
            raise ConfigError(f"Failed to load configuration: {exc}") from exc

    def validate(self) -> Config:
        """Default the type to openai and check that required fields are set."""
        self.type = self.type or "openai"
        missing = [name for name in _REQUIRED if not getattr(self, name)]
        if missing:
            raise ConfigError("Missing required configuration fields: " + ", ".join(missing))
        return self


@dataclass
class Message:
    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    messages: list[Message]
    model: str
    temperature: float
    response_format: str | None = "json_object"

    def to_dict(self) -> dict:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "model": self.model,
            "temperature": self.temperature,
            "response_format": self.response_format and {"type": self.response_format},
        }


@dataclass
class Command:
    command: str = ""
    args: list[str] = field(default_factory=list)
    explanation: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Command:
        args = _get(data, "args", list, [])
        if not all(isinstance(arg, str) for arg in args):
            raise ValueError("field 'args' must hold strings")
        return cls(_get(data, "command", str, ""), list(args), _get(data, "explanation", str, ""))


@dataclass
class Commands:
    commands: list[Command] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Commands:
        return cls([Command.from_dict(item) for item in _get(data, "commands", list, [])])


@dataclass
class CodeFile:
    filepath: str = ""
    code: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CodeFile:
        return cls(_get(data, "filepath", str, ""), _get(data, "code", str, ""))


@dataclass
class CodeFiles:
    files: list[CodeFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CodeFiles:
        return cls([CodeFile.from_dict(item) for item in _get(data, "files", list, [])])


@dataclass
class SanitizerResponse:
    readability_score: int = 0
    readability_reason: str = ""
    cyclomatic_score: int = 0
    cyclomatic_reason: str = ""
    improved_code: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SanitizerResponse:
        return cls(
            **{f.name: _get(data, f.name, f.type == "int" and int or str, f.default) for f in fields(cls)}
        )


@dataclass
class SystemPrompt:
    command: str = ""
    system_prompt: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SystemPrompt:
        return cls(_get(data, "command", str, ""), _get(data, "system", str, ""))


def find_config_file(search_dirs: Iterable[str | Path] | None = None) -> Path:
    """Return the first configuration file found in the given directories.

    By default the working directory is searched, then the program's directory.
    """
    if search_dirs is None:
        search_dirs = [Path.cwd(), Path(sys.argv[0] if sys.argv else "").resolve().parent]
    dirs = list(search_dirs)
    for directory in dirs:
        candidate = Path(directory) / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    raise ConfigError(
        f"Failed to load configuration: {CONFIG_FILE_NAME} not found in "
        + ", ".join(map(str, dirs))
    )


def load_config(path: str | Path) -> Config:
    """Read, parse and validate a configuration file."""
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to load configuration: {exc}") from exc
    return Config.from_dict(data).validate()


_lock = threading.Lock()
_instance: Config | None = None


def get_config() -> Config:
    """Return the shared configuration, loading it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = load_config(find_config_file())
        return _instance


def reset_config() -> None:
    """Forget the shared configuration so the next call reloads it."""
    global _instance
    with _lock:
        _instance = None