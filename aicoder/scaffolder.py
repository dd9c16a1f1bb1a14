"""Generate new source files from a prompt."""

from __future__ import annotations

import json
import os
from typing import Callable

from aicoder.chat import ChatError, chat_completion
from aicoder.config import CodeFiles, Config, Message, get_config
from aicoder.console import ask_for_confirmation, print_colored

SCAFFOLD_TEMPERATURE = 0.1


def create_folder_if_not_exists(file_path: str) -> None:
    """Create the directory that will hold file_path, if it is missing."""
    directory = os.path.dirname(file_path)
    if directory in ("", "."):
        return
    if not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def generate_code_files(prompt: str, config: Config | None = None) -> CodeFiles:
    """Ask the model for the files that answer the prompt."""
    settings = config if config is not None else get_config()
    messages = [
        Message(role="system", content=settings.code_system_prompt),
        Message(role="user", content=prompt),
    ]
    payload = chat_completion(messages, settings.model, SCAFFOLD_TEMPERATURE, config=settings)
    try:
        return CodeFiles.from_dict(json.loads(payload))
    except ValueError as exc:
        raise ValueError(f"failed to parse response: {exc} (payload: {payload})") from exc


def display_code_files(code_files: CodeFiles) -> None:
    """Print every generated file with its path."""
    print("Generated code:\n")
    for code_file in code_files.files:
        print_colored("File: " + code_file.filepath, "yellow")
        print_colored(code_file.code + "\n", "cyan")


def write_code_files(code_files: CodeFiles) -> list[str]:
    """Write every generated file to disk and return their paths."""
    written = []
    for code_file in code_files.files:
        try:
            create_folder_if_not_exists(code_file.filepath)
        except OSError as exc:
            raise OSError(f"error creating directory for {code_file.filepath}: {exc}") from exc

        print("Writing file:", code_file.filepath)
        try:
            with open(code_file.filepath, "w", encoding="utf-8") as handle:
                handle.write(code_file.code)
        except OSError as exc:
            raise OSError(f"error writing file {code_file.filepath}: {exc}") from exc
        written.append(code_file.filepath)
    return written


def scaffold(
    prompt: str,
    config: Config | None = None,
    confirm: Callable[[str], bool] = ask_for_confirmation,
) -> list[str]:
    """Generate, show and optionally write code; return the paths written."""
    try:
        code_files = generate_code_files(prompt, config)
    except (ChatError, ValueError) as exc:
        print("Unable to generate code:")
        print_colored(exc, "red")
        return []

    display_code_files(code_files)

    if not confirm("Do you want to write files?"):
        return []
    try:
        return write_code_files(code_files)
    except OSError as exc:
        print_colored(exc, "red")
        return []