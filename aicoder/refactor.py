"""Evaluate a source file with the model and optionally write an improved version."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from aicoder.chat import ChatError, chat_completion
from aicoder.config import Config, Message, SanitizerResponse, get_config
from aicoder.console import ask_for_confirmation, print_colored

REFACTOR_TEMPERATURE = 0.1


def sanitized_path(file: str) -> str | None:
    """Return the default output name for a refactored file, or None if there is none."""
    parts = file.split(".")
    if len(parts) >= 2 and parts[0] and parts[1]:
        return f"{parts[0]}_sanitized.{parts[1]}"
    return None


def report_results(response: SanitizerResponse) -> None:
    """Print the readability and complexity scores with their reasons."""
    print("\nCode information:\n")

    print("Readability score: ", end="")
    print_colored(
        response.readability_score,
        "red" if response.readability_score < 5 else "cyan",
    )
    print("Readability score reason:")
    print_colored(response.readability_reason, "cyan")

    print("\nCyclomatic complexity score: ", end="")
    print_colored(
        response.cyclomatic_score,
        "red" if response.cyclomatic_score > 5 else "cyan",
    )
    print("Cyclomatic complexity score reason:")
    print_colored(response.cyclomatic_reason, "cyan")


def refactor(
    file: str,
    output: str = "",
    config: Config | None = None,
    confirm: Callable[[str], bool] = ask_for_confirmation,
) -> str | None:
    """Ask the model to review a file; return the path written, if any."""
    settings = config if config is not None else get_config()

    try:
        source = Path(file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print("Error reading the input file:", exc)
        return None

    if source == "":
        print("The file is empty.")
        return None

    messages = [
        Message(role="system", content=settings.refactor_system_prompt),
        Message(role="user", content=source),
    ]

    try:
        payload = chat_completion(
            messages, settings.model, REFACTOR_TEMPERATURE, config=settings
        )
    except ChatError as exc:
        print("Unable to generate a completion with error:")
        print_colored(exc, "red")
        return None

    try:
        response = SanitizerResponse.from_dict(json.loads(payload))
    except ValueError as exc:
        print("Unable to parse the command with error:")
        print_colored(exc, "red")
        print("Failed Payload:\n", payload)
        return None

    report_results(response)

    if not response.improved_code:
        print("No code was generated.")
        return None

    if not confirm("\nContinue to view the proposed code?"):
        return None

    print("\nProposed code changes:\n")
    print_colored(response.improved_code, "green")

    if not confirm("Write the code to a file?"):
        return None

    print("Writing file:", output)
    target = output or sanitized_path(file)
    if target is None:
        return None
    try:
        Path(target).write_text(response.improved_code, encoding="utf-8")
    except OSError as exc:
        print_colored(exc, "red")
        return None
    return target