# aicoder

`aicoder` is a command-line tool that uses an AI chat model to write code for
you or to review and improve code you already have.

- `aicoder code` turns a plain-language prompt into a set of source files.
  It shows every generated file first and writes them only once you confirm.
- `aicoder refactor` sends a source file to the model and reports a
  readability score and a cyclomatic complexity score, each with an
  explanation. It can then show the improved code and write it out.

Both OpenAI-style and Azure OpenAI chat-completion endpoints are supported.

## Installation

```
pip install .
```

This installs the `aicoder` command.

## Configuration

`aicoder` reads its settings from a file named `aicoder.json`. It looks in the
current working directory first and then in the directory of the running
script. The file is read before any command runs, `--help` included, so
`aicoder` stops with an error if no valid configuration is found.

```json
{
  "endpoint": "https://api.openai.com/v1/chat/completions",
  "key": "placeholder",
  "model": "gpt-4o",
  "type": "openai",
  "code_system_prompt": "You are a code generator. Reply with JSON of the form {\"files\": [{\"filepath\": \"...\", \"code\": \"...\"}]}.",
  "refactor_system_prompt": "You are a code reviewer. Reply with JSON holding readability_score, readability_reason, cyclomatic_score, cyclomatic_reason and improved_code."
}
```

| Field                    | Meaning                                                        |
|--------------------------|----------------------------------------------------------------|
| `endpoint`               | Full URL of the chat-completion endpoint                       |
| `key`                    | API key                                                        |
| `model`                  | Model name sent with every request                             |
| `type`                   | `openai` (default) or `azure`                                  |
| `code_system_prompt`     | System prompt used by `aicoder code`                           |
| `refactor_system_prompt` | System prompt used by `aicoder refactor`                       |

Every field except `type` is required; a missing one is reported by name and
`aicoder` exits with status 1. With `type` set to `azure` the key is sent in
an `api-key` header, otherwise as a bearer token in the `Authorization`
header.

Requests ask for a JSON-object response, so the system prompts must tell the
model which JSON shape to produce.

## Usage

Run `aicoder` on its own to see a banner and an example:

```
aicoder
```

### Generating code

```
aicoder code -p "Create a Python FastAPI application to manage customers."
```

`co` is a short alias for `code`. The `--prompt`/`-p` option is required.
Generated files are printed, and after you answer `y` they are written to
the paths the model chose, with any missing directories created.

### Refactoring code

```
aicoder refactor -f app.py -o app_sanitized.py
```

`re` is a short alias for `refactor`.

- `--file`/`-f` is the file to evaluate. Without it, an example command is
  printed and nothing else happens.
- `--output`/`-o` is where the improved code is written. Without it, the
  name is derived from the input by splitting on dots and adding `_sanitized`
  before the first extension, so `app.py` becomes `app_sanitized.py`. If no
  name can be derived that way (for example `Makefile` or `.hidden`), nothing
  is written.

A readability score below 5 and a complexity score above 5 are shown in red.
You are asked before the proposed code is shown and again before it is
written; only `y` or `Y` counts as yes.

## Using it as a library

The same steps are available from Python:

```python
from aicoder.config import get_config
from aicoder.scaffolder import generate_code_files, display_code_files

config = get_config()
files = generate_code_files("A command-line todo list in Python", config)
display_code_files(files)
```

- `aicoder.config.load_config(path)` reads and validates a configuration file
  and raises `aicoder.config.ConfigError` on failure; `get_config()` loads the
  shared configuration once and `reset_config()` forgets it.
- `aicoder.chat.chat_completion(messages, model, temperature, config)` sends a
  list of `aicoder.config.Message` objects to the endpoint and returns the
  reply text, raising `aicoder.chat.ChatError` when the request fails.
- `aicoder.scaffolder.scaffold(prompt, config, confirm)` and
  `aicoder.refactor.refactor(file, output, config, confirm)` run the two
  commands; `confirm` is any function that takes a question and returns a
  boolean, and both return the paths they wrote.

## Running the tests

```
pip install .[test]
pytest
```