import json

import pytest
import responses

from aicoder.config import Config, SanitizerResponse
from aicoder.refactor import refactor, report_results, sanitized_path

ENDPOINT = "https://api.example.com/v1/chat/completions"


@pytest.fixture
def config():
    return Config(
        endpoint=ENDPOINT,
        key="placeholder",
        model="test-model",
        type="openai",
        code_system_prompt="code prompt",
        refactor_system_prompt="refactor prompt",
    )


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def _chat_body(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _add_review(rsps, **fields):
    payload = {
        "readability_score": 7,
        "readability_reason": "clear names",
        "cyclomatic_score": 2,
        "cyclomatic_reason": "few branches",
        "improved_code": "print('better')\n",
    }
    payload.update(fields)
    rsps.add(responses.POST, ENDPOINT, json=_chat_body(json.dumps(payload)), status=200)
    return payload


class _Confirm:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        return self.answers.pop(0)


@pytest.mark.parametrize("name", ["Makefile", ".bashrc", "./app.py", "app.", ""])
def test_sanitized_path_without_usable_name(name):
    assert sanitized_path(name) is None


def test_sanitized_path_simple_name():
    assert sanitized_path("app.py") == "app_sanitized.py"


def test_sanitized_path_keeps_only_first_extension():
    assert sanitized_path("a.b.c") == "a_sanitized.b"


def test_report_results_shows_scores_and_reasons(capsys):
    report_results(
        SanitizerResponse(
            readability_score=3,
            readability_reason="hard to read",
            cyclomatic_score=9,
            cyclomatic_reason="deep nesting",
        )
    )
    out = capsys.readouterr().out
    assert "Readability score: " in out
    assert "3" in out
    assert "hard to read" in out
    assert "Cyclomatic complexity score: " in out
    assert "9" in out
    assert "deep nesting" in out


def test_refactor_writes_to_output(tmp_path, config, rsps):
    source = tmp_path / "app.py"
    source.write_text("print('x')\n")
    target = tmp_path / "out.py"
    payload = _add_review(rsps)
    confirm = _Confirm(True, True)

    written = refactor(str(source), str(target), config=config, confirm=confirm)

    assert written == str(target)
    assert target.read_text() == payload["improved_code"]
    assert len(confirm.questions) == 2

    body = json.loads(rsps.calls[0].request.body)
    assert body["messages"][0] == {"role": "system", "content": "refactor prompt"}
    assert body["messages"][1] == {"role": "user", "content": "print('x')\n"}
    assert body["temperature"] == 0.1
    assert body["model"] == "test-model"


def test_refactor_default_output_name(tmp_path, monkeypatch, config, rsps):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "app.py").write_text("x = 1\n")
    payload = _add_review(rsps)

    written = refactor("app.py", "", config=config, confirm=_Confirm(True, True))

    assert written == sanitized_path("app.py")
    assert (tmp_path / written).read_text() == payload["improved_code"]


def test_refactor_declined_view_writes_nothing(tmp_path, config, rsps):
    source = tmp_path / "app.py"
    source.write_text("x = 1\n")
    target = tmp_path / "out.py"
    _add_review(rsps)
    confirm = _Confirm(False)

    assert refactor(str(source), str(target), config=config, confirm=confirm) is None
    assert not target.exists()
    assert len(confirm.questions) == 1


def test_refactor_declined_write(tmp_path, config, rsps, capsys):
    source = tmp_path / "app.py"
    source.write_text("x = 1\n")
    target = tmp_path / "out.py"
    payload = _add_review(rsps)

    assert refactor(str(source), str(target), config=config, confirm=_Confirm(True, False)) is None
    assert not target.exists()
    assert payload["improved_code"].strip() in capsys.readouterr().out


def test_refactor_empty_file(tmp_path, config, rsps, capsys):
    source = tmp_path / "empty.py"
    source.write_text("")

    assert refactor(str(source), "", config=config, confirm=_Confirm()) is None
    assert "The file is empty." in capsys.readouterr().out
    assert len(rsps.calls) == 0


def test_refactor_missing_file(tmp_path, config, capsys):
    assert refactor(str(tmp_path / "absent.py"), "", config=config, confirm=_Confirm()) is None
    assert "Error reading the input file:" in capsys.readouterr().out


def test_refactor_http_error(tmp_path, config, rsps, capsys):
    source = tmp_path / "app.py"
    source.write_text("x = 1\n")
    rsps.add(responses.POST, ENDPOINT, json={}, status=500)

    assert refactor(str(source), "", config=config, confirm=_Confirm()) is None
    assert "Unable to generate a completion with error:" in capsys.readouterr().out


def test_refactor_unparsable_payload(tmp_path, config, rsps, capsys):
    source = tmp_path / "app.py"
    source.write_text("x = 1\n")
    rsps.add(responses.POST, ENDPOINT, json=_chat_body("not json"), status=200)

    assert refactor(str(source), "", config=config, confirm=_Confirm()) is None
    out = capsys.readouterr().out
    assert "Unable to parse the command with error:" in out
    assert "Failed Payload:" in out
    assert "not json" in out


def test_refactor_without_improved_code(tmp_path, config, rsps, capsys):
    source = tmp_path / "app.py"
    source.write_text("x = 1\n")
    _add_review(rsps, improved_code="")
    confirm = _Confirm()

    assert refactor(str(source), "", config=config, confirm=confirm) is None
    assert "No code was generated." in capsys.readouterr().out
    assert confirm.questions == []