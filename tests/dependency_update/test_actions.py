import pytest

from dependency_update import actions
from dependency_update.services import ValidationFailedError


def test_input_env_name_keeps_hyphens_and_replaces_spaces() -> None:
    assert actions.input_env_name("gh-token") == "INPUT_GH-TOKEN"
    assert actions.input_env_name("my input") == "INPUT_MY_INPUT"


def test_get_input_trims_whitespace() -> None:
    env = {"INPUT_BASE-BRANCH": "  main \n"}
    assert actions.get_input("base-branch", environ=env) == "main"


def test_get_input_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_WORKING-DIRECTORY", "web")
    assert actions.get_input("working-directory") == "web"


def test_get_input_missing_optional_is_empty() -> None:
    assert actions.get_input("base-branch", environ={}) == ""


@pytest.mark.parametrize("value", [None, "", "   "])
def test_get_input_missing_required_fails(value: str | None) -> None:
    env = {} if value is None else {"INPUT_BASE-BRANCH": value}
    with pytest.raises(ValidationFailedError) as exc_info:
        actions.get_input("base-branch", required=True, environ=env)
    assert str(exc_info.value) == "Input required and not supplied: base-branch"
    assert exc_info.value.code == "validation_failed"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("True", True), ("TRUE", True), ("false", False), ("FALSE", False)],
)
def test_get_boolean_input_core_schema(raw: str, expected: bool) -> None:
    assert actions.get_boolean_input("debug", environ={"INPUT_DEBUG": raw}) is expected


def test_get_boolean_input_missing_is_false() -> None:
    assert actions.get_boolean_input("debug", environ={}) is False


@pytest.mark.parametrize("raw", ["yes", "1", "tRuE", "on"])
def test_get_boolean_input_rejects_other_spellings(raw: str) -> None:
    with pytest.raises(ValidationFailedError) as exc_info:
        actions.get_boolean_input("debug", environ={"INPUT_DEBUG": raw})
    assert "Core Schema" in str(exc_info.value)
    assert "debug" in str(exc_info.value)


def test_set_failed_writes_error_line(capsys: pytest.CaptureFixture[str]) -> None:
    actions.set_failed("Invalid base-branch name.")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "error: Invalid base-branch name."


def test_set_failed_uses_workflow_command_under_actions(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")

    actions.set_failed("line one\nline two")

    assert capsys.readouterr().err.strip() == "::error::line one%0Aline two"
