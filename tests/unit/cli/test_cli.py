from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from dirtitle.cli.main import app
from dirtitle.titles import get_current_user

runner = CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    username = get_current_user().unwrap().username
    (tmp_path / "shm" / username / ".dirtitle").mkdir(parents=True)
    return {
        "DIRTITLE_PATHS__MEMORY_ROOT": str(tmp_path / "shm"),
        "DIRTITLE_SEP": " | ",
        "BASH_COMMAND": "",
        "HIST_LAST_COMMAND": "",
    }


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "shm" / get_current_user().unwrap().username / ".dirtitle"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "work" / "api" / "src"
    path.mkdir(parents=True)
    return path


def _write_override(config_dir: Path, dir_path: Path, text: str) -> None:
    override_file = config_dir / (str(dir_path).lstrip("/") + ".title")
    override_file.parent.mkdir(parents=True, exist_ok=True)
    override_file.write_text(text, encoding="utf-8")


def test_short_title(env: dict[str, str], project: Path) -> None:
    result = runner.invoke(app, [str(project)], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src\n"


def test_long_title(env: dict[str, str], project: Path) -> None:
    result = runner.invoke(app, ["--long", str(project)], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src | api | work\n"


def test_override_title(env: dict[str, str], config_dir: Path, project: Path) -> None:
    _write_override(config_dir, project.parent, "API")

    result = runner.invoke(app, ["--long", str(project)], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src | API\n"


def test_relative_path_is_made_absolute(
    env: dict[str, str], project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path / "work")

    result = runner.invoke(app, ["--long", "api/src/../src"], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src | api | work\n"


def test_show_command(env: dict[str, str], project: Path) -> None:
    env["BASH_COMMAND"] = "make test"

    result = runner.invoke(app, ["--show-command", "--long", str(project)], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src: make test\n"


def test_show_command_prefers_history(env: dict[str, str], project: Path) -> None:
    env["BASH_COMMAND"] = "make"
    env["HIST_LAST_COMMAND"] = "make test -j4"

    result = runner.invoke(app, ["--show-command", str(project)], env=env)

    assert result.exit_code == 0
    assert result.stdout == "src: make test -j4\n"


def test_missing_path_is_usage_error(env: dict[str, str]) -> None:
    result = runner.invoke(app, [], env=env)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr.startswith("dirtitle: Usage: dirtitle")


def test_extra_paths_are_usage_error(env: dict[str, str], project: Path) -> None:
    result = runner.invoke(app, [str(project), str(project.parent)], env=env)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Usage" in result.stderr


def test_override_read_failure_exits_nonzero(env: dict[str, str], config_dir: Path, project: Path) -> None:
    override_file = config_dir / (str(project).lstrip("/") + ".title")
    override_file.mkdir(parents=True)

    result = runner.invoke(app, [str(project)], env=env)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr.startswith("dirtitle: ")
    assert str(override_file) in result.stderr


def test_leading_double_slash_matches_single_slash(env: dict[str, str], project: Path) -> None:
    single = runner.invoke(app, ["--long", str(project)], env=env)
    double = runner.invoke(app, ["--long", "/" + str(project)], env=env)

    assert double.exit_code == 0
    assert double.stdout == single.stdout == "src | api | work\n"


def test_home_with_leading_double_slash_is_tilde(env: dict[str, str]) -> None:
    home = get_current_user().unwrap().home_dir

    result = runner.invoke(app, ["/" + home], env=env)

    assert result.exit_code == 0
    assert result.stdout == "~\n"


def test_single_dash_flags_are_accepted(env: dict[str, str], project: Path) -> None:
    long_result = runner.invoke(app, ["-long", str(project)], env=env)
    env["BASH_COMMAND"] = "make test"
    command_result = runner.invoke(app, ["-show-command", str(project)], env=env)

    assert long_result.exit_code == 0
    assert long_result.stdout == "src | api | work\n"
    assert command_result.exit_code == 0
    assert command_result.stdout == "src: make test\n"
