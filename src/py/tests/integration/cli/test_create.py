from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from create_vite_starter.cli import create_vite_starter
from create_vite_starter.exceptions import ExecutionError
from create_vite_starter.process import CommandResult


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_help(runner: CliRunner) -> None:
    result = runner.invoke(create_vite_starter, ["--help"])

    assert result.exit_code == 0
    assert "--router / --no-router" in result.output


@patch("create_vite_starter.process.SubprocessRunner.run")
def test_create_no_prompt(mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    mock_run.return_value = CommandResult(command=[], return_code=0)

    result = runner.invoke(create_vite_starter, ["my-project", "--no-prompt"])

    assert result.exit_code == 0, result.output
    target = project_dir / "my-project"
    assert (target / "package.json").exists()
    assert (target / "vite.config.ts").exists()
    assert (target / "src" / "main.tsx").exists()
    assert (target / ".gitignore").exists()
    assert not (target / "git-ignore.txt").exists()
    assert not (target / "src" / "router").exists()
    assert [call.args for call in mock_run.call_args_list] == [
        ("git", ["init", str(target)]),
        ("npm", ["install"]),
    ]
    assert all(call.kwargs["cwd"] == target for call in mock_run.call_args_list)
    assert "Next steps:" in result.output
    assert "cd my-project" in result.output


@patch("create_vite_starter.process.SubprocessRunner.run")
def test_create_with_router(mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    mock_run.return_value = CommandResult(command=[], return_code=0)

    result = runner.invoke(
        create_vite_starter,
        ["web", "--no-git", "--install", "--router"],
        env={"npm_config_user_agent": "yarn/1.22.19 npm/? node/v20.10.0 linux x64"},
    )

    assert result.exit_code == 0, result.output
    target = project_dir / "web"
    assert (target / "src" / "router" / "index.tsx").exists()
    assert (target / "src" / "router" / "routes" / "index.tsx").exists()
    assert "AppRouter" in (target / "src" / "main.tsx").read_text()
    assert [call.args for call in mock_run.call_args_list] == [
        ("yarn", ["add"]),
        ("yarn", ["add", "@tanstack/react-router"]),
        ("yarn", ["add", "-D", "@tanstack/router-devtools"]),
    ]


@patch("create_vite_starter.process.SubprocessRunner.run")
def test_create_interactive_current_directory(mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    """Accept the default target and decline every optional step."""
    result = runner.invoke(create_vite_starter, [], input=".\nn\nn\nn\n")

    assert result.exit_code == 0, result.output
    assert (project_dir / "package.json").exists()
    assert (project_dir / "index.html").exists()
    mock_run.assert_not_called()
    assert "cd " not in result.output


def test_create_existing_directory_fails(runner: CliRunner, project_dir: Path) -> None:
    (project_dir / "taken").mkdir()
    (project_dir / "taken" / "index.html").write_text("")

    result = runner.invoke(create_vite_starter, ["taken", "--no-prompt"])

    assert result.exit_code == 1
    assert [p.name for p in (project_dir / "taken").iterdir()] == ["index.html"]


@patch("create_vite_starter.process.SubprocessRunner.run")
def test_create_install_failure_still_succeeds(mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    mock_run.side_effect = ExecutionError(["npm", "install"], 1, "ERESOLVE")

    result = runner.invoke(create_vite_starter, ["my-project", "--no-git", "--install", "--no-router"])

    assert result.exit_code == 0, result.output
    assert "Failed to install dependencies" in result.output
    assert (project_dir / "my-project" / "package.json").exists()


def test_create_missing_template_fails(runner: CliRunner, project_dir: Path) -> None:
    result = runner.invoke(
        create_vite_starter,
        ["my-project", "--no-prompt"],
        env={"CREATE_VITE_STARTER_TEMPLATE_DIR": str(project_dir / "missing")},
    )

    assert result.exit_code == 1
    assert "Failed to create project structure" in result.output


@patch("create_vite_starter.process.SubprocessRunner.run")
def test_create_empty_target_answer_cancels(mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    """An empty answer to the target question exits without writing anything."""
    result = runner.invoke(create_vite_starter, [], input="\nn\nn\nn\n")

    assert result.exit_code == 1
    assert list(project_dir.iterdir()) == []
    mock_run.assert_not_called()


@patch("subprocess.run")
@patch("shutil.which")
def test_create_install_failure_with_undecodable_output(
    mock_which: Mock, mock_run: Mock, runner: CliRunner, project_dir: Path
) -> None:
    mock_which.return_value = "/usr/bin/npm"
    mock_run.return_value = Mock(returncode=1, stderr=b"npm ERR! caf\xe9")

    result = runner.invoke(create_vite_starter, ["app", "--no-git", "--install", "--no-router"])

    assert result.exit_code == 0, result.output
    assert "Failed to install dependencies" in result.output
    assert (project_dir / "app" / "package.json").exists()


@patch("subprocess.run")
@patch("shutil.which")
def test_create_git_not_startable(mock_which: Mock, mock_run: Mock, runner: CliRunner, project_dir: Path) -> None:
    mock_which.return_value = "/usr/bin/git"
    mock_run.side_effect = PermissionError("Permission denied")

    result = runner.invoke(create_vite_starter, ["app", "--git", "--no-install", "--no-router"])

    assert result.exit_code == 0, result.output
    assert "Failed to initialize git repository" in result.output
