from collections.abc import Generator
from pathlib import Path

import pytest

from create_vite_starter.config import ScaffoldConfig
from create_vite_starter.exceptions import ExecutionError
from create_vite_starter.process import CommandResult

here = Path(__file__).parent


# Environment variables that may affect test behavior - clear before each test
_ENV_VARS = [
    "npm_config_user_agent",
    "CREATE_VITE_STARTER_TEMPLATE_DIR",
    "CREATE_VITE_STARTER_ADDON_DIR",
    "CREATE_VITE_STARTER_GIT",
]


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear scaffolding environment variables before each test for isolation."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class FakeRunner:
    """Process runner recording every command instead of running it."""

    def __init__(self, fail_on: "set[str] | None" = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, list[str], Path]] = []

    def run(self, command: str, args: "list[str]", *, cwd: Path) -> CommandResult:
        self.calls.append((command, args, cwd))
        full_command = [command, *args]
        if command in self.fail_on or " ".join(full_command) in self.fail_on:
            raise ExecutionError(full_command, 1, "boom")
        return CommandResult(command=full_command, return_code=0)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small template tree, including files the copy must skip."""
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "node_modules" / "react").mkdir(parents=True)
    (root / "package.json").write_text('{"name": "starter"}\n')
    (root / "index.html").write_text("<div id='root'></div>\n")
    (root / "git-ignore.txt").write_text("node_modules\n")
    (root / "package-lock.json").write_text("{}\n")
    (root / "yarn.lock").write_text("")
    (root / "pnpm-lock.yaml").write_text("")
    (root / "bun.lock").write_text("")
    (root / "node_modules" / "react" / "index.js").write_text("")
    (root / "src" / "main.tsx").write_text("render(<App />);\n")
    (root / "src" / "App.tsx").write_text("export default function App() {}\n")
    return root


@pytest.fixture
def addon_dir(tmp_path: Path) -> Path:
    root = tmp_path / "addon"
    (root / "routes").mkdir(parents=True)
    (root / "index.tsx").write_text("export function AppRouter() {}\n")
    (root / "routes" / "index.tsx").write_text("export const routeTree = {};\n")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "workdir"
    path.mkdir()
    return path


@pytest.fixture
def scaffold_config(template_dir: Path, addon_dir: Path, workdir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(template_dir=template_dir, addon_dir=addon_dir, user_agent=None, cwd=workdir)


@pytest.fixture
def make_runner() -> "type[FakeRunner]":
    return FakeRunner
