import sys
from pathlib import Path
from typing import Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


_CURSOR_GLOB_RULE = (
    "---\n"
    "description: TypeScript conventions\n"
    "globs: *.ts,src/**/*.{js,jsx}\n"
    "alwaysApply: false\n"
    "---\n"
    "# TypeScript\n"
    "\n"
    "Prefer `unknown` over `any`.\n"
)

_WINDSURF_MANUAL_RULE = (
    "---\n"
    "trigger: manual\n"
    "---\n"
    "Only when asked.\n"
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def cursor_glob_rule() -> str:
    return _CURSOR_GLOB_RULE


@pytest.fixture
def windsurf_manual_rule() -> str:
    return _WINDSURF_MANUAL_RULE


@pytest.fixture
def write_rule() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
