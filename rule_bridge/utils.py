from pathlib import Path

from rule_bridge.errors import RuleFileError


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise RuleFileError(path, f"Input file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleFileError(path, f"Failed to read input file {path}: {exc}") from exc


def write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RuleFileError(path, f"Failed to write output file {path}: {exc}") from exc


def swap_extension(path: Path, extension: str) -> Path:
    return path.with_name(f"{path.stem}{extension}")


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
