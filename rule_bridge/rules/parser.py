"""Parse and serialize rules with YAML front-matter.

Rule files are a ``---`` delimited YAML block followed by an opaque body.
Human-written Cursor rules routinely leave ``globs`` unquoted even though
values such as ``*.ts,src/**/*.{js,jsx}`` are not valid plain YAML scalars.
That one quirk is handled by a single normalization step around PyYAML:
the value is single-quoted before loading and the original string is put
back afterwards. On the way out the ``globs`` line is unquoted again so the
files keep the style people actually write.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

import yaml

from rule_bridge.constants import FRONT_MATTER_DELIMITER, GLOBS_KEY
from rule_bridge.errors import ParseError
from rule_bridge.rules.models import RuleDocument

_OPEN_RE = re.compile(rf"\A{FRONT_MATTER_DELIMITER}[ \t]*\r?(?:\n|\Z)")
_CLOSE_RE = re.compile(rf"^{FRONT_MATTER_DELIMITER}[ \t]*\r?$", re.MULTILINE)

_GLOBS_LINE_RE = re.compile(
    rf"^{GLOBS_KEY}:[ \t]*(?P<value>[^\n]*?)[ \t]*\r?$", re.MULTILINE
)
_QUOTED_GLOBS_LINE_RE = re.compile(
    rf"^(?P<key>{GLOBS_KEY}:[ \t]*)(?P<quote>['\"])(?P<value>.*)(?P=quote)[ \t]*$",
    re.MULTILINE,
)
_GLOB_SPECIAL_RE = re.compile(r"[*:{}\[\],]")

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_JSON_BOOL_RE = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")

_BOM = "\ufeff"
_NO_WRAP = 2**31 - 1

_MISSING_COLON = (
    "A colon ':' is missing in a key-value pair, or a value is missing after a colon"
)
_MAPPING_NOT_ALLOWED = (
    "Indentation or a missing colon might be the issue; "
    "mapping values are not allowed in this context"
)
_GENERIC_SYNTAX = "A colon ':' is likely missing or there's a general syntax error"


def _json_like_resolvers(base: type) -> dict[str, list[tuple[str, re.Pattern]]]:
    # Only true/false are booleans and dates stay strings.
    resolvers = {
        first: [
            (tag, regexp)
            for tag, regexp in mappings
            if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)
        ]
        for first, mappings in base.yaml_implicit_resolvers.items()
    }
    for first in "tTfF":
        resolvers.setdefault(first, []).insert(0, (_BOOL_TAG, _JSON_BOOL_RE))
    return resolvers


class _FrontMatterLoader(yaml.SafeLoader):
    pass


class _FrontMatterDumper(yaml.SafeDumper):
    pass


_FrontMatterLoader.yaml_implicit_resolvers = _json_like_resolvers(yaml.SafeLoader)
_FrontMatterDumper.yaml_implicit_resolvers = _json_like_resolvers(yaml.SafeDumper)


def split_front_matter(text: str) -> tuple[Optional[str], str]:
    """Return ``(block, body)``; ``block`` is ``None`` without an opening delimiter.

    A leading byte order mark is dropped.
    """
    text = text.removeprefix(_BOM)
    opening = _OPEN_RE.match(text)
    if opening is None:
        return None, text

    start = opening.end()
    closing = _CLOSE_RE.search(text, start)
    if closing is None:
        return text[start:], ""

    body = text[closing.end() :]
    if body.startswith("\n"):
        body = body[1:]
    return text[start : closing.start()], body


def _keeps_yaml_form(value: str) -> bool:
    # Fully quoted values and comments are left for YAML to read.
    if value.startswith("#"):
        return True
    return len(value) >= 2 and value[0] in "'\"" and value[0] == value[-1]


def _quote_unquoted_globs(block: str) -> tuple[str, Optional[str]]:
    match = _GLOBS_LINE_RE.search(block)
    if match is None:
        return block, None

    value = match.group("value")
    if not value or _keeps_yaml_form(value) or not _GLOB_SPECIAL_RE.search(value):
        return block, None

    quoted = "'" + value.replace("'", "''") + "'"
    return block[: match.start("value")] + quoted + block[match.end("value") :], value


def _syntax_cause(message: str) -> str:
    if "could not find expected ':'" in message:
        return _MISSING_COLON
    if "mapping values are not allowed here" in message:
        return _MAPPING_NOT_ALLOWED
    return _GENERIC_SYNTAX


def load_front_matter(block: str, path: Optional[str] = None) -> dict[str, Any]:
    """Load a front-matter block (without delimiters) into an ordered dict."""
    prepared, unquoted_globs = _quote_unquoted_globs(block)
    try:
        raw = yaml.load(prepared, Loader=_FrontMatterLoader)
    except yaml.YAMLError as exc:
        line: Optional[int] = None
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
        message = str(exc)
        raise ParseError(_syntax_cause(message), message, line=line, path=path) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ParseError(
            "The front-matter must be a mapping of keys to values",
            f"got {type(raw).__name__}",
            path=path,
        )

    data = {str(key): value for key, value in raw.items()}
    if unquoted_globs is not None and GLOBS_KEY in data:
        data[GLOBS_KEY] = unquoted_globs
    return data


def parse_rule_text(text: str, path: Optional[str] = None) -> RuleDocument:
    block, body = split_front_matter(text)
    if block is None:
        return RuleDocument(front_matter={}, body=body)
    return RuleDocument(front_matter=load_front_matter(block, path=path), body=body)


def _unquote_globs(block: str) -> str:
    match = _QUOTED_GLOBS_LINE_RE.search(block)
    if match is None:
        return block

    value = match.group("value")
    if match.group("quote") == "'":
        value = value.replace("''", "'")
    elif "\\" in value:
        return block
    # Values the parser would not re-quote keep their quotes, e.g. '123'.
    if (
        not value
        or value != value.strip()
        or _keeps_yaml_form(value)
        or not _GLOB_SPECIAL_RE.search(value)
    ):
        return block
    return block[: match.start()] + match.group("key") + value + block[match.end() :]


def dump_front_matter(front_matter: Mapping[str, Any]) -> str:
    """Render the YAML lines of a front-matter block, without delimiters."""
    rendered = yaml.dump(
        dict(front_matter),
        Dumper=_FrontMatterDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=_NO_WRAP,
    )
    return _unquote_globs(rendered.rstrip("\n"))


def serialize_rule_text(front_matter: Mapping[str, Any], body: str) -> str:
    if not body.endswith("\n"):
        body = f"{body}\n"

    parts: list[str] = []
    if front_matter:
        parts.append(FRONT_MATTER_DELIMITER)
        parts.append(dump_front_matter(front_matter))
        parts.append(FRONT_MATTER_DELIMITER)

    parts.append(body)
    return "\n".join(parts).replace("\r\n", "\n")
