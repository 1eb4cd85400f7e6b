"""Map activation policy between Cursor and Windsurf front-matter."""

from __future__ import annotations

from rule_bridge.constants import DESCRIPTION_KEY, GLOBS_KEY
from rule_bridge.errors import MappingError
from rule_bridge.rules.models import CursorFrontMatter, Trigger, WindsurfFrontMatter


def map_cursor_to_windsurf(cursor: CursorFrontMatter) -> WindsurfFrontMatter:
    extra = dict(cursor.extra)

    # always_on wins over glob when both alwaysApply and globs are set.
    if cursor.always_apply is True:
        return WindsurfFrontMatter(
            trigger=Trigger.ALWAYS_ON,
            description=cursor.description or None,
            globs=cursor.globs or None,
            extra=extra,
        )
    if cursor.globs:
        return WindsurfFrontMatter(
            trigger=Trigger.GLOB,
            description=cursor.description or None,
            globs=cursor.globs,
            extra=extra,
        )
    if cursor.description:
        return WindsurfFrontMatter(
            trigger=Trigger.MODEL_DECISION,
            description=cursor.description,
            extra=extra,
        )
    return WindsurfFrontMatter(trigger=Trigger.MANUAL, extra=extra)


def _trigger(value: object) -> Trigger:
    try:
        return Trigger(value)
    except ValueError:
        raise MappingError.unknown_trigger(value) from None


def map_windsurf_to_cursor(windsurf: WindsurfFrontMatter) -> CursorFrontMatter:
    trigger = _trigger(windsurf.trigger)
    extra = dict(windsurf.extra)

    if trigger == Trigger.ALWAYS_ON:
        return CursorFrontMatter(
            always_apply=True,
            description=windsurf.description or None,
            globs=windsurf.globs or None,
            extra=extra,
        )
    if trigger == Trigger.MANUAL:
        return CursorFrontMatter(always_apply=False, extra=extra)
    if trigger == Trigger.GLOB:
        if not windsurf.globs:
            raise MappingError.missing(trigger.value, GLOBS_KEY)
        return CursorFrontMatter(
            always_apply=False,
            description=windsurf.description or None,
            globs=windsurf.globs,
            extra=extra,
        )
    if not windsurf.description:
        raise MappingError.missing(trigger.value, DESCRIPTION_KEY)
    return CursorFrontMatter(
        always_apply=False, description=windsurf.description, extra=extra
    )
