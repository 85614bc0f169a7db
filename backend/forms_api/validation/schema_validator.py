"""
Schema validation — required fields first, then one rule check per field type.

``validate()`` walks the fields in declared order and reports at most one
message per field.  A failed required check stops further checks for
that field only; the loop itself never stops early.  Within a rule check
the rules run in a fixed order and the last failing rule's message is the
one reported (e.g. for text, maxLength overrides minLength).

Only a missing key or ``""`` fails the required check.  Everything else,
an explicit null included, goes on to the field type's rule check, and
each check decides for itself what a missing or null value means.

Every ``FieldType`` must have an entry in ``_RULE_CHECKS``; importing this
module fails otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, timezone
from typing import Any

from forms_api.core.constants import FieldType
from forms_api.schema.fields import FieldDefinition

ErrorMap = dict[str, str]

# Marks a key the record does not contain, as opposed to an explicit null
MISSING: Any = object()

RuleCheck = Callable[[FieldDefinition, Any], str | None]


def validate(fields: Sequence[FieldDefinition], record: Mapping[str, Any]) -> ErrorMap:
    """
    Validate a submission record against an ordered field list.

    Keys in ``record`` that no field declares are ignored.  Returns a
    mapping of field name to error message; an empty mapping means the
    record is valid.  Pure: no I/O and no mutation of either argument.
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"Submission record must be a mapping, got {type(record).__name__}")

    errors: ErrorMap = {}
    for field in fields:
        value = record.get(field.name, MISSING)

        if field.required and _is_blank(value):
            errors[field.name] = f"{field.label} is required"
            continue

        message = _RULE_CHECKS[field.type](field, value)
        if message is not None:
            errors[field.name] = message

    return errors


def _is_blank(value: Any) -> bool:
    return value is MISSING or (isinstance(value, str) and value == "")


# ─── Rule checks, one per field type ──────────────────

def _check_text(field: FieldDefinition, value: Any) -> str | None:
    # null reads as empty; lists are measured by item count
    if value is None:
        value = ""
    if not isinstance(value, (str, list, tuple)):
        return None

    rules = field.constraints
    message = None
    if rules.min_length is not None and len(value) < rules.min_length:
        message = f"At least {rules.min_length} characters required"
    if rules.max_length is not None and len(value) > rules.max_length:
        message = f"Max {rules.max_length} characters allowed"
    return message


def _check_number(field: FieldDefinition, value: Any) -> str | None:
    number = _as_number(value)
    if number is None:
        return None

    rules = field.constraints
    message = None
    if rules.min is not None and number < rules.min:
        message = f"Minimum allowed value is {rules.min}"
    if rules.max is not None and number > rules.max:
        message = f"Maximum allowed value is {rules.max}"
    return message


def _check_select(field: FieldDefinition, value: Any) -> str | None:
    if value not in (field.options or ()):
        return "Invalid option selected"
    return None


def _check_multi_select(field: FieldDefinition, value: Any) -> str | None:
    if not isinstance(value, (list, tuple)):
        return None

    rules = field.constraints
    message = None
    if rules.min_selected is not None and len(value) < rules.min_selected:
        message = f"Select at least {rules.min_selected} items"
    if rules.max_selected is not None and len(value) > rules.max_selected:
        message = f"Select at most {rules.max_selected} items"
    return message


def _check_date(field: FieldDefinition, value: Any) -> str | None:
    min_date = field.constraints.min_date
    if min_date is None:
        return None

    submitted = _parse_datetime(value)
    floor = _parse_datetime(min_date)
    if submitted is None or floor is None:
        return None
    if submitted < floor:
        return f"Date must be after {min_date}"
    return None


def _no_type_rules(field: FieldDefinition, value: Any) -> str | None:
    return None


_RULE_CHECKS: dict[FieldType, RuleCheck] = {
    FieldType.TEXT: _check_text,
    FieldType.NUMBER: _check_number,
    FieldType.SELECT: _check_select,
    FieldType.MULTI_SELECT: _check_multi_select,
    FieldType.DATE: _check_date,
    # textarea length rules are declared for the client but not enforced here
    FieldType.TEXTAREA: _no_type_rules,
    FieldType.SWITCH: _no_type_rules,
}

_unhandled = set(FieldType) - _RULE_CHECKS.keys()
if _unhandled:
    raise RuntimeError(
        f"No rule check registered for field type(s): {', '.join(sorted(_unhandled))}"
    )


# ─── Value coercion helpers ───────────────────────────

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_number(value: Any) -> int | float | None:
    """
    Coerce a submitted value the way a loosely typed client compares it.

    Numbers pass through, booleans count as 0/1, null and blank strings as 0,
    numeric strings are parsed.  Anything else (including a missing key) is None.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        if not value.strip():
            return 0
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _parse_datetime(value: Any) -> datetime | None:
    """
    Parse an ISO-8601 date or datetime; naive values are taken as UTC.

    null parses as the epoch.  Unparseable values and a missing key give None.
    """
    if value is None:
        return _EPOCH
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
