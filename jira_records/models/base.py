from __future__ import annotations

import re
from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, get_origin

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt, model_validator

# Jira emits "2024-01-15T10:00:00.000+0000"; RFC 3339 "Z" and "+00:00" offsets are accepted too.
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})")
_CALENDAR_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S%z")


# PUBLIC_INTERFACE
def parse_timestamp(value: Any) -> datetime:
    """
    Parse a full Jira timestamp (date, time and UTC offset) into an aware UTC datetime.

    Raises ValueError for anything else, including date-only strings and naive timestamps.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("timestamp must carry a UTC offset")
        return value.astimezone(timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {type(value).__name__}")
    if not _TIMESTAMP_RE.fullmatch(value):
        raise ValueError(f"malformed timestamp {value!r}")
    for fmt in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return parsed.astimezone(timezone.utc)
    raise ValueError(f"malformed timestamp {value!r}")


# PUBLIC_INTERFACE
def parse_calendar_date(value: Any) -> date:
    """
    Parse a calendar date of the form YYYY-MM-DD.

    Full timestamps are rejected rather than truncated.
    """
    if isinstance(value, datetime):
        raise ValueError("expected a calendar date, got a timestamp")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a calendar date string, got {type(value).__name__}")
    if not _CALENDAR_DATE_RE.fullmatch(value):
        raise ValueError(f"malformed calendar date {value!r}")
    return date.fromisoformat(value)


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]
CalendarDate = Annotated[date, BeforeValidator(parse_calendar_date)]

# Jira counters and IDs are 32-bit signed integers.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


def is_collection(annotation: Any) -> bool:
    """True when a declared field is an ordered sequence."""
    return get_origin(annotation) in (list, tuple)


class JiraRecord(BaseModel):
    """
    Base for every decoded Jira entity.

    Declared fields are strictly typed and populated only from their wire names.
    Every other key of the JSON object is kept untouched in the overflow bag,
    available as ``extra``. Records are frozen once decoded.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_required_is_missing(cls, data: Any) -> Any:
        # An explicit null for a required scalar or object is reported like an absent key.
        # Collections keep their null so it surfaces as a type error instead.
        if not isinstance(data, dict):
            return data
        nulled = {
            field.alias or name
            for name, field in cls.model_fields.items()
            if field.is_required() and not is_collection(field.annotation)
        }
        nulled = {key for key in nulled if key in data and data[key] is None}
        if not nulled:
            return data
        return {key: value for key, value in data.items() if key not in nulled}

    @property
    def extra(self) -> Mapping[str, Any]:
        """Fields present in the document but not declared by this entity, keyed by wire name."""
        return MappingProxyType(self.model_extra or {})

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to a JSON-compatible dict using wire names, overflow included."""
        return self.model_dump(mode="json", by_alias=True)
