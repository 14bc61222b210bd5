from __future__ import annotations

import copy
import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from ..models.base import JiraRecord
from ..models.query import QueryResult

logger = logging.getLogger(__name__)

PathItem = Union[str, int]
Document = Union[str, bytes, bytearray, Mapping[str, Any]]
RecordT = TypeVar("RecordT", bound=JiraRecord)


def format_path(path: Sequence[PathItem]) -> str:
    """Render a location such as ("issues", 0, "fields") as issues[0].fields."""
    rendered = ""
    for item in path:
        if isinstance(item, int):
            rendered += f"[{item}]"
        else:
            rendered += f".{item}" if rendered else str(item)
    return rendered


class DecodeError(Exception):
    """
    PUBLIC_INTERFACE
    A Jira document could not be decoded into records.

    Carries the wire path of the failing value, the entity declaring it and the
    declared field name, so callers can decide whether to skip, retry or abort.
    """

    kind = "DecodeError"

    def __init__(
        self,
        message: str,
        path: Sequence[PathItem] = (),
        entity: Optional[str] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.path = tuple(path)
        self.entity = entity
        self.field = field
        location = format_path(self.path)
        super().__init__(f"{location}: {message}" if location else message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "path": format_path(self.path),
            "entity": self.entity,
            "field": self.field,
        }


class ShapeMismatch(DecodeError):
    """A present value does not convert to its declared type."""

    kind = "ShapeMismatch"


class MissingRequiredField(DecodeError):
    """A required field is absent or null."""

    kind = "MissingRequiredField"


class MalformedDocument(DecodeError):
    """The input is not a JSON object: invalid UTF-8 or JSON, non-finite numbers, or nesting too deep to parse."""

    kind = "MalformedDocument"


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _locate(model: Type[BaseModel], loc: Sequence[PathItem]) -> Tuple[str, Optional[str]]:
    """Walk a pydantic error location and return the innermost (entity, field) it names."""
    entity, field_name = model.__name__, None
    current: Any = model
    for item in loc:
        current = _unwrap_optional(current)
        if isinstance(item, int):
            args = get_args(current)
            if not args:
                break
            current = args[0]
            continue
        if not (isinstance(current, type) and issubclass(current, BaseModel)):
            break
        entity = current.__name__
        for name, info in current.model_fields.items():
            if (info.alias or name) == item:
                field_name, current = name, info.annotation
                break
        else:
            field_name = item
            break
    return entity, field_name


def translate_validation_error(model: Type[BaseModel], exc: ValidationError) -> DecodeError:
    """Turn the first pydantic error into the matching DecodeError."""
    error = exc.errors(include_url=False)[0]
    loc = tuple(error["loc"])
    entity, field_name = _locate(model, loc)
    if error["type"] == "missing":
        return MissingRequiredField(error["msg"], path=loc, entity=entity, field=field_name)
    return ShapeMismatch(error["msg"], path=loc, entity=entity, field=field_name)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


# PUBLIC_INTERFACE
def load_document(document: Document) -> Dict[str, Any]:
    """Parse JSON text (or accept an already decoded mapping) and require an object at the root."""
    if isinstance(document, (bytes, bytearray)):
        try:
            document = document.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocument(f"document is not valid UTF-8: {exc}") from exc
    if isinstance(document, str):
        try:
            document = json.loads(document, parse_constant=_reject_constant)
        except ValueError as exc:
            raise MalformedDocument(f"document is not valid JSON: {exc}") from exc
        except RecursionError as exc:
            raise MalformedDocument("document is nested too deeply") from exc
    elif isinstance(document, Mapping):
        # Decoded records must not share mutable values with the caller's mapping.
        try:
            document = copy.deepcopy(document)
        except RecursionError as exc:
            raise MalformedDocument("document is nested too deeply") from exc
    if not isinstance(document, Mapping):
        raise MalformedDocument(f"expected a JSON object at the document root, got {type(document).__name__}")
    return dict(document)


# PUBLIC_INTERFACE
def decode_record(model: Type[RecordT], document: Document) -> RecordT:
    """
    Decode a document into one record type.

    Decoding is all-or-nothing: the first failing field raises ShapeMismatch or
    MissingRequiredField and no partial record is returned.
    """
    data = load_document(document)
    try:
        return model.model_validate(data)
    except RecursionError as exc:
        raise MalformedDocument("document is nested too deeply") from exc
    except ValidationError as exc:
        error = translate_validation_error(model, exc)
        logger.debug("Failed to decode %s: %s (%s)", model.__name__, error, error.kind)
        raise error from exc


# PUBLIC_INTERFACE
def decode_query_result(document: Document) -> QueryResult:
    """Decode a JQL search response body into a QueryResult."""
    result = decode_record(QueryResult, document)
    logger.debug("Decoded query result with %d issues", len(result.issues))
    return result
