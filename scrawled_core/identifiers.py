"""
scrawled_core/identifiers.py — Primary key assignment

Records keyed by UUID get a UUID v7 immediately before their first
insert, unless the caller already chose an id. Records keyed by
anything else are left to the database.

The assigner relies on a minimal surface only:
- the record's class exposes attribute_types(), an optional mapping
  of attribute name -> descriptor with a `kind`
- the record exposes a settable `id`

Missing, partial or malformed type metadata is a silent no-op. A record that
ends up without an id is rejected by the storage layer, not here.
"""

import inspect
from collections.abc import Mapping
from enum import Enum
from types import FunctionType
from typing import Any, Callable

from pydantic import BaseModel

from .uuid7 import uuid7


class AttributeKind(str, Enum):
    """Declared kind of a record column."""
    UUID = "uuid"
    INTEGER = "integer"
    STRING = "string"


class AttributeType(BaseModel):
    """Type descriptor for one record attribute."""
    kind: AttributeKind


def assign_uuid_if_applicable(
    record: Any,
    generate: Callable[[], str] = uuid7,
) -> None:
    """Give a UUID-keyed record a UUID v7 id if it has none yet.

    Never overwrites an existing id and never raises on missing
    metadata.
    """
    record_cls = type(record)
    lookup = getattr(record_cls, "attribute_types", None)
    if lookup is None or not callable(lookup):
        return
    # A plain function here is an instance method; it needs a class-level lookup.
    if isinstance(inspect.getattr_static(record_cls, "attribute_types"), FunctionType):
        return

    attribute_types = lookup()
    if not isinstance(attribute_types, Mapping):
        return

    id_type = attribute_types.get("id")
    if id_type is None:
        return
    if getattr(id_type, "kind", None) != AttributeKind.UUID:
        return

    if record.id is None:
        record.id = generate()
