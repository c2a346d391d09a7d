"""
scrawled_core/record.py — Record base model

Every Scrawled record derives from ApplicationRecord. A subclass states
the kind of its primary key once, at class definition time:

    class Note(ApplicationRecord):
        body: str

    class LegacyCounter(ApplicationRecord):
        id_kind: ClassVar[AttributeKind] = AttributeKind.INTEGER
        value: int = 0

attribute_types() is derived from that declaration, so the identifier
assigner never sees a record whose metadata it has to guess at.

The persistence layer calls run_before_create() immediately before the
first insert. Callbacks run in declaration order.
"""

import uuid
from typing import ClassVar, Dict, Optional, Tuple, Union

from pydantic import BaseModel, model_validator

from . import identifiers
from .identifiers import AttributeKind, AttributeType


class ApplicationRecord(BaseModel):
    """Base model for all Scrawled records."""

    id_kind: ClassVar[AttributeKind] = AttributeKind.UUID
    before_create_callbacks: ClassVar[Tuple[str, ...]] = (
        "assign_uuid_if_applicable",
    )

    id: Optional[Union[str, int]] = None

    @classmethod
    def attribute_types(cls) -> Dict[str, AttributeType]:
        return {"id": AttributeType(kind=cls.id_kind)}

    @model_validator(mode="after")
    def validate_id_matches_kind(self) -> "ApplicationRecord":
        """Reject an explicit id that cannot live in the declared column."""
        if self.id is None:
            return self

        kind = type(self).id_kind
        if kind == AttributeKind.UUID:
            if not isinstance(self.id, str):
                raise ValueError(
                    f"UUID-keyed record requires a string id, got "
                    f"{type(self.id).__name__}"
                )
            try:
                canonical = str(uuid.UUID(self.id))
            except ValueError:
                raise ValueError(f"id is not a valid UUID: {self.id!r}")
            # uuid.UUID also parses urn:uuid:, braced and unhyphenated forms
            if canonical != self.id.lower():
                raise ValueError(
                    f"id must be a hyphenated 8-4-4-4-12 UUID: {self.id!r}"
                )
        elif kind == AttributeKind.INTEGER:
            if isinstance(self.id, bool) or not isinstance(self.id, int):
                raise ValueError(
                    f"Integer-keyed record requires an int id, got "
                    f"{type(self.id).__name__}"
                )
        elif kind == AttributeKind.STRING:
            if not isinstance(self.id, str):
                raise ValueError(
                    f"String-keyed record requires a string id, got "
                    f"{type(self.id).__name__}"
                )
        return self

    # ------------------------------------------------------------------
    # Lifecycle callbacks
    # ------------------------------------------------------------------

    def assign_uuid_if_applicable(self) -> None:
        identifiers.assign_uuid_if_applicable(self)

    def run_before_create(self) -> "ApplicationRecord":
        """Run every before-create callback, in order. Returns self."""
        for name in type(self).before_create_callbacks:
            getattr(self, name)()
        return self
