"""
Scrawled Core — record identity for the Scrawled application.

UUID v7 primary keys are assigned to UUID-keyed records immediately
before their first insert.
"""

__version__ = "0.1.0"

from .uuid7 import uuid7, is_uuid7, uuid7_timestamp_ms, uuid7_datetime
from .identifiers import (
    AttributeKind,
    AttributeType,
    assign_uuid_if_applicable,
)
from .record import ApplicationRecord
