#!/usr/bin/env python3
"""
Scrawled Record Identity Demo

Walks a few records through the before-create hook that a persistence
layer runs immediately before the first insert.

Flow:
  1. A UUID-keyed note with no id gets a fresh UUID v7
  2. A note imported with an id keeps it
  3. An integer-keyed counter is left for the database to number
  4. Notes created in sequence sort by creation time

Run:
    python examples/demo_records.py
"""

import os
import sys
import time
from typing import ClassVar

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scrawled_core import ApplicationRecord, AttributeKind, uuid7_datetime


class Note(ApplicationRecord):
    body: str


class PageView(ApplicationRecord):
    id_kind: ClassVar[AttributeKind] = AttributeKind.INTEGER
    path: str


def show(label: str, record: ApplicationRecord) -> None:
    print(f"  {label:28s} id={record.id}")


def main() -> None:
    print("━━━ 1. New UUID-keyed record ━━━")
    note = Note(body="First scrawl")
    show("before run_before_create", note)
    note.run_before_create()
    show("after run_before_create", note)
    print(f"  embedded time: {uuid7_datetime(note.id).isoformat()}")

    print("\n━━━ 2. Imported record keeps its id ━━━")
    imported = Note(id="2f1c0e3a-9b8d-4c7e-a6f5-1d2e3f4a5b6c", body="Imported")
    imported.run_before_create()
    show("after run_before_create", imported)

    print("\n━━━ 3. Integer-keyed record ━━━")
    view = PageView(path="/")
    view.run_before_create()
    show("after run_before_create", view)

    print("\n━━━ 4. Creation order ━━━")
    notes = []
    for i in range(3):
        notes.append(Note(body=f"Scrawl {i}").run_before_create())
        time.sleep(0.002)
    for n in sorted(notes, key=lambda n: n.id):
        show(n.body, n)


if __name__ == "__main__":
    main()
