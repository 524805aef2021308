"""Entity identifiers.

Every entity is keyed by a UUID.  The all-zero UUID is the "empty" id:
callers that could not resolve an id pass it along, and the business layer
rejects it before touching storage.
"""

from __future__ import annotations

import uuid
from uuid import UUID

NIL_ID = UUID(int=0)


def new_id() -> UUID:
    return uuid.uuid4()


def is_nil(value: UUID | None) -> bool:
    return value is None or value == NIL_ID
