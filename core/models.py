from typing import Any

# ---------------------------------------------------------------------------
# Upstream record shapes
# ---------------------------------------------------------------------------

# Records are owned by the upstream API and forwarded as decoded JSON objects.
# Keeping them as plain dicts means fields the relay does not know about reach
# the templates untouched.
#
#   TodoItem:   {"id": ..., "content": str, "completed": bool, "deleted": bool}
#   UserRecord: {"username": str}
TodoItem = dict[str, Any]
UserRecord = dict[str, Any]


def is_deleted(item: TodoItem) -> bool:
    """Soft-delete predicate. Only a literal True hides a record.

    A missing or non-boolean "deleted" field keeps the item visible; absence
    of the flag must never hide data.
    """
    return item.get("deleted") is True
