"""
Helpers shared by the document mappers.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

_INTERNAL_KEYS = ("_id", "__v", "id")


def _clean_value(value: Any) -> Any:
    if isinstance(value, list):
        return [v for v in value if v is not None]
    # pymongo returns naive datetimes that are UTC
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def response_fields(doc: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Prepare a stored document for response validation.

    ``_id`` becomes the string ``id`` and Mongoose's ``__v`` is dropped.
    Null values are dropped so response defaults apply, and null list
    elements are removed. Naive timestamps are marked as UTC.
    """
    fields = {
        k: _clean_value(v)
        for k, v in doc.items()
        if k not in _INTERNAL_KEYS and v is not None
    }
    fields["id"] = str(doc["_id"])
    return fields
