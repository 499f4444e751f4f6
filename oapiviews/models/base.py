"""
Shared helpers for oapiviews models.
"""

import uuid
from datetime import datetime, timezone


def generate_uuid() -> str:
    """Generate a new UUID4 string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def capitalize(name: str) -> str:
    """
    Capitalize a name: first letter upper case, the remainder lower case.

    Unlike ``str.capitalize`` this leaves an empty string untouched and is
    the exact rule used for view titles.
    """
    if not name:
        return name
    return name[:1].upper() + name[1:].lower()
