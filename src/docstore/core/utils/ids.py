"""Identifier generation for new documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 in canonical string form."""
    return str(uuid4())
