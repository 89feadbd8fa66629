from __future__ import annotations

"""
Identifier generation for new ledger entities.

Ids are short random base-36 tokens. They only need to be unique within one
household's data set, so no global uniqueness or issued-id registry is kept.
"""

import secrets
import string

_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def generate_id() -> str:
    """Return a fresh opaque identifier (9 base-36 characters)."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(ID_LENGTH))


__all__ = ["generate_id", "ID_LENGTH"]
