"""Integrity string computation."""

from __future__ import annotations

import base64
import hashlib

from srigen.models import HashAlgorithm


def compute_integrity(
    content: bytes,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA384,
) -> str:
    """Return the SRI integrity string for *content*.

    The digest is computed over the exact bytes given and encoded with
    standard base64, e.g. ``sha384-H8BRh8j48O9oYatfu5AZzq6A9RINhZO5H16dQZngK7T62em8MUt1FLm52t+eX6xO``
    for ``alert('Hello, world.');``. Unrecognized algorithms fall back to SHA-384.
    """
    algo = HashAlgorithm.parse(algorithm)
    digest = hashlib.new(algo.value, content).digest()
    return f"{algo.value}-{base64.b64encode(digest).decode('ascii')}"
