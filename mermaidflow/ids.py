"""Identifier sources for subgraphs rendered without a title."""

import itertools
import uuid
from typing import Iterator


def uuid_ids(length: int = 6) -> Iterator[str]:
    """Endless short random identifiers taken from uuid4."""
    while True:
        yield uuid.uuid4().hex[:length]


def sequential_ids(prefix: str = "group") -> Iterator[str]:
    """Deterministic identifiers: group1, group2, ..."""
    for index in itertools.count(1):
        yield f"{prefix}{index}"
