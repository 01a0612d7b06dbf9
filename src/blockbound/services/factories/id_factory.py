"""Utilities for creating deterministic instance identifiers."""
from __future__ import annotations

import uuid

from blockbound.core.rng import RNG


def make_instance_id(rng: RNG, prefix: str | None = None) -> str:
    """Generate a version-4 UUID from the provided RNG.

    Drawing the bits from the injected RNG keeps identifiers reproducible
    under a fixed seed while remaining unique in live play.
    """
    value = str(uuid.UUID(int=rng.getrandbits(128), version=4))
    if prefix:
        return f"{prefix}_{value}"
    return value
