"""Name pool definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class NamePoolDef:
    """A named list of words used to compose item and ability names."""

    id: str
    entries: Tuple[str, ...]
