"""Codec contracts.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Keeps the set of formats closed and each codec interchangeable and testable
  on its own, with no file access involved.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.formats import Format
from core.domain.models import Zoo


@runtime_checkable
class ZooCodec(Protocol):
    """Minimal contract for an encoding.

    Design rules:
    - `encode` and `decode` are pure: bytes in, bytes out, no I/O.
    - `decode` raises `MalformedInput` for anything it cannot read back.
    """

    format: Format

    def encode(self, zoo: Zoo) -> bytes:
        """Render `zoo` as the bytes of a complete document."""

        ...

    def decode(self, data: bytes) -> Zoo:
        """Parse a complete document back into a `Zoo`."""

        ...
