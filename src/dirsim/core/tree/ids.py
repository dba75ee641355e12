from __future__ import annotations

"""
Node Identity Generator.

Each namespace owns one generator, so identities are strictly increasing
within a namespace and reproducible from a seed.
"""

from dirsim.domain.constants import DEFAULT_ID_SEED


class IdGenerator:
    """Hands out consecutive integer ids starting at the seed."""

    def __init__(self, seed: int = DEFAULT_ID_SEED):
        if seed < 0:
            raise ValueError(f"Id seed must be non-negative, received {seed}.")
        self._next = seed

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to next_id() will produce."""
        return self._next
