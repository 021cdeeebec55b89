"""EntityIdGenerator - string ids for catalog and log entries.

Ids are millisecond timestamps rendered as strings, bumped when two ids are
requested within the same millisecond so they stay unique and increasing
for the lifetime of the generator.
"""

import time
from typing import Callable, Optional


class EntityIdGenerator:
    """Generate unique, increasing string ids.

    Examples:
        >>> ids = EntityIdGenerator(clock=lambda: 1700000000.0)
        >>> ids.next_id(), ids.next_id()
        ('1700000000000', '1700000000001')
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.time
        self._last = 0

    def next_id(self) -> str:
        """Return a fresh id, never equal to a previously returned one."""
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)
