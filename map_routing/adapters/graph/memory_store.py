"""Thread-safe in-memory map store.

The store holds a single reference to an immutable GraphSnapshot.
Writers build the new snapshot outside the lock and only swap the
reference while holding it; readers only fetch the reference. Path
computations therefore run lock-free over whichever snapshot they got.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...domain.models import GraphSnapshot, Node

_EMPTY = GraphSnapshot()


@dataclass
class InMemoryGraphStore:
    """Single-slot map store with atomic whole-map replacement.

    This adapter implements GraphStorePort. Nothing is persisted; the
    map lives until the process exits or the next replacement.
    """

    _current: Optional[GraphSnapshot] = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def replace(self, nodes: Sequence[Node]) -> GraphSnapshot:
        """Replace the stored map with ``nodes``.

        No validation is done on edge targets or weights. Duplicate node
        names collapse to the last one supplied.

        Args:
            nodes: The new map's nodes.

        Returns:
            The snapshot that is now current.
        """
        snapshot = GraphSnapshot.from_nodes(nodes)

        with self._lock:
            self._current = snapshot

        self._logger.info(
            "Map replaced",
            extra={"nodes": len(snapshot), "supplied": len(nodes)},
        )
        return snapshot

    def snapshot(self) -> GraphSnapshot:
        """Return the current snapshot.

        Returns:
            The stored snapshot, or an empty one if no map was ever set.
        """
        with self._lock:
            current = self._current
        return current if current is not None else _EMPTY

    @property
    def is_set(self) -> bool:
        """Whether a map has ever been stored, even an empty one."""
        with self._lock:
            return self._current is not None

    def clear(self) -> None:
        """Drop the stored map, returning the store to its initial state."""
        with self._lock:
            self._current = None
        self._logger.debug("Map store cleared")
