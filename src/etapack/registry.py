"""Build-scoped registry of partials that already have an import emitted."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

log = logging.getLogger(__name__)


class DependencyRegistry:
    """Set of partial names claimed by some synthesized module.

    The first module (in processing order) that references a partial imports
    it and registers it into the shared runtime template registry; every
    later module relies on that side effect. One instance lives for the whole
    build and is never cleared.
    """

    def __init__(self):
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    def claim(self, names: Iterable[str]) -> list[str]:
        """Mark `names` as seen and return the ones not seen before.

        Input order is preserved and a name repeated within `names` is
        returned at most once. The check-and-insert for the whole batch runs
        under one lock, so concurrent transforms never both claim a name.
        """
        new_names: list[str] = []
        with self._lock:
            for name in names:
                if name in self._seen:
                    continue
                self._seen.add(name)
                new_names.append(name)

        if new_names:
            log.debug("Claimed partials: %s", ", ".join(new_names))
        return new_names

    def seen(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._seen)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)
