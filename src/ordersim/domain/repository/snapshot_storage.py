"""Abstract key -> value storage for whole-collection snapshots.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON files, in-memory)
live in the infrastructure layer and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SnapshotStorage(ABC):

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the stored value for *key*, or None if nothing is stored.

        Raises PersistenceUnavailable if the medium cannot be read.
        """

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Replace the value stored under *key* atomically.

        Raises PersistenceUnavailable if the medium cannot be written.
        """
