"""Base class for package readers."""

from abc import ABC, abstractmethod
from pathlib import Path

from schemas.mets import PackageTree


class Reader(ABC):
    """Abstract base class for package readers.

    Readers deserialize a package description into the typed PackageTree
    consumed by the correlation engine.
    """

    @abstractmethod
    def read(self, path: Path) -> PackageTree:
        """Read a package description.

        Args:
            path: Path to the source document

        Returns:
            PackageTree with every sequence in document order
        """
        pass
