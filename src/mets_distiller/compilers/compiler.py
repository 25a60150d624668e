"""Base class for manifest compilers."""

from abc import ABC, abstractmethod
from pathlib import Path

from schemas.manifest import ObjectManifest


class Compiler(ABC):
    """Abstract base class for manifest compilers.

    Compilers turn a package description into an object metadata document
    and write it to an output directory.
    """

    @abstractmethod
    def compile(self, mets_path: Path, output_dir: Path) -> ObjectManifest:
        """Compile the manifest of a package.

        Args:
            mets_path: Path to the METS document
            output_dir: Directory to write the manifest into

        Returns:
            ObjectManifest that was written
        """
        pass
