"""Manifest Compiler for writing object metadata documents from METS.

Thin orchestrator that delegates parsing to a Reader, correlation to the
ManifestAssembler and field layout to a ManifestLayout, then writes
``{package_name}_metadata.json``.
"""

import logging
from pathlib import Path

from mets_distiller.correlation import ManifestAssembler
from mets_distiller.exceptions import WriteError
from mets_distiller.readers import METSReader, Reader
from schemas.manifest import ObjectManifest

from .compiler import Compiler
from .layouts import ManifestLayout, get_layout

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_metadata.json"


def output_path(output_dir: Path, package_name: str) -> Path:
    """Path of the manifest written for a package."""
    return Path(output_dir) / f"{package_name}{OUTPUT_SUFFIX}"


class ManifestCompiler(Compiler):
    """Compile a METS document into an object metadata manifest.

    Orchestrates:
    1. Reader builds the PackageTree
    2. ManifestAssembler correlates it into a PackageManifest
    3. ManifestLayout renders the ObjectManifest
    4. The JSON document is written to the output directory

    Nothing is written unless every step succeeds.
    """

    def __init__(
        self,
        reader: Reader | None = None,
        assembler: ManifestAssembler | None = None,
        layout: ManifestLayout | None = None,
    ):
        self._reader = reader or METSReader()
        self._assembler = assembler or ManifestAssembler()
        self._layout = layout or get_layout()

    def compile(self, mets_path: Path, output_dir: Path) -> ObjectManifest:
        """Compile and write the manifest for a METS document.

        Args:
            mets_path: Path to the METS document
            output_dir: Directory for the manifest; created if missing

        Returns:
            The ObjectManifest that was written

        Raises:
            ManifestError: On any read, correlation or write failure
        """
        logger.info(f"Compiling manifest for {mets_path}")
        tree = self._reader.read(mets_path)
        package = self._assembler.assemble(tree)
        document = self._layout.render(package)

        target = output_path(output_dir, package.package_name)
        self._write_manifest(target, document)
        return document

    def _write_manifest(self, target: Path, document: ObjectManifest) -> None:
        """Serialize the document, then write it in one go."""
        try:
            text = document.model_dump_json(indent=2, by_alias=True, exclude_none=True)
        except ValueError as e:
            raise WriteError(f"Could not serialize manifest: {e}", target) from e

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Could not write manifest {target}: {e}", target) from e
        logger.info(f"Wrote manifest to {target}")
