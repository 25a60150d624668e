"""Output layouts for the object metadata document.

One layout per manifest schema version. Both render the same
PackageManifest; they differ only in where the identification block lives
and whether files carry descriptive metadata.
"""

from abc import ABC, abstractmethod

from schemas.manifest import Identifier, ObjectManifest, PackageManifest, ScanManifest

CURRENT_SCHEMA_VERSION = "0.2.0"
LEGACY_SCHEMA_VERSION = "0.1.0"


class ManifestLayout(ABC):
    """Abstract base class for output layouts.

    Attributes:
        schema_version: Value written to the document's schema_version
    """

    schema_version: str

    @abstractmethod
    def render(self, package: PackageManifest) -> ObjectManifest:
        """Render an assembled package as an object metadata document.

        Args:
            package: Result of the manifest assembler

        Returns:
            ObjectManifest in this layout
        """
        pass

    def _document(self, package: PackageManifest, **blocks) -> ObjectManifest:
        return ObjectManifest(
            title=package.title,
            collection_call=package.collection_call,
            bagging_date=package.bagging_date,
            description=package.description,
            storage_location=package.package_name,
            file_count=package.file_count,
            schema_version=self.schema_version,
            **blocks,
        )

    def _scan_block(self, package: PackageManifest, files) -> ScanManifest:
        """Identification block; identifiers always holds one empty entry."""
        scan = package.scan
        return ScanManifest(
            siegfried=scan.version if scan else "",
            scandate=scan.scandate if scan else "",
            identifiers=[Identifier()],
            files=files,
        )


class CurrentLayout(ManifestLayout):
    """Schema 0.2.0: identification block under "manifest", with descriptiveMD.

    An empty "tar_techMD" block is written alongside it.
    """

    schema_version = CURRENT_SCHEMA_VERSION

    def render(self, package: PackageManifest) -> ObjectManifest:
        return self._document(
            package,
            tar_tech_md=ScanManifest(),
            manifest=self._scan_block(package, package.files),
        )


class LegacyLayout(ManifestLayout):
    """Schema 0.1.0: identification block under "tar_techMD", no descriptiveMD."""

    schema_version = LEGACY_SCHEMA_VERSION

    def render(self, package: PackageManifest) -> ObjectManifest:
        files = [f.model_copy(update={"descriptive_md": None}) for f in package.files]
        return self._document(package, tar_tech_md=self._scan_block(package, files))


LAYOUTS: dict[str, type[ManifestLayout]] = {
    CURRENT_SCHEMA_VERSION: CurrentLayout,
    LEGACY_SCHEMA_VERSION: LegacyLayout,
}


def get_layout(schema_version: str = CURRENT_SCHEMA_VERSION) -> ManifestLayout:
    """Return the layout for a schema version.

    Raises:
        ValueError: If the version is not one of LAYOUTS
    """
    try:
        return LAYOUTS[schema_version]()
    except KeyError:
        supported = ", ".join(sorted(LAYOUTS))
        raise ValueError(
            f"Unsupported schema version {schema_version!r} (supported: {supported})"
        ) from None
