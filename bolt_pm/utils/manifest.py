from typing import Dict, Any, TypedDict, List
import logging

from pydantic import BaseModel, ValidationInfo, field_validator

from bolt_pm.config import (
    DEFAULT_DEPENDENCY_VERSION,
    DEFAULT_ENTRYPOINT,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_VERSION,
)
from bolt_pm.storage import ManifestStore

logger = logging.getLogger(__name__)

ENTRYPOINT_TEMPLATE = "// Main entrypoint: {entrypoint}\n\nint main() {{\n    \n    return 0;\n}}\n"


class PackageTable(TypedDict):
    name: str
    version: str
    entrypoint: str


class ManifestDocument(TypedDict):
    package: PackageTable
    dependencies: Dict[str, str]


class PackageInfo(BaseModel):
    """Build inputs read from the [package] table.

    Missing or non-string values fall back to the defaults; nothing else is
    validated.
    """

    name: str = DEFAULT_OUTPUT_NAME
    entrypoint: str = DEFAULT_ENTRYPOINT

    @field_validator("name", "entrypoint", mode="before")
    @classmethod
    def default_non_strings(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return str(v)
        return cls.model_fields[info.field_name].default


def default_manifest() -> ManifestDocument:
    """Document written by `bolt-pm new`."""
    return ManifestDocument(
        package=PackageTable(
            name=DEFAULT_PROJECT_NAME,
            version=DEFAULT_PROJECT_VERSION,
            entrypoint=DEFAULT_ENTRYPOINT,
        ),
        dependencies={},
    )


def entrypoint_stub(entrypoint: str) -> str:
    return ENTRYPOINT_TEMPLATE.format(entrypoint=entrypoint)


class ManifestManager:
    def __init__(self, store: ManifestStore):
        """Initialize the manifest manager.

        Args:
            store: Storage for the project's manifest file
        """
        self.store = store

    @property
    def exists(self) -> bool:
        return self.store.exists()

    def load(self) -> Dict[str, Any]:
        return self.store.load()

    def initialize(self) -> ManifestDocument:
        """Write a fresh default manifest.

        Callers check `exists` first; this always replaces the file.

        Returns:
            The document that was written
        """
        data = default_manifest()
        self.store.save(dict(data))
        logger.info(f"Initialized manifest at {self.store.path}")
        return data

    def add_dependency(
        self, package_name: str, version: str = DEFAULT_DEPENDENCY_VERSION
    ) -> Dict[str, Any]:
        """Add or update a dependency in the manifest.

        Other tables and keys in the document are written back untouched.

        Args:
            package_name: Name of the dependency
            version: Version string to record

        Returns:
            The updated document
        """
        data = self.store.load()
        dependencies = data.get("dependencies")
        if not isinstance(dependencies, dict):
            data["dependencies"] = {}
            # The document may store its own table type in place of the dict
            dependencies = data["dependencies"]
        if package_name in dependencies:
            logger.debug(
                f"Replacing {package_name} = {dependencies[package_name]!r} with {version!r}"
            )
        dependencies[package_name] = version
        self.store.save(data)
        return data

    def get_package_info(self, data: Dict[str, Any]) -> PackageInfo:
        package = data.get("package")
        if not isinstance(package, dict):
            return PackageInfo()
        fields = {k: package[k] for k in ("name", "entrypoint") if k in package}
        return PackageInfo(**fields)

    def get_dependency_names(self, data: Dict[str, Any]) -> List[str]:
        dependencies = data.get("dependencies")
        if not isinstance(dependencies, dict):
            return []
        return [str(name) for name in dependencies]
