"""
Cataloger Registry.

Named catalogers with their capability tags. The registry is the universe
provider for selection: universe() turns it into a TaggedValueSet whose
values are cataloger names.

Each cataloger is also tagged with its own name, so "+name" and "-name"
in a selection are just add/remove by tag.

Registry document format (JSON):

    {
      "catalogers": [
        {"name": "python-package-cataloger", "tags": ["directory", "python"]},
        ...
      ]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from ..logging_config import get_logger
from .exceptions import DuplicateNameError, NotFoundError, RegistryLoadError
from .tagged import TaggedValue, TaggedValueSet

logger = get_logger(__name__)


@dataclass
class CatalogerDefinition:
    """Definition of a cataloger."""
    name: str                                       # Unique name, also used as a tag
    tags: List[str] = field(default_factory=list)   # Capability tags
    description: str = ""

    def to_tagged_value(self) -> TaggedValue[str]:
        """Tag the cataloger name with itself followed by its tags."""
        return TaggedValue(self.name, self.name, *self.tags)


class CatalogerRegistry:
    """Ordered collection of cataloger definitions, keyed by name."""

    def __init__(self, definitions: Optional[List[CatalogerDefinition]] = None):
        self._definitions: Dict[str, CatalogerDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: CatalogerDefinition) -> None:
        """
        Add a cataloger.

        Raises:
            DuplicateNameError: If the name is already registered
        """
        if definition.name in self._definitions:
            raise DuplicateNameError(definition.name)
        self._definitions[definition.name] = definition

    def get(self, name: str) -> CatalogerDefinition:
        """
        Look up a cataloger by name.

        Raises:
            NotFoundError: If no cataloger has that name
        """
        try:
            return self._definitions[name]
        except KeyError:
            raise NotFoundError(
                f"Unknown cataloger: {name}",
                resource_type="cataloger",
                resource_id=name,
            ) from None

    def names(self) -> List[str]:
        return list(self._definitions)

    def universe(self) -> TaggedValueSet[str]:
        """Build the set of all catalogers, in registration order."""
        return TaggedValueSet(d.to_tagged_value() for d in self._definitions.values())

    def __iter__(self) -> Iterator[CatalogerDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<dict>") -> "CatalogerRegistry":
        """
        Build a registry from a parsed registry document.

        Args:
            data: Document with a "catalogers" list
            source: Where the document came from, for error messages

        Raises:
            RegistryLoadError: If the document is malformed
            DuplicateNameError: If two entries share a name
        """
        if not isinstance(data, dict) or not isinstance(data.get("catalogers"), list):
            raise RegistryLoadError(
                "Registry document must be an object with a 'catalogers' list",
                path=source,
            )

        registry = cls()
        for index, entry in enumerate(data["catalogers"]):
            registry.register(_parse_entry(entry, index, source))

        logger.debug(f"Loaded {len(registry)} catalogers from {source}")
        return registry

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CatalogerRegistry":
        """
        Load a registry from a JSON file.

        Raises:
            RegistryLoadError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise RegistryLoadError(f"Cannot read registry: {e}", path=str(path)) from e
        except json.JSONDecodeError as e:
            raise RegistryLoadError(f"Invalid registry JSON: {e}", path=str(path)) from e
        except UnicodeDecodeError as e:
            raise RegistryLoadError(f"Registry is not valid UTF-8: {e}", path=str(path)) from e

        return cls.from_dict(data, source=str(path))


def _parse_entry(entry: Any, index: int, source: str) -> CatalogerDefinition:
    if not isinstance(entry, dict):
        raise RegistryLoadError(f"Entry {index} is not an object", path=source)

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise RegistryLoadError(f"Entry {index} has no name", path=source)

    tags = entry.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise RegistryLoadError(
            f"Entry {index} ({name}): tags must be a list of strings",
            path=source,
        )

    description = entry.get("description")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        raise RegistryLoadError(
            f"Entry {index} ({name}): description must be a string",
            path=source,
        )

    return CatalogerDefinition(name=name, tags=list(tags), description=description)


# =============================================================================
# BUILT-IN CATALOGERS
# =============================================================================

# Package catalogers: "image" ones read installed packages, "directory" ones
# read manifests and lock files found in a source tree.
DEFAULT_CATALOGERS: List[CatalogerDefinition] = [
    CatalogerDefinition(
        "alpm-db-cataloger", ["image", "directory", "os", "alpm", "archlinux", "package"],
        "Arch Linux pacman database",
    ),
    CatalogerDefinition(
        "apk-db-cataloger", ["image", "directory", "os", "apk", "alpine", "package"],
        "Alpine apk installed database",
    ),
    CatalogerDefinition(
        "dpkg-db-cataloger", ["image", "directory", "os", "dpkg", "debian", "package"],
        "Debian dpkg status database",
    ),
    CatalogerDefinition(
        "rpm-db-cataloger", ["image", "directory", "os", "rpm", "redhat", "package"],
        "RPM installed database",
    ),
    CatalogerDefinition(
        "go-module-binary-cataloger", ["image", "directory", "language", "go", "golang", "binary", "package"],
        "Go build info embedded in binaries",
    ),
    CatalogerDefinition(
        "go-module-file-cataloger", ["directory", "language", "go", "golang", "declared", "package"],
        "go.mod files",
    ),
    CatalogerDefinition(
        "java-archive-cataloger", ["image", "directory", "language", "java", "maven", "installed", "package"],
        "JAR, WAR and EAR archives",
    ),
    CatalogerDefinition(
        "java-pom-cataloger", ["directory", "language", "java", "maven", "declared", "package"],
        "Maven pom.xml files",
    ),
    CatalogerDefinition(
        "javascript-lock-cataloger", ["directory", "language", "javascript", "node", "npm", "declared", "package"],
        "package-lock.json, yarn.lock and pnpm-lock.yaml",
    ),
    CatalogerDefinition(
        "javascript-package-cataloger", ["image", "language", "javascript", "node", "npm", "installed", "package"],
        "Installed node_modules package.json files",
    ),
    CatalogerDefinition(
        "python-installed-package-cataloger", ["image", "directory", "language", "python", "installed", "package"],
        "Installed distributions (dist-info and egg-info)",
    ),
    CatalogerDefinition(
        "python-package-cataloger", ["directory", "language", "python", "declared", "package"],
        "requirements.txt, poetry.lock, Pipfile.lock and setup.py",
    ),
    CatalogerDefinition(
        "ruby-gemfile-cataloger", ["directory", "language", "ruby", "gem", "declared", "package"],
        "Gemfile.lock files",
    ),
    CatalogerDefinition(
        "ruby-installed-gemspec-cataloger", ["image", "directory", "language", "ruby", "gem", "installed", "package"],
        "Installed gemspec files",
    ),
    CatalogerDefinition(
        "rust-cargo-lock-cataloger", ["directory", "language", "rust", "cargo", "declared", "package"],
        "Cargo.lock files",
    ),
    CatalogerDefinition(
        "sbom-cataloger", ["declared", "sbom", "package"],
        "Packages listed in existing SBOM documents",
    ),
    # File catalogers
    CatalogerDefinition(
        "file-content-cataloger", ["file", "content"],
        "Raw file contents for configured globs",
    ),
    CatalogerDefinition(
        "file-digest-cataloger", ["file", "digest"],
        "File digests",
    ),
    CatalogerDefinition(
        "file-executable-cataloger", ["file", "binary"],
        "Executable format metadata",
    ),
    CatalogerDefinition(
        "file-metadata-cataloger", ["file", "metadata"],
        "File ownership, mode and size",
    ),
]


def default_registry() -> CatalogerRegistry:
    """Registry of the built-in catalogers."""
    return CatalogerRegistry(list(DEFAULT_CATALOGERS))
