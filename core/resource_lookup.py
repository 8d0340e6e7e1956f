"""
Resource lookup implementations: filesystem directories and bundled package data.
"""

from importlib import resources
from pathlib import Path
from typing import BinaryIO, List, Sequence

from interfaces.iresource_lookup import IResourceLookup


class PathResourceLookup(IResourceLookup):
    """Looks resources up in an ordered list of directories; the first hit wins."""

    def __init__(self, locations: Sequence[Path]):
        """
        Initialize the lookup.

        Args:
            locations: Directories searched in order
        """
        self._locations: List[Path] = [Path(p) for p in locations]

    @property
    def locations(self) -> List[Path]:
        return list(self._locations)

    def _resolve(self, name: str) -> Path:
        for location in self._locations:
            candidate = location / name
            if candidate.is_file():
                return candidate
        raise FileNotFoundError(
            f"Resource '{name}' not found in any of: {self.describe()}"
        )

    def exists(self, name: str) -> bool:
        return any((location / name).is_file() for location in self._locations)

    def open(self, name: str) -> BinaryIO:
        return self._resolve(name).open("rb")

    def describe(self) -> str:
        return ", ".join(str(p) for p in self._locations)

    def __repr__(self) -> str:
        return f"PathResourceLookup({self.describe()})"


class BundledResourceLookup(IResourceLookup):
    """Reads resources shipped as package data."""

    def __init__(self, package: str):
        self._package = package

    def exists(self, name: str) -> bool:
        return resources.files(self._package).joinpath(name).is_file()

    def open(self, name: str) -> BinaryIO:
        resource = resources.files(self._package).joinpath(name)
        if not resource.is_file():
            raise FileNotFoundError(
                f"Bundled resource '{name}' not found in package {self._package}"
            )
        return resource.open("rb")

    def describe(self) -> str:
        return f"package:{self._package}"

    def __repr__(self) -> str:
        return f"BundledResourceLookup({self._package!r})"
