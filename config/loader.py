"""
Loading of the clustering plugin's configuration files.

Files are read from the plugin configuration directory in a fixed order and
merged, later files overriding earlier keys.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from core.exceptions import ConfigurationFileError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = (
    "config.yml",
    "config.yaml",
    "config.json",
    "config.properties",
)

PROP_RESOURCES = "resources"

_INDEXED_KEY = re.compile(r"^(?P<base>.+)\.(?P<index>\d+)$")


class ClusteringSettings:
    """Flat, read-only key-value view over the merged configuration files."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(_flatten(values or {}))

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get_as_list(self, key: str) -> List[str]:
        """
        Return a setting as an ordered list of strings.

        Accepts a sequence value, a comma-separated string, or indexed
        keys (``key.0``, ``key.1``, ...).

        Args:
            key: Setting name

        Returns:
            List of values, empty if the key is absent
        """
        if key in self._values:
            value = self._values[key]
            if value is None:
                return []
            if isinstance(value, (list, tuple)):
                return [str(v) for v in value]
            return [part.strip() for part in str(value).split(",") if part.strip()]

        indexed = []
        for name, value in self._values.items():
            match = _INDEXED_KEY.match(name)
            if match and match.group("base") == key:
                indexed.append((int(match.group("index")), str(value)))
        return [value for _, value in sorted(indexed)]

    def __len__(self) -> int:
        return len(self._values)


def _flatten(values: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in values.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            yield from _flatten(value, f"{name}.")
        else:
            yield name, value


def _parse_properties(text: str) -> Dict[str, str]:
    """
    Parse a line-oriented properties file.

    Supported: `key=value`, `key: value` and `key value` lines, `#` and `!`
    comment lines, blank lines. Backslash line continuations and escape
    sequences are not supported; values are taken literally.
    """
    values = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        match = re.match(r"^([^=:\s]+)\s*[=:]?\s*(.*)$", line)
        if match:
            values[match.group(1)] = match.group(2)
    return values


def _read_config_file(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix in (".yml", ".yaml"):
            data = yaml.safe_load(text)
        elif path.suffix == ".json":
            data = json.loads(text)
        else:
            data = _parse_properties(text)
    except (UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationFileError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationFileError(path, "top-level value must be a mapping")
    return data


def _list_base(key: str) -> str:
    match = _INDEXED_KEY.match(key)
    return match.group("base") if match else key


def _drop_list_forms(values: Dict[str, Any], base: str) -> None:
    # A list may be written as `base` or as `base.N`; a later file replaces both forms.
    for name in [n for n in values if n == base or _list_base(n) == base]:
        del values[name]


def load_plugin_settings(plugin_config_dir: Union[str, Path]) -> ClusteringSettings:
    """
    Read and merge every configuration file present in the directory.

    Args:
        plugin_config_dir: Plugin configuration directory

    Returns:
        Merged settings (empty if no file exists)

    Raises:
        ConfigurationFileError: If a file cannot be parsed
    """
    merged: Dict[str, Any] = {}
    for name in CONFIG_FILE_NAMES:
        path = Path(plugin_config_dir) / name
        if path.exists():
            logger.debug(f"Loading clustering configuration from {path}")
            values = dict(_flatten(_read_config_file(path)))
            for key in values:
                _drop_list_forms(merged, _list_base(key))
            merged.update(values)
    return ClusteringSettings(merged)
