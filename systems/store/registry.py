"""
Series Registry - bidirectional lookup between legacy series names and values.

The registries are built once, when this module is first imported, from the
builtin table plus an optional YAML file (config.series_file). They are
never modified afterwards. A value registered under two series names, or a
series name defined twice, is a broken table: construction raises
DuplicateSeriesError and the import fails.

YAML file format:

    jammy: ubuntu/22.04
    centos9: centos/centos9/stable
"""

import logging
from pathlib import Path
from typing import Dict, Generic, Hashable, Iterator, List, Mapping, Optional, Tuple, TypeVar

import yaml

from systems.config import config
from systems.errors import DuplicateSeriesError, NotValidError
from systems.engine.parser import must_parse
from systems.models.base import Base
from systems.models.system import System
from systems.store.builtin import BUILTIN_SERIES


logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class SeriesRegistry(Generic[V]):
    """
    Read-only series <-> value mapping.

    Lookup works both ways: lookup() by series name, reverse_lookup() by
    value. Values must be hashable (Base and System are frozen models).
    """

    def __init__(self, entries: Mapping[str, V]):
        """
        Build the registry.

        Args:
            entries: Series name to value

        Raises:
            DuplicateSeriesError: If two series map to equal values
        """
        self._by_series: Dict[str, V] = dict(entries)
        self._by_value: Dict[V, str] = {}
        for series, value in self._by_series.items():
            existing = self._by_value.get(value)
            if existing is not None:
                raise DuplicateSeriesError(f"duplicate value for series {series!r} and {existing!r}: {value!r}")
            self._by_value[value] = series
        logger.debug("Built series registry with %d entries", len(self._by_series))

    def lookup(self, series: str) -> Optional[V]:
        return self._by_series.get(series)

    def reverse_lookup(self, value: V) -> Optional[str]:
        return self._by_value.get(value)

    def series(self) -> List[str]:
        """Sorted series names."""
        return sorted(self._by_series)

    def items(self) -> Iterator[Tuple[str, V]]:
        return iter(self._by_series.items())

    def __contains__(self, series: object) -> bool:
        return series in self._by_series

    def __len__(self) -> int:
        return len(self._by_series)


def load_series_file(path: Path) -> Dict[str, Base]:
    """
    Load extra series from a YAML mapping of series name to "os/channel".

    Args:
        path: Path to the YAML file

    Returns:
        Series name to Base

    Raises:
        ValueError: If the file is not a mapping of strings, or an entry is
            not a valid base
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid series file {path}: expected a mapping of series to os/channel")

    entries: Dict[str, Base] = {}
    for series, value in data.items():
        if not isinstance(series, str) or not isinstance(value, str):
            raise ValueError(f"Invalid series entry in {path}: {series!r}: {value!r}")
        try:
            entries[series] = Base.from_string(value)
        except NotValidError as e:
            raise ValueError(f"Invalid series {series!r} in {path}: {e}") from e
    logger.debug("Loaded %d series from %s", len(entries), path)
    return entries


def builtin_bases() -> Dict[str, Base]:
    return {
        series: Base(name=os_name, channel=must_parse(channel))
        for series, (os_name, channel) in BUILTIN_SERIES.items()
    }


def build_series_registry(extra_file: Optional[Path] = None) -> SeriesRegistry[Base]:
    """
    Build the Base registry from the builtin table and an optional YAML file.

    Raises:
        DuplicateSeriesError: If the file redefines a series or duplicates a base
    """
    entries = builtin_bases()
    if extra_file is not None:
        for series, base in load_series_file(extra_file).items():
            if series in entries:
                raise DuplicateSeriesError(f"series {series!r} from {extra_file} is already defined")
            entries[series] = base
    return SeriesRegistry(entries)


def system_registry(bases: SeriesRegistry[Base]) -> SeriesRegistry[System]:
    """Derive the System registry from a Base registry."""
    return SeriesRegistry({series: System.from_base(base) for series, base in bases.items()})


BASE_REGISTRY = build_series_registry(config.series_file)
SYSTEM_REGISTRY = system_registry(BASE_REGISTRY)
