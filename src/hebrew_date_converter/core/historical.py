"""Historical override table for dates outside trusted calendar range."""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

import yaml

from hebrew_date_converter.core.entities import GregorianDate, HebrewDate, HistoricalEntry

DEFAULT_TABLE_RESOURCE = "historical_dates.yaml"


class HistoricalTable:
    """Read-only exact-match lookup keyed by "{year}-{month}-{day}"."""

    def __init__(self, entries: Mapping[str, HistoricalEntry]) -> None:
        self._entries: Mapping[str, HistoricalEntry] = MappingProxyType(dict(entries))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, str]]) -> "HistoricalTable":
        """Build table from {key: {"hebrew": ..., "gregorian": "d/m/y"}}."""
        entries = {}
        for key, value in raw.items():
            key = str(key)
            entries[key] = HistoricalEntry(
                key=key,
                hebrew_formatted=value["hebrew"],
                gregorian=GregorianDate.from_formatted(value["gregorian"]),
            )
        return cls(entries)

    @classmethod
    def from_yaml(cls, path: Path) -> "HistoricalTable":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_mapping(yaml.safe_load(f) or {})

    def lookup(self, date: HebrewDate) -> Optional[HistoricalEntry]:
        return self._entries.get(date.lookup_key)

    def get(self, key: str) -> Optional[HistoricalEntry]:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[HistoricalEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=1)
def load_historical_table() -> HistoricalTable:
    """Load the packaged table once per process."""
    resource = resources.files("hebrew_date_converter").joinpath("data").joinpath(DEFAULT_TABLE_RESOURCE)
    raw = yaml.safe_load(resource.read_text(encoding="utf-8")) or {}
    return HistoricalTable.from_mapping(raw)
