"""Province to wage-region lookup, loaded from config/provinces.yaml."""

from functools import lru_cache
from typing import NamedTuple

from config import load_yaml_config
from src.calculators.exceptions import InvalidInputError
from src.calculators.insurance import validate_region


class Province(NamedTuple):
    name: str
    region: int


class RegionInfo(NamedTuple):
    region: int
    label: str
    description: str


@lru_cache(maxsize=1)
def _load() -> tuple[tuple[Province, ...], tuple[RegionInfo, ...]]:
    data = load_yaml_config("provinces.yaml")
    regions = tuple(
        RegionInfo(validate_region(int(key)), value["label"], value["description"])
        for key, value in sorted(data["regions"].items())
    )
    provinces = tuple(
        Province(p["name"], validate_region(p["region"])) for p in data["provinces"]
    )
    return provinces, regions


def all_provinces() -> tuple[Province, ...]:
    return _load()[0]


def all_regions() -> tuple[RegionInfo, ...]:
    return _load()[1]


def find_provinces(query: str) -> list[Province]:
    """Case-insensitive substring search; a blank query matches nothing."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [p for p in all_provinces() if needle in p.name.lower()]


def region_for_province(name: str) -> int:
    """Return the wage region for an exact province name (case-insensitive)."""
    wanted = name.strip().lower()
    for province in all_provinces():
        if province.name.lower() == wanted:
            return province.region
    raise InvalidInputError(f"Unknown province: {name!r}")
