"""Build the city -> timezone lookup table from GeoNames-style records.

GeoNames publishes one tab-separated record per populated place. Only three
columns matter here: the display name (index 1), its ASCII transliteration
(index 2) and the IANA timezone (index 17). The table keys are lowercase so the
resolver can look them up after normalising user input the same way.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

CityRow = Tuple[str, str, str]

NAME_FIELD = 1
ASCII_FIELD = 2
TIMEZONE_FIELD = 17
MIN_FIELDS = 18

CITY_SUFFIX = " city"


def parse_geonames_line(line: str) -> Optional[CityRow]:
    """Return (name, ascii_name, timezone) for one GeoNames record, or None."""
    fields = line.rstrip("\n").split("\t")
    if len(fields) < MIN_FIELDS:
        return None
    return (
        fields[NAME_FIELD].strip(),
        fields[ASCII_FIELD].strip(),
        fields[TIMEZONE_FIELD].strip(),
    )


def build_city_table(rows: Iterable[CityRow]) -> Dict[str, str]:
    """Fold rows into a lowercase name -> zone mapping.

    Later rows overwrite earlier ones for the same key. A trailing " city" is
    also registered without the suffix unless that shorter key already exists.
    """
    cities: Dict[str, str] = {}
    for name, ascii_name, timezone in rows:
        if not name or not timezone:
            continue
        name_key = name.lower()
        ascii_key = ascii_name.lower()

        cities[name_key] = timezone
        if ascii_key and ascii_key != name_key:
            cities[ascii_key] = timezone

        if name_key.endswith(CITY_SUFFIX):
            short = name_key[: -len(CITY_SUFFIX)]
            if short and short not in cities:
                cities[short] = timezone
    return cities


def render_module(table: Dict[str, str], source: str) -> str:
    """Render the table as the importable ``cities_generated`` module."""
    lines: List[str] = [
        f'"""City name to IANA timezone table generated from {source}.',
        "",
        "Generated by scripts/gen_cities.py. Do not edit by hand.",
        '"""',
        "",
        "from __future__ import annotations",
        "",
        "from types import MappingProxyType",
        "from typing import Dict, Mapping",
        "",
        "_CITIES: Dict[str, str] = {",
    ]
    for key in sorted(table):
        lines.append(f"    {key!r}: {table[key]!r},")
    lines.append("}")
    lines.append("")
    lines.append("CITIES: Mapping[str, str] = MappingProxyType(_CITIES)")
    lines.append("")
    return "\n".join(lines)
