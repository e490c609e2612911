"""Regenerate core/tz/cities_generated.py from the GeoNames cities dump.

Usage:
    python -m scripts.gen_cities                      # download cities15000.zip
    python -m scripts.gen_cities --source cities.txt  # use a local extract
"""

from __future__ import annotations

import argparse
import io
import logging
import zipfile
from pathlib import Path
from typing import Iterable, Iterator

import httpx

from core.tz.citytable import build_city_table, parse_geonames_line, render_module

GEONAMES_URL = "https://download.geonames.org/export/dump/cities15000.zip"
MEMBER_SUFFIX = "cities15000.txt"
ROOT = Path(__file__).resolve().parent.parent
OUTPUT = ROOT / "core" / "tz" / "cities_generated.py"

logger = logging.getLogger(__name__)


def download_lines(url: str = GEONAMES_URL) -> Iterator[str]:
    """Fetch the GeoNames archive and yield the lines of its city listing."""
    logger.info("Downloading %s", url)
    response = httpx.get(url, timeout=120, follow_redirects=True)
    response.raise_for_status()
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        member = next((name for name in archive.namelist() if name.endswith(MEMBER_SUFFIX)), None)
        if member is None:
            raise RuntimeError(f"{MEMBER_SUFFIX} not found in {url}")
        with archive.open(member) as handle:
            for raw in io.TextIOWrapper(handle, encoding="utf-8"):
                yield raw


def read_lines(path: Path) -> Iterator[str]:
    with path.open("r", encoding="utf-8") as handle:
        yield from handle


def generate(lines: Iterable[str], output: Path, source: str) -> int:
    """Write the generated module and return the number of table entries."""
    rows = (row for row in (parse_geonames_line(line) for line in lines) if row is not None)
    table = build_city_table(rows)
    output.write_text(render_module(table, source), encoding="utf-8")
    return len(table)


def main() -> None:
    parser = argparse.ArgumentParser(prog="gen_cities")
    parser.add_argument("--source", type=Path, help="Local cities15000.txt instead of downloading")
    parser.add_argument("--output", type=Path, default=OUTPUT)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    lines = read_lines(args.source) if args.source else download_lines()
    count = generate(lines, args.output, "GeoNames cities15000")
    logger.info("Wrote %d entries to %s", count, args.output)


if __name__ == "__main__":
    main()
