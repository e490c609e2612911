from __future__ import annotations

import datetime as dt
import time

from core.tparse.parser import parse_time
from core.tz.resolver import ResolutionError, default_resolver

QUERIES = ["nyc", "Berlin", "Asia/Tokyo", "sao_paulo", "asdfghjkl"]
EXPRESSIONS = ["3pm", "in 2 hours", "next monday 10:30am", "tomorrow noon", "feb 14 7pm"]


def main() -> None:
    resolver = default_resolver()
    reference = dt.datetime(2026, 1, 16, 14, 30, tzinfo=dt.timezone.utc)

    misses = 0
    start = time.time()
    for query in QUERIES:
        try:
            resolver.resolve(query)
        except ResolutionError:
            misses += 1
    resolve_ms = (time.time() - start) * 1000 / len(QUERIES)

    start = time.time()
    for text in EXPRESSIONS:
        parse_time(text, reference)
    parse_ms = (time.time() - start) * 1000 / len(EXPRESSIONS)

    print(f"resolve avg ~= {resolve_ms:.3f} ms ({misses} unresolved)")
    print(f"parse avg ~= {parse_ms:.3f} ms")


if __name__ == "__main__":
    main()
