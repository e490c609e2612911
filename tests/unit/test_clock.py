from __future__ import annotations

import datetime as dt

from app.services.clock_service import clock_rows, format_clock_line, format_offset
from storage.zones import Zone


def test_clock_rows(reference):
    zones = [Zone("NYC", "America/New_York"), Zone("Delhi", "Asia/Kolkata"), Zone("UTC", "UTC")]
    rows = clock_rows(zones, now=reference)
    assert [(row.time, row.date, row.offset) for row in rows] == [
        ("09:30:00", "Fri, Jan 16", "-05:00"),
        ("20:00:00", "Fri, Jan 16", "+05:30"),
        ("14:30:00", "Fri, Jan 16", "+00:00"),
    ]


def test_clock_line_layout(reference):
    row = clock_rows([Zone("Kathmandu", "Asia/Kathmandu")], now=reference)[0]
    assert format_clock_line(row) == "Kathmandu        20:15:00  Fri, Jan 16  (UTC+05:45)"


def test_format_offset_for_negative_half_hours():
    st_johns = dt.datetime(2026, 1, 16, tzinfo=dt.timezone(-dt.timedelta(hours=3, minutes=30)))
    assert format_offset(st_johns) == "-03:30"


def test_naive_now_is_read_as_utc():
    rows = clock_rows([Zone("Tokyo", "Asia/Tokyo")], now=dt.datetime(2026, 1, 16, 14, 30))
    assert rows[0].time == "23:30:00"
