from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo

from app.utils.time_windows import TimeWindow, business_window, common_overlap, make_window

UTC = dt.timezone.utc
DAY = dt.date(2026, 1, 16)


def utc(hour: int, day: int = 16) -> dt.datetime:
    return dt.datetime(2026, 1, day, hour, tzinfo=UTC)


def test_make_window_orders_and_normalises():
    naive_start = dt.datetime(2026, 1, 16, 12)
    window = make_window(utc(14), naive_start)
    assert window.start == utc(12)
    assert window.end == utc(14)
    assert window.duration == 7200


def test_intersection_of_disjoint_windows_is_none():
    morning = TimeWindow(utc(8), utc(10))
    evening = TimeWindow(utc(18), utc(20))
    assert not morning.intersects(evening)
    assert morning.intersection(evening) is None


def test_touching_windows_do_not_intersect():
    assert not TimeWindow(utc(8), utc(10)).intersects(TimeWindow(utc(10), utc(12)))


def test_business_window_in_new_york_winter():
    window = business_window(ZoneInfo("America/New_York"), DAY, 9, 17)
    assert window.start == utc(14)
    assert window.end == utc(22)


def test_business_window_follows_daylight_saving():
    summer = business_window(ZoneInfo("Europe/London"), dt.date(2026, 7, 1), 9, 17)
    assert summer.start == dt.datetime(2026, 7, 1, 8, tzinfo=UTC)


def test_business_window_until_midnight():
    window = business_window(ZoneInfo("Europe/Berlin"), DAY, 18, 24)
    assert window.start == utc(17)
    assert window.end == utc(23)


def test_common_overlap_london_and_new_york():
    london = business_window(ZoneInfo("Europe/London"), DAY, 9, 17)
    new_york = business_window(ZoneInfo("America/New_York"), DAY, 9, 17)
    overlap = common_overlap([london, new_york])
    assert overlap == TimeWindow(utc(14), utc(17))


def test_common_overlap_tokyo_and_new_york_is_empty():
    tokyo = business_window(ZoneInfo("Asia/Tokyo"), DAY, 9, 17)
    new_york = business_window(ZoneInfo("America/New_York"), DAY, 9, 17)
    assert common_overlap([tokyo, new_york]) is None


def test_common_overlap_edge_cases():
    assert common_overlap([]) is None
    single = TimeWindow(utc(9), utc(10))
    assert common_overlap([single]) == single
    disjoint = [TimeWindow(utc(8), utc(10)), TimeWindow(utc(11), utc(12)), TimeWindow(utc(8), utc(12))]
    assert common_overlap(disjoint) is None


def test_window_renders_in_display_zone():
    window = TimeWindow(utc(14), utc(17)).astimezone(ZoneInfo("Asia/Kolkata"))
    assert (window.start.hour, window.start.minute) == (19, 30)
    assert window.duration == 3 * 3600
