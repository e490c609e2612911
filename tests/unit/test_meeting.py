from __future__ import annotations

import datetime as dt

import pytest

from app.services.convert_service import ConversionError
from app.services.meeting_service import format_meeting, plan_meeting, split_zone_list


def test_split_zone_list():
    assert split_zone_list(" NYC, London ,, Tokyo ") == ["NYC", "London", "Tokyo"]


def test_london_and_new_york_overlap(reference):
    plan = plan_meeting(["London", "NYC"], "UTC", now=reference)
    assert plan.errors == {}
    assert [item.zone_id for item in plan.zones] == ["Europe/London", "America/New_York"]
    assert plan.overlap is not None
    assert plan.overlap.start.hour == 14
    assert plan.overlap.end.hour == 17


def test_tokyo_and_new_york_do_not_overlap(reference):
    plan = plan_meeting(["Tokyo", "NYC"], "UTC", now=reference)
    assert plan.overlap is None
    assert format_meeting(plan).endswith("No overlapping business hours.")


def test_unknown_zones_are_reported_and_skipped(reference):
    plan = plan_meeting(["London", "Atlantis", "NYC"], "UTC", now=reference)
    assert list(plan.errors) == ["Atlantis"]
    assert len(plan.zones) == 2
    assert plan.overlap is not None


def test_single_resolved_zone_has_no_overlap(reference):
    plan = plan_meeting(["London", "Atlantis"], "UTC", now=reference)
    assert plan.overlap is None


def test_display_zone_shifts_rendering(reference):
    plan = plan_meeting(["London", "NYC"], "America/New_York", now=reference)
    assert plan.overlap.start.hour == 9
    assert plan.overlap.start.tzinfo.key == "America/New_York"


def test_needs_two_zones(reference):
    with pytest.raises(ConversionError, match="at least 2"):
        plan_meeting(["London", "  "], "UTC", now=reference)


def test_rejects_bad_business_hours(reference):
    with pytest.raises(ConversionError):
        plan_meeting(["London", "NYC"], "UTC", now=reference, business_hours=(17, 9))


def test_format_meeting(reference):
    plan = plan_meeting(["London", "NYC", "Atlantis"], "UTC", now=reference)
    text = format_meeting(plan)
    lines = text.splitlines()
    assert lines[0] == "Business Hours (9:00 - 17:00 local), shown in UTC:"
    assert "London         : Fri 9:00 AM - Fri 5:00 PM" in lines
    assert "NYC            : Fri 2:00 PM - Fri 10:00 PM" in lines
    assert any(line.startswith("!  Atlantis: unknown location") for line in lines)
    assert lines[-1] == "Overlap: Fri 2:00 PM - Fri 5:00 PM"


def test_each_zone_uses_its_own_local_date():
    # 01:00 UTC Saturday is still Friday evening in New York.
    now = dt.datetime(2026, 1, 17, 1, 0, tzinfo=dt.timezone.utc)
    plan = plan_meeting(["Tokyo", "NYC"], "UTC", now=now)
    tokyo, new_york = plan.zones
    assert tokyo.window.start.date() == dt.date(2026, 1, 17)
    assert new_york.window.start.date() == dt.date(2026, 1, 16)
