from datetime import datetime, timezone

from video.domain.period import one_year_before


def test_one_year_before_keeps_calendar_date():
    moment = datetime(2024, 6, 15, 12, 30, tzinfo=timezone.utc)

    assert one_year_before(moment) == datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)


def test_one_year_before_leap_day_maps_to_feb_28():
    moment = datetime(2024, 2, 29, 8, 0, tzinfo=timezone.utc)

    assert one_year_before(moment) == datetime(2023, 2, 28, 8, 0, tzinfo=timezone.utc)
