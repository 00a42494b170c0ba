"""Li Chun year boundary and local time conversion."""

from datetime import datetime, timedelta, timezone

import pytest

from luopan.astro_calendar import (
    fengshui_year, li_chun, local_to_utc, timezone_name_for,
)

BEIJING = (39.9042, 116.4074)


class TestLiChun:

    @pytest.mark.parametrize("year,day", [(2023, 4), (2024, 4), (2025, 3)])
    def test_date(self, year, day):
        moment = li_chun(year)
        assert moment.tzinfo is timezone.utc
        assert (moment.year, moment.month, moment.day) == (year, 2, day)

    def test_2024_moment(self):
        # 2024-02-04 16:27 Beijing time
        expected = datetime(2024, 2, 4, 8, 27, tzinfo=timezone.utc)
        assert abs(li_chun(2024) - expected) < timedelta(minutes=5)


class TestFengshuiYear:

    @pytest.mark.parametrize("moment,year", [
        (datetime(2024, 1, 1), 2023),
        (datetime(2024, 2, 1), 2023),
        (datetime(2024, 2, 5), 2024),
        (datetime(2024, 12, 31, 23, 59), 2024),
        (datetime(2025, 2, 3, 12, 0), 2024),
        (datetime(2025, 2, 3, 16, 0), 2025),
    ])
    def test_naive_is_utc(self, moment, year):
        assert fengshui_year(moment) == year

    def test_aware_moment_converted(self):
        # 2025-02-04 01:00 in UTC+8 is still Feb 3 in UTC, after Li Chun
        tz = timezone(timedelta(hours=8))
        assert fengshui_year(datetime(2025, 2, 4, 1, 0, tzinfo=tz)) == 2025
        assert fengshui_year(datetime(2025, 2, 3, 20, 0, tzinfo=tz)) == 2024


class TestLocalTime:

    def test_timezone_name(self):
        assert timezone_name_for(*BEIJING) == "Asia/Shanghai"

    def test_local_to_utc(self):
        utc = local_to_utc(datetime(2025, 2, 3, 20, 0), *BEIJING)
        assert utc == datetime(2025, 2, 3, 12, 0, tzinfo=timezone.utc)

    def test_aware_input_keeps_its_offset(self):
        moment = datetime(2025, 2, 3, 16, 0, tzinfo=timezone.utc)
        utc = local_to_utc(moment, *BEIJING)
        assert utc == moment
        assert fengshui_year(utc) == 2025

        tz = timezone(timedelta(hours=-5))
        utc = local_to_utc(datetime(2025, 2, 3, 7, 0, tzinfo=tz), *BEIJING)
        assert utc == datetime(2025, 2, 3, 12, 0, tzinfo=timezone.utc)

    def test_local_year_boundary(self):
        before = local_to_utc(datetime(2025, 2, 3, 20, 0), *BEIJING)
        after = local_to_utc(datetime(2025, 2, 4, 1, 0), *BEIJING)
        assert fengshui_year(before) == 2024
        assert fengshui_year(after) == 2025
