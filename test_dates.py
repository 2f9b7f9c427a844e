from datetime import date, datetime

from training_plan.dates import (
    add_days, compare_iso, iso_week_key, next_annual_date, next_monday_or_same, today_iso,
)


def test_add_days_crosses_month_and_year():
    assert add_days('2025-01-30', 3) == '2025-02-02'
    assert add_days('2025-01-01', -1) == '2024-12-31'


def test_add_days_over_dst_change():
    # Europe switches to summer time on the last Sunday of March
    assert add_days('2025-03-29', 1) == '2025-03-30'
    assert add_days('2025-03-29', 2) == '2025-03-31'


def test_iso_week_key_uses_thursday_year():
    assert iso_week_key('2025-01-06') == '2025-W02'
    assert iso_week_key('2024-12-30') == '2025-W01'
    assert iso_week_key('2021-01-03') == '2020-W53'
    assert iso_week_key(date(2025, 1, 6)) == '2025-W02'


def test_next_monday_or_same():
    assert next_monday_or_same('2025-01-06') == '2025-01-06'
    assert next_monday_or_same('2025-01-07') == '2025-01-13'
    assert next_monday_or_same('2025-01-12') == '2025-01-13'


def test_next_annual_date_before_and_after():
    assert next_annual_date(8, 1, datetime(2025, 7, 31, 23, 59)) == '2025-08-01'
    assert next_annual_date(8, 1, datetime(2025, 8, 2, 0, 1)) == '2026-08-01'


def test_next_annual_date_boundary_rolls_forward():
    assert next_annual_date(8, 1, datetime(2025, 8, 1, 12, 0)) == '2026-08-01'
    assert next_annual_date(8, 1, date(2025, 8, 1)) == '2026-08-01'


def test_next_annual_date_leap_day():
    assert next_annual_date(2, 29, date(2025, 3, 1)) == '2028-02-29'


def test_today_and_compare():
    assert today_iso(datetime(2025, 1, 6, 23, 30)) == '2025-01-06'
    assert compare_iso('2025-01-06', '2025-01-07') == -1
    assert compare_iso('2025-01-07', '2025-01-07') == 0
    assert compare_iso('2025-02-01', '2025-01-31') == 1
