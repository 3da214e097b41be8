from datetime import date, datetime

from app.shared.utils.date_utils import calculate_age, parse_iso_date, years_before


def test_calculate_age_birthday_today_does_not_decrement():
    assert calculate_age(date(2010, 6, 15), reference=date(2026, 6, 15)) == 16


def test_calculate_age_before_birthday_decrements():
    assert calculate_age(date(2010, 6, 16), reference=date(2026, 6, 15)) == 15
    assert calculate_age(date(2010, 7, 1), reference=date(2026, 6, 15)) == 15


def test_calculate_age_after_birthday():
    assert calculate_age(date(2010, 3, 1), reference=date(2026, 6, 15)) == 16


def test_calculate_age_leap_day_birth():
    # 29 de febrero: en anos no bisiestos el cumpleanos se cuenta desde el 1 de marzo
    assert calculate_age(date(2012, 2, 29), reference=date(2026, 2, 28)) == 13
    assert calculate_age(date(2012, 2, 29), reference=date(2026, 3, 1)) == 14


def test_calculate_age_never_negative():
    assert calculate_age(date(2030, 1, 1), reference=date(2026, 6, 15)) == 0


def test_years_before_falls_back_on_leap_day():
    assert years_before(date(2024, 2, 29), 5) == date(2019, 2, 28)
    assert years_before(date(2026, 6, 15), 120) == date(1906, 6, 15)


def test_parse_iso_date_accepts_supported_shapes():
    assert parse_iso_date("2010-03-01") == date(2010, 3, 1)
    assert parse_iso_date("2010-03-01T10:30:00Z") == date(2010, 3, 1)
    assert parse_iso_date("2010-03-01 10:30") == date(2010, 3, 1)
    assert parse_iso_date(date(2010, 3, 1)) == date(2010, 3, 1)
    assert parse_iso_date(datetime(2010, 3, 1, 8, 0)) == date(2010, 3, 1)


def test_parse_iso_date_rejects_invalid_values():
    assert parse_iso_date("01/03/2010") is None
    assert parse_iso_date("2010-3-1") is None
    assert parse_iso_date("2010-02-30") is None
    assert parse_iso_date("2010-03-01X") is None
    assert parse_iso_date("") is None
    assert parse_iso_date(20100301) is None
