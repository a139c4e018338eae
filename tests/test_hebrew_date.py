# tests/test_hebrew_date.py

import pytest
import random
from fractions import Fraction

from caldate import (
    CalendarDate,
    CalendarInterval,
    DecodeError,
    GregorianMonth,
    HebrewDate,
    HebrewMonth,
    HebrewWeekday,
    HebrewYear,
    UnsupportedOperationError,
)
from caldate.core._search import find_enclosing_index
from caldate.core.errors import OutOfRangeError
from caldate.hebrew.date import HebrewWeekdayDate, start_of_month


def test_epoch_is_zero():
    assert HebrewDate(HebrewMonth.TISHREI, 1, 5758).interval_since_reference_date == CalendarInterval()


def test_reference_date_unsupported():
    with pytest.raises(UnsupportedOperationError):
        HebrewDate.reference_date()


@pytest.mark.parametrize("hebrew,gregorian", [
    ((HebrewMonth.IYAR, 4, 5751, 0), (GregorianMonth.APRIL, 17, 1991, 18)),
    ((HebrewMonth.IYAR, 4, 5751, 6), (GregorianMonth.APRIL, 18, 1991, 0)),
    ((HebrewMonth.TEVET, 10, 5776, 3), (GregorianMonth.DECEMBER, 21, 2015, 21)),
    ((HebrewMonth.TAMMUZ, 12, 5777, 0), (GregorianMonth.JULY, 5, 2017, 18)),
    ((HebrewMonth.TEVET, 6, 5761, 6), (GregorianMonth.JANUARY, 1, 2001, 0)),
    ((HebrewMonth.TISHREI, 1, 5784, 6), (GregorianMonth.SEPTEMBER, 16, 2023, 0)),
    ((HebrewMonth.TISHREI, 1, 5785, 6), (GregorianMonth.OCTOBER, 3, 2024, 0)),
])
def test_known_conversions(hebrew, gregorian):
    month, day, year, hour = hebrew
    assert CalendarDate.hebrew(month, day, year, hour) == CalendarDate.gregorian(*gregorian)


def test_gregorian_to_hebrew_fields():
    d = CalendarDate.gregorian(GregorianMonth.JULY, 5, 2017, 18)
    assert d.hebrew_year == 5777
    assert d.hebrew_month is HebrewMonth.TAMMUZ
    assert d.hebrew_day == 12
    assert d.hebrew_hour == 0
    assert d.hebrew_part == 0
    assert d.hebrew_weekday is HebrewWeekday.THURSDAY


def test_weekdays():
    assert CalendarDate.hebrew(HebrewMonth.TEVET, 11, 5776).hebrew_weekday is HebrewWeekday.WEDNESDAY
    assert CalendarDate.hebrew(HebrewMonth.TISHREI, 1, 5758).hebrew_weekday is HebrewWeekday.THURSDAY
    # hour 23 is still the same Hebrew day
    assert CalendarDate.hebrew(HebrewMonth.TISHREI, 1, 5758, 23).hebrew_weekday is HebrewWeekday.THURSDAY


def test_weekday_date():
    d = CalendarDate(HebrewWeekdayDate(1, HebrewWeekday.THURSDAY))
    assert d == CalendarDate.hebrew(HebrewMonth.TISHREI, 15, 5758)
    w = CalendarDate.hebrew(HebrewMonth.TISHREI, 1, 5758).convert(HebrewWeekdayDate)
    assert w.week == -1
    assert w.weekday is HebrewWeekday.THURSDAY


def test_weekday_date_is_transient():
    d = CalendarDate(HebrewWeekdayDate(0, HebrewWeekday.SUNDAY))
    with pytest.raises(UnsupportedOperationError):
        d.encode()
    with pytest.raises(UnsupportedOperationError):
        HebrewWeekdayDate.decode_payload("[0]")


def test_day_overflow_is_corrected():
    d = HebrewDate(HebrewMonth.ADAR, 30, 5774)
    assert (d.month, d.day.value, d.year.value) == (HebrewMonth.NISAN, 1, 5774)
    d = HebrewDate(HebrewMonth.ELUL, 30, 5777)
    assert (d.month, d.day.value, d.year.value) == (HebrewMonth.TISHREI, 1, 5778)


def test_adar_follows_the_year():
    assert HebrewDate(HebrewMonth.ADAR, 1, 5784).month is HebrewMonth.ADAR_II
    assert HebrewDate(HebrewMonth.ADAR_I, 1, 5785).month is HebrewMonth.ADAR


def test_start_of_month():
    year = HebrewYear(5785)
    assert start_of_month(HebrewMonth.TISHREI, year) == CalendarInterval()
    assert start_of_month(HebrewMonth.CHESHVAN, year) == CalendarInterval(days=30)


def test_fields_round_trip():
    random.seed(42)
    for _ in range(300):
        y = random.randint(5000, 6500)
        year = HebrewYear(y)
        month = random.choice(HebrewMonth.months_of_year(year.is_leap_year))
        day = random.randint(1, month.number_of_days(year.length, year.is_leap_year))
        hour = random.randint(0, 23)
        part = Fraction(random.randint(0, 1079 * 7), 7)

        d = HebrewDate(month, day, year, hour, part)
        back = HebrewDate.from_interval_since_reference_date(d.interval_since_reference_date)
        assert (back.year, back.month, back.day, back.hour, back.part) == (year, month, d.day, d.hour, d.part)


def test_intervals_round_trip():
    random.seed(42)
    for _ in range(300):
        interval = CalendarInterval.from_units(random.randint(-10**12, 10**12))
        d = HebrewDate.from_interval_since_reference_date(interval)
        assert d.interval_since_reference_date == interval


def test_payload():
    d = HebrewDate(HebrewMonth.ADAR_I, 14, 5784, 6, Fraction(1, 2))
    assert d.encode_payload() == '[5784,"6א",14,6,"1/2"]'
    assert HebrewDate.decode_payload(d.encode_payload()) == d


@pytest.mark.parametrize("payload", [
    "not json",
    "[]",
    "[5784]",
    '{"year": 5784}',
    '[5784,"13",1,0,0]',
    '[5784,"7",1,24,0]',
    '[5784,"1",1,0,"1/0"]',
    '[5784,"1",1,0,NaN]',
    '[5784,"1",1,0,Infinity]',
])
def test_payload_errors(payload):
    with pytest.raises(DecodeError):
        HebrewDate.decode_payload(payload)


def test_bad_payload_through_calendar_date():
    with pytest.raises(DecodeError):
        CalendarDate.decode(["עברי", '[5784,"1",1,0,"1/0"]', [0, 259200]])


def test_search_walks_and_gives_up():
    assert find_enclosing_index(lambda n: n * 10, 35, guess=0) == 3
    assert find_enclosing_index(lambda n: n * 10, -35, guess=0) == -4
    with pytest.raises(OutOfRangeError):
        find_enclosing_index(lambda n: n, 10**6, guess=0)


def test_text():
    d = HebrewDate(HebrewMonth.NISAN, 15, 5785, 6, 0)
    assert str(d) == "15 Nisan 5785 6h 0p"
    assert "NISAN" in repr(d)
