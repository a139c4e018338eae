# tests/test_gregorian_date.py

import pytest
import random
from fractions import Fraction

from caldate import (
    CalendarDate,
    CalendarInterval,
    DecodeError,
    GregorianDate,
    GregorianMonth,
    GregorianWeekday,
    GregorianYear,
    HebrewDate,
    HebrewMonth,
    UnsupportedOperationError,
)
from caldate.gregorian.date import GregorianWeekdayDate, start_of_year


def test_reference_date():
    ref = GregorianDate.reference_date()
    assert ref == CalendarDate.hebrew(HebrewMonth.TEVET, 6, 5761, hour=6)
    assert GregorianDate(GregorianMonth.JANUARY, 1, 2001).interval_since_reference_date == CalendarInterval()


def test_start_of_year():
    assert start_of_year(2001) == CalendarInterval()
    assert start_of_year(2002) == CalendarInterval(days=365)
    assert start_of_year(2401) == CalendarInterval(gregorian_leap_year_cycles=1)
    assert start_of_year(2000) == CalendarInterval(days=-366)
    for y in range(1800, 2200):
        assert start_of_year(y + 1) - start_of_year(y) == CalendarInterval(days=GregorianYear(y).number_of_days)


def test_day_overflow_is_corrected():
    d = GregorianDate(GregorianMonth.FEBRUARY, 29, 2017)
    assert (d.month, d.day.value) == (GregorianMonth.MARCH, 1)
    d = GregorianDate(GregorianMonth.NOVEMBER, 31, 2017)
    assert (d.month, d.day.value) == (GregorianMonth.DECEMBER, 1)
    d = GregorianDate(GregorianMonth.DECEMBER, 31, 2016)
    assert (d.month, d.day.value, d.year.value) == (GregorianMonth.DECEMBER, 31, 2016)
    d = GregorianDate(GregorianMonth.FEBRUARY, 31, 2016)
    assert (d.month, d.day.value, d.year.value) == (GregorianMonth.MARCH, 2, 2016)


def test_weekdays():
    assert CalendarDate.gregorian(GregorianMonth.DECEMBER, 23, 2015).gregorian_weekday is GregorianWeekday.WEDNESDAY
    assert CalendarDate.gregorian(GregorianMonth.JULY, 5, 2017).gregorian_weekday is GregorianWeekday.WEDNESDAY
    assert CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 2001).gregorian_weekday is GregorianWeekday.MONDAY
    assert CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 1970).gregorian_weekday is GregorianWeekday.THURSDAY


def test_weekday_date():
    d = CalendarDate(GregorianWeekdayDate(1, GregorianWeekday.TUESDAY))
    assert d == CalendarDate.gregorian(GregorianMonth.JANUARY, 16, 2001)
    with pytest.raises(UnsupportedOperationError):
        d.encode()


def test_fields_round_trip():
    random.seed(42)
    for _ in range(300):
        y = random.randint(-2000, 4000)
        month = random.choice(list(GregorianMonth))
        day = random.randint(1, month.number_of_days(GregorianYear(y).is_leap_year))
        second = Fraction(random.randint(0, 59 * 4), 4)
        d = GregorianDate(month, day, y, random.randint(0, 23), random.randint(0, 59), second)
        back = GregorianDate.from_interval_since_reference_date(d.interval_since_reference_date)
        assert (back.year, back.month, back.day, back.hour, back.minute, back.second) == (
            d.year, d.month, d.day, d.hour, d.minute, d.second)


def test_hebrew_and_gregorian_agree_across_centuries():
    random.seed(42)
    for _ in range(100):
        interval = CalendarInterval(days=random.randint(-200000, 200000), hours=random.randint(0, 23))
        d = CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 2001) + interval
        assert CalendarDate(d.convert(GregorianDate)) == CalendarDate(d.convert(HebrewDate))


def test_iso_and_icalendar():
    d = CalendarDate.gregorian(GregorianMonth.JULY, 6, 2017, 2, 5, 6)
    assert d.icalendar_format() == "20170706T020506Z"
    assert d.floating_icalendar_format() == "20170706T020506"
    assert d.date_in_iso_format() == "2017-07-06"
    assert d.time_in_iso_format() == "02:05"
    assert d.time_in_iso_format(include_seconds=True) == "02:05:06"


def test_iso_from_another_calendar():
    d = CalendarDate.hebrew(HebrewMonth.TAMMUZ, 12, 5777, 0)
    assert d.date_in_iso_format() == "2017-07-05"
    assert d.time_in_iso_format() == "18:00"


def test_payload():
    d = GregorianDate(GregorianMonth.JULY, 6, 2017, 2, 5, Fraction(13, 2))
    assert d.encode_payload() == '[2017,7,6,2,5,"13/2"]'
    assert GregorianDate.decode_payload(d.encode_payload()) == d
    assert GregorianDate.decode_payload("[2017,7,6,2,5,6]") == GregorianDate(GregorianMonth.JULY, 6, 2017, 2, 5, 6)


@pytest.mark.parametrize("payload", [
    "[2017,13,1,0,0,0]",
    "[2017,7,6,2,5]",
    "[2017,7,6,2,60,0]",
    "[]",
    "[2017,7,5,0,0,NaN]",
    '[2017,7,5,0,0,"1/0"]',
])
def test_payload_errors(payload):
    with pytest.raises(DecodeError):
        GregorianDate.decode_payload(payload)


def test_text():
    d = GregorianDate(GregorianMonth.JULY, 6, 2017, 2, 5, 6)
    assert str(d) == "2017-07-06 02:05:06"
