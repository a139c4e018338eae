# tests/test_serialization.py

import json
import logging
import pytest
from fractions import Fraction

from caldate import (
    CalendarDate,
    CalendarInterval,
    DecodeError,
    GregorianMonth,
    HebrewMonth,
    RelativeDate,
    UnknownDate,
    UnsupportedOperationError,
    decode_fields,
    encode_fields,
    list_definitions,
    register_definition,
    reset_registry,
)
from caldate.core import registry
from caldate.core.registry import DefinitionRegistry
from caldate.hebrew.date import HebrewDate


class DaysIntoMillennium:
    identifier = "test.DaysIntoMillennium"

    def __init__(self, days):
        self.days = Fraction(days)

    @classmethod
    def reference_date(cls):
        return CalendarDate.gregorian(GregorianMonth.JANUARY, 1, 2001)

    @property
    def interval_since_reference_date(self):
        return CalendarInterval(days=self.days)

    @classmethod
    def from_interval_since_reference_date(cls, interval):
        return cls(interval.in_days)

    def encode_payload(self):
        return encode_fields([str(self.days)])

    @classmethod
    def decode_payload(cls, payload):
        (days,) = decode_fields(payload, length=1)
        return cls(Fraction(days))


@pytest.fixture
def fresh_registry():
    reset_registry()
    yield registry.get_registry()
    reset_registry()


def test_builtin_definitions_registered():
    assert list_definitions() == sorted(["עברי", "gregoriano", "posix", "Δ"])


def test_encoding_shape():
    d = CalendarDate.hebrew(HebrewMonth.TISHREI, 1, 5758)
    assert d.encode() == ["עברי", '[5758,"1",1,0,0]', [0, 259200]]
    assert json.loads(d.to_json()) == d.encode()
    assert "עברי" in d.to_json()


@pytest.mark.parametrize("date", [
    CalendarDate.hebrew(HebrewMonth.ADAR_II, 14, 5784, 7, Fraction(3, 5)),
    CalendarDate.gregorian(GregorianMonth.FEBRUARY, 29, 2016, 23, 59, Fraction(119, 2)),
    CalendarDate.from_timestamp(Fraction(1499277600, 1) + Fraction(1, 3)),
    CalendarDate.from_hebrew(5785) + CalendarInterval(days=3, hebrew_parts=7),
])
def test_builtin_round_trip(date):
    back = CalendarDate.from_json(date.to_json())
    assert back == date
    assert type(back.definition) is type(date.definition)
    assert back.encode() == date.encode()


def test_relative_payload_nests_base():
    base = CalendarDate.hebrew(HebrewMonth.TISHREI, 1, 5758)
    d = base + CalendarInterval(days=1)
    identifier, payload, instant = d.encode()
    assert identifier == "Δ"
    assert json.loads(payload) == [[259200, 259200], base.encode()]
    assert instant == [259200, 259200]
    decoded = CalendarDate.decode(d.encode())
    assert isinstance(decoded.definition, RelativeDate)
    assert decoded.definition.base == base


def test_unknown_definition_round_trips(fresh_registry, caplog):
    original = CalendarDate(DaysIntoMillennium(10))
    encoded = original.encode()

    with caplog.at_level(logging.WARNING, logger="caldate.core.date"):
        decoded = CalendarDate.from_json(original.to_json())
    assert "test.DaysIntoMillennium" in caplog.text

    assert isinstance(decoded.definition, UnknownDate)
    assert decoded == original
    assert decoded.encode() == encoded
    assert decoded.gregorian_day == 11
    assert (decoded + CalendarInterval(days=1)).gregorian_day == 12


def test_unknown_date_is_opaque():
    u = UnknownDate("x", "[1]", CalendarInterval(days=1))
    assert u.encode_payload() == "[1]"
    with pytest.raises(UnsupportedOperationError):
        UnknownDate.from_interval_since_reference_date(CalendarInterval())
    with pytest.raises(UnsupportedOperationError):
        UnknownDate.decode_payload("[1]")
    assert CalendarDate(u).encode() == ["x", "[1]", [259200, 259200]]


def test_registration_makes_definition_decodable(fresh_registry):
    original = CalendarDate(DaysIntoMillennium(Fraction(1, 2)))
    assert isinstance(CalendarDate.decode(original.encode()).definition, UnknownDate)

    register_definition(DaysIntoMillennium)
    decoded = CalendarDate.decode(original.encode())
    assert isinstance(decoded.definition, DaysIntoMillennium)
    assert decoded.definition.days == Fraction(1, 2)
    assert decoded == original


def test_registry_rules(caplog):
    reg = DefinitionRegistry()
    with caplog.at_level(logging.DEBUG, logger="caldate.core.registry"):
        reg.register(HebrewDate)
    assert "Registered" in caplog.text
    reg.register(HebrewDate)
    assert reg.list() == ["עברי"]

    class Impostor(DaysIntoMillennium):
        identifier = "עברי"

    with pytest.raises(KeyError):
        reg.register(Impostor)
    reg.register(Impostor, overwrite=True)
    assert reg.get("עברי") is Impostor
    reg.register(DaysIntoMillennium, identifier="days")
    assert "days" in reg
    assert reg.resolve("missing") is None
    with pytest.raises(KeyError):
        reg.get("missing")


def test_registry_must_be_initialized():
    saved = registry.get_registry()
    registry.set_registry(None)
    try:
        with pytest.raises(RuntimeError):
            registry.get_registry()
    finally:
        registry.set_registry(saved)


@pytest.mark.parametrize("value", [
    "x",
    ["עברי", '[5758,"1",1,0,0]'],
    [1, '[5758,"1",1,0,0]', [0, 259200]],
    ["עברי", ["not", "a", "string"], [0, 259200]],
    ["עברי", "[]", [0, 259200]],
    ["עברי", '[5758,"1",1,0,0]', "bad"],
    ["gregoriano", "[2017,7,6]", [0, 259200]],
])
def test_decode_errors(value):
    with pytest.raises(DecodeError):
        CalendarDate.decode(value)


def test_from_json_rejects_non_json():
    with pytest.raises(DecodeError):
        CalendarDate.from_json("{")


def test_decode_fields():
    assert decode_fields("[1,2]", length=2) == [1, 2]
    with pytest.raises(DecodeError, match="Empty container array"):
        decode_fields("[]")
    with pytest.raises(DecodeError):
        decode_fields('"x"')


def test_reset_drops_custom_definitions(fresh_registry):
    register_definition(DaysIntoMillennium)
    assert "test.DaysIntoMillennium" in list_definitions()
    reset_registry()
    assert "test.DaysIntoMillennium" not in list_definitions()
