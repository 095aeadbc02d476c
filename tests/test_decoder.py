import json

import pytest
from pydantic import ValidationError

from app.services.decoder import DecodeError, decode


def test_decode_valid_body(ticker_body):
    snap = decode(json.dumps(ticker_body))
    assert snap.last == "295000.00"
    assert snap.high == "300000.00"
    assert snap.vol == "10.5"
    assert snap.date == 1683513600


def test_decode_accepts_bytes_and_ignores_extra_keys(ticker_body):
    ticker_body["ticker"]["pair"] = "BRLBTC"
    ticker_body["extra"] = True
    snap = decode(json.dumps(ticker_body).encode())
    assert snap.sell == "295500.00"


def test_snapshot_is_immutable(ticker_body):
    snap = decode(json.dumps(ticker_body))
    with pytest.raises(ValidationError):
        snap.last = "1"


@pytest.mark.parametrize("body", [
    "not json",
    "",
    "[]",
    '"ticker"',
    "{}",
    '{"ticker": null}',
    '{"data": {}}',
])
def test_decode_rejects_bad_shape(body):
    with pytest.raises(DecodeError):
        decode(body)


@pytest.mark.parametrize("field", ["high", "low", "vol", "last", "buy", "sell", "date"])
def test_decode_rejects_missing_field(ticker_body, field):
    del ticker_body["ticker"][field]
    with pytest.raises(DecodeError):
        decode(json.dumps(ticker_body))


@pytest.mark.parametrize("field,value", [
    ("last", 295000.0),
    ("high", None),
    ("date", "1683513600"),
    ("date", 1683513600.5),
    ("date", True),
    ("date", None),
    ("date", -1),
    ("date", 10**12),
])
def test_decode_rejects_wrong_type(ticker_body, field, value):
    ticker_body["ticker"][field] = value
    with pytest.raises(DecodeError):
        decode(json.dumps(ticker_body))


def test_decode_error_is_value_error():
    assert issubclass(DecodeError, ValueError)


def test_decode_rejects_deeply_nested_body():
    with pytest.raises(DecodeError):
        decode("[" * 200000)


def test_decode_rejects_oversized_integer_literal():
    body = '{"ticker": {"date": ' + "9" * 5000 + "}}"
    with pytest.raises(DecodeError):
        decode(body)


def test_decode_accepts_last_representable_second(ticker_body):
    ticker_body["ticker"]["date"] = 253402300799
    assert decode(json.dumps(ticker_body)).date == 253402300799
