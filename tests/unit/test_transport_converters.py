import pytest

from redis_schema.converters import decode_json_payload, decode_redis_value, encode_json_payload
from redis_schema.exceptions import DataError


def test_decode_redis_value_handles_bytes_and_passthrough():
    assert decode_redis_value(b"abc") == "abc"
    assert decode_redis_value("abc") == "abc"
    assert decode_redis_value(5) == 5
    assert decode_redis_value(None) is None


def test_encode_json_payload_is_compact_text():
    assert encode_json_payload({"a": [1, True, None]}) == '{"a":[1,true,null]}'
    assert encode_json_payload(123) == "123"


def test_encode_json_payload_rejects_unserializable_values():
    with pytest.raises(DataError):
        encode_json_payload(object())


def test_decode_json_payload_treats_none_as_missing():
    assert decode_json_payload(None) is None


@pytest.mark.parametrize("raw", ["", b""])
def test_decode_json_payload_rejects_empty_text(raw):
    with pytest.raises(DataError) as exc_info:
        decode_json_payload(raw)
    assert exc_info.value.payload == ""


def test_decode_json_payload_parses_text_and_bytes():
    assert decode_json_payload("[1,2]") == [1, 2]
    assert decode_json_payload(b'"x"') == "x"
    assert decode_json_payload(7) == 7


def test_decode_json_payload_rejects_invalid_json():
    with pytest.raises(DataError) as exc_info:
        decode_json_payload("{nope")
    assert exc_info.value.payload == "{nope"
