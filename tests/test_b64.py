import pytest

from suikit.bcs.b64 import from_base64, to_base64
from suikit.errors import BcsError


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x01\x02", bytes(range(256))])
def test_round_trip(data):
    assert from_base64(to_base64(data)) == data


def test_known_encoding():
    assert to_base64(b"\x00\x01") == "AAE="


def test_accepts_bytes_input():
    assert from_base64(to_base64(b"abc").encode()) == b"abc"


def test_empty_string():
    assert from_base64("") == b""


@pytest.mark.parametrize("text", ["AAE", "A*==", "!!!!"])
def test_invalid_raises(text):
    with pytest.raises(BcsError):
        from_base64(text)