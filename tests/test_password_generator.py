import base64
import hashlib
import re

import pytest

from core.domain.encoding import Encoding
from core.exceptions import PasswordGenerationError
from core.services.password_generator import (
    ALPHANUMERIC,
    ALPHANUMERIC_SYMBOLS,
    SYMBOLS,
    encode_password,
    generate_password,
)

HEX = re.compile(r"^[0-9a-f]+$")


@pytest.mark.parametrize("length", [1, 8, 16, 64, 257])
def test_plaintext_has_requested_length(length):
    generated = generate_password(length, False, "")
    assert len(generated.plain) == length


@pytest.mark.parametrize("length", [0, -1, -100])
def test_non_positive_length_defaults_to_16(length):
    assert len(generate_password(length, True, "").plain) == 16


def test_alphanumeric_only_without_symbols():
    plain = generate_password(512, False, "").plain
    assert set(plain) <= set(ALPHANUMERIC)


def test_symbols_alphabet_is_superset():
    assert set(ALPHANUMERIC) < set(ALPHANUMERIC_SYMBOLS)
    assert set(SYMBOLS).isdisjoint(ALPHANUMERIC)
    plain = generate_password(2048, True, "").plain
    assert set(plain) <= set(ALPHANUMERIC_SYMBOLS)
    # 2048 draws over 94 chars: missing every symbol is practically impossible
    assert set(plain) & set(SYMBOLS)


@pytest.mark.parametrize(
    "selector, algorithm, size",
    [("sha256", hashlib.sha256, 64), ("sha512", hashlib.sha512, 128), ("md5", hashlib.md5, 32)],
)
def test_digest_encodings(selector, algorithm, size):
    generated = generate_password(20, True, selector)
    assert generated.encoding is Encoding(selector)
    assert generated.encoded == algorithm(generated.plain.encode("utf-8")).hexdigest()
    assert len(generated.encoded) == size
    assert HEX.match(generated.encoded)


def test_base64_round_trips():
    generated = generate_password(33, True, "base64")
    assert generated.encoding is Encoding.BASE64
    assert base64.b64decode(generated.encoded, validate=True).decode("utf-8") == generated.plain


@pytest.mark.parametrize("selector", ["", None, "plain", "rot13", "SHA256", " md5"])
def test_unrecognized_selector_is_plain(selector):
    generated = generate_password(12, False, selector)
    assert generated.encoding is Encoding.PLAIN
    assert generated.encoded == generated.plain


def test_encoding_is_deterministic():
    assert encode_password("hunter2", "sha256") == encode_password("hunter2", "sha256")
    assert encode_password("hunter2", "md5") == ("2ab96390c7dbe3439de74d0c9b0b1767", Encoding.MD5)
    assert encode_password("hunter2", "base64") == ("aHVudGVyMg==", Encoding.BASE64)


def test_injected_rng_is_used(fixed_rng):
    assert generate_password(5, False, "", rng=fixed_rng).plain == "aaaaa"


def test_random_source_failure_raises(failing_rng):
    with pytest.raises(PasswordGenerationError) as excinfo:
        generate_password(8, False, "", rng=failing_rng)
    assert isinstance(excinfo.value.__cause__, OSError)
