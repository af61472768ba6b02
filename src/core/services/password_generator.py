"""Random password generation and encoding.

The generator draws every character independently and uniformly from the
selected alphabet using `secrets.SystemRandom`. Encoding is a pure function of
the plaintext, so a stored digest can always be re-derived for verification.
"""

from __future__ import annotations

import base64
import hashlib
import logging
import secrets
import string
from dataclasses import dataclass
from typing import Protocol

from core.domain.encoding import Encoding
from core.domain.models import DEFAULT_LENGTH
from core.exceptions import PasswordGenerationError

logger = logging.getLogger(__name__)

ALPHANUMERIC = string.ascii_letters + string.digits
SYMBOLS = "~!@#$%^&*()-_+={}[]\\|<,>.?/\"';:`"
ALPHANUMERIC_SYMBOLS = ALPHANUMERIC + SYMBOLS


class RandomChoice(Protocol):
    def choice(self, seq: str) -> str: ...


@dataclass(frozen=True)
class GeneratedPassword:
    """Output of a single generation: plaintext, encoded form and effective encoding."""

    plain: str
    encoded: str
    encoding: Encoding


def alphabet_for(include_symbols: bool) -> str:
    return ALPHANUMERIC_SYMBOLS if include_symbols else ALPHANUMERIC


def encode_password(plain: str, selector: str | Encoding | None) -> tuple[str, Encoding]:
    """Apply the selected transform to `plain`.

    Digests are rendered as lowercase hex, base64 uses the standard alphabet
    with padding. Unknown or empty selectors leave the value untouched and
    report `plain`.
    """

    encoding = selector if isinstance(selector, Encoding) else Encoding.from_selector(selector)
    data = plain.encode("utf-8")

    if encoding is Encoding.SHA256:
        return hashlib.sha256(data).hexdigest(), encoding
    if encoding is Encoding.SHA512:
        return hashlib.sha512(data).hexdigest(), encoding
    if encoding is Encoding.MD5:
        return hashlib.md5(data).hexdigest(), encoding  # nosec
    if encoding is Encoding.BASE64:
        return base64.b64encode(data).decode("ascii"), encoding
    return plain, Encoding.PLAIN


def random_string(length: int, alphabet: str, *, rng: RandomChoice | None = None) -> str:
    """Draw `length` characters from `alphabet`.

    Raises `PasswordGenerationError` when the entropy source fails.
    """

    rng = rng or secrets.SystemRandom()
    try:
        return "".join(rng.choice(alphabet) for _ in range(length))
    except (OSError, NotImplementedError) as exc:
        raise PasswordGenerationError(f"random source failed: {exc}") from exc


def generate_password(
    length: int,
    include_symbols: bool,
    encoding: str | Encoding | None,
    *,
    rng: RandomChoice | None = None,
) -> GeneratedPassword:
    """Generate a password and its encoded representation.

    `length <= 0` is treated as the default length (16).
    """

    if length <= 0:
        length = DEFAULT_LENGTH

    plain = random_string(length, alphabet_for(include_symbols), rng=rng)
    encoded, effective = encode_password(plain, encoding)
    logger.debug(
        "generated password length=%d symbols=%s encoding=%s",
        length,
        include_symbols,
        effective.value,
    )
    return GeneratedPassword(plain=plain, encoded=encoded, encoding=effective)
