"""Encoding selectors for generated passwords.

This module centralizes the transforms a configuration entry may request.
Keeping it in the domain layer lets the CLI, the config models and the
services share a single source of truth, including the fallback of unknown
selectors to `plain`.
"""

from __future__ import annotations

from enum import Enum


class Encoding(str, Enum):
    """Supported transforms applied to a plaintext password."""

    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"
    BASE64 = "base64"
    PLAIN = "plain"

    @classmethod
    def default(cls) -> "Encoding":
        """Return the encoding used when nothing (or something unknown) is selected."""

        return cls.PLAIN

    @classmethod
    def from_selector(cls, selector: str | None) -> "Encoding":
        """Map a configured selector to an encoding.

        Matching is exact: `"SHA256"` or `" md5"` are not recognized and fall
        back to `plain`, like an empty selector.
        """

        if not selector:
            return cls.default()
        try:
            return cls(selector)
        except ValueError:
            return cls.default()

    def is_digest(self) -> bool:
        """True for one-way hashes; base64 and plain can be turned back into the password."""

        return self in (Encoding.SHA256, Encoding.SHA512, Encoding.MD5)
