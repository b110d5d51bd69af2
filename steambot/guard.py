"""Steam Guard code generation.

Login codes follow the TOTP dynamic-truncation scheme (RFC 4226/6238) with a
30 second step, rendered as five characters over Steam's 26-symbol alphabet.
Confirmation keys are the full HMAC-SHA1 over ``time || tag``, base64-encoded.

Everything here is pure: the only input besides the secret is the clock,
which is read on every call and can be swapped for a fixed value in tests.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import struct
import time
from collections.abc import Callable
from dataclasses import dataclass, field

CODE_ALPHABET = "23456789BCDFGHJKMNPQRTVWXY"
CODE_LENGTH = 5
TIME_STEP = 30

Clock = Callable[[], float]


class GuardDecodeError(ValueError):
    """Raised when a Steam Guard secret is not valid base64."""


def decode_secret(secret: str) -> bytes:
    """Decode a standard, padded base64 secret into raw key bytes.

    Line breaks are ignored, so secrets pasted across several lines still
    decode. Any other character outside the base64 alphabet is rejected.
    """
    cleaned = secret.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise GuardDecodeError(f"Failed to decode secret: {e}") from e


def time_counter(unix_seconds: float) -> int:
    """Return the 30-second moving factor for *unix_seconds*."""
    return int(unix_seconds // TIME_STEP)


def _int64_be(value: int) -> bytes:
    # Two's-complement wrap so negative timestamps serialize like a signed int64.
    return struct.pack(">Q", value & 0xFFFFFFFFFFFFFFFF)


def _truncate(digest: bytes) -> int:
    offset = digest[19] & 0x0F
    return (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )


def code_for_counter(secret_bytes: bytes, counter: int) -> str:
    """Render the login code for an explicit counter value.

    Digits are emitted least-significant first, which is the order Steam's
    verifier expects.
    """
    digest = hmac.new(secret_bytes, _int64_be(counter), hashlib.sha1).digest()
    value = _truncate(digest)
    chars = []
    for _ in range(CODE_LENGTH):
        value, index = divmod(value, len(CODE_ALPHABET))
        chars.append(CODE_ALPHABET[index])
    return "".join(chars)


def generate_login_code(shared_secret: str, *, clock: Clock = time.time) -> str:
    """Return the current five-character Steam Guard login code.

    Raises:
        GuardDecodeError: *shared_secret* is not valid base64.
    """
    counter = time_counter(clock())
    return code_for_counter(decode_secret(shared_secret), counter)


def generate_confirmation_key(identity_secret: str, tag: str, unix_seconds: int) -> str:
    """Return the base64 confirmation key for *tag* at *unix_seconds*.

    Common tags are ``conf``, ``details``, ``allow`` and ``cancel``; any string
    (including the empty one) is accepted.

    Raises:
        GuardDecodeError: *identity_secret* is not valid base64.
    """
    secret_bytes = decode_secret(identity_secret)
    message = _int64_be(int(unix_seconds)) + tag.encode("utf-8")
    digest = hmac.new(secret_bytes, message, hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def generate_device_id(steam_id: str) -> str:
    """Return the ``android:<uuid>`` device id the mobile endpoints expect."""
    h = hashlib.sha1(str(steam_id).encode("ascii")).hexdigest()
    return f"android:{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


@dataclass(frozen=True)
class SteamGuard:
    """The two secrets from a Steam Guard mobile authenticator."""

    shared_secret: str = field(repr=False)
    identity_secret: str = field(default="", repr=False)

    def login_code(self, *, clock: Clock = time.time) -> str:
        return generate_login_code(self.shared_secret, clock=clock)

    def confirmation_key(
        self,
        tag: str,
        unix_seconds: int | None = None,
        *,
        clock: Clock = time.time,
    ) -> str:
        if unix_seconds is None:
            unix_seconds = int(clock())
        return generate_confirmation_key(self.identity_secret, tag, unix_seconds)
