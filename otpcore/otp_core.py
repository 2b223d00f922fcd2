"""
otp_core.py — HOTP / TOTP code engine (RFC 4226 / RFC 6238).

Overview:
- RFC helpers (pure functions): decode_secret, int_to_bytes, dynamic_truncate.
- HOTP: the engine. Holds one Counter and one HashAlgorithm, generates codes
  for an explicit count and verifies a candidate across a skew window around
  the counter's current value.
- new_totp / default_totp: factories for time-based engines.

Security notes:
- Callers own secret storage and, for HOTP, counter persistence.
- No rate limiting is done here; wrap verify_code() if attempts must be capped.
"""

import base64
import binascii
import hmac
import logging
import struct

import pyotp

from .algorithms import HashAlgorithm
from .config import (
    DEFAULT_DIGITS,
    DEFAULT_SKEW,
    DEFAULT_T0,
    DEFAULT_TIME_STEP,
    SECRET_BYTES,
)
from .counter import Clock, Counter, TimeCounter
from .exceptions import ConfigurationError, DecodeError

logger = logging.getLogger(__name__)

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


# --- RFC helpers -----------------------------------------------------------
def decode_secret(secret_b32: str) -> bytes:
    """
    Base32-decode a shared secret (case-insensitive, standard alphabet).

    Padding is not added: the text must already be a valid base32 string,
    '=' padding included where its length requires it.

    Raises:
        DecodeError: characters outside A-Z2-7 or invalid padding
    """
    try:
        return base64.b32decode(secret_b32.upper())
    except (binascii.Error, ValueError) as e:
        logger.warning("Rejected malformed base32 secret (length %d)", len(secret_b32))
        raise DecodeError() from e


def int_to_bytes(i: int) -> bytes:
    """
    8-byte big-endian counter, as RFC 4226 requires.

    Negative counts are encoded as their 64-bit two's complement, so
    int_to_bytes(-1) == b'\\xff' * 8.
    """
    return struct.pack(">Q", i & _UINT64_MASK)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    RFC 4226 dynamic truncation.

    offset = low nibble of the last byte; the 4 bytes at offset are read
    big-endian with the top bit cleared, giving a 31-bit unsigned integer.
    """
    offset = hmac_digest[-1] & 0x0F
    return (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )


def random_base32() -> str:
    """Fresh 160-bit base32 secret for provisioning a new authenticator."""
    # pyotp takes the length in base32 characters: 8 chars per 5 bytes
    return pyotp.random_base32(length=SECRET_BYTES * 8 // 5)


# --- Engine ----------------------------------------------------------------
class HOTP:
    """
    HOTP engine bound to a counter source and a hash algorithm.

    Immutable after construction; every call is a pure function of its
    arguments plus the counter's current value.
    """

    def __init__(self, counter: Counter, algorithm: HashAlgorithm = HashAlgorithm.SHA1):
        if not isinstance(algorithm, HashAlgorithm):
            algorithm = HashAlgorithm.from_name(algorithm)
        self._counter = counter
        self._algorithm = algorithm

    @property
    def counter(self) -> Counter:
        return self._counter

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    def generate_code(self, key: str, count: int, digits: int = DEFAULT_DIGITS) -> str:
        """
        Generate the code for an explicit counter value.

        Steps:
        1. Base32-decode key -> raw key bytes
        2. Message = 8-byte big-endian count
        3. HMAC(key, message) with the engine's algorithm
        4. Dynamic truncate -> 31-bit integer
        5. otp = value % 10^digits, zero-padded to `digits` characters

        Arguments:
            key: base32 secret
            count: HOTP counter (or TOTP time step)
            digits: code length

        Raises:
            DecodeError: if key is not valid base32
            ConfigurationError: if digits < 1
        """
        if digits < 1:
            raise ConfigurationError(f"digits must be a positive integer, got {digits}")

        raw_key = decode_secret(key)
        digest = hmac.new(raw_key, int_to_bytes(count), self._algorithm.digestmod).digest()
        code = dynamic_truncate(digest) % (10 ** digits)
        logger.debug("Generated %s code: count=%d digits=%d", self._algorithm.value, count, digits)
        return str(code).zfill(digits)

    def now(self, key: str, digits: int = DEFAULT_DIGITS) -> str:
        """Code for the counter source's current value."""
        return self.generate_code(key, self._counter.count(), digits)

    def verify_code(self, code: str, key: str, skew: int = DEFAULT_SKEW,
                    digits: int = DEFAULT_DIGITS) -> bool:
        """
        Check a candidate code against the counter's current value.

        The current count is tried first, then count-i and count+i for
        i in 1..skew-1. A skew of N therefore tolerates N-1 steps of drift
        on each side; skew=1 (or 0) accepts the current step only.

        A malformed key is reported as a mismatch (False), never raised.
        """
        current = self._counter.count()
        offsets = [0]
        for i in range(1, skew):
            offsets.extend((-i, i))

        for offset in offsets:
            try:
                expected = self.generate_code(key, current + offset, digits)
            except DecodeError:
                return False
            if hmac.compare_digest(expected.encode(), code.encode()):
                logger.debug("Code matched at offset %+d from count %d", offset, current)
                return True
        return False

    def __repr__(self):
        return f"HOTP(counter={self._counter!r}, algorithm={self._algorithm.value})"


def new_totp(algorithm: HashAlgorithm = HashAlgorithm.SHA1,
             interval: int = DEFAULT_TIME_STEP,
             step: int = DEFAULT_T0,
             clock: Clock = None) -> HOTP:
    """
    Build a time-based engine.

    Arguments:
        algorithm: HMAC hash function
        interval: step length X in seconds
        step: epoch offset T0 in seconds
        clock: optional clock override (see TimeCounter)
    """
    return HOTP(TimeCounter(interval=interval, step=step, clock=clock), algorithm)


def default_totp() -> HOTP:
    """SHA-1, 30-second steps, T0 = 0."""
    return new_totp(HashAlgorithm.SHA1, DEFAULT_TIME_STEP, DEFAULT_T0)
