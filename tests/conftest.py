"""Shared fixtures for otpcore tests."""

import base64

import pytest

# RFC 4226 / RFC 6238 reference seeds
RFC_SEED_SHA1 = b"12345678901234567890"
RFC_SEED_SHA256 = b"12345678901234567890123456789012"
RFC_SEED_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def b32(raw: bytes) -> str:
    return base64.b32encode(raw).decode("ascii")


class FixedClock:
    """Clock stub: returns `now` until moved."""

    def __init__(self, now: float = 0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FixedClock(1111111109)


@pytest.fixture
def secret():
    return RFC_SECRET
