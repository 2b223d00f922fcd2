"""
otpcore package
===============

HOTP / TOTP one-time password generation and verification (RFC 4226 &
RFC 6238), plus otpauth:// provisioning URIs.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- HOTP: code = Truncate(HMAC(key=secret, msg=counter)) mod 10^digits
- TOTP: HOTP with counter = floor((timestamp - T0) / X), X = 30s by default
- Dynamic truncation: 4 bytes at offset (last byte & 0x0F), top bit cleared

──────────────────────────────────────────────
Quick example
──────────────────────────────────────────────
>>> from otpcore import default_totp, AuthURI
>>> engine = default_totp()
>>> code = engine.now("JBSWY3DPEHPK3PXP")
>>> engine.verify_code(code, "JBSWY3DPEHPK3PXP", skew=2)
True
>>> str(AuthURI.for_engine(engine, "alice@example.com", "JBSWY3DPEHPK3PXP", issuer="Example"))
'otpauth://totp/alice@example.com?secret=JBSWY3DPEHPK3PXP&issuer=Example&algorithm=SHA1&digits=6&period=30'
"""

import logging

from .algorithms import HashAlgorithm
from .config import DEFAULT_DIGITS, DEFAULT_SKEW, DEFAULT_T0, DEFAULT_TIME_STEP
from .counter import Counter, StaticCounter, TimeCounter
from .exceptions import ConfigurationError, DecodeError, OTPError
from .otp_core import (
    HOTP,
    decode_secret,
    default_totp,
    dynamic_truncate,
    int_to_bytes,
    new_totp,
    random_base32,
)
from .uri import AuthURI, render

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AuthURI",
    "ConfigurationError",
    "Counter",
    "DEFAULT_DIGITS",
    "DEFAULT_SKEW",
    "DEFAULT_T0",
    "DEFAULT_TIME_STEP",
    "DecodeError",
    "HOTP",
    "HashAlgorithm",
    "OTPError",
    "StaticCounter",
    "TimeCounter",
    "decode_secret",
    "default_totp",
    "dynamic_truncate",
    "int_to_bytes",
    "new_totp",
    "random_base32",
    "render",
]
