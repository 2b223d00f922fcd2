"""Exceptions raised by otpcore."""


class OTPError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(OTPError, ValueError):
    """The shared secret is not valid base32 text."""

    def __init__(self, message: str = "Invalid Base32 secret"):
        super().__init__(message)


class ConfigurationError(OTPError, ValueError):
    """An engine, counter or call parameter is out of range."""
