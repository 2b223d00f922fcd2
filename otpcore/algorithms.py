"""
algorithms.py — the closed set of HMAC hash functions an engine can use.

RFC 6238 allows HMAC-SHA1, HMAC-SHA256 and HMAC-SHA512; authenticator apps
read the same names from the `algorithm` query parameter of the otpauth URI.
"""

import enum
import hashlib

from .exceptions import ConfigurationError


class HashAlgorithm(enum.Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digestmod(self):
        """hashlib constructor, usable as the `digestmod` of hmac.new()."""
        return _DIGESTMODS[self]

    @property
    def digest_size(self) -> int:
        return self.digestmod().digest_size

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """
        Resolve an algorithm by name, case-insensitive ("sha1", "SHA-256", ...).

        Raises:
            ConfigurationError: if the name is not one of SHA1/SHA256/SHA512
        """
        key = name.upper().replace("-", "")
        try:
            return cls(key)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported hash algorithm: {name!r}") from e


_DIGESTMODS = {
    HashAlgorithm.SHA1: hashlib.sha1,
    HashAlgorithm.SHA256: hashlib.sha256,
    HashAlgorithm.SHA512: hashlib.sha512,
}
