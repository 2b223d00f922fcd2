"""
uri.py — otpauth:// provisioning URIs for authenticator apps.

Format (Key Uri Format used by Google Authenticator and friends):

    otpauth://{totp|hotp}/{label}?secret=...&issuer=...&algorithm=...&counter=...&digits=...&period=...

The query keeps that fixed order. `secret` is always written; every other
parameter is left out when it holds its zero/empty value.
"""

import dataclasses
import urllib.parse

from .config import DEFAULT_DIGITS, OTPAUTH_SCHEME, TYPE_HOTP, TYPE_TOTP
from .counter import TimeCounter

# characters kept literal in the label (path segment)
_LABEL_SAFE = "$&+,/:;=@"


@dataclasses.dataclass(frozen=True)
class AuthURI:
    type: str
    label: str = ""
    secret: str = ""
    issuer: str = ""
    algorithm: str = ""
    counter: int = 0
    digits: int = 0
    period: int = 0

    def query_items(self):
        """(name, value) pairs in rendering order, empty values dropped."""
        items = [("secret", self.secret)]
        if self.issuer:
            items.append(("issuer", self.issuer))
        if self.algorithm:
            items.append(("algorithm", self.algorithm))
        if self.counter:
            items.append(("counter", str(self.counter)))
        if self.digits:
            items.append(("digits", str(self.digits)))
        if self.period:
            items.append(("period", str(self.period)))
        return items

    def render(self) -> str:
        uri = f"{OTPAUTH_SCHEME}://{self.type}"
        if self.label:
            uri += "/" + urllib.parse.quote(self.label, safe=_LABEL_SAFE)
        return uri + "?" + urllib.parse.urlencode(self.query_items())

    def __str__(self):
        return self.render()

    @classmethod
    def for_engine(cls, engine, label: str, secret: str, issuer: str = "",
                   digits: int = DEFAULT_DIGITS) -> "AuthURI":
        """
        Describe an engine's configuration.

        A TimeCounter engine yields a `totp` URI carrying its interval as
        `period`; any other counter yields a `hotp` URI carrying the
        counter's current value.
        """
        counter = engine.counter
        if isinstance(counter, TimeCounter):
            return cls(type=TYPE_TOTP, label=label, secret=secret, issuer=issuer,
                       algorithm=engine.algorithm.value, digits=digits,
                       period=counter.interval)
        return cls(type=TYPE_HOTP, label=label, secret=secret, issuer=issuer,
                   algorithm=engine.algorithm.value, counter=counter.count(),
                   digits=digits)


def render(config: AuthURI) -> str:
    return config.render()
