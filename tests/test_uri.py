"""
Tests for otpauth:// provisioning URIs
======================================
"""

import dataclasses
import urllib.parse

import pytest

from otpcore import AuthURI, HashAlgorithm, StaticCounter, HOTP, new_totp, render


class TestRender:

    def test_totp_example(self):
        """Should carry secret and issuer with otpauth scheme and totp host."""
        uri = AuthURI(type="totp", label="alice@example.com",
                      secret="JBSWY3DPEHPK3PXP", issuer="Example")
        parts = urllib.parse.urlsplit(str(uri))
        query = urllib.parse.parse_qs(parts.query)

        assert parts.scheme == "otpauth"
        assert parts.netloc == "totp"
        assert parts.path == "/alice@example.com"
        assert query["secret"] == ["JBSWY3DPEHPK3PXP"]
        assert query["issuer"] == ["Example"]

    def test_full_field_order(self):
        uri = AuthURI(type="totp", label="Example:alice", secret="JBSWY3DPEHPK3PXP",
                      issuer="Example", algorithm="SHA256", digits=8, period=60)
        assert uri.render() == (
            "otpauth://totp/Example:alice?secret=JBSWY3DPEHPK3PXP"
            "&issuer=Example&algorithm=SHA256&digits=8&period=60"
        )

    def test_hotp_counter(self):
        uri = AuthURI(type="hotp", label="bob", secret="JBSWY3DPEHPK3PXP",
                      algorithm="SHA1", counter=42, digits=6)
        assert render(uri) == (
            "otpauth://hotp/bob?secret=JBSWY3DPEHPK3PXP&algorithm=SHA1&counter=42&digits=6"
        )

    def test_zero_and_empty_fields_omitted(self):
        uri = AuthURI(type="hotp", label="bob", secret="ABC")
        assert str(uri) == "otpauth://hotp/bob?secret=ABC"

    def test_secret_always_present(self):
        assert AuthURI(type="totp", label="bob").render() == "otpauth://totp/bob?secret="

    def test_empty_label(self):
        assert AuthURI(type="totp", secret="ABC").render() == "otpauth://totp?secret=ABC"

    def test_label_path_escaping(self):
        uri = AuthURI(type="totp", label="My Co:alice smith/#1", secret="ABC")
        assert uri.render().startswith("otpauth://totp/My%20Co:alice%20smith/%231?")

    def test_query_values_percent_encoded(self):
        uri = AuthURI(type="totp", label="a", secret="ABC", issuer="Acme & Sons=1")
        rendered = uri.render()
        assert rendered.endswith("issuer=Acme+%26+Sons%3D1")
        query = urllib.parse.parse_qs(urllib.parse.urlsplit(rendered).query)
        assert query["issuer"] == ["Acme & Sons=1"]

    def test_frozen(self):
        uri = AuthURI(type="totp", secret="ABC")
        with pytest.raises(dataclasses.FrozenInstanceError):
            uri.secret = "XYZ"


class TestForEngine:

    def test_time_based_engine(self):
        engine = new_totp(HashAlgorithm.SHA256, 60, 0)
        uri = AuthURI.for_engine(engine, "alice", "JBSWY3DPEHPK3PXP", issuer="Example", digits=8)
        assert uri.type == "totp"
        assert uri.render() == (
            "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP"
            "&issuer=Example&algorithm=SHA256&digits=8&period=60"
        )

    def test_counter_based_engine(self):
        engine = HOTP(StaticCounter(7))
        uri = AuthURI.for_engine(engine, "alice", "JBSWY3DPEHPK3PXP")
        assert uri.type == "hotp"
        assert uri.counter == 7
        assert uri.period == 0
        assert uri.render() == (
            "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&algorithm=SHA1&counter=7&digits=6"
        )
