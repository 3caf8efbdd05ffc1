"""Tests for account field validation predicates."""

import pytest

from cachecompat.utils.validation import is_valid_upn, is_well_formed_url


class TestIsValidUpn:
    @pytest.mark.parametrize(
        "value",
        ["a@b.com", "lab.user@msidlab4.onmicrosoft.com", "first+tag@sub.contoso.co.uk"],
    )
    def test_accepts_local_part_at_domain(self, value):
        assert is_valid_upn(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", "user", "@contoso.com", "user@", "user@localhost", "a@b@c.com", "us er@contoso.com"],
    )
    def test_rejects_malformed(self, value):
        assert is_valid_upn(value) is False

    def test_non_string_is_false(self):
        assert is_valid_upn(None) is False  # type: ignore[arg-type]


class TestIsWellFormedUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://login.microsoftonline.com/common",
            "https://login.microsoftonline.com/f645ad92-e38d-4d1a-b510-d1b09a74a8ca/",
            "http://localhost:8080/adfs",
        ],
    )
    def test_accepts_http_urls(self, value):
        assert is_well_formed_url(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "login.microsoftonline.com/common",
            "ftp://login.example.com",
            "https://",
            "https://login example.com",
            "https://host:99999/tenant",
        ],
    )
    def test_rejects_malformed(self, value):
        assert is_well_formed_url(value) is False
