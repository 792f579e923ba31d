"""Tests for address and prefix validation."""

import pytest

from gre_backend.validation import validate_ipv4, validate_prefix


class TestValidateIPv4:
    @pytest.mark.parametrize("ip", ["1.2.3.4", "0.0.0.0", "255.255.255.255", "192.168.1.10"])
    def test_accepts_valid(self, ip):
        assert validate_ipv4(ip) == ip

    def test_strips_whitespace(self):
        assert validate_ipv4("  8.8.8.8\n") == "8.8.8.8"

    @pytest.mark.parametrize(
        "ip",
        ["", "1.2.3", "1.2.3.4.5", "256.1.1.1", "1.2.3.999", "a.b.c.d", "1.2.3.4/24", "1..2.3", "1234.1.1.1"],
    )
    def test_rejects_invalid(self, ip):
        with pytest.raises(ValueError, match="Invalid IPv4 address"):
            validate_ipv4(ip)


class TestValidatePrefix:
    @pytest.mark.parametrize("prefix", ["10.10.10", "192.168.77", "0.0.0", "255.255.255"])
    def test_accepts_valid(self, prefix):
        assert validate_prefix(prefix) == prefix

    @pytest.mark.parametrize("prefix", ["10.10", "10.10.10.1", "10.x.10", "", "10.10.10."])
    def test_rejects_bad_format(self, prefix):
        with pytest.raises(ValueError, match="Invalid prefix format"):
            validate_prefix(prefix)

    def test_rejects_octet_out_of_range(self):
        with pytest.raises(ValueError, match="each octet must be 0-255"):
            validate_prefix("10.300.10")
