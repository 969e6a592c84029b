import pytest

from portscan.errors import InvalidPortRangeError
from portscan.validate import is_valid_ipv4, is_valid_port_range, normalize_ipv4, parse_port_range


class TestIPv4:
    @pytest.mark.parametrize("s", ["192.168.1.1", "0.0.0.0", "255.255.255.255", "127.0.0.1", "10.0.0.254"])
    def test_valid(self, s):
        assert is_valid_ipv4(s)

    @pytest.mark.parametrize(
        "s",
        ["256.1.1.1", "1.2.3", "1.2.3.4.5", "1.2.3.300", "a.b.c.d", "", "1..2.3", " 1.2.3.4", "example.com", "1.2.3.4\n", "\u0661.2.3.4"],
    )
    def test_invalid(self, s):
        assert not is_valid_ipv4(s)

    def test_leading_zeros_accepted(self):
        # Permissive like the original grammar: up to three digits per octet.
        assert is_valid_ipv4("01.2.3.4")
        assert is_valid_ipv4("010.002.003.004")
        assert not is_valid_ipv4("0001.2.3.4")

    def test_leading_zeros_read_as_decimal(self):
        assert normalize_ipv4("010.002.000.099") == "10.2.0.99"
        assert normalize_ipv4("192.168.1.1") == "192.168.1.1"


class TestPortRange:
    @pytest.mark.parametrize("s", ["1-65535", "2000-2000", "0-0", "99999-1", "80-22"])
    def test_syntax_valid(self, s):
        assert is_valid_port_range(s)

    @pytest.mark.parametrize("s", ["abc-1", "1-", "-1", "80", "1-2-3", "1 - 2", "", "1,2", "1-2\n", "\u0661-\u0662"])
    def test_syntax_invalid(self, s):
        assert not is_valid_port_range(s)

    def test_parse(self):
        assert parse_port_range("1-65535") == (1, 65535)
        assert parse_port_range(" 2000-2000 ") == (2000, 2000)
        assert parse_port_range("0-10") == (0, 10)

    def test_parse_rejects_bad_syntax(self):
        with pytest.raises(InvalidPortRangeError):
            parse_port_range("abc-1")

    def test_parse_rejects_out_of_range_port(self):
        # 99999 passes the syntax check but is not a port; rejected, not clamped.
        with pytest.raises(InvalidPortRangeError, match="0-65535"):
            parse_port_range("1-99999")

    def test_parse_rejects_reversed(self):
        with pytest.raises(InvalidPortRangeError, match="greater"):
            parse_port_range("2005-2000")


def test_parse_rejects_non_ascii_digits():
    with pytest.raises(InvalidPortRangeError):
        parse_port_range("\u0661-\u0662")
