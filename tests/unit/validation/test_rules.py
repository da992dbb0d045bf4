"""Tests for the standard rule library."""

import pytest

from tagcheck.validation import get_rule
from tagcheck.validation.rules import HASH_LENGTHS, split_host_port


def passes(name, value, *params):
    return get_rule(name)(value, *params)


class TestParameterisedRules:
    """Test rules taking parameters."""

    @pytest.mark.parametrize("value,params,expected", [
        ("5", ("1", "10"), True),
        ("1", ("1", "10"), True),
        ("10.5", ("1", "10"), False),
        ("5", ("10", "1"), True),
        ("-3", ("-5", "0"), True),
        ("abc", ("1", "10"), False),
        ("5", ("1",), False),
        ("5", ("a", "10"), False),
    ])
    def test_range(self, value, params, expected):
        assert passes("range", value, *params) is expected

    def test_length_counts_bytes(self):
        assert passes("length", "héllo", "3", "5") is False
        assert passes("length", "hello", "3", "5") is True
        assert passes("length", "123456", "3", "5") is False

    def test_runelength_counts_characters(self):
        assert passes("runelength", "héllo", "3", "5") is True
        assert passes("stringlength", "日本語", "1", "3") is True
        assert passes("stringlength", "ab", "3", "5") is False

    def test_matches(self):
        assert passes("matches", "abc123", "^[a-z]+[0-9]+$") is True
        assert passes("matches", "ABC", "^[a-z]+$") is False
        assert passes("matches", "abc", "(") is False

    def test_in(self):
        assert passes("in", "V8", "V8", "V6") is True
        assert passes("in", "V2", "V8", "V6") is False

    def test_min_and_max_length(self):
        assert passes("minlen", "abc", "3") is True
        assert passes("minlen", "ab", "3") is False
        assert passes("maxlen", "abcd", "3") is False
        assert passes("maxlen", "abc", "3") is True

    def test_min_and_max(self):
        assert passes("min", "1999", "2000") is False
        assert passes("min", "2000", "2000") is True
        assert passes("max", "10", "5") is False
        assert passes("max", "4.5", "5") is True
        assert passes("min", "many", "5") is False

    @pytest.mark.parametrize("value,divisor,expected", [
        ("10", "5", True),
        ("10", "3", False),
        ("abc", "3", False),
        ("10", "0", False),
    ])
    def test_divisibleby(self, value, divisor, expected):
        assert passes("divisibleby", value, divisor) is expected

    def test_hash(self):
        assert passes("hash", "d41d8cd98f00b204e9800998ecf8427e", "md5") is True
        assert passes("hash", "d41d8cd98f00b204e9800998ecf8427e", "MD5") is True
        assert passes("hash", "d41d8cd98f00b204e9800998ecf8427e", "sha1") is False
        assert passes("hash", "xyz", "md5") is False
        assert passes("hash", "deadbeef", "whirlpool") is False

    def test_time(self):
        assert passes("time", "18-10-2026 12:30", "%d-%m-%Y %H:%M") is True
        assert passes("time", "2026-10-18", "%d-%m-%Y %H:%M") is False


class TestTextRules:
    """Test text format rules."""

    @pytest.mark.parametrize("name,valid,invalid", [
        ("email", ["foo@bar.com", "x.y+tag@mail.example.org"],
         ["invalid.com", "foo@bar", ".foo@bar.com", "foo..bar@baz.com", "a" * 65 + "@bar.com", "foo bar@baz.com"]),
        ("url", ["http://foo.bar#com", "http://www.foo.bar/", "foobar.com", "ftp://foobar.ru/", "http://127.0.0.1/",
                 "http://localhost:3000/", "https://[::1]:8080/"], ["", "xyz://foobar.com", ".com", "http://foo bar.com"]),
        ("requrl", ["http://example.com/path"], ["/path", "example.com"]),
        ("requri", ["/path?x=1", "http://example.com"], ["relative/path", ""]),
        ("alpha", ["abc", ""], ["abc1"]),
        ("utfletter", ["日本語", "abc"], ["abc1"]),
        ("alphanum", ["abc123"], ["abc-1"]),
        ("utfletternum", ["日本語123"], ["abc 1"]),
        ("numeric", ["123"], ["12.3", "-1"]),
        ("utfnumeric", ["١٢٣", "+123", "½"], ["12+3", "abc"]),
        ("utfdigit", ["+١٢٣", "42"], ["½", "4-2"]),
        ("hexadecimal", ["deadBEEF"], ["xyz"]),
        ("hexcolor", ["#fff", "ffffff"], ["#ff", "#ggg"]),
        ("rgbcolor", ["rgb(0,31,255)", "rgb( 0 , 31 , 255 )"], ["rgb(256,0,0)", "rgb(1,349,275)"]),
        ("lowercase", ["abc"], ["aBc"]),
        ("uppercase", ["ABC"], ["AbC"]),
        ("haslowercase", ["ABc"], ["ABC"]),
        ("hasuppercase", ["abC"], ["abc"]),
        ("int", ["-12", "0"], ["012", "1.2"]),
        ("float", ["1.5", "-1e10", "3"], ["abc", ""]),
        ("null", [""], ["x"]),
        ("notnull", ["x"], [""]),
        ("json", ['{"a": 1}', "123", "[1, 2]"], ["", "{"]),
        ("multibyte", ["ひらがな", "abcア"], ["abc"]),
        ("ascii", ["abc"], ["ab©"]),
        ("printascii", ["abc ~"], ["ab\n"]),
        ("base64", ["Zm9vYmFy", "Zm9vYg=="], ["Zm9vYmF", ""]),
        ("datauri", ["data:text/plain;base64,Zm9vYmFy"], ["data:text/plain,hello", "data:text/plain;base64,Zm9vYmF"]),
        ("whitespace", ["a b"], ["ab"]),
        ("whitespaceonly", ["  \t"], [" a ", ""]),
        ("regex", ["^[a-z]+$"], ["["]),
        ("semver", ["1.2.3", "v1.0.0-alpha.1+build.5"], ["1.2", "01.2.3"]),
        ("ssn", ["123-45-6789", "123 45 6789"], ["123456789", "12-345-6789"]),
        ("latitude", ["45.5", "-90", "+90.0"], ["91", "abc"]),
        ("longitude", ["-179.9", "180"], ["181", "abc"]),
    ])
    def test_rule(self, name, valid, invalid):
        for value in valid:
            assert passes(name, value) is True, f"{name} should accept {value!r}"
        for value in invalid:
            assert passes(name, value) is False, f"{name} should reject {value!r}"


class TestNetworkRules:
    """Test network address rules."""

    @pytest.mark.parametrize("name,valid,invalid", [
        ("ip", ["10.0.0.1", "::1"], ["256.0.0.1", "abc"]),
        ("ipv4", ["10.0.0.1"], ["::1"]),
        ("ipv6", ["2001:db8::1"], ["10.0.0.1"]),
        ("cidr", ["192.168.0.0/16", "2001:db8::/32"], ["192.168.0.0", "192.168.0.0/33", "010.0.0.0/8"]),
        ("mac", ["01:23:45:67:89:ab", "01-23-45-67-89-AB", "0123.4567.89ab", "01:23:45:67:89:ab:cd:ef"],
         ["01:23:45-67:89:ab", "01:23:45:67:89", "0123.4567"]),
        ("dns", ["localhost", "example.com", "_srv.example.com"], ["a.b..com", "127.0.0.1", "", "-foo.com"]),
        ("host", ["example.com", "10.0.0.1", "::1"], ["exa mple"]),
        ("port", ["80", "65535"], ["0", "65536", "abc"]),
        ("dialstring", ["localhost:8080", "[::1]:80", "10.0.0.1:65535"], ["localhost", "localhost:0", "::1:80"]),
    ])
    def test_rule(self, name, valid, invalid):
        for value in valid:
            assert passes(name, value) is True, f"{name} should accept {value!r}"
        for value in invalid:
            assert passes(name, value) is False, f"{name} should reject {value!r}"

    def test_split_host_port(self):
        assert split_host_port("example.com:80") == ("example.com", "80")
        assert split_host_port("[::1]:443") == ("::1", "443")
        assert split_host_port("no-port") is None


class TestIdentifierRules:
    """Test identifier and checksum rules."""

    @pytest.mark.parametrize("name,valid,invalid", [
        ("uuid", ["a987fbc9-4bed-3078-cf07-9141ba07c9f3"], ["a987fbc9-4bed-3078-cf07-9141ba07c9f", "xxxa987fbc9-4bed-3078"]),
        ("uuidv3", ["a987fbc9-4bed-3078-cf07-9141ba07c9f3"], ["57b73598-8764-4ad0-a76a-679bb6640eb1"]),
        ("uuidv4", ["57b73598-8764-4ad0-a76a-679bb6640eb1"], ["a987fbc9-4bed-3078-cf07-9141ba07c9f3"]),
        ("uuidv5", ["987fbc97-4bed-5078-af07-9141ba07c9f3"], ["57b73598-8764-4ad0-a76a-679bb6640eb1"]),
        ("mongoid", ["507f1f77bcf86cd799439011"], ["507f1f77bcf86cd79943901", "507f1f77bcf86cd79943901z"]),
        ("ulid", ["01ARZ3NDEKTSV4RRFFQ69G5FAV"], ["81ARZ3NDEKTSV4RRFFQ69G5FAV", "01ARZ3NDEKTSV4RRFFQ69G5FA"]),
        ("creditcard", ["4111 1111 1111 1111", "4111-1111-1111-1111", "378282246310005"], ["4111111111111112", "1234"]),
        ("md5", ["d41d8cd98f00b204e9800998ecf8427e"], ["d41d8cd98f00b204e9800998ecf8427"]),
        ("sha1", ["da39a3ee5e6b4b0d3255bfef95601890afd80709"], ["d41d8cd98f00b204e9800998ecf8427e"]),
        ("crc32", ["deadbeef"], ["deadbee"]),
        ("e164", ["+14155552671", "14155552671"], ["+0123", "+1 415"]),
        ("imei", ["490154203237518", "35209900176148"], ["12345"]),
        ("imsi", ["310150123456789", "31015012345678"], ["999150123456789", "3101501234"]),
    ])
    def test_rule(self, name, valid, invalid):
        for value in valid:
            assert passes(name, value) is True, f"{name} should accept {value!r}"
        for value in invalid:
            assert passes(name, value) is False, f"{name} should reject {value!r}"

    @pytest.mark.parametrize("algorithm", sorted(HASH_LENGTHS))
    def test_every_hash_rule_is_registered(self, algorithm):
        name = algorithm.replace("-", "")
        assert passes(name, "a" * HASH_LENGTHS[algorithm]) is True
        assert passes(name, "a" * (HASH_LENGTHS[algorithm] + 1)) is False


class TestDateTimeRules:
    """Test date and time rules."""

    @pytest.mark.parametrize("name,valid,invalid", [
        ("rfc3339", ["2016-12-31T11:00:00Z", "2016-12-31T11:00:00.05+05:00", "2016-12-31t11:00:00z"],
         ["2016-12-31 11:00:00Z", "2016-12-31T11:00:00+25:00", "2016-13-31T11:00:00Z", "2016-12-31T11:00:00"]),
        ("rfc3339nozone", ["2016-12-31T11:00:00", "2016-12-31T11:00:00.123"], ["2016-12-31T11:00:00Z", "2016-02-30T11:00:00"]),
        ("unixtime", ["1700000000", "0"], ["-1", "12 ", "abc"]),
    ])
    def test_rule(self, name, valid, invalid):
        for value in valid:
            assert passes(name, value) is True, f"{name} should accept {value!r}"
        for value in invalid:
            assert passes(name, value) is False, f"{name} should reject {value!r}"


class TestLocaleRules:
    """Test ISO code rules."""

    @pytest.mark.parametrize("name,valid,invalid", [
        ("country2", ["US", "DE"], ["us", "XX"]),
        ("country3", ["USA", "DEU"], ["US", "XXX"]),
        ("currency", ["EUR", "USD"], ["eur", "ABC"]),
        ("language2", ["en", "de"], ["EN", "xx"]),
        ("language3", ["eng", "ger"], ["deu", "xxx"]),
    ])
    def test_rule(self, name, valid, invalid):
        for value in valid:
            assert passes(name, value) is True, f"{name} should accept {value!r}"
        for value in invalid:
            assert passes(name, value) is False, f"{name} should reject {value!r}"
