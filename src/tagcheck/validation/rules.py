"""Standard rule library.

Each predicate is pure: it looks only at the rendered field value and the rule
parameters. Importing this module registers every rule in the default registry.
"""

import base64
import binascii
import ipaddress
import json
import logging
import re
import unicodedata
from datetime import datetime
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

from . import iso
from .registry import Registry, default_registry

logger = logging.getLogger(__name__)

MAX_URL_LENGTH = 2083
MIN_URL_LENGTH = 3
RFC3339_NO_ZONE_LAYOUT = "%Y-%m-%dT%H:%M:%S"
URL_SCHEMES = frozenset({"ftp", "tcp", "udp", "ws", "wss", "http", "https"})

# Patterns are matched with fullmatch(); character classes are spelled out so
# that non-ASCII digits never match.
RX_URL_HOST = re.compile(r"(?:[^\W_](?:[\w-]*[^\W_])?\.)*[^\W_](?:[\w-]*[^\W_])?\.?")
RX_UUID = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
RX_UUID3 = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-3[0-9a-fA-F]{3}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
RX_UUID4 = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}")
RX_UUID5 = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-5[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}")
RX_ULID = re.compile(r"[0-7][0-9A-HJKMNP-TV-Za-hjkmnp-tv-z]{25}")
RX_ALPHA = re.compile(r"[a-zA-Z]+")
RX_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
RX_NUMERIC = re.compile(r"[0-9]+")
RX_INT = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
RX_FLOAT = re.compile(r"(?:[-+]?[0-9]+)?(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")
RX_SIGNED_DIGITS = re.compile(r"[-+]?[0-9]+")
RX_HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")
RX_HEXCOLOR = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
RX_RGBCOLOR = re.compile(
    r"rgb\(\s*(0|[1-9][0-9]?|1[0-9][0-9]?|2[0-4][0-9]|25[0-5])\s*,"
    r"\s*(0|[1-9][0-9]?|1[0-9][0-9]?|2[0-4][0-9]|25[0-5])\s*,"
    r"\s*(0|[1-9][0-9]?|1[0-9][0-9]?|2[0-4][0-9]|25[0-5])\s*\)"
)
RX_ASCII = re.compile(r"[\x00-\x7F]+")
RX_PRINTABLE_ASCII = re.compile(r"[\x20-\x7E]+")
RX_BASE64 = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})")
RX_DATA_URI = re.compile(r"data:.+/(.+);base64")
RX_LATITUDE = re.compile(r"[-+]?(?:[1-8]?[0-9](?:\.[0-9]+)?|90(?:\.0+)?)")
RX_LONGITUDE = re.compile(r"[-+]?(?:180(?:\.0+)?|(?:1[0-7][0-9]|[1-9]?[0-9])(?:\.[0-9]+)?)")
RX_DNS_NAME = re.compile(r"[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62}(?:\.[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})*[._]?")
RX_SSN = re.compile(r"[0-9]{3}[- ]?[0-9]{2}[- ]?[0-9]{4}")
RX_SEMVER = re.compile(
    r"v?(?:0|[1-9][0-9]*)\.(?:0|[1-9][0-9]*)\.(?:0|[1-9][0-9]*)"
    r"(?:-(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*)?"
    r"(?:\+[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?"
)
RX_CREDIT_CARD = re.compile(
    r"(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}"
    r"|(?:222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"
    r"|6(?:011|5[0-9][0-9])[0-9]{12}|3[47][0-9]{13}|3(?:0[0-5]|[68][0-9])[0-9]{11}"
    r"|(?:2131|1800|35[0-9]{3})[0-9]{11}|6[27][0-9]{14})"
)
RX_SEPARATORS = re.compile(r"[\s-]+")
RX_RFC3339 = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(\.[0-9]+)?(Z|[+-][0-9]{2}:[0-9]{2})",
    re.IGNORECASE,
)
RX_RFC3339_NO_ZONE = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(\.[0-9]+)?")
RX_IMEI = re.compile(r"[0-9a-f]{14}|[0-9]{15}|[0-9]{18}")
RX_IMSI = re.compile(r"[0-9]{14,15}")
RX_E164 = re.compile(r"\+?[1-9][0-9]{1,14}")
RX_UNIX_TIME = re.compile(r"\+?[0-9]+")

HASH_LENGTHS = {
    "crc32": 8, "crc32b": 8,
    "md4": 32, "md5": 32, "ripemd128": 32, "tiger128": 32,
    "sha1": 40, "ripemd160": 40, "tiger160": 40,
    "tiger192": 48,
    "sha3-224": 56,
    "sha256": 64, "sha3-256": 64,
    "sha384": 96, "sha3-384": 96,
    "sha512": 128, "sha3-512": 128,
}

# Mobile country codes accepted by the IMSI check
IMSI_MCC = frozenset({
    202, 204, 206, 208, 212, 213, 214, 216, 218, 219, 220, 221, 222, 226, 228, 230, 231, 232, 234, 235,
    238, 240, 242, 244, 246, 247, 248, 250, 255, 257, 259, 260, 262, 266, 268, 270, 272, 274, 276, 278,
    280, 282, 283, 284, 286, 288, 289, 290, 292, 293, 294, 295, 297, 302, 308, 310, 311, 312, 313, 314,
    315, 316, 330, 332, 334, 338, 340, 342, 344, 346, 348, 350, 352, 354, 356, 358, 360, 362, 363, 364,
    365, 366, 368, 370, 372, 374, 376, 400, 401, 402, 404, 405, 406, 410, 412, 413, 414, 415, 416, 417,
    418, 419, 420, 421, 422, 424, 425, 426, 427, 428, 429, 430, 431, 432, 434, 436, 437, 438, 440, 441,
    450, 452, 454, 455, 456, 457, 460, 461, 466, 467, 470, 472, 502, 505, 510, 514, 515, 520, 525, 528,
    530, 536, 537, 539, 540, 541, 542, 543, 544, 545, 546, 547, 548, 549, 550, 551, 552, 553, 554, 555,
    602, 603, 604, 605, 606, 607, 608, 609, 610, 611, 612, 613, 614, 615, 616, 617, 618, 619, 620, 621,
    622, 623, 624, 625, 626, 627, 628, 629, 630, 631, 632, 633, 634, 635, 636, 637, 638, 639, 640, 641,
    642, 643, 645, 646, 647, 648, 649, 650, 651, 652, 653, 654, 655, 657, 658, 659, 702, 704, 706, 708,
    710, 712, 714, 716, 722, 724, 730, 732, 734, 736, 738, 740, 742, 744, 746, 748, 750, 995,
})


def _to_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _to_float(text: str) -> float | None:
    try:
        return float(text.strip())
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Parameterised rules
# ---------------------------------------------------------------------------

def in_range(value: str, *params: str) -> bool:
    """Numeric value between two bounds, inclusive; reversed bounds are swapped."""
    if len(params) != 2:
        return False
    number, lo, hi = _to_float(value), _to_float(params[0]), _to_float(params[1])
    if number is None or lo is None or hi is None:
        return False
    if lo > hi:
        lo, hi = hi, lo
    return lo <= number <= hi


def _length_between(length: int, params: tuple[str, ...]) -> bool:
    if len(params) != 2:
        return False
    lo, hi = _to_int(params[0]), _to_int(params[1])
    if lo is None or hi is None:
        return False
    return lo <= length <= hi


def byte_length(value: str, *params: str) -> bool:
    """UTF-8 encoded length between two bounds."""
    return _length_between(len(value.encode("utf-8")), params)


def string_length(value: str, *params: str) -> bool:
    """Length in code points between two bounds."""
    return _length_between(len(value), params)


def min_string_length(value: str, *params: str) -> bool:
    if len(params) != 1:
        return False
    limit = _to_int(params[0])
    return limit is not None and len(value) >= limit


def max_string_length(value: str, *params: str) -> bool:
    if len(params) != 1:
        return False
    limit = _to_int(params[0])
    return limit is not None and len(value) <= limit


def at_least(value: str, *params: str) -> bool:
    """Numeric value not below the parameter."""
    if len(params) != 1:
        return False
    number, limit = _to_float(value), _to_float(params[0])
    return number is not None and limit is not None and number >= limit


def at_most(value: str, *params: str) -> bool:
    """Numeric value not above the parameter."""
    if len(params) != 1:
        return False
    number, limit = _to_float(value), _to_float(params[0])
    return number is not None and limit is not None and number <= limit


def is_in(value: str, *params: str) -> bool:
    return value in params


def matches(value: str, *params: str) -> bool:
    """Search the value for the regular expression given as the only parameter."""
    if len(params) != 1:
        return False
    try:
        return re.search(params[0], value) is not None
    except re.error as e:
        logger.debug(f"Invalid pattern {params[0]!r}: {e}")
        return False


def is_divisible_by(value: str, *params: str) -> bool:
    if len(params) != 1:
        return False
    number, divisor = _to_int(value), _to_int(params[0])
    if number is None or not divisor:
        return False
    return number % divisor == 0


def is_hash(value: str, *params: str) -> bool:
    """Hex digest of the length produced by the named algorithm."""
    if len(params) != 1:
        return False
    length = HASH_LENGTHS.get(params[0].lower())
    return length is not None and len(value) == length and RX_HEXADECIMAL.fullmatch(value) is not None


def is_time(value: str, *params: str) -> bool:
    """Parses with the strftime-style layout given as the only parameter."""
    if len(params) != 1:
        return False
    try:
        datetime.strptime(value, params[0])
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def is_email(value: str) -> bool:
    """Address syntax only; the domain is never resolved."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    if (not value or len(value) >= MAX_URL_LENGTH or len(value) <= MIN_URL_LENGTH
            or value.startswith(".") or any(c.isspace() for c in value)):
        return False

    candidate = value if "://" in value else f"http://{value}"
    try:
        parts = urlsplit(candidate)
        parts.port  # raises on a malformed port
    except ValueError:
        return False

    if parts.scheme.lower() not in URL_SCHEMES:
        return False
    host = parts.hostname or ""
    if not host or host.startswith("."):
        return False
    return is_ip(host) or RX_URL_HOST.fullmatch(host) is not None


def is_request_url(value: str) -> bool:
    """Absolute URL with a scheme, as received in an HTTP request."""
    if not is_request_uri(value):
        return False
    return bool(urlsplit(value).scheme)


def is_request_uri(value: str) -> bool:
    """Absolute URI or absolute path, as received in an HTTP request."""
    if not value or any(c.isspace() for c in value):
        return False
    if value.startswith("/"):
        return True
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def is_alpha(value: str) -> bool:
    return not value or RX_ALPHA.fullmatch(value) is not None


def is_utf_letter(value: str) -> bool:
    return all(c.isalpha() for c in value)


def is_alphanumeric(value: str) -> bool:
    return not value or RX_ALPHANUMERIC.fullmatch(value) is not None


def is_utf_letter_numeric(value: str) -> bool:
    return all(c.isalpha() or unicodedata.category(c).startswith("N") for c in value)


def is_numeric(value: str) -> bool:
    return not value or RX_NUMERIC.fullmatch(value) is not None


def _strip_sign(value: str) -> str | None:
    if any(c in "+-" for c in value[1:]):
        return None
    if len(value) > 1 and value[0] in "+-":
        return value[1:]
    return value


def is_utf_numeric(value: str) -> bool:
    """Unicode numbers of any kind (digits, fractions, roman numerals), optionally signed."""
    if not value:
        return True
    digits = _strip_sign(value)
    return digits is not None and all(unicodedata.category(c).startswith("N") for c in digits)


def is_utf_digit(value: str) -> bool:
    """Unicode radix-10 digits, optionally signed."""
    if not value:
        return True
    digits = _strip_sign(value)
    return digits is not None and all(c.isdecimal() for c in digits)


def is_hexadecimal(value: str) -> bool:
    return RX_HEXADECIMAL.fullmatch(value) is not None


def is_hexcolor(value: str) -> bool:
    return RX_HEXCOLOR.fullmatch(value) is not None


def is_rgbcolor(value: str) -> bool:
    return RX_RGBCOLOR.fullmatch(value) is not None


def is_lowercase(value: str) -> bool:
    return value == value.lower()


def is_uppercase(value: str) -> bool:
    return value == value.upper()


def has_lowercase(value: str) -> bool:
    return not value or any(c.islower() for c in value)


def has_uppercase(value: str) -> bool:
    return not value or any(c.isupper() for c in value)


def is_int(value: str) -> bool:
    return not value or RX_INT.fullmatch(value) is not None


def is_float(value: str) -> bool:
    return bool(value) and RX_FLOAT.fullmatch(value) is not None


def is_null(value: str) -> bool:
    return not value


def is_not_null(value: str) -> bool:
    return bool(value)


def is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def is_multibyte(value: str) -> bool:
    return not value or any(ord(c) > 0x7F for c in value)


def is_ascii(value: str) -> bool:
    return not value or RX_ASCII.fullmatch(value) is not None


def is_printable_ascii(value: str) -> bool:
    return not value or RX_PRINTABLE_ASCII.fullmatch(value) is not None


def is_base64(value: str) -> bool:
    if not RX_BASE64.fullmatch(value):
        return False
    try:
        base64.b64decode(value, validate=True)
    except binascii.Error:
        return False
    return True


def is_data_uri(value: str) -> bool:
    header, sep, data = value.partition(",")
    return bool(sep) and RX_DATA_URI.fullmatch(header) is not None and is_base64(data)


def has_whitespace(value: str) -> bool:
    return any(c.isspace() for c in value)


def has_whitespace_only(value: str) -> bool:
    return bool(value) and value.isspace()


def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


def is_semver(value: str) -> bool:
    return RX_SEMVER.fullmatch(value) is not None


def is_ssn(value: str) -> bool:
    return len(value) == 11 and RX_SSN.fullmatch(value) is not None


def is_latitude(value: str) -> bool:
    return RX_LATITUDE.fullmatch(value) is not None


def is_longitude(value: str) -> bool:
    return RX_LONGITUDE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------

def is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_ipv4(value: str) -> bool:
    try:
        return ipaddress.ip_address(value).version == 4
    except ValueError:
        return False


def is_ipv6(value: str) -> bool:
    try:
        return ipaddress.ip_address(value).version == 6
    except ValueError:
        return False


def is_cidr(value: str) -> bool:
    if "/" not in value:
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def is_mac(value: str) -> bool:
    """IEEE 802 MAC-48, EUI-48, EUI-64 or 20-octet InfiniBand address.

    Accepted separators are ``:`` or ``-`` between octets, or ``.`` between
    groups of four hex digits.
    """
    if "." in value:
        groups = value.split(".")
        return len(groups) in (3, 4, 10) and all(
            len(group) == 4 and RX_HEXADECIMAL.fullmatch(group) for group in groups
        )

    for separator in ":-":
        octets = value.split(separator)
        if len(octets) in (6, 8, 20):
            return all(len(octet) == 2 and RX_HEXADECIMAL.fullmatch(octet) for octet in octets)
    return False


def is_dns_name(value: str) -> bool:
    if not value or len(value.replace(".", "")) > 255:
        return False
    return not is_ip(value) and RX_DNS_NAME.fullmatch(value) is not None


def is_host(value: str) -> bool:
    return is_ip(value) or is_dns_name(value)


def is_port(value: str) -> bool:
    if not RX_SIGNED_DIGITS.fullmatch(value):
        return False
    return 0 < int(value) < 65536


def split_host_port(value: str) -> tuple[str, str] | None:
    """Split ``host:port`` or ``[ipv6]:port``; None when malformed."""
    if value.startswith("["):
        host, sep, port = value[1:].partition("]:")
        if not sep or "]" in host:
            return None
        return host, port

    host, sep, port = value.rpartition(":")
    if not sep or ":" in host or "[" in host or "]" in host:
        return None
    return host, port


def is_dial_string(value: str) -> bool:
    parts = split_host_port(value)
    if parts is None:
        return False
    host, port = parts
    return bool(host) and bool(port) and (is_dns_name(host) or is_ip(host)) and is_port(port)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

def is_uuid(value: str) -> bool:
    return RX_UUID.fullmatch(value) is not None


def is_uuid_v3(value: str) -> bool:
    return RX_UUID3.fullmatch(value) is not None


def is_uuid_v4(value: str) -> bool:
    return RX_UUID4.fullmatch(value) is not None


def is_uuid_v5(value: str) -> bool:
    return RX_UUID5.fullmatch(value) is not None


def is_mongo_id(value: str) -> bool:
    return len(value) == 24 and is_hexadecimal(value)


def is_ulid(value: str) -> bool:
    return RX_ULID.fullmatch(value) is not None


def is_credit_card(value: str) -> bool:
    """Known card number layout with a valid Luhn checksum."""
    sanitized = RX_SEPARATORS.sub("", value)
    if not RX_CREDIT_CARD.fullmatch(sanitized):
        return False

    total = 0
    for position, char in enumerate(reversed(sanitized)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def hash_check(algorithm: str):
    def check(value: str) -> bool:
        return is_hash(value, algorithm)

    check.__name__ = f"is_{algorithm.replace('-', '')}"
    return check


def is_e164(value: str) -> bool:
    return RX_E164.fullmatch(value) is not None


def is_imei(value: str) -> bool:
    return RX_IMEI.fullmatch(value) is not None


def is_imsi(value: str) -> bool:
    if not RX_IMSI.fullmatch(value):
        return False
    return int(value[:3]) in IMSI_MCC


# ---------------------------------------------------------------------------
# Date and time
# ---------------------------------------------------------------------------

def _valid_clock(stamp: str, layout: str) -> bool:
    try:
        datetime.strptime(stamp, layout)
    except ValueError:
        return False
    return True


def is_rfc3339(value: str) -> bool:
    match = RX_RFC3339.fullmatch(value)
    if not match:
        return False
    stamp, _, zone = match.groups()
    if zone.upper() != "Z":
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            return False
    return _valid_clock(stamp, RFC3339_NO_ZONE_LAYOUT)


def is_rfc3339_without_zone(value: str) -> bool:
    match = RX_RFC3339_NO_ZONE.fullmatch(value)
    return match is not None and _valid_clock(match.group(1), RFC3339_NO_ZONE_LAYOUT)


def is_unix_time(value: str) -> bool:
    return RX_UNIX_TIME.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Locale
# ---------------------------------------------------------------------------

def is_country_alpha2(value: str) -> bool:
    return value in iso.COUNTRY_ALPHA2


def is_country_alpha3(value: str) -> bool:
    return value in iso.COUNTRY_ALPHA3


def is_currency(value: str) -> bool:
    return value in iso.CURRENCIES


def is_language_alpha2(value: str) -> bool:
    return value in iso.LANGUAGE_ALPHA2


def is_language_alpha3b(value: str) -> bool:
    return value in iso.LANGUAGE_ALPHA3B


def register_standard_rules(registry: Registry) -> None:
    """Install the standard rule library into ``registry``."""
    # Rules taking parameters
    registry.register("range", "{} must be between {} and {}", in_range)
    registry.register("length", "{} must be between {} and {}", byte_length)
    registry.register("runelength", "{} must be between {} and {}", string_length)
    registry.register("stringlength", "{} must be between {} and {}", string_length)
    registry.register("matches", "{} must match {}", matches)
    registry.register("in", "{} must be one of allowed values", is_in)
    registry.register("minlen", "{} must be at least {} characters long", min_string_length)
    registry.register("maxlen", "{} must be at most {} characters long", max_string_length)
    registry.register("min", "{} must be at least {}", at_least)
    registry.register("max", "{} must be at most {}", at_most)
    registry.register("divisibleby", "{} must be divisible by {}", is_divisible_by)
    registry.register("hash", "{} must be a valid {} hash", is_hash)
    registry.register("time", "{} must be a valid time in the {} layout", is_time)

    # Text
    registry.register_unary("email", "{} must be a valid email address", is_email)
    registry.register_unary("url", "{} must be a valid URL", is_url)
    registry.register_unary("requrl", "{} must be a valid request URL", is_request_url)
    registry.register_unary("requri", "{} must be a valid request URI", is_request_uri)
    registry.register_unary("alpha", "{} must contain only letters", is_alpha)
    registry.register_unary("utfletter", "{} must contain only letters", is_utf_letter)
    registry.register_unary("alphanum", "{} must contain only letters and numbers", is_alphanumeric)
    registry.register_unary("utfletternum", "{} must contain only letters and numbers", is_utf_letter_numeric)
    registry.register_unary("numeric", "{} must contain only numbers", is_numeric)
    registry.register_unary("utfnumeric", "{} must contain only numbers", is_utf_numeric)
    registry.register_unary("utfdigit", "{} must contain only digits", is_utf_digit)
    registry.register_unary("hexadecimal", "{} must be a hexadecimal number", is_hexadecimal)
    registry.register_unary("hexcolor", "{} must be a valid hex color", is_hexcolor)
    registry.register_unary("rgbcolor", "{} must be a valid RGB color", is_rgbcolor)
    registry.register_unary("lowercase", "{} must be lowercase", is_lowercase)
    registry.register_unary("uppercase", "{} must be uppercase", is_uppercase)
    registry.register_unary("haslowercase", "{} must contain a lowercase letter", has_lowercase)
    registry.register_unary("hasuppercase", "{} must contain an uppercase letter", has_uppercase)
    registry.register_unary("int", "{} must be an integer", is_int)
    registry.register_unary("float", "{} must be a float", is_float)
    registry.register_unary("null", "{} must be null", is_null)
    registry.register_unary("notnull", "{} must not be null", is_not_null)
    registry.register_unary("json", "{} must be a valid JSON", is_json)
    registry.register_unary("multibyte", "{} must contain multibyte characters", is_multibyte)
    registry.register_unary("ascii", "{} must contain only ASCII characters", is_ascii)
    registry.register_unary("printascii", "{} must contain only printable ASCII characters", is_printable_ascii)
    registry.register_unary("base64", "{} must be a valid base64 string", is_base64)
    registry.register_unary("datauri", "{} must be a valid data URI", is_data_uri)
    registry.register_unary("whitespace", "{} must contain whitespace", has_whitespace)
    registry.register_unary("whitespaceonly", "{} must contain only whitespace", has_whitespace_only)
    registry.register_unary("regex", "{} must be a valid regular expression", is_regex)
    registry.register_unary("semver", "{} must be a valid semantic version", is_semver)
    registry.register_unary("ssn", "{} must be a valid SSN", is_ssn)
    registry.register_unary("latitude", "{} must be a valid latitude", is_latitude)
    registry.register_unary("longitude", "{} must be a valid longitude", is_longitude)

    # Network
    registry.register_unary("ip", "{} must be a valid IP address", is_ip)
    registry.register_unary("ipv4", "{} must be a valid IPv4 address", is_ipv4)
    registry.register_unary("ipv6", "{} must be a valid IPv6 address", is_ipv6)
    registry.register_unary("cidr", "{} must be a valid CIDR notation", is_cidr)
    registry.register_unary("mac", "{} must be a valid MAC address", is_mac)
    registry.register_unary("dns", "{} must be a valid DNS name", is_dns_name)
    registry.register_unary("host", "{} must be a valid host", is_host)
    registry.register_unary("port", "{} must be a valid port", is_port)
    registry.register_unary("dialstring", "{} must be a valid dial string", is_dial_string)

    # Identifiers
    registry.register_unary("uuid", "{} must be a valid UUID", is_uuid)
    registry.register_unary("uuidv3", "{} must be a valid UUIDv3", is_uuid_v3)
    registry.register_unary("uuidv4", "{} must be a valid UUIDv4", is_uuid_v4)
    registry.register_unary("uuidv5", "{} must be a valid UUIDv5", is_uuid_v5)
    registry.register_unary("mongoid", "{} must be a valid MongoDB ObjectId", is_mongo_id)
    registry.register_unary("ulid", "{} must be a valid ULID", is_ulid)
    registry.register_unary("creditcard", "{} must be a valid credit card number", is_credit_card)
    for algorithm in HASH_LENGTHS:
        label = algorithm.upper()
        registry.register_unary(algorithm.replace("-", ""), f"{{}} must be a valid {label} hash",
                                hash_check(algorithm))
    registry.register_unary("e164", "{} must be a valid E.164 phone number", is_e164)
    registry.register_unary("imei", "{} must be a valid IMEI number", is_imei)
    registry.register_unary("imsi", "{} must be a valid IMSI number", is_imsi)

    # Date and time
    registry.register_unary("rfc3339", "{} must be a valid RFC-3339 date", is_rfc3339)
    registry.register_unary("rfc3339nozone", "{} must be a valid RFC-3339 date without time zone",
                            is_rfc3339_without_zone)
    registry.register_unary("unixtime", "{} must be a valid Unix timestamp", is_unix_time)

    # Locale
    registry.register_unary("country2", "{} must be a valid ISO-3166 Alpha 2 country code", is_country_alpha2)
    registry.register_unary("country3", "{} must be a valid ISO-3166 Alpha 3 country code", is_country_alpha3)
    registry.register_unary("currency", "{} must be a valid ISO-4217 currency code", is_currency)
    registry.register_unary("language2", "{} must be a valid ISO-639 Alpha 2 language code", is_language_alpha2)
    registry.register_unary("language3", "{} must be a valid ISO-639 Alpha 3b language code", is_language_alpha3b)


register_standard_rules(default_registry)
