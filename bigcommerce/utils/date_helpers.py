"""RFC 2822 date helpers for BigCommerce JSON documents.

BigCommerce (API v2) sends dates as quoted RFC 2822 text, e.g.
"Mon, 02 Jan 2006 15:04:05 -0700". The codec decodes that text from the raw
JSON token but encodes instants back as unquoted epoch seconds, so a
decode/encode pass does not reproduce the original text.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import NamedTuple, Optional, Union

__logger__ = logging.getLogger(__name__)

RFC2822_FORMAT = "%a, %d %b %Y %H:%M:%S %z"

RFC2822_PATTERN = re.compile(
    r"([A-Z][a-z]{2}), (\d{2}) ([A-Z][a-z]{2}) (\d{4}) "
    r"(\d{2}):(\d{2}):(\d{2}) ([+-])(\d{2})(\d{2})"
)

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Shortest raw token worth parsing; anything below is treated as unset.
MIN_TOKEN_LENGTH = 30

# Emitted instead of a value for instants before the Unix epoch.
OMIT_SENTINEL = b'",omitempty"'

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DateFormatError(ValueError):
    """Raised when text does not match RFC2822_FORMAT."""

    def __init__(self, text: str, reason: str = ""):
        message = f"cannot parse {text!r} as RFC 2822 date"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text


class DecodeOutcome(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FORMAT_ERROR = "format_error"


class DecodeResult(NamedTuple):
    """
    Result of decoding one raw token.

    `value` is only trustworthy when `outcome` is SUCCESS. On SKIPPED it is the
    value the caller passed in; on FORMAT_ERROR it is the wall-clock time at
    decode and `error` holds the DateFormatError.
    """
    value: Optional[datetime]
    outcome: DecodeOutcome
    error: Optional[DateFormatError] = None

    @property
    def trusted(self) -> bool:
        return self.outcome is DecodeOutcome.SUCCESS


def parse_rfc2822(text: str) -> datetime:
    """
    Parse `text` as 'Ddd, DD Mon YYYY HH:MM:SS +ZZZZ'.

    Every numeric field must have its full width and names are matched
    against English tables, independent of the process locale.

    Raises:
        DateFormatError: If `text` does not match the format
    """
    match = RFC2822_PATTERN.fullmatch(text)
    if match is None:
        raise DateFormatError(text, "expected 'Ddd, DD Mon YYYY HH:MM:SS +ZZZZ'")

    weekday, day, month, year, hour, minute, second, sign, off_h, off_m = match.groups()
    if weekday not in WEEKDAYS:
        raise DateFormatError(text, f"unknown day name {weekday!r}")
    if month not in MONTHS:
        raise DateFormatError(text, f"unknown month name {month!r}")
    if int(off_m) > 59:
        raise DateFormatError(text, "offset minutes out of range")

    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    try:
        return datetime(
            int(year), MONTHS.index(month) + 1, int(day),
            int(hour), int(minute), int(second),
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise DateFormatError(text, str(e)) from e


def format_rfc2822(instant: datetime) -> str:
    """Format an instant with RFC2822_FORMAT. Naive values are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    # Names come from the English tables; %a/%b would follow the locale.
    return (
        f"{WEEKDAYS[instant.weekday()]}, {instant.day:02d} "
        f"{MONTHS[instant.month - 1]} {instant.year:04d} "
        f"{instant.strftime('%H:%M:%S %z')}"
    )


def unmarshal_rfc2822(
    data: Union[bytes, str],
    current: Optional[datetime] = None
) -> DecodeResult:
    """
    Decode a raw JSON token holding RFC 2822 text.

    Args:
        data: Raw token, including the surrounding quotes of a JSON string
        current: Value the target held before decoding

    Returns:
        DecodeResult. Tokens shorter than MIN_TOKEN_LENGTH bytes are skipped
        and keep `current`. Tokens that fail to parse (including long tokens
        that are not quoted strings) fall back to the current time.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    if len(raw) < MIN_TOKEN_LENGTH:
        __logger__.debug(f"Skipping short date token {raw!r}")
        return DecodeResult(current, DecodeOutcome.SKIPPED)

    # An unquoted token has nothing to parse and fails like empty text.
    text = ""
    if raw[:1] == b'"':
        text = raw[1:-1].decode("utf-8", errors="replace")

    try:
        return DecodeResult(parse_rfc2822(text), DecodeOutcome.SUCCESS)
    except DateFormatError as e:
        __logger__.warning(f"Invalid RFC 2822 date token {raw!r}, using current time")
        return DecodeResult(
            datetime.now(timezone.utc), DecodeOutcome.FORMAT_ERROR, e
        )


def epoch_seconds(instant: datetime) -> int:
    """Whole seconds since the Unix epoch, floored. Naive values are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - UNIX_EPOCH) // timedelta(seconds=1)


def marshal_epoch(instant: Optional[datetime]) -> bytes:
    """
    Encode an instant as the raw JSON token of its epoch seconds.

    Instants before the epoch (and None) produce OMIT_SENTINEL instead of a
    number.
    """
    if instant is None:
        return OMIT_SENTINEL
    epoch = epoch_seconds(instant)
    if epoch < 0:
        return OMIT_SENTINEL
    return str(epoch).encode("ascii")
