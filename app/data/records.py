"""
Delimited text records for the insert operations.

Lines look like

    1234|nice test with \\| and \\n|en|2015-02-02 03:00:00|neutral|0.89

Fields are split on unescaped separators. A backslash before the separator
keeps it literal, and \\n, \\t and \\\\ stand for newline, tab and backslash.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from datetime import datetime
from typing import Any, Optional


DEFAULT_SEPARATOR = "|"

TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M:%S.%f")

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}


class RecordFormatError(ValueError):
    pass


def split_line(line: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    if not separator:
        raise ValueError("separator must not be empty")

    line = line.rstrip("\r\n")
    fields: list[str] = []
    buf: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\" and i + 1 < n:
            if line.startswith(separator, i + 1):
                buf.append(separator)
                i += 1 + len(separator)
                continue
            nxt = line[i + 1]
            if nxt in _ESCAPES:
                buf.append(_ESCAPES[nxt])
            else:
                buf.append(ch + nxt)
            i += 2
            continue
        if line.startswith(separator, i):
            fields.append("".join(buf))
            buf = []
            i += len(separator)
            continue
        buf.append(ch)
        i += 1
    fields.append("".join(buf))
    return fields


def _nullable(value: str, null_token: Optional[str]) -> Optional[str]:
    if value == "" or (null_token is not None and value == null_token):
        return None
    return value


def _to_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise RecordFormatError(f"{name} must be an integer, got {value!r}") from None


def _to_float(name: str, value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        raise RecordFormatError(f"{name} must be a number, got {value!r}") from None


def _to_timestamp(name: str, value: str) -> datetime:
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
    raise RecordFormatError(f"{name} must look like YYYY-MM-DD HH:MM:SS, got {value!r}")


@dataclass(frozen=True)
class TweetRecord:
    id: int
    message: str
    lang: str
    created_at: datetime
    aggregate: Optional[str] = None
    score: Optional[float] = None

    @classmethod
    def from_line(cls, line: str, separator: str = DEFAULT_SEPARATOR) -> "TweetRecord":
        """id|message|lang|created_at[|aggregate|score]"""
        fields = split_line(line, separator)
        if len(fields) not in (4, 6):
            raise RecordFormatError(f"tweet record needs 4 or 6 fields, got {len(fields)}")

        aggregate = score = None
        if len(fields) == 6:
            aggregate = _nullable(fields[4], None)
            score = _to_float("score", _nullable(fields[5], None))

        return cls(
            id=_to_int("id", fields[0]),
            message=fields[1],
            lang=fields[2],
            created_at=_to_timestamp("created_at", fields[3]),
            aggregate=aggregate,
            score=score,
        )

    def params(self) -> tuple[Any, ...]:
        return astuple(self)


@dataclass(frozen=True)
class SentimentRecord:
    tweet_id: int
    sentiment: Optional[str]
    topic: Optional[str]
    score: Optional[float]

    @classmethod
    def from_line(
        cls,
        line: str,
        separator: str = DEFAULT_SEPARATOR,
        null_token: Optional[str] = None,
    ) -> "SentimentRecord":
        """tweet_id|sentiment|topic|score; fields equal to null_token (or empty) are NULL."""
        fields = split_line(line, separator)
        if len(fields) != 4:
            raise RecordFormatError(f"sentiment record needs 4 fields, got {len(fields)}")

        return cls(
            tweet_id=_to_int("tweet_id", fields[0]),
            sentiment=_nullable(fields[1], null_token),
            topic=_nullable(fields[2], null_token),
            score=_to_float("score", _nullable(fields[3], null_token)),
        )

    def params(self) -> tuple[Any, ...]:
        return astuple(self)
