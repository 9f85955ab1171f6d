"""Bulk insert of delimited record files, one insert per line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from data.records import DEFAULT_SEPARATOR, RecordFormatError
from data.vertica import Vertica


logger = logging.getLogger(__name__)

KINDS = ("tweet", "sentiment")


@dataclass(frozen=True)
class LoadReport:
    inserted: int
    skipped: int


def load_file(
    vertica: Vertica,
    path: Union[str, Path],
    kind: str,
    separator: str = DEFAULT_SEPARATOR,
    null_token: Optional[str] = None,
    skip_errors: bool = False,
) -> LoadReport:
    """
    Insert every non-blank line of `path` as a `kind` record.

    Malformed lines raise RecordFormatError unless skip_errors is set, in which
    case they are logged and counted. Database errors always propagate.
    """
    if kind not in KINDS:
        raise ValueError(f"kind must be one of {KINDS}, got {kind!r}")

    inserted = skipped = 0
    with open(path, encoding="utf-8", newline="\n") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                if kind == "tweet":
                    inserted += vertica.insert_tweet_record(line, separator)
                else:
                    inserted += vertica.insert_sentiment_record(line, separator, null_token)
            except RecordFormatError as e:
                if not skip_errors:
                    raise RecordFormatError(f"{path}:{lineno}: {e}") from e
                logger.warning("Skipping %s:%d: %s", path, lineno, e)
                skipped += 1

    logger.info("Loaded %s: %d %s rows inserted, %d skipped", path, inserted, kind, skipped)
    return LoadReport(inserted=inserted, skipped=skipped)
