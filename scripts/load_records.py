#!/usr/bin/env python3
"""
Insert delimited tweet or sentiment records into Vertica, one row per line.

Usage:
  python scripts/load_records.py tweet data/tweets.psv
  python scripts/load_records.py sentiment data/sentiment.psv --null-token null
  python scripts/load_records.py sentiment data/sentiment.tsv --separator $'\\t' --skip-errors

Connection settings come from VERTICA_* environment variables (or .env).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import configure_logging, get_config  # noqa: E402
from data.loader import KINDS, load_file  # noqa: E402
from data.vertica import Vertica  # noqa: E402


logger = logging.getLogger("load_records")


def main() -> None:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument("kind", choices=KINDS)
    ap.add_argument("paths", nargs="+")
    ap.add_argument("--separator", default="|")
    ap.add_argument("--null-token", default=None, help="field value to store as NULL (sentiment records)")
    ap.add_argument("--skip-errors", action="store_true", help="log and skip malformed lines instead of stopping")
    args = ap.parse_args()

    cfg = get_config()
    configure_logging(cfg)

    inserted = skipped = 0
    with Vertica(cfg) as vertica:
        for path in args.paths:
            report = load_file(
                vertica,
                path,
                args.kind,
                separator=args.separator,
                null_token=args.null_token,
                skip_errors=args.skip_errors,
            )
            inserted += report.inserted
            skipped += report.skipped

    logger.info("Done: %d rows inserted, %d lines skipped", inserted, skipped)


if __name__ == "__main__":
    main()
