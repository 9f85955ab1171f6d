#!/usr/bin/env python3
"""
Create the tweets and tweet_sentiment tables in the configured Vertica schema.

Usage:
  python scripts/create_tables.py

Safe to re-run: tables that already exist are left alone.
"""

from __future__ import annotations

import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import configure_logging, get_config  # noqa: E402
from data.vertica import Vertica  # noqa: E402


def main() -> None:
    cfg = get_config()
    configure_logging(cfg)
    with Vertica(cfg) as vertica:
        vertica.create_tables()


if __name__ == "__main__":
    main()
