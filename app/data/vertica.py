"""
Vertica accessor for the tweet sentiment dataset.

Every method is one parameterized query over a single connection. Reads
return a list of dicts (column alias -> value, NULL as None); inserts return
the affected-row count. Driver errors propagate to the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

import pandas as pd

from config import AppConfig
from data import queries
from data.connection import SqlClient, get_sql_client
from data.records import DEFAULT_SEPARATOR, SentimentRecord, TweetRecord
from data.windows import histogram_slice_minutes, parse_window


logger = logging.getLogger(__name__)

Rows = list[dict[str, Any]]


def to_records(df: pd.DataFrame) -> Rows:
    """DataFrame -> list of row dicts, with missing values as None."""
    if df.empty:
        return []
    return df.astype(object).where(df.notna(), None).to_dict("records")


class Vertica:
    def __init__(self, cfg: AppConfig, client: Optional[SqlClient] = None):
        self.cfg = cfg
        self.client = client or get_sql_client(cfg)

    def __enter__(self) -> "Vertica":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def _range(self, begin: datetime, end: datetime) -> tuple[datetime, datetime]:
        return (begin, end)

    # --- reads ---

    def get_date_range(self) -> dict[str, Optional[datetime]]:
        """Earliest and latest tweet timestamps ({"begin": ..., "end": ...})."""
        rows = to_records(self.client.query(queries.q_date_range(self.cfg)))
        if not rows:
            return {"begin": None, "end": None}
        return {"begin": rows[0]["begin"], "end": rows[0]["end"]}

    def get_aggregate_total(self, begin: datetime, end: datetime) -> Rows:
        return to_records(self.client.query(queries.q_aggregate_total(self.cfg), self._range(begin, end)))

    def get_aggregate_histogram(self, begin: datetime, end: datetime) -> Rows:
        slice_minutes = histogram_slice_minutes(begin, end)
        q = queries.q_aggregate_histogram(self.cfg, slice_minutes)
        return to_records(self.client.query(q, self._range(begin, end)))

    def get_topic_total(self, begin: datetime, end: datetime) -> Rows:
        return to_records(self.client.query(queries.q_topic_total(self.cfg), self._range(begin, end)))

    def get_topic_histogram(self, begin: datetime, end: datetime) -> Rows:
        slice_minutes = histogram_slice_minutes(begin, end)
        q = queries.q_topic_histogram(self.cfg, slice_minutes)
        return to_records(self.client.query(q, self._range(begin, end)))

    def get_tweets_with_aggregate(self, label: str, begin: datetime, end: datetime) -> Rows:
        params = (label, begin, end)
        return to_records(self.client.query(queries.q_tweets_with_aggregate(self.cfg), params))

    def get_tweets_with_topic(self, topic: str, begin: datetime, end: datetime) -> Rows:
        params = (topic, begin, end)
        return to_records(self.client.query(queries.q_tweets_with_topic(self.cfg), params))

    def get_tweets_with_time(self, window: str) -> Rows:
        """Tweets inside the window parsed from `window`; [] when it does not parse."""
        bounds = parse_window(window)
        if bounds is None:
            logger.debug("Ignoring unparsable time window %r", window)
            return []
        begin, end = bounds
        return to_records(self.client.query(queries.q_tweets_with_time(self.cfg), self._range(begin, end)))

    # --- writes ---

    def insert_tweet_record(self, line: str, separator: str = DEFAULT_SEPARATOR) -> int:
        record = TweetRecord.from_line(line, separator)
        return self.client.execute(queries.q_insert_tweet(self.cfg), record.params())

    def insert_sentiment_record(
        self,
        line: str,
        separator: str = DEFAULT_SEPARATOR,
        null_token: Optional[str] = None,
    ) -> int:
        record = SentimentRecord.from_line(line, separator, null_token)
        return self.client.execute(queries.q_insert_sentiment(self.cfg), record.params())

    def create_tables(self) -> None:
        for ddl in queries.q_create_tables(self.cfg):
            self.client.execute(ddl)
        logger.info("Ensured tables exist in schema %s", self.cfg.vertica_schema)


@lru_cache(maxsize=None)
def get_vertica(cfg: AppConfig) -> Vertica:
    """Shared accessor per configuration."""
    return Vertica(cfg)
