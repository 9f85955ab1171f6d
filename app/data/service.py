from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import pandas as pd

from config import AppConfig
from data import mock_data
from data.vertica import get_vertica


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataResult:
    df: pd.DataFrame
    source: str  # "mock" | "vertica"
    warning: str | None = None


def _fallback(use_mock: bool, fn_live: Callable[[], list[dict]], fn_mock: Callable[[], pd.DataFrame]) -> DataResult:
    if use_mock:
        return DataResult(df=fn_mock(), source="mock")
    try:
        return DataResult(df=pd.DataFrame(fn_live()), source="vertica")
    except Exception as e:
        logger.warning("Live query failed, falling back to mock data: %s", e)
        return DataResult(df=fn_mock(), source="mock", warning=f"Fell back to mock data: {type(e).__name__}")


def get_date_range(cfg: AppConfig, use_mock: bool) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: [get_vertica(cfg).get_date_range()],
        fn_mock=mock_data.date_range_mock,
    )


def get_aggregate_total(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_aggregate_total(begin, end),
        fn_mock=lambda: mock_data.aggregate_total_mock(begin, end),
    )


def get_aggregate_histogram(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_aggregate_histogram(begin, end),
        fn_mock=lambda: mock_data.aggregate_histogram_mock(begin, end),
    )


def get_topic_total(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_topic_total(begin, end),
        fn_mock=lambda: mock_data.topic_total_mock(begin, end),
    )


def get_topic_histogram(cfg: AppConfig, use_mock: bool, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_topic_histogram(begin, end),
        fn_mock=lambda: mock_data.topic_histogram_mock(begin, end),
    )


def get_tweets_with_aggregate(cfg: AppConfig, use_mock: bool, label: str, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_tweets_with_aggregate(label, begin, end),
        fn_mock=lambda: mock_data.tweets_with_aggregate_mock(label, begin, end, cfg.tweet_limit),
    )


def get_tweets_with_topic(cfg: AppConfig, use_mock: bool, topic: str, begin: datetime, end: datetime) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_tweets_with_topic(topic, begin, end),
        fn_mock=lambda: mock_data.tweets_with_topic_mock(topic, begin, end, cfg.tweet_limit),
    )


def get_tweets_with_time(cfg: AppConfig, use_mock: bool, window: str) -> DataResult:
    return _fallback(
        use_mock,
        fn_live=lambda: get_vertica(cfg).get_tweets_with_time(window),
        fn_mock=lambda: mock_data.tweets_with_time_mock(window, cfg.tweet_limit),
    )
