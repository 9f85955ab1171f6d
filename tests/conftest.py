"""Pytest fixtures for tweet-sentiment-explorer tests."""

from datetime import datetime
from unittest.mock import MagicMock

import pandas as pd
import pytest

from config import AppConfig
from data.connection import SqlClient
from data.vertica import Vertica


@pytest.fixture
def test_config() -> AppConfig:
    """Config pointing at a throwaway Vertica database."""
    return AppConfig(
        vertica_host="vertica.test",
        vertica_port=5433,
        vertica_database="sentiment_test",
        vertica_username="dbadmin",
        vertica_password="secret",
        vertica_schema="tweets_test",
        tweet_limit=50,
        default_use_mock=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_cursor():
    """A vertica-python cursor double."""
    cur = MagicMock()
    cur.description = None
    cur.fetchall.return_value = []
    cur.fetchone.return_value = None
    cur.rowcount = -1
    return cur


@pytest.fixture
def mock_connection(mock_cursor):
    """A vertica-python connection whose cursor() context yields mock_cursor."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    conn.closed.return_value = False
    return conn


@pytest.fixture
def mock_client():
    """SqlClient double; query() returns an empty frame, execute() one row."""
    client = MagicMock(spec=SqlClient)
    client.query.return_value = pd.DataFrame()
    client.execute.return_value = 1
    return client


@pytest.fixture
def vertica(test_config, mock_client) -> Vertica:
    return Vertica(test_config, client=mock_client)


@pytest.fixture
def feb_2_morning() -> tuple[datetime, datetime]:
    """The 01:00-08:00 slice used across the accessor tests."""
    return datetime(2015, 2, 2, 1, 0), datetime(2015, 2, 2, 8, 0)
