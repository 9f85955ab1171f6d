from __future__ import annotations

from config import AppConfig


# Placeholders are positional %s, filled in a single pass by vertica-python.
# Parameterized statements must not contain a literal percent sign.

# Column list shared by every tweet retrieval query.
_TWEET_COLUMNS = """
      t.id,
      t.created_at AS "time",
      t.message,
      t.lang,
      t.aggregate AS label,
      t.score
"""


def q_date_range(cfg: AppConfig) -> str:
    return f"""
    SELECT
      MIN(created_at) AS "begin",
      MAX(created_at) AS "end"
    FROM {cfg.fq_schema}.tweets
    """


def q_aggregate_total(cfg: AppConfig) -> str:
    return f"""
    SELECT
      aggregate AS label,
      COUNT(*) AS total
    FROM {cfg.fq_schema}.tweets
    WHERE created_at >= %s AND created_at < %s
      AND aggregate IS NOT NULL
    GROUP BY aggregate
    ORDER BY label
    """


def q_aggregate_histogram(cfg: AppConfig, slice_minutes: int) -> str:
    """Counts per (TIME_SLICE bucket, sentiment label)."""
    return f"""
    SELECT
      TIME_SLICE(created_at, {int(slice_minutes)}, 'MINUTE') AS "time",
      aggregate AS label,
      COUNT(*) AS total
    FROM {cfg.fq_schema}.tweets
    WHERE created_at >= %s AND created_at < %s
      AND aggregate IS NOT NULL
    GROUP BY 1, 2
    ORDER BY 1, 2
    """


def q_topic_total(cfg: AppConfig) -> str:
    return f"""
    SELECT
      s.topic AS label,
      COUNT(*) AS total
    FROM {cfg.fq_schema}.tweet_sentiment s
    JOIN {cfg.fq_schema}.tweets t ON t.id = s.tweet_id
    WHERE t.created_at >= %s AND t.created_at < %s
      AND s.topic IS NOT NULL
    GROUP BY s.topic
    ORDER BY total DESC, label
    """


def q_topic_histogram(cfg: AppConfig, slice_minutes: int) -> str:
    """Counts per (TIME_SLICE bucket, topic)."""
    return f"""
    SELECT
      TIME_SLICE(t.created_at, {int(slice_minutes)}, 'MINUTE') AS "time",
      s.topic AS label,
      COUNT(*) AS total
    FROM {cfg.fq_schema}.tweet_sentiment s
    JOIN {cfg.fq_schema}.tweets t ON t.id = s.tweet_id
    WHERE t.created_at >= %s AND t.created_at < %s
      AND s.topic IS NOT NULL
    GROUP BY 1, 2
    ORDER BY 1, 2
    """


def q_tweets_with_aggregate(cfg: AppConfig) -> str:
    return f"""
    SELECT{_TWEET_COLUMNS}
    FROM {cfg.fq_schema}.tweets t
    WHERE t.aggregate = %s
      AND t.created_at >= %s AND t.created_at < %s
    ORDER BY t.created_at, t.id
    LIMIT {int(cfg.tweet_limit)}
    """


def q_tweets_with_topic(cfg: AppConfig) -> str:
    # A tweet can carry several annotations for the same topic
    return f"""
    SELECT DISTINCT{_TWEET_COLUMNS}
    FROM {cfg.fq_schema}.tweets t
    JOIN {cfg.fq_schema}.tweet_sentiment s ON s.tweet_id = t.id
    WHERE s.topic = %s
      AND t.created_at >= %s AND t.created_at < %s
    ORDER BY "time", t.id
    LIMIT {int(cfg.tweet_limit)}
    """


def q_tweets_with_time(cfg: AppConfig) -> str:
    return f"""
    SELECT{_TWEET_COLUMNS}
    FROM {cfg.fq_schema}.tweets t
    WHERE t.created_at >= %s AND t.created_at < %s
    ORDER BY t.created_at, t.id
    LIMIT {int(cfg.tweet_limit)}
    """


def q_insert_tweet(cfg: AppConfig) -> str:
    return f"""
    INSERT INTO {cfg.fq_schema}.tweets (id, message, lang, created_at, aggregate, score)
    VALUES (%s, %s, %s, %s, %s, %s)
    """


def q_insert_sentiment(cfg: AppConfig) -> str:
    return f"""
    INSERT INTO {cfg.fq_schema}.tweet_sentiment (tweet_id, sentiment, topic, score)
    VALUES (%s, %s, %s, %s)
    """


def q_create_tables(cfg: AppConfig) -> list[str]:
    """DDL for both tables, tweets first (tweet_sentiment references it)."""
    return [
        f"""
        CREATE TABLE IF NOT EXISTS {cfg.fq_schema}.tweets (
          id INT NOT NULL PRIMARY KEY,
          message VARCHAR(1024),
          lang VARCHAR(8),
          created_at TIMESTAMP NOT NULL,
          aggregate VARCHAR(16),
          score FLOAT
        )
        ORDER BY created_at
        SEGMENTED BY HASH(id) ALL NODES
        """,
        f"""
        CREATE TABLE IF NOT EXISTS {cfg.fq_schema}.tweet_sentiment (
          tweet_id INT NOT NULL REFERENCES {cfg.fq_schema}.tweets (id),
          sentiment VARCHAR(64),
          topic VARCHAR(128),
          score FLOAT
        )
        ORDER BY tweet_id
        SEGMENTED BY HASH(tweet_id) ALL NODES
        """,
    ]
