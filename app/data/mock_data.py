from __future__ import annotations

import random
from datetime import datetime, timedelta
from functools import lru_cache

import pandas as pd
from faker import Faker

from data.windows import histogram_slice_minutes, parse_window


LABELS = ["negative", "neutral", "positive"]
TOPICS = ["SB49", "Patriots", "Seahawks", "halftime", "KatyPerry", "ads", "Brady", "Lynch", "Gronk", "Budweiser"]
LANGS = ["en", "en", "en", "es", "pt", "fr"]

# Game night, UTC
MOCK_START = datetime(2015, 2, 1, 23, 0)
MOCK_HOURS = 9


@lru_cache(maxsize=1)
def tweets_mock(n_rows: int = 3000) -> pd.DataFrame:
    """Synthetic rows shaped like the tweets table."""
    random.seed(17)
    fake = Faker()
    Faker.seed(17)
    span = MOCK_HOURS * 3600
    rows = []
    for i in range(n_rows):
        # Chatter peaks around kickoff (~1h in) and the final whistle
        offset = min(span - 1, abs(int(random.gauss(2.5, 1.6) * 3600)))
        labelled = random.random() < 0.9
        rows.append(
            {
                "id": 560000000000000000 + i,
                "message": fake.sentence(nb_words=random.randint(6, 18)),
                "lang": random.choice(LANGS),
                "created_at": MOCK_START + timedelta(seconds=offset),
                "aggregate": random.choices(LABELS, weights=[0.3, 0.45, 0.25])[0] if labelled else None,
                "score": round(random.uniform(0.5, 1.0), 3) if labelled else None,
            }
        )
    return pd.DataFrame(rows).sort_values(["created_at", "id"], ignore_index=True)


@lru_cache(maxsize=1)
def sentiment_mock() -> pd.DataFrame:
    """Synthetic rows shaped like the tweet_sentiment table (0-3 annotations per tweet)."""
    random.seed(23)
    rows = []
    for tweet_id in tweets_mock()["id"]:
        for topic in random.sample(TOPICS, k=random.choice([0, 1, 1, 2, 3])):
            rows.append(
                {
                    "tweet_id": tweet_id,
                    "sentiment": random.choice(["excited", "angry", "bored", None]),
                    "topic": topic,
                    "score": round(random.uniform(0.3, 1.0), 3),
                }
            )
    return pd.DataFrame(rows, columns=["tweet_id", "sentiment", "topic", "score"])


def _in_range(df: pd.DataFrame, begin: datetime, end: datetime) -> pd.DataFrame:
    return df[(df["created_at"] >= begin) & (df["created_at"] < end)]


def _annotated(begin: datetime, end: datetime) -> pd.DataFrame:
    tweets = _in_range(tweets_mock(), begin, end)
    sent = sentiment_mock().dropna(subset=["topic"])
    return sent.merge(tweets, left_on="tweet_id", right_on="id", suffixes=("_s", ""))


def _tweet_rows(df: pd.DataFrame, limit: int) -> pd.DataFrame:
    out = df.rename(columns={"created_at": "time", "aggregate": "label"})
    out = out[["id", "time", "message", "lang", "label", "score"]]
    return out.sort_values(["time", "id"]).head(limit).reset_index(drop=True)


def _histogram(df: pd.DataFrame, label_col: str, begin: datetime, end: datetime) -> pd.DataFrame:
    minutes = histogram_slice_minutes(begin, end)
    out = df.dropna(subset=[label_col]).assign(time=lambda d: d["created_at"].dt.floor(f"{minutes}min"))
    return (
        out.groupby(["time", label_col], as_index=False)
        .size()
        .rename(columns={label_col: "label", "size": "total"})
        .sort_values(["time", "label"], ignore_index=True)
    )


def date_range_mock() -> pd.DataFrame:
    df = tweets_mock()
    return pd.DataFrame([{"begin": df["created_at"].min(), "end": df["created_at"].max()}])


def aggregate_total_mock(begin: datetime, end: datetime) -> pd.DataFrame:
    df = _in_range(tweets_mock(), begin, end).dropna(subset=["aggregate"])
    return (
        df.groupby("aggregate", as_index=False)
        .size()
        .rename(columns={"aggregate": "label", "size": "total"})
        .sort_values("label", ignore_index=True)
    )


def aggregate_histogram_mock(begin: datetime, end: datetime) -> pd.DataFrame:
    return _histogram(_in_range(tweets_mock(), begin, end), "aggregate", begin, end)


def topic_total_mock(begin: datetime, end: datetime) -> pd.DataFrame:
    df = _annotated(begin, end)
    out = df.groupby("topic", as_index=False).size().rename(columns={"topic": "label", "size": "total"})
    return out.sort_values(["total", "label"], ascending=[False, True], ignore_index=True)


def topic_histogram_mock(begin: datetime, end: datetime) -> pd.DataFrame:
    return _histogram(_annotated(begin, end), "topic", begin, end)


def tweets_with_aggregate_mock(label: str, begin: datetime, end: datetime, limit: int = 1000) -> pd.DataFrame:
    df = _in_range(tweets_mock(), begin, end)
    return _tweet_rows(df[df["aggregate"] == label], limit)


def tweets_with_topic_mock(topic: str, begin: datetime, end: datetime, limit: int = 1000) -> pd.DataFrame:
    df = _annotated(begin, end)
    df = df[df["topic"] == topic].drop_duplicates(subset=["id"])
    return _tweet_rows(df, limit)


def tweets_with_time_mock(window: str, limit: int = 1000) -> pd.DataFrame:
    bounds = parse_window(window)
    if bounds is None:
        return _tweet_rows(tweets_mock().iloc[0:0], limit)
    return _tweet_rows(_in_range(tweets_mock(), *bounds), limit)
