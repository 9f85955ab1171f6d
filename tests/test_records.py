"""Tests for delimited record parsing."""

from datetime import datetime

import pytest

from data.records import RecordFormatError, SentimentRecord, TweetRecord, split_line


class TestSplitLine:
    def test_plain_fields(self):
        assert split_line("1|a|b") == ["1", "a", "b"]

    def test_escaped_separator_and_newline(self):
        assert split_line(r"1|nice test with \| and \n|en") == ["1", "nice test with | and \n", "en"]

    def test_escaped_backslash_and_tab(self):
        assert split_line(r"a\\b|c\td") == ["a\\b", "c\td"]

    def test_unknown_escape_is_kept(self):
        assert split_line(r"a\xb|c") == [r"a\xb", "c"]

    def test_trailing_newline_is_stripped(self):
        assert split_line("1|a\r\n") == ["1", "a"]

    def test_empty_fields_are_kept(self):
        assert split_line("1||") == ["1", "", ""]

    def test_custom_multichar_separator(self):
        assert split_line(r"1::a\::b::c", "::") == ["1", "a::b", "c"]

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            split_line("1|2", "")


class TestTweetRecord:
    def test_full_record(self):
        rec = TweetRecord.from_line(r"1234|nice test with \| and \n|en|2015-02-02 03:00:00|neutral|0.89")

        assert rec.id == 1234
        assert rec.message == "nice test with | and \n"
        assert rec.lang == "en"
        assert rec.created_at == datetime(2015, 2, 2, 3, 0)
        assert rec.aggregate == "neutral"
        assert rec.score == pytest.approx(0.89)

    def test_record_without_aggregate(self):
        rec = TweetRecord.from_line(r"1235|nice test with \| and \n|en|2015-02-02 03:00:00", "|")

        assert rec.id == 1235
        assert rec.aggregate is None
        assert rec.score is None

    def test_empty_aggregate_fields_are_null(self):
        rec = TweetRecord.from_line("1|hi|en|2015-02-02 03:00:00||")
        assert rec.aggregate is None
        assert rec.score is None

    def test_fractional_seconds(self):
        rec = TweetRecord.from_line("1|hi|en|2015-02-02 03:00:00.250")
        assert rec.created_at == datetime(2015, 2, 2, 3, 0, 0, 250000)

    def test_custom_separator(self):
        rec = TweetRecord.from_line("7\thi|there\ten\t2015-02-02 03:00:00", "\t")
        assert rec.message == "hi|there"

    def test_params_follow_insert_column_order(self):
        rec = TweetRecord.from_line("1|hi|en|2015-02-02 03:00:00|positive|0.5")
        assert rec.params() == (1, "hi", "en", datetime(2015, 2, 2, 3, 0), "positive", 0.5)

    @pytest.mark.parametrize(
        "line",
        [
            "1|hi|en",
            "1|hi|en|2015-02-02 03:00:00|neutral",
            "x|hi|en|2015-02-02 03:00:00",
            "1|hi|en|yesterday",
            "1|hi|en|2015-02-02 03:00:00|neutral|very",
        ],
    )
    def test_malformed_lines(self, line):
        with pytest.raises(RecordFormatError):
            TweetRecord.from_line(line)


class TestSentimentRecord:
    def test_full_record(self):
        rec = SentimentRecord.from_line("1234|nice|test|0.89")
        assert rec == SentimentRecord(tweet_id=1234, sentiment="nice", topic="test", score=0.89)

    def test_null_sentiment(self):
        rec = SentimentRecord.from_line("1234|null|test|0.89", "|", "null")
        assert rec.sentiment is None
        assert rec.topic == "test"

    def test_null_topic(self):
        rec = SentimentRecord.from_line("1234|nice|null|0.89", "|", "null")
        assert rec.sentiment == "nice"
        assert rec.topic is None

    def test_null_token_not_applied_without_token(self):
        rec = SentimentRecord.from_line("1234|null|test|0.89")
        assert rec.sentiment == "null"

    def test_empty_fields_are_null(self):
        rec = SentimentRecord.from_line("1234|||")
        assert rec.sentiment is None
        assert rec.topic is None
        assert rec.score is None

    def test_tweet_id_cannot_be_nulled(self):
        with pytest.raises(RecordFormatError):
            SentimentRecord.from_line("null|nice|test|0.89", "|", "null")

    def test_wrong_field_count(self):
        with pytest.raises(RecordFormatError, match="4 fields"):
            SentimentRecord.from_line("1234|nice|test")

    def test_record_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            SentimentRecord.from_line("1234|nice|test|high")
