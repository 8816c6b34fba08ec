"""Tests for common.datetime module."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from common.datetime import parse_datetime, parse_optional_datetime, utcnow

NOON = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestParseDatetime:
    def test_none_is_now(self) -> None:
        before = utcnow()
        result = parse_datetime(None)
        assert before <= result <= utcnow()
        assert result.tzinfo is not None

    def test_aware_datetime_is_unchanged(self) -> None:
        assert parse_datetime(NOON) is NOON

    def test_naive_datetime_assumed_utc(self) -> None:
        assert parse_datetime(datetime(2024, 1, 1, 12)) == NOON

    @pytest.mark.parametrize("value", ["2024-01-01T12:00:00+00:00", "2024-01-01T12:00:00Z", "2024-01-01T12:00:00"])
    def test_iso_strings(self, value: str) -> None:
        assert parse_datetime(value) == NOON

    def test_epoch_seconds_and_millis(self) -> None:
        assert parse_datetime(1704110400) == NOON
        assert parse_datetime(1704110400000) == NOON

    def test_timestamp_object(self) -> None:
        stamp = Mock(to_datetime=Mock(return_value=NOON))
        assert parse_datetime(stamp) == NOON

    def test_rejects_unknown_types(self) -> None:
        with pytest.raises(TypeError):
            parse_datetime(True)
        with pytest.raises(TypeError):
            parse_datetime(object())


class TestParseOptionalDatetime:
    def test_none_stays_none(self) -> None:
        assert parse_optional_datetime(None) is None
        assert parse_optional_datetime("2024-01-01T12:00:00Z") == NOON
