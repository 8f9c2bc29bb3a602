"""Unit tests for restore source parsing."""

from datetime import datetime, timezone

import pytest

from mms_api.core.exceptions import ValidationError
from mms_api.schemas.restorejob import RestoreSource, RestoreSourceKind

NOW = datetime(2026, 10, 19, 8, 30, 0, tzinfo=timezone.utc)


class TestParse:
    """Tests for RestoreSource.parse()."""

    @pytest.mark.parametrize("value", ["now", "NOW", " now "])
    def test_now(self, value: str) -> None:
        """Test `now` is a point in time at the reference time."""
        source = RestoreSource.parse(value, now=NOW)

        assert source.kind is RestoreSourceKind.NOW
        assert source.timestamp == NOW

    def test_snapshot_id(self) -> None:
        """Test 24 hex characters are a snapshot id."""
        source = RestoreSource.parse("53bd5fb5e4b0774946a16fad")

        assert source.kind is RestoreSourceKind.SNAPSHOT
        assert source.snapshot_id == "53bd5fb5e4b0774946a16fad"

    def test_timestamp(self) -> None:
        """Test ISO-8601 timestamps are points in time."""
        source = RestoreSource.parse("2014-07-09T15:24:37Z")

        assert source.kind is RestoreSourceKind.TIMESTAMP
        assert source.timestamp == datetime(2014, 7, 9, 15, 24, 37, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self) -> None:
        """Test timestamps without offset are read as UTC."""
        source = RestoreSource.parse("2014-07-09T15:24:37")
        assert source.timestamp.tzinfo is timezone.utc

    @pytest.mark.parametrize("value", ["yesterday", "53bd5fb5", "zzzd5fb5e4b0774946a16fad"])
    def test_invalid(self, value: str) -> None:
        """Test anything else is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            RestoreSource.parse(value)

        assert exc_info.value.details == {"source": value}


class TestToPayload:
    def test_snapshot_payload(self) -> None:
        """Test snapshot sources send the snapshot id."""
        source = RestoreSource.parse("53bd5fb5e4b0774946a16fad")
        assert source.to_payload() == {"snapshotId": "53bd5fb5e4b0774946a16fad"}

    def test_point_in_time_payload(self) -> None:
        """Test time sources send a timestamp with increment 0."""
        source = RestoreSource.parse("now", now=NOW)
        assert source.to_payload() == {"timestamp": {"date": "2026-10-19T08:30:00Z", "increment": 0}}
