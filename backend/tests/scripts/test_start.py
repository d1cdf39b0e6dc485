"""Tests for the start script's migration retry loop."""
import logging

import pytest
from sqlalchemy.exc import OperationalError

import start


def refused_error() -> OSError:
    try:
        try:
            raise ConnectionRefusedError(111, "Connect call failed")
        except ConnectionRefusedError as e:
            raise OSError("could not reach database") from e
    except OSError as e:
        return e


class FlakyUpgrade:
    """Fails a fixed number of times, then succeeds."""

    def __init__(self, failures: int, error: Exception) -> None:
        self.failures = failures
        self.error = error
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    recorded: list[float] = []
    monkeypatch.setattr(start.time, "sleep", recorded.append)
    return recorded


class TestIsConnectionRefused:
    """Tests for is_connection_refused."""

    def test__is_connection_refused__follows_cause_chain(self) -> None:
        assert start.is_connection_refused(refused_error()) is True

    def test__is_connection_refused__follows_context_chain(self) -> None:
        try:
            try:
                raise ConnectionRefusedError
            except ConnectionRefusedError:
                raise OSError("boom")  # noqa: B904
        except OSError as e:
            assert start.is_connection_refused(e) is True

    def test__is_connection_refused__matches_driver_message(self) -> None:
        error = OperationalError("SELECT 1", {}, Exception("Connection refused"))
        assert start.is_connection_refused(error) is True

    def test__is_connection_refused__other_errors(self) -> None:
        assert start.is_connection_refused(OSError("disk full")) is False


class TestRunMigrations:
    """Tests for run_migrations."""

    def test__run_migrations__first_attempt_succeeds(self, sleeps: list[float]) -> None:
        upgrade = FlakyUpgrade(failures=0, error=OSError())
        start.run_migrations(upgrade=upgrade)
        assert upgrade.calls == 1
        assert sleeps == []

    def test__run_migrations__succeeds_on_later_attempt(
        self, sleeps: list[float], caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.INFO, logger="start")
        upgrade = FlakyUpgrade(failures=2, error=refused_error())

        start.run_migrations(attempts=5, delay=5.0, upgrade=upgrade)

        assert upgrade.calls == 3
        assert sleeps == [5.0, 5.0]
        assert "Connection refused" in caplog.text
        assert "Migrations applied" in caplog.text

    def test__run_migrations__exits_after_last_attempt(
        self, sleeps: list[float], caplog: pytest.LogCaptureFixture,
    ) -> None:
        upgrade = FlakyUpgrade(failures=10, error=refused_error())

        with pytest.raises(SystemExit) as exc_info:
            start.run_migrations(attempts=5, delay=0.5, upgrade=upgrade)

        assert exc_info.value.code == 1
        assert upgrade.calls == 5
        assert sleeps == [0.5] * 4
        assert "Migration failed after 5 attempts" in caplog.text
        assert "private URL" in caplog.text

    def test__run_migrations__other_errors_propagate(self, sleeps: list[float]) -> None:
        upgrade = FlakyUpgrade(failures=1, error=ValueError("bad revision"))
        with pytest.raises(ValueError, match="bad revision"):
            start.run_migrations(upgrade=upgrade)
        assert sleeps == []
