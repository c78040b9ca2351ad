from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

from roster_ingest.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    """Test that is_tty_enabled returns sys.stdout.isatty()."""
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch('roster_ingest.services.progress.is_tty_enabled', return_value=True), \
             patch('roster_ingest.services.progress.tqdm') as mock_tqdm:

            tracker = ProgressTracker(5, description="Rosters")

            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Rosters",
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('roster_ingest.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(5)

            assert tracker.description == "Ingesting files"
            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_file_cycle_updates_bar_and_tallies(self):
        mock_pbar = Mock()

        with patch('roster_ingest.services.progress.is_tty_enabled', return_value=True), \
             patch('roster_ingest.services.progress.tqdm', return_value=mock_pbar):

            tracker = ProgressTracker(2, description="Ingesting")
            tracker.start_file(Path("data/roster.csv"))
            tracker.finish_file(success=True, records=4)
            tracker.start_file(Path("data/empty.csv"))
            tracker.finish_file(success=False)

            assert tracker.current_file == 2
            assert (tracker.succeeded, tracker.failed, tracker.records) == (1, 1, 4)
            mock_pbar.set_description.assert_any_call("Ingesting (roster.csv)")
            mock_pbar.set_postfix.assert_called_with(success=1, failed=1, records=4)
            assert mock_pbar.update.call_count == 2

    def test_disabled_tracker_still_counts(self):
        with patch('roster_ingest.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(1)
            tracker.start_file(Path("roster.csv"))
            tracker.finish_file(success=True, records=3)
            tracker.close()
            assert tracker.current_file == 1
            assert tracker.records == 3

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()

        with patch('roster_ingest.services.progress.is_tty_enabled', return_value=True), \
             patch('roster_ingest.services.progress.tqdm', return_value=mock_pbar):

            with ProgressTracker(1) as tracker:
                assert tracker.pbar is mock_pbar

            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None
