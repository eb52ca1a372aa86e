"""Tests for the dispatcher — name lookup, batch runs and comparison."""

import pytest

from py_seek.disk import cscan, fcfs, scan, sstf
from py_seek.dispatch import (
    ALGORITHM_INFO,
    Algorithm,
    best_algorithm,
    get_all_results,
    run_algorithm,
)
from py_seek.logging import Logger, LogLevel

_REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]
_HEAD = 53
_MAX_CYLINDER = 199


class TestAlgorithmParse:
    """Algorithm names as a UI sends them."""

    def test_display_names(self) -> None:
        """Each policy parses from its display name."""
        assert Algorithm.parse("FCFS") is Algorithm.FCFS
        assert Algorithm.parse("SSTF") is Algorithm.SSTF
        assert Algorithm.parse("SCAN") is Algorithm.SCAN
        assert Algorithm.parse("C-SCAN") is Algorithm.CSCAN

    def test_names_are_case_sensitive(self) -> None:
        """Lowercase or padded names are unknown names."""
        assert Algorithm.parse("scan") is Algorithm.FCFS
        assert Algorithm.parse(" C-SCAN ") is Algorithm.FCFS
        with pytest.raises(ValueError, match="c-scan"):
            Algorithm.parse("c-scan", strict=True)

    def test_unknown_falls_back(self) -> None:
        """Unknown names become FCFS by default."""
        assert Algorithm.parse("LOOK") is Algorithm.FCFS

    def test_unknown_strict(self) -> None:
        """Strict parsing rejects unknown names."""
        with pytest.raises(ValueError, match="LOOK"):
            Algorithm.parse("LOOK", strict=True)

    def test_str_is_display_name(self) -> None:
        """The enum prints as the name a UI shows."""
        assert str(Algorithm.CSCAN) == "C-SCAN"


class TestRunAlgorithm:
    """run_algorithm forwards to the matching policy."""

    def test_forwards_by_name(self) -> None:
        """Each name runs its policy with the same arguments."""
        assert run_algorithm("FCFS", _REQUESTS, _HEAD, _MAX_CYLINDER) == fcfs(_REQUESTS, _HEAD)
        assert run_algorithm("SSTF", _REQUESTS, _HEAD, _MAX_CYLINDER) == sstf(_REQUESTS, _HEAD)
        assert run_algorithm("SCAN", _REQUESTS, _HEAD, _MAX_CYLINDER) == scan(_REQUESTS, _HEAD, _MAX_CYLINDER)
        assert run_algorithm("C-SCAN", _REQUESTS, _HEAD, _MAX_CYLINDER) == cscan(_REQUESTS, _HEAD, _MAX_CYLINDER)

    def test_accepts_enum(self) -> None:
        """An Algorithm member works as well as a string."""
        result = run_algorithm(Algorithm.SSTF, _REQUESTS, _HEAD, _MAX_CYLINDER)
        expected = 236
        assert result.total_seek_time == expected

    def test_unknown_name_runs_fcfs(self) -> None:
        """An unknown name silently runs FCFS."""
        result = run_algorithm("bogus", _REQUESTS, _HEAD, _MAX_CYLINDER)
        assert result == fcfs(_REQUESTS, _HEAD)

    def test_lowercase_name_runs_fcfs(self) -> None:
        """A lowercase policy name is unknown and runs FCFS."""
        result = run_algorithm("scan", _REQUESTS, _HEAD, _MAX_CYLINDER)
        assert result == fcfs(_REQUESTS, _HEAD)

    def test_fallback_is_logged(self) -> None:
        """With a logger, the fallback leaves a warning behind."""
        logger = Logger()
        run_algorithm("bogus", _REQUESTS, _HEAD, _MAX_CYLINDER, logger=logger)
        warnings = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings) == 1
        assert "bogus" in warnings[0].message
        assert warnings[0].algorithm == "FCFS"

    def test_run_is_logged(self) -> None:
        """A normal run records one info entry and no warning."""
        logger = Logger()
        run_algorithm("SSTF", _REQUESTS, _HEAD, _MAX_CYLINDER, logger=logger)
        (entry,) = logger.entries
        assert entry.level is LogLevel.INFO
        assert entry.source == "dispatch"
        assert "total seek 236" in entry.message
        assert entry.algorithm == "SSTF"


class TestGetAllResults:
    """Batch run for side-by-side comparison."""

    def test_all_policies_present(self) -> None:
        """Every policy appears, in enum order."""
        results = get_all_results(_REQUESTS, _HEAD, _MAX_CYLINDER)
        assert list(results) == list(Algorithm)

    def test_textbook_totals(self) -> None:
        """The classic example's totals for all four policies."""
        results = get_all_results(_REQUESTS, _HEAD, _MAX_CYLINDER)
        totals = {str(name): result.total_seek_time for name, result in results.items()}
        assert totals == {"FCFS": 640, "SSTF": 236, "SCAN": 331, "C-SCAN": 382}

    def test_scan_sweeps_right(self) -> None:
        """SCAN in the batch always starts to the right."""
        results = get_all_results(_REQUESTS, _HEAD, _MAX_CYLINDER)
        assert results[Algorithm.SCAN] == scan(_REQUESTS, _HEAD, _MAX_CYLINDER, "right")

    def test_empty_requests(self) -> None:
        """Nothing to do means zero cost everywhere."""
        results = get_all_results([], _HEAD, _MAX_CYLINDER)
        assert all(result.total_seek_time == 0 for result in results.values())


class TestBestAlgorithm:
    """The comparison winner."""

    def test_textbook_winner(self) -> None:
        """SSTF wins the classic example."""
        results = get_all_results(_REQUESTS, _HEAD, _MAX_CYLINDER)
        assert best_algorithm(results) is Algorithm.SSTF

    def test_tie_goes_to_first(self) -> None:
        """With equal totals the first policy wins."""
        results = get_all_results([60], 50, _MAX_CYLINDER)
        assert best_algorithm(results) is Algorithm.FCFS

    def test_empty(self) -> None:
        """Comparing nothing is an error."""
        with pytest.raises(ValueError, match="No results"):
            best_algorithm({})


class TestAlgorithmInfo:
    """Display text for each policy."""

    def test_every_policy_described(self) -> None:
        """There is info for every policy."""
        assert set(ALGORITHM_INFO) == set(Algorithm)

    def test_info_fields(self) -> None:
        """Each entry has a name, description, pros and cons."""
        for info in ALGORITHM_INFO.values():
            assert info.name
            assert info.description
            assert info.pros
            assert info.cons
