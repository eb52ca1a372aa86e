"""Tests for step-by-step playback of a schedule."""

from py_seek.disk import cscan, fcfs
from py_seek.playback import Playback
from py_seek.seek import ScheduleResult, SeekOperation


def _two_step() -> Playback:
    """Play back FCFS serving 100 then 25 from cylinder 50."""
    return Playback(fcfs([100, 25], 50))


class TestPlayback:
    """The cursor reveals one operation per step."""

    def test_starts_at_initial_head(self) -> None:
        """Before any step the arm is where it started."""
        playback = _two_step()
        assert playback.step == 0
        expected = 50
        assert playback.head == expected
        assert playback.revealed == ()
        assert playback.elapsed_seek == 0
        assert not playback.done

    def test_advance(self) -> None:
        """Advancing reveals the next move and moves the arm."""
        playback = _two_step()
        assert playback.advance() == SeekOperation(50, 100, 50)
        expected_head = 100
        assert playback.head == expected_head
        expected_seek = 50
        assert playback.elapsed_seek == expected_seek

    def test_runs_to_completion(self) -> None:
        """After the last move the cursor is done and stays done."""
        playback = _two_step()
        playback.advance()
        playback.advance()
        assert playback.done
        assert playback.advance() is None
        expected = 125
        assert playback.elapsed_seek == expected
        assert playback.elapsed_seek == playback.result.total_seek_time

    def test_reset(self) -> None:
        """Reset rewinds to the start."""
        playback = _two_step()
        playback.advance()
        playback.reset()
        assert playback.step == 0
        assert not playback.done

    def test_iterate_remaining(self) -> None:
        """Iteration yields only the operations not yet revealed."""
        playback = _two_step()
        playback.advance()
        assert list(playback) == [SeekOperation(100, 25, 75)]
        assert playback.done

    def test_includes_boundary_operations(self) -> None:
        """Edge trips are played back like any other move."""
        result = cscan([98, 183, 37, 122, 14, 124, 65, 67], 53, 199)
        playback = Playback(result)
        assert list(playback) == list(result.seek_operations)

    def test_empty_schedule(self) -> None:
        """An empty schedule is done immediately."""
        playback = Playback(ScheduleResult.empty())
        assert playback.done
        assert playback.head is None
        assert playback.advance() is None
