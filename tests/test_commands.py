"""
Tests for CleanupSession: the scan → confirm → delete state machine.
"""
from unittest import mock

import pytest

from dirdedup.commands import CleanupSession, is_affirmative
from dirdedup.core.errors import InvalidRootError, SessionStateError
from dirdedup.core.hasher import XXHashAlgorithmImpl
from dirdedup.core.models import ScanParams, SessionState, HashAlgorithmName


class TestIsAffirmative:

    @pytest.mark.parametrize("answer", ["y", "Y", " y ", "y\n", "\tY\r\n"])
    def test_accepts_single_y(self, answer):
        assert is_affirmative(answer) is True

    @pytest.mark.parametrize("answer", ["", "n", "yes", "Yes", "yy", "ok", "1", None])
    def test_everything_else_declines(self, answer):
        assert is_affirmative(answer) is False


class TestSessionFlow:

    def test_starts_idle(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        assert session.state == SessionState.IDLE

    def test_scan_with_duplicates_awaits_confirmation(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))

        result = session.scan()

        assert session.state == SessionState.AWAITING_CONFIRMATION
        assert result.files_to_delete == (str(level_tree["a_copy"]),)

    def test_scan_without_duplicates_goes_straight_to_done(self, temp_dir):
        (temp_dir / "only.txt").write_text("x")
        session = CleanupSession(ScanParams(root_dir=str(temp_dir)))

        session.scan()

        assert session.state == SessionState.DONE
        with pytest.raises(SessionStateError):
            session.confirm("y")

    def test_confirm_and_delete(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        session.scan()

        assert session.confirm("Y") is True
        assert session.state == SessionState.DELETING

        report = session.delete()

        assert session.state == SessionState.DONE
        assert report.deleted == [str(level_tree["a_copy"])]
        assert not level_tree["a_copy"].exists()
        assert level_tree["a"].exists()
        assert level_tree["nested"].exists()
        assert level_tree["unique"].exists()

    @pytest.mark.parametrize("answer", ["n", "", "yes"])
    def test_decline_cancels_and_touches_nothing(self, level_tree, answer):
        before = sorted(p for p in level_tree["root"].rglob("*"))
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        session.scan()

        assert session.confirm(answer) is False
        assert session.state == SessionState.CANCELLED
        with pytest.raises(SessionStateError):
            session.delete()

        assert sorted(p for p in level_tree["root"].rglob("*")) == before

    def test_delete_without_confirmation_is_refused(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        session.scan()

        with pytest.raises(SessionStateError):
            session.delete()
        assert level_tree["a_copy"].exists()

    def test_scan_twice_is_refused(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        session.scan()
        with pytest.raises(SessionStateError):
            session.scan()

    def test_finished_only_in_terminal_states(self, level_tree):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        assert not session.finished

        session.scan()
        assert not session.finished

        session.confirm("y")
        assert not session.finished

        session.delete()
        assert session.finished

    @pytest.mark.parametrize("answer", ["y", "n"])
    def test_finished_session_refuses_further_transitions(self, level_tree, answer):
        session = CleanupSession(ScanParams(root_dir=str(level_tree["root"])))
        session.scan()
        if session.confirm(answer):
            session.delete()
        assert session.state.is_terminal

        with pytest.raises(SessionStateError, match="already finished"):
            session.cancel()
        with pytest.raises(SessionStateError, match="already finished"):
            session.confirm("y")

    def test_invalid_root_fails_before_any_work(self, temp_dir):
        walker = mock.Mock()
        session = CleanupSession(ScanParams(root_dir=str(temp_dir / "missing")), walker=walker)

        with pytest.raises(InvalidRootError):
            session.scan()

        walker.walk.assert_not_called()
        assert session.state == SessionState.IDLE

    def test_algorithm_from_params(self, temp_dir):
        session = CleanupSession(ScanParams(root_dir=str(temp_dir), algorithm=HashAlgorithmName.XXH128))
        assert isinstance(session.walker.grouper.hasher.algorithm, XXHashAlgorithmImpl)


class TestScanParams:

    def test_defaults(self):
        params = ScanParams(root_dir=".")
        assert params.algorithm == HashAlgorithmName.SHA256
        assert params.chunk_size == 64 * 1024

    def test_algorithm_from_string(self):
        assert ScanParams(root_dir=".", algorithm="XXH128").algorithm == HashAlgorithmName.XXH128

    @pytest.mark.parametrize("kwargs", [
        {"root_dir": ""},
        {"root_dir": ".", "chunk_size": 0},
        {"root_dir": ".", "algorithm": "md5"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ScanParams(**kwargs)
