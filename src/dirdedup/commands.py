"""
Cleanup session: the single orchestrator of scan, confirmation and deletion.
No console I/O here; the CLI drives it and prints.

States:
    IDLE → SCANNING → AWAITING_CONFIRMATION → DELETING → DONE
    SCANNING → DONE                     (nothing to delete)
    AWAITING_CONFIRMATION → CANCELLED   (declined)
"""
import logging
from typing import Optional

from dirdedup.core.errors import SessionStateError
from dirdedup.core.grouper import FileGrouperImpl
from dirdedup.core.hasher import HasherImpl, make_algorithm
from dirdedup.core.interfaces import DirectoryWalker, DirectoryCallback, ErrorCallback, GroupCallback
from dirdedup.core.models import ScanParams, ScanResult, DeletionReport, SessionState
from dirdedup.core.walker import TreeWalkerImpl
from dirdedup.services.deletion_service import DeletionService, ResultCallback

logger = logging.getLogger(__name__)


def is_affirmative(answer: Optional[str]) -> bool:
    """Only a lone 'y' (any case, surrounding whitespace ignored) confirms."""
    if answer is None:
        return False
    return answer.strip().lower() == "y"


class CleanupSession:
    """
    Runs one scan-and-delete cycle.

    Usage:
        session = CleanupSession(ScanParams(root_dir="/data"))
        result = session.scan(on_group=print_group)
        if result.has_duplicates and session.confirm(input()):
            report = session.delete(on_result=print_outcome)
    """

    def __init__(self, params: ScanParams, walker: DirectoryWalker = None,
                 deletion_service: DeletionService = None):
        self.params = params
        self.walker = walker or self._build_walker(params)
        self.deletion_service = deletion_service or DeletionService()
        self.state = SessionState.IDLE
        self.result: Optional[ScanResult] = None
        self.report: Optional[DeletionReport] = None

    @staticmethod
    def _build_walker(params: ScanParams) -> TreeWalkerImpl:
        hasher = HasherImpl(make_algorithm(params.algorithm), chunk_size=params.chunk_size)
        return TreeWalkerImpl(FileGrouperImpl(hasher))

    @property
    def finished(self) -> bool:
        return self.state.is_terminal

    def _transition(self, expected: SessionState, new: SessionState) -> None:
        if self.finished:
            raise SessionStateError(f"Session already finished (state: {self.state.value})")
        if self.state != expected:
            raise SessionStateError(
                f"Cannot move to {new.value} from {self.state.value} (expected {expected.value})"
            )
        logger.debug(f"Session: {self.state.value} -> {new.value}")
        self.state = new

    def scan(
        self,
        on_directory: Optional[DirectoryCallback] = None,
        on_group: Optional[GroupCallback] = None,
        on_error: Optional[ErrorCallback] = None
    ) -> ScanResult:
        """
        Walk the tree and freeze the deletion list.

        Raises:
            InvalidRootError: before any work if the root is unusable;
                the session stays IDLE.
        """
        if self.state != SessionState.IDLE:
            raise SessionStateError(f"Scan already started (state: {self.state.value})")
        TreeWalkerImpl.validate_root(self.params.root_dir)

        self._transition(SessionState.IDLE, SessionState.SCANNING)
        self.result = self.walker.walk(
            self.params.root_dir,
            result=ScanResult(),
            on_directory=on_directory,
            on_group=on_group,
            on_error=on_error,
        )

        if self.result.has_duplicates:
            self._transition(SessionState.SCANNING, SessionState.AWAITING_CONFIRMATION)
        else:
            self._transition(SessionState.SCANNING, SessionState.DONE)
        return self.result

    def confirm(self, answer: Optional[str]) -> bool:
        """Apply the user's answer. Anything but 'y' cancels."""
        if is_affirmative(answer):
            self._transition(SessionState.AWAITING_CONFIRMATION, SessionState.DELETING)
            return True
        self.cancel()
        return False

    def cancel(self) -> None:
        self._transition(SessionState.AWAITING_CONFIRMATION, SessionState.CANCELLED)

    def delete(self, on_result: Optional[ResultCallback] = None) -> DeletionReport:
        """Delete the frozen list. Only valid after a positive confirm()."""
        if self.state != SessionState.DELETING:
            raise SessionStateError(f"Deletion not confirmed (state: {self.state.value})")

        self.report = self.deletion_service.delete_files(self.result.files_to_delete, on_result=on_result)
        self._transition(SessionState.DELETING, SessionState.DONE)
        return self.report
