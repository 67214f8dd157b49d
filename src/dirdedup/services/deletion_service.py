"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/deletion_service.py
Permanent removal of discard candidates.

Each path is removed exactly once with os.remove; there is no trash and
no retry. A failure on one path never stops the batch.
"""
import os
import logging
from typing import Iterable, Optional, Callable

from dirdedup.core.errors import DeletionError
from dirdedup.core.models import DeletionReport

logger = logging.getLogger(__name__)

ResultCallback = Callable[[str, Optional[DeletionError]], None]


class DeletionService:
    """
    Deletes files independently and tallies the outcome.
    """

    @staticmethod
    def delete_file(path: str) -> None:
        """Removes one file. Raises DeletionError on failure."""
        try:
            os.remove(path)
        except OSError as e:
            raise DeletionError(path, e.strerror or str(e)) from e

    @classmethod
    def delete_files(cls, paths: Iterable[str], on_result: Optional[ResultCallback] = None) -> DeletionReport:
        """
        Removes every path, collecting failures instead of raising.

        Args:
            paths: Files to delete, in order
            on_result: Called after each attempt with (path, None) on success
                       or (path, DeletionError) on failure
        Returns:
            DeletionReport with deleted paths and (path, reason) failures
        """
        report = DeletionReport()
        for path in paths:
            try:
                cls.delete_file(path)
            except DeletionError as e:
                logger.warning(str(e))
                report.failed.append((path, e.reason))
                if on_result:
                    on_result(path, e)
                continue

            logger.debug(f"Deleted {path}")
            report.deleted.append(path)
            if on_result:
                on_result(path, None)

        logger.info(f"Deletion finished: {report.success_count} deleted, {report.failure_count} failed")
        return report
