# -*- coding: utf-8 -*-
"""Background worker for the final wizard submission."""

from typing import Any, Mapping

from PyQt5.QtCore import QThread, pyqtSignal

from services.exceptions import SubmissionError
from services.submission_adapter import SubmissionAdapter
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """Runs SubmissionAdapter.submit() off the UI thread."""

    succeeded = pyqtSignal(object)  # Confirmation
    failed = pyqtSignal(object)  # Exception

    def __init__(self, adapter: SubmissionAdapter, form_state: Mapping[str, Any], parent=None):
        super().__init__(parent)
        self.adapter = adapter
        self.form_state = form_state

    def run(self):
        """Submit in background."""
        try:
            confirmation = self.adapter.submit(self.form_state)
        except SubmissionError as e:
            self.failed.emit(e)
            return
        except Exception as e:
            logger.error(f"Unexpected error during submission: {e}", exc_info=True)
            self.failed.emit(e)
            return
        self.succeeded.emit(confirmation)
