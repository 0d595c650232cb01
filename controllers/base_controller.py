# -*- coding: utf-8 -*-
"""
Base Controller
===============
Common base class for the telehealth controllers.

Controllers sit between the wizard pages and the services: they own the
session state and report progress to the UI through Qt signals.
"""

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation progress signals
    - Loading state
    - Error reporting with logging
    """

    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        """Whether a long-running operation is in progress."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        return self._last_error

    def _set_loading(self, loading: bool):
        if self._is_loading == loading:
            return
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _emit_started(self, operation: str):
        self._last_error = ""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        self.operation_completed.emit(operation, success)
        self._set_loading(False)

    def _emit_error(self, operation: str, error: str):
        """Record the error, notify listeners and leave the loading state."""
        self._set_error(error)
        self.operation_error.emit(operation, error)
        self._set_loading(False)
