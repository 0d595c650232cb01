# -*- coding: utf-8 -*-
"""
Wizard Framework - shared pieces of the telehealth wizards.

Provides the per-session state holder and the background worker that
performs the final submission.
"""

from .wizard_context import WizardSession
from .submission_worker import SubmissionWorker

__all__ = [
    'WizardSession',
    'SubmissionWorker'
]
