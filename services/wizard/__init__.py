# -*- coding: utf-8 -*-
"""Wizard step services: content resolution and step validation."""

from .step_resolver import RoleBranch, StepContentResolver
from .step_validator import StepValidator
from .registration_steps import build_registration_resolver
from .booking_steps import build_booking_resolver

__all__ = [
    'RoleBranch',
    'StepContentResolver',
    'StepValidator',
    'build_registration_resolver',
    'build_booking_resolver',
]
