# -*- coding: utf-8 -*-
"""Field validation package."""

from .validation_strategy import (
    ValidationStrategy,
    RequiredValidator,
    PatternValidator,
    MinLengthValidator,
    ChoiceValidator,
    DateValidator,
    TimeValidator,
    NumberValidator,
    PhoneValidator,
    RoleValidator,
)
from .validation_factory import ValidationFactory, get_validation_factory, validate

__all__ = [
    'ValidationStrategy',
    'RequiredValidator',
    'PatternValidator',
    'MinLengthValidator',
    'ChoiceValidator',
    'DateValidator',
    'TimeValidator',
    'NumberValidator',
    'PhoneValidator',
    'RoleValidator',
    'ValidationFactory',
    'get_validation_factory',
    'validate',
]
