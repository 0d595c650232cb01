# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - per-field validation rules.

Each strategy checks one aspect of a single value and reports the
ErrorKind it failed with, or None. Strategies other than the required rule
treat blank values as valid; whether a blank is acceptable is the required
rule's decision alone.
"""

import math
import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable, Dict, Iterable, Optional, Pattern, Union

from models.wizard import ErrorKind, Role
from utils.helpers import is_blank, parse_iso_date, parse_time


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.
    """

    @abstractmethod
    def validate(self, value: Any) -> Optional[ErrorKind]:
        """
        Validate a value.

        Args:
            value: Form value to check

        Returns:
            ErrorKind of the failure, or None if the value passes
        """
        pass

    def is_valid(self, value: Any) -> bool:
        return self.validate(value) is None

    def message_params(self) -> Dict[str, Any]:
        """Extra parameters for formatting the error message."""
        return {}


class RequiredValidator(ValidationStrategy):
    """Value must be present and not blank."""

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return ErrorKind.REQUIRED
        return None


class PatternValidator(ValidationStrategy):
    """Non-empty value must fully match a regular expression."""

    def __init__(self, pattern: Union[str, Pattern], flags: int = 0):
        self.pattern = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if not self.pattern.fullmatch(str(value).strip()):
            return ErrorKind.INVALID_FORMAT
        return None


class MinLengthValidator(ValidationStrategy):
    """Non-empty value must have at least ``min_length`` characters."""

    def __init__(self, min_length: int):
        self.min_length = min_length

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if len(str(value)) < self.min_length:
            return ErrorKind.TOO_SHORT
        return None

    def message_params(self) -> Dict[str, Any]:
        return {"min_length": self.min_length}


class ChoiceValidator(ValidationStrategy):
    """Non-empty value must be one of the allowed options."""

    def __init__(self, choices: Iterable[str]):
        self.choices = tuple(choices)

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if value not in self.choices:
            return ErrorKind.INVALID_FORMAT
        return None


class DateValidator(ValidationStrategy):
    """
    Non-empty value must be an ISO date (YYYY-MM-DD).

    ``min_date`` / ``max_date`` are callables so bounds such as "today" are
    evaluated at validation time.
    """

    def __init__(
        self,
        min_date: Optional[Callable[[], date]] = None,
        max_date: Optional[Callable[[], date]] = None
    ):
        self.min_date = min_date
        self.max_date = max_date

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        parsed = parse_iso_date(value)
        if parsed is None:
            return ErrorKind.INVALID_FORMAT
        if self.min_date and parsed < self.min_date():
            return ErrorKind.INVALID_FORMAT
        if self.max_date and parsed > self.max_date():
            return ErrorKind.INVALID_FORMAT
        return None


class TimeValidator(ValidationStrategy):
    """Non-empty value must be a time slot such as "14:30" or "2:30 PM"."""

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if parse_time(value) is None:
            return ErrorKind.INVALID_FORMAT
        return None


class NumberValidator(ValidationStrategy):
    """Non-empty value must be a finite number not below ``minimum``."""

    def __init__(self, minimum: Optional[float] = 0, integer: bool = False):
        self.minimum = minimum
        self.integer = integer

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if isinstance(value, bool):
            return ErrorKind.INVALID_FORMAT
        try:
            number = float(str(value).strip())
        except ValueError:
            return ErrorKind.INVALID_FORMAT
        if not math.isfinite(number):
            return ErrorKind.INVALID_FORMAT
        # 5 and 5.0 are both whole numbers
        if self.integer and not number.is_integer():
            return ErrorKind.INVALID_FORMAT
        if self.minimum is not None and number < self.minimum:
            return ErrorKind.INVALID_FORMAT
        return None


class PhoneValidator(ValidationStrategy):
    """
    Non-empty value must be a phone number: an optional leading "+", then
    digits with spaces, dashes, dots or parentheses, holding between
    ``min_digits`` and ``max_digits`` digits.
    """

    CHARACTERS = re.compile(r"\+?[0-9\s\-().]+")

    def __init__(self, min_digits: int = 7, max_digits: int = 15):
        self.min_digits = min_digits
        self.max_digits = max_digits

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        text = str(value).strip()
        if not self.CHARACTERS.fullmatch(text):
            return ErrorKind.INVALID_FORMAT
        digits = len(re.sub(r"\D", "", text))
        if not self.min_digits <= digits <= self.max_digits:
            return ErrorKind.INVALID_FORMAT
        return None


class RoleValidator(ValidationStrategy):
    """Non-empty value must name a role, in any letter case."""

    def validate(self, value: Any) -> Optional[ErrorKind]:
        if is_blank(value):
            return None
        if Role.from_value(value) is None:
            return ErrorKind.INVALID_FORMAT
        return None
