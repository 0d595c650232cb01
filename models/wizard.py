# -*- coding: utf-8 -*-
"""
Wizard data model.

Closed enums for roles and validation error kinds, the immutable FormState
mapping, step descriptors, and the submission confirmation record.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple


class Role(Enum):
    """User role selected on the first registration step."""
    PATIENT = "Patient"
    DOCTOR = "Doctor"
    PHARMACIST = "Pharmacist"

    @classmethod
    def from_value(cls, value: Any) -> Optional['Role']:
        """Parse a form value case-insensitively. Blank or unknown gives None."""
        if isinstance(value, Role):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        wanted = value.strip().lower()
        for role in cls:
            if role.value.lower() == wanted:
                return role
        return None

    @property
    def api_value(self) -> str:
        """Role as the backend stores it."""
        return self.value.lower()


class ErrorKind(Enum):
    """Kinds of per-field validation failure."""
    REQUIRED = "required"
    INVALID_FORMAT = "invalid_format"
    TOO_SHORT = "too_short"


class WizardStatus(Enum):
    """Lifecycle status of a wizard session."""
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class FieldError:
    """Validation failure for one field."""
    field: str
    kind: ErrorKind
    message: str

    def __str__(self):
        return self.message


class FormState(Mapping[str, Any]):
    """
    Immutable mapping of field name to value.

    Updates go through set()/merge(), which return a new FormState and
    leave the original untouched. Setting a value that is already present
    returns the same instance.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data = MappingProxyType(dict(data or {}))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return f"FormState({dict(self._data)!r})"

    def set(self, name: str, value: Any) -> 'FormState':
        """Return a FormState with ``name`` set to ``value``."""
        if name in self._data and self._data[name] == value:
            return self
        updated = dict(self._data)
        updated[name] = value
        return FormState(updated)

    def merge(self, values: Mapping[str, Any]) -> 'FormState':
        """Return a FormState with every entry of ``values`` applied."""
        state = self
        for name, value in values.items():
            state = state.set(name, value)
        return state

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict copy of the state."""
        return dict(self._data)


# Predicate over the form state that decides whether a conditional field is required
Condition = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class StepDescriptor:
    """
    Definition of one wizard step.

    required_fields must be non-empty and valid to advance. optional_fields
    are validated only when filled in. conditional_fields become required
    while their predicate holds for the current form state.
    """
    step_id: str
    title: str
    required_fields: Tuple[str, ...] = ()
    optional_fields: Tuple[str, ...] = ()
    conditional_fields: Tuple[Tuple[str, Condition], ...] = ()
    is_placeholder: bool = False

    def active_required_fields(self, form_state: Mapping[str, Any]) -> Tuple[str, ...]:
        """Required fields plus the conditional ones triggered by ``form_state``."""
        triggered = tuple(
            name for name, condition in self.conditional_fields
            if condition(form_state)
        )
        return self.required_fields + triggered

    def field_names(self) -> Tuple[str, ...]:
        """Every field the step can show, in display order."""
        conditional = tuple(name for name, _ in self.conditional_fields)
        return self.required_fields + conditional + self.optional_fields

    def has_field(self, name: str) -> bool:
        return name in self.field_names()

    @classmethod
    def placeholder(cls, step_id: str, title: str) -> 'StepDescriptor':
        """Descriptor with nothing to validate."""
        return cls(step_id=step_id, title=title, is_placeholder=True)


@dataclass(frozen=True)
class Confirmation:
    """Successful submission result returned by the backend."""
    reference: Optional[str] = None
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
