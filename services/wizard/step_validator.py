# -*- coding: utf-8 -*-
"""
Step validation service.

Validates the form state against a resolved step descriptor without any UI
coupling.
"""

from typing import Any, Dict, Mapping, Optional

from models.wizard import FieldError, StepDescriptor
from services.validation import ValidationFactory, get_validation_factory


class StepValidator:
    """Validates wizard step data field by field."""

    def __init__(self, validation_factory: Optional[ValidationFactory] = None):
        self.validation_factory = validation_factory or get_validation_factory()

    def validate_step(self, descriptor: StepDescriptor, form_state: Mapping[str, Any]) -> Dict[str, FieldError]:
        """
        Validate every active field of a step.

        Args:
            descriptor: Resolved step descriptor
            form_state: Current form values

        Returns:
            Mapping of field name to FieldError (empty if the step is valid)
        """
        errors: Dict[str, FieldError] = {}
        required = descriptor.active_required_fields(form_state)

        for field_name in descriptor.field_names():
            error = self.validation_factory.validate(
                field_name,
                form_state.get(field_name),
                required=field_name in required
            )
            if error is not None:
                errors[field_name] = error

        return errors

    def validate_field(
        self,
        descriptor: StepDescriptor,
        field_name: str,
        form_state: Mapping[str, Any]
    ) -> Optional[FieldError]:
        """
        Validate a single field in the context of its step.

        Returns None for fields that are valid or not shown on the step.
        """
        if not descriptor.has_field(field_name):
            return None
        required = field_name in descriptor.active_required_fields(form_state)
        return self.validation_factory.validate(field_name, form_state.get(field_name), required=required)

    def is_step_valid(self, descriptor: StepDescriptor, form_state: Mapping[str, Any]) -> bool:
        return not self.validate_step(descriptor, form_state)
