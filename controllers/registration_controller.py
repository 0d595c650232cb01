# -*- coding: utf-8 -*-
"""
Registration Controller
=======================
Wizard controller for account registration: Personal Info, Role Details
and Verification. The Role Details step shows the fields of the role
picked on the first step.
"""

from typing import Optional

from controllers.wizard_controller import WizardController
from models.wizard import Role
from services.api_client import TelehealthApiClient
from services.registration_service import RegistrationService
from services.submission_adapter import SubmissionAdapter
from services.wizard import StepValidator, build_registration_resolver
from services.wizard.registration_steps import ROLE_FIELD


class RegistrationController(WizardController):
    """Controller for the patient / doctor / pharmacist sign-up wizard."""

    reference_prefix = "REG"
    discriminator_field = ROLE_FIELD

    def __init__(
        self,
        api_client: Optional[TelehealthApiClient] = None,
        adapter: Optional[SubmissionAdapter] = None,
        step_validator: Optional[StepValidator] = None,
        run_in_background: bool = True,
        parent=None
    ):
        super().__init__(
            build_registration_resolver(),
            adapter or RegistrationService(api_client),
            step_validator=step_validator,
            run_in_background=run_in_background,
            parent=parent
        )

    @property
    def selected_role(self) -> Optional[Role]:
        """Role currently chosen on the first step, if any."""
        return Role.from_value(self.get_value(ROLE_FIELD))
