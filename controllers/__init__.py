# -*- coding: utf-8 -*-
"""
Telehealth Controllers
======================
Controller layer between the wizard pages and the services.

Controllers provide:
- Step navigation and validation state
- Qt signals for UI updates
- The final submission, run off the UI thread

Usage:
    from controllers import RegistrationController

    controller = RegistrationController()
    controller.update_field("fullName", "Jane Doe")
    if not controller.advance():
        print(controller.field_errors)
"""

from controllers.base_controller import BaseController
from controllers.wizard_controller import WizardController
from controllers.registration_controller import RegistrationController
from controllers.booking_controller import BookingController

__all__ = [
    "BaseController",
    "WizardController",
    "RegistrationController",
    "BookingController",
]
