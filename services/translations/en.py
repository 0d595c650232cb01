# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Wizards
    "wizard.registration.title": "Create an Account",
    "wizard.registration.submit": "Register Now",
    "wizard.booking.title": "Book an Appointment",
    "wizard.booking.submit": "Confirm Booking",

    # Registration steps
    "step.personal_info": "Personal Info",
    "step.role_details": "Role Details",
    "step.verification": "Verification",

    # Booking steps
    "step.provider": "Provider",
    "step.appointment_type": "Type",
    "step.date_time": "Date & Time",
    "step.reason": "Reason",
    "step.confirm": "Confirm",

    # Field labels - Personal info
    "field.fullName": "Full Name",
    "field.dateOfBirth": "Date of Birth",
    "field.gender": "Gender",
    "field.role": "Registering as",
    "field.streetAddress": "Street Address",
    "field.city": "City",
    "field.stateProvince": "State / Province",
    "field.zipCode": "ZIP Code",
    "field.country": "Country",

    # Field labels - Patient
    "field.emergencyContactName": "Emergency Contact Name",
    "field.emergencyContactPhone": "Emergency Contact Phone",
    "field.emergencyContactRelationship": "Relationship",
    "field.insuranceProvider": "Insurance Provider",
    "field.policyNumber": "Policy Number",
    "field.groupNumber": "Group Number",

    # Field labels - Doctor
    "field.medicalLicenseNumber": "Medical License Number",
    "field.licenseExpiryDate": "License Expiry Date",
    "field.issuingAuthority": "Issuing Authority",
    "field.specialization": "Specialization",
    "field.yearsExperience": "Years of Experience",
    "field.hospitalName": "Hospital Name",
    "field.hospitalAddress": "Hospital Address",
    "field.practiceLocation": "Practice Location",
    "field.consultationFee": "Consultation Fee",
    "field.accountHolder": "Account Holder",
    "field.bankName": "Bank Name",
    "field.accountNumber": "Account Number",
    "field.routingNumber": "Routing Number",

    # Field labels - Pharmacist
    "field.pharmacyLicenseId": "Pharmacy License ID",
    "field.pharmacyName": "Pharmacy Name",
    "field.pharmacyAddress": "Pharmacy Address",
    "field.pharmacyPhone": "Pharmacy Phone",
    "field.weekdayHours": "Weekday Hours",
    "field.weekendHours": "Weekend Hours",
    "field.customHours": "Custom Hours Description",

    # Field labels - Verification
    "field.email": "Email Address",
    "field.phoneNumber": "Phone Number",
    "field.password": "Password",

    # Field labels - Booking
    "field.doctorId": "Provider",
    "field.appointmentType": "Appointment Type",
    "field.date": "Date",
    "field.time": "Time",
    "field.reason": "Reason for Visit",

    # Validation - generic
    "validation.required": "{label} is required.",
    "validation.invalid_format": "{label} is not valid.",
    "validation.too_short": "{label} must be at least {min_length} characters long.",

    # Validation - field specific
    "validation.required.fullName": "Please provide your full name.",
    "validation.required.dateOfBirth": "Please provide your date of birth.",
    "validation.required.gender": "Please select your gender.",
    "validation.required.role": "Please select your role.",
    "validation.required.streetAddress": "Please provide your street address.",
    "validation.required.emergencyContactRelationship": "Please select the relationship.",
    "validation.required.weekdayHours": "Please select your weekday operational hours.",
    "validation.required.weekendHours": "Please select your weekend operational hours.",
    "validation.required.customHours": "Please describe your custom hours.",
    "validation.required.email": "Please provide a valid email address.",
    "validation.invalid_format.email": "Please provide a valid email address.",
    "validation.required.password": "Please create a password.",
    "validation.too_short.password": "Password must be at least {min_length} characters long.",
    "validation.invalid_format.dateOfBirth": "Please provide a valid date of birth.",
    "validation.required.doctorId": "Please select a provider.",
    "validation.required.appointmentType": "Please select an appointment type.",
    "validation.required.date": "Please select a date.",
    "validation.invalid_format.date": "Please select a valid date that is not in the past.",
    "validation.required.time": "Please select a time slot.",

    # Submission
    "submission.rejected": "The submission was not accepted. Please review your details and try again.",
    "submission.network": "Could not reach the server. Please check your connection and try again.",
    "submission.timeout": "The server took too long to respond. Please try again.",
    "submission.auth_required": "Please log in to continue.",
    "submission.unexpected": "Something went wrong while submitting. Please try again.",
    "submission.registration.success": "Registration successful! Please check your email to verify your account.",
    "submission.booking.success": "Appointment requested successfully.",
}
