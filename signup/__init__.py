"""Coach registration wizard: step navigation, profile aggregation, client invitations."""

from signup.errors import (
    InvitationFailed,
    InvitationModeError,
    SignupError,
    StepOutOfOrderError,
    SubmissionFailed,
    UnknownFieldError,
)
from signup.state import PROFILE_FIELDS, STEPS, InvitationMode
from signup.wizard import RegistrationWizard, StepView

__all__ = [
    "RegistrationWizard",
    "StepView",
    "InvitationMode",
    "PROFILE_FIELDS",
    "STEPS",
    "SignupError",
    "SubmissionFailed",
    "InvitationFailed",
    "UnknownFieldError",
    "InvitationModeError",
    "StepOutOfOrderError",
]
