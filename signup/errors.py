"""Exceptions raised by the registration wizard."""


class SignupError(Exception):
    """Base class for wizard errors."""


class SubmissionFailed(SignupError):
    """The submission sink rejected the coach profile."""


class InvitationFailed(SignupError):
    """The invitation sink rejected the invite."""


class UnknownFieldError(SignupError, KeyError):
    """Field name is not part of the declared profile."""


class InvitationModeError(SignupError, ValueError):
    """Invitation action does not match the selected mode."""


class StepOutOfOrderError(SignupError, ValueError):
    """Action is only available on another wizard step."""
