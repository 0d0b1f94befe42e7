"""Terminal prompts for each kind of wizard step."""

from signup.steps.fields_step import run_fields_step
from signup.steps.invitation_step import run_invitation_step
from signup.steps.navigation import ask_navigation

__all__ = ["run_fields_step", "run_invitation_step", "ask_navigation"]
