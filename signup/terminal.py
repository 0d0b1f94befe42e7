"""Terminal orchestration of the registration wizard."""

import asyncio
import logging
from dataclasses import dataclass

import questionary

from flexsync.settings import get_setting, invitation_link
from signup.constants import DASHBOARD_ROUTE
from signup.errors import SignupError
from signup.http_sinks import sinks_from_settings
from signup.sinks import RecordingNavigator
from signup.steps import ask_navigation, run_fields_step, run_invitation_step
from signup.steps import invitation_step, navigation
from signup.ui import STYLE
from signup.wizard import RegistrationWizard

logger = logging.getLogger(__name__)


@dataclass
class WizardResult:
    """Result of running the wizard."""

    success: bool
    failed: bool = False  # True if submission failed and the user gave up
    route: str | None = None


def print_clipboard(text: str) -> None:
    """Terminal stand-in for a clipboard: show the text to copy."""
    print(f"  Copié : {text}")


def build_wizard(settings: dict, navigator: RecordingNavigator) -> RegistrationWizard:
    """Wire a wizard to the HTTP sinks described by settings."""
    submission_sink, invitation_sink = sinks_from_settings(settings)
    return RegistrationWizard(
        submission_sink=submission_sink,
        invitation_sink=invitation_sink,
        clipboard=print_clipboard,
        navigator=navigator,
        invitation_link=invitation_link(settings),
        dashboard_route=get_setting(settings, "navigation.dashboard_route", DASHBOARD_ROUTE),
    )


def run_wizard(
    settings: dict,
    wizard: RegistrationWizard | None = None,
    navigator: RecordingNavigator | None = None,
) -> WizardResult:
    """Run the wizard until the profile is submitted or the user cancels."""
    navigator = navigator or RecordingNavigator()
    wizard = wizard or build_wizard(settings, navigator)
    logger.info("Signup wizard started")
    print("\nInscription Coach\n")

    while True:
        view = wizard.view()
        if not view.is_last:
            if not run_fields_step(wizard):
                return WizardResult(success=False)
            choice = ask_navigation(wizard.view())
            if choice is None:
                return WizardResult(success=False)
            if choice == navigation.NEXT:
                wizard.advance()
            else:
                wizard.retreat()
            continue

        action = run_invitation_step(wizard)
        if action is None:
            return WizardResult(success=False)
        if action == invitation_step.PREVIOUS:
            wizard.retreat()
            continue

        if _finish(wizard):
            return WizardResult(success=True, route=navigator.last)
        if not _ask_retry():
            return WizardResult(success=False, failed=True)


def _finish(wizard: RegistrationWizard) -> bool:
    """Submit the profile. Returns True on success."""
    print("\nEnvoi du profil...")
    try:
        asyncio.run(wizard.finish())
    except SignupError as e:
        print(f"  ✗ Inscription échouée : {e}")
        return False
    return True


def _ask_retry() -> bool:
    """Ask whether to stay in the wizard after a failed submission."""
    retry = questionary.confirm(
        "Réessayer ?",
        default=True,
        style=STYLE,
    ).ask()
    return bool(retry)
