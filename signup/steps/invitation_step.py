"""Final step: invite clients, then finish registration."""

import asyncio
import logging

import questionary
from questionary import Choice

from signup.errors import SignupError
from signup.state import InvitationMode
from signup.ui import STYLE
from signup.wizard import RegistrationWizard

logger = logging.getLogger(__name__)

FINISH = "finish"
PREVIOUS = "previous"
_COPY = "copy"
_SEND = "send"
_SWITCH = "switch"


def run_invitation_step(wizard: RegistrationWizard) -> str | None:
    """Loop on invitation actions until the user finishes or goes back.

    Returns FINISH, PREVIOUS or None if cancelled.
    """
    while True:
        view = wizard.view()
        inv = view.invitation
        print(f"\n{view.name} ({view.progress_label})")
        if inv.mode is InvitationMode.LINK:
            print(f"Lien d'invitation : {inv.generated_link}\n")

        choices = _action_choices(inv.mode)
        action = questionary.select(
            "Méthode d'invitation des élèves :", choices=choices, style=STYLE
        ).ask()
        if action is None:
            return None
        if action in (FINISH, PREVIOUS):
            return action

        if action == _SWITCH:
            other = (
                InvitationMode.EMAIL
                if inv.mode is InvitationMode.LINK
                else InvitationMode.LINK
            )
            wizard.invitation.set_mode(other)
        elif action == _COPY:
            wizard.copy_link()
        elif action == _SEND and not _send_email_invite(wizard):
            return None


def _action_choices(mode: InvitationMode) -> list[Choice]:
    if mode is InvitationMode.LINK:
        choices = [
            Choice("Copier le lien", _COPY),
            Choice("Inviter par email", _SWITCH),
        ]
    else:
        choices = [
            Choice("Envoyer une invitation", _SEND),
            Choice("Utiliser le lien d'invitation", _SWITCH),
        ]
    choices.append(Choice("Terminer l'inscription", FINISH))
    choices.append(Choice("Précédent", PREVIOUS))
    return choices


def _send_email_invite(wizard: RegistrationWizard) -> bool:
    """Prompt for the client email and send it. Returns False if cancelled."""
    email = questionary.text(
        "Email de l'élève :",
        default=wizard.invitation.pending_email_target,
        instruction="eleve@example.com",
        style=STYLE,
    ).ask()
    if email is None:
        return False
    wizard.invitation.set_pending_email_target(email.strip())
    print("Chargement...")
    try:
        asyncio.run(wizard.send_invite())
    except SignupError as e:
        logger.info("Invitation not sent, user may retry: %s", e)
        print(f"  ✗ Invitation non envoyée : {e}")
        return True
    print(f"  ✓ Invitation envoyée à {email.strip()}")
    return True
