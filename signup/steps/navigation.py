"""Next/previous prompt shown after a field step."""

import questionary
from questionary import Choice

from signup.ui import STYLE
from signup.wizard import StepView

NEXT = "next"
PREVIOUS = "previous"


def ask_navigation(view: StepView) -> str | None:
    """Ask where to go from a non-final step. Returns NEXT, PREVIOUS or None."""
    choices = [
        Choice("Suivant", NEXT),
        Choice(
            "Précédent",
            PREVIOUS,
            disabled="première étape" if view.is_first else None,
        ),
    ]
    return questionary.select("Continuer ?", choices=choices, style=STYLE).ask()
