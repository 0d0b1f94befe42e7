"""Prompt the profile fields declared on the current step.

Required-field checks live here, in the renderer; the wizard core accepts
any value.
"""

import questionary
from questionary import Choice

from signup.state import FieldSpec
from signup.ui import STYLE
from signup.wizard import RegistrationWizard


def run_fields_step(wizard: RegistrationWizard) -> bool:
    """Ask every field of the current step. Returns False if cancelled."""
    view = wizard.view()
    print(f"\n{view.name} ({view.progress_label})\n")

    for spec in view.fields:
        current = view.values[spec.name]
        if spec.kind == "select":
            value = _ask_select(spec, current)
            if value is None:
                return False
            wizard.set_select_field(spec.name, value)
            continue

        value = _ask_text(spec, current)
        if value is None:
            return False
        wizard.set_field(spec.name, value)

    return True


def _ask_select(spec: FieldSpec, current: str) -> str | None:
    choices = [Choice(label, value) for value, label in spec.options]
    return questionary.select(
        f"{spec.label}:",
        choices=choices,
        default=current or None,
        style=STYLE,
    ).ask()


def _ask_text(spec: FieldSpec, current: str) -> str | None:
    """Prompt until a required field is non-empty. Returns None on cancel."""
    while True:
        if spec.kind == "textarea":
            val = questionary.text(
                f"{spec.label}:", default=current, multiline=True, style=STYLE
            ).ask()
        else:
            val = questionary.text(f"{spec.label}:", default=current, style=STYLE).ask()
        if val is None:
            return None
        val = val.strip()
        if val or not spec.required:
            return val
        print("This field cannot be empty. Try again.\n")
