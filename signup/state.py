"""Wizard state and the declared steps and profile fields."""

from dataclasses import dataclass, field
from enum import Enum


class InvitationMode(str, Enum):
    """How the coach invites clients."""

    LINK = "link"
    EMAIL = "email"


@dataclass(frozen=True)
class FieldSpec:
    """One profile input as declared on a step."""

    name: str
    label: str
    kind: str = "text"  # text | email | tel | textarea | select
    required: bool = True
    options: tuple[tuple[str, str], ...] = ()  # (value, label)


@dataclass(frozen=True)
class StepSpec:
    """A numbered wizard section and the fields it collects."""

    id: int
    name: str
    fields: tuple[FieldSpec, ...] = ()


SPECIALITY_OPTIONS = (
    ("fitness", "Fitness"),
    ("nutrition", "Nutrition"),
    ("yoga", "Yoga"),
    ("crossfit", "CrossFit"),
    ("autre", "Autre"),
)

STEPS: tuple[StepSpec, ...] = (
    StepSpec(
        id=1,
        name="Informations personnelles",
        fields=(
            FieldSpec("prenom", "Prénom"),
            FieldSpec("nom", "Nom"),
            FieldSpec("email", "Adresse email", kind="email"),
            FieldSpec("telephone", "Numéro de téléphone", kind="tel"),
        ),
    ),
    StepSpec(
        id=2,
        name="Localisation",
        fields=(
            FieldSpec("adresse", "Adresse"),
            FieldSpec("villeActivite", "Ville d'activité"),
            FieldSpec("clubPartenaire", "Club partenaire (optionnel)", required=False),
        ),
    ),
    StepSpec(
        id=3,
        name="Profil professionnel",
        fields=(
            FieldSpec(
                "specialite",
                "Spécialité/Type de coaching",
                kind="select",
                required=False,
                options=SPECIALITY_OPTIONS,
            ),
            FieldSpec("experience", "Expérience professionnelle", kind="textarea"),
            FieldSpec("certifications", "Certifications et qualifications", kind="textarea"),
            FieldSpec("descriptionCoaching", "Description du coaching", kind="textarea"),
        ),
    ),
    # Last step hosts the invitation sub-flow, not profile fields
    StepSpec(id=4, name="Invitation des élèves"),
)

TOTAL_STEPS = len(STEPS)

PROFILE_FIELDS: tuple[str, ...] = tuple(f.name for s in STEPS for f in s.fields)


def step_spec(step: int) -> StepSpec:
    """Declaration for a 1-based step number."""
    if not 1 <= step <= TOTAL_STEPS:
        raise ValueError(f"step must be in [1, {TOTAL_STEPS}], got {step}")
    return STEPS[step - 1]


def _empty_profile() -> dict[str, str]:
    return {name: "" for name in PROFILE_FIELDS}


@dataclass
class WizardState:
    """Mutable state of one registration session.

    current_step stays within [1, total_steps]. profile always holds
    exactly the PROFILE_FIELDS keys.
    """

    current_step: int = 1
    total_steps: int = TOTAL_STEPS
    profile: dict[str, str] = field(default_factory=_empty_profile)
    is_submitting: bool = False


@dataclass
class InvitationState:
    """Invitation sub-flow state; never part of the submitted profile."""

    generated_link: str = ""
    mode: InvitationMode = InvitationMode.LINK
    pending_email_target: str = ""
    is_submitting: bool = False
