"""Registration wizard: composes step navigation, profile and invitations."""

from dataclasses import dataclass

from signup.constants import DASHBOARD_ROUTE
from signup.controller import StepController
from signup.errors import StepOutOfOrderError
from signup.invitation import InvitationFlow
from signup.profile import ProfileAggregator
from signup.sinks import Clipboard, InvitationSink, Navigator, SubmissionSink
from signup.state import (
    FieldSpec,
    InvitationMode,
    InvitationState,
    WizardState,
    step_spec,
)


@dataclass(frozen=True)
class InvitationView:
    mode: InvitationMode
    pending_email_target: str
    generated_link: str
    is_submitting: bool


@dataclass(frozen=True)
class StepView:
    """Read-only snapshot handed to the rendering layer."""

    step: int
    total_steps: int
    name: str
    fields: tuple[FieldSpec, ...]
    values: dict[str, str]
    missing_required: list[str]
    is_first: bool
    is_last: bool
    is_submitting: bool
    invitation: InvitationView | None = None

    @property
    def progress_label(self) -> str:
        return f"Étape {self.step} sur {self.total_steps}"


class RegistrationWizard:
    """One coach registration session.

    Renderers read view() and call the intent methods; they never mutate
    state directly. Created at step 1 with an empty profile.
    """

    def __init__(
        self,
        *,
        submission_sink: SubmissionSink,
        invitation_sink: InvitationSink,
        clipboard: Clipboard,
        navigator: Navigator,
        invitation_link: str,
        dashboard_route: str = DASHBOARD_ROUTE,
    ) -> None:
        self.state = WizardState()
        self.invitation_state = InvitationState(generated_link=invitation_link)
        self.steps = StepController(self.state)
        self.profile = ProfileAggregator(
            self.state, submission_sink, navigator, dashboard_route
        )
        self.invitation = InvitationFlow(self.invitation_state, invitation_sink, clipboard)

    # Navigation
    def advance(self) -> int:
        return self.steps.advance()

    def retreat(self) -> int:
        return self.steps.retreat()

    # Field edits
    def set_field(self, name: str, value: str) -> None:
        self.profile.set_field(name, value)

    def set_select_field(self, name: str, value: str) -> None:
        self.profile.set_select_field(name, value)

    async def finish(self) -> None:
        """Submit the profile. Only allowed on the last step."""
        self._require_last_step("finish")
        await self.profile.submit()

    # Invitations
    async def send_invite(self) -> None:
        self._require_last_step("send_invite")
        await self.invitation.send_invite()

    def copy_link(self) -> None:
        self._require_last_step("copy_link")
        self.invitation.copy_link()

    def view(self) -> StepView:
        step = self.state.current_step
        invitation = None
        if self.steps.is_last():
            invitation = InvitationView(
                mode=self.invitation_state.mode,
                pending_email_target=self.invitation_state.pending_email_target,
                generated_link=self.invitation_state.generated_link,
                is_submitting=self.invitation_state.is_submitting,
            )
        return StepView(
            step=step,
            total_steps=self.state.total_steps,
            name=step_spec(step).name,
            fields=step_spec(step).fields,
            values=self.profile.fields_for_step(step),
            missing_required=self.profile.missing_required(step),
            is_first=self.steps.is_first(),
            is_last=self.steps.is_last(),
            is_submitting=self.state.is_submitting,
            invitation=invitation,
        )

    def _require_last_step(self, action: str) -> None:
        if not self.steps.is_last():
            raise StepOutOfOrderError(
                f"{action} is only available on step {self.state.total_steps}"
            )
