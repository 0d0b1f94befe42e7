"""Profile Aggregator: merges field edits into one coach profile record."""

import logging

from signup.constants import DASHBOARD_ROUTE
from signup.errors import SubmissionFailed, UnknownFieldError
from signup.sinks import Navigator, SubmissionSink, is_rejection
from signup.state import WizardState, step_spec

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Owns WizardState.profile and the profile submission.

    The key set is fixed at construction; edits replace values only.
    """

    def __init__(
        self,
        state: WizardState,
        submission_sink: SubmissionSink,
        navigator: Navigator,
        dashboard_route: str = DASHBOARD_ROUTE,
    ) -> None:
        self._state = state
        self._sink = submission_sink
        self._navigator = navigator
        self._dashboard_route = dashboard_route

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    def set_field(self, name: str, value: str) -> None:
        """Replace the value of a free-text field."""
        if name not in self._state.profile:
            raise UnknownFieldError(name)
        self._state.profile[name] = value
        logger.debug("Field %s updated", name)

    def set_select_field(self, name: str, value: str) -> None:
        """Replace the value of a selector field. Same merge as set_field."""
        self.set_field(name, value)

    def get_snapshot(self) -> dict[str, str]:
        """Copy of the full profile, used as the submission payload."""
        return dict(self._state.profile)

    def fields_for_step(self, step: int) -> dict[str, str]:
        """Current values of the fields declared on a step, in declaration order."""
        return {f.name: self._state.profile[f.name] for f in step_spec(step).fields}

    def missing_required(self, step: int) -> list[str]:
        """Required fields of a step that are still blank. Informational only."""
        return [
            f.name
            for f in step_spec(step).fields
            if f.required and not self._state.profile[f.name].strip()
        ]

    async def submit(self) -> None:
        """Send the snapshot to the submission sink, then navigate to the dashboard.

        is_submitting is reset whatever the outcome. Failures propagate to
        the caller and leave profile and current step untouched.
        """
        self._state.is_submitting = True
        try:
            outcome = await self._sink(self.get_snapshot())
            if is_rejection(outcome):
                raise SubmissionFailed("Submission sink rejected the profile")
        except Exception as e:
            logger.warning("Profile submission failed: %s", e)
            raise
        finally:
            self._state.is_submitting = False
        logger.info("Profile submitted, navigating to %s", self._dashboard_route)
        self._navigator(self._dashboard_route)
