"""Step Controller: linear navigation between wizard steps."""

import logging

from signup.state import WizardState

logger = logging.getLogger(__name__)


class StepController:
    """Moves WizardState.current_step between adjacent steps, clamped to [1, N]."""

    def __init__(self, state: WizardState) -> None:
        self._state = state

    @property
    def current_step(self) -> int:
        return self._state.current_step

    @property
    def total_steps(self) -> int:
        return self._state.total_steps

    def advance(self) -> int:
        """Go to the next step. No-op on the last step. Returns the new step."""
        self._state.current_step = min(self._state.current_step + 1, self._state.total_steps)
        logger.debug("Step -> %d", self._state.current_step)
        return self._state.current_step

    def retreat(self) -> int:
        """Go to the previous step. No-op on the first step. Returns the new step."""
        self._state.current_step = max(self._state.current_step - 1, 1)
        logger.debug("Step -> %d", self._state.current_step)
        return self._state.current_step

    def is_first(self) -> bool:
        return self._state.current_step == 1

    def is_last(self) -> bool:
        return self._state.current_step == self._state.total_steps
