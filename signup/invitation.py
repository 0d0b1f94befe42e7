"""Invitation sub-flow: share a link or send an email invite to a client."""

import logging

from signup.errors import InvitationFailed, InvitationModeError
from signup.sinks import Clipboard, InvitationSink, is_rejection
from signup.state import InvitationMode, InvitationState

logger = logging.getLogger(__name__)


class InvitationFlow:
    """Owns InvitationState. Independent from step navigation and the profile."""

    def __init__(
        self,
        state: InvitationState,
        invitation_sink: InvitationSink,
        clipboard: Clipboard,
    ) -> None:
        self._state = state
        self._sink = invitation_sink
        self._clipboard = clipboard

    @property
    def mode(self) -> InvitationMode:
        return self._state.mode

    @property
    def pending_email_target(self) -> str:
        return self._state.pending_email_target

    @property
    def generated_link(self) -> str:
        return self._state.generated_link

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    def set_mode(self, mode: InvitationMode | str) -> None:
        """Switch between link and email. Keeps the pending email target."""
        self._state.mode = InvitationMode(mode)

    def set_pending_email_target(self, value: str) -> None:
        self._state.pending_email_target = value

    async def send_invite(self) -> None:
        """Send the pending email target to the invitation sink.

        Clears the target on success. On failure the target is kept for
        retry and the error propagates.
        """
        if self._state.mode is not InvitationMode.EMAIL:
            raise InvitationModeError("send_invite requires email mode")
        target = self._state.pending_email_target
        self._state.is_submitting = True
        try:
            outcome = await self._sink(target)
            if is_rejection(outcome):
                raise InvitationFailed("Invitation sink rejected the invite")
        except Exception as e:
            logger.warning("Invitation send failed: %s", e)
            raise
        finally:
            self._state.is_submitting = False
        logger.info("Invitation sent")
        self._state.pending_email_target = ""

    def copy_link(self) -> None:
        """Hand the invitation link to the clipboard."""
        if self._state.mode is not InvitationMode.LINK:
            raise InvitationModeError("copy_link requires link mode")
        self._clipboard(self._state.generated_link)
