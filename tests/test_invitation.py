"""Tests for signup.invitation.InvitationFlow."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from signup.errors import InvitationFailed, InvitationModeError
from signup.invitation import InvitationFlow
from signup.state import InvitationMode, InvitationState

LINK = "https://flexsync.com/invite/coach123"


def _flow(sink=None, clipboard=None) -> tuple[InvitationFlow, InvitationState]:
    state = InvitationState(generated_link=LINK)
    flow = InvitationFlow(state, sink or AsyncMock(return_value=None), clipboard or MagicMock())
    return flow, state


def test_defaults_to_link_mode() -> None:
    flow, _ = _flow()
    assert flow.mode is InvitationMode.LINK
    assert flow.pending_email_target == ""
    assert flow.generated_link == LINK
    assert flow.is_submitting is False


def test_set_mode_accepts_enum_and_string() -> None:
    flow, _ = _flow()
    flow.set_mode("email")
    assert flow.mode is InvitationMode.EMAIL
    flow.set_mode(InvitationMode.LINK)
    assert flow.mode is InvitationMode.LINK


def test_set_mode_rejects_unknown_mode() -> None:
    flow, _ = _flow()
    with pytest.raises(ValueError):
        flow.set_mode("sms")


def test_switching_mode_keeps_pending_target() -> None:
    flow, _ = _flow()
    flow.set_mode("email")
    flow.set_pending_email_target("a@b.com")
    flow.set_mode("link")
    flow.set_mode("email")
    assert flow.pending_email_target == "a@b.com"


@pytest.mark.asyncio
async def test_send_invite_success_clears_target() -> None:
    sink = AsyncMock(return_value=None)
    flow, state = _flow(sink)
    flow.set_mode("email")
    flow.set_pending_email_target("a@b.com")

    await flow.send_invite()

    sink.assert_awaited_once_with("a@b.com")
    assert state.pending_email_target == ""
    assert state.is_submitting is False


@pytest.mark.asyncio
async def test_send_invite_failure_keeps_target() -> None:
    flow, state = _flow(AsyncMock(side_effect=InvitationFailed("HTTP 500")))
    flow.set_mode("email")
    flow.set_pending_email_target("a@b.com")

    with pytest.raises(InvitationFailed):
        await flow.send_invite()

    assert state.pending_email_target == "a@b.com"
    assert state.is_submitting is False


@pytest.mark.asyncio
async def test_send_invite_false_outcome_keeps_target() -> None:
    flow, state = _flow(AsyncMock(return_value=False))
    flow.set_mode("email")
    flow.set_pending_email_target("a@b.com")

    with pytest.raises(InvitationFailed):
        await flow.send_invite()

    assert state.pending_email_target == "a@b.com"


@pytest.mark.asyncio
async def test_send_invite_in_link_mode_does_not_call_sink() -> None:
    sink = AsyncMock()
    flow, _ = _flow(sink)
    flow.set_pending_email_target("a@b.com")

    with pytest.raises(InvitationModeError):
        await flow.send_invite()

    sink.assert_not_awaited()


def test_copy_link_hands_link_to_clipboard() -> None:
    clipboard = MagicMock()
    flow, state = _flow(clipboard=clipboard)
    flow.copy_link()
    clipboard.assert_called_once_with(LINK)
    assert state.mode is InvitationMode.LINK


def test_copy_link_in_email_mode_raises() -> None:
    clipboard = MagicMock()
    flow, _ = _flow(clipboard=clipboard)
    flow.set_mode("email")
    with pytest.raises(InvitationModeError):
        flow.copy_link()
    clipboard.assert_not_called()


@pytest.mark.asyncio
async def test_send_invite_flag_is_set_while_pending() -> None:
    seen: list[bool] = []
    state = InvitationState(generated_link=LINK)

    async def sink(email: str) -> None:
        seen.append(state.is_submitting)
        await asyncio.sleep(0)

    flow = InvitationFlow(state, sink, MagicMock())
    flow.set_mode("email")
    flow.set_pending_email_target("a@b.com")
    assert state.is_submitting is False

    await flow.send_invite()

    assert seen == [True]
    assert state.is_submitting is False


@pytest.mark.asyncio
async def test_send_invite_keeps_email_out_of_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="signup.invitation")
    ok_flow, _ = _flow(AsyncMock(return_value=None))
    bad_flow, _ = _flow(AsyncMock(return_value=False))
    for flow in (ok_flow, bad_flow):
        flow.set_mode("email")
        flow.set_pending_email_target("secret.client@example.com")

    await ok_flow.send_invite()
    with pytest.raises(InvitationFailed) as exc_info:
        await bad_flow.send_invite()

    assert caplog.records
    assert "secret.client@example.com" not in caplog.text
    assert "secret.client@example.com" not in str(exc_info.value)
