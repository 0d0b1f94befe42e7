"""Tests for signup.profile.ProfileAggregator."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from signup.errors import SubmissionFailed, UnknownFieldError
from signup.profile import ProfileAggregator
from signup.state import PROFILE_FIELDS, WizardState


def _aggregator(sink=None, navigator=None) -> tuple[ProfileAggregator, WizardState]:
    state = WizardState()
    agg = ProfileAggregator(
        state,
        sink or AsyncMock(return_value=None),
        navigator or MagicMock(),
    )
    return agg, state


def test_profile_starts_with_all_declared_keys_empty() -> None:
    agg, _ = _aggregator()
    snapshot = agg.get_snapshot()
    assert tuple(snapshot) == PROFILE_FIELDS
    assert len(snapshot) == 11
    assert all(v == "" for v in snapshot.values())


def test_set_field_merges_without_losing_keys() -> None:
    """Scenario: prenom and nom set, every other declared key still present and empty."""
    agg, _ = _aggregator()
    agg.set_field("prenom", "Marie")
    agg.set_field("nom", "Dupont")

    snapshot = agg.get_snapshot()
    assert snapshot["prenom"] == "Marie"
    assert snapshot["nom"] == "Dupont"
    assert snapshot["email"] == ""
    assert set(snapshot) == set(PROFILE_FIELDS)
    assert all(v == "" for k, v in snapshot.items() if k not in {"prenom", "nom"})


def test_set_select_field_uses_same_merge() -> None:
    agg, _ = _aggregator()
    agg.set_select_field("specialite", "yoga")
    assert agg.get_snapshot()["specialite"] == "yoga"


def test_set_field_overwrites_previous_value() -> None:
    agg, _ = _aggregator()
    agg.set_field("villeActivite", "Lyon")
    agg.set_field("villeActivite", "Nantes")
    assert agg.get_snapshot()["villeActivite"] == "Nantes"


def test_unknown_field_is_rejected_and_key_set_unchanged() -> None:
    agg, _ = _aggregator()
    with pytest.raises(UnknownFieldError):
        agg.set_field("age", "42")
    with pytest.raises(KeyError):
        agg.set_select_field("niveau", "pro")
    assert set(agg.get_snapshot()) == set(PROFILE_FIELDS)


def test_snapshot_is_a_copy() -> None:
    agg, state = _aggregator()
    snapshot = agg.get_snapshot()
    snapshot["nom"] = "changed"
    assert state.profile["nom"] == ""


def test_fields_for_step_and_missing_required() -> None:
    agg, _ = _aggregator()
    agg.set_field("adresse", "1 rue de la Paix")

    assert agg.fields_for_step(2) == {
        "adresse": "1 rue de la Paix",
        "villeActivite": "",
        "clubPartenaire": "",
    }
    # clubPartenaire is optional
    assert agg.missing_required(2) == ["villeActivite"]
    assert agg.fields_for_step(4) == {}
    assert agg.missing_required(4) == []


def test_blank_value_counts_as_missing() -> None:
    agg, _ = _aggregator()
    agg.set_field("prenom", "   ")
    assert "prenom" in agg.missing_required(1)


@pytest.mark.asyncio
async def test_submit_sends_snapshot_and_navigates_once() -> None:
    sink = AsyncMock(return_value={"id": "c1"})
    navigator = MagicMock()
    agg, state = _aggregator(sink, navigator)
    agg.set_field("prenom", "Marie")

    await agg.submit()

    sink.assert_awaited_once()
    assert sink.await_args.args[0]["prenom"] == "Marie"
    navigator.assert_called_once_with("/dashboard")
    assert state.is_submitting is False


@pytest.mark.asyncio
async def test_submit_flag_is_set_while_pending() -> None:
    seen: list[bool] = []
    state_holder: dict[str, WizardState] = {}

    async def sink(profile: dict[str, str]) -> None:
        seen.append(state_holder["state"].is_submitting)
        await asyncio.sleep(0)

    agg, state = _aggregator(sink)
    state_holder["state"] = state
    await agg.submit()

    assert seen == [True]
    assert state.is_submitting is False


@pytest.mark.asyncio
async def test_submit_failure_propagates_and_resets_flag() -> None:
    navigator = MagicMock()
    agg, state = _aggregator(AsyncMock(side_effect=RuntimeError("boom")), navigator)
    agg.set_field("nom", "Dupont")

    with pytest.raises(RuntimeError, match="boom"):
        await agg.submit()

    assert state.is_submitting is False
    assert state.profile["nom"] == "Dupont"
    navigator.assert_not_called()


@pytest.mark.asyncio
async def test_submit_false_outcome_is_failure() -> None:
    navigator = MagicMock()
    agg, state = _aggregator(AsyncMock(return_value=False), navigator)

    with pytest.raises(SubmissionFailed):
        await agg.submit()

    assert state.is_submitting is False
    navigator.assert_not_called()


@pytest.mark.asyncio
async def test_custom_dashboard_route() -> None:
    navigator = MagicMock()
    agg = ProfileAggregator(
        WizardState(), AsyncMock(return_value=None), navigator, dashboard_route="/coach/home"
    )
    await agg.submit()
    navigator.assert_called_once_with("/coach/home")
