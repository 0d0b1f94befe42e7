"""Collaborators consumed by the wizard core.

Sinks are async callables. A sink fails by raising or by returning False;
anything else counts as success.
"""

from typing import Any, Protocol


class SubmissionSink(Protocol):
    async def __call__(self, profile: dict[str, str]) -> Any: ...


class InvitationSink(Protocol):
    async def __call__(self, email: str) -> Any: ...


class Clipboard(Protocol):
    def __call__(self, text: str) -> None: ...


class Navigator(Protocol):
    def __call__(self, route: str) -> None: ...


def is_rejection(outcome: Any) -> bool:
    """True when a sink reported failure by returning False."""
    return outcome is False


class RecordingNavigator:
    """Navigator that remembers routes instead of changing pages."""

    def __init__(self) -> None:
        self.routes: list[str] = []

    def __call__(self, route: str) -> None:
        self.routes.append(route)

    @property
    def last(self) -> str | None:
        return self.routes[-1] if self.routes else None
