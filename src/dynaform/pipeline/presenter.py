"""Presentation boundary: how outcomes reach the user."""

from typing import Protocol

from .outcomes import Outcome


class FormPresenter(Protocol):
    """Implemented by whatever displays the form (terminal, web, mobile)."""

    def show_outcome(self, outcome: Outcome) -> None:
        ...

    def dismiss_focus(self) -> None:
        ...


class NullPresenter:
    """Presenter that shows nothing (headless use, tests)."""

    def show_outcome(self, outcome: Outcome) -> None:
        pass

    def dismiss_focus(self) -> None:
        pass


__all__ = ["FormPresenter", "NullPresenter"]
