"""
Page state machine: LoggedOut → AwaitingScanChoice ⇄ Dashboard.

Transitions are driven by auth events (``signed_in`` / ``signed_out``) and
explicit user navigation. State is restored from a typed ``Page`` value
stored on the session row.
"""
from __future__ import annotations

import enum
from typing import Optional


class Page(str, enum.Enum):
    LOGGED_OUT = "logged_out"
    AWAITING_SCAN_CHOICE = "awaiting_scan_choice"
    DASHBOARD = "dashboard"


class NavEvent(str, enum.Enum):
    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"
    ADD_RECEIPT = "add_receipt"
    CONTINUE = "continue"  # "skip" and "continue to dashboard" after a scan


TRANSITIONS: dict[tuple[Page, NavEvent], Page] = {
    (Page.LOGGED_OUT, NavEvent.SIGNED_IN): Page.AWAITING_SCAN_CHOICE,
    (Page.AWAITING_SCAN_CHOICE, NavEvent.CONTINUE): Page.DASHBOARD,
    (Page.DASHBOARD, NavEvent.ADD_RECEIPT): Page.AWAITING_SCAN_CHOICE,
}


class InvalidTransition(ValueError):
    def __init__(self, state: Page, event: NavEvent) -> None:
        self.state = state
        self.event = event
        super().__init__(f"Cannot apply {event.value!r} on page {state.value!r}")


def next_page(state: Page, event: NavEvent) -> Page:
    """Return the page reached from *state* on *event*."""
    if event is NavEvent.SIGNED_OUT:
        return Page.LOGGED_OUT
    # A fresh sign-in while already signed in keeps the current page
    if event is NavEvent.SIGNED_IN and state is not Page.LOGGED_OUT:
        return state
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransition(state, event) from None


def restore_page(has_session: bool, saved: Optional[Page] = None) -> Page:
    """Page to show on load: no session → LoggedOut, else saved or Dashboard."""
    if not has_session:
        return Page.LOGGED_OUT
    if saved is None or saved is Page.LOGGED_OUT:
        return Page.DASHBOARD
    return saved

