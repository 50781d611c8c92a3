"""
Page state machine.
"""
import pytest

from chopchop.navigation import (
    InvalidTransition,
    NavEvent,
    Page,
    next_page,
    restore_page,
)


class TestTransitions:
    def test_sign_in_scan_dashboard_loop(self):
        page = Page.LOGGED_OUT
        seen = []
        for event in (NavEvent.SIGNED_IN, NavEvent.CONTINUE, NavEvent.ADD_RECEIPT):
            page = next_page(page, event)
            seen.append(page)
        assert seen == [Page.AWAITING_SCAN_CHOICE, Page.DASHBOARD, Page.AWAITING_SCAN_CHOICE]

    @pytest.mark.parametrize("state", list(Page))
    def test_signed_out_from_anywhere(self, state):
        assert next_page(state, NavEvent.SIGNED_OUT) is Page.LOGGED_OUT

    def test_repeat_sign_in_keeps_page(self):
        assert next_page(Page.DASHBOARD, NavEvent.SIGNED_IN) is Page.DASHBOARD

    @pytest.mark.parametrize(
        "state, event",
        [
            (Page.LOGGED_OUT, NavEvent.CONTINUE),
            (Page.LOGGED_OUT, NavEvent.ADD_RECEIPT),
            (Page.AWAITING_SCAN_CHOICE, NavEvent.ADD_RECEIPT),
            (Page.DASHBOARD, NavEvent.CONTINUE),
        ],
    )
    def test_undefined_transition(self, state, event):
        with pytest.raises(InvalidTransition):
            next_page(state, event)


class TestRestore:
    def test_no_session(self):
        assert restore_page(False, Page.DASHBOARD) is Page.LOGGED_OUT

    def test_saved_page(self):
        assert restore_page(True, Page.AWAITING_SCAN_CHOICE) is Page.AWAITING_SCAN_CHOICE

    @pytest.mark.parametrize("saved", [None, Page.LOGGED_OUT])
    def test_defaults_to_dashboard(self, saved):
        assert restore_page(True, saved) is Page.DASHBOARD
