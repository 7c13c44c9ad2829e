"""Unit tests for pickup lifecycle state-machine guardrails."""

import pytest

from freightpickup.common.state_machine import validate_transition


def test_valid_transition():
    """Sanity check: a legal transition should pass."""

    validate_transition("BUILT", "VALIDATED")


def test_any_live_state_can_fail():
    for state in ["BUILT", "VALIDATED", "MAPPED", "SENT"]:
        validate_transition(state, "FAILED")


def test_invalid_transition():
    """Skipping the network step must raise to protect orchestration correctness."""

    with pytest.raises(ValueError):
        validate_transition("MAPPED", "CLASSIFIED")


def test_no_transition_back_or_out_of_terminal():
    with pytest.raises(ValueError):
        validate_transition("SENT", "MAPPED")
    with pytest.raises(ValueError):
        validate_transition("CLASSIFIED", "FAILED")
    with pytest.raises(ValueError):
        validate_transition("FAILED", "BUILT")
