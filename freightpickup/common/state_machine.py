"""Pickup request lifecycle transitions enforced by the pickup service."""

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    "BUILT": {"VALIDATED", "FAILED"},
    "VALIDATED": {"MAPPED", "FAILED"},
    "MAPPED": {"SENT", "FAILED"},
    "SENT": {"CLASSIFIED", "FAILED"},
    "CLASSIFIED": set(),
    "FAILED": set(),
}


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")
