"""Domain models for goal-cli.

Models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and normalisation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Goal:
    """The user's current goal."""

    text: str
    """Goal description.  Never empty for a constructed ``Goal``."""

    deadline: str | None = None
    """Free-form deadline text, or ``None`` when no deadline was set."""

    @classmethod
    def from_fields(cls, text: str, deadline: str) -> Goal | None:
        """Build a goal from the two persisted string fields.

        Empty *text* means "no goal" whatever the deadline holds, and an
        empty *deadline* means no deadline.
        """
        if not text:
            return None
        return cls(text=text, deadline=deadline or None)
