"""Enums for the livecost domain models."""

from __future__ import annotations

from enum import StrEnum

_TENURE_ALIASES: dict[str, str] = {
    "rent": "renting",
    "own": "owning",
}


class HousingTenure(StrEnum):
    """Whether the user rents or owns their home.

    The short spellings ``rent`` and ``own`` are accepted as aliases.
    """

    RENTING = "renting"
    OWNING = "owning"

    @classmethod
    def _missing_(cls, value: object) -> HousingTenure | None:
        if isinstance(value, str):
            normalized = value.strip().lower()
            normalized = _TENURE_ALIASES.get(normalized, normalized)
            for member in cls:
                if member.value == normalized:
                    return member
        return None
