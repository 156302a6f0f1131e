"""Runtime configuration shared by the deck and the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CardsConfig:
    """Feature switches for deck composition and terminal output."""

    jokers: bool = False
    color: bool = True

    def __post_init__(self) -> None:
        for name in ("jokers", "color"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")
