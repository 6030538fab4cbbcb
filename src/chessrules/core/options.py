"""Behaviour switches for the places where simplified and strict rules differ."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RuleOptions:
    """Rule variants applied by the generator, castling and stalemate checks.

    Args:
        strict_stalemate: A stalemate witness move must leave the king out of
            check. When False, any validator-approved move is a witness.
        castling_transit_check: Forbid castling out of check and through an
            attacked square, not only into check.
        include_friendly_targets: The pseudo-legal generator keeps squares
            occupied by the mover's own pieces.
    """

    strict_stalemate: bool = True
    castling_transit_check: bool = False
    include_friendly_targets: bool = True


DEFAULT_OPTIONS = RuleOptions()
