"""Field schema for specs.json documents.

This module defines which top-level fields of the spec record are required,
recommended, optional or freeform. Lookups are exact-match on top-level field
names; nested rules (``source.host``, ``external_specs[i].url``) live in the
shape checks under ``validation/checks/``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FieldSchema:
    """Tiered field names for the spec record.

    Attributes:
        required: Fields that must exist with a non-empty value (error otherwise).
        recommended: Fields that should exist (warning otherwise).
        optional: Fields that may exist (info when absent).
        freeform: Known fields that are never presence-checked.

    Iteration order of each tier is the order findings are emitted in.

    Examples:
        >>> schema = FieldSchema(required=("title",), recommended=("favicon",))
        >>> schema.tier_of("favicon")
        'recommended'
        >>> schema.tier_of("unknown") is None
        True
    """

    required: Tuple[str, ...] = ()
    recommended: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    freeform: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate that tiers are disjoint."""
        seen = {}
        for tier in ("required", "recommended", "optional", "freeform"):
            for name in getattr(self, tier):
                if name in seen:
                    raise ValueError(
                        f"Field '{name}' listed in both '{seen[name]}' and '{tier}' tiers."
                    )
                seen[name] = tier

    def tier_of(self, name: str) -> Optional[str]:
        """Return the tier a field belongs to, or None for untracked fields."""
        for tier in ("required", "recommended", "optional", "freeform"):
            if name in getattr(self, tier):
                return tier
        return None

    @property
    def known_fields(self) -> Tuple[str, ...]:
        """All tracked field names in declaration order."""
        return self.required + self.recommended + self.optional + self.freeform


DEFAULT_SCHEMA = FieldSchema(
    required=(
        "title",
        "description",
        "author",
        "spec_directory",
        "spec_terms_directory",
        "output_path",
        "markdown_paths",
        "logo",
        "logo_link",
        "source",
    ),
    recommended=("favicon",),
    optional=(
        "anchor_symbol",
        "katex",
    ),
    freeform=(
        "external_specs",
        "version",
    ),
)


__all__ = ["FieldSchema", "DEFAULT_SCHEMA"]
