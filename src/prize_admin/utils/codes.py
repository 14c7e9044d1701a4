"""Code normalization and winner variant helpers.

Codes reach the database in several historical spellings (``ab1234-cd56``,
``AB1234CD56``, ``AB1234-CD56``). Lookups are exact-match queries, so every
plausible spelling of a code is generated up front instead of normalizing the
stored column.
"""

from __future__ import annotations

from typing import Iterable, Optional

HYPHENATED_LENGTH = 10
HYPHEN_POSITION = 6


def normalize_code(raw: Optional[str]) -> str:
    """Return the canonical form: trimmed, uppercased, without hyphens."""

    return (raw or "").strip().upper().replace("-", "")


def hyphenate_code(normalized: str) -> Optional[str]:
    """Render a 10-character normalized code as ``AAAAAA-BBBB``."""

    if len(normalized) != HYPHENATED_LENGTH:
        return None
    return f"{normalized[:HYPHEN_POSITION]}-{normalized[HYPHEN_POSITION:]}"


def code_variants(raw: str) -> tuple[str, ...]:
    """Return the literal spellings of ``raw`` in lookup priority order.

    Raw value first, then the hyphenated rendering (10-character codes only),
    the normalized value and finally the raw value with hyphens stripped but
    case kept.
    """

    normalized = normalize_code(raw)
    candidates = [raw, hyphenate_code(normalized), normalized, raw.replace("-", "")]

    variants: list[str] = []
    for candidate in candidates:
        if candidate is not None and candidate not in variants:
            variants.append(candidate)
    return tuple(variants)


def build_winner_variants(values: Iterable[str]) -> frozenset[str]:
    """Expand stored winner values into the set of spellings that count as winning."""

    variants: set[str] = set()
    for value in values:
        variants.update(code_variants(value))
    return frozenset(variants)


def narrow_variants(variants: Iterable[str], search: str) -> frozenset[str]:
    """Keep only the variants containing ``search`` (case-sensitive)."""

    return frozenset(variant for variant in variants if search in variant)
