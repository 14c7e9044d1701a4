"""Winner/loser classification of campaign codes.

Winner status is never stored on a code. Every call reloads the winners
ledger, expands it into all literal spellings and lets the code repository
match codes against that set the way a case-insensitive collation does.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Optional

from ..repositories import (
    ByMembership,
    ByNullable,
    BySubstring,
    CodeFilter,
    CodePage,
    CodeRepository,
    Sort,
    WinnerRepository,
)
from ..utils.codes import build_winner_variants, narrow_variants

logger = logging.getLogger(__name__)

MOST_RECENT_USE = (Sort("used_at", descending=True), Sort("id"))
BY_ID = (Sort("id"),)


class CodeView(str, enum.Enum):
    """The four classification views over the codes table."""

    WINNERS = "winners"
    LOSERS = "losers"
    WINNER_CODES = "winner-codes"
    NON_WINNER_CODES = "non-winner-codes"

    @property
    def redeemed_only(self) -> bool:
        return self in (CodeView.WINNERS, CodeView.LOSERS)

    @property
    def winning(self) -> bool:
        return self in (CodeView.WINNERS, CodeView.WINNER_CODES)

    @property
    def order(self) -> tuple[Sort, ...]:
        return MOST_RECENT_USE if self.redeemed_only else BY_ID


def is_winner(value: str, variants: Iterable[str]) -> bool:
    """Membership of ``value`` in the winner variant set, ignoring case."""

    folded = value.upper()
    return any(variant.upper() == folded for variant in variants)


def view_filters(view: CodeView, variants: frozenset[str], search: Optional[str] = None) -> list[CodeFilter]:
    """Build the filter list selecting ``view``.

    With a search term the code value must contain it. Winning views also
    narrow the variant set to the spellings containing the term. Non-winning
    views always exclude the full set, so a search can never turn a winning
    code into a loser.
    """

    filters: list[CodeFilter] = []
    if view.redeemed_only:
        filters.append(ByNullable("used_at", is_null=False))

    members = variants
    if search:
        if view.winning:
            members = narrow_variants(variants, search)
        filters.append(BySubstring("value", search))

    filters.append(ByMembership("value", members, negate=not view.winning, ignore_case=True))
    return filters


class CodeClassifier:
    """Serves the four classification views from injected repositories."""

    def __init__(self, codes: CodeRepository, winners: WinnerRepository) -> None:
        self.code_repository = codes
        self.winner_repository = winners

    def winner_variants(self) -> frozenset[str]:
        values = self.winner_repository.list_values()
        variants = build_winner_variants(values)
        logger.debug("winner variant set built: %d winners -> %d spellings", len(values), len(variants))
        return variants

    def classify(
        self,
        view: CodeView,
        *,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> CodePage:
        filters = view_filters(view, self.winner_variants(), search)
        data, total = self.code_repository.find_and_count(filters, order=view.order, page=page, limit=limit)
        logger.debug("view %s (search=%r) matched %d codes", view.value, search, total)
        return CodePage(data=data, total=total)

    def winners(self, **query) -> CodePage:
        return self.classify(CodeView.WINNERS, **query)

    def losers(self, **query) -> CodePage:
        return self.classify(CodeView.LOSERS, **query)

    def winner_codes(self, **query) -> CodePage:
        return self.classify(CodeView.WINNER_CODES, **query)

    def non_winner_codes(self, **query) -> CodePage:
        return self.classify(CodeView.NON_WINNER_CODES, **query)
