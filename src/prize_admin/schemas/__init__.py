"""Public schema exports."""

from .code import (
	CodeCheckRead,
	CodeListPage,
	CodeMonthRead,
	CodePage,
	CodeRead,
	GiftGiveRead,
	GiftGiveRequest,
	LoserRead,
	LosersPage,
	NonWinnerCodeRead,
	NonWinnerCodesPage,
	UserSummary,
	WinnerCodeRead,
	WinnerCodesPage,
	WinnerRead,
	WinnersPage,
)
from .gift import GiftPage, GiftRead

__all__ = [
	"CodeCheckRead",
	"CodeListPage",
	"CodeMonthRead",
	"CodePage",
	"CodeRead",
	"GiftGiveRead",
	"GiftGiveRequest",
	"GiftPage",
	"GiftRead",
	"LoserRead",
	"LosersPage",
	"NonWinnerCodeRead",
	"NonWinnerCodesPage",
	"UserSummary",
	"WinnerCodeRead",
	"WinnerCodesPage",
	"WinnerRead",
	"WinnersPage",
]
