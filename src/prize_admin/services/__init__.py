"""Service layer exports."""

from . import (
	classification_service,
	code_service,
	gift_service,
)

__all__ = [
	"classification_service",
	"code_service",
	"gift_service",
]
