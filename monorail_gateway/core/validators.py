"""Input validation run before any outbound request is issued."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .errors import ValidationError

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

MAX_SLIPPAGE_BPS = 10_000
MAX_DEADLINE_SECONDS = 3600
MIN_HOPS = 1
MAX_HOPS = 5
MAX_PAGE_LIMIT = 1000

Amount = Union[str, int, float, Decimal]


def is_valid_address(value: Optional[str]) -> bool:
    return bool(value) and _EVM_ADDRESS_RE.match(value) is not None


def validate_address(value: Optional[str], field_name: str = "address") -> None:
    """Reject anything that is not a 0x-prefixed, 40 hex digit address."""
    if not value:
        raise ValidationError(f"{field_name} is required", field_name)

    if not value.startswith("0x"):
        raise ValidationError(f"{field_name} must start with 0x", field_name)

    if len(value) != 42:
        raise ValidationError(f"{field_name} must be 42 characters long", field_name)

    if not _EVM_ADDRESS_RE.match(value):
        raise ValidationError(f"{field_name} contains invalid characters", field_name)


def _parse_amount(value: Amount) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError):
        return None


def validate_amount(value: Optional[Amount], field_name: str = "amount") -> None:
    """Amount is a human-readable decimal quantity, text or numeric."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required", field_name)

    parsed = _parse_amount(value)
    if parsed is None or not math.isfinite(parsed):
        raise ValidationError(f"{field_name} must be a valid number", field_name)

    if parsed <= 0:
        raise ValidationError(f"{field_name} must be greater than 0", field_name)


def validate_slippage(value: Optional[float]) -> None:
    """Slippage tolerance in basis points."""
    if value is None:
        return
    if value < 0 or value > MAX_SLIPPAGE_BPS:
        raise ValidationError(
            "Slippage must be between 0 and 10000 basis points (0-100%)", "slippage"
        )


def validate_deadline(value: Optional[float]) -> None:
    if value is None:
        return
    if value <= 0:
        raise ValidationError("Deadline must be greater than 0", "deadline")
    if value > MAX_DEADLINE_SECONDS:
        raise ValidationError("Deadline cannot exceed 1 hour (3600 seconds)", "deadline")


def validate_max_hops(value: Optional[int]) -> None:
    if value is None:
        return
    if value < MIN_HOPS or value > MAX_HOPS:
        raise ValidationError("Max hops must be between 1 and 5", "max_hops")


def validate_pagination(offset: Optional[int] = None, limit: Optional[int] = None) -> None:
    if offset is not None and offset < 0:
        raise ValidationError("Offset must be non-negative", "offset")

    if limit is not None:
        if limit <= 0:
            raise ValidationError("Limit must be greater than 0", "limit")
        if limit > MAX_PAGE_LIMIT:
            raise ValidationError("Limit cannot exceed 1000", "limit")
