"""Amount comparison operators used when filtering transactions by amount."""

from __future__ import annotations

from enum import StrEnum

import structlog
from pydantic import BaseModel, ConfigDict, model_validator

logger = structlog.get_logger(__name__)


class AmountFilterType(StrEnum):
    """A comparison operator and the number of operands it takes."""

    GREATER_THAN = "gt", "Greater than", 1
    LESS_THAN = "lt", "Less than", 1
    EQUAL_TO = "eq", "Equal to", 1
    NOT_EQUAL_TO = "ne", "Not equal to", 1
    BETWEEN = "bt", "Between", 2
    NOT_BETWEEN = "nb", "Not between", 2

    def __new__(cls, type_code: str, display_name: str, param_count: int):
        obj = str.__new__(cls, type_code)
        obj._value_ = type_code
        obj.display_name = display_name
        obj.param_count = param_count
        return obj

    @classmethod
    def values(cls) -> list[AmountFilterType]:
        return list(cls)

    @classmethod
    def value_of(cls, type_code: str) -> AmountFilterType | None:
        return cls._value2member_map_.get(type_code)


class AmountFilter(BaseModel):
    """A filter operator together with its operands (minor units)."""

    model_config = ConfigDict(frozen=True)

    filter_type: AmountFilterType
    params: tuple[int, ...]

    @model_validator(mode="after")
    def _check_param_count(self) -> AmountFilter:
        if len(self.params) != self.filter_type.param_count:
            raise ValueError(
                f"{self.filter_type.display_name} takes {self.filter_type.param_count} "
                f"operand(s), got {len(self.params)}"
            )
        return self

    def to_query(self) -> str:
        return ":".join([self.filter_type.value, *(str(p) for p in self.params)])

    def matches(self, amount: int) -> bool:
        if self.filter_type is AmountFilterType.GREATER_THAN:
            return amount > self.params[0]
        if self.filter_type is AmountFilterType.LESS_THAN:
            return amount < self.params[0]
        if self.filter_type is AmountFilterType.EQUAL_TO:
            return amount == self.params[0]
        if self.filter_type is AmountFilterType.NOT_EQUAL_TO:
            return amount != self.params[0]

        # Range bounds are inclusive in either order
        low, high = sorted(self.params)
        within = low <= amount <= high
        return within if self.filter_type is AmountFilterType.BETWEEN else not within


def parse_amount_filter(query: str) -> AmountFilter | None:
    """Parse ``"gt:1000"`` / ``"bt:100:200"`` into an ``AmountFilter``.

    Returns None for unknown operators, non-integer operands or the wrong
    operand count.
    """
    if not query:
        return None

    code, *raw_params = query.strip().split(":")
    filter_type = AmountFilterType.value_of(code)
    if filter_type is None or len(raw_params) != filter_type.param_count:
        logger.debug("amount_filter_rejected", query=query)
        return None

    try:
        params = tuple(int(p) for p in raw_params)
    except ValueError:
        logger.debug("amount_filter_rejected", query=query)
        return None

    return AmountFilter(filter_type=filter_type, params=params)
