from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from typing_extensions import Annotated


# unsigned JSON number literal; exponent capped at three digits
_NUMERIC = re.compile(r"(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]{1,3})?")


def _numeric_string(value: Any) -> Any:
	# money travels as a JSON string ("6.49"), never as a bare number
	if isinstance(value, Decimal):
		return value
	if isinstance(value, str) and _NUMERIC.fullmatch(value):
		return value
	raise ValueError("must be a numeric string")


Money = Annotated[
	Decimal,
	BeforeValidator(_numeric_string),
	Field(ge=0, allow_inf_nan=False),
]
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class _WireModel(BaseModel):
	model_config = ConfigDict(populate_by_name=True, frozen=True)


class Item(_WireModel):
	short_description: str = Field(alias="shortDescription")
	price: Money


class Receipt(_WireModel):
	retailer: NonEmptyStr
	purchase_date: str = Field(alias="purchaseDate")
	purchase_time: str = Field(alias="purchaseTime")
	items: list[Item] = Field(default_factory=list)
	total: Money


class ProcessResponse(BaseModel):
	id: str


class PointsResponse(BaseModel):
	points: int
