"""Shared base for wire-format schemas.

Attributes are snake_case; input and dumps use the camelCase wire keys
only (snake_case input keys are not recognised).
"""
from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, PlainValidator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def _number(v: Any) -> Any:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    return v


# int or float kept as given; numeric strings and booleans rejected
Number = Annotated[Union[int, float], PlainValidator(_number)]


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        protected_namespaces=(),
        extra="ignore",
    )
