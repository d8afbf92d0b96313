# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Abstract syntax tree nodes for parsed JSON values."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ObjectNode(BaseModel):
    """A JSON object.

    Entries keep their source order and keys are not required to be unique.
    """

    kind: Literal["object"] = "object"
    entries: list[tuple[str, Node]] = _Field(default_factory=list)


class ArrayNode(BaseModel):
    """A JSON array."""

    kind: Literal["array"] = "array"
    items: list[Node] = _Field(default_factory=list)


class StringNode(BaseModel):
    """A JSON string, holding the raw text between the quotes."""

    kind: Literal["string"] = "string"
    value: str


class NumberNode(BaseModel):
    """A JSON number as a double-precision float."""

    kind: Literal["number"] = "number"
    value: float


class BooleanNode(BaseModel):
    kind: Literal["boolean"] = "boolean"
    value: bool


class NullNode(BaseModel):
    kind: Literal["null"] = "null"


# A parsed JSON value. The `kind` discriminator selects the concrete node model.
Node = Annotated[
    ObjectNode | ArrayNode | StringNode | NumberNode | BooleanNode | NullNode,
    _Field(discriminator="kind"),
]


# Resolve forward references for the recursive container nodes.
ObjectNode.model_rebuild()
ArrayNode.model_rebuild()
