# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree model for parsed JSON documents."""

from jsoncheck.model.nodes import (
    ArrayNode,
    BooleanNode,
    Node,
    NullNode,
    NumberNode,
    ObjectNode,
    StringNode,
)

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "Node",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "StringNode",
]
