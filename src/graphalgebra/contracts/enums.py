# src/graphalgebra/contracts/enums.py
"""Kinds used across subsystem boundaries."""

from enum import StrEnum


class ProductKind(StrEnum):
    """Graph product variant.

    Every variant shares the same node grid (one node per pair in V1 x V2)
    and differs only in the edge rule applied to each pair.
    """

    CARTESIAN = "cartesian"
    TENSOR = "tensor"
    LEXICOGRAPHICAL = "lexicographical"
    STRONG = "strong"
    CO_NORMAL = "co_normal"
    MODULAR = "modular"
    ROOTED = "rooted"
