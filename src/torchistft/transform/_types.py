"""Shared types for transform module."""

from typing import Union

from torch import Tensor

# Scalar parameters may come from a host graph as 0-d integer tensors
IntegerScalar = Union[int, Tensor]

__all__ = ["IntegerScalar"]
