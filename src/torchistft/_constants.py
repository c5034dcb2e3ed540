"""Numeric defaults for the transform module."""

import torch

# Accumulated squared-window energy at or below this value counts as zero
WINDOW_ENERGY_EPSILON: float = 1e-11

# Largest overlap-add buffer that can be indexed
MAX_BUFFER_LENGTH: int = torch.iinfo(torch.int64).max
