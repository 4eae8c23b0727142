"""
Image module - fitting, orientation, and grayscale rendering.
"""

from .filters import load_image, placeholder_image, to_grayscale
from .orientation import flatten
from .scaler import fit, fitted_size, resolve_resample
from .state import ImageState

__all__ = [
    "ImageState",
    "fit",
    "fitted_size",
    "flatten",
    "load_image",
    "placeholder_image",
    "resolve_resample",
    "to_grayscale",
]
