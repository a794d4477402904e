"""Wayfarer widgets."""

from .favorites_list import FavoritesList
from .name_modal import FavoriteNameModal

__all__ = [
    "FavoritesList",
    "FavoriteNameModal",
]
