"""Color scheme serializers with automatic discovery."""

from .alacritty import AlacrittySerializer
from .base import (
    SchemeSerializer,
    discover_serializers,
    get_serializer,
)

__all__ = [
    "AlacrittySerializer",
    "SchemeSerializer",
    "discover_serializers",
    "get_serializer",
]
