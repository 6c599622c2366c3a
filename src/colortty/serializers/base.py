"""
Abstract base class for color scheme serializers with discovery.

Serializers turn a ColorScheme into a target emulator's configuration
text. Like parsers, they are discovered from the files in this directory.
"""

import importlib
import inspect
from abc import ABC, abstractmethod
from pathlib import Path

from ..errors import UnknownFormat
from ..scheme import ColorScheme


class SchemeSerializer(ABC):
    """Renders a ColorScheme in one target format."""

    # Subclasses must override target_name to be discovered
    target_name: str | None = None

    @abstractmethod
    def serialize(self, scheme: ColorScheme) -> str:
        """
        Render a scheme.

        Must be deterministic: identical schemes produce identical text.
        """
        pass


_SERIALIZER_REGISTRY: dict[str, type[SchemeSerializer]] = {}


def discover_serializers() -> dict[str, type[SchemeSerializer]]:
    """
    Discover all serializers in the serializers/ directory.

    Returns:
        Dictionary mapping target names to serializer classes
    """
    if _SERIALIZER_REGISTRY:
        return _SERIALIZER_REGISTRY

    serializers_dir = Path(__file__).parent
    serializer_files = sorted(
        f for f in serializers_dir.glob("*.py") if f.stem not in ("base", "__init__")
    )

    for serializer_file in serializer_files:
        module = importlib.import_module(
            f".{serializer_file.stem}", package=__package__
        )
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, SchemeSerializer)
                and obj is not SchemeSerializer
                and obj.target_name is not None
            ):
                _SERIALIZER_REGISTRY[obj.target_name] = obj

    return _SERIALIZER_REGISTRY


def get_serializer(target_name: str) -> type[SchemeSerializer]:
    """
    Look up a serializer by target name.

    Raises:
        UnknownFormat: If no serializer has this name
    """
    serializers = discover_serializers()
    if target_name not in serializers:
        raise UnknownFormat(target_name)
    return serializers[target_name]
