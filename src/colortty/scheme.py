"""
Format-independent color scheme model.

Parsers never build a ColorScheme directly; they collect colors into a
SchemeBuilder slot by slot and call build(), which checks that every
required slot was set and applies the cursor default.
"""

from dataclasses import dataclass, field

from .color import ColorValue
from .config.constants import ANSI_COLOR_COUNT, ANSI_COLOR_NAMES, BRIGHT_OFFSET
from .errors import MissingField

# Slot names in palette order: black..white, bright_black..bright_white
ANSI_SLOT_NAMES = ANSI_COLOR_NAMES + [f"bright_{name}" for name in ANSI_COLOR_NAMES]

REQUIRED_SLOTS = ANSI_SLOT_NAMES + ["foreground", "background"]
OPTIONAL_SLOTS = [
    "cursor",
    "cursor_text",
    "selection_foreground",
    "selection_background",
]


@dataclass(frozen=True)
class ColorScheme:
    """A complete terminal color scheme."""

    name: str
    ansi_colors: tuple[ColorValue, ...]
    foreground: ColorValue
    background: ColorValue
    cursor: ColorValue
    cursor_text: ColorValue | None = None
    selection_foreground: ColorValue | None = None
    selection_background: ColorValue | None = None

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "ansi_colors", tuple(self.ansi_colors))
        if len(self.ansi_colors) != ANSI_COLOR_COUNT:
            raise ValueError(
                f"a color scheme needs exactly {ANSI_COLOR_COUNT} ANSI colors, "
                f"got {len(self.ansi_colors)}"
            )

    @property
    def normal_colors(self) -> tuple[ColorValue, ...]:
        """ANSI colors 0-7."""
        return self.ansi_colors[:BRIGHT_OFFSET]

    @property
    def bright_colors(self) -> tuple[ColorValue, ...]:
        """ANSI colors 8-15."""
        return self.ansi_colors[BRIGHT_OFFSET:]

    @property
    def has_selection(self) -> bool:
        return (
            self.selection_foreground is not None
            or self.selection_background is not None
        )


@dataclass
class SchemeBuilder:
    """Mutable slot collector used while a parser walks its input."""

    name: str = ""
    slots: dict[str, ColorValue] = field(default_factory=dict)

    def set(self, slot: str, color: ColorValue) -> None:
        """
        Assign a color to a named slot.

        Args:
            slot: One of ANSI_SLOT_NAMES, REQUIRED_SLOTS or OPTIONAL_SLOTS
            color: Parsed color

        Raises:
            KeyError: If the slot name is not part of the model
        """
        if slot not in REQUIRED_SLOTS and slot not in OPTIONAL_SLOTS:
            raise KeyError(f"unknown scheme slot: {slot}")
        self.slots[slot] = color

    def set_ansi(self, index: int, color: ColorValue) -> None:
        self.set(ANSI_SLOT_NAMES[index], color)

    def missing(self) -> list[str]:
        """Required slots that have not been set, in palette order."""
        return [slot for slot in REQUIRED_SLOTS if slot not in self.slots]

    def build(self) -> ColorScheme:
        """
        Create the immutable scheme.

        Raises:
            MissingField: If any ANSI color, foreground or background is unset
        """
        missing = self.missing()
        if missing:
            raise MissingField(missing)

        foreground = self.slots["foreground"]
        return ColorScheme(
            name=self.name,
            ansi_colors=tuple(self.slots[slot] for slot in ANSI_SLOT_NAMES),
            foreground=foreground,
            background=self.slots["background"],
            cursor=self.slots.get("cursor", foreground),
            cursor_text=self.slots.get("cursor_text"),
            selection_foreground=self.slots.get("selection_foreground"),
            selection_background=self.slots.get("selection_background"),
        )
