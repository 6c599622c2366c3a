"""
alacritty color configuration export.
"""

from ..color import ColorValue
from ..config.constants import ANSI_COLOR_NAMES
from ..scheme import ColorScheme
from .base import SchemeSerializer


class AlacrittySerializer(SchemeSerializer):
    """Export a color scheme as alacritty TOML (alacritty.toml)."""

    target_name = "alacritty"

    @staticmethod
    def _line(section: str, key: str, color: ColorValue) -> str:
        return f'colors.{section}.{key} = "#{color.to_hex()}"'

    def _section(
        self, comment: str, section: str, entries: list[tuple[str, ColorValue | None]]
    ) -> list[str]:
        """Render one section, skipping unset entries."""
        lines = [
            self._line(section, key, color)
            for key, color in entries
            if color is not None
        ]
        if not lines:
            return []
        return [f"# {comment}"] + lines + [""]

    def serialize(self, scheme: ColorScheme) -> str:
        """
        Render the scheme as dotted-key TOML.

        Sections appear in a fixed order: primary, cursor, selection (only
        when the scheme has selection colors), normal, bright. Every color
        is written as colors.<section>.<key> = "#rrggbb".

        Args:
            scheme: Scheme to render

        Returns:
            Configuration text ending with a single newline
        """
        lines = []
        if scheme.name:
            lines += [f"# Colors ({scheme.name})", ""]

        lines += self._section(
            "Default colors",
            "primary",
            [("background", scheme.background), ("foreground", scheme.foreground)],
        )
        lines += self._section(
            "Cursor colors",
            "cursor",
            [("text", scheme.cursor_text), ("cursor", scheme.cursor)],
        )
        lines += self._section(
            "Selection colors",
            "selection",
            [
                ("text", scheme.selection_foreground),
                ("background", scheme.selection_background),
            ],
        )
        lines += self._section(
            "Normal colors",
            "normal",
            list(zip(ANSI_COLOR_NAMES, scheme.normal_colors)),
        )
        lines += self._section(
            "Bright colors",
            "bright",
            list(zip(ANSI_COLOR_NAMES, scheme.bright_colors)),
        )

        # Drop the blank separator after the last section
        return "\n".join(lines).rstrip("\n") + "\n"
