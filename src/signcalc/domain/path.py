"""Outline path commands.

This module defines the drawing commands a glyph outline is made of and the
OutlinePath that strings them together:
- MoveTo: Start a new subpath
- LineTo: Straight segment
- QuadCurveTo: Quadratic Bezier segment (TrueType outlines)
- CubicCurveTo: Cubic Bezier segment (PostScript/CFF outlines)
- ClosePath: Straight segment back to the subpath start
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier from the current point through control (cx, cy) to (x, y)."""

    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier from the current point with two control points to (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Straight segment back to the most recent MoveTo point."""


PathCommand = MoveTo | LineTo | QuadCurveTo | CubicCurveTo | ClosePath

# SVG path letters, used for serialization
_TAGS: dict[type, str] = {
    MoveTo: "M",
    LineTo: "L",
    QuadCurveTo: "Q",
    CubicCurveTo: "C",
    ClosePath: "Z",
}
_TYPES: dict[str, type] = {tag: cls for cls, tag in _TAGS.items()}


def command_to_dict(command: PathCommand) -> dict[str, Any]:
    """Serialize a command to a dictionary tagged with its SVG letter.

    Args:
        command: Path command

    Returns:
        Dictionary with a "type" key plus the command's coordinates
    """
    data: dict[str, Any] = {"type": _TAGS[type(command)]}
    for name in command.__slots__:
        data[name] = getattr(command, name)
    return data


def command_from_dict(data: dict[str, Any]) -> PathCommand:
    """Deserialize a command produced by command_to_dict.

    Args:
        data: Dictionary with a "type" key and coordinates

    Returns:
        Path command instance

    Raises:
        KeyError: If the type tag is unknown
    """
    cls = _TYPES[data["type"]]
    return cls(**{name: data[name] for name in cls.__slots__})


@dataclass
class OutlinePath:
    """An ordered sequence of drawing commands.

    A path may hold several subpaths (one per glyph contour), each starting
    with MoveTo. Coordinates are in output pixels, y-up, with the text
    baseline at y = 0.

    Attributes:
        commands: Drawing commands in order
    """

    commands: list[PathCommand] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def append(self, command: PathCommand) -> None:
        """Append a drawing command."""
        self.commands.append(command)

    def extend(self, other: "OutlinePath") -> None:
        """Append every command of another path."""
        self.commands.extend(other.commands)

    def is_empty(self) -> bool:
        """Check if the path draws nothing.

        Blank text and glyphs without contours (spaces) produce empty paths.

        Returns:
            True if there are no commands besides MoveTo
        """
        return all(isinstance(command, MoveTo) for command in self.commands)

    def subpath_count(self) -> int:
        """Count subpaths that draw at least one segment.

        Returns:
            Number of MoveTo runs followed by a drawing command
        """
        count = 0
        drawing = False
        for command in self.commands:
            if isinstance(command, MoveTo):
                drawing = False
            elif not drawing and not isinstance(command, ClosePath):
                drawing = True
                count += 1
        return count

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a list of tagged commands
        """
        return {"commands": [command_to_dict(c) for c in self.commands]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OutlinePath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            OutlinePath instance
        """
        return cls(commands=[command_from_dict(c) for c in data["commands"]])
