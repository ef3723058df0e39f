"""Exception hierarchy for SignCalc."""


class SigncalcError(Exception):
    """Base exception for all SignCalc errors."""

    pass


class FontError(SigncalcError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error fetching or parsing a font resource."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(f"Failed to load font '{resource}': {reason}")


class GeometryError(SigncalcError):
    """Errors in geometric calculations."""

    pass


class PathError(GeometryError):
    """Path contains something that is not a drawing command."""

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(f"Unsupported path command: {command!r}")


class InvalidDimensionError(GeometryError):
    """A physical dimension is negative or not a finite number."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r}")
