"""Exceptions raised by the room3d core."""


class Room3DError(Exception):
    """Base exception for room3d errors."""

    def __init__(self, message: str, error_type: str = "unknown"):
        super().__init__(message)
        self.error_type = error_type


class InvalidRangeInput(Room3DError, ValueError):
    """User input outside a field's valid domain.

    Recovered locally: the input is rejected and prior state is kept.
    """

    def __init__(self, field: str, value, message: str = ""):
        super().__init__(
            message or f"Invalid value for {field}: {value!r}",
            error_type="invalid_range_input",
        )
        self.field = field
        self.value = value


class UnknownFurnitureKind(Room3DError):
    """Furniture name with no dedicated geometry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown furniture kind: {name!r}", error_type="unknown_furniture_kind")
        self.name = name


class DegenerateGeometry(Room3DError):
    """Zero or negative box dimensions."""

    def __init__(self, part: str, size):
        super().__init__(f"Degenerate geometry for {part}: {size}", error_type="degenerate_geometry")
        self.part = part
        self.size = size
