"""Custom exceptions for theming context with color and template references."""

from typing import Iterable, Optional


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a predefined theme template id is not registered.

    Attributes:
        template_id: The id that was requested
        available: Ids registered at the time of the lookup
    """

    def __init__(self, template_id: str, available: Optional[Iterable[str]] = None):
        self.template_id = template_id
        self.available = sorted(available) if available else []

        parts = [f"Theme template '{template_id}' not found"]
        if self.available:
            parts.append(f"Available templates: {', '.join(self.available)}")

        self.message = "\n".join(parts)
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidColorFormatError(ValueError):
    """
    Exception raised when a color is not a valid hex string (#RGB or #RRGGBB).

    Attributes:
        color: The rejected value
        field: Optional name of the palette field the value was destined for
    """

    def __init__(self, color: object, field: Optional[str] = None):
        self.color = color
        self.field = field

        message = f"Invalid color format: {color!r} (expected #RRGGBB or #RGB)"
        if field:
            message += f"\nField: {field}"

        super().__init__(message)


class InvalidThemeStructureError(ValueError):
    """
    Exception raised when a serialized theme (YAML or JSON) is missing required fields
    or contains values of the wrong shape.
    """

    pass
