"""Validation message helpers for item and descriptor records."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one readable line per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages such as ``"Field 'settings.prefix': Field required"``

    Example:
        >>> from pydantic import BaseModel, ValidationError
        >>> class Settings(BaseModel):
        ...     digits: int
        >>> try:
        ...     Settings(digits="three")
        ... except ValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'digits': Input should be a valid integer, ... (received: 'three')"]
    """
    messages: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc) if loc else "<root>"
        msg = error.get("msg", "Unknown error")

        if "input" in error and error.get("type") != "missing":
            messages.append(
                f"Field '{field_path}': {msg} (received: {error['input']!r})"
            )
        else:
            messages.append(f"Field '{field_path}': {msg}")

    return messages or ["Validation failed with unknown error"]
