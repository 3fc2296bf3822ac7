"""Input normalization shared by community services."""

from toolhub.domain.error import ValidationError


def normalize_text(
    value: str | None,
    *,
    field: str,
    max_length: int,
    min_length: int = 1,
) -> str:
    """Trim user-supplied text and enforce length bounds.

    Args:
        value: Raw input
        field: Field name used in messages and error codes
        max_length: Maximum length after trimming
        min_length: Minimum length after trimming

    Returns:
        Trimmed text

    Raises:
        ValidationError: ``<FIELD>_REQUIRED``, ``<FIELD>_TOO_SHORT`` or
            ``<FIELD>_TOO_LONG``
    """
    prefix = field.upper()
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field.capitalize()} is required", f"{prefix}_REQUIRED")
    if len(text) < min_length:
        raise ValidationError(
            f"{field.capitalize()} must be at least {min_length} characters",
            f"{prefix}_TOO_SHORT",
        )
    if len(text) > max_length:
        raise ValidationError(
            f"{field.capitalize()} must not exceed {max_length} characters",
            f"{prefix}_TOO_LONG",
        )
    return text
