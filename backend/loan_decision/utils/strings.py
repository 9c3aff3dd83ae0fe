"""String manipulation utilities."""

from ..core.constants import Security


def mask_document(document: str, visible_chars: int | None = None) -> str:
    """Mask identity code for logging (PII protection).

    Shows only the last N characters, masking the rest with asterisks.

    Args:
        document: The identity code to mask
        visible_chars: Number of characters to show at the end (default from Security constants)

    Returns:
        Masked identity code

    Examples:
        >>> mask_document("39002010965")
        "*******0965"
        >>> mask_document("123")
        "****"
    """
    if not document:
        return Security.DOCUMENT_MASK_FULL

    visible = visible_chars or Security.DOCUMENT_VISIBLE_CHARS

    if len(document) <= visible:
        return Security.DOCUMENT_MASK_FULL

    masked_length = len(document) - visible
    return Security.DOCUMENT_MASK_CHAR * masked_length + document[-visible:]


def sanitize_string(value: str, max_length: int | None = None) -> str:
    """Sanitize string by trimming whitespace and optionally truncating.

    Args:
        value: String to sanitize
        max_length: Optional maximum length

    Returns:
        Sanitized string

    Examples:
        >>> sanitize_string("  39002010965  ")
        "39002010965"
    """
    if not value:
        return ""

    sanitized = value.strip()

    if max_length and len(sanitized) > max_length:
        return sanitized[:max_length]

    return sanitized
