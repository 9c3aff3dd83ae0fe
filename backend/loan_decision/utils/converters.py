"""Conversion utilities."""

import re


def normalize_path(path: str) -> str:
    """Normalize API path by replacing UUIDs and numeric IDs with placeholders.

    Useful for metrics and logging to avoid high cardinality.

    Args:
        path: API path to normalize

    Returns:
        Normalized path with IDs replaced

    Examples:
        >>> normalize_path("/api/v1/loan/decision")
        "/api/v1/loan/decision"
        >>> normalize_path("/api/v1/loan/123")
        "/api/v1/loan/{id}"
    """
    if not path:
        return path

    uuid_pattern = r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'
    path = re.sub(uuid_pattern, '{id}', path, flags=re.IGNORECASE)

    return re.sub(r'/\d+(?=/|$)', '/{id}', path)
