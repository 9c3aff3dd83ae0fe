"""Utility functions organized by domain.

Prefer importing from specific modules for better clarity:
    from loan_decision.utils.formatting import calculate_age
    from loan_decision.utils.strings import mask_document
    from loan_decision.utils.generators import generate_request_id
"""

# Converters
from .converters import normalize_path

# Formatting
from .formatting import calculate_age

# Generators
from .generators import generate_request_id

# Strings
from .strings import mask_document, sanitize_string

__all__ = [
    # Converters
    "normalize_path",
    # Formatting
    "calculate_age",
    # Generators
    "generate_request_id",
    # Strings
    "mask_document",
    "sanitize_string",
]
