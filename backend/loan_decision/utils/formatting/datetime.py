"""DateTime utilities."""

from datetime import date


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Calculate age in full years from birth date.

    Args:
        birth_date: Date of birth
        today: Reference date (defaults to the current date)

    Returns:
        Age in years

    Examples:
        >>> calculate_age(date(1990, 2, 1), today=date(2026, 1, 31))
        35
        >>> calculate_age(date(1990, 2, 1), today=date(2026, 2, 1))
        36
    """
    if today is None:
        today = date.today()

    age = today.year - birth_date.year

    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1

    return age
