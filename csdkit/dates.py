"""Calendar helpers for dates from 1900 onwards."""

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_MONTHS_TR = ("Ocak", "Subat", "Mart", "Nisan", "Mayis", "Haziran",
              "Temmuz", "Agustos", "Eylul", "Ekim", "Kasim", "Aralik")
_MONTHS_EN = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS_TR = ("Pazar", "Pazartesi", "Sali", "Carsamba", "Persembe", "Cuma", "Cumartesi")
_WEEKDAYS_EN = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_SUFFIXES = {1: "st", 21: "st", 31: "st", 2: "nd", 22: "nd", 3: "rd", 23: "rd"}


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")


def _month_days(month: int, year: int) -> int:
    return 29 if month == 2 and is_leap_year(year) else _MONTH_DAYS[month - 1]


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return whether the date exists and is not before 1900."""
    if not 1 <= day <= 31 or not 1 <= month <= 12 or year < 1900:
        return False
    return day <= _month_days(month, year)


def day_of_year(day: int, month: int, year: int) -> int:
    """Return the ordinal day within the year, starting from 1."""
    _check_month(month)
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return day + sum(_MONTH_DAYS[: month - 1]) + leap_day


def day_of_week(day: int, month: int, year: int) -> int:
    """Return the weekday, 0 for Sunday up to 6 for Saturday."""
    total = day_of_year(day, month, year)
    total += sum(366 if is_leap_year(y) else 365 for y in range(1900, year))
    return total % 7


def is_weekend(day: int, month: int, year: int) -> bool:
    """Return whether the date falls on Saturday or Sunday."""
    return day_of_week(day, month, year) in (0, 6)


def is_weekday(day: int, month: int, year: int) -> bool:
    """Return whether the date falls on Monday to Friday."""
    return not is_weekend(day, month, year)


def _require_valid(day: int, month: int, year: int) -> None:
    if not is_valid_date(day, month, year):
        raise ValueError(f"invalid date: {day}/{month}/{year}")


def format_date_tr(day: int, month: int, year: int) -> str:
    """Format a date in Turkish, e.g. ``1 Ocak 1900 Pazartesi``."""
    _require_valid(day, month, year)
    weekday = _WEEKDAYS_TR[day_of_week(day, month, year)]
    return f"{day} {_MONTHS_TR[month - 1]} {year} {weekday}"


def format_date_en(day: int, month: int, year: int) -> str:
    """Format a date in English, e.g. ``1st Jan 1900 Mon``."""
    _require_valid(day, month, year)
    suffix = _SUFFIXES.get(day, "th")
    weekday = _WEEKDAYS_EN[day_of_week(day, month, year)]
    return f"{day}{suffix} {_MONTHS_EN[month - 1]} {year} {weekday}"