import re
from datetime import date

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_valid_cpf(cpf: str) -> bool:
    """Validate a Brazilian CPF: 11 digits, not all equal, both verifier digits correct."""
    digits = re.sub(r"\D", "", cpf)

    if len(digits) != 11:
        return False

    if len(set(digits)) == 1:
        return False

    numbers = [int(d) for d in digits]
    for position in (9, 10):
        total = sum(numbers[i] * (position + 1 - i) for i in range(position))
        remainder = (total * 10) % 11
        if remainder == 10:
            remainder = 0
        if remainder != numbers[position]:
            return False

    return True


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None


def is_numeric(value: str) -> bool:
    return NUMBER_PATTERN.fullmatch(value.strip()) is not None


def is_integer(value: str) -> bool:
    return INTEGER_PATTERN.fullmatch(value.strip()) is not None


def end_of_current_decade(today: date | None = None) -> str:
    """Last day of the current decade, e.g. 2029-12-31 during the 2020s."""
    year = (today or date.today()).year
    return f"{year // 10 * 10 + 9}-12-31"
