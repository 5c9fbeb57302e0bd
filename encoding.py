import string

from utils import InvalidDigitError

DIGITS = string.digits + string.ascii_lowercase


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"Base must be between 2 and 36, got {base}")


def base_to_int(value: str, base: int) -> int:
    """Convert ``value`` written in ``base`` (2..36) to an int.

    Digits are 0-9 then a-z, case insensitive, most significant first.
    The empty string decodes to 0. No sign handling and no reduction.
    """
    _check_base(base)
    result = 0
    for ch in value:
        digit = DIGITS.find(ch.lower())
        if digit < 0 or digit >= base:
            raise InvalidDigitError(ch, base, value)
        result = result * base + digit
    return result


def int_to_base(number: int, base: int) -> str:
    _check_base(base)
    if number < 0:
        raise ValueError(f"Cannot render negative number {number}")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, r = divmod(number, base)
        digits.append(DIGITS[r])
    return "".join(reversed(digits))
