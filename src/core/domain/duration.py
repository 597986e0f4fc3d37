"""Paste durations.

pastery.net expresses the lifetime of a paste in minutes. Users write it in a
compact form: an amount followed by an optional unit (`90`, `2h`, `1d`, `2mo`).
"""

from __future__ import annotations

from core.errors import DurationTooLongError, InvalidDurationFormatError

ONE_MINUTE = 1
ONE_HOUR = ONE_MINUTE * 60
ONE_DAY = ONE_HOUR * 24
ONE_WEEK = ONE_DAY * 7
ONE_MONTH = ONE_DAY * 30
ONE_YEAR = ONE_DAY * 365
MAX_DURATION = ONE_YEAR * 100

UNITS: dict[str, int] = {
    "m": ONE_MINUTE,
    "h": ONE_HOUR,
    "d": ONE_DAY,
    "w": ONE_WEEK,
    "mo": ONE_MONTH,
    "y": ONE_YEAR,
}

DEFAULT_UNIT = "m"


def _expected_units() -> str:
    names = [f"`{unit}'" for unit in UNITS]
    return ", ".join(names[:-1]) + f", or {names[-1]}"


def _too_long(value: str) -> DurationTooLongError:
    return DurationTooLongError(
        f"Duration `{value}' is too long; maximum duration is 100y"
    )


def parse_duration(value: str) -> int:
    """Parse a duration string into minutes.

    A bare amount is read as minutes. The unit is matched as a whole suffix,
    so `2mo` is two months and `2mx` is an error.

    Raises:
        InvalidDurationFormatError: unknown unit, or no leading amount.
        DurationTooLongError: the result is longer than 100 years.
    """

    split_at = next(
        (idx for idx, char in enumerate(value) if not ("0" <= char <= "9")),
        len(value),
    )
    amount_text, unit = value[:split_at], value[split_at:]
    if not unit:
        unit = DEFAULT_UNIT

    if not amount_text:
        raise InvalidDurationFormatError(
            f"Duration `{value}' has no amount; expected a number optionally "
            f"followed by one of {_expected_units()}"
        )

    scale = UNITS.get(unit)
    if scale is None:
        raise InvalidDurationFormatError(
            f"Unknown unit `{unit}'; expected one of {_expected_units()}"
        )

    minutes = int(amount_text) * scale
    if minutes > MAX_DURATION:
        raise _too_long(value)
    return minutes


def format_duration(minutes: int) -> str:
    """Render minutes with the largest unit that divides them evenly."""

    if minutes > 0:
        for unit, scale in sorted(UNITS.items(), key=lambda item: item[1], reverse=True):
            if minutes % scale == 0:
                return f"{minutes // scale}{unit}"
    return f"{minutes}{DEFAULT_UNIT}"
