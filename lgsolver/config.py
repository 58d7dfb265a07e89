"""Per-solve settings: display precision, theme and number separators.

Settings are plain dicts merged over ``DEFAULT_SETTINGS`` and frozen into a
:class:`Settings` value for the duration of one solve.
"""

from dataclasses import dataclass
from typing import Optional

EXACT = "exact"

MIN_PRECISION = 1
MAX_PRECISION = 13

THEMES = ("light", "dark")

DEFAULT_SETTINGS = {
    "precision": 3,           # 1..13 digits, or "exact" for fractions only
    "theme": "light",         # "light" or "dark" (markup colors only)
    "decimal_separator": ".",
    "group_separator": ",",
}


class SettingsError(ValueError):
    """Raised for configuration values that cannot be used."""


@dataclass(frozen=True)
class Settings:
    precision: Optional[int] = 3    # None means exact-fraction mode
    theme: str = "light"
    decimal_separator: str = "."
    group_separator: str = ","

    @property
    def exact(self) -> bool:
        return self.precision is None

    @property
    def digits(self) -> int:
        """Digits shown for floating values (fractions are always exact)."""
        return DEFAULT_SETTINGS["precision"] if self.precision is None else self.precision


def clamp_precision(value) -> Optional[int]:
    """Normalise a precision setting.

    Returns ``None`` for the exact sentinel (``"exact"`` or any negative
    integer), otherwise the digit count clamped to [1, 13].
    """
    if value is None or value == EXACT:
        return None
    try:
        digits = int(value)
    except (TypeError, ValueError):
        raise SettingsError(f"Precision must be an integer or '{EXACT}', got {value!r}.")
    if digits < 0:
        return None
    return max(MIN_PRECISION, min(MAX_PRECISION, digits))


def load_settings(overrides: Optional[dict] = None) -> Settings:
    """Merge *overrides* over the defaults and validate the result."""
    merged = dict(DEFAULT_SETTINGS)
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})

    theme = merged["theme"] if merged["theme"] in THEMES else "light"
    decimal_sep = str(merged["decimal_separator"])
    group_sep = str(merged["group_separator"])
    if len(decimal_sep) != 1:
        raise SettingsError("Decimal separator must be a single character.")
    if decimal_sep == group_sep:
        raise SettingsError("Decimal and group separator must differ.")

    return Settings(
        precision=clamp_precision(merged["precision"]),
        theme=theme,
        decimal_separator=decimal_sep,
        group_separator=group_sep,
    )
