from dataclasses import dataclass
from enum import Enum
from .errors import UnsupportedUnit

class TimeUnit(Enum):
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

# Vault only understands these suffixes
_CODES = {
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "m",
    TimeUnit.HOURS: "h",
}

def time_string(amount: int, unit: TimeUnit) -> str:
    """10, SECONDS -> "10s"; anything outside ms/s/m/h raises UnsupportedUnit."""
    try:
        code = _CODES[unit]
    except (KeyError, TypeError):
        raise UnsupportedUnit(unit) from None
    return f"{amount}{code}"

@dataclass(frozen=True)
class Increment:
    amount: int
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"increment must be >= 0, got {self.amount}")

    def encode(self) -> str:
        return time_string(self.amount, self.unit)
