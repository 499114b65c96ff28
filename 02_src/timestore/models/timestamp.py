"""Timestamp value model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Timestamp {value.isoformat()} is out of range in UTC") from e


@dataclass(frozen=True)
class TimeStamp:
    """A single point in time, held with full precision in UTC."""

    value: datetime = field(default=EPOCH)

    def __post_init__(self) -> None:
        # frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "value", ensure_utc(self.value))

    def __str__(self) -> str:
        return self.value.isoformat()

    def unix_seconds(self) -> int:
        """Whole seconds since the epoch, sub-second part dropped."""
        delta = self.value - EPOCH
        return delta.days * 86400 + delta.seconds

    def truncated(self) -> "TimeStamp":
        """Copy of this timestamp with the sub-second part dropped."""
        return TimeStamp(self.value.replace(microsecond=0))

    @classmethod
    def from_unix_seconds(cls, seconds: int | float) -> "TimeStamp":
        """Build a timestamp from seconds since the epoch."""
        try:
            return cls(datetime.fromtimestamp(seconds, timezone.utc))
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp {seconds} is out of range") from e

    @classmethod
    def now(cls) -> "TimeStamp":
        """Current wall-clock time."""
        return cls(datetime.now(timezone.utc))
