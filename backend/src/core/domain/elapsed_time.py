from dataclasses import dataclass

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class ElapsedTime:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_millis(cls, millis: int) -> "ElapsedTime":
        remainder = abs(millis) // 1000
        if millis < 0:
            remainder = -remainder

        days = hours = minutes = 0

        # A negative remainder never reaches a unit and stays in seconds.
        if remainder >= SECONDS_PER_DAY:
            days, remainder = divmod(remainder, SECONDS_PER_DAY)

        if remainder >= SECONDS_PER_HOUR:
            hours, remainder = divmod(remainder, SECONDS_PER_HOUR)

        if remainder >= SECONDS_PER_MINUTE:
            minutes, remainder = divmod(remainder, SECONDS_PER_MINUTE)

        return cls(days=days, hours=hours, minutes=minutes, seconds=remainder)
