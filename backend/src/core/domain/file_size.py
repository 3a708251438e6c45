from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from core.domain.size_unit import SizeUnit

UNIT_STEP = 1024
UNIT_THRESHOLD = 900

# Wide enough for any finite float in fixed-point notation.
_DECIMAL_CONTEXT = Context(prec=400)


def _format_decimal(value: float, decimals: int) -> str:
    # Rounds the shortest repr half-up, so 0.125 renders as "0.13" and not "0.12".
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)

    return f"{rounded:f}"


def _decimals_for(magnitude: float, shorter: bool) -> int:
    if magnitude < 1:
        return 2

    if magnitude < 10:
        return 1 if shorter else 2

    if magnitude < 100:
        return 0 if shorter else 2

    return 0


@dataclass(frozen=True)
class FileSize:
    value: str
    unit: SizeUnit

    @classmethod
    def from_bytes(cls, number: int, shorter: bool = False) -> "FileSize":
        """Reduce a byte count to the smallest tier whose magnitude is at most 900.

        The tiers stop at petabytes; larger counts stay in PB with a magnitude
        above 900. Negative counts never cross a threshold and remain in bytes.
        """
        magnitude = float(number)
        unit = SizeUnit.BYTE

        while magnitude > UNIT_THRESHOLD and unit.next is not None:
            magnitude /= UNIT_STEP
            unit = unit.next

        return cls(value=_format_decimal(magnitude, _decimals_for(magnitude, shorter)), unit=unit)
