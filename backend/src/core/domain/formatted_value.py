from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FormattedValue:
    value: str
    locale: Optional[str] = None
