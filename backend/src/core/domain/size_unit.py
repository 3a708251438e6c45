from enum import Enum
from typing import Optional

from core.domain.string_key import StringKey


class SizeUnit(str, Enum):
    BYTE = "BYTE"
    KILOBYTE = "KILOBYTE"
    MEGABYTE = "MEGABYTE"
    GIGABYTE = "GIGABYTE"
    TERABYTE = "TERABYTE"
    PETABYTE = "PETABYTE"

    @property
    def string_key(self) -> StringKey:
        mapping = {
            SizeUnit.BYTE: StringKey.BYTE_SHORT,
            SizeUnit.KILOBYTE: StringKey.KILOBYTE_SHORT,
            SizeUnit.MEGABYTE: StringKey.MEGABYTE_SHORT,
            SizeUnit.GIGABYTE: StringKey.GIGABYTE_SHORT,
            SizeUnit.TERABYTE: StringKey.TERABYTE_SHORT,
            SizeUnit.PETABYTE: StringKey.PETABYTE_SHORT,
        }

        return mapping[self]

    @property
    def next(self) -> Optional["SizeUnit"]:
        units = list(SizeUnit)
        index = units.index(self)

        if index + 1 == len(units):
            return None

        return units[index + 1]
