from enum import Enum


class StringKey(str, Enum):
    BYTE_SHORT = "byteShort"
    KILOBYTE_SHORT = "kilobyteShort"
    MEGABYTE_SHORT = "megabyteShort"
    GIGABYTE_SHORT = "gigabyteShort"
    TERABYTE_SHORT = "terabyteShort"
    PETABYTE_SHORT = "petabyteShort"

    FILE_SIZE_SUFFIX = "fileSizeSuffix"

    DURATION_DAYS = "durationDays"
    DURATION_DAY_HOUR = "durationDayHour"
    DURATION_DAY_HOURS = "durationDayHours"
    DURATION_HOURS = "durationHours"
    DURATION_HOUR_MINUTE = "durationHourMinute"
    DURATION_HOUR_MINUTES = "durationHourMinutes"
    DURATION_MINUTES = "durationMinutes"
    DURATION_MINUTE_SECOND = "durationMinuteSecond"
    DURATION_MINUTE_SECONDS = "durationMinuteSeconds"
    DURATION_SECOND = "durationSecond"
    DURATION_SECONDS = "durationSeconds"
