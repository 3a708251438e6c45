import warnings
from typing import Optional

from core.domain.elapsed_time import ElapsedTime
from core.domain.file_size import FileSize
from core.domain.packed_ipv4 import to_ipv4_address
from core.domain.string_key import StringKey
from core.port.localizer import Localizer


def format_file_size(localizer: Optional[Localizer], number: int) -> str:
    """Format a byte count as a localized size such as ``"1.20 MB"``.

    Returns an empty string when no localizer is available.
    """
    return _format_file_size(localizer, number, shorter=False)


def format_short_file_size(localizer: Optional[Localizer], number: int) -> str:
    """Like :func:`format_file_size`, but with fewer digits of precision."""
    return _format_file_size(localizer, number, shorter=True)


def _format_file_size(localizer: Optional[Localizer], number: int, shorter: bool) -> str:
    if localizer is None:
        return ""

    file_size = FileSize.from_bytes(number, shorter=shorter)

    return localizer.get_string(
        StringKey.FILE_SIZE_SUFFIX,
        file_size.value,
        localizer.get_string(file_size.unit.string_key),
    )


def format_ip_address(ipv4_address: int) -> str:
    """Render a packed little-endian IPv4 address, so ``0x01020304`` gives ``"4.3.2.1"``.

    Deprecated: build an ``ipaddress.IPv4Address`` instead, which also has an IPv6
    counterpart.
    """
    warnings.warn(
        "format_ip_address is deprecated; use ipaddress.IPv4Address instead",
        DeprecationWarning,
        stacklevel=2,
    )

    return str(to_ipv4_address(ipv4_address))


def format_short_elapsed_time(localizer: Localizer, millis: int) -> str:
    """Format a duration with at most two units, e.g. ``"1 day 5 hrs"``.

    When only one unit is shown the dropped finer unit is rounded into it.
    """
    elapsed = ElapsedTime.from_millis(millis)
    days, hours, minutes, seconds = elapsed.days, elapsed.hours, elapsed.minutes, elapsed.seconds

    if days >= 2:
        days += (hours + 12) // 24
        return localizer.get_string(StringKey.DURATION_DAYS, days)

    if days > 0:
        if hours == 1:
            return localizer.get_string(StringKey.DURATION_DAY_HOUR, days, hours)

        return localizer.get_string(StringKey.DURATION_DAY_HOURS, days, hours)

    if hours >= 2:
        hours += (minutes + 30) // 60
        return localizer.get_string(StringKey.DURATION_HOURS, hours)

    if hours > 0:
        if minutes == 1:
            return localizer.get_string(StringKey.DURATION_HOUR_MINUTE, hours, minutes)

        return localizer.get_string(StringKey.DURATION_HOUR_MINUTES, hours, minutes)

    if minutes >= 2:
        minutes += (seconds + 30) // 60
        return localizer.get_string(StringKey.DURATION_MINUTES, minutes)

    if minutes > 0:
        if seconds == 1:
            return localizer.get_string(StringKey.DURATION_MINUTE_SECOND, minutes, seconds)

        return localizer.get_string(StringKey.DURATION_MINUTE_SECONDS, minutes, seconds)

    if seconds == 1:
        return localizer.get_string(StringKey.DURATION_SECOND, seconds)

    return localizer.get_string(StringKey.DURATION_SECONDS, seconds)
