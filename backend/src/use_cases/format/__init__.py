from use_cases.format.format_elapsed_time_use_case import FormatElapsedTimeUseCase
from use_cases.format.format_file_size_use_case import FormatFileSizeUseCase
from use_cases.format.format_ip_address_use_case import FormatIpAddressUseCase

__all__ = [
    "FormatElapsedTimeUseCase",
    "FormatFileSizeUseCase",
    "FormatIpAddressUseCase",
]
