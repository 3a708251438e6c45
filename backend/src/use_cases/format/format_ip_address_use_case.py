import structlog

from core.domain.formatted_value import FormattedValue
from core.domain.packed_ipv4 import to_ipv4_address

logger = structlog.stdlib.get_logger(__name__)


class FormatIpAddressUseCase:
    def execute(self, ipv4_address: int) -> FormattedValue:
        formatted = str(to_ipv4_address(ipv4_address))

        logger.debug("Formatted IPv4 address", packed=ipv4_address, address=formatted)

        return FormattedValue(value=formatted)
