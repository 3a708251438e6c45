from typing import Optional

import structlog

from core.domain.formatted_value import FormattedValue
from core.port.localizer_catalog import LocalizerCatalog
from infra.utils.formatters import format_short_elapsed_time

logger = structlog.stdlib.get_logger(__name__)


class FormatElapsedTimeUseCase:
    def __init__(self, localizer_catalog: LocalizerCatalog) -> None:
        self.localizer_catalog = localizer_catalog

    def execute(self, millis: int, locale: Optional[str] = None) -> FormattedValue:
        localizer = self.localizer_catalog.get(locale or self.localizer_catalog.default_locale)
        formatted = format_short_elapsed_time(localizer, millis)

        logger.debug("Formatted elapsed time", millis=millis, locale=localizer.locale)

        return FormattedValue(value=formatted, locale=localizer.locale)
