from typing import Optional

import structlog

from core.domain.formatted_value import FormattedValue
from core.port.localizer_catalog import LocalizerCatalog
from infra.utils.formatters import format_file_size, format_short_file_size

logger = structlog.stdlib.get_logger(__name__)


class FormatFileSizeUseCase:
    def __init__(self, localizer_catalog: LocalizerCatalog) -> None:
        self.localizer_catalog = localizer_catalog

    def execute(self, number: int, locale: Optional[str] = None, shorter: bool = False) -> FormattedValue:
        localizer = self.localizer_catalog.get(locale or self.localizer_catalog.default_locale)

        if shorter:
            formatted = format_short_file_size(localizer, number)
        else:
            formatted = format_file_size(localizer, number)

        logger.debug("Formatted file size", number=number, shorter=shorter, locale=localizer.locale)

        return FormattedValue(value=formatted, locale=localizer.locale)
