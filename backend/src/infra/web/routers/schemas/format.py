from typing import Optional

from infra.web.routers.schemas import CamelModel


class FormattedValueDTO(CamelModel):
    value: str
    locale: Optional[str] = None


class LocalesResponseDTO(CamelModel):
    default_locale: str
    supported_locales: list[str]
