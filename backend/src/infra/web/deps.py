from core.port.localizer import Localizer
from infra.adapter.json_localizer_catalog import get_localizer_catalog


def get_default_localizer() -> Localizer:
    catalog = get_localizer_catalog()

    return catalog.get(catalog.default_locale)
