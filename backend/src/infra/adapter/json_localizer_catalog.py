import re
import threading
from functools import lru_cache
from pathlib import Path
from typing import Optional

import structlog
from pydantic import TypeAdapter

from core.domain.string_key import StringKey
from core.exceptions.locale_not_supported_error import LocaleNotSupportedError
from core.port.localizer import Localizer
from core.port.localizer_catalog import LocalizerCatalog
from infra.adapter.dict_localizer import DictLocalizer
from infra.config.config import get_config

logger = structlog.stdlib.get_logger(__name__)

BUNDLED_STRINGS_DIR = Path(__file__).resolve().parent.parent / "resources" / "strings"

_LOCALE_PATTERN = re.compile(r"^(?P<language>[A-Za-z]{2,3})(?:[_-](?P<region>[A-Za-z]{2}))?$")
_BUNDLE_ADAPTER = TypeAdapter(dict[StringKey, str])


def normalize_locale(locale: str) -> str:
    match = _LOCALE_PATTERN.match(locale.strip())

    if match is None:
        raise LocaleNotSupportedError(locale)

    language = match.group("language").lower()
    region = match.group("region")

    if region:
        return f"{language}_{region.upper()}"

    return language


class JsonLocalizerCatalog(LocalizerCatalog):
    """Serves localizers from ``<locale>.json`` bundles in a directory.

    A regional locale such as ``de_AT`` resolves to its own bundle when one
    exists and to the bare language bundle otherwise. Keys missing from a
    bundle are looked up in the default locale's bundle.
    """

    def __init__(self, strings_dir: Path, default_locale: str = "en") -> None:
        self._strings_dir = Path(strings_dir)
        self._default_locale = normalize_locale(default_locale)
        self._localizers: dict[str, Localizer] = {}
        self._lock = threading.RLock()

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def get(self, locale: str) -> Localizer:
        with self._lock:
            bundle = self._resolve_bundle(locale)

            if bundle is None:
                raise LocaleNotSupportedError(locale)

            localizer = self._localizers.get(bundle)
            if localizer is None:
                localizer = self._load(bundle)

            return localizer

    def supported_locales(self) -> list[str]:
        return sorted(path.stem for path in self._strings_dir.glob("*.json"))

    def _bundle_path(self, locale: str) -> Path:
        return self._strings_dir / f"{locale}.json"

    def _resolve_bundle(self, locale: str) -> Optional[str]:
        normalized_locale = normalize_locale(locale)
        language = normalized_locale.split("_", 1)[0]

        for candidate in dict.fromkeys([normalized_locale, language]):
            if candidate in self._localizers or self._bundle_path(candidate).is_file():
                return candidate

        return None

    def _load(self, locale: str) -> Localizer:
        strings = _BUNDLE_ADAPTER.validate_json(self._bundle_path(locale).read_bytes())

        # The default bundle is the one the default tag resolves to, e.g. "en" for "en_US".
        default_bundle = self._resolve_bundle(self._default_locale)
        if default_bundle is None:
            raise LocaleNotSupportedError(self._default_locale)

        fallback = None
        if locale != default_bundle:
            fallback = self.get(default_bundle)

        missing_keys = [key.value for key in StringKey if key not in strings]
        if missing_keys and fallback is not None:
            logger.warning(
                "String bundle is incomplete, falling back to default locale",
                locale=locale,
                default_locale=self._default_locale,
                missing_keys=missing_keys,
            )

        localizer = DictLocalizer(locale, strings, fallback=fallback)
        self._localizers[locale] = localizer

        logger.info("Loaded string bundle", locale=locale, strings=len(strings))

        return localizer


@lru_cache
def get_localizer_catalog() -> LocalizerCatalog:
    config = get_config()
    strings_dir = config.LOCALIZATION_CONFIG.STRINGS_DIR

    return JsonLocalizerCatalog(
        strings_dir=Path(strings_dir) if strings_dir else BUNDLED_STRINGS_DIR,
        default_locale=config.LOCALIZATION_CONFIG.DEFAULT_LOCALE,
    )
