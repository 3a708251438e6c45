from collections.abc import Mapping
from typing import Optional

from core.domain.string_key import StringKey
from core.exceptions.string_not_found_error import StringNotFoundError
from core.port.localizer import Localizer


class DictLocalizer(Localizer):
    def __init__(
        self,
        locale: str,
        strings: Mapping[StringKey, str],
        fallback: Optional[Localizer] = None,
    ) -> None:
        self._locale = locale
        self._strings = dict(strings)
        self._fallback = fallback

    @property
    def locale(self) -> str:
        return self._locale

    def get_string(self, key: StringKey, *args: object) -> str:
        template = self._strings.get(key)

        if template is None:
            if self._fallback is not None:
                return self._fallback.get_string(key, *args)

            raise StringNotFoundError(self._locale, key.value)

        return template.format(*args)
