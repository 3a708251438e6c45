from abc import ABC, abstractmethod

from core.domain.string_key import StringKey


class Localizer(ABC):
    @property
    @abstractmethod
    def locale(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_string(self, key: StringKey, *args: object) -> str:
        """Resolve the template for ``key`` and fill its positional fields with ``args``."""
        raise NotImplementedError
