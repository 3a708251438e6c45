from abc import ABC, abstractmethod

from core.port.localizer import Localizer


class LocalizerCatalog(ABC):
    @property
    @abstractmethod
    def default_locale(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get(self, locale: str) -> Localizer:
        raise NotImplementedError

    @abstractmethod
    def supported_locales(self) -> list[str]:
        raise NotImplementedError
