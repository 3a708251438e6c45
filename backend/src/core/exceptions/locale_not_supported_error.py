class LocaleNotSupportedError(Exception):
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not supported")
