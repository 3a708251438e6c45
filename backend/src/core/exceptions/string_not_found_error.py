class StringNotFoundError(Exception):
    def __init__(self, locale: str, key: str):
        self.locale = locale
        self.key = key
        super().__init__(f"No string '{key}' for locale '{locale}'")
