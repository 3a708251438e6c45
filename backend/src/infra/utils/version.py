from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "py-text-formatter"
DEFAULT_VERSION = "1.0.0"


def get_version(distribution_name: str = DISTRIBUTION_NAME) -> str:
    try:
        return version(distribution_name)
    except PackageNotFoundError:
        return DEFAULT_VERSION
