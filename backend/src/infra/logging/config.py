import logging
import sys
from typing import Callable, Literal

import structlog
from structlog.types import EventDict, Processor

OFF_LOG_LEVEL = logging.CRITICAL + 1

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")
UVICORN_ACCESS_LOGGER = "uvicorn.access"


def add_service_context(service_name: str, environment: str) -> Callable:
    def processor(_, __, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)

        return event_dict

    return processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    event_dict.pop("color_message", None)
    return event_dict


def build_shared_processors(service_name: str, environment: str, json_logs: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_service_context(service_name, environment),
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)

    return processors


def normalize_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    level_name = level.strip().upper()

    if level_name == "OFF":
        return OFF_LOG_LEVEL

    known_levels = logging.getLevelNamesMapping()

    if level_name not in known_levels:
        raise ValueError(
            f"Invalid log level '{level}'. Use DEBUG, INFO, WARNING, ERROR, CRITICAL, OFF or an integer."
        )

    return known_levels[level_name]


def apply_library_log_levels(library_log_levels: dict[str, str | int]) -> None:
    for logger_name, configured_level in library_log_levels.items():
        if not logger_name.strip():
            raise ValueError("Logger name in library_log_levels cannot be empty.")

        library_logger = logging.getLogger(logger_name)
        level = normalize_log_level(configured_level)
        library_logger.setLevel(level)

        silenced = level == OFF_LOG_LEVEL
        library_logger.disabled = silenced
        library_logger.propagate = not silenced

        if silenced:
            library_logger.handlers.clear()


def _route_uvicorn_loggers() -> None:
    for logger_name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    access_logger = logging.getLogger(UVICORN_ACCESS_LOGGER)
    access_logger.handlers.clear()
    access_logger.propagate = False


def _install_excepthook(root_logger: logging.Logger) -> None:
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        root_logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


def configure_logging(
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    service_name: str,
    environment: Literal["loc", "dev", "pre", "pro"],
    json_logs: bool,
    library_log_levels: dict[str, str | int] | None = None,
) -> None:
    shared_processors = build_shared_processors(service_name, environment, json_logs)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    _route_uvicorn_loggers()

    # Overrides go last so they can re-enable uvicorn.access.
    if library_log_levels:
        apply_library_log_levels(library_log_levels)

    _install_excepthook(root_logger)
