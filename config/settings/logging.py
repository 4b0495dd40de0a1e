import logging.config

import structlog

from src.core.error_codes import ErrorCode


def error_code_mapper(logger, name, event_dict):
    """
    Render ErrorCode members as their plain value so logfmt lines stay greppable.
    """
    code = event_dict.get("code")
    if isinstance(code, ErrorCode):
        event_dict["code"] = code.value
    return event_dict


timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
pre_chain = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    timestamper,
    error_code_mapper,
]


def build_logging_config(level: str = "INFO") -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "root": {"level": level, "handlers": ["default"]},
        "loggers": {
            "src": {
                "level": level,
                "handlers": ["default"],
                "propagate": False,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "logfmt_formatter",
            },
        },
        "formatters": {
            "logfmt_formatter": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.processors.LogfmtRenderer(),
                "foreign_pre_chain": pre_chain,
            }
        },
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(build_logging_config(level.upper()))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
