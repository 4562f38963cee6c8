# finance_tracker/utilities/config_logging.py
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
    },
    "loggers": {
        "finance_tracker": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": True,
        },
        # pandas/openpyxl chatter when reading spreadsheets
        "openpyxl": {"level": "WARNING", "propagate": True},
    },
}
