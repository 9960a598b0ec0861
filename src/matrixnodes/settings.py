import os

from dotenv import dotenv_values

from .logger import LogLevel

DEFAULTS = {
    "MATRIXNODES_LOG_LEVEL": "info",
}


def get_settings(env_file=".env"):
    """
    Defaults, overwritten by the .env file, overwritten by the environment.
    """
    return {
        **DEFAULTS,
        **{k: v for k, v in dotenv_values(env_file).items() if v is not None},
        **{k: v for k, v in os.environ.items() if k in DEFAULTS},
    }


def get_log_level(settings=None):
    if settings is None:
        settings = get_settings()
    return LogLevel.parse(settings["MATRIXNODES_LOG_LEVEL"])
