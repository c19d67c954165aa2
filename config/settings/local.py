# ruff: noqa: E501
from .base import *  # noqa: F403
from .base import LOGGING
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="ippweek-local-secret-key-change-me",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]  # noqa: S104

# LOGGING
# ------------------------------------------------------------------------------
# "REST request to ..." lines are logged at debug level
LOGGING["loggers"] = {
    "ippweek": {"level": env("IPPWEEK_LOG_LEVEL", default="DEBUG")},
}

# Your stuff...
# ------------------------------------------------------------------------------
