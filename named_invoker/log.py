"""Output logging."""
# pylint: disable=global-statement
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any

import attr
import attrs
import typeguard
from rich.logging import RichHandler
from rich.traceback import install

from . import constants

SUPRESS_TRACEBACK_MODULES = [typeguard, attr, attrs]


class InjectingFilter(logging.Filter):
    """
    A filter which injects context-specific information into logs
    """

    def filter(self, record):
        for k in ENV_CTX_VARS:
            setattr(record, k, CTX_VARS[k])
        return True


def update_traceback():
    install(show_locals=False, suppress=SUPRESS_TRACEBACK_MODULES)


def add_supress_traceback_module(module):
    SUPRESS_TRACEBACK_MODULES.append(module)
    update_traceback()


update_traceback()


def get_time_str(log_time):
    return log_time.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


SAVED_LEVEL = constants.DEFAULT_LOG_LEVEL


def configure_logger(level=None, third_party_level="ERROR"):
    """
    Configures the logging system with customizable settings.

    :param level: The logging level to set for the ``named_invoker`` logger. If None,
        uses the previously saved logging level. If an integer is provided, it is
        interpreted as a verbosity count (0 -> INFO, 1 -> DEBUG). If a string is
        provided, it should be one of the logging level names (e.g., 'DEBUG', 'INFO',
        'WARNING', 'ERROR', 'CRITICAL'). The saved level is read from the
        ``NAMED_INVOKER_LOG_LEVEL`` environment variable and defaults to 'ERROR'.
    :param third_party_level: The logging level to set for third-party libraries.

    .. note::
        - Under Kubernetes a plain stream handler is used, otherwise a rich handler.

    :returns: None
    """

    for _ in ("typeguard", "asyncio"):
        logging.getLogger(_).setLevel(third_party_level)

    global SAVED_LEVEL
    if level is None:
        level = SAVED_LEVEL
    else:
        if isinstance(level, int):
            level = max(0, 20 - 10 * level)
        SAVED_LEVEL = level

    stream_handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(name)s %(pathname)s:%(lineno)d: %(message)s")
    stream_handler.setFormatter(formatter)

    rich_handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        show_time=True,
        enable_link_path=False,
        log_time_format=get_time_str,
        tracebacks_word_wrap=False,
    )
    rich_handler.addFilter(InjectingFilter())
    try:
        _ = os.environ["KUBERNETES_SERVICE_HOST"]
        handlers = [stream_handler]
    except KeyError:
        handlers = [rich_handler]  # type: ignore
    logging.basicConfig(
        level=level, format="%(name)s %(pathname)20s:%(lineno)4d \n%(message)s", handlers=handlers
    )
    logging.getLogger("named_invoker").setLevel(level)


def get_logger(name):
    """
    Get a logger with the specified name, creating it if necessary.

    :param name: An identifying name (channel) for the logger to get. Package code
        uses "named_invoker".

    :returns: Logger instance
    """

    configure_logger()
    return logging.getLogger(name)


def set_verbosity(verbosity_level):
    """
    Set the log level of the ``named_invoker`` logger, as well as the default
    verbosity for any subsequently-created loggers.

    :param verbosity_level: The logging level to set, either a level number or
        a level name.
    """
    global SAVED_LEVEL
    SAVED_LEVEL = verbosity_level
    logging.getLogger("named_invoker").setLevel(verbosity_level)


ENV_CTX_VARS = constants.ENV_CTX_VARS
CTX_VARS: dict[str, Any] = {k: None for k in ENV_CTX_VARS}


def set_logging_tag(name, value):
    CTX_VARS[name] = value


@contextmanager
def logging_tag_ctx(key, value):
    if key in CTX_VARS:
        old_value = CTX_VARS[key]
    else:
        old_value = None

    set_logging_tag(key, value)
    try:
        yield
    finally:
        set_logging_tag(key, old_value)


def _init_ctx_vars():
    for k in CTX_VARS:
        k_env = k.upper()
        if k_env in os.environ:
            set_logging_tag(k, os.environ[k_env])


_init_ctx_vars()
configure_logger()
