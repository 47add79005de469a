''' Module loggers with a configurable level, output and formatter.
'''
import logging
import platform
import sys
from typing import Any, List, Optional

from formkit.conf import ModuleConfig, default_config, getConfig


class NoConfigValue(Exception):
    pass


def getLoggerHandler(logspec: Optional[str] = None):
    if logspec is None or logspec == "stderr":
        return logging.StreamHandler(sys.stderr)

    if logspec == "stdout":
        return logging.StreamHandler(sys.stdout)

    if logspec.startswith("file://"):
        return logging.FileHandler(logspec[7:])

    raise ValueError("Cannot parse logging spec: %s" % logspec)


def __closure__():  # noqa: C901
    FORMKIT_LOGGERS = dict()

    def setupLogger(module_name: Optional[str], log_config: ModuleConfig):
        ''' Setup the logging handlers, level and formatters.
        '''
        module_logger = logging.getLogger(module_name)

        if log_config is None:
            return module_logger

        def get_config_value(name):
            value = log_config.get(name)
            if isinstance(value, str):
                return value

            raise NoConfigValue("Invalid log config value: {} = {}".format(name, value))

        log_level = logging.NOTSET
        try:
            log_level = getattr(logging, get_config_value("LOG_LEVEL").upper())
        except (NoConfigValue, AttributeError):
            pass

        module_logger.setLevel(log_level)

        log_handlers: List[Any] = []
        try:
            log_output = get_config_value("LOG_OUTPUT")
        except NoConfigValue:
            log_output = None

        if log_output:
            log_handlers.append(getLoggerHandler(log_output))

        try:
            log_formatter = get_config_value("LOG_FORMATTER")
            log_datefmt = get_config_value("LOG_DATEFMT")
        except NoConfigValue:
            pass
        else:
            hostname = platform.node().split(".")[0]
            formatter = log_formatter.format(hostname=hostname)

            for handler in log_handlers:
                handler.setFormatter(logging.Formatter(formatter, log_datefmt))

            if log_config.get("LOG_COLORED"):
                import coloredlogs
                coloredlogs.install(
                    fmt=formatter,
                    level=log_level,
                    logger=module_logger
                )

        # Root logger gets the handlers through basicConfig
        if module_name is None:
            logging.basicConfig(handlers=log_handlers or None)
        else:
            for handler in log_handlers:
                module_logger.addHandler(handler)

        FORMKIT_LOGGERS[module_name] = module_logger
        return module_logger

    def getLogger(module_name, log_config=None):
        if module_name in FORMKIT_LOGGERS:
            return FORMKIT_LOGGERS[module_name]

        log_config = log_config or getConfig(module_name)
        return setupLogger(module_name, log_config)

    return getLogger, setupLogger(None, default_config)


getLogger, default_logger = __closure__()
