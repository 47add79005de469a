import configparser
import json
import logging
import os
import re

from types import ModuleType
from typing import Any, Dict, Union

from . import sysdefaults


def env(name: str, defval: Any):
    ''' Read an environment variable to use as a configuration value
    '''
    return os.environ.get(name, defval)


FORMKIT_SYSTEM_DEFAULTS = env("FORMKIT_SYSTEM_DEFAULTS", "sysdefaults")
FORMKIT_CONFIG_FILES = env("FORMKIT_CONFIG_FILE", "base.ini|config.ini").split('|')
DEBUG_ALL_CONFIG_VALUE = "#ALL"


def __module_config__():  # noqa: C901
    RX_INVALID_OPTION = re.compile(r"[^A-Za-z\d_]+")

    __parser__ = configparser.ConfigParser()
    __parser__.optionxform = lambda s: RX_INVALID_OPTION.sub("_", s.strip()).upper()

    __config__: Dict[str, "ModuleConfig"] = {}

    def coerce(section, key, default):
        # NOTE: bool is a subclass of int, it must be checked first.
        if isinstance(default, bool):
            return __parser__.getboolean(section, key)
        if isinstance(default, int):
            return __parser__.getint(section, key)
        if isinstance(default, float):
            return __parser__.getfloat(section, key)
        if isinstance(default, (dict, list, tuple)):
            return json.loads(__parser__.get(section, key))
        if isinstance(default, (str, type(None))):
            return __parser__.get(section, key)

        raise ValueError(f"Not supported config value type [{type(default)}].")

    class ModuleConfig(object):
        def __init__(self, module_name: str, *defaults):
            if module_name in __config__:
                raise RuntimeError(f"Module [{module_name}] already configured.")

            if not __parser__.has_section(module_name):
                __parser__.add_section(module_name)

            self.__name__ = module_name
            values: Dict[str, Any] = {}
            sources: Dict[str, Any] = {}

            for conf in defaults + (sysdefaults,):
                if conf is None:
                    continue

                items = conf.items() if isinstance(conf, ModuleConfig) else vars(conf).items()
                for key, default in items:
                    if not key.isupper() or key in values:
                        continue

                    try:
                        values[key] = coerce(module_name, key, default)
                        sources[key] = FORMKIT_CONFIG_FILES
                    except configparser.NoOptionError:
                        values[key] = default
                        sources[key] = getattr(conf, '__name__', '<unknown-name>')

            if sysdefaults.DEBUG_MODULE_CONFIG in (DEBUG_ALL_CONFIG_VALUE, module_name):
                logging.debug("=== START MODULE CONFIG [%s] ===", module_name)
                for key, value in values.items():
                    logging.debug(" - [%s] %s ::= %s", key, value, sources[key])
                logging.debug("=/=  END MODULE CONFIG [%s]  =/=", module_name)

            self.__values__ = values

        def __getattr__(self, name):
            try:
                return self.__values__[name]
            except KeyError:
                raise AttributeError(f"Config [{self.__name__}] has no value [{name}]") from None

        def __getitem__(self, name):
            return self.__values__[name]

        def get(self, name, default=None):
            return self.__values__.get(name, default)

        def items(self):
            yield from self.__values__.items()

    def get_config(config_key: str, *defaults: Union[ModuleType, ModuleConfig]) -> ModuleConfig:
        if config_key not in __config__:
            __config__[config_key] = ModuleConfig(config_key, *defaults)

        return __config__[config_key]

    # Missing files in the list are skipped silently.
    __parser__.read(FORMKIT_CONFIG_FILES)
    default_config = get_config(FORMKIT_SYSTEM_DEFAULTS, sysdefaults)
    return ModuleConfig, get_config, default_config


ModuleConfig, getConfig, default_config = __module_config__()
