"""
Template Registry

Maps element types to compiled jinja2 templates. Templates are compiled once
when registered; lookups read an immutable map that is swapped as a whole on
each registration, so any number of concurrent renders can read it without
locking.

Usage:
    registry = create_registry()                     # built-ins only
    registry = create_registry({"note": "<p>{{ value }}</p>"})
    registry.lookup("hr").render()
"""
import os
import threading
from typing import Mapping, Optional

import jinja2
from pyrsistent import pmap

from . import config, logger
from .exceptions import TemplateCompileError
from .helpers import HELPERS
from .templates import BUILTIN_TEMPLATES


class TemplateRegistry(object):
    def __init__(self, **options):
        self._env = self.create_environment(**options)
        # type name => (compiled template, source)
        self._entries = pmap()
        self._lock = threading.Lock()

    @staticmethod
    def create_environment(autoescape=None, strict_undefined=None, trim_blocks=None, lstrip_blocks=None):
        def select(value, default):
            return default if value is None else value

        env = jinja2.Environment(
            autoescape=select(autoescape, config.AUTOESCAPE),
            undefined=(
                jinja2.StrictUndefined
                if select(strict_undefined, config.STRICT_UNDEFINED)
                else jinja2.Undefined
            ),
            trim_blocks=select(trim_blocks, config.TRIM_BLOCKS),
            lstrip_blocks=select(lstrip_blocks, config.LSTRIP_BLOCKS),
        )
        env.globals.update(HELPERS)
        return env

    @property
    def environment(self):
        return self._env

    def register(self, type_name: str, source: str) -> None:
        try:
            template = self._env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateCompileError(
                "R00.501",
                f"Unable to compile template [{type_name}]",
                {"type": type_name, "cause": e.message, "lineno": e.lineno}
            ) from e

        with self._lock:
            self._entries = self._entries.set(type_name, (template, source))

        logger.debug('Registered template [%s] (%d chars)', type_name, len(source))

    def register_many(self, templates: Mapping[str, str]) -> None:
        for type_name, source in templates.items():
            self.register(type_name, source)

    def load_directory(self, path, suffix: Optional[str] = None) -> None:
        ''' Register every `<type><suffix>` file at the top level of `path`. '''
        suffix = suffix or config.TEMPLATE_SUFFIX
        if not os.path.isdir(path):
            raise TemplateCompileError(
                "R00.501",
                f"Template directory not found: {path}",
                {"path": str(path)}
            )

        loader = jinja2.FileSystemLoader(searchpath=str(path))
        names = [
            name for name in loader.list_templates()
            if name.endswith(suffix) and "/" not in name
        ]

        for name in names:
            type_name = name[:-len(suffix)]
            try:
                source, _, _ = loader.get_source(self._env, name)
            except (OSError, UnicodeDecodeError, jinja2.TemplateNotFound) as e:
                raise TemplateCompileError(
                    "R00.501",
                    f"Unable to read template [{type_name}]",
                    {"type": type_name, "path": os.path.join(str(path), name), "cause": str(e)}
                ) from e

            self.register(type_name, source)

    def lookup(self, type_name: str) -> Optional[jinja2.Template]:
        entry = self._entries.get(type_name)
        return entry and entry[0]

    def source(self, type_name: str) -> Optional[str]:
        entry = self._entries.get(type_name)
        return entry and entry[1]

    def keys(self):
        return tuple(self._entries.keys())

    def __contains__(self, type_name):
        return type_name in self._entries

    def __len__(self):
        return len(self._entries)


def create_registry(templates: Optional[Mapping[str, str]] = None, template_dir=None, **options) -> TemplateRegistry:
    """
    Build a ready registry: the built-in element templates, then `templates`,
    then every template file of `template_dir` (defaults to config.TEMPLATE_DIR).

    Raises TemplateCompileError (R00.501) on the first template that cannot be
    read or compiled, or when `template_dir` is not a directory. Whether that
    stops the application is up to the caller.
    """
    registry = TemplateRegistry(**options)
    registry.register_many(BUILTIN_TEMPLATES)

    if templates:
        registry.register_many(templates)

    template_dir = template_dir or config.TEMPLATE_DIR
    if template_dir:
        registry.load_directory(template_dir)

    logger.info('Template registry ready: %s', ', '.join(sorted(registry.keys())))
    return registry
