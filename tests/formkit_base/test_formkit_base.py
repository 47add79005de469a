from types import SimpleNamespace

import pytest


def test_setup_module():
    from formkit import setupModule

    defaults = SimpleNamespace(TEST_CONFIG_KEY='sample-value', lower_case_key='skipped')
    config, logger = setupModule('test_setupModule', defaults)

    assert config.TEST_CONFIG_KEY == 'sample-value'
    assert config.get('lower_case_key') is None
    assert config.LOG_LEVEL == 'info'
    assert logger.name == 'test_setupModule'


def test_setup_module_strips_config_suffix():
    from formkit import setupModule

    config, logger = setupModule('test_suffix._meta', SimpleNamespace(SUFFIX_KEY=1))
    assert config.__name__ == 'test_suffix'
    assert logger.name == 'test_suffix'


def test_module_config_is_cached():
    from formkit.conf import getConfig

    first = getConfig('test_cached', SimpleNamespace(CACHED_KEY=True))
    second = getConfig('test_cached')
    assert first is second
    assert second.CACHED_KEY is True


def test_missing_config_value():
    from formkit.conf import getConfig

    config = getConfig('test_missing', SimpleNamespace())
    with pytest.raises(AttributeError):
        config.NOT_DEFINED_ANYWHERE


def test_render_module_config():
    from formkit.render import config

    assert config.AUTOESCAPE is True
    assert config.STRICT_UNDEFINED is True
    assert config.TEMPLATE_DIR is None
    assert config.TEMPLATE_SUFFIX == ".html.j2"


def test_logger_handler_specs(tmp_path):
    import logging
    from formkit.logs import getLoggerHandler

    assert isinstance(getLoggerHandler(None), logging.StreamHandler)
    assert isinstance(getLoggerHandler("stdout"), logging.StreamHandler)

    handler = getLoggerHandler(f"file://{tmp_path / 'formkit.log'}")
    assert isinstance(handler, logging.FileHandler)
    handler.close()

    with pytest.raises(ValueError):
        getLoggerHandler("carrier-pigeon://coop")


def test_exception_content():
    from formkit.error import NotFoundError

    error = NotFoundError("R00.404", "No template", {"type": "x"})
    assert error.content == {"errcode": "R00.404", "message": "No template", "details": {"type": "x"}}
    assert str(error) == "R00.404 [404] >> No template >> {'type': 'x'}"

    error = NotFoundError("R00.404", "No template")
    assert error.content == {"errcode": "R00.404", "message": "No template"}
    assert str(error) == "R00.404 [404] >> No template"


def test_colored_logger():
    import logging
    from formkit import setupModule

    _, plain = setupModule('test_plain_log', SimpleNamespace(LOG_LEVEL='debug'))
    assert plain.level == logging.DEBUG
    assert not plain.handlers

    _, colored = setupModule('test_colored_log', SimpleNamespace(LOG_COLORED=True, LOG_LEVEL='warning'))
    assert colored.level == logging.WARNING
    assert any(isinstance(handler, logging.StreamHandler) for handler in colored.handlers)


def test_file_log_output(tmp_path):
    from formkit import setupModule

    log_file = tmp_path / "render.log"
    _, logger = setupModule('test_file_log', SimpleNamespace(LOG_OUTPUT=f"file://{log_file}"))
    logger.warning("template registry ready")
    for handler in logger.handlers:
        handler.flush()
        handler.close()

    assert "template registry ready" in log_file.read_text()
