''' Last chance lookup for configuration values.

    A variable that is missing here, in the module `defaults.py` and in the
    matching section of the configuration files raises an AttributeError on access.
'''

LOG_LEVEL = "info"
LOG_FORMATTER = (
    "[%(asctime)-8s] "
    "[%(name)16.16s - %(filename)16.16s:%(lineno)-4d]%(levelname)6s "
    "%(message)s"
)
LOG_DATEFMT = "%H:%M:%S"
LOG_OUTPUT = None
LOG_COLORED = False

# Print module configuration. Accept the name of a module. E.g. "formkit.render"
DEBUG_MODULE_CONFIG = None
