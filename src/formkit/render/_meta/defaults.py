# Escape every interpolated value as HTML.
AUTOESCAPE = True
# Raise on access to an undefined field instead of rendering it empty.
STRICT_UNDEFINED = True
TRIM_BLOCKS = True
LSTRIP_BLOCKS = True

# Optional directory of additional element templates loaded at startup.
TEMPLATE_DIR = None
TEMPLATE_SUFFIX = ".html.j2"
