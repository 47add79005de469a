"""
Pure predicates installed as globals in every template environment.

Templates gate optional fragments with them, e.g. the help text block of a
select element is emitted only when ``not is_blank(help_text)``.
"""
from pyrsistent import pmap


def is_blank(value):
    """ True when the text has zero length. Whitespace is not trimmed. """
    if value is None:
        return True

    return len(value) == 0


HELPERS = pmap({
    "is_blank": is_blank,
})
