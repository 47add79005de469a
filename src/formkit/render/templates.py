"""
Built-in Bootstrap templates, keyed by element type.

Every template is bound to `Element.snapshot()` plus the helpers of
`formkit.render.helpers`. The help text block of `select_element` is emitted
only when the help text is not blank.
"""
from pyrsistent import pmap


ALERT_MESSAGES = """\
<div class="alert {{ alert_class }}" role="alert">
{% for message in alert_messages %}
    {{ message }}
{% endfor %}
</div>
"""

SELECT_ELEMENT = """\
<div class="mb-3">
    <label for="{{ id }}">{{ label }}</label>
    <select name="{{ name }}" id="{{ id }}" class="form-select"
        {%- if is_multi_select %} multiple{% endif %}
        {%- if is_required %} required{% endif %}>
        <option value="not_selected" selected>-- Select --</option>
{% for option in select_options %}
        <option value="{{ option.value }}">{{ option.display }}</option>
{% endfor %}
    </select>
{% if not is_blank(help_text) %}
    <small class="form-text text-muted">{{ help_text }}</small>
{% endif %}
</div>
"""

TEXTAREA = """\
<div class="mb-3">
    <label for="{{ id }}">{{ label }}</label>
    <textarea class="form-control" id="{{ id }}" rows="4" readonly>{{ value }}</textarea>
</div>
"""

PDF_FILE = """\
<div class="mb-3">
    <div id="{{ id }}_pdf"></div>
</div>
"""

HR = "<hr>"


BUILTIN_TEMPLATES = pmap({
    "alert_messages": ALERT_MESSAGES,
    "select_element": SELECT_ELEMENT,
    "textarea": TEXTAREA,
    "pdf_file": PDF_FILE,
    "hr": HR,
})
