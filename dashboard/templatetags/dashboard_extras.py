from django import template
import json
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.safestring import mark_safe

from dashboard.analytics import insight_color

register = template.Library()

@register.filter(name='multiply')
def multiply(value, arg):
    """Multiplies the value by the argument."""
    try:
        return value * arg
    except (ValueError, TypeError):
        # Return nothing rather than break the template
        return ''

@register.filter(name='insight_class')
def insight_class(insight_type):
    return insight_color(insight_type)

@register.filter(name='jsonify')
def jsonify(data):
    """Converts a Python object into a JSON string safe for HTML."""
    payload = json.dumps(data, cls=DjangoJSONEncoder)
    return mark_safe(payload.replace('<', '\\u003c').replace('>', '\\u003e').replace('&', '\\u0026'))
