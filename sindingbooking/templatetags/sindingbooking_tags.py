from django import template

from sindingbooking.pricing import format_price

register = template.Library()


@register.filter
def nok(value):
    """Format a whole-NOK amount: {{ 12500|nok }} -> 12 500."""
    return format_price(value)
