from django import template

from apps.common.money import format_money

register = template.Library()


@register.filter(name="money")
def money(value):
    """Render an amount as ``$1234.50``."""
    return format_money(value)
