"""
Template tags para exibição de CNPJ.

Uso:
    {% load cnpj_tags %}
    {{ empresa.cnpj|cnpj_format }}
    {% if empresa.cnpj|cnpj_valido %}...{% endif %}
"""

import logging

from django import template

from cnpj.utils.cnpj import CNPJValidationError, format_cnpj, validate_cnpj

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter(name='cnpj_format')
def cnpj_format(value):
    """
    Formata um CNPJ no padrão XX.XXX.XXX/XXXX-XX.

    Exemplos:
        - 12ABC34501DE35 -> 12.ABC.345/01DE-35
        - 90021382000122 -> 90.021.382/0001-22

    Args:
        value: CNPJ com ou sem formatação

    Returns:
        CNPJ formatado, ou o valor original se não puder ser formatado
    """
    if value is None:
        return ''

    try:
        return format_cnpj(str(value))
    except CNPJValidationError as e:
        logger.warning(f'Não foi possível formatar CNPJ {value!r}: {e.message}')
        return value


@register.filter(name='cnpj_valido')
def cnpj_valido(value) -> bool:
    if value is None:
        return False
    return validate_cnpj(str(value))
