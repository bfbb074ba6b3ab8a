"""
Validadores Django para campos de CNPJ.

Convertem os erros do módulo cnpj.utils.cnpj em ValidationError,
para uso em models.CharField, forms e serializers.
"""

import logging
from typing import List

from django.core.exceptions import ValidationError

from cnpj import conf
from cnpj.utils.cnpj import CNPJValidationError, calculate_check_digits, validate_cnpj_with_details

logger = logging.getLogger(__name__)


def _raise(messages: List[str]) -> None:
    if not conf.detailed_errors():
        messages = [conf.invalid_message()]
    raise ValidationError(messages, code='invalid_cnpj')


def validate_cnpj_field(cnpj: str) -> None:
    """
    Validador customizado para o campo CNPJ completo (com DV).

    Args:
        cnpj: CNPJ para validação

    Raises:
        ValidationError: Se o CNPJ for inválido
    """
    result = validate_cnpj_with_details(cnpj)
    if not result.is_valid:
        logger.debug(f'CNPJ inválido no campo: {cnpj!r} -> {result.errors}')
        _raise(result.errors)


def validate_cnpj_base_field(base: str) -> None:
    """
    Validador para a base do CNPJ (12 caracteres, sem DV).

    Raises:
        ValidationError: Se não for possível calcular o DV da base
    """
    try:
        calculate_check_digits(base)
    except CNPJValidationError as e:
        _raise([e.message])
