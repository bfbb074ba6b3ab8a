"""
Configurações do app de CNPJ.

Lidas do settings do Django com valores padrão:
- CNPJ_STORE_FORMATTED: CNPJField armazena o CNPJ com máscara
- CNPJ_DETAILED_ERRORS: validadores retornam as mensagens detalhadas
- CNPJ_INVALID_MESSAGE: mensagem genérica usada quando os detalhes estão desligados
"""

from django.conf import settings

DEFAULT_INVALID_MESSAGE = 'CNPJ inválido. Verifique o número informado.'


def store_formatted() -> bool:
    return getattr(settings, 'CNPJ_STORE_FORMATTED', False)


def detailed_errors() -> bool:
    return getattr(settings, 'CNPJ_DETAILED_ERRORS', True)


def invalid_message() -> str:
    return getattr(settings, 'CNPJ_INVALID_MESSAGE', DEFAULT_INVALID_MESSAGE)
