"""
Módulo de validação, cálculo de DV e formatação de CNPJ.

Suporta o CNPJ alfanumérico da Receita Federal do Brasil: 12 caracteres
de base (letras maiúsculas ou dígitos) seguidos de 2 dígitos verificadores
sempre numéricos.

Três formas de uso:
- validate_cnpj: predicado booleano, nunca levanta exceção
- validate_cnpj_with_details: retorna ValidationResult com a lista de erros
- calculate_check_digits / calcula_dv: levantam CNPJValidationError
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from django.db import models

logger = logging.getLogger(__name__)


BASE_LENGTH = 12
TOTAL_LENGTH = 14
ASCII_ZERO = ord('0')
ZERO_CNPJ = '0' * TOTAL_LENGTH
CHECK_DIGIT_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

BASE_PATTERN = re.compile(r'[A-Z0-9]{12}')
COMPLETE_PATTERN = re.compile(r'[A-Z0-9]{12}[0-9]{2}')
FORMATTING_CHARACTERS = re.compile(r'[./-]')
INVALID_CHARACTERS = re.compile(r'[^A-Z0-9./-]')
HAS_LOWERCASE = re.compile(r'[a-z]')

INVALID_FOR_CALCULATION = 'Não é possível calcular o DV pois o CNPJ fornecido é inválido'
INVALID_LENGTH_FOR_FORMAT = 'CNPJ deve ter exatamente 14 caracteres para formatação'


class CNPJErrorCode(models.TextChoices):
    """Códigos de erro e respectivas mensagens."""
    EMPTY_INPUT = 'EMPTY_INPUT', 'CNPJ não pode estar vazio'
    INVALID_CHARS = 'INVALID_CHARS', 'CNPJ contém caracteres inválidos'
    INVALID_FORMAT = 'INVALID_FORMAT', INVALID_FOR_CALCULATION
    ZERO_CNPJ = 'ZERO_CNPJ', 'CNPJ não pode ser composto apenas por zeros'
    INVALID_LENGTH = 'INVALID_LENGTH', 'CNPJ deve ter 12 dígitos (sem DV) ou 14 dígitos (com DV)'
    INVALID_CHECK_DIGITS = 'INVALID_CHECK_DIGITS', 'Dígitos verificadores inválidos'


class CNPJValidationError(ValueError):
    """
    Erro de validação de CNPJ.

    Attributes:
        message: Mensagem legível (em português)
        code: Código do erro (valor de CNPJErrorCode)
    """

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    @classmethod
    def from_code(cls, code: CNPJErrorCode) -> 'CNPJValidationError':
        return cls(code.label, code.value)


@dataclass(frozen=True)
class ValidationResult:
    """Resultado detalhado da validação. errors é None quando válido."""
    is_valid: bool
    errors: Optional[List[str]] = None


@dataclass(frozen=True)
class CNPJCalculationResult:
    """Resultado do cálculo de DV sem exceção."""
    check_digits: str
    is_valid: bool


def clean_cnpj(cnpj: str) -> str:
    """
    Remove a formatação (., / e -) e converte para maiúsculas.

    Args:
        cnpj: String contendo CNPJ com ou sem formatação

    Returns:
        CNPJ normalizado
    """
    return FORMATTING_CHARACTERS.sub('', cnpj or '').upper()


def has_invalid_characters(cnpj: str) -> bool:
    """
    Verifica o CNPJ bruto (antes da normalização).

    Letras minúsculas são rejeitadas, não convertidas.
    """
    cnpj = cnpj or ''
    return bool(INVALID_CHARACTERS.search(cnpj) or HAS_LOWERCASE.search(cnpj))


def _is_blank(cnpj: Optional[str]) -> bool:
    return not cnpj or not cnpj.strip()


def _check_base(cnpj: Optional[str]) -> Optional[CNPJErrorCode]:
    """
    Executa as verificações da base em ordem; a primeira falha vence.

    Returns:
        Código do erro encontrado ou None se a base for válida
    """
    if _is_blank(cnpj):
        return CNPJErrorCode.EMPTY_INPUT

    if has_invalid_characters(cnpj):
        return CNPJErrorCode.INVALID_CHARS

    cleaned = clean_cnpj(cnpj)

    if not BASE_PATTERN.fullmatch(cleaned):
        return CNPJErrorCode.INVALID_FORMAT

    if cleaned == ZERO_CNPJ[:BASE_LENGTH]:
        return CNPJErrorCode.ZERO_CNPJ

    return None


def _single_check_digit(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _compute_check_digits(base: str) -> str:
    """
    Calcula os DVs de uma base já normalizada (12 caracteres).

    O valor de cada caractere é o deslocamento em relação a '0' na tabela
    ASCII, de modo que letras contribuem com valores acima de 9.
    """
    first_sum = 0
    second_sum = 0

    for i, char in enumerate(base):
        value = ord(char) - ASCII_ZERO
        first_sum += value * CHECK_DIGIT_WEIGHTS[i + 1]
        second_sum += value * CHECK_DIGIT_WEIGHTS[i]

    first_digit = _single_check_digit(first_sum)
    second_sum += first_digit * CHECK_DIGIT_WEIGHTS[BASE_LENGTH]
    second_digit = _single_check_digit(second_sum)

    return f'{first_digit}{second_digit}'


def calculate_check_digits(cnpj: str) -> str:
    """
    Calcula os dígitos verificadores de uma base de CNPJ.

    Args:
        cnpj: Base de 12 caracteres, com ou sem formatação

    Returns:
        String com os 2 dígitos verificadores

    Raises:
        CNPJValidationError: Com o código do primeiro erro encontrado
    """
    error_code = _check_base(cnpj)
    if error_code is not None:
        logger.debug(f'Base de CNPJ rejeitada ({error_code.value}): {cnpj!r}')
        raise CNPJValidationError.from_code(error_code)

    return _compute_check_digits(clean_cnpj(cnpj))


def calcula_dv(cnpj: str) -> str:
    """
    Variante compatível do cálculo de DV.

    Qualquer falha resulta na mesma mensagem fixa, da qual consumidores
    existentes dependem.

    Raises:
        CNPJValidationError: Com a mensagem INVALID_FOR_CALCULATION
    """
    try:
        return calculate_check_digits(cnpj)
    except CNPJValidationError as e:
        raise CNPJValidationError(INVALID_FOR_CALCULATION, e.code) from e


def calculate(cnpj: str) -> CNPJCalculationResult:
    """Calcula o DV sem levantar exceção."""
    try:
        return CNPJCalculationResult(check_digits=calculate_check_digits(cnpj), is_valid=True)
    except CNPJValidationError:
        return CNPJCalculationResult(check_digits='', is_valid=False)


def validate_cnpj_with_details(cnpj: str) -> ValidationResult:
    """
    Valida um CNPJ completo e retorna os erros encontrados.

    Verifica, nesta ordem:
    - CNPJ vazio
    - Caracteres não permitidos ou letras minúsculas
    - Formato (12 alfanuméricos + 2 dígitos)
    - CNPJ zerado
    - Dígitos verificadores

    Args:
        cnpj: CNPJ para validação (com ou sem formatação)

    Returns:
        ValidationResult com is_valid e, se inválido, a lista de erros
    """
    if _is_blank(cnpj):
        return ValidationResult(False, [CNPJErrorCode.EMPTY_INPUT.label])

    if has_invalid_characters(cnpj):
        return ValidationResult(False, [CNPJErrorCode.INVALID_CHARS.label])

    cleaned = clean_cnpj(cnpj)

    if not COMPLETE_PATTERN.fullmatch(cleaned):
        return ValidationResult(False, [CNPJErrorCode.INVALID_LENGTH.label])

    if cleaned == ZERO_CNPJ:
        return ValidationResult(False, [CNPJErrorCode.ZERO_CNPJ.label])

    base, provided = cleaned[:BASE_LENGTH], cleaned[BASE_LENGTH:]

    try:
        expected = calculate_check_digits(base)
    except CNPJValidationError as e:
        # Base 000000000000 com DV diferente de 00
        return ValidationResult(False, [e.message])

    if provided != expected:
        logger.debug(f'DV divergente para {cleaned}: informado {provided}, esperado {expected}')
        return ValidationResult(False, [CNPJErrorCode.INVALID_CHECK_DIGITS.label])

    return ValidationResult(True)


def validate_cnpj(cnpj: str) -> bool:
    """
    Valida CNPJ alfanumérico.

    Args:
        cnpj: CNPJ para validação (com ou sem formatação)

    Returns:
        True se o CNPJ for válido, False caso contrário
    """
    try:
        return validate_cnpj_with_details(cnpj).is_valid
    except Exception:
        logger.exception(f'Erro inesperado ao validar CNPJ: {cnpj!r}')
        return False


def format_cnpj(cnpj: str) -> str:
    """
    Formata CNPJ no padrão XX.XXX.XXX/XXXX-XX.

    Não valida os dígitos verificadores, apenas o tamanho.

    Args:
        cnpj: CNPJ com ou sem formatação

    Returns:
        CNPJ formatado

    Raises:
        CNPJValidationError: Se, sem formatação, não tiver 14 caracteres
    """
    cnpj = FORMATTING_CHARACTERS.sub('', cnpj or '')
    if len(cnpj) != TOTAL_LENGTH:
        raise CNPJValidationError(INVALID_LENGTH_FOR_FORMAT, CNPJErrorCode.INVALID_LENGTH.value)
    return f'{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:14]}'


def get_cnpj_root(cnpj: str) -> str:
    """
    Retorna a raiz do CNPJ (8 primeiros caracteres).

    A raiz identifica a empresa independentemente do estabelecimento.
    """
    cnpj = clean_cnpj(cnpj)
    return cnpj[:8]


def get_cnpj_branch(cnpj: str) -> str:
    """
    Retorna a ordem do estabelecimento (caracteres 9 a 12).

    0001 = matriz, demais = filiais. String vazia se o CNPJ for curto demais.
    """
    cnpj = clean_cnpj(cnpj)
    if len(cnpj) < BASE_LENGTH:
        return ''
    return cnpj[8:BASE_LENGTH]


def is_headquarters(cnpj: str) -> bool:
    return get_cnpj_branch(cnpj) == '0001'
