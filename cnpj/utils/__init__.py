from cnpj.utils.cnpj import (
    CNPJErrorCode, CNPJValidationError, ValidationResult, CNPJCalculationResult,
    clean_cnpj, has_invalid_characters, calculate_check_digits, calcula_dv, calculate,
    validate_cnpj, validate_cnpj_with_details, format_cnpj,
    get_cnpj_root, get_cnpj_branch, is_headquarters,
)

__all__ = [
    'CNPJErrorCode', 'CNPJValidationError', 'ValidationResult', 'CNPJCalculationResult',
    'clean_cnpj', 'has_invalid_characters', 'calculate_check_digits', 'calcula_dv', 'calculate',
    'validate_cnpj', 'validate_cnpj_with_details', 'format_cnpj',
    'get_cnpj_root', 'get_cnpj_branch', 'is_headquarters',
]
