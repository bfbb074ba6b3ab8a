"""
Campo de modelo para CNPJ alfanumérico.

Valida o CNPJ em full_clean() e normaliza o valor antes de salvar:
sem formatação por padrão, ou com máscara se CNPJ_STORE_FORMATTED=True.
"""

from django.db import models

from cnpj import conf
from cnpj.forms import CNPJFormField
from cnpj.utils.cnpj import clean_cnpj, format_cnpj, validate_cnpj
from cnpj.validators import validate_cnpj_field


class CNPJField(models.CharField):
    """
    CharField com validação de CNPJ.

    O valor não é normalizado em to_python(), para que letras minúsculas
    continuem sendo rejeitadas pelo validador.
    """

    description = 'CNPJ (com ou sem máscara)'
    default_validators = [validate_cnpj_field]

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('max_length', 18)
        kwargs.setdefault('verbose_name', 'CNPJ')
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if kwargs.get('max_length') == 18:
            del kwargs['max_length']
        if kwargs.get('verbose_name') == 'CNPJ':
            del kwargs['verbose_name']
        return name, path, args, kwargs

    def pre_save(self, model_instance, add):
        value = getattr(model_instance, self.attname)
        if value and validate_cnpj(value):
            value = clean_cnpj(value)
            if conf.store_formatted():
                value = format_cnpj(value)
            setattr(model_instance, self.attname, value)
        return value

    def formfield(self, **kwargs):
        return super().formfield(**{'form_class': CNPJFormField, **kwargs})
