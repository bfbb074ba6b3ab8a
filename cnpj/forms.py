"""
Formulários e campos de formulário para CNPJ.
"""

from django import forms

from cnpj.utils.cnpj import calculate_check_digits, clean_cnpj
from cnpj.validators import validate_cnpj_base_field, validate_cnpj_field


class CNPJFormField(forms.CharField):
    """
    Campo de formulário para CNPJ completo.

    Aceita o CNPJ com ou sem máscara e devolve, em cleaned_data,
    o CNPJ sem formatação (14 caracteres). Espaços não são removidos:
    o valor bruto é validado como digitado.
    """

    default_validators = [validate_cnpj_field]

    def __init__(self, **kwargs):
        kwargs.setdefault('max_length', 18)
        kwargs.setdefault('strip', False)
        kwargs.setdefault('widget', forms.TextInput(attrs={'placeholder': '00.000.000/0000-00'}))
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        if value in self.empty_values:
            return value
        return clean_cnpj(value)


class CNPJForm(forms.Form):
    """Formulário simples de validação de CNPJ."""

    cnpj = CNPJFormField(label='CNPJ')


class CalculoDVForm(forms.Form):
    """
    Formulário para cálculo dos dígitos verificadores.

    Recebe a base do CNPJ (12 caracteres, com ou sem máscara) e monta
    o CNPJ completo a partir do DV calculado.
    """

    base = forms.CharField(
        label='Base do CNPJ',
        max_length=15,
        strip=False,
        validators=[validate_cnpj_base_field],
        widget=forms.TextInput(attrs={'placeholder': '00.000.000/0000'}),
    )

    def clean_base(self):
        """
        Remove a formatação da base já validada.
        """
        return clean_cnpj(self.cleaned_data['base'])

    def cnpj_completo(self) -> str:
        """
        Retorna a base seguida do DV calculado.

        Deve ser chamado apenas após is_valid().
        """
        base = self.cleaned_data['base']
        return base + calculate_check_digits(base)
