from io import StringIO
from types import SimpleNamespace

import pytest
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.template import Context, Template

from cnpj.fields import CNPJField
from cnpj.forms import CalculoDVForm, CNPJForm, CNPJFormField
from cnpj.templatetags.cnpj_tags import cnpj_format, cnpj_valido
from cnpj.validators import validate_cnpj_base_field, validate_cnpj_field


def _field():
    field = CNPJField()
    field.set_attributes_from_name('cnpj')
    return field


def test_validate_cnpj_field_accepts_valid():
    validate_cnpj_field('12.ABC.345/01DE-35')


def test_validate_cnpj_field_detailed_message():
    with pytest.raises(ValidationError) as exc:
        validate_cnpj_field('00000000000192')
    assert exc.value.messages == ['Dígitos verificadores inválidos']


def test_validate_cnpj_field_generic_message(settings):
    settings.CNPJ_DETAILED_ERRORS = False
    with pytest.raises(ValidationError) as exc:
        validate_cnpj_field('00000000000192')
    assert exc.value.messages == ['CNPJ inválido. Verifique o número informado.']


def test_validate_cnpj_base_field():
    validate_cnpj_base_field('12.ABC.345/01DE')
    with pytest.raises(ValidationError) as exc:
        validate_cnpj_base_field('000000000000')
    assert exc.value.messages == ['CNPJ não pode ser composto apenas por zeros']


def test_cnpj_form_cleans_value():
    form = CNPJForm(data={'cnpj': '12.ABC.345/01DE-35'})
    assert form.is_valid()
    assert form.cleaned_data['cnpj'] == '12ABC34501DE35'


def test_cnpj_form_rejects_lowercase():
    form = CNPJForm(data={'cnpj': '12.ABc.345/01DE-35'})
    assert not form.is_valid()
    assert form.errors['cnpj'] == ['CNPJ contém caracteres inválidos']


def test_cnpj_form_required():
    form = CNPJForm(data={'cnpj': ''})
    assert not form.is_valid()
    assert 'cnpj' in form.errors


def test_calculo_dv_form():
    form = CalculoDVForm(data={'base': '12.ABC.345/01DE'})
    assert form.is_valid()
    assert form.cleaned_data['base'] == '12ABC34501DE'
    assert form.cnpj_completo() == '12ABC34501DE35'


def test_calculo_dv_form_invalid_base():
    form = CalculoDVForm(data={'base': '$0123456789A'})
    assert not form.is_valid()
    assert form.errors['base'] == ['CNPJ contém caracteres inválidos']


def test_model_field_pre_save_cleans_value():
    instance = SimpleNamespace(cnpj='12.ABC.345/01DE-35')
    assert _field().pre_save(instance, add=True) == '12ABC34501DE35'
    assert instance.cnpj == '12ABC34501DE35'


def test_model_field_pre_save_formatted(settings):
    settings.CNPJ_STORE_FORMATTED = True
    instance = SimpleNamespace(cnpj='12ABC34501DE35')
    assert _field().pre_save(instance, add=True) == '12.ABC.345/01DE-35'


def test_model_field_pre_save_keeps_invalid_value():
    instance = SimpleNamespace(cnpj='12.abc.345/01de-35')
    assert _field().pre_save(instance, add=True) == '12.abc.345/01de-35'


def test_model_field_clean_rejects_lowercase():
    with pytest.raises(ValidationError) as exc:
        _field().clean('12.abc.345/01de-35', None)
    assert exc.value.messages == ['CNPJ contém caracteres inválidos']


def test_model_field_deconstruct_and_formfield():
    name, path, args, kwargs = _field().deconstruct()
    assert path == 'cnpj.fields.CNPJField'
    assert kwargs == {}
    assert isinstance(_field().formfield(), CNPJFormField)


def test_cnpj_format_filter():
    assert cnpj_format('12ABC34501DE35') == '12.ABC.345/01DE-35'
    assert cnpj_format('123') == '123'
    assert cnpj_format(None) == ''


def test_cnpj_filters_in_template():
    template = Template(
        '{% load cnpj_tags %}{{ cnpj|cnpj_format }}{% if cnpj|cnpj_valido %} ok{% endif %}'
    )
    assert template.render(Context({'cnpj': '90021382000122'})) == '90.021.382/0001-22 ok'
    assert cnpj_valido('90021382000123') is False


def test_command_validar():
    out = StringIO()
    call_command('cnpj', 'validar', '12.ABC.345/01DE-35', '90021382000122', stdout=out)
    assert out.getvalue().count('CNPJ válido') == 2


def test_command_validar_failure():
    out = StringIO()
    with pytest.raises(CommandError):
        call_command('cnpj', 'validar', '00000000000192', stdout=out)
    assert 'Dígitos verificadores inválidos' in out.getvalue()


def test_command_calcular_dv():
    out = StringIO()
    call_command('cnpj', 'calcular_dv', '12.ABC.345/01DE', stdout=out)
    assert 'DV 35' in out.getvalue()


def test_command_calcular_dv_failure():
    out = StringIO()
    with pytest.raises(CommandError):
        call_command('cnpj', 'calcular_dv', '12ABc34501DE', stdout=out)
    assert 'Não é possível calcular o DV pois o CNPJ fornecido é inválido' in out.getvalue()


def test_command_formatar():
    out = StringIO()
    call_command('cnpj', 'formatar', '12ABC34501DE35', stdout=out)
    assert out.getvalue().strip() == '12.ABC.345/01DE-35'


def test_cnpj_form_does_not_strip_whitespace():
    form = CNPJForm(data={'cnpj': ' 90021382000122 '})
    assert not form.is_valid()
    assert 'CNPJ contém caracteres inválidos' in form.errors['cnpj']


def test_calculo_dv_form_does_not_strip_whitespace():
    form = CalculoDVForm(data={'base': ' 12ABC34501DE'})
    assert not form.is_valid()
    assert form.errors['base'] == ['CNPJ contém caracteres inválidos']
