"""
Custom Management Command para validar, calcular DV e formatar CNPJs.

Uso:
    python manage.py cnpj validar 12.ABC.345/01DE-35 90021382000122
    python manage.py cnpj calcular_dv 12.ABC.345/01DE
    python manage.py cnpj formatar 12ABC34501DE35

Características:
    - Processa vários valores de uma vez
    - Exibe o resultado de cada valor (detalhes dos erros em validar)
    - Termina com CommandError se algum valor for inválido
"""

from django.core.management.base import BaseCommand, CommandError

from cnpj.utils.cnpj import (
    CNPJValidationError, calcula_dv, format_cnpj, validate_cnpj_with_details
)


class Command(BaseCommand):
    """
    Comando Django para operações sobre CNPJ a partir da linha de comando.
    """

    help = 'Valida, calcula os dígitos verificadores ou formata CNPJs.'

    ACTIONS = ('validar', 'calcular_dv', 'formatar')

    def add_arguments(self, parser):
        parser.add_argument(
            'action',
            choices=self.ACTIONS,
            help='Operação a executar: validar, calcular_dv ou formatar'
        )
        parser.add_argument(
            'values',
            nargs='+',
            help='Um ou mais CNPJs (ou bases, para calcular_dv)'
        )

    def handle(self, *args, **options):
        """
        Executa a operação para cada valor e contabiliza as falhas.
        """
        action = options['action']
        handler = getattr(self, f'_{action}')

        failures = 0
        for value in options['values']:
            if not handler(value):
                failures += 1

        if failures:
            raise CommandError(f'{failures} valor(es) inválido(s).')

    def _validar(self, value: str) -> bool:
        result = validate_cnpj_with_details(value)
        if result.is_valid:
            self.stdout.write(self.style.SUCCESS(f'[OK] {value}: CNPJ válido'))
            return True

        self.stdout.write(self.style.ERROR(f'[ERRO] {value}: {"; ".join(result.errors)}'))
        return False

    def _calcular_dv(self, value: str) -> bool:
        try:
            dv = calcula_dv(value)
        except CNPJValidationError as e:
            self.stdout.write(self.style.ERROR(f'[ERRO] {value}: {e.message}'))
            return False

        self.stdout.write(self.style.SUCCESS(f'[OK] {value}: DV {dv}'))
        return True

    def _formatar(self, value: str) -> bool:
        try:
            formatted = format_cnpj(value)
        except CNPJValidationError as e:
            self.stdout.write(self.style.ERROR(f'[ERRO] {value}: {e.message}'))
            return False

        self.stdout.write(formatted)
        return True
