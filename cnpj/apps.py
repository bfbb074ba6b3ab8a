from django.apps import AppConfig


class CnpjConfig(AppConfig):
    """Configuração do app de validação de CNPJ."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cnpj'
    verbose_name = 'CNPJ - Validação e Formatação'
