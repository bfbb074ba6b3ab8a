"""
Settings do projeto validador.

Os valores são lidos de variáveis de ambiente (arquivo .env opcional
na raiz do projeto).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'change-me')
# Aceita true/True/1/yes/on
DEBUG = os.getenv('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes', 'on')
ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'cnpj',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# CNPJ
CNPJ_STORE_FORMATTED = os.getenv('CNPJ_STORE_FORMATTED', 'False').lower() in ('1', 'true', 'yes', 'on')
CNPJ_DETAILED_ERRORS = os.getenv('CNPJ_DETAILED_ERRORS', 'True').lower() in ('1', 'true', 'yes', 'on')
CNPJ_INVALID_MESSAGE = os.getenv('CNPJ_INVALID_MESSAGE', 'CNPJ inválido. Verifique o número informado.')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'cnpj': {
            'handlers': ['console'],
            'level': os.getenv('CNPJ_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
