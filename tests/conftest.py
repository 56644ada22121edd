"""
Configurações globais do Pytest para o Travels Booking.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado aqui (settings.configure) para que o
pytest-django encontre as settings antes de criar o banco
de testes em memória.
"""

import pytest
from datetime import timedelta
from pathlib import Path


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.travels',
            ],
            ROOT_URLCONF='src.adapters.django_app.travels.urls',
            APPEND_SLASH=False,
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def today():
    """Data local atual, a mesma usada na validação de travelDate."""
    from django.utils import timezone
    return timezone.localdate()


@pytest.fixture
def tomorrow(today):
    return today + timedelta(days=1)


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)
