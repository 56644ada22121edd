"""
Fixtures para testes dos adapters Django.

Django já está configurado em tests/conftest.py (banco SQLite em memória,
ROOT_URLCONF apontando para as rotas de viagens).
"""

import pytest

from src.config.container import get_container, reset_container


@pytest.fixture(autouse=True)
def fresh_container():
    """Cada teste usa um container DI novo."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def package_model_factory():
    """Factory para criar PackageModel para testes."""
    from src.adapters.django_app.travels.models import PackageModel

    def create_package(**kwargs):
        defaults = {
            'id': 999,
            'package_name': 'Goa Beach',
            'trip_duration': '2 Days',
            'cost_per_person': 1500,
        }
        defaults.update(kwargs)
        return PackageModel.objects.create(**defaults)

    return create_package


@pytest.fixture
def customer_model_factory():
    """Factory para criar CustomerModel para testes."""
    from src.adapters.django_app.travels.models import CustomerModel

    def create_customer(**kwargs):
        defaults = {
            'customer_id': 123,
            'first_name': 'Ada',
            'last_name': 'Lovelace',
            'email': 'ada@example.com',
            'password': 'secret',
        }
        defaults.update(kwargs)
        return CustomerModel.objects.create(**defaults)

    return create_customer


@pytest.fixture
def ticket_model_factory(today):
    """Factory para criar TicketModel para testes."""
    from src.adapters.django_app.travels.models import TicketModel

    def create_ticket(**kwargs):
        defaults = {
            'ticket_id': 1,
            'customer_id': 123,
            'package_id': 999,
            'travel_date': today,
            'total_members': 2,
            'total_cost': 3000,
        }
        defaults.update(kwargs)
        return TicketModel.objects.create(**defaults)

    return create_ticket


@pytest.fixture
def container():
    return get_container()
