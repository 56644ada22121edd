"""
Testes Unitários para Use Cases do Domínio de Clientes.

Coverage:
- ListCustomersService
- GetCustomerService
- SignUpCustomerService (upsert)
- DeleteCustomerService (idempotente)
"""

import pytest

from src.core.customers.entities import CustomerEntity
from src.core.customers.ports import InMemoryCustomerRepository
from src.core.customers.use_cases import (
    ListCustomersService,
    GetCustomerService,
    SignUpCustomerService,
    DeleteCustomerService,
)
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import InMemoryUnitOfWork


def make_customer(customer_id=123, first_name="Ada", email="ada@example.com"):
    return CustomerEntity(
        customer_id=customer_id,
        first_name=first_name,
        last_name="Lovelace",
        email=email,
        password="secret",
    )


@pytest.fixture
def customer_repo():
    return InMemoryCustomerRepository()


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


class TestSignUpCustomerService:

    def test_sign_up_persists_customer(self, customer_repo, uow):
        saved = SignUpCustomerService(customer_repo, uow).execute(make_customer())

        assert saved == make_customer()
        assert customer_repo.get_by_id(123) == make_customer()
        assert uow.committed

    def test_sign_up_with_existing_id_overwrites(self, customer_repo, uow):
        """Cadastro com ID existente sobrescreve o anterior."""
        service = SignUpCustomerService(customer_repo, uow)
        service.execute(make_customer(first_name="Ada"))
        service.execute(make_customer(first_name="Grace"))

        assert customer_repo.get_by_id(123).first_name == "Grace"
        assert len(customer_repo.list_all()) == 1

    def test_password_is_stored_verbatim(self, customer_repo, uow):
        SignUpCustomerService(customer_repo, uow).execute(make_customer())

        assert customer_repo.get_by_id(123).password == "secret"


class TestGetCustomerService:

    def test_get_existing(self, customer_repo):
        customer_repo.save(make_customer())

        customer = GetCustomerService(customer_repo).execute(123)

        assert customer.email == "ada@example.com"

    def test_get_missing_fails(self, customer_repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            GetCustomerService(customer_repo).execute(7)

        assert exc_info.value.message == "Customer with id: 7 not found"
        assert exc_info.value.to_dict() == {"message": "Customer with id: 7 not found"}


class TestListCustomersService:

    def test_list(self, customer_repo):
        customer_repo.save(make_customer(customer_id=1))
        customer_repo.save(make_customer(customer_id=2))

        customers = ListCustomersService(customer_repo).execute()

        assert sorted(c.customer_id for c in customers) == [1, 2]


class TestDeleteCustomerService:

    def test_delete_existing(self, customer_repo, uow):
        customer_repo.save(make_customer())

        DeleteCustomerService(customer_repo, uow).execute(123)

        assert customer_repo.get_by_id(123) is None
        assert uow.committed

    def test_delete_missing_is_noop(self, customer_repo, uow):
        """Remover cliente inexistente não é erro."""
        DeleteCustomerService(customer_repo, uow).execute(999)

        assert uow.committed
