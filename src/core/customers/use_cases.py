"""
Use Cases (Application Services) do Domínio de Clientes.

Use Cases implementados:
- ListCustomersService: Lista clientes
- GetCustomerService: Obtém cliente por ID
- SignUpCustomerService: Cadastra (ou sobrescreve) cliente
- DeleteCustomerService: Remove cliente

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

import logging
from typing import List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError

from .entities import CustomerEntity
from .ports import CustomerRepository

logger = logging.getLogger(__name__)


class ListCustomersService:
    """
    Use Case: Listar todos os clientes.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def execute(self) -> List[CustomerEntity]:
        return self.customer_repo.list_all()


class GetCustomerService:
    """
    Use Case: Obter detalhes de um cliente específico.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def execute(self, customer_id: int) -> CustomerEntity:
        """
        Obtém cliente por ID.

        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        customer = self.customer_repo.get_by_id(customer_id)

        if not customer:
            raise EntityNotFoundError.for_entity("Customer", customer_id)

        return customer


class SignUpCustomerService:
    """
    Use Case: Cadastrar cliente.

    Semântica de upsert pelo customer_id: um sign-up com ID
    já existente sobrescreve o cadastro anterior.

    Example:
        service = SignUpCustomerService(customer_repo, uow)
        customer = service.execute(CustomerEntity(customer_id=123, ...))
    """

    def __init__(self, customer_repo: CustomerRepository, uow: UnitOfWork):
        self.customer_repo = customer_repo
        self.uow = uow

    def execute(self, customer: CustomerEntity) -> CustomerEntity:
        """
        Persiste o cliente e retorna a entidade persistida.

        Args:
            customer: Entidade já validada na entrada
        """
        with self.uow:
            saved = self.customer_repo.save(customer)

        logger.info(f"Customer signed up: {saved.customer_id}")
        return saved


class DeleteCustomerService:
    """
    Use Case: Remover cliente.

    Idempotente - remover cliente inexistente não é erro.
    Tickets do cliente não são removidos.
    """

    def __init__(self, customer_repo: CustomerRepository, uow: UnitOfWork):
        self.customer_repo = customer_repo
        self.uow = uow

    def execute(self, customer_id: int) -> None:
        with self.uow:
            self.customer_repo.delete(customer_id)
