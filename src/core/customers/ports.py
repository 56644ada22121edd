"""
Ports (Interfaces) do Domínio de Clientes.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência de clientes.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import CustomerEntity


@runtime_checkable
class CustomerRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoCustomerRepository (ORM)
    - InMemoryCustomerRepository (para testes)
    """

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        """
        Persiste cliente (create ou update pelo customer_id).

        Returns:
            Entidade persistida
        """
        ...

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        """
        Busca cliente por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def delete(self, customer_id: int) -> None:
        """
        Remove cliente. Não lança erro se não existir.
        """
        ...

    def list_all(self) -> List[CustomerEntity]:
        """Lista todos os clientes."""
        ...


class InMemoryCustomerRepository:
    """
    Implementação em memória do CustomerRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!
    """

    def __init__(self):
        self._customers: Dict[int, CustomerEntity] = {}

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        """Salva cliente em memória."""
        self._customers[customer.customer_id] = customer
        return customer

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        """Busca cliente por ID."""
        return self._customers.get(customer_id)

    def delete(self, customer_id: int) -> None:
        """Remove cliente."""
        self._customers.pop(customer_id, None)

    def list_all(self) -> List[CustomerEntity]:
        """Lista todos os clientes."""
        return list(self._customers.values())

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._customers.clear()
