"""
Repositórios Django para persistência de clientes, pacotes e tickets.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar os Repository protocols
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM
- Traduzir predicados do Core para Q objects

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Filtros da busca são executados pelo banco (WHERE ... AND ...)
"""

from typing import List, Optional
import logging

from django.db.models import Q

from src.core.customers.entities import CustomerEntity
from src.core.customers.ports import CustomerRepository as CustomerRepositoryPort
from src.core.packages.entities import PackageEntity
from src.core.packages.ports import PackageRepository as PackageRepositoryPort
from src.core.tickets.entities import TicketEntity, TicketState
from src.core.tickets.ports import TicketRepository as TicketRepositoryPort
from src.core.tickets.predicates import And, Eq, Predicate

from .models import CustomerModel, PackageModel, TicketModel
from .mappers import CustomerMapper, PackageMapper, TicketMapper

logger = logging.getLogger(__name__)


def predicate_to_q(predicate: Predicate) -> Q:
    """
    Traduz um predicado do Core para um Q object.

    Eq(field, value) → Q(field=value); And combina com `&`.
    Um And vazio vira Q() (sem restrição).

    Example:
        q = predicate_to_q(Eq(TicketField.CUSTOMER_ID, 1) & Eq(TicketField.PACKAGE_ID, 2))
        TicketModel.objects.filter(q)
    """
    if isinstance(predicate, Eq):
        return Q(**{predicate.field.value: predicate.value})

    if isinstance(predicate, And):
        q = Q()
        for clause in predicate:
            q &= predicate_to_q(clause)
        return q

    raise TypeError(f"Unsupported predicate: {predicate!r}")


class DjangoCustomerRepository(CustomerRepositoryPort):
    """
    Implementação Django do CustomerRepository.

    Example:
        repo = DjangoCustomerRepository()
        repo.save(customer)
        customer = repo.get_by_id(123)
    """

    def __init__(self):
        self._mapper = CustomerMapper()

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        """
        Persiste cliente (create ou update pelo customer_id).

        Returns:
            Entidade persistida
        """
        logger.debug(f"Saving customer: {customer.customer_id}")

        model, created = CustomerModel.objects.update_or_create(
            customer_id=customer.customer_id,
            defaults=self._mapper.to_model_data(customer),
        )

        logger.info(f"Customer {'created' if created else 'updated'}: {customer.customer_id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        try:
            model = CustomerModel.objects.get(customer_id=customer_id)
            return self._mapper.to_entity(model)
        except CustomerModel.DoesNotExist:
            logger.debug(f"Customer not found: {customer_id}")
            return None

    def delete(self, customer_id: int) -> None:
        """
        Remove cliente do banco.

        Note:
            Não lança erro se cliente não existir
        """
        deleted_count, _ = CustomerModel.objects.filter(customer_id=customer_id).delete()

        if deleted_count > 0:
            logger.info(f"Customer deleted: {customer_id}")
        else:
            logger.debug(f"Customer not found for deletion: {customer_id}")

    def list_all(self) -> List[CustomerEntity]:
        return self._mapper.to_entity_list(CustomerModel.objects.all())


class DjangoPackageRepository(PackageRepositoryPort):
    """Implementação Django do PackageRepository."""

    def __init__(self):
        self._mapper = PackageMapper()

    def save(self, package: PackageEntity) -> PackageEntity:
        logger.debug(f"Saving package: {package.id}")

        model, _ = PackageModel.objects.update_or_create(
            id=package.id,
            defaults=self._mapper.to_model_data(package),
        )

        logger.info(f"Package saved: {package.id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, package_id: int) -> Optional[PackageEntity]:
        try:
            model = PackageModel.objects.get(id=package_id)
            return self._mapper.to_entity(model)
        except PackageModel.DoesNotExist:
            logger.debug(f"Package not found: {package_id}")
            return None

    def list_all(self) -> List[PackageEntity]:
        return self._mapper.to_entity_list(PackageModel.objects.all())


class DjangoTicketRepository(TicketRepositoryPort):
    """
    Implementação Django do TicketRepository.

    Implementa a interface definida em src/core/tickets/ports.py,
    usando Django ORM para persistência.

    Example:
        repo = DjangoTicketRepository()

        # Criar ou substituir
        repo.save(ticket_entity)

        # Buscar com predicado
        tickets = repo.find_by_predicate(build_ticket_predicate(criteria))
    """

    def __init__(self):
        self._mapper = TicketMapper()

    def save(self, ticket: TicketEntity) -> TicketEntity:
        """
        Persiste ticket (create ou replace pelo ticket_id).

        Note:
            Usa update_or_create para atomicidade
        """
        logger.debug(f"Saving ticket: {ticket.ticket_id}")

        model, created = TicketModel.objects.update_or_create(
            ticket_id=ticket.ticket_id,
            defaults=self._mapper.to_model_data(ticket),
        )

        ticket.state = TicketState.ACTIVE
        logger.info(f"Ticket {'created' if created else 'replaced'}: {ticket.ticket_id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        try:
            model = TicketModel.objects.get(ticket_id=ticket_id)
            return self._mapper.to_entity(model)
        except TicketModel.DoesNotExist:
            logger.debug(f"Ticket not found: {ticket_id}")
            return None

    def delete(self, ticket_id: int) -> None:
        """
        Remove ticket do banco.

        Note:
            Não lança erro se ticket não existir
        """
        deleted_count, _ = TicketModel.objects.filter(ticket_id=ticket_id).delete()

        if deleted_count > 0:
            logger.info(f"Ticket deleted: {ticket_id}")
        else:
            logger.debug(f"Ticket not found for deletion: {ticket_id}")

    def list_all(self) -> List[TicketEntity]:
        """
        Lista todos os tickets.

        Warning:
            Use com cuidado em produção - sem paginação
        """
        return self._mapper.to_entity_list(TicketModel.objects.all())

    def find_by_predicate(self, predicate: Predicate) -> List[TicketEntity]:
        """
        Busca tickets que satisfazem o predicado.

        O predicado é traduzido para Q objects e executado pelo banco.
        """
        q = predicate_to_q(predicate)
        models = TicketModel.objects.filter(q)

        logger.debug(f"Ticket search filter: {q}")
        return self._mapper.to_entity_list(models)
