"""
Use Cases (Application Services) do Domínio de Tickets.

Este módulo contém os casos de uso da aplicação, que orquestram
a lógica de negócio coordenando entidades e repositórios.

Use Cases implementados:
- CreateTicketService: Cria (ou substitui) ticket calculando o custo
- UpdateTicketService: Atualiza ticket existente recalculando o custo
- ListTicketsService: Lista todos os tickets
- SearchTicketsService: Busca dinâmica por cliente, pacote e data
- CancelTicketService: Cancela ticket e emite reembolso

Responsabilidades dos Use Cases:
- Coordenar entidades
- Compor repositórios (tickets + pacotes + clientes)
- Gerenciar transações (via UoW)
- Retornar entidades ou DTOs de saída

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

import logging
from typing import Dict, List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, RequestShapeError
from src.core.customers.entities import CustomerEntity
from src.core.customers.ports import CustomerRepository
from src.core.packages.entities import PackageEntity
from src.core.packages.ports import PackageRepository

from .ports import TicketRepository
from .entities import TicketEntity
from .dtos import SearchCriteria, TicketSearchMatch, TicketRefundDTO
from .predicates import build_ticket_predicate

logger = logging.getLogger(__name__)

MISSING_SEARCH_CRITERIA_MESSAGE = (
    "request body must contain at least one of the following search criteria: "
    "customerId, packageId, travelDate"
)


def _get_package(package_repo: PackageRepository, package_id: int) -> PackageEntity:
    package = package_repo.get_by_id(package_id)

    if not package:
        raise EntityNotFoundError.for_entity("Package", package_id)

    return package


def _require_customer(customer_repo: CustomerRepository, customer_id: int) -> CustomerEntity:
    customer = customer_repo.get_by_id(customer_id)

    if not customer:
        raise EntityNotFoundError.for_entity("Customer", customer_id)

    return customer


class CreateTicketService:
    """
    Use Case: Criar um novo ticket.

    Fluxo:
    1. Buscar pacote referenciado (NotFound se ausente)
    2. Verificar cliente referenciado (NotFound se ausente)
    3. Calcular custo total (membros × custo por pessoa)
    4. Persistir via repositório (sobrescreve ticket_id existente)
    5. Retornar entidade persistida

    Attributes:
        ticket_repo: Repositório de tickets
        customer_repo: Repositório de clientes (somente leitura)
        package_repo: Repositório de pacotes (somente leitura)
        uow: Unit of Work para transações

    Example:
        service = CreateTicketService(ticket_repo, customer_repo, package_repo, uow)
        ticket = service.execute(TicketEntity(
            ticket_id=987,
            customer_id=123,
            package_id=999,
            travel_date=date.today(),
            total_members=2,
        ))
        print(ticket.total_cost)  # 2 × custo por pessoa
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        package_repo: PackageRepository,
        uow: UnitOfWork,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            ticket_repo: Repositório para persistência
            customer_repo: Repositório para consulta de clientes
            package_repo: Repositório para consulta de pacotes
            uow: Unit of Work para transação atômica
        """
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.package_repo = package_repo
        self.uow = uow

    def execute(self, ticket: TicketEntity) -> TicketEntity:
        """
        Executa criação de ticket em transação atômica.

        Args:
            ticket: Ticket validado na entrada (estado DRAFT)

        Returns:
            Ticket persistido (estado ACTIVE)

        Raises:
            EntityNotFoundError: Se o pacote ou o cliente não existem
        """
        with self.uow:
            package = _get_package(self.package_repo, ticket.package_id)
            _require_customer(self.customer_repo, ticket.customer_id)

            # Custo calculado em memória antes da escrita
            ticket.price_with(package)

            saved = self.ticket_repo.save(ticket)

        logger.info(
            f"Ticket created: {saved.ticket_id} "
            f"(package={saved.package_id}, total_cost={saved.total_cost})"
        )
        return saved


class UpdateTicketService:
    """
    Use Case: Atualizar ticket existente.

    Fluxo:
    1. Buscar ticket existente (NotFound se ausente)
    2. Buscar pacote e cliente referenciados (NotFound se ausentes)
    3. Recalcular custo total
    4. Sobrescrever ticket
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        package_repo: PackageRepository,
        uow: UnitOfWork,
    ):
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.package_repo = package_repo
        self.uow = uow

    def execute(self, ticket: TicketEntity) -> TicketEntity:
        """
        Executa atualização de ticket.

        Args:
            ticket: Novo estado do ticket validado na entrada

        Returns:
            Ticket persistido

        Raises:
            EntityNotFoundError: Se ticket, pacote ou cliente não existem
        """
        with self.uow:
            existing = self.ticket_repo.get_by_id(ticket.ticket_id)

            if not existing:
                raise EntityNotFoundError.for_entity("Ticket", ticket.ticket_id)

            package = _get_package(self.package_repo, ticket.package_id)
            _require_customer(self.customer_repo, ticket.customer_id)

            ticket.price_with(package)

            saved = self.ticket_repo.save(ticket)

        logger.info(
            f"Ticket updated: {saved.ticket_id} "
            f"(total_cost {existing.total_cost} -> {saved.total_cost})"
        )
        return saved


class ListTicketsService:
    """
    Use Case: Listar todos os tickets.

    Não usa UoW pois é operação de leitura (não precisa de transação).
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self) -> List[TicketEntity]:
        return self.ticket_repo.list_all()


class SearchTicketsService:
    """
    Use Case: Busca dinâmica de tickets.

    Fluxo:
    1. Rejeitar critérios vazios (RequestShapeError)
    2. Compor predicado AND com os critérios presentes
    3. Executar predicado no repositório
    4. Resolver cliente e pacote de cada ticket encontrado

    Cada cliente/pacote é buscado no máximo uma vez por requisição.
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        package_repo: PackageRepository,
    ):
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.package_repo = package_repo

    def execute(self, criteria: SearchCriteria) -> List[TicketSearchMatch]:
        """
        Busca tickets pelos critérios informados.

        Args:
            criteria: Critérios opcionais (pelo menos um presente)

        Returns:
            Lista de tickets com cliente e pacote referenciados

        Raises:
            RequestShapeError: Se nenhum critério foi informado
        """
        if criteria.is_empty():
            raise RequestShapeError(MISSING_SEARCH_CRITERIA_MESSAGE)

        predicate = build_ticket_predicate(criteria)
        tickets = self.ticket_repo.find_by_predicate(predicate)

        logger.debug(f"Ticket search {criteria.to_dict()} matched {len(tickets)} ticket(s)")

        customers: Dict[int, Optional[CustomerEntity]] = {}
        packages: Dict[int, Optional[PackageEntity]] = {}
        matches = []

        for ticket in tickets:
            if ticket.customer_id not in customers:
                customers[ticket.customer_id] = self.customer_repo.get_by_id(ticket.customer_id)
            if ticket.package_id not in packages:
                packages[ticket.package_id] = self.package_repo.get_by_id(ticket.package_id)

            matches.append(
                TicketSearchMatch(
                    ticket=ticket,
                    customer=customers[ticket.customer_id],
                    package=packages[ticket.package_id],
                )
            )

        return matches


class CancelTicketService:
    """
    Use Case: Cancelar um ticket.

    Fluxo:
    1. Buscar ticket existente (NotFound se ausente)
    2. Capturar reembolso = custo total armazenado
    3. Remover ticket
    4. Retornar envelope de reembolso
    """

    def __init__(self, ticket_repo: TicketRepository, uow: UnitOfWork):
        self.ticket_repo = ticket_repo
        self.uow = uow

    def execute(self, ticket_id: int) -> TicketRefundDTO:
        """
        Cancela ticket.

        Raises:
            EntityNotFoundError: Se ticket não existe
        """
        with self.uow:
            ticket = self.ticket_repo.get_by_id(ticket_id)

            if not ticket:
                raise EntityNotFoundError.for_entity("Ticket", ticket_id)

            refund_amount = ticket.cancel()

            self.ticket_repo.delete(ticket_id)

        logger.info(f"Ticket cancelled: {ticket_id} (refund={refund_amount})")
        return TicketRefundDTO(refund_amount=refund_amount)
