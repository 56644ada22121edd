"""
Mapper entre Resources (API) e Entidades (Core).

Responsabilidades:
- Converter ids textuais → inteiros e datas yyyy-MM-dd → date
- Converter entidades de volta para o formato da API
- Montar a projeção de busca (ticket + cliente + pacote)

Princípios:
- Funções puras, sem I/O
- Entrada mal formada lança ValueError (os formulários de
  validação garantem que isso não ocorre para entrada HTTP)
"""

from datetime import date, datetime
from typing import Optional

from src.core.customers.entities import CustomerEntity
from src.core.packages.entities import PackageEntity
from src.core.tickets.entities import TicketEntity
from src.core.tickets.dtos import SearchCriteria

from .resources import (
    TicketRequest,
    TicketResource,
    SearchCriteriaResource,
    SearchTicketResource,
    CustomerSignUp,
    CustomerDetailsResource,
    PackageDetailsResource,
)

DATE_FORMAT = "%Y-%m-%d"


def _to_int(value, field_name: str) -> int:
    if value is None:
        raise ValueError(f"{field_name} is required")
    return int(str(value).strip())


def _to_optional_int(value) -> Optional[int]:
    if value is None:
        return None
    return int(str(value).strip())


class TravelMapper:
    """
    Mapper stateless para os recursos da API de viagens.

    Example:
        entity = TravelMapper.to_ticket_entity(TicketRequest.from_dict(payload))
        resource = TravelMapper.to_ticket_resource(entity)
    """

    # =========================================================================
    # DATAS
    # =========================================================================

    @staticmethod
    def format_date(value: date) -> str:
        return value.strftime(DATE_FORMAT)

    @staticmethod
    def parse_date(value: str) -> date:
        """
        Converte string yyyy-MM-dd em date.

        Raises:
            ValueError: Se a string não está no formato ou não é data válida
        """
        if value is None:
            raise ValueError("date is required")
        return datetime.strptime(value.strip(), DATE_FORMAT).date()

    # =========================================================================
    # TICKETS
    # =========================================================================

    @staticmethod
    def to_ticket_entity(request: TicketRequest) -> TicketEntity:
        """
        Converte TicketRequest em TicketEntity (estado DRAFT, custo 0).

        Raises:
            ValueError: Se algum id/data está mal formado
        """
        return TicketEntity(
            ticket_id=_to_int(request.ticket_id, "ticketId"),
            customer_id=_to_int(request.customer_id, "customerId"),
            package_id=_to_int(request.package_id, "packageId"),
            travel_date=TravelMapper.parse_date(request.travel_date),
            total_members=_to_int(request.total_members, "totalMembers"),
        )

    @staticmethod
    def to_ticket_request(entity: TicketEntity) -> TicketRequest:
        return TicketRequest(
            ticket_id=str(entity.ticket_id),
            customer_id=str(entity.customer_id),
            package_id=str(entity.package_id),
            travel_date=TravelMapper.format_date(entity.travel_date),
            total_members=str(entity.total_members),
        )

    @staticmethod
    def to_ticket_resource(entity: TicketEntity) -> TicketResource:
        return TicketResource(
            ticket_id=str(entity.ticket_id),
            customer_id=str(entity.customer_id),
            package_id=str(entity.package_id),
            travel_date=TravelMapper.format_date(entity.travel_date),
            total_members=str(entity.total_members),
            total_cost=entity.total_cost,
        )

    # =========================================================================
    # BUSCA
    # =========================================================================

    @staticmethod
    def to_search_criteria(resource: SearchCriteriaResource) -> SearchCriteria:
        travel_date = None
        if resource.travel_date is not None:
            travel_date = TravelMapper.parse_date(resource.travel_date)

        return SearchCriteria(
            customer_id=_to_optional_int(resource.customer_id),
            package_id=_to_optional_int(resource.package_id),
            travel_date=travel_date,
        )

    @staticmethod
    def to_search_resource(
        ticket: TicketEntity,
        customer: Optional[CustomerEntity],
        package: Optional[PackageEntity],
    ) -> SearchTicketResource:
        """
        Monta a projeção de busca.

        totalCostOfTrip é o custo armazenado no ticket, não recalculado.
        """
        return SearchTicketResource(
            first_name=customer.first_name if customer else None,
            last_name=customer.last_name if customer else None,
            email=customer.email if customer else None,
            package_name=package.package_name if package else None,
            trip_duration=package.trip_duration if package else None,
            travel_date=TravelMapper.format_date(ticket.travel_date),
            total_members=ticket.total_members,
            total_cost_of_trip=ticket.total_cost,
        )

    # =========================================================================
    # CLIENTES
    # =========================================================================

    @staticmethod
    def to_customer_entity(resource: CustomerSignUp) -> CustomerEntity:
        return CustomerEntity(
            customer_id=_to_int(resource.customer_id, "customerId"),
            first_name=resource.first_name,
            last_name=resource.last_name,
            email=resource.email,
            password=resource.password,
        )

    @staticmethod
    def to_sign_up_request(entity: CustomerEntity) -> CustomerSignUp:
        return CustomerSignUp(
            customer_id=entity.customer_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            password=entity.password,
        )

    @staticmethod
    def to_customer_details(entity: CustomerEntity) -> CustomerDetailsResource:
        return CustomerDetailsResource(
            customer_id=entity.customer_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            password=entity.password,
        )

    # =========================================================================
    # PACOTES
    # =========================================================================

    @staticmethod
    def to_package_entity(resource: PackageDetailsResource) -> PackageEntity:
        return PackageEntity(
            id=_to_int(resource.id, "id"),
            package_name=resource.package_name,
            trip_duration=resource.trip_duration,
            cost_per_person=_to_int(resource.cost_per_person, "costPerPerson"),
        )

    @staticmethod
    def to_package_details(entity: PackageEntity) -> PackageDetailsResource:
        return PackageDetailsResource(
            id=entity.id,
            package_name=entity.package_name,
            trip_duration=entity.trip_duration,
            cost_per_person=entity.cost_per_person,
        )
