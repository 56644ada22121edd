"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter Entity → dados de Model (para persistência)
- Converter Model → Entity (para uso no Core)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import Any, Dict, Iterable, List

from src.core.customers.entities import CustomerEntity
from src.core.packages.entities import PackageEntity
from src.core.tickets.entities import TicketEntity, TicketState

from .models import CustomerModel, PackageModel, TicketModel


class CustomerMapper:
    """Mapper entre CustomerEntity e CustomerModel."""

    @staticmethod
    def to_model_data(entity: CustomerEntity) -> Dict[str, Any]:
        """
        Campos do model exceto a primary key.

        Usado como `defaults` do update_or_create.
        """
        return {
            'first_name': entity.first_name,
            'last_name': entity.last_name,
            'email': entity.email,
            'password': entity.password,
        }

    @staticmethod
    def to_entity(model: CustomerModel) -> CustomerEntity:
        return CustomerEntity(
            customer_id=model.customer_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password=model.password,
        )

    @staticmethod
    def to_entity_list(models: Iterable[CustomerModel]) -> List[CustomerEntity]:
        return [CustomerMapper.to_entity(model) for model in models]


class PackageMapper:
    """Mapper entre PackageEntity e PackageModel."""

    @staticmethod
    def to_model_data(entity: PackageEntity) -> Dict[str, Any]:
        return {
            'package_name': entity.package_name,
            'trip_duration': entity.trip_duration,
            'cost_per_person': entity.cost_per_person,
        }

    @staticmethod
    def to_entity(model: PackageModel) -> PackageEntity:
        return PackageEntity(
            id=model.id,
            package_name=model.package_name,
            trip_duration=model.trip_duration,
            cost_per_person=model.cost_per_person,
        )

    @staticmethod
    def to_entity_list(models: Iterable[PackageModel]) -> List[PackageEntity]:
        return [PackageMapper.to_entity(model) for model in models]


class TicketMapper:
    """
    Mapper entre TicketEntity e TicketModel.

    Tickets persistidos estão sempre no estado ACTIVE: tickets
    cancelados são removidos da tabela.
    """

    @staticmethod
    def to_model_data(entity: TicketEntity) -> Dict[str, Any]:
        return {
            'customer_id': entity.customer_id,
            'package_id': entity.package_id,
            'travel_date': entity.travel_date,
            'total_members': entity.total_members,
            'total_cost': entity.total_cost,
        }

    @staticmethod
    def to_entity(model: TicketModel) -> TicketEntity:
        return TicketEntity(
            ticket_id=model.ticket_id,
            customer_id=model.customer_id,
            package_id=model.package_id,
            travel_date=model.travel_date,
            total_members=model.total_members,
            total_cost=model.total_cost,
            state=TicketState.ACTIVE,
        )

    @staticmethod
    def to_entity_list(models: Iterable[TicketModel]) -> List[TicketEntity]:
        return [TicketMapper.to_entity(model) for model in models]
