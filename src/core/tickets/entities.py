"""
Entidades do Domínio de Tickets.

Este módulo define as entidades de domínio que encapsulam
regras de negócio relacionadas a reservas (tickets) de pacotes.

Entidades:
- TicketEntity: Agregado principal do domínio
- TicketState: Estados do ciclo de vida de um ticket

Regras de Negócio Encapsuladas:
- Custo total = membros × custo por pessoa do pacote
- Reembolso no cancelamento = custo total armazenado
- Transições de estado controladas
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.core.packages.entities import PackageEntity


class TicketState(Enum):
    """
    Estados do ciclo de vida de um ticket.

    Fluxo de Estados:
        DRAFT → ACTIVE (criar: validação + pacote + custo + persistir)
        ACTIVE → ACTIVE (atualizar)
        ACTIVE → CANCELLED (cancelar: reembolso do custo total)

    CANCELLED é terminal; o mesmo ticket_id pode ser reutilizado
    para criar um novo ticket ACTIVE.
    """

    DRAFT = "Draft"
    ACTIVE = "Active"
    CANCELLED = "Cancelled"


@dataclass
class TicketEntity:
    """
    Entidade de Domínio: Ticket.

    Invariantes:
    - total_cost = total_members × package.cost_per_person no momento
      da criação/atualização
    - travel_date só muda através de uma atualização revalidada

    Attributes:
        ticket_id: Identificador único (atribuído externamente)
        customer_id: ID do cliente
        package_id: ID do pacote reservado
        travel_date: Data da viagem
        total_members: Quantidade de viajantes
        total_cost: Custo total calculado
        state: Estado no ciclo de vida

    Example:
        ticket = TicketEntity(
            ticket_id=987,
            customer_id=123,
            package_id=999,
            travel_date=date.today(),
            total_members=2,
        )
        ticket.price_with(package)
        refund = ticket.cancel()
    """

    ticket_id: int
    customer_id: int
    package_id: int
    travel_date: date
    total_members: int
    total_cost: int = 0
    state: TicketState = field(default=TicketState.DRAFT, compare=False)

    def price_with(self, package: PackageEntity) -> None:
        """
        Calcula o custo total a partir do pacote e ativa o ticket.

        Args:
            package: Pacote referenciado por package_id

        Raises:
            ValueError: Se o pacote não corresponde ao package_id
        """
        if package.id != self.package_id:
            raise ValueError(
                f"Package {package.id} does not match ticket package {self.package_id}"
            )

        if self.state == TicketState.CANCELLED:
            raise ValueError(f"Ticket {self.ticket_id} is cancelled")

        self.total_cost = package.cost_for(self.total_members)
        self.state = TicketState.ACTIVE

    def cancel(self) -> int:
        """
        Cancela o ticket.

        Returns:
            Valor do reembolso (custo total armazenado)

        Raises:
            ValueError: Se o ticket não está ativo
        """
        if self.state != TicketState.ACTIVE:
            raise ValueError(
                f"Ticket {self.ticket_id} cannot be cancelled from state {self.state.value}"
            )

        self.state = TicketState.CANCELLED
        return self.total_cost

    @property
    def is_active(self) -> bool:
        return self.state == TicketState.ACTIVE
