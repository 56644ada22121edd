"""
Data Transfer Objects (DTOs) do Domínio de Tickets.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de detalhes de transporte para o Core.

Tipos de DTOs:
- Query DTOs: Critérios de busca já convertidos para tipos de domínio
- Output DTOs: Resultado de busca e reembolso
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.core.customers.entities import CustomerEntity
from src.core.packages.entities import PackageEntity

from .entities import TicketEntity


# =============================================================================
# QUERY DTOs (Filtros de Busca)
# =============================================================================

@dataclass(frozen=True)
class SearchCriteria:
    """
    Critérios opcionais de busca de tickets.

    Campos ausentes (None) não geram restrição. Pelo menos um
    campo deve estar presente.

    Attributes:
        customer_id: Filtrar por cliente
        package_id: Filtrar por pacote
        travel_date: Filtrar por data exata da viagem
    """

    customer_id: Optional[int] = None
    package_id: Optional[int] = None
    travel_date: Optional[date] = None

    def is_empty(self) -> bool:
        """Verifica se nenhum critério foi informado."""
        return (
            self.customer_id is None
            and self.package_id is None
            and self.travel_date is None
        )

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "package_id": self.package_id,
            "travel_date": self.travel_date.isoformat() if self.travel_date else None,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class TicketSearchMatch:
    """
    Ticket encontrado na busca, com cliente e pacote referenciados.

    customer/package são None quando o registro referenciado
    não existe mais (ex: cliente removido após a reserva).
    """

    ticket: TicketEntity
    customer: Optional[CustomerEntity] = None
    package: Optional[PackageEntity] = None


@dataclass(frozen=True)
class TicketRefundDTO:
    """
    Reembolso emitido no cancelamento de um ticket.

    Attributes:
        refund_amount: Custo total do ticket no momento do cancelamento
    """

    refund_amount: int

    def to_dict(self) -> dict:
        return {"refundAmount": self.refund_amount}
