"""
Domínio de Tickets - Reservas de Pacotes de Viagem.

Este módulo contém toda a lógica de negócio relacionada a
reservas, incluindo:
- Entidades (TicketEntity, TicketState)
- Predicados de busca (Eq, And, TicketField)
- DTOs (SearchCriteria, TicketSearchMatch, TicketRefundDTO)
- Ports (Interfaces para repositórios)
- Use Cases (Create, Update, List, Search, Cancel)

Características do Domínio:
- Custo calculado a partir do pacote referenciado
- Busca dinâmica com predicado composto executado no store
- Reembolso integral do custo total no cancelamento
"""

from .entities import TicketEntity, TicketState
from .dtos import SearchCriteria, TicketSearchMatch, TicketRefundDTO
from .predicates import TicketField, Eq, And, build_ticket_predicate
from .ports import TicketRepository, InMemoryTicketRepository
from .use_cases import (
    CreateTicketService,
    UpdateTicketService,
    ListTicketsService,
    SearchTicketsService,
    CancelTicketService,
)

__all__ = [
    # Entities
    "TicketEntity",
    "TicketState",
    # DTOs
    "SearchCriteria",
    "TicketSearchMatch",
    "TicketRefundDTO",
    # Predicates
    "TicketField",
    "Eq",
    "And",
    "build_ticket_predicate",
    # Ports
    "TicketRepository",
    "InMemoryTicketRepository",
    # Use Cases
    "CreateTicketService",
    "UpdateTicketService",
    "ListTicketsService",
    "SearchTicketsService",
    "CancelTicketService",
]
