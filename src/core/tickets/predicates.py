"""
Predicados de busca de Tickets.

Valores imutáveis e componíveis que descrevem restrições de
igualdade sobre tickets. O Core apenas constrói o predicado;
cada repositório o traduz para a forma nativa do seu store
(Q objects no Django, comparação direta em memória).

Example:
    predicate = Eq(TicketField.CUSTOMER_ID, 123) & Eq(TicketField.PACKAGE_ID, 999)
    tickets = ticket_repo.find_by_predicate(predicate)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union

from .dtos import SearchCriteria
from .entities import TicketEntity


class TicketField(Enum):
    """Campos de ticket que aceitam restrição de igualdade."""

    CUSTOMER_ID = "customer_id"
    PACKAGE_ID = "package_id"
    TRAVEL_DATE = "travel_date"


@dataclass(frozen=True)
class Eq:
    """Restrição `ticket.<field> == value`."""

    field: TicketField
    value: Any

    def matches(self, ticket: TicketEntity) -> bool:
        return getattr(ticket, self.field.value) == self.value

    def __and__(self, other: "Predicate") -> "And":
        return And((self,)) & other


@dataclass(frozen=True)
class And:
    """
    Conjunção de restrições de igualdade.

    Uma conjunção vazia não restringe nada; os use cases nunca
    executam uma busca com predicado vazio.
    """

    clauses: Tuple[Eq, ...] = ()

    def matches(self, ticket: TicketEntity) -> bool:
        return all(clause.matches(ticket) for clause in self.clauses)

    def is_empty(self) -> bool:
        return not self.clauses

    def __and__(self, other: "Predicate") -> "And":
        if isinstance(other, And):
            return And(self.clauses + other.clauses)
        return And(self.clauses + (other,))

    def __iter__(self):
        return iter(self.clauses)


Predicate = Union[Eq, And]


def build_ticket_predicate(criteria: SearchCriteria) -> And:
    """
    Constrói a conjunção (AND) dos critérios informados.

    Campos ausentes não geram restrição (não viram IS NULL).

    Args:
        criteria: Critérios de busca

    Returns:
        Conjunção com uma restrição por critério presente
    """
    predicate = And()

    if criteria.customer_id is not None:
        predicate = predicate & Eq(TicketField.CUSTOMER_ID, criteria.customer_id)

    if criteria.package_id is not None:
        predicate = predicate & Eq(TicketField.PACKAGE_ID, criteria.package_id)

    if criteria.travel_date is not None:
        predicate = predicate & Eq(TicketField.TRAVEL_DATE, criteria.travel_date)

    return predicate
