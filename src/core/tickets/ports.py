"""
Ports (Interfaces) do Domínio de Tickets.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de tickets.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoTicketRepository(TicketRepository):
        def find_by_predicate(self, predicate):
            return TicketModel.objects.filter(to_q(predicate))
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import TicketEntity, TicketState
from .predicates import Predicate


@runtime_checkable
class TicketRepository(Protocol):
    """
    Interface para persistência de Tickets.

    Implementações:
    - DjangoTicketRepository (PostgreSQL/SQLite via ORM)
    - InMemoryTicketRepository (para testes)

    Methods:
        save: Persiste ticket (create ou replace pelo ticket_id)
        get_by_id: Busca por ID
        delete: Remove ticket
        list_all: Lista todos
        find_by_predicate: Busca pela conjunção de restrições
    """

    def save(self, ticket: TicketEntity) -> TicketEntity:
        """
        Persiste ticket no repositório.

        Se ticket_id já existe, sobrescreve. Caso contrário, cria novo.

        Returns:
            Entidade persistida
        """
        ...

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        """
        Busca ticket por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def delete(self, ticket_id: int) -> None:
        """Remove ticket do repositório. Não lança erro se não existir."""
        ...

    def list_all(self) -> List[TicketEntity]:
        """Lista todos os tickets."""
        ...

    def find_by_predicate(self, predicate: Predicate) -> List[TicketEntity]:
        """
        Busca tickets que satisfazem o predicado.

        O filtro deve ser executado pelo store; implementações não
        devem carregar todos os tickets para filtrar em memória.

        Args:
            predicate: Conjunção de restrições de igualdade

        Returns:
            Lista de tickets (sem ordenação garantida)
        """
        ...


class InMemoryTicketRepository:
    """
    Implementação em memória do TicketRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!

    Example:
        repo = InMemoryTicketRepository()
        repo.save(ticket)
        found = repo.get_by_id(ticket.ticket_id)
    """

    def __init__(self):
        self._tickets: Dict[int, TicketEntity] = {}

    def save(self, ticket: TicketEntity) -> TicketEntity:
        """Salva ticket em memória."""
        ticket.state = TicketState.ACTIVE
        self._tickets[ticket.ticket_id] = ticket
        return ticket

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        """Busca ticket por ID."""
        return self._tickets.get(ticket_id)

    def delete(self, ticket_id: int) -> None:
        """Remove ticket."""
        self._tickets.pop(ticket_id, None)

    def list_all(self) -> List[TicketEntity]:
        """Lista todos os tickets."""
        return list(self._tickets.values())

    def find_by_predicate(self, predicate: Predicate) -> List[TicketEntity]:
        """Filtra pelo predicado."""
        return [t for t in self._tickets.values() if predicate.matches(t)]

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._tickets.clear()
