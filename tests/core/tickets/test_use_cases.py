"""
Testes Unitários para Use Cases do Domínio de Tickets.

Testa os serviços de aplicação (use cases) que orquestram
a lógica de negócio do domínio de tickets.

Estratégia de Teste:
- Usa repositórios InMemory (fakes) para isolamento
- Usa InMemoryUnitOfWork para verificar commit/rollback
- Testa cenários de sucesso e erro

Coverage:
- CreateTicketService
- UpdateTicketService
- ListTicketsService
- SearchTicketsService
- CancelTicketService
"""

import pytest
from datetime import date, timedelta
from unittest.mock import Mock

from src.core.customers.entities import CustomerEntity
from src.core.customers.ports import InMemoryCustomerRepository
from src.core.packages.entities import PackageEntity
from src.core.packages.ports import InMemoryPackageRepository
from src.core.shared.exceptions import EntityNotFoundError, RequestShapeError
from src.core.shared.interfaces import InMemoryUnitOfWork
from src.core.tickets.dtos import SearchCriteria, TicketRefundDTO
from src.core.tickets.entities import TicketEntity, TicketState
from src.core.tickets.ports import InMemoryTicketRepository
from src.core.tickets.predicates import And
from src.core.tickets.use_cases import (
    CreateTicketService,
    UpdateTicketService,
    ListTicketsService,
    SearchTicketsService,
    CancelTicketService,
    MISSING_SEARCH_CRITERIA_MESSAGE,
)

TRAVEL_DATE = date.today() + timedelta(days=30)


def make_ticket(ticket_id=987, customer_id=123, package_id=999, total_members=2, travel_date=TRAVEL_DATE):
    return TicketEntity(
        ticket_id=ticket_id,
        customer_id=customer_id,
        package_id=package_id,
        travel_date=travel_date,
        total_members=total_members,
    )


@pytest.fixture
def ticket_repo():
    """Fixture para repositório em memória."""
    return InMemoryTicketRepository()


@pytest.fixture
def package_repo():
    repo = InMemoryPackageRepository()
    repo.save(PackageEntity(id=999, package_name="Goa Beach", trip_duration="2 Days", cost_per_person=1500))
    repo.save(PackageEntity(id=888, package_name="Kerala", trip_duration="5 Days", cost_per_person=100))
    return repo


@pytest.fixture
def customer_repo():
    repo = InMemoryCustomerRepository()
    repo.save(CustomerEntity(
        customer_id=123,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password="secret",
    ))
    return repo


@pytest.fixture
def uow():
    """Fixture para Unit of Work em memória."""
    return InMemoryUnitOfWork()


@pytest.fixture
def create_service(ticket_repo, customer_repo, package_repo, uow):
    return CreateTicketService(ticket_repo, customer_repo, package_repo, uow)


class TestCreateTicketService:
    """Testes para CreateTicketService."""

    def test_create_computes_total_cost(self, create_service, ticket_repo, uow):
        """Custo total = membros × custo por pessoa do pacote."""
        saved = create_service.execute(make_ticket(total_members=2))

        assert saved.total_cost == 3000
        assert saved.state == TicketState.ACTIVE
        assert ticket_repo.get_by_id(987).total_cost == 3000
        assert uow.committed

    def test_create_with_zero_members(self, create_service):
        saved = create_service.execute(make_ticket(total_members=0))

        assert saved.total_cost == 0

    def test_create_with_unknown_package_fails(self, create_service, ticket_repo, uow):
        """Pacote inexistente gera NotFound e nada é persistido."""
        with pytest.raises(EntityNotFoundError) as exc_info:
            create_service.execute(make_ticket(package_id=404))

        assert exc_info.value.message == "Package with id: 404 not found"
        assert exc_info.value.entity_type == "Package"
        assert ticket_repo.get_by_id(987) is None
        assert uow.rolled_back

    def test_create_with_unknown_customer_fails(self, create_service, ticket_repo, uow):
        """Ticket não existe sem cliente correspondente."""
        with pytest.raises(EntityNotFoundError) as exc_info:
            create_service.execute(make_ticket(customer_id=555))

        assert exc_info.value.message == "Customer with id: 555 not found"
        assert exc_info.value.entity_type == "Customer"
        assert ticket_repo.get_by_id(987) is None
        assert uow.rolled_back

    def test_create_overwrites_existing_ticket_id(self, create_service, ticket_repo):
        """Mesmo ticket_id substitui o ticket anterior."""
        create_service.execute(make_ticket(total_members=1))
        create_service.execute(make_ticket(total_members=3, package_id=888))

        stored = ticket_repo.get_by_id(987)
        assert stored.package_id == 888
        assert stored.total_cost == 300
        assert len(ticket_repo.list_all()) == 1

    def test_repository_errors_propagate(self, customer_repo, package_repo, uow):
        """Erros do repositório propagam sem alteração."""
        failing_repo = Mock()
        failing_repo.save.side_effect = RuntimeError("connection lost")
        service = CreateTicketService(failing_repo, customer_repo, package_repo, uow)

        with pytest.raises(RuntimeError, match="connection lost"):
            service.execute(make_ticket())

        assert uow.rolled_back


class TestUpdateTicketService:
    """Testes para UpdateTicketService."""

    def test_update_recomputes_cost(self, create_service, ticket_repo, customer_repo, package_repo, uow):
        create_service.execute(make_ticket(total_members=2))
        service = UpdateTicketService(ticket_repo, customer_repo, package_repo, uow)

        updated = service.execute(make_ticket(total_members=4))

        assert updated.total_cost == 6000
        assert ticket_repo.get_by_id(987).total_cost == 6000

    def test_repeated_updates_keep_last_state(self, create_service, ticket_repo, customer_repo, package_repo, uow):
        """Estado final é o da última atualização bem sucedida."""
        create_service.execute(make_ticket(total_members=1))
        service = UpdateTicketService(ticket_repo, customer_repo, package_repo, uow)

        service.execute(make_ticket(total_members=2))
        service.execute(make_ticket(total_members=5, package_id=888))
        with pytest.raises(EntityNotFoundError):
            service.execute(make_ticket(total_members=9, package_id=404))

        stored = ticket_repo.get_by_id(987)
        assert stored.total_members == 5
        assert stored.package_id == 888
        assert stored.total_cost == 500

    def test_update_unknown_ticket_fails(self, ticket_repo, customer_repo, package_repo, uow):
        service = UpdateTicketService(ticket_repo, customer_repo, package_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(make_ticket(ticket_id=1))

        assert exc_info.value.message == "Ticket with id: 1 not found"
        assert ticket_repo.list_all() == []

    def test_update_with_unknown_package_fails(self, create_service, ticket_repo, customer_repo, package_repo, uow):
        create_service.execute(make_ticket())
        service = UpdateTicketService(ticket_repo, customer_repo, package_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(make_ticket(package_id=404))

        assert exc_info.value.entity_type == "Package"
        assert ticket_repo.get_by_id(987).package_id == 999

    def test_update_with_unknown_customer_fails(self, create_service, ticket_repo, customer_repo, package_repo, uow):
        create_service.execute(make_ticket())
        service = UpdateTicketService(ticket_repo, customer_repo, package_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(make_ticket(customer_id=555, total_members=4))

        assert exc_info.value.message == "Customer with id: 555 not found"
        assert ticket_repo.get_by_id(987).customer_id == 123
        assert ticket_repo.get_by_id(987).total_cost == 3000


class TestListTicketsService:

    def test_list_empty(self, ticket_repo):
        assert ListTicketsService(ticket_repo).execute() == []

    def test_list_returns_all(self, create_service, ticket_repo):
        create_service.execute(make_ticket(ticket_id=1))
        create_service.execute(make_ticket(ticket_id=2))

        tickets = ListTicketsService(ticket_repo).execute()

        assert sorted(t.ticket_id for t in tickets) == [1, 2]


class TestSearchTicketsService:
    """Testes para SearchTicketsService."""

    @pytest.fixture
    def service(self, ticket_repo, customer_repo, package_repo):
        return SearchTicketsService(ticket_repo, customer_repo, package_repo)

    @pytest.fixture
    def booked(self, create_service, customer_repo):
        customer_repo.save(CustomerEntity(customer_id=456, first_name="Alan", last_name="Turing"))
        create_service.execute(make_ticket(ticket_id=1, customer_id=123, package_id=999))
        create_service.execute(make_ticket(ticket_id=2, customer_id=123, package_id=888))
        create_service.execute(make_ticket(
            ticket_id=3, customer_id=456, package_id=999, travel_date=TRAVEL_DATE + timedelta(days=1)
        ))
        # Cliente removido após a reserva
        customer_repo.delete(456)

    def test_empty_criteria_fails(self, service):
        """Critérios vazios geram RequestShapeError, nunca lista vazia."""
        with pytest.raises(RequestShapeError) as exc_info:
            service.execute(SearchCriteria())

        assert exc_info.value.message == MISSING_SEARCH_CRITERIA_MESSAGE

    def test_search_by_customer(self, service, booked):
        matches = service.execute(SearchCriteria(customer_id=123))

        assert sorted(m.ticket.ticket_id for m in matches) == [1, 2]

    def test_search_combines_criteria_with_and(self, service, booked):
        matches = service.execute(SearchCriteria(customer_id=123, package_id=999, travel_date=TRAVEL_DATE))

        assert [m.ticket.ticket_id for m in matches] == [1]

    def test_search_by_travel_date(self, service, booked):
        matches = service.execute(SearchCriteria(travel_date=TRAVEL_DATE + timedelta(days=1)))

        assert [m.ticket.ticket_id for m in matches] == [3]

    def test_search_without_matches_returns_empty_list(self, service, booked):
        assert service.execute(SearchCriteria(package_id=12345)) == []

    def test_search_joins_customer_and_package(self, service, booked):
        match = service.execute(SearchCriteria(customer_id=123, package_id=999))[0]

        assert match.customer.email == "ada@example.com"
        assert match.package.package_name == "Goa Beach"
        assert match.ticket.total_cost == 3000

    def test_missing_customer_is_none(self, service, booked):
        """Cliente removido após a reserva não impede a busca."""
        match = service.execute(SearchCriteria(customer_id=456))[0]

        assert match.customer is None
        assert match.package.id == 999

    def test_predicate_is_executed_by_repository(self, customer_repo, package_repo):
        """O filtro é delegado ao repositório em uma única chamada."""
        ticket_repo = Mock()
        ticket_repo.find_by_predicate.return_value = []
        service = SearchTicketsService(ticket_repo, customer_repo, package_repo)

        service.execute(SearchCriteria(customer_id=123, package_id=999))

        ticket_repo.find_by_predicate.assert_called_once()
        predicate = ticket_repo.find_by_predicate.call_args[0][0]
        assert isinstance(predicate, And)
        assert len(predicate.clauses) == 2
        ticket_repo.list_all.assert_not_called()

    def test_references_are_looked_up_once_per_request(self, booked, ticket_repo, package_repo):
        customer_repo = Mock()
        customer_repo.get_by_id.return_value = None
        service = SearchTicketsService(ticket_repo, customer_repo, package_repo)

        matches = service.execute(SearchCriteria(customer_id=123))

        assert len(matches) == 2
        customer_repo.get_by_id.assert_called_once_with(123)


class TestCancelTicketService:
    """Testes para CancelTicketService."""

    def test_cancel_returns_refund_of_total_cost(self, create_service, ticket_repo, uow):
        """Reembolso = custo total do ticket criado."""
        created = create_service.execute(make_ticket(total_members=2))
        service = CancelTicketService(ticket_repo, uow)

        refund = service.execute(987)

        assert refund == TicketRefundDTO(refund_amount=created.total_cost)
        assert refund.to_dict() == {"refundAmount": 3000}
        assert ticket_repo.get_by_id(987) is None

    def test_cancel_unknown_ticket_fails(self, ticket_repo, uow):
        service = CancelTicketService(ticket_repo, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(42)

        assert exc_info.value.message == "Ticket with id: 42 not found"

    def test_cancelled_ticket_id_can_be_reused(self, create_service, ticket_repo, uow):
        create_service.execute(make_ticket())
        CancelTicketService(ticket_repo, uow).execute(987)

        recreated = create_service.execute(make_ticket(total_members=1))

        assert recreated.state == TicketState.ACTIVE
        assert ticket_repo.get_by_id(987).total_cost == 1500
