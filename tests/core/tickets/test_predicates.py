"""
Testes Unitários para os predicados de busca de Tickets.

Coverage:
- Eq / And: composição com `&` e avaliação em memória
- build_ticket_predicate: um Eq por critério presente
- SearchCriteria.is_empty
"""

from datetime import date

from src.core.tickets.dtos import SearchCriteria
from src.core.tickets.entities import TicketEntity
from src.core.tickets.predicates import And, Eq, TicketField, build_ticket_predicate


def make_ticket(ticket_id=1, customer_id=123, package_id=999, travel_date=date(2030, 12, 15)):
    return TicketEntity(
        ticket_id=ticket_id,
        customer_id=customer_id,
        package_id=package_id,
        travel_date=travel_date,
        total_members=1,
    )


class TestComposition:

    def test_eq_and_eq_builds_flat_conjunction(self):
        predicate = Eq(TicketField.CUSTOMER_ID, 1) & Eq(TicketField.PACKAGE_ID, 2)

        assert isinstance(predicate, And)
        assert predicate.clauses == (
            Eq(TicketField.CUSTOMER_ID, 1),
            Eq(TicketField.PACKAGE_ID, 2),
        )

    def test_and_and_merges_clauses(self):
        left = And((Eq(TicketField.CUSTOMER_ID, 1),))
        right = And((Eq(TicketField.PACKAGE_ID, 2), Eq(TicketField.TRAVEL_DATE, date(2030, 1, 1))))

        assert len((left & right).clauses) == 3

    def test_empty_and_is_empty(self):
        assert And().is_empty()
        assert not And((Eq(TicketField.CUSTOMER_ID, 1),)).is_empty()

    def test_predicates_are_values(self):
        assert Eq(TicketField.CUSTOMER_ID, 1) == Eq(TicketField.CUSTOMER_ID, 1)
        assert hash(Eq(TicketField.CUSTOMER_ID, 1)) == hash(Eq(TicketField.CUSTOMER_ID, 1))


class TestMatching:

    def test_eq_matches_field(self):
        ticket = make_ticket(customer_id=123)

        assert Eq(TicketField.CUSTOMER_ID, 123).matches(ticket)
        assert not Eq(TicketField.CUSTOMER_ID, 124).matches(ticket)

    def test_and_requires_all_clauses(self):
        ticket = make_ticket(customer_id=123, package_id=999)

        assert (Eq(TicketField.CUSTOMER_ID, 123) & Eq(TicketField.PACKAGE_ID, 999)).matches(ticket)
        assert not (Eq(TicketField.CUSTOMER_ID, 123) & Eq(TicketField.PACKAGE_ID, 1)).matches(ticket)

    def test_travel_date_compares_dates(self):
        ticket = make_ticket(travel_date=date(2030, 12, 15))

        assert Eq(TicketField.TRAVEL_DATE, date(2030, 12, 15)).matches(ticket)


class TestBuildTicketPredicate:
    """Critérios ausentes não geram restrição."""

    def test_single_criterion(self):
        predicate = build_ticket_predicate(SearchCriteria(customer_id=123))

        assert predicate.clauses == (Eq(TicketField.CUSTOMER_ID, 123),)

    def test_all_criteria_in_field_order(self):
        criteria = SearchCriteria(customer_id=123, package_id=987, travel_date=date(2022, 12, 15))

        predicate = build_ticket_predicate(criteria)

        assert [clause.field for clause in predicate] == [
            TicketField.CUSTOMER_ID,
            TicketField.PACKAGE_ID,
            TicketField.TRAVEL_DATE,
        ]

    def test_zero_is_a_present_criterion(self):
        predicate = build_ticket_predicate(SearchCriteria(package_id=0))

        assert predicate.clauses == (Eq(TicketField.PACKAGE_ID, 0),)

    def test_empty_criteria_builds_empty_predicate(self):
        criteria = SearchCriteria()

        assert criteria.is_empty()
        assert build_ticket_predicate(criteria).is_empty()
