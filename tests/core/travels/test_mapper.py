"""
Testes Unitários para o TravelMapper.

Coverage:
- Tickets: request ↔ entity, resource com custo total
- Busca: critérios e projeção com cliente/pacote
- Clientes e pacotes
- Datas yyyy-MM-dd e erros de entrada mal formada
"""

import pytest
from datetime import date

from src.core.customers.entities import CustomerEntity
from src.core.packages.entities import PackageEntity
from src.core.tickets.dtos import SearchCriteria
from src.core.tickets.entities import TicketEntity, TicketState
from src.core.travels.mapper import TravelMapper
from src.core.travels.resources import (
    CustomerSignUp,
    PackageDetailsResource,
    SearchCriteriaResource,
    TicketRequest,
)


@pytest.fixture
def ticket_request():
    return TicketRequest.from_dict({
        "ticketId": "987",
        "customerId": "123",
        "packageId": "999",
        "travelDate": "2030-12-15",
        "totalMembers": "2",
    })


@pytest.fixture
def customer():
    return CustomerEntity(
        customer_id=123,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password="secret",
    )


@pytest.fixture
def package():
    return PackageEntity(id=999, package_name="Goa Beach", trip_duration="2 Days", cost_per_person=1500)


class TestDates:

    def test_format_and_parse(self):
        assert TravelMapper.format_date(date(2030, 1, 5)) == "2030-01-05"
        assert TravelMapper.parse_date("2030-01-05") == date(2030, 1, 5)

    @pytest.mark.parametrize("value", ["2020-01-0123", "15/12/2030", "2030-02-30", "travelDate"])
    def test_parse_malformed_raises(self, value):
        with pytest.raises(ValueError):
            TravelMapper.parse_date(value)


class TestTicketMapping:

    def test_to_ticket_entity(self, ticket_request):
        ticket = TravelMapper.to_ticket_entity(ticket_request)

        assert ticket == TicketEntity(
            ticket_id=987,
            customer_id=123,
            package_id=999,
            travel_date=date(2030, 12, 15),
            total_members=2,
        )
        assert ticket.total_cost == 0
        assert ticket.state == TicketState.DRAFT

    def test_request_round_trip_is_identity(self, ticket_request):
        """to_ticket_request ∘ to_ticket_entity preserva o request."""
        ticket = TravelMapper.to_ticket_entity(ticket_request)

        assert TravelMapper.to_ticket_request(ticket) == ticket_request
        assert TravelMapper.to_ticket_entity(TravelMapper.to_ticket_request(ticket)) == ticket

    def test_numeric_json_values_are_accepted(self):
        request = TicketRequest.from_dict({
            "ticketId": 1, "customerId": 2, "packageId": 3,
            "travelDate": "2030-01-01", "totalMembers": 4,
        })

        assert TravelMapper.to_ticket_entity(request).total_members == 4

    def test_to_ticket_resource_carries_total_cost(self, ticket_request, package):
        ticket = TravelMapper.to_ticket_entity(ticket_request)
        ticket.price_with(package)

        assert TravelMapper.to_ticket_resource(ticket).to_dict() == {
            "ticketId": "987",
            "customerId": "123",
            "packageId": "999",
            "travelDate": "2030-12-15",
            "totalMembers": "2",
            "totalCost": 3000,
        }

    def test_malformed_id_raises(self):
        request = TicketRequest(ticket_id="abc", customer_id="1", package_id="1",
                                travel_date="2030-01-01", total_members="1")

        with pytest.raises(ValueError):
            TravelMapper.to_ticket_entity(request)

    def test_missing_id_raises(self):
        with pytest.raises(ValueError):
            TravelMapper.to_ticket_entity(TicketRequest(travel_date="2030-01-01"))


class TestSearchMapping:

    def test_to_search_criteria_parses_present_fields(self):
        resource = SearchCriteriaResource.from_dict({"customerId": "123", "travelDate": "2022-12-15"})

        assert TravelMapper.to_search_criteria(resource) == SearchCriteria(
            customer_id=123, travel_date=date(2022, 12, 15)
        )

    def test_blank_criteria_are_absent(self):
        resource = SearchCriteriaResource.from_dict({"customerId": " ", "packageId": None})

        assert TravelMapper.to_search_criteria(resource).is_empty()

    def test_to_search_resource(self, customer, package):
        ticket = TicketEntity(
            ticket_id=1, customer_id=123, package_id=999,
            travel_date=date(2030, 12, 15), total_members=2, total_cost=3000,
        )

        resource = TravelMapper.to_search_resource(ticket, customer, package)

        assert resource.to_dict() == {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "packageName": "Goa Beach",
            "tripDuration": "2 Days",
            "travelDate": "2030-12-15",
            "totalMembers": 2,
            "totalCostOfTrip": 3000,
        }

    def test_total_cost_of_trip_is_stored_cost(self, customer):
        """O custo da projeção é o armazenado, não recalculado."""
        ticket = TicketEntity(
            ticket_id=1, customer_id=123, package_id=999,
            travel_date=date(2030, 12, 15), total_members=2, total_cost=200,
        )
        repriced = PackageEntity(id=999, cost_per_person=5000)

        assert TravelMapper.to_search_resource(ticket, customer, repriced).total_cost_of_trip == 200

    def test_missing_references_produce_nulls(self):
        ticket = TicketEntity(
            ticket_id=1, customer_id=1, package_id=1,
            travel_date=date(2030, 12, 15), total_members=1,
        )

        data = TravelMapper.to_search_resource(ticket, None, None).to_dict()

        assert data["firstName"] is None
        assert data["packageName"] is None
        assert data["travelDate"] == "2030-12-15"


class TestCustomerAndPackageMapping:

    def test_customer_sign_up_round_trip(self, customer):
        sign_up = CustomerSignUp.from_dict({
            "customerId": 123,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "secret",
        })

        entity = TravelMapper.to_customer_entity(sign_up)

        assert entity == customer
        assert TravelMapper.to_sign_up_request(entity) == sign_up

    def test_customer_details(self, customer):
        assert TravelMapper.to_customer_details(customer).to_dict() == {
            "customerId": 123,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "secret",
        }

    def test_package_round_trip(self, package):
        resource = PackageDetailsResource.from_dict({
            "id": 999, "packageName": "Goa Beach", "tripDuration": "2 Days", "costPerPerson": 1500,
        })

        assert TravelMapper.to_package_entity(resource) == package
        assert TravelMapper.to_package_details(package).to_dict() == {
            "id": 999, "packageName": "Goa Beach", "tripDuration": "2 Days", "costPerPerson": 1500,
        }
