"""
Resources (formato de transporte) da API de viagens.

Resources espelham exatamente o JSON trafegado na API (camelCase,
ids de ticket como string). Conversão entre Resource e Entidade
fica a cargo do TravelMapper.

Resources:
- TicketRequest / TicketResource: Entrada e saída de tickets
- SearchCriteriaResource / SearchTicketResource: Busca de tickets
- CustomerSignUp / CustomerDetailsResource: Clientes
- PackageDetailsResource: Pacotes
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _blank_to_none(value: Any) -> Optional[str]:
    text = _as_text(value)
    if text is None or not text.strip():
        return None
    return text.strip()


# =============================================================================
# TICKETS
# =============================================================================

@dataclass
class TicketRequest:
    """
    Corpo de criação/atualização de ticket.

    Ids e quantidade chegam como string; travel_date no formato yyyy-MM-dd.
    """

    ticket_id: Optional[str] = None
    customer_id: Optional[str] = None
    package_id: Optional[str] = None
    travel_date: Optional[str] = None
    total_members: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TicketRequest":
        return cls(
            ticket_id=_as_text(data.get("ticketId")),
            customer_id=_as_text(data.get("customerId")),
            package_id=_as_text(data.get("packageId")),
            travel_date=_as_text(data.get("travelDate")),
            total_members=_as_text(data.get("totalMembers")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticketId": self.ticket_id,
            "customerId": self.customer_id,
            "packageId": self.package_id,
            "travelDate": self.travel_date,
            "totalMembers": self.total_members,
        }


@dataclass
class TicketResource(TicketRequest):
    """TicketRequest acrescido do custo total calculado."""

    total_cost: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["totalCost"] = self.total_cost
        return data


@dataclass
class SearchCriteriaResource:
    """
    Critérios opcionais de busca.

    Strings vazias são tratadas como critério ausente.
    """

    customer_id: Optional[str] = None
    package_id: Optional[str] = None
    travel_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchCriteriaResource":
        return cls(
            customer_id=_blank_to_none(data.get("customerId")),
            package_id=_blank_to_none(data.get("packageId")),
            travel_date=_blank_to_none(data.get("travelDate")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "packageId": self.package_id,
            "travelDate": self.travel_date,
        }


@dataclass
class SearchTicketResource:
    """
    Projeção de um ticket encontrado na busca.

    Campos de cliente/pacote ficam None quando o registro
    referenciado não existe.
    """

    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    package_name: Optional[str]
    trip_duration: Optional[str]
    travel_date: str
    total_members: int
    total_cost_of_trip: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "packageName": self.package_name,
            "tripDuration": self.trip_duration,
            "travelDate": self.travel_date,
            "totalMembers": self.total_members,
            "totalCostOfTrip": self.total_cost_of_trip,
        }


# =============================================================================
# CUSTOMERS
# =============================================================================

@dataclass
class CustomerSignUp:
    """Corpo de cadastro de cliente."""

    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomerSignUp":
        return cls(
            customer_id=data.get("customerId"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            email=data.get("email"),
            password=data.get("password"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "password": self.password,
        }


@dataclass
class CustomerDetailsResource(CustomerSignUp):
    """Detalhes de cliente retornados pela API."""


# =============================================================================
# PACKAGES
# =============================================================================

@dataclass
class PackageDetailsResource:
    """Detalhes de pacote (entrada e saída)."""

    id: Optional[int] = None
    package_name: Optional[str] = None
    trip_duration: Optional[str] = None
    cost_per_person: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PackageDetailsResource":
        return cls(
            id=data.get("id"),
            package_name=data.get("packageName"),
            trip_duration=data.get("tripDuration"),
            cost_per_person=data.get("costPerPerson"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "packageName": self.package_name,
            "tripDuration": self.trip_duration,
            "costPerPerson": self.cost_per_person,
        }
