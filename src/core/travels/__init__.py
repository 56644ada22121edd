"""
Recursos da API de viagens e mapeamento Resource ↔ Entidade.
"""

from .resources import (
    TicketRequest,
    TicketResource,
    SearchCriteriaResource,
    SearchTicketResource,
    CustomerSignUp,
    CustomerDetailsResource,
    PackageDetailsResource,
)
from .mapper import TravelMapper, DATE_FORMAT

__all__ = [
    "TicketRequest",
    "TicketResource",
    "SearchCriteriaResource",
    "SearchTicketResource",
    "CustomerSignUp",
    "CustomerDetailsResource",
    "PackageDetailsResource",
    "TravelMapper",
    "DATE_FORMAT",
]
