"""
API Views JSON para o domínio de viagens.

RESTful API para clientes, pacotes e tickets.

Endpoints:
- GET /customers - Listar clientes
- GET /customers/<id> - Obter cliente
- PUT /customers/signup - Cadastrar cliente
- DELETE /customers/<id> - Remover cliente
- GET /packages - Listar pacotes
- GET /packages/<id> - Obter pacote
- POST /packages - Cadastrar pacote
- GET /tickets - Listar tickets
- PUT /tickets/create - Criar ticket
- PUT /tickets/update - Atualizar ticket
- POST /tickets/search - Buscar tickets
- DELETE /tickets/<id> - Cancelar ticket (reembolso)
- GET /health - Health check

Formato:
- Entrada: JSON
- Saída: JSON no formato do recurso (sem envelope)
- Erros: lista [{field, message}] para validação, {message} nos demais
"""

import json
import logging
from typing import Any, Dict

from django.views import View
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    ValidationFailuresError,
    RequestShapeError,
    EntityNotFoundError,
    AlreadyExistsError,
)
from src.core.travels.mapper import TravelMapper
from src.core.travels.resources import (
    CustomerSignUp,
    PackageDetailsResource,
    SearchCriteriaResource,
    TicketRequest,
)
from src.config.container import get_container

from .forms import (
    CustomerSignUpForm,
    PackageDetailsForm,
    SearchTicketForm,
    TicketRequestForm,
)

logger = logging.getLogger(__name__)

MALFORMED_JSON_MESSAGE = "Malformed JSON request"
INTERNAL_ERROR_MESSAGE = "Internal server error"


# =============================================================================
# Helpers
# =============================================================================

def json_response(payload: Any, status: int = 200) -> JsonResponse:
    """
    Cria resposta JSON com o recurso serializado.

    Args:
        payload: Dicionário ou lista já serializados
        status: HTTP status code

    Returns:
        JsonResponse formatada
    """
    return JsonResponse(payload, status=status, safe=False)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Args:
        request: HTTP request

    Returns:
        Dicionário com dados (vazio se body vazio)

    Raises:
        RequestShapeError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug(f"Malformed JSON body: {e}")
        raise RequestShapeError(MALFORMED_JSON_MESSAGE)

    if not isinstance(data, dict):
        raise RequestShapeError(MALFORMED_JSON_MESSAGE)

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        container = self.get_container()
        return getattr(container, service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduz exceções para respostas HTTP.

        Única borda de tradução de erros da API.

        Args:
            e: Exceção capturada

        Returns:
            JsonResponse com erro
        """
        if isinstance(e, ValidationFailuresError):
            return json_response(e.to_list(), status=400)

        if isinstance(e, RequestShapeError):
            return json_response(e.to_dict(), status=400)

        if isinstance(e, EntityNotFoundError):
            return json_response(e.to_dict(), status=404)

        if isinstance(e, AlreadyExistsError):
            return json_response(e.to_dict(), status=409)

        # Erro inesperado
        logger.exception(f"Unexpected API error: {e}")
        return json_response({'message': INTERNAL_ERROR_MESSAGE}, status=500)


# =============================================================================
# Customer API Views
# =============================================================================

class CustomerListView(BaseAPIView):
    """GET /customers - Lista clientes."""

    def get(self, request: HttpRequest) -> JsonResponse:
        customers = self.get_service('list_customers_service').execute()
        return json_response(
            [TravelMapper.to_customer_details(c).to_dict() for c in customers]
        )


class CustomerSignUpView(BaseAPIView):
    """
    PUT /customers/signup - Cadastra (ou substitui) cliente.

    Body JSON:
    {
        "customerId": 123,
        "firstName": "string",
        "lastName": "string",
        "email": "string",
        "password": "string"
    }
    """

    def put(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)

        cleaned = CustomerSignUpForm(data=data).validate()

        customer = TravelMapper.to_customer_entity(CustomerSignUp.from_dict(cleaned))
        saved = self.get_service('sign_up_customer_service').execute(customer)

        logger.info(f"API: Customer signed up: {saved.customer_id}")
        return json_response(TravelMapper.to_sign_up_request(saved).to_dict())


class CustomerDetailView(BaseAPIView):
    """
    GET /customers/<id> - Obtém cliente
    DELETE /customers/<id> - Remove cliente (idempotente)
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        customer = self.get_service('get_customer_service').execute(pk)
        return json_response(TravelMapper.to_customer_details(customer).to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('delete_customer_service').execute(pk)
        return HttpResponse(status=204)


# =============================================================================
# Package API Views
# =============================================================================

class PackageListView(BaseAPIView):
    """
    GET /packages - Lista pacotes
    POST /packages - Cadastra pacote (409 se id já existe)
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        packages = self.get_service('list_packages_service').execute()
        return json_response(
            [TravelMapper.to_package_details(p).to_dict() for p in packages]
        )

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "id": 999,
            "packageName": "string",
            "tripDuration": "2 Days",
            "costPerPerson": 1500
        }
        """
        data = self.parse_body(request)

        cleaned = PackageDetailsForm(data=data).validate()

        package = TravelMapper.to_package_entity(PackageDetailsResource.from_dict(cleaned))
        saved = self.get_service('add_package_service').execute(package)

        logger.info(f"API: Package added: {saved.id}")
        return json_response(TravelMapper.to_package_details(saved).to_dict(), status=201)


class PackageDetailView(BaseAPIView):
    """GET /packages/<id> - Obtém pacote."""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        package = self.get_service('get_package_service').execute(pk)
        return json_response(TravelMapper.to_package_details(package).to_dict())


# =============================================================================
# Ticket API Views
# =============================================================================

class TicketListView(BaseAPIView):
    """GET /tickets - Lista tickets com custo total."""

    def get(self, request: HttpRequest) -> JsonResponse:
        tickets = self.get_service('list_tickets_service').execute()
        return json_response(
            [TravelMapper.to_ticket_resource(t).to_dict() for t in tickets]
        )


class TicketWriteView(BaseAPIView):
    """
    Base para criação/atualização de ticket.

    Body JSON:
    {
        "ticketId": "987",
        "customerId": "123",
        "packageId": "999",
        "travelDate": "yyyy-MM-dd",
        "totalMembers": "2"
    }
    """

    service_name: str = ''

    def put(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)

        cleaned = TicketRequestForm(data=data).validate()

        ticket = TravelMapper.to_ticket_entity(TicketRequest.from_dict(cleaned))
        saved = self.get_service(self.service_name).execute(ticket)

        return json_response(TravelMapper.to_ticket_request(saved).to_dict())


class TicketCreateView(TicketWriteView):
    """PUT /tickets/create - Cria (ou substitui) ticket."""

    service_name = 'create_ticket_service'


class TicketUpdateView(TicketWriteView):
    """PUT /tickets/update - Atualiza ticket existente."""

    service_name = 'update_ticket_service'


class TicketSearchView(BaseAPIView):
    """
    POST /tickets/search - Busca tickets.

    Body JSON (pelo menos um critério):
    {
        "customerId": "123",
        "packageId": "999",
        "travelDate": "yyyy-MM-dd"
    }
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)

        cleaned = SearchTicketForm(data=data).validate()

        criteria = TravelMapper.to_search_criteria(SearchCriteriaResource.from_dict(cleaned))
        matches = self.get_service('search_tickets_service').execute(criteria)

        return json_response([
            TravelMapper.to_search_resource(m.ticket, m.customer, m.package).to_dict()
            for m in matches
        ])


class TicketCancelView(BaseAPIView):
    """DELETE /tickets/<id> - Cancela ticket e retorna reembolso."""

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        refund = self.get_service('cancel_ticket_service').execute(pk)

        logger.info(f"API: Ticket cancelled: {pk}")
        return json_response(refund.to_dict())


# =============================================================================
# Health
# =============================================================================

class HealthView(View):
    """GET /health - Health check."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return json_response({'status': 'ok'})
