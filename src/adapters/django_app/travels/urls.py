"""
URL patterns para o domínio de viagens.

Endpoints API JSON (sem barra final):
- GET /customers - Listar clientes
- PUT /customers/signup - Cadastrar cliente
- GET|DELETE /customers/<id> - Obter/remover cliente
- GET|POST /packages - Listar/cadastrar pacotes
- GET /packages/<id> - Obter pacote
- GET /tickets - Listar tickets
- PUT /tickets/create - Criar ticket
- PUT /tickets/update - Atualizar ticket
- POST /tickets/search - Buscar tickets
- DELETE /tickets/<id> - Cancelar ticket
- GET /health - Health check
"""

from django.urls import path, register_converter
from . import api_views
from .forms import BIGINT_MAX


class ColumnIdConverter:
    """Inteiro não negativo que cabe numa coluna BigIntegerField."""

    regex = "[0-9]+"

    def to_python(self, value):
        number = int(value)
        if number > BIGINT_MAX:
            # ValueError faz a rota não casar (404)
            raise ValueError(value)
        return number

    def to_url(self, value):
        return str(value)


register_converter(ColumnIdConverter, "id")

app_name = 'travels'

urlpatterns = [
    # =========================================================================
    # Customers
    # =========================================================================

    path('customers', api_views.CustomerListView.as_view(), name='customer_list'),

    # Cadastro (antes do <pk> para não conflitar)
    path('customers/signup', api_views.CustomerSignUpView.as_view(), name='customer_signup'),

    path('customers/<id:pk>', api_views.CustomerDetailView.as_view(), name='customer_detail'),

    # =========================================================================
    # Packages
    # =========================================================================

    path('packages', api_views.PackageListView.as_view(), name='package_list'),
    path('packages/<id:pk>', api_views.PackageDetailView.as_view(), name='package_detail'),

    # =========================================================================
    # Tickets
    # =========================================================================

    path('tickets', api_views.TicketListView.as_view(), name='ticket_list'),
    path('tickets/create', api_views.TicketCreateView.as_view(), name='ticket_create'),
    path('tickets/update', api_views.TicketUpdateView.as_view(), name='ticket_update'),
    path('tickets/search', api_views.TicketSearchView.as_view(), name='ticket_search'),
    path('tickets/<id:pk>', api_views.TicketCancelView.as_view(), name='ticket_cancel'),

    # =========================================================================
    # Health
    # =========================================================================

    path('health', api_views.HealthView.as_view(), name='health'),
]
