"""
Django Admin para o domínio de viagens.

Configuração do admin para gerenciamento de clientes, pacotes
e tickets via interface web. É também o caminho de manutenção
de pacotes (alteração/remoção), que a API não expõe.
"""

from django.contrib import admin

from .models import CustomerModel, PackageModel, TicketModel


@admin.register(CustomerModel)
class CustomerAdmin(admin.ModelAdmin):
    """Admin para CustomerModel."""

    list_display = [
        'customer_id',
        'first_name',
        'last_name',
        'email',
    ]

    search_fields = [
        'customer_id',
        'first_name',
        'last_name',
        'email',
    ]

    # Senha nunca aparece na listagem
    exclude = ['password']

    ordering = ['customer_id']


@admin.register(PackageModel)
class PackageAdmin(admin.ModelAdmin):
    """Admin para PackageModel."""

    list_display = [
        'id',
        'package_name',
        'trip_duration',
        'cost_per_person',
    ]

    search_fields = [
        'id',
        'package_name',
    ]

    ordering = ['id']


@admin.register(TicketModel)
class TicketAdmin(admin.ModelAdmin):
    """Admin para TicketModel."""

    list_display = [
        'ticket_id',
        'customer_id',
        'package_id',
        'travel_date',
        'total_members',
        'total_cost',
    ]

    list_filter = [
        'travel_date',
    ]

    search_fields = [
        'ticket_id',
        'customer_id',
        'package_id',
    ]

    # Custo é sempre calculado pelo serviço
    readonly_fields = [
        'total_cost',
    ]

    ordering = ['ticket_id']

    date_hierarchy = 'travel_date'
