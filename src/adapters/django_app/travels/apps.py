"""
Configuração do Django App para viagens.
"""

from django.apps import AppConfig


class TravelsConfig(AppConfig):
    """Configuração do app Travels (clientes, pacotes e tickets)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.travels'
    label = 'travels'
    verbose_name = 'Travel Bookings'
