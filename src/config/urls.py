"""
URL Configuration para o Travels Booking.

Estrutura:
- /admin/ - Django Admin
- /customers, /packages, /tickets, /health - API JSON
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API de viagens (rotas na raiz, sem barra final)
    path('', include('src.adapters.django_app.travels.urls')),
]
