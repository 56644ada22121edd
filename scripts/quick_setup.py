#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria clientes, pacotes e tickets de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import timedelta

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """
    Cria dados de exemplo usando os Use Cases.

    Tickets passam pelo CreateTicketService, portanto o custo
    total é calculado a partir do pacote.
    """
    from django.utils import timezone

    from src.config.container import get_container
    from src.core.customers.entities import CustomerEntity
    from src.core.packages.entities import PackageEntity
    from src.core.tickets.entities import TicketEntity

    container = get_container()
    today = timezone.localdate()

    sample_customers = [
        CustomerEntity(123, 'Ada', 'Lovelace', 'ada@example.com', 'ada-secret'),
        CustomerEntity(456, 'Alan', 'Turing', 'alan@example.com', 'alan-secret'),
    ]

    sample_packages = [
        PackageEntity(999, 'Goa Beach', '2 Days', 1500),
        PackageEntity(888, 'Kerala Backwaters', '5 Days', 100),
    ]

    sample_tickets = [
        TicketEntity(987, 123, 999, today + timedelta(days=30), 2),
        TicketEntity(988, 123, 888, today + timedelta(days=60), 4),
        TicketEntity(989, 456, 999, today + timedelta(days=30), 1),
    ]

    print("📝 Criando clientes de exemplo...")
    sign_up = container.sign_up_customer_service()
    for customer in sample_customers:
        sign_up.execute(customer)
        print(f"   ✓ {customer.full_name}")

    print("📝 Criando pacotes de exemplo...")
    list_packages = container.list_packages_service()
    existing = {package.id for package in list_packages.execute()}
    add_package = container.add_package_service()
    for package in sample_packages:
        if package.id in existing:
            print(f"   - {package.package_name} (já existe)")
            continue
        add_package.execute(package)
        print(f"   ✓ {package.package_name}")

    print("📝 Criando tickets de exemplo...")
    create_ticket = container.create_ticket_service()
    for ticket in sample_tickets:
        saved = create_ticket.execute(ticket)
        print(f"   ✓ Ticket {saved.ticket_id}: {saved.travel_date} (custo {saved.total_cost})")

    print(f"✅ {len(sample_tickets)} tickets criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Time Zone: {settings.TIME_ZONE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/tickets")
    print("   4. Acesse: http://localhost:8000/health")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Travels Booking - Quick Setup")
    print("=" * 60 + "\n")

    # Configurar Django
    setup_django()

    if args.check_only:
        check_connection()
        return

    # Verificar conexão
    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///db.sqlite3")
        return

    # Executar migrations
    run_migrations()

    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()

    # Mostrar informações
    show_info()


if __name__ == '__main__':
    main()
