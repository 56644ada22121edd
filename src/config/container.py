"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Benefícios:
- Dependências explícitas
- Testabilidade (fácil trocar por InMemory)
- Lazy-loading (criado sob demanda)

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services, UoW)
"""

from dependency_injector import containers, providers
from typing import Optional

from src.core.shared.interfaces import InMemoryUnitOfWork
from src.core.customers.ports import InMemoryCustomerRepository
from src.core.customers.use_cases import (
    ListCustomersService,
    GetCustomerService,
    SignUpCustomerService,
    DeleteCustomerService,
)
from src.core.packages.ports import InMemoryPackageRepository
from src.core.packages.use_cases import (
    ListPackagesService,
    GetPackageService,
    AddPackageService,
)
from src.core.tickets.ports import InMemoryTicketRepository
from src.core.tickets.use_cases import (
    CreateTicketService,
    UpdateTicketService,
    ListTicketsService,
    SearchTicketsService,
    CancelTicketService,
)


def _django_repository(name: str):
    # Import tardio: models só podem ser importados com o app registry pronto
    return getattr(
        __import__('src.adapters.django_app.travels.repositories', fromlist=[name]),
        name,
    )()


def _django_unit_of_work():
    return __import__(
        'src.adapters.django_app.shared.unit_of_work',
        fromlist=['DjangoUnitOfWork']
    ).DjangoUnitOfWork()


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.create_ticket_service()
        ticket = service.execute(ticket_entity)
    """

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    customer_repository = providers.Singleton(_django_repository, 'DjangoCustomerRepository')

    package_repository = providers.Singleton(_django_repository, 'DjangoPackageRepository')

    ticket_repository = providers.Singleton(_django_repository, 'DjangoTicketRepository')

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(_django_unit_of_work)

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    # Customers
    list_customers_service = providers.Factory(
        ListCustomersService,
        customer_repo=customer_repository,
    )

    get_customer_service = providers.Factory(
        GetCustomerService,
        customer_repo=customer_repository,
    )

    sign_up_customer_service = providers.Factory(
        SignUpCustomerService,
        customer_repo=customer_repository,
        uow=unit_of_work,
    )

    delete_customer_service = providers.Factory(
        DeleteCustomerService,
        customer_repo=customer_repository,
        uow=unit_of_work,
    )

    # Packages
    list_packages_service = providers.Factory(
        ListPackagesService,
        package_repo=package_repository,
    )

    get_package_service = providers.Factory(
        GetPackageService,
        package_repo=package_repository,
    )

    add_package_service = providers.Factory(
        AddPackageService,
        package_repo=package_repository,
        uow=unit_of_work,
    )

    # Tickets
    create_ticket_service = providers.Factory(
        CreateTicketService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        package_repo=package_repository,
        uow=unit_of_work,
    )

    update_ticket_service = providers.Factory(
        UpdateTicketService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        package_repo=package_repository,
        uow=unit_of_work,
    )

    # Listar Tickets (sem UoW - leitura)
    list_tickets_service = providers.Factory(
        ListTicketsService,
        ticket_repo=ticket_repository,
    )

    search_tickets_service = providers.Factory(
        SearchTicketsService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        package_repo=package_repository,
    )

    cancel_ticket_service = providers.Factory(
        CancelTicketService,
        ticket_repo=ticket_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def set_container(container: Container) -> None:
    """
    Substitui o container global (usado em testes).

    Args:
        container: Container a ser usado pelas views
    """
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def create_testing_container() -> Container:
    """
    Container para testes com implementações InMemory.

    Repositórios e Unit of Work são sobrescritos; os services
    continuam os mesmos do container principal.

    Example:
        container = create_testing_container()
        container.package_repository().save(package)
        service = container.create_ticket_service()
    """
    container = Container()

    container.customer_repository.override(
        providers.Singleton(InMemoryCustomerRepository)
    )
    container.package_repository.override(
        providers.Singleton(InMemoryPackageRepository)
    )
    container.ticket_repository.override(
        providers.Singleton(InMemoryTicketRepository)
    )
    container.unit_of_work.override(
        providers.Factory(InMemoryUnitOfWork)
    )

    return container
