"""
Use Cases (Application Services) do Domínio de Pacotes.

Use Cases implementados:
- ListPackagesService: Lista pacotes
- GetPackageService: Obtém pacote por ID
- AddPackageService: Cadastra novo pacote (rejeita ID duplicado)
"""

import logging
from typing import List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import AlreadyExistsError, EntityNotFoundError

from .entities import PackageEntity
from .ports import PackageRepository

logger = logging.getLogger(__name__)


class ListPackagesService:
    """
    Use Case: Listar pacotes disponíveis.
    """

    def __init__(self, package_repo: PackageRepository):
        self.package_repo = package_repo

    def execute(self) -> List[PackageEntity]:
        return self.package_repo.list_all()


class GetPackageService:
    """
    Use Case: Obter detalhes de um pacote.
    """

    def __init__(self, package_repo: PackageRepository):
        self.package_repo = package_repo

    def execute(self, package_id: int) -> PackageEntity:
        """
        Obtém pacote por ID.

        Raises:
            EntityNotFoundError: Se pacote não existe
        """
        package = self.package_repo.get_by_id(package_id)

        if not package:
            raise EntityNotFoundError.for_entity("Package", package_id)

        return package


class AddPackageService:
    """
    Use Case: Cadastrar novo pacote.

    Fluxo:
    1. Verificar se já existe pacote com o mesmo ID
    2. Persistir pacote

    Example:
        service = AddPackageService(package_repo, uow)
        service.execute(PackageEntity(id=123, package_name="Goa", ...))
    """

    def __init__(self, package_repo: PackageRepository, uow: UnitOfWork):
        self.package_repo = package_repo
        self.uow = uow

    def execute(self, package: PackageEntity) -> PackageEntity:
        """
        Cadastra pacote.

        Raises:
            AlreadyExistsError: Se ID já estiver em uso
        """
        with self.uow:
            if self.package_repo.get_by_id(package.id) is not None:
                raise AlreadyExistsError(
                    f"Package with is id: {package.id} already exists"
                )

            saved = self.package_repo.save(package)

        logger.info(f"Package added: {saved.id}")
        return saved
