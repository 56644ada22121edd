"""
Ports (Interfaces) do Domínio de Pacotes.

Pacotes nunca são removidos pelos use cases, por isso o
contrato não expõe delete.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import PackageEntity


@runtime_checkable
class PackageRepository(Protocol):
    """
    Interface para persistência de Pacotes.

    Implementações:
    - DjangoPackageRepository (ORM)
    - InMemoryPackageRepository (para testes)
    """

    def save(self, package: PackageEntity) -> PackageEntity:
        """Persiste pacote e retorna a entidade persistida."""
        ...

    def get_by_id(self, package_id: int) -> Optional[PackageEntity]:
        """
        Busca pacote por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def list_all(self) -> List[PackageEntity]:
        """Lista todos os pacotes."""
        ...


class InMemoryPackageRepository:
    """
    Implementação em memória do PackageRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!
    """

    def __init__(self):
        self._packages: Dict[int, PackageEntity] = {}

    def save(self, package: PackageEntity) -> PackageEntity:
        self._packages[package.id] = package
        return package

    def get_by_id(self, package_id: int) -> Optional[PackageEntity]:
        return self._packages.get(package_id)

    def list_all(self) -> List[PackageEntity]:
        return list(self._packages.values())

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._packages.clear()
