"""
Domínio de Pacotes de Viagem.

Contém:
- Entidades (PackageEntity)
- Ports (PackageRepository)
- Use Cases (ListPackages, GetPackage, AddPackage)
"""

from .entities import PackageEntity
from .ports import PackageRepository, InMemoryPackageRepository
from .use_cases import ListPackagesService, GetPackageService, AddPackageService

__all__ = [
    "PackageEntity",
    "PackageRepository",
    "InMemoryPackageRepository",
    "ListPackagesService",
    "GetPackageService",
    "AddPackageService",
]
