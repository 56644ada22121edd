"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio (superfície de erros)
- Interfaces (Ports) de infraestrutura
"""

from .exceptions import (
    DomainException,
    Violation,
    ValidationFailuresError,
    RequestShapeError,
    EntityNotFoundError,
    AlreadyExistsError,
)
from .interfaces import UnitOfWork, InMemoryUnitOfWork

__all__ = [
    "DomainException",
    "Violation",
    "ValidationFailuresError",
    "RequestShapeError",
    "EntityNotFoundError",
    "AlreadyExistsError",
    "UnitOfWork",
    "InMemoryUnitOfWork",
]
