"""
Exceções de Domínio do Travels Booking.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationFailuresError (violações por campo → 400, lista)
    ├── RequestShapeError (requisição mal formada → 400, objeto)
    ├── EntityNotFoundError (entidade não existe → 404)
    └── AlreadyExistsError (identificador já utilizado → 409)

Qualquer outra exceção que chegue à borda HTTP é tratada como
erro interno (500) e apenas logada.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Violation:
    """
    Violação de regra de validação em um campo.

    Attributes:
        field: Nome do campo no formato do wire (ex: "travelDate")
        message: Mensagem legível para o cliente
    """

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(ticket)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para o corpo da resposta HTTP."""
        return {"message": self.message}


class ValidationFailuresError(DomainException):
    """
    Uma ou mais violações de validação por campo.

    Lançada na entrada (forms) antes de qualquer use case ser
    executado. Lista todos os campos com falha, na ordem em que
    foram declarados.

    Example:
        raise ValidationFailuresError([
            Violation("travelDate", "must be a date in the present or in the future")
        ])
    """

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        message = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(message, "VALIDATION_ERROR")

    def to_list(self) -> List[dict]:
        """Serializa violações no formato [{field, message}]."""
        return [violation.to_dict() for violation in self.violations]


class RequestShapeError(DomainException):
    """
    Erro de formato da requisição como um todo (sem campo associado).

    Example:
        raise RequestShapeError("request body must contain at least one ...")
    """

    def __init__(self, message: str):
        super().__init__(message, "REQUEST_SHAPE_ERROR")


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        package = repo.get_by_id(package_id)
        if not package:
            raise EntityNotFoundError.for_entity("Package", package_id)
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: Optional[int] = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    @classmethod
    def for_entity(cls, entity_type: str, entity_id: int) -> "EntityNotFoundError":
        """Cria erro com mensagem padrão para o tipo e ID informados."""
        return cls(
            f"{entity_type} with id: {entity_id} not found",
            entity_type=entity_type,
            entity_id=entity_id,
        )


class AlreadyExistsError(DomainException):
    """
    Identificador já utilizado por outra entidade.

    Example:
        if repo.get_by_id(package.id):
            raise AlreadyExistsError(f"Package with is id: {package.id} already exists")
    """

    def __init__(self, message: str):
        super().__init__(message, "ALREADY_EXISTS")
