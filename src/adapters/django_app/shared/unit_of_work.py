"""
Unit of Work - Implementação Django.

Gerencia a transação atômica de um Use Case, garantindo
que a escrita seja persistida por inteiro ou descartada.

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado

ACID Guarantees:
- Atomicidade: Tudo ou nada
- Isolamento: Cada request tem sua transação
- Durabilidade: garantida pelo banco

Usa transaction.atomic() (savepoint quando já existe transação
externa), portanto funciona dentro de ATOMIC_REQUESTS e de testes.
"""

import logging
from typing import Optional

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction.atomic para gerenciar transações.

    Example:
        with DjangoUnitOfWork() as uow:
            repo.save(entity)
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(entity)
            raise Exception("Erro!")
        # Rollback automático
    """

    def __init__(self, using: Optional[str] = None):
        """
        Inicializa Unit of Work.

        Args:
            using: Alias do banco (None = default)
        """
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        """Abre bloco atômico."""
        if self._atomic is not None:
            raise RuntimeError("Transaction already started")

        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Fecha o bloco atômico persistindo as mudanças.

        Raises:
            Exception: Se commit falhar, re-lança exceção
        """
        if self._atomic is None:
            logger.warning("Commit called without active transaction")
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """
        Fecha o bloco atômico descartando as mudanças.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        # Qualquer exceção sinaliza rollback para o atomic
        atomic.__exit__(RuntimeError, RuntimeError("rollback"), None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back
