"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces compartilhadas que os Adapters
devem implementar. São os "Ports" da Arquitetura Hexagonal.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que as escritas de um use case sejam executadas
    como uma única unidade: ou são persistidas ou nenhuma é.

    Pattern: Context Manager
        with uow:
            repo.save(entity)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                self._atomic.__exit__(None, None, None)
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças da transação."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes e prototipagem.

    Não persiste nada - apenas registra se houve commit ou rollback.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            repo.save(entity)

        assert uow.committed
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        self._committed = True

    def rollback(self) -> None:
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back
