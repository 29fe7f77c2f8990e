"""
Interfaces (Ports) compartilhadas entre os domínios.

Core define os contratos; adapters (Django, Celery) implementam.

- UnitOfWork: transação atômica + fila de eventos pós-commit
- Repository: CRUD genérico (Protocol, duck typing)
- EventPublisher: saída dos eventos de domínio
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, TypeVar

from .events import DomainEvent


T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Pattern: Context Manager
        with uow:
            repo.save(perfil)
            uow.publish_event(EnderecoAdicionadoEvent(...))
        # Commit ao sair sem erro, rollback se exceção

    Eventos enfileirados só são publicados depois do commit.
    Em rollback são descartados.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste mudanças e publica eventos enfileirados."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz mudanças e descarta eventos."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """Enfileira evento para publicação após commit."""
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)

    def clear_events(self) -> None:
        self._events.clear()


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Os ports específicos (UsuarioRepository, PerfilClienteRepository,
    OrganizacaoRepository) seguem estes nomes de método.
    """

    def save(self, entity: T) -> None:
        ...

    def get_by_id(self, entity_id: str) -> Optional[T]:
        ...

    def delete(self, entity_id: str) -> None:
        ...

    def list_all(self) -> List[T]:
        ...


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Implementações: LoggingEventPublisher, CeleryEventPublisher,
    InMemoryEventPublisher (adapters/django_app/events/publishers.py).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class InMemoryUnitOfWork(UnitOfWork):
    """
    UnitOfWork sem banco, para testes e prototipagem.

    Guarda os eventos publicados após cada commit em `published`
    e repassa ao publisher quando um for fornecido.

    Example:
        uow = InMemoryUnitOfWork()
        service = AdicionarEnderecoService(repo, uow)
        service.execute(...)
        assert uow.committed
    """

    def __init__(self, publisher: Optional[EventPublisher] = None):
        super().__init__()
        self.publisher = publisher
        self.committed = False
        self.rolled_back = False
        self.published: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self.committed = False
        self.rolled_back = False

    def commit(self) -> None:
        self.committed = True
        events = self.collect_events()
        self.clear_events()
        self.published.extend(events)
        if self.publisher:
            self.publisher.publish_batch(events)

    def rollback(self) -> None:
        self.rolled_back = True
        self.clear_events()
