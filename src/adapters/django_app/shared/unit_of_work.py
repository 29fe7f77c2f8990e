"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios,
garantindo consistência de dados.

Responsabilidades:
- Abrir/fechar um bloco transaction.atomic
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido
"""

from typing import Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork, EventPublisher

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction.atomic; dentro de outra transação vira
    savepoint. Eventos são publicados apenas após commit bem-sucedido.

    Example:
        with DjangoUnitOfWork(event_publisher) as uow:
            repo.save(perfil)
            uow.publish_event(EnderecoAdicionadoEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(perfil)
            raise ValidationError("...")
        # Rollback automático, eventos descartados
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None, using: Optional[str] = None):
        """
        Args:
            event_publisher: Publicador de eventos (log, Celery, memória)
            using: Alias do banco (default: 'default')
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste mudanças e publica eventos.

        Ordem:
        1. Fechar bloco atomic (commit ou release do savepoint)
        2. Publicar eventos enfileirados
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        try:
            if self._atomic is not None:
                self._atomic.__exit__(None, None, None)
                logger.debug("Transaction committed")
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._atomic = None
            self._rolled_back = True
            self.clear_events()
            raise

        self._atomic = None
        self._committed = True
        self._publish_events()

    def rollback(self) -> None:
        """Desfaz mudanças e descarta eventos."""
        if self._committed or self._rolled_back:
            return

        try:
            if self._atomic is not None:
                transaction.set_rollback(True, using=self._using)
                self._atomic.__exit__(None, None, None)
                logger.debug("Transaction rolled back")
        finally:
            self._atomic = None
            self._rolled_back = True
            self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos após commit.

        Falha na publicação é logada e não desfaz o commit.
        """
        events = self.collect_events()
        self.clear_events()

        if not events:
            return

        for event in events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

        if self._event_publisher is None:
            return

        try:
            self._event_publisher.publish_batch(events)
        except Exception as e:
            logger.error(f"Failed to publish events: {e}")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back
