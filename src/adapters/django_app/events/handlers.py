"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados (CeleryEventPublisher).

Tipos de Handlers:
- Notificação: boas-vindas, convite, mudança de papel, remoção
- Registro: eventos de perfil apenas logados

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        # Processar evento
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


# =============================================================================
# Event Handlers - Usuários e Perfis
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_criado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para UsuarioCriadoEvent.

    Ações:
    - Enviar boas-vindas
    """
    usuario_id = event_data.get('aggregate_id')
    dados = event_data.get('data') or {}
    nome = dados.get('nome', '')
    tipo = dados.get('tipo', '')

    logger.info(f"[HANDLER] UsuarioCriado: {usuario_id} | Tipo: {tipo}")

    notify_user.delay(
        user_id=usuario_id,
        message=f"Bem-vindo(a), {nome}!",
        channel='email'
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def handle_evento_perfil(self, event_data: Dict[str, Any]) -> None:
    """
    Handler genérico para eventos de perfil.

    Perfis não disparam notificações; o evento é apenas registrado.
    """
    logger.info(
        f"[HANDLER] {event_data.get('event_type')}: "
        f"{event_data.get('aggregate_id')} | data={event_data.get('data', {})}"
    )


# =============================================================================
# Event Handlers - Organizações
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_membro_convidado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para MembroConvidadoEvent.

    Ações:
    - Enviar email com link de aceite
    """
    dados = event_data.get('data') or {}
    email = dados.get('email')
    convite_id = dados.get('convite_id')
    papel = dados.get('papel')

    logger.info(
        f"[HANDLER] MembroConvidado: {event_data.get('aggregate_id')} | "
        f"Email: {email} | Papel: {papel}"
    )

    notify_email.delay(
        email=email,
        message=(
            f"Você foi convidado(a) como {papel}. "
            f"Aceite em /api/organizacoes/convites/{convite_id}/aceitar/ "
            f"até {dados.get('expira_em')}"
        )
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def handle_membro_adicionado(self, event_data: Dict[str, Any]) -> None:
    organizacao_id = event_data.get('aggregate_id')
    dados = event_data.get('data') or {}
    usuario_id = dados.get('usuario_id')

    logger.info(f"[HANDLER] MembroAdicionado: {usuario_id} → {organizacao_id}")

    notify_user.delay(
        user_id=usuario_id,
        message=f"Você agora faz parte da organização {organizacao_id}",
        channel='push'
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def handle_papel_alterado(self, event_data: Dict[str, Any]) -> None:
    dados = event_data.get('data') or {}
    membro_id = dados.get('membro_id')
    anterior = dados.get('papel_anterior')
    novo = dados.get('papel_novo')

    logger.info(f"[HANDLER] PapelMembroAlterado: {membro_id} | {anterior} -> {novo}")

    notify_user.delay(
        user_id=membro_id,
        message=f"Seu papel mudou de {anterior} para {novo}",
        channel='email'
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def handle_membro_removido(self, event_data: Dict[str, Any]) -> None:
    membro_id = (event_data.get('data') or {}).get('membro_id')
    organizacao_id = event_data.get('aggregate_id')

    logger.info(f"[HANDLER] MembroRemovido: {membro_id} de {organizacao_id}")

    notify_user.delay(
        user_id=membro_id,
        message=f"Você foi removido(a) da organização {organizacao_id}",
        channel='email'
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    'UsuarioCriadoEvent': handle_usuario_criado,
    'PerfilClienteCriadoEvent': handle_evento_perfil,
    'PerfilClienteRemovidoEvent': handle_evento_perfil,
    'PerfilProfissionalCriadoEvent': handle_evento_perfil,
    'PerfilEmpresaCriadoEvent': handle_evento_perfil,
    'MembroConvidadoEvent': handle_membro_convidado,
    'MembroAdicionadoEvent': handle_membro_adicionado,
    'PapelMembroAlteradoEvent': handle_papel_alterado,
    'MembroRemovidoEvent': handle_membro_removido,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados. Eventos sem
    handler (ex: EnderecoAdicionadoEvent) são ignorados.

    Args:
        event_type: Tipo do evento (ex: 'MembroConvidadoEvent')
        event_data: Dados do evento serializado (DomainEvent.to_dict)
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
    else:
        logger.debug(f"[DISPATCHER] Sem handler para {event_type}")


# =============================================================================
# Notification Tasks
# =============================================================================

@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_user(
    self,
    user_id: str,
    message: str,
    channel: str = 'email',
    **kwargs
) -> None:
    """
    Notifica usuário por canal especificado.

    Args:
        user_id: ID do usuário
        message: Mensagem a enviar
        channel: Canal (email, push, sms)
    """
    logger.info(f"[NOTIFICATION] {channel.upper()} para {user_id}: {message}")


@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_email(self, email: str, message: str) -> None:
    """Notifica endereço de email que ainda pode não ter conta."""
    logger.info(f"[NOTIFICATION] EMAIL para {email}: {message}")
