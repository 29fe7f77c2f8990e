"""
Domain Events do Domínio de Organizações.

Eventos:
- OrganizacaoCriadaEvent
- MembroConvidadoEvent: handler envia o email de convite
- MembroAdicionadoEvent: convite aceito
- PapelMembroAlteradoEvent
- MembroRemovidoEvent
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class OrganizacaoCriadaEvent(DomainEvent):

    slug: str = ""
    dono_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"


@dataclass
class MembroConvidadoEvent(DomainEvent):
    """
    Evento: Convite enviado.

    Handlers típicos:
    - Enviar email com link de aceite
    """

    convite_id: str = ""
    email: str = ""
    papel: str = ""
    convidado_por_id: str = ""
    expira_em: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"


@dataclass
class MembroAdicionadoEvent(DomainEvent):

    usuario_id: str = ""
    papel: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"


@dataclass
class PapelMembroAlteradoEvent(DomainEvent):

    membro_id: str = ""
    papel_anterior: str = ""
    papel_novo: str = ""
    alterado_por_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"


@dataclass
class MembroRemovidoEvent(DomainEvent):

    membro_id: str = ""
    removido_por_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"
