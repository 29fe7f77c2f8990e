"""
Domain Events do Domínio de Usuários.

Eventos:
- UsuarioCriadoEvent: Nova conta registrada
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class UsuarioCriadoEvent(DomainEvent):
    """
    Evento: Usuário foi criado.

    Handlers típicos:
    - Enviar email de boas-vindas
    - Solicitar verificação de email
    """

    email: str = ""
    nome: str = ""
    tipo: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Usuario"
