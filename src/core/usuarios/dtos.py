"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

Input DTOs são construídos a partir de JSON não confiável
(`from_dict`); a validação de conteúdo fica na entidade.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criar usuário.

    Attributes:
        email: Email de login
        nome: Nome de exibição
        tipo: Nome do TipoUsuario ("CLIENT", "PROFESSIONAL", "COMPANY")
        telefone: Telefone opcional
        usuario_id: ID externo opcional
    """

    email: str
    nome: str
    tipo: str
    telefone: Optional[str] = None
    usuario_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CriarUsuarioInputDTO":
        return cls(
            email=str(data.get("email") or ""),
            nome=str(data.get("nome") or ""),
            tipo=str(data.get("tipo") or ""),
            telefone=data.get("telefone") or None,
            usuario_id=data.get("id") or None,
        )

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "nome": self.nome,
            "tipo": self.tipo,
            "telefone": self.telefone,
            "usuario_id": self.usuario_id,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """DTO de saída com dados públicos do usuário e suas capacidades."""

    id: str
    email: str
    nome: str
    telefone: Optional[str]
    tipo: str
    email_verificado: bool
    pode_agendar_servicos: bool
    pode_oferecer_servicos: bool
    pode_gerenciar_funcionarios: bool
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            email=entity.email,
            nome=entity.nome,
            telefone=entity.telefone,
            tipo=entity.tipo.value,
            email_verificado=entity.email_verificado,
            pode_agendar_servicos=entity.pode_agendar_servicos,
            pode_oferecer_servicos=entity.pode_oferecer_servicos,
            pode_gerenciar_funcionarios=entity.pode_gerenciar_funcionarios,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "email": self.email,
            "nome": self.nome,
            "telefone": self.telefone,
            "tipo": self.tipo,
            "email_verificado": self.email_verificado,
            "pode_agendar_servicos": self.pode_agendar_servicos,
            "pode_oferecer_servicos": self.pode_oferecer_servicos,
            "pode_gerenciar_funcionarios": self.pode_gerenciar_funcionarios,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
