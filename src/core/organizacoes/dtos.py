"""
Data Transfer Objects (DTOs) do Domínio de Organizações.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .entities import OrganizacaoEntity, ConviteOrganizacao


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarOrganizacaoInputDTO:
    """
    Attributes:
        nome: Nome de exibição
        slug: Identificador único na URL
        dono_id: Usuário que cria (vira OWNER)
        descricao: Texto livre opcional
    """

    nome: str
    slug: str
    dono_id: str
    descricao: Optional[str] = None

    @classmethod
    def from_dict(cls, dono_id: str, data: dict) -> "CriarOrganizacaoInputDTO":
        return cls(
            nome=str(data.get("nome") or ""),
            slug=str(data.get("slug") or ""),
            dono_id=dono_id,
            descricao=data.get("descricao") or None,
        )


@dataclass(frozen=True)
class ConvidarMembroInputDTO:

    organizacao_id: str
    email: str
    papel: str
    convidado_por_id: str

    @classmethod
    def from_dict(
        cls,
        organizacao_id: str,
        convidado_por_id: str,
        data: dict,
    ) -> "ConvidarMembroInputDTO":
        return cls(
            organizacao_id=organizacao_id,
            email=str(data.get("email") or ""),
            papel=str(data.get("papel") or "MEMBER"),
            convidado_por_id=convidado_por_id,
        )


@dataclass(frozen=True)
class AceitarConviteInputDTO:

    convite_id: str
    usuario_id: str


@dataclass(frozen=True)
class AlterarPapelInputDTO:

    organizacao_id: str
    membro_id: str
    novo_papel: str
    alterado_por_id: str


@dataclass(frozen=True)
class RemoverMembroInputDTO:

    organizacao_id: str
    membro_id: str
    removido_por_id: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class OrganizacaoOutputDTO:

    id: str
    nome: str
    slug: str
    descricao: Optional[str]
    dono_id: str
    membros: List[Dict[str, Any]]
    criado_em: datetime

    @classmethod
    def from_entity(cls, entity: OrganizacaoEntity) -> "OrganizacaoOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            slug=entity.slug,
            descricao=entity.descricao,
            dono_id=entity.dono_id,
            membros=[
                {
                    "usuario_id": m.usuario_id,
                    "papel": m.papel.value,
                    "entrou_em": m.entrou_em.isoformat(),
                }
                for m in entity.membros
            ],
            criado_em=entity.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "slug": self.slug,
            "descricao": self.descricao,
            "dono_id": self.dono_id,
            "membros": self.membros,
            "criado_em": self.criado_em.isoformat(),
        }


@dataclass
class ConviteOutputDTO:

    id: str
    organizacao_id: str
    email: str
    papel: str
    convidado_por_id: str
    expira_em: datetime
    aceito: bool

    @classmethod
    def from_entity(cls, entity: ConviteOrganizacao) -> "ConviteOutputDTO":
        return cls(
            id=entity.id,
            organizacao_id=entity.organizacao_id,
            email=entity.email,
            papel=entity.papel.value,
            convidado_por_id=entity.convidado_por_id,
            expira_em=entity.expira_em,
            aceito=entity.aceito,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "organizacao_id": self.organizacao_id,
            "email": self.email,
            "papel": self.papel,
            "convidado_por_id": self.convidado_por_id,
            "expira_em": self.expira_em.isoformat(),
            "aceito": self.aceito,
        }
