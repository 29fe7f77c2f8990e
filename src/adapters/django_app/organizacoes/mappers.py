"""
Mappers para conversão entre Entities (Core) e Models (Django).

- OrganizacaoEntity ↔ OrganizacaoModel (+ MembroOrganizacaoModel)
- ConviteOrganizacao ↔ ConviteOrganizacaoModel
"""

from typing import Iterable, List

from src.core.organizacoes.entities import (
    OrganizacaoEntity,
    MembroOrganizacao,
    ConviteOrganizacao,
)
from src.core.organizacoes.permissoes import PapelOrganizacao

from ..shared.tempo import para_banco, para_dominio
from .models import (
    OrganizacaoModel,
    MembroOrganizacaoModel,
    ConviteOrganizacaoModel,
)


class OrganizacaoMapper:
    """
    Mapper para conversão entre OrganizacaoEntity e OrganizacaoModel.

    Membros são linhas próprias; to_entity espera que venham
    carregados (prefetch_related('membros')).
    """

    @staticmethod
    def to_model(entity: OrganizacaoEntity) -> OrganizacaoModel:
        """
        Note:
            Não inclui membros - o Repository sincroniza a tabela de membros
        """
        return OrganizacaoModel(
            id=entity.id,
            nome=entity.nome,
            slug=entity.slug,
            descricao=entity.descricao,
            dono_id=entity.dono_id,
            criado_em=para_banco(entity.criado_em),
            atualizado_em=para_banco(entity.atualizado_em),
        )

    @staticmethod
    def membro_to_model(organizacao_id: str, membro: MembroOrganizacao) -> MembroOrganizacaoModel:
        return MembroOrganizacaoModel(
            organizacao_id=organizacao_id,
            usuario_id=membro.usuario_id,
            papel=membro.papel.value,
            entrou_em=para_banco(membro.entrou_em),
        )

    @staticmethod
    def membro_to_entity(model: MembroOrganizacaoModel) -> MembroOrganizacao:
        return MembroOrganizacao(
            usuario_id=model.usuario_id,
            papel=PapelOrganizacao(model.papel),
            entrou_em=para_dominio(model.entrou_em),
        )

    @classmethod
    def to_entity(cls, model: OrganizacaoModel) -> OrganizacaoEntity:
        return OrganizacaoEntity(
            id=model.id,
            nome=model.nome,
            slug=model.slug,
            descricao=model.descricao,
            dono_id=model.dono_id,
            membros=[cls.membro_to_entity(m) for m in model.membros.all()],
            criado_em=para_dominio(model.criado_em),
            atualizado_em=para_dominio(model.atualizado_em),
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[OrganizacaoModel]) -> List[OrganizacaoEntity]:
        return [cls.to_entity(m) for m in models]


class ConviteMapper:

    @staticmethod
    def to_model(entity: ConviteOrganizacao) -> ConviteOrganizacaoModel:
        return ConviteOrganizacaoModel(
            id=entity.id,
            organizacao_id=entity.organizacao_id,
            email=entity.email,
            papel=entity.papel.value,
            convidado_por_id=entity.convidado_por_id,
            criado_em=para_banco(entity.criado_em),
            expira_em=para_banco(entity.expira_em),
            aceito_em=para_banco(entity.aceito_em),
        )

    @staticmethod
    def to_entity(model: ConviteOrganizacaoModel) -> ConviteOrganizacao:
        return ConviteOrganizacao(
            id=model.id,
            organizacao_id=model.organizacao_id,
            email=model.email,
            papel=PapelOrganizacao(model.papel),
            convidado_por_id=model.convidado_por_id,
            criado_em=para_dominio(model.criado_em),
            expira_em=para_dominio(model.expira_em),
            aceito_em=para_dominio(model.aceito_em),
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[ConviteOrganizacaoModel]) -> List[ConviteOrganizacao]:
        return [cls.to_entity(m) for m in models]
