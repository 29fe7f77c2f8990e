"""
Repositórios Django para o domínio de Organizações.

Implementam OrganizacaoRepository e ConviteRepository
(src/core/organizacoes/ports.py).
"""

from typing import List, Optional
import logging

from src.core.organizacoes.entities import OrganizacaoEntity, ConviteOrganizacao

from .models import (
    OrganizacaoModel,
    MembroOrganizacaoModel,
    ConviteOrganizacaoModel,
)
from .mappers import OrganizacaoMapper, ConviteMapper

logger = logging.getLogger(__name__)


class DjangoOrganizacaoRepository:
    """
    Implementação Django do OrganizacaoRepository.

    save() grava a organização e sincroniza a tabela de membros
    com a lista da entidade (inclui, atualiza papel e remove).
    """

    def __init__(self):
        self._mapper = OrganizacaoMapper()

    def _queryset(self):
        return OrganizacaoModel.objects.prefetch_related('membros')

    def save(self, organizacao: OrganizacaoEntity) -> None:
        logger.debug(f"Saving organizacao: {organizacao.id}")

        model = self._mapper.to_model(organizacao)
        OrganizacaoModel.objects.update_or_create(
            id=organizacao.id,
            defaults={
                'nome': model.nome,
                'slug': model.slug,
                'descricao': model.descricao,
                'dono_id': model.dono_id,
                'criado_em': model.criado_em,
            }
        )

        usuario_ids = [m.usuario_id for m in organizacao.membros]
        MembroOrganizacaoModel.objects.filter(
            organizacao_id=organizacao.id
        ).exclude(usuario_id__in=usuario_ids).delete()

        for membro in organizacao.membros:
            membro_model = self._mapper.membro_to_model(organizacao.id, membro)
            MembroOrganizacaoModel.objects.update_or_create(
                organizacao_id=organizacao.id,
                usuario_id=membro.usuario_id,
                defaults={
                    'papel': membro_model.papel,
                    'entrou_em': membro_model.entrou_em,
                }
            )

        logger.info(
            f"Organizacao saved: {organizacao.id} "
            f"({len(organizacao.membros)} membros)"
        )

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        try:
            model = self._queryset().get(id=organizacao_id)
            return self._mapper.to_entity(model)
        except OrganizacaoModel.DoesNotExist:
            logger.debug(f"Organizacao not found: {organizacao_id}")
            return None

    def slug_exists(self, slug: str) -> bool:
        return OrganizacaoModel.objects.filter(slug=slug).exists()

    def list_by_membro(self, usuario_id: str) -> List[OrganizacaoEntity]:
        models = self._queryset().filter(
            membros__usuario_id=usuario_id
        ).distinct()
        return self._mapper.to_entity_list(models)


class DjangoConviteRepository:

    def __init__(self):
        self._mapper = ConviteMapper()

    def save(self, convite: ConviteOrganizacao) -> None:
        logger.debug(f"Saving convite: {convite.id}")

        model = self._mapper.to_model(convite)
        ConviteOrganizacaoModel.objects.update_or_create(
            id=convite.id,
            defaults={
                'organizacao_id': model.organizacao_id,
                'email': model.email,
                'papel': model.papel,
                'convidado_por_id': model.convidado_por_id,
                'criado_em': model.criado_em,
                'expira_em': model.expira_em,
                'aceito_em': model.aceito_em,
            }
        )

        logger.info(f"Convite saved: {convite.id}")

    def get_by_id(self, convite_id: str) -> Optional[ConviteOrganizacao]:
        try:
            model = ConviteOrganizacaoModel.objects.get(id=convite_id)
            return self._mapper.to_entity(model)
        except ConviteOrganizacaoModel.DoesNotExist:
            logger.debug(f"Convite not found: {convite_id}")
            return None

    def list_by_organizacao(self, organizacao_id: str) -> List[ConviteOrganizacao]:
        return self._mapper.to_entity_list(
            ConviteOrganizacaoModel.objects.filter(organizacao_id=organizacao_id)
        )
