"""
Use Cases (Application Services) do Domínio de Organizações.

Use Cases implementados:
- CriarOrganizacaoService: Cria organização (criador vira OWNER)
- ConvidarMembroService: Convite com validade (OWNER/ADMIN)
- AceitarConviteService: Convidado entra na organização
- AlterarPapelMembroService: Troca papel (apenas OWNER)
- RemoverMembroService: Remove membro (apenas OWNER, nunca o owner)
- VerificarPermissaoService: Consulta de papel
- ListarOrganizacoesUsuarioService: Organizações do usuário

As regras de permissão ficam na entidade (tabela em permissoes.py);
os use cases apenas carregam, delegam, persistem e publicam eventos.
"""

import logging
from typing import Iterable, List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    EntityNotFoundError,
    ConflictError,
    BusinessRuleViolationError,
)
from src.core.usuarios.ports import UsuarioRepository

from .ports import OrganizacaoRepository, ConviteRepository
from .entities import OrganizacaoEntity, VALIDADE_CONVITE_DIAS
from .permissoes import PapelOrganizacao
from .dtos import (
    CriarOrganizacaoInputDTO,
    ConvidarMembroInputDTO,
    AceitarConviteInputDTO,
    AlterarPapelInputDTO,
    RemoverMembroInputDTO,
    OrganizacaoOutputDTO,
    ConviteOutputDTO,
)
from .events import (
    OrganizacaoCriadaEvent,
    MembroConvidadoEvent,
    MembroAdicionadoEvent,
    PapelMembroAlteradoEvent,
    MembroRemovidoEvent,
)


logger = logging.getLogger(__name__)


def _carregar_organizacao(repo: OrganizacaoRepository, organizacao_id: str) -> OrganizacaoEntity:
    organizacao = repo.get_by_id(organizacao_id)

    if not organizacao:
        raise EntityNotFoundError(
            "Organização não encontrada",
            entity_type="Organizacao",
            entity_id=organizacao_id
        )

    return organizacao


class CriarOrganizacaoService:
    """
    Use Case: Criar organização.

    Raises:
        ConflictError: Slug já está em uso
        ValidationError: Nome ou slug inválidos
    """

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, input_dto: CriarOrganizacaoInputDTO) -> OrganizacaoOutputDTO:
        with self.uow:
            organizacao = OrganizacaoEntity.criar(
                nome=input_dto.nome,
                slug=input_dto.slug,
                dono_id=input_dto.dono_id,
                descricao=input_dto.descricao,
            )

            if self.organizacao_repo.slug_exists(organizacao.slug):
                raise ConflictError("Slug já está em uso")

            self.organizacao_repo.save(organizacao)

            self.uow.publish_event(
                OrganizacaoCriadaEvent(
                    aggregate_id=organizacao.id,
                    slug=organizacao.slug,
                    dono_id=organizacao.dono_id,
                )
            )

        logger.info(f"Organização criada: {organizacao.slug}")
        return OrganizacaoOutputDTO.from_entity(organizacao)


class ConvidarMembroService:
    """
    Use Case: Convidar membro por email.

    Apenas OWNER e ADMIN convidam; o convite expira em
    `validade_dias` dias (configurável, padrão 7).
    """

    def __init__(
        self,
        organizacao_repo: OrganizacaoRepository,
        convite_repo: ConviteRepository,
        uow: UnitOfWork,
        validade_dias: int = VALIDADE_CONVITE_DIAS,
    ):
        self.organizacao_repo = organizacao_repo
        self.convite_repo = convite_repo
        self.uow = uow
        self.validade_dias = validade_dias

    def execute(self, input_dto: ConvidarMembroInputDTO) -> ConviteOutputDTO:
        """
        Raises:
            EntityNotFoundError: Organização inexistente
            PermissionDeniedError: Quem convida não é OWNER/ADMIN
            ValidationError: Email ou papel inválidos
        """
        with self.uow:
            organizacao = _carregar_organizacao(
                self.organizacao_repo, input_dto.organizacao_id
            )

            convite = organizacao.convidar(
                email=input_dto.email,
                papel=PapelOrganizacao.from_string(input_dto.papel),
                convidado_por_id=input_dto.convidado_por_id,
                validade_dias=self.validade_dias,
            )

            self.convite_repo.save(convite)

            self.uow.publish_event(
                MembroConvidadoEvent(
                    aggregate_id=organizacao.id,
                    convite_id=convite.id,
                    email=convite.email,
                    papel=convite.papel.value,
                    convidado_por_id=convite.convidado_por_id,
                    expira_em=convite.expira_em.isoformat(),
                )
            )

        return ConviteOutputDTO.from_entity(convite)


class AceitarConviteService:
    """
    Use Case: Aceitar convite.

    O email do usuário precisa ser o mesmo do convite.
    """

    def __init__(
        self,
        organizacao_repo: OrganizacaoRepository,
        convite_repo: ConviteRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.organizacao_repo = organizacao_repo
        self.convite_repo = convite_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: AceitarConviteInputDTO) -> OrganizacaoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Convite ou usuário inexistente
            BusinessRuleViolationError: Email diferente, convite expirado,
                já aceito, ou usuário já é membro
        """
        with self.uow:
            convite = self.convite_repo.get_by_id(input_dto.convite_id)
            if not convite:
                raise EntityNotFoundError(
                    "Convite não encontrado",
                    entity_type="ConviteOrganizacao",
                    entity_id=input_dto.convite_id
                )

            usuario = self.usuario_repo.get_by_id(input_dto.usuario_id)
            if not usuario:
                raise EntityNotFoundError(
                    "Usuário não encontrado",
                    entity_type="Usuario",
                    entity_id=input_dto.usuario_id
                )

            if usuario.email != convite.email:
                raise BusinessRuleViolationError(
                    "Convite pertence a outro email",
                    rule="convite_email_divergente"
                )

            organizacao = _carregar_organizacao(
                self.organizacao_repo, convite.organizacao_id
            )

            convite.aceitar()
            membro = organizacao.adicionar_membro(usuario.id, convite.papel)

            self.convite_repo.save(convite)
            self.organizacao_repo.save(organizacao)

            self.uow.publish_event(
                MembroAdicionadoEvent(
                    aggregate_id=organizacao.id,
                    usuario_id=membro.usuario_id,
                    papel=membro.papel.value,
                )
            )

        return OrganizacaoOutputDTO.from_entity(organizacao)


class AlterarPapelMembroService:
    """Use Case: Alterar papel de membro (apenas OWNER)."""

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, input_dto: AlterarPapelInputDTO) -> OrganizacaoOutputDTO:
        with self.uow:
            organizacao = _carregar_organizacao(
                self.organizacao_repo, input_dto.organizacao_id
            )

            novo_papel = PapelOrganizacao.from_string(input_dto.novo_papel)
            papel_anterior = organizacao.papel_de(input_dto.membro_id)

            membro = organizacao.alterar_papel(
                membro_id=input_dto.membro_id,
                novo_papel=novo_papel,
                alterado_por_id=input_dto.alterado_por_id,
            )

            self.organizacao_repo.save(organizacao)

            self.uow.publish_event(
                PapelMembroAlteradoEvent(
                    aggregate_id=organizacao.id,
                    membro_id=membro.usuario_id,
                    papel_anterior=papel_anterior.value,
                    papel_novo=membro.papel.value,
                    alterado_por_id=input_dto.alterado_por_id,
                )
            )

        return OrganizacaoOutputDTO.from_entity(organizacao)


class RemoverMembroService:
    """Use Case: Remover membro (apenas OWNER; owner não pode sair)."""

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, input_dto: RemoverMembroInputDTO) -> OrganizacaoOutputDTO:
        with self.uow:
            organizacao = _carregar_organizacao(
                self.organizacao_repo, input_dto.organizacao_id
            )

            organizacao.remover_membro(
                membro_id=input_dto.membro_id,
                removido_por_id=input_dto.removido_por_id,
            )

            self.organizacao_repo.save(organizacao)

            self.uow.publish_event(
                MembroRemovidoEvent(
                    aggregate_id=organizacao.id,
                    membro_id=input_dto.membro_id,
                    removido_por_id=input_dto.removido_por_id,
                )
            )

        logger.info(
            f"Membro {input_dto.membro_id} removido de {organizacao.slug}"
        )
        return OrganizacaoOutputDTO.from_entity(organizacao)


class VerificarPermissaoService:
    """
    Use Case: Verificar se usuário tem um dos papéis permitidos.

    Organização inexistente ou usuário não membro → False.
    """

    def __init__(self, organizacao_repo: OrganizacaoRepository):
        self.organizacao_repo = organizacao_repo

    def execute(
        self,
        organizacao_id: str,
        usuario_id: str,
        papeis_permitidos: Iterable[PapelOrganizacao],
    ) -> bool:
        organizacao = self.organizacao_repo.get_by_id(organizacao_id)
        if not organizacao:
            return False

        papel = organizacao.papel_de(usuario_id)
        if papel is None:
            return False

        return papel in set(papeis_permitidos)


class ListarOrganizacoesUsuarioService:

    def __init__(self, organizacao_repo: OrganizacaoRepository):
        self.organizacao_repo = organizacao_repo

    def execute(self, usuario_id: str) -> List[OrganizacaoOutputDTO]:
        return [
            OrganizacaoOutputDTO.from_entity(o)
            for o in self.organizacao_repo.list_by_membro(usuario_id)
        ]
