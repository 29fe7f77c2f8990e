"""
Entidades do Domínio de Organizações.

Organizações (salões, clínicas, empresas) agrupam usuários com papéis.

Entidades:
- OrganizacaoEntity: Agregado com a lista de membros
- MembroOrganizacao: Usuário + papel
- ConviteOrganizacao: Convite por email com validade

Regras de Negócio Encapsuladas:
- Criador entra como OWNER
- Toda operação sobre membros passa pela tabela de permissões
- Owner não pode ser removido
- Organização sempre mantém ao menos um OWNER
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional
import re
import uuid

from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    PermissionDeniedError,
)

from .permissoes import (
    PapelOrganizacao,
    AcaoOrganizacao,
    exigir_permissao,
    pode_executar,
)


SLUG_REGEX = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

VALIDADE_CONVITE_DIAS = 7

# OWNER só existe pela criação da organização
PAPEIS_CONVIDAVEIS = (PapelOrganizacao.ADMIN, PapelOrganizacao.MEMBER)


@dataclass
class MembroOrganizacao:

    usuario_id: str
    papel: PapelOrganizacao
    entrou_em: datetime = field(default_factory=datetime.now)


@dataclass
class ConviteOrganizacao:
    """
    Convite para entrar na organização.

    Expira `VALIDADE_CONVITE_DIAS` dias após a criação.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    organizacao_id: str = ""
    email: str = ""
    papel: PapelOrganizacao = PapelOrganizacao.MEMBER
    convidado_por_id: str = ""
    criado_em: datetime = field(default_factory=datetime.now)
    expira_em: Optional[datetime] = None
    aceito_em: Optional[datetime] = None

    def __post_init__(self):
        if self.expira_em is None:
            self.expira_em = self.criado_em + timedelta(days=VALIDADE_CONVITE_DIAS)

    @property
    def expirado(self) -> bool:
        return datetime.now() > self.expira_em

    @property
    def aceito(self) -> bool:
        return self.aceito_em is not None

    def aceitar(self) -> None:
        """
        Raises:
            BusinessRuleViolationError: Convite já aceito ou expirado
        """
        if self.aceito:
            raise BusinessRuleViolationError(
                "Convite já foi aceito", rule="convite_ja_aceito"
            )

        if self.expirado:
            raise BusinessRuleViolationError(
                "Convite expirado", rule="convite_expirado"
            )

        self.aceito_em = datetime.now()


@dataclass
class OrganizacaoEntity:
    """
    Entidade de Domínio: Organização.

    Invariantes:
    - Nome obrigatório (mín. 2 caracteres)
    - Slug em minúsculas com hífens (ex: "salao-da-maria")
    - Ao menos um membro OWNER
    - Cada usuário aparece no máximo uma vez em `membros`

    Example:
        org = OrganizacaoEntity.criar(
            nome="Salão da Maria", slug="salao-da-maria", dono_id="user-1"
        )
        org.papel_de("user-1")  # PapelOrganizacao.OWNER
        convite = org.convidar("ana@exemplo.com", PapelOrganizacao.ADMIN, "user-1")
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    slug: str = ""
    descricao: Optional[str] = None
    dono_id: str = ""
    membros: List[MembroOrganizacao] = field(default_factory=list)
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        nome: str,
        slug: str,
        dono_id: str,
        descricao: Optional[str] = None,
    ) -> "OrganizacaoEntity":
        """
        Factory method: cria organização com o dono como OWNER.

        Raises:
            ValidationError: Nome, slug ou dono inválidos
        """
        if not nome or len(nome.strip()) < 2:
            raise ValidationError(
                "Nome da organização deve ter pelo menos 2 caracteres",
                field="nome"
            )

        if not slug or not SLUG_REGEX.match(slug):
            raise ValidationError(
                "Slug deve conter apenas letras minúsculas, números e hífens",
                field="slug"
            )

        if not dono_id:
            raise ValidationError("Dono da organização é obrigatório", field="dono_id")

        organizacao = cls(
            nome=nome.strip(),
            slug=slug,
            descricao=descricao,
            dono_id=dono_id,
        )
        organizacao.membros.append(
            MembroOrganizacao(usuario_id=dono_id, papel=PapelOrganizacao.OWNER)
        )
        return organizacao

    def papel_de(self, usuario_id: str) -> Optional[PapelOrganizacao]:
        """Papel do usuário, ou None se não é membro."""
        membro = self._buscar_membro(usuario_id)
        return membro.papel if membro else None

    def e_membro(self, usuario_id: str) -> bool:
        return self._buscar_membro(usuario_id) is not None

    def pode(self, usuario_id: str, acao: AcaoOrganizacao) -> bool:
        return pode_executar(self.papel_de(usuario_id), acao)

    def convidar(
        self,
        email: str,
        papel: PapelOrganizacao,
        convidado_por_id: str,
        validade_dias: int = VALIDADE_CONVITE_DIAS,
    ) -> ConviteOrganizacao:
        """
        Cria convite.

        Raises:
            PermissionDeniedError: Quem convida não é OWNER/ADMIN
            ValidationError: Email inválido ou papel não convidável
        """
        exigir_permissao(self.papel_de(convidado_por_id), AcaoOrganizacao.CONVIDAR_MEMBRO)

        if not email or not EMAIL_REGEX.match(email.strip()):
            raise ValidationError("Email inválido", field="email")

        if papel not in PAPEIS_CONVIDAVEIS:
            raise ValidationError(
                "Convites só podem ser para ADMIN ou MEMBER", field="papel"
            )

        criado_em = datetime.now()
        return ConviteOrganizacao(
            organizacao_id=self.id,
            email=email.strip().lower(),
            papel=papel,
            convidado_por_id=convidado_por_id,
            criado_em=criado_em,
            expira_em=criado_em + timedelta(days=validade_dias),
        )

    def adicionar_membro(self, usuario_id: str, papel: PapelOrganizacao) -> MembroOrganizacao:
        """
        Adiciona membro (uso interno: aceite de convite e reconstrução).

        Raises:
            BusinessRuleViolationError: Usuário já é membro
        """
        if self.e_membro(usuario_id):
            raise BusinessRuleViolationError(
                "Usuário já é membro da organização", rule="membro_duplicado"
            )

        membro = MembroOrganizacao(usuario_id=usuario_id, papel=papel)
        self.membros.append(membro)
        self._atualizar_timestamp()
        return membro

    def alterar_papel(
        self,
        membro_id: str,
        novo_papel: PapelOrganizacao,
        alterado_por_id: str,
    ) -> MembroOrganizacao:
        """
        Altera papel de um membro.

        Raises:
            PermissionDeniedError: Quem altera não é OWNER
            EntityNotFoundError: Membro não existe
            BusinessRuleViolationError: Rebaixaria o único OWNER
        """
        exigir_permissao(self.papel_de(alterado_por_id), AcaoOrganizacao.ALTERAR_PAPEL)

        membro = self._obter_membro(membro_id)

        if (
            membro.papel == PapelOrganizacao.OWNER
            and novo_papel != PapelOrganizacao.OWNER
            and self._total_owners() == 1
        ):
            raise BusinessRuleViolationError(
                "Organização deve manter ao menos um owner",
                rule="owner_obrigatorio"
            )

        membro.papel = novo_papel
        self._atualizar_timestamp()
        return membro

    def remover_membro(self, membro_id: str, removido_por_id: str) -> MembroOrganizacao:
        """
        Remove membro.

        Raises:
            PermissionDeniedError: Quem remove não é OWNER, ou alvo é OWNER
            EntityNotFoundError: Membro não existe
        """
        exigir_permissao(self.papel_de(removido_por_id), AcaoOrganizacao.REMOVER_MEMBRO)

        membro = self._obter_membro(membro_id)

        if membro.papel == PapelOrganizacao.OWNER:
            raise PermissionDeniedError(
                "Não é possível remover o owner da organização",
                papel=PapelOrganizacao.OWNER.value,
                acao=AcaoOrganizacao.REMOVER_MEMBRO.value,
            )

        self.membros.remove(membro)
        self._atualizar_timestamp()
        return membro

    def _buscar_membro(self, usuario_id: str) -> Optional[MembroOrganizacao]:
        return next((m for m in self.membros if m.usuario_id == usuario_id), None)

    def _obter_membro(self, usuario_id: str) -> MembroOrganizacao:
        membro = self._buscar_membro(usuario_id)
        if not membro:
            raise EntityNotFoundError(
                "Membro não encontrado",
                entity_type="MembroOrganizacao",
                entity_id=usuario_id
            )
        return membro

    def _total_owners(self) -> int:
        return sum(1 for m in self.membros if m.papel == PapelOrganizacao.OWNER)

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __repr__(self) -> str:
        return (
            f"OrganizacaoEntity("
            f"slug={self.slug}, "
            f"membros={len(self.membros)}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrganizacaoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
