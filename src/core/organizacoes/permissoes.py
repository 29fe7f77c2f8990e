"""
Controle de acesso por papel (RBAC) em organizações.

Tabela plana ação → papéis permitidos. Não há hierarquia implícita
entre papéis: cada ação lista explicitamente quem pode executá-la.

    CONVIDAR_MEMBRO  OWNER, ADMIN
    ALTERAR_PAPEL    OWNER
    REMOVER_MEMBRO   OWNER
    VISUALIZAR       OWNER, ADMIN, MEMBER

Quem não é membro não tem papel (None) e é sempre negado.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from src.core.shared.exceptions import PermissionDeniedError, ValidationError


class PapelOrganizacao(Enum):
    """Papéis de um membro dentro da organização (conjunto fechado)."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"

    @classmethod
    def from_string(cls, value: str) -> "PapelOrganizacao":
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValidationError(f"Papel inválido: {value}", field="papel")


class AcaoOrganizacao(Enum):
    CONVIDAR_MEMBRO = "CONVIDAR_MEMBRO"
    ALTERAR_PAPEL = "ALTERAR_PAPEL"
    REMOVER_MEMBRO = "REMOVER_MEMBRO"
    VISUALIZAR = "VISUALIZAR"


PERMISSOES: Dict[AcaoOrganizacao, FrozenSet[PapelOrganizacao]] = {
    AcaoOrganizacao.CONVIDAR_MEMBRO: frozenset({
        PapelOrganizacao.OWNER,
        PapelOrganizacao.ADMIN,
    }),
    AcaoOrganizacao.ALTERAR_PAPEL: frozenset({PapelOrganizacao.OWNER}),
    AcaoOrganizacao.REMOVER_MEMBRO: frozenset({PapelOrganizacao.OWNER}),
    AcaoOrganizacao.VISUALIZAR: frozenset(PapelOrganizacao),
}

MENSAGENS_NEGADAS: Dict[AcaoOrganizacao, str] = {
    AcaoOrganizacao.CONVIDAR_MEMBRO: "Apenas owners e admins podem convidar membros",
    AcaoOrganizacao.ALTERAR_PAPEL: "Apenas owners podem atualizar roles",
    AcaoOrganizacao.REMOVER_MEMBRO: "Apenas owners podem remover membros",
    AcaoOrganizacao.VISUALIZAR: "Apenas membros podem visualizar a organização",
}


def pode_executar(papel: Optional[PapelOrganizacao], acao: AcaoOrganizacao) -> bool:
    """
    Verifica se o papel permite a ação.

    Example:
        pode_executar(PapelOrganizacao.ADMIN, AcaoOrganizacao.CONVIDAR_MEMBRO)  # True
        pode_executar(PapelOrganizacao.ADMIN, AcaoOrganizacao.REMOVER_MEMBRO)   # False
        pode_executar(None, AcaoOrganizacao.VISUALIZAR)                         # False
    """
    if papel is None:
        return False
    return papel in PERMISSOES[acao]


def exigir_permissao(papel: Optional[PapelOrganizacao], acao: AcaoOrganizacao) -> None:
    """
    Raises:
        PermissionDeniedError: Se o papel não permite a ação
    """
    if not pode_executar(papel, acao):
        raise PermissionDeniedError(
            MENSAGENS_NEGADAS[acao],
            papel=papel.value if papel else None,
            acao=acao.value,
        )
