"""
Domínio de Organizações - Membros, convites e RBAC.

Papéis: OWNER, ADMIN, MEMBER. Permissões em permissoes.py.
"""

from .permissoes import (
    PapelOrganizacao,
    AcaoOrganizacao,
    pode_executar,
    exigir_permissao,
)
from .entities import OrganizacaoEntity, MembroOrganizacao, ConviteOrganizacao
from .ports import OrganizacaoRepository, ConviteRepository
from .dtos import OrganizacaoOutputDTO, ConviteOutputDTO

__all__ = [
    # RBAC
    "PapelOrganizacao",
    "AcaoOrganizacao",
    "pode_executar",
    "exigir_permissao",
    # Entities
    "OrganizacaoEntity",
    "MembroOrganizacao",
    "ConviteOrganizacao",
    # Ports
    "OrganizacaoRepository",
    "ConviteRepository",
    # DTOs
    "OrganizacaoOutputDTO",
    "ConviteOutputDTO",
]
