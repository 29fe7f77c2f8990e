"""
Ports (Interfaces) do Domínio de Organizações.

Implementações:
- DjangoOrganizacaoRepository / DjangoConviteRepository
- InMemoryOrganizacaoRepository / InMemoryConviteRepository (testes)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import OrganizacaoEntity, ConviteOrganizacao


@runtime_checkable
class OrganizacaoRepository(Protocol):
    """
    Interface para persistência de organizações.

    save() persiste a organização junto com a lista de membros.
    """

    def save(self, organizacao: OrganizacaoEntity) -> None:
        ...

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        ...

    def slug_exists(self, slug: str) -> bool:
        ...

    def list_by_membro(self, usuario_id: str) -> List[OrganizacaoEntity]:
        """Organizações em que o usuário é membro (qualquer papel)."""
        ...


@runtime_checkable
class ConviteRepository(Protocol):

    def save(self, convite: ConviteOrganizacao) -> None:
        ...

    def get_by_id(self, convite_id: str) -> Optional[ConviteOrganizacao]:
        ...

    def list_by_organizacao(self, organizacao_id: str) -> List[ConviteOrganizacao]:
        ...


class InMemoryOrganizacaoRepository:

    def __init__(self):
        self._organizacoes: Dict[str, OrganizacaoEntity] = {}

    def save(self, organizacao: OrganizacaoEntity) -> None:
        self._organizacoes[organizacao.id] = organizacao

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        return self._organizacoes.get(organizacao_id)

    def slug_exists(self, slug: str) -> bool:
        return any(o.slug == slug for o in self._organizacoes.values())

    def list_by_membro(self, usuario_id: str) -> List[OrganizacaoEntity]:
        return [o for o in self._organizacoes.values() if o.e_membro(usuario_id)]


class InMemoryConviteRepository:

    def __init__(self):
        self._convites: Dict[str, ConviteOrganizacao] = {}

    def save(self, convite: ConviteOrganizacao) -> None:
        self._convites[convite.id] = convite

    def get_by_id(self, convite_id: str) -> Optional[ConviteOrganizacao]:
        return self._convites.get(convite_id)

    def list_by_organizacao(self, organizacao_id: str) -> List[ConviteOrganizacao]:
        return [
            c for c in self._convites.values()
            if c.organizacao_id == organizacao_id
        ]
