"""
Ports (Interfaces) do Domínio de Perfis.

Perfis são identificados pelo usuario_id do dono (relação 1:1),
por isso get_by_id recebe o ID do usuário.

Implementações:
- Django*Repository (adapters/django_app/contas)
- InMemory*Repository (testes)
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from .entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)


@runtime_checkable
class PerfilClienteRepository(Protocol):
    """
    Interface para persistência de perfis de cliente.

    Remoção apaga também endereços e métodos de pagamento (cascade
    é responsabilidade da implementação).
    """

    def save(self, perfil: PerfilClienteEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[PerfilClienteEntity]:
        ...

    def get_by_cpf(self, cpf: str) -> Optional[PerfilClienteEntity]:
        """Busca por CPF (apenas dígitos)."""
        ...

    def delete(self, usuario_id: str) -> None:
        ...

    def exists(self, usuario_id: str) -> bool:
        ...


@runtime_checkable
class PerfilProfissionalRepository(Protocol):

    def save(self, perfil: PerfilProfissionalEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[PerfilProfissionalEntity]:
        ...

    def exists(self, usuario_id: str) -> bool:
        ...


@runtime_checkable
class PerfilEmpresaRepository(Protocol):

    def save(self, perfil: PerfilEmpresaEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[PerfilEmpresaEntity]:
        ...

    def get_by_cnpj(self, cnpj: str) -> Optional[PerfilEmpresaEntity]:
        ...

    def exists(self, usuario_id: str) -> bool:
        ...


class InMemoryPerfilClienteRepository:
    """Implementação em memória do PerfilClienteRepository."""

    def __init__(self):
        self._perfis: Dict[str, PerfilClienteEntity] = {}

    def save(self, perfil: PerfilClienteEntity) -> None:
        self._perfis[perfil.usuario_id] = perfil

    def get_by_id(self, usuario_id: str) -> Optional[PerfilClienteEntity]:
        return self._perfis.get(usuario_id)

    def get_by_cpf(self, cpf: str) -> Optional[PerfilClienteEntity]:
        return next((p for p in self._perfis.values() if p.cpf == cpf), None)

    def delete(self, usuario_id: str) -> None:
        self._perfis.pop(usuario_id, None)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._perfis

    def clear(self) -> None:
        self._perfis.clear()


class InMemoryPerfilProfissionalRepository:

    def __init__(self):
        self._perfis: Dict[str, PerfilProfissionalEntity] = {}

    def save(self, perfil: PerfilProfissionalEntity) -> None:
        self._perfis[perfil.usuario_id] = perfil

    def get_by_id(self, usuario_id: str) -> Optional[PerfilProfissionalEntity]:
        return self._perfis.get(usuario_id)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._perfis


class InMemoryPerfilEmpresaRepository:

    def __init__(self):
        self._perfis: Dict[str, PerfilEmpresaEntity] = {}

    def save(self, perfil: PerfilEmpresaEntity) -> None:
        self._perfis[perfil.usuario_id] = perfil

    def get_by_id(self, usuario_id: str) -> Optional[PerfilEmpresaEntity]:
        return self._perfis.get(usuario_id)

    def get_by_cnpj(self, cnpj: str) -> Optional[PerfilEmpresaEntity]:
        return next((p for p in self._perfis.values() if p.cnpj == cnpj), None)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._perfis
