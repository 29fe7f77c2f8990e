"""
Ports (Interfaces) do Domínio de Usuários.

Implementações:
- DjangoUsuarioRepository (adapters/django_app/contas)
- InMemoryUsuarioRepository (testes)
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from .entities import UsuarioEntity


@runtime_checkable
class UsuarioRepository(Protocol):
    """Interface para persistência de usuários."""

    def save(self, usuario: UsuarioEntity) -> None:
        ...

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        """Busca por email (normalizado em minúsculas)."""
        ...

    def delete(self, usuario_id: str) -> None:
        ...

    def exists(self, usuario_id: str) -> bool:
        ...


class InMemoryUsuarioRepository:
    """
    Implementação em memória do UsuarioRepository.

    Útil para testes unitários e prototipagem.
    """

    def __init__(self):
        self._usuarios: Dict[str, UsuarioEntity] = {}

    def save(self, usuario: UsuarioEntity) -> None:
        self._usuarios[usuario.id] = usuario

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        return self._usuarios.get(usuario_id)

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        email = (email or "").strip().lower()
        return next(
            (u for u in self._usuarios.values() if u.email == email),
            None
        )

    def delete(self, usuario_id: str) -> None:
        self._usuarios.pop(usuario_id, None)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._usuarios

    def clear(self) -> None:
        self._usuarios.clear()
