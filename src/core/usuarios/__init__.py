"""
Domínio de Usuários - Contas do marketplace.

Todo usuário é de exatamente um tipo (cliente, profissional ou
empresa), fixado na criação.
"""

from .entities import UsuarioEntity, TipoUsuario
from .events import UsuarioCriadoEvent
from .dtos import CriarUsuarioInputDTO, UsuarioOutputDTO
from .ports import UsuarioRepository, InMemoryUsuarioRepository
from .use_cases import CriarUsuarioService, ObterUsuarioService

__all__ = [
    # Entities
    "UsuarioEntity",
    "TipoUsuario",
    # Events
    "UsuarioCriadoEvent",
    # DTOs
    "CriarUsuarioInputDTO",
    "UsuarioOutputDTO",
    # Ports
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    # Use Cases
    "CriarUsuarioService",
    "ObterUsuarioService",
]
