"""
Domínio de Perfis - Cliente, Profissional e Empresa.

Cada usuário tem no máximo um perfil, do tipo correspondente ao seu
TipoUsuario. O perfil de cliente concentra a lógica de listas com
item padrão (endereços e métodos de pagamento) e favoritos.
"""

from .value_objects import (
    Endereco,
    MetodoPagamento,
    TipoPagamento,
    PreferenciasCliente,
    ModoAtendimento,
)
from .entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)
from .ports import (
    PerfilClienteRepository,
    PerfilProfissionalRepository,
    PerfilEmpresaRepository,
)
from .dtos import (
    PerfilClienteOutputDTO,
    PerfilProfissionalOutputDTO,
    PerfilEmpresaOutputDTO,
)

__all__ = [
    # Value Objects
    "Endereco",
    "MetodoPagamento",
    "TipoPagamento",
    "PreferenciasCliente",
    "ModoAtendimento",
    # Entities
    "PerfilClienteEntity",
    "PerfilProfissionalEntity",
    "PerfilEmpresaEntity",
    # Ports
    "PerfilClienteRepository",
    "PerfilProfissionalRepository",
    "PerfilEmpresaRepository",
    # DTOs
    "PerfilClienteOutputDTO",
    "PerfilProfissionalOutputDTO",
    "PerfilEmpresaOutputDTO",
]
