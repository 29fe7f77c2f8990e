"""
Configurações globais do Pytest para o Marketplace de Serviços.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas entre testes de core e adapters.

Django é configurado pelo pytest-django (DJANGO_SETTINGS_MODULE
em pyproject.toml).
"""

import pytest

from src.core.shared.interfaces import InMemoryUnitOfWork
from src.core.usuarios.entities import UsuarioEntity, TipoUsuario
from src.core.usuarios.ports import InMemoryUsuarioRepository
from src.core.perfis.ports import (
    InMemoryPerfilClienteRepository,
    InMemoryPerfilProfissionalRepository,
    InMemoryPerfilEmpresaRepository,
)
from src.core.organizacoes.ports import (
    InMemoryOrganizacaoRepository,
    InMemoryConviteRepository,
)


# =============================================================================
# Repositórios e UoW em memória
# =============================================================================

@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def usuario_repo():
    return InMemoryUsuarioRepository()


@pytest.fixture
def perfil_cliente_repo():
    return InMemoryPerfilClienteRepository()


@pytest.fixture
def perfil_profissional_repo():
    return InMemoryPerfilProfissionalRepository()


@pytest.fixture
def perfil_empresa_repo():
    return InMemoryPerfilEmpresaRepository()


@pytest.fixture
def organizacao_repo():
    return InMemoryOrganizacaoRepository()


@pytest.fixture
def convite_repo():
    return InMemoryConviteRepository()


# =============================================================================
# Usuários de exemplo
# =============================================================================

@pytest.fixture
def cliente(usuario_repo):
    usuario = UsuarioEntity.criar(
        email="cliente@exemplo.com",
        nome="Carla Cliente",
        tipo=TipoUsuario.CLIENT,
        usuario_id="cliente-1",
    )
    usuario_repo.save(usuario)
    return usuario


@pytest.fixture
def profissional(usuario_repo):
    usuario = UsuarioEntity.criar(
        email="pedro@exemplo.com",
        nome="Pedro Profissional",
        tipo=TipoUsuario.PROFESSIONAL,
        usuario_id="prof-1",
    )
    usuario_repo.save(usuario)
    return usuario


@pytest.fixture
def empresa(usuario_repo):
    usuario = UsuarioEntity.criar(
        email="contato@salao.com",
        nome="Salão Bela",
        tipo=TipoUsuario.COMPANY,
        usuario_id="empresa-1",
    )
    usuario_repo.save(usuario)
    return usuario
