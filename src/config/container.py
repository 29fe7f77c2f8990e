"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: valores vindos de django.conf.settings

Adapters são importados sob demanda (_lazy) para que o container
possa ser importado antes do Django estar configurado.
"""

import importlib
from typing import Callable, Optional

from dependency_injector import containers, providers


def _lazy(module_path: str, name: str) -> Callable:
    """Callable que importa `module_path.name` só na primeira chamada."""

    def factory(*args, **kwargs):
        module = importlib.import_module(module_path)
        return getattr(module, name)(*args, **kwargs)

    factory.__name__ = name
    return factory


_USUARIOS = 'src.core.usuarios.use_cases'
_PERFIS = 'src.core.perfis.use_cases'
_ORGANIZACOES = 'src.core.organizacoes.use_cases'
_CONTAS_REPOS = 'src.adapters.django_app.contas.repositories'
_ORGANIZACOES_REPOS = 'src.adapters.django_app.organizacoes.repositories'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings (modo do publisher, validade de convite)
    - Infrastructure: Event publisher
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.adicionar_endereco_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(
        default={
            'event_publisher_mode': 'sync',
            'convite_validade_dias': 7,
        }
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        _lazy('src.adapters.django_app.events.publishers', 'get_event_publisher'),
        mode=config.event_publisher_mode,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    usuario_repository = providers.Singleton(
        _lazy(_CONTAS_REPOS, 'DjangoUsuarioRepository')
    )

    perfil_cliente_repository = providers.Singleton(
        _lazy(_CONTAS_REPOS, 'DjangoPerfilClienteRepository')
    )

    perfil_profissional_repository = providers.Singleton(
        _lazy(_CONTAS_REPOS, 'DjangoPerfilProfissionalRepository')
    )

    perfil_empresa_repository = providers.Singleton(
        _lazy(_CONTAS_REPOS, 'DjangoPerfilEmpresaRepository')
    )

    organizacao_repository = providers.Singleton(
        _lazy(_ORGANIZACOES_REPOS, 'DjangoOrganizacaoRepository')
    )

    convite_repository = providers.Singleton(
        _lazy(_ORGANIZACOES_REPOS, 'DjangoConviteRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork'),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    criar_usuario_service = providers.Factory(
        _lazy(_USUARIOS, 'CriarUsuarioService'),
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    obter_usuario_service = providers.Factory(
        _lazy(_USUARIOS, 'ObterUsuarioService'),
        usuario_repo=usuario_repository,
    )

    # =========================================================================
    # Services - Perfil de Cliente
    # =========================================================================

    criar_perfil_cliente_service = providers.Factory(
        _lazy(_PERFIS, 'CriarPerfilClienteService'),
        usuario_repo=usuario_repository,
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    obter_perfil_cliente_service = providers.Factory(
        _lazy(_PERFIS, 'ObterPerfilClienteService'),
        perfil_repo=perfil_cliente_repository,
    )

    remover_perfil_cliente_service = providers.Factory(
        _lazy(_PERFIS, 'RemoverPerfilClienteService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    atualizar_preferencias_service = providers.Factory(
        _lazy(_PERFIS, 'AtualizarPreferenciasClienteService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    adicionar_endereco_service = providers.Factory(
        _lazy(_PERFIS, 'AdicionarEnderecoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    remover_endereco_service = providers.Factory(
        _lazy(_PERFIS, 'RemoverEnderecoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    atualizar_endereco_service = providers.Factory(
        _lazy(_PERFIS, 'AtualizarEnderecoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    definir_endereco_padrao_service = providers.Factory(
        _lazy(_PERFIS, 'DefinirEnderecoPadraoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    adicionar_metodo_pagamento_service = providers.Factory(
        _lazy(_PERFIS, 'AdicionarMetodoPagamentoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    remover_metodo_pagamento_service = providers.Factory(
        _lazy(_PERFIS, 'RemoverMetodoPagamentoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    atualizar_metodo_pagamento_service = providers.Factory(
        _lazy(_PERFIS, 'AtualizarMetodoPagamentoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    definir_metodo_pagamento_padrao_service = providers.Factory(
        _lazy(_PERFIS, 'DefinirMetodoPagamentoPadraoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    adicionar_favorito_service = providers.Factory(
        _lazy(_PERFIS, 'AdicionarServicoFavoritoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    remover_favorito_service = providers.Factory(
        _lazy(_PERFIS, 'RemoverServicoFavoritoService'),
        perfil_repo=perfil_cliente_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services - Perfil Profissional / Empresa
    # =========================================================================

    criar_perfil_profissional_service = providers.Factory(
        _lazy(_PERFIS, 'CriarPerfilProfissionalService'),
        usuario_repo=usuario_repository,
        perfil_repo=perfil_profissional_repository,
        uow=unit_of_work,
    )

    obter_perfil_profissional_service = providers.Factory(
        _lazy(_PERFIS, 'ObterPerfilProfissionalService'),
        perfil_repo=perfil_profissional_repository,
    )

    adicionar_especialidade_service = providers.Factory(
        _lazy(_PERFIS, 'AdicionarEspecialidadeService'),
        perfil_repo=perfil_profissional_repository,
        uow=unit_of_work,
    )

    remover_especialidade_service = providers.Factory(
        _lazy(_PERFIS, 'RemoverEspecialidadeService'),
        perfil_repo=perfil_profissional_repository,
        uow=unit_of_work,
    )

    criar_perfil_empresa_service = providers.Factory(
        _lazy(_PERFIS, 'CriarPerfilEmpresaService'),
        usuario_repo=usuario_repository,
        perfil_repo=perfil_empresa_repository,
        uow=unit_of_work,
    )

    obter_perfil_empresa_service = providers.Factory(
        _lazy(_PERFIS, 'ObterPerfilEmpresaService'),
        perfil_repo=perfil_empresa_repository,
    )

    # =========================================================================
    # Services - Organizações
    # =========================================================================

    criar_organizacao_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'CriarOrganizacaoService'),
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    convidar_membro_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'ConvidarMembroService'),
        organizacao_repo=organizacao_repository,
        convite_repo=convite_repository,
        uow=unit_of_work,
        validade_dias=config.convite_validade_dias.as_(int),
    )

    aceitar_convite_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'AceitarConviteService'),
        organizacao_repo=organizacao_repository,
        convite_repo=convite_repository,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    alterar_papel_membro_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'AlterarPapelMembroService'),
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    remover_membro_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'RemoverMembroService'),
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    verificar_permissao_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'VerificarPermissaoService'),
        organizacao_repo=organizacao_repository,
    )

    listar_organizacoes_usuario_service = providers.Factory(
        _lazy(_ORGANIZACOES, 'ListarOrganizacoesUsuarioService'),
        organizacao_repo=organizacao_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def _settings_config() -> dict:
    from django.conf import settings

    return {
        'event_publisher_mode': getattr(settings, 'EVENT_PUBLISHER_MODE', 'sync'),
        'convite_validade_dias': getattr(settings, 'CONVITE_VALIDADE_DIAS', 7),
    }


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo a
    configuração de django.conf.settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(_settings_config())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Container de testes
# =============================================================================

class InMemoryProviders(containers.DeclarativeContainer):
    """
    Providers InMemory com os mesmos nomes dos de infraestrutura do
    Container: repositórios, UoW em memória e InMemoryEventPublisher.

    O UoW recebe o mesmo publisher que event_publisher() retorna.
    """

    event_publisher = providers.Singleton(
        _lazy('src.adapters.django_app.events.publishers', 'InMemoryEventPublisher')
    )

    usuario_repository = providers.Singleton(
        _lazy('src.core.usuarios.ports', 'InMemoryUsuarioRepository')
    )

    perfil_cliente_repository = providers.Singleton(
        _lazy('src.core.perfis.ports', 'InMemoryPerfilClienteRepository')
    )

    perfil_profissional_repository = providers.Singleton(
        _lazy('src.core.perfis.ports', 'InMemoryPerfilProfissionalRepository')
    )

    perfil_empresa_repository = providers.Singleton(
        _lazy('src.core.perfis.ports', 'InMemoryPerfilEmpresaRepository')
    )

    organizacao_repository = providers.Singleton(
        _lazy('src.core.organizacoes.ports', 'InMemoryOrganizacaoRepository')
    )

    convite_repository = providers.Singleton(
        _lazy('src.core.organizacoes.ports', 'InMemoryConviteRepository')
    )

    unit_of_work = providers.Factory(
        _lazy('src.core.shared.interfaces', 'InMemoryUnitOfWork'),
        publisher=event_publisher,
    )


def criar_container_de_testes() -> Container:
    """
    Container com a infraestrutura trocada por InMemoryProviders.

    Services continuam os do Container; cada chamada devolve um
    container isolado (repositórios e publisher próprios).

    Example:
        container = criar_container_de_testes()
        container.criar_usuario_service().execute(dto)
        container.event_publisher().published_events
    """
    container = Container()
    container.override(InMemoryProviders())
    return container
