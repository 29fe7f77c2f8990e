"""
URL patterns para usuários e perfis (montadas em /api/).

Endpoints API JSON:
- /api/usuarios/...
- /api/clientes/...
- /api/profissionais/...
- /api/empresas/...
"""

from django.urls import path

from . import api_views

app_name = 'contas'

urlpatterns = [
    # =========================================================================
    # Usuários
    # =========================================================================
    path('usuarios/', api_views.UsuarioAPIListView.as_view(), name='usuario_list'),
    path('usuarios/<str:pk>/', api_views.UsuarioAPIDetailView.as_view(), name='usuario_detail'),

    # =========================================================================
    # Clientes
    # =========================================================================
    path('clientes/', api_views.PerfilClienteAPIListView.as_view(), name='cliente_list'),
    path(
        'clientes/<str:usuario_id>/',
        api_views.PerfilClienteAPIDetailView.as_view(),
        name='cliente_detail'
    ),
    path(
        'clientes/<str:usuario_id>/preferencias/',
        api_views.PreferenciasAPIView.as_view(),
        name='cliente_preferencias'
    ),

    # Endereços
    path(
        'clientes/<str:usuario_id>/enderecos/',
        api_views.EnderecoAPIListView.as_view(),
        name='endereco_list'
    ),
    path(
        'clientes/<str:usuario_id>/enderecos/<str:endereco_id>/',
        api_views.EnderecoAPIDetailView.as_view(),
        name='endereco_detail'
    ),
    path(
        'clientes/<str:usuario_id>/enderecos/<str:endereco_id>/padrao/',
        api_views.EnderecoPadraoAPIView.as_view(),
        name='endereco_padrao'
    ),

    # Métodos de pagamento
    path(
        'clientes/<str:usuario_id>/pagamentos/',
        api_views.MetodoPagamentoAPIListView.as_view(),
        name='pagamento_list'
    ),
    path(
        'clientes/<str:usuario_id>/pagamentos/<str:metodo_id>/',
        api_views.MetodoPagamentoAPIDetailView.as_view(),
        name='pagamento_detail'
    ),
    path(
        'clientes/<str:usuario_id>/pagamentos/<str:metodo_id>/padrao/',
        api_views.MetodoPagamentoPadraoAPIView.as_view(),
        name='pagamento_padrao'
    ),

    # Favoritos
    path(
        'clientes/<str:usuario_id>/favoritos/',
        api_views.FavoritoAPIListView.as_view(),
        name='favorito_list'
    ),
    path(
        'clientes/<str:usuario_id>/favoritos/<str:servico_id>/',
        api_views.FavoritoAPIDetailView.as_view(),
        name='favorito_detail'
    ),

    # =========================================================================
    # Profissionais
    # =========================================================================
    path(
        'profissionais/',
        api_views.PerfilProfissionalAPIListView.as_view(),
        name='profissional_list'
    ),
    path(
        'profissionais/<str:usuario_id>/',
        api_views.PerfilProfissionalAPIDetailView.as_view(),
        name='profissional_detail'
    ),
    path(
        'profissionais/<str:usuario_id>/especialidades/',
        api_views.EspecialidadeAPIListView.as_view(),
        name='especialidade_list'
    ),
    path(
        'profissionais/<str:usuario_id>/especialidades/<str:nome>/',
        api_views.EspecialidadeAPIDetailView.as_view(),
        name='especialidade_detail'
    ),

    # =========================================================================
    # Empresas
    # =========================================================================
    path('empresas/', api_views.PerfilEmpresaAPIListView.as_view(), name='empresa_list'),
    path(
        'empresas/<str:usuario_id>/',
        api_views.PerfilEmpresaAPIDetailView.as_view(),
        name='empresa_detail'
    ),
]
