"""
URL patterns para Organizações (montadas em /api/organizacoes/).
"""

from django.urls import path

from . import api_views

app_name = 'organizacoes'

urlpatterns = [
    path('', api_views.OrganizacaoAPIListView.as_view(), name='list'),

    # Antes do <organizacao_id> para não conflitar
    path('minhas/', api_views.OrganizacaoAPIMinhasView.as_view(), name='minhas'),
    path(
        'convites/<str:convite_id>/aceitar/',
        api_views.ConviteAceitarAPIView.as_view(),
        name='convite_aceitar'
    ),

    path(
        '<str:organizacao_id>/convites/',
        api_views.ConviteAPIListView.as_view(),
        name='convite_list'
    ),
    path(
        '<str:organizacao_id>/membros/<str:membro_id>/',
        api_views.MembroAPIDetailView.as_view(),
        name='membro_detail'
    ),
    path(
        '<str:organizacao_id>/permissao/',
        api_views.PermissaoAPIView.as_view(),
        name='permissao'
    ),
]
