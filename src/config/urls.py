"""
URL Configuration do Marketplace de Serviços.

Estrutura:
- /admin/ - Django Admin
- /api/usuarios/, /api/clientes/, /api/profissionais/, /api/empresas/
- /api/organizacoes/ - Organizações, membros e convites
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API JSON
    path('api/organizacoes/', include('src.adapters.django_app.organizacoes.urls')),
    path('api/', include('src.adapters.django_app.contas.urls')),

    # Health check
    path('health/', health, name='health'),
]
