"""
Configuração do Django App para Organizações.
"""

from django.apps import AppConfig


class OrganizacoesConfig(AppConfig):
    """Configuração do app Organizações."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.organizacoes'
    label = 'organizacoes'
    verbose_name = 'Organizações'
