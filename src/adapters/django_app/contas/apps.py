"""
Configuração do Django App para usuários e perfis.
"""

from django.apps import AppConfig


class ContasConfig(AppConfig):
    """Configuração do app Contas (usuários + perfis)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.contas'
    label = 'contas'
    verbose_name = 'Usuários e Perfis'
