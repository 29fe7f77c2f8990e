"""
Django Admin para o domínio de Organizações.
"""

from django.contrib import admin
from django.utils import timezone

from .models import (
    OrganizacaoModel,
    MembroOrganizacaoModel,
    ConviteOrganizacaoModel,
)


class MembroInline(admin.TabularInline):
    model = MembroOrganizacaoModel
    extra = 0
    fields = ['usuario_id', 'papel', 'entrou_em']


@admin.register(OrganizacaoModel)
class OrganizacaoAdmin(admin.ModelAdmin):
    """Admin para OrganizacaoModel."""

    list_display = ['nome', 'slug', 'dono_id', 'total_membros', 'criado_em']

    search_fields = ['id', 'nome', 'slug', 'dono_id']

    readonly_fields = ['id', 'criado_em', 'atualizado_em']

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'nome', 'slug', 'descricao'],
        }),
        ('Responsável', {
            'fields': ['dono_id'],
        }),
        ('Timestamps', {
            'fields': ['criado_em', 'atualizado_em'],
            'classes': ['collapse'],
        }),
    ]

    inlines = [MembroInline]

    ordering = ['-criado_em']

    def total_membros(self, obj):
        return obj.membros.count()
    total_membros.short_description = 'Membros'


@admin.register(ConviteOrganizacaoModel)
class ConviteOrganizacaoAdmin(admin.ModelAdmin):

    list_display = ['email', 'organizacao', 'papel', 'expira_em', 'situacao']
    list_filter = ['papel', 'expira_em']
    search_fields = ['email', 'organizacao__slug']
    readonly_fields = ['id', 'criado_em', 'aceito_em']

    def situacao(self, obj):
        """Aceito, expirado ou pendente."""
        if obj.aceito_em:
            return 'Aceito'
        if obj.expira_em < timezone.now():
            return 'Expirado'
        return 'Pendente'
    situacao.short_description = 'Situação'
