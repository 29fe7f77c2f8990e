"""
Django Admin para usuários e perfis.
"""

from django.contrib import admin
from django.utils.html import format_html

from src.core.shared.documentos import formatar_cpf, formatar_cnpj

from .models import (
    UsuarioModel,
    PerfilClienteModel,
    PerfilProfissionalModel,
    PerfilEmpresaModel,
)


@admin.register(UsuarioModel)
class UsuarioAdmin(admin.ModelAdmin):
    """Admin para UsuarioModel."""

    list_display = [
        'id_curto',
        'nome',
        'email',
        'tipo_badge',
        'email_verificado',
        'criado_em',
    ]

    list_filter = ['tipo', 'email_verificado', 'criado_em']

    search_fields = ['id', 'nome', 'email', 'telefone']

    readonly_fields = ['id', 'criado_em', 'atualizado_em']

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'nome', 'email', 'telefone'],
        }),
        ('Conta', {
            'fields': ['tipo', 'email_verificado'],
        }),
        ('Timestamps', {
            'fields': ['criado_em', 'atualizado_em'],
            'classes': ['collapse'],
        }),
    ]

    ordering = ['-criado_em']

    def id_curto(self, obj):
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def tipo_badge(self, obj):
        """Exibe tipo com badge colorido."""
        colors = {
            'CLIENT': '#17a2b8',
            'PROFESSIONAL': '#28a745',
            'COMPANY': '#6f42c1',
        }
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            colors.get(obj.tipo, '#6c757d'),
            obj.get_tipo_display()
        )
    tipo_badge.short_description = 'Tipo'


@admin.register(PerfilClienteModel)
class PerfilClienteAdmin(admin.ModelAdmin):

    list_display = ['usuario', 'cpf_formatado', 'total_enderecos', 'criado_em']
    search_fields = ['usuario__id', 'usuario__email', 'cpf']
    readonly_fields = ['criado_em', 'atualizado_em']

    def cpf_formatado(self, obj):
        return formatar_cpf(obj.cpf)
    cpf_formatado.short_description = 'CPF'

    def total_enderecos(self, obj):
        return len(obj.enderecos or [])
    total_enderecos.short_description = 'Endereços'


@admin.register(PerfilProfissionalModel)
class PerfilProfissionalAdmin(admin.ModelAdmin):

    list_display = [
        'usuario',
        'cidade',
        'modo_atendimento',
        'avaliacao_media',
        'ativo',
        'verificado',
    ]
    list_filter = ['modo_atendimento', 'ativo', 'verificado']
    search_fields = ['usuario__id', 'usuario__email', 'cidade']
    readonly_fields = ['criado_em', 'atualizado_em']


@admin.register(PerfilEmpresaModel)
class PerfilEmpresaAdmin(admin.ModelAdmin):

    list_display = ['usuario', 'cnpj_formatado', 'cidade', 'ativo', 'verificado']
    list_filter = ['ativo', 'verificado']
    search_fields = ['usuario__id', 'cnpj', 'cidade']
    readonly_fields = ['criado_em', 'atualizado_em']

    def cnpj_formatado(self, obj):
        return formatar_cnpj(obj.cnpj)
    cnpj_formatado.short_description = 'CNPJ'
