"""
Django Models para usuários e perfis.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/usuarios e src/core/perfis.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Invariantes (CPF, item padrão, favoritos únicos) ficam no Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- UsuarioModel: Conta base
- PerfilClienteModel: 1:1 com usuário; endereços, métodos de
  pagamento e favoritos embutidos em JSONField (removidos junto
  com o perfil)
- PerfilProfissionalModel / PerfilEmpresaModel: 1:1 com usuário
"""

from django.db import models
from django.utils import timezone


class TipoUsuarioChoices(models.TextChoices):
    """Choices para tipo de usuário (espelha TipoUsuario do Core)."""
    CLIENT = 'CLIENT', 'Cliente'
    PROFESSIONAL = 'PROFESSIONAL', 'Profissional'
    COMPANY = 'COMPANY', 'Empresa'


class ModoAtendimentoChoices(models.TextChoices):
    """Choices para modo de atendimento (espelha ModoAtendimento do Core)."""
    AT_LOCATION = 'AT_LOCATION', 'No local'
    AT_DOMICILE = 'AT_DOMICILE', 'A domicílio'
    BOTH = 'BOTH', 'Ambos'


class UsuarioModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: ID gerado pela Entity (ou pelo provedor de autenticação)
        email: Email único, em minúsculas
        nome: Nome de exibição
        telefone: Telefone opcional
        tipo: CLIENT, PROFESSIONAL ou COMPANY
        email_verificado: Flag de verificação
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="ID único do usuário"
    )

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="Email de login (minúsculas)"
    )

    nome = models.CharField(
        max_length=150,
        help_text="Nome de exibição"
    )

    telefone = models.CharField(
        max_length=20,
        null=True,
        blank=True,
        help_text="Telefone no formato (11) 91234-5678"
    )

    tipo = models.CharField(
        max_length=20,
        choices=TipoUsuarioChoices.choices,
        db_index=True,
        help_text="Lado do marketplace"
    )

    email_verificado = models.BooleanField(
        default=False,
        help_text="Email confirmado pelo usuário"
    )

    criado_em = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora de criação"
    )

    atualizado_em = models.DateTimeField(
        auto_now=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['tipo', 'criado_em'], name='usuarios_tipo_criado_idx'),
        ]

    def __str__(self):
        return f"{self.nome} <{self.email}>"


class PerfilClienteModel(models.Model):
    """
    Perfil de cliente.

    Endereços e métodos de pagamento são listas de dicts com
    exatamente um item `e_padrao=True` quando não vazias.
    """

    usuario = models.OneToOneField(
        UsuarioModel,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='perfil_cliente',
        help_text="Usuário dono do perfil"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF (apenas dígitos)"
    )

    enderecos = models.JSONField(
        default=list,
        blank=True,
        help_text="Endereços cadastrados"
    )

    metodos_pagamento = models.JSONField(
        default=list,
        blank=True,
        help_text="Métodos de pagamento cadastrados"
    )

    servicos_favoritos = models.JSONField(
        default=list,
        blank=True,
        help_text="IDs de serviços favoritos"
    )

    preferencias = models.JSONField(
        default=dict,
        blank=True,
        help_text="Notificações, idioma e fuso horário"
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'perfis_cliente'
        verbose_name = 'Perfil de Cliente'
        verbose_name_plural = 'Perfis de Cliente'
        ordering = ['-criado_em']

    def __str__(self):
        return f"Cliente {self.usuario_id}"


class PerfilProfissionalModel(models.Model):
    """Perfil de profissional autônomo."""

    usuario = models.OneToOneField(
        UsuarioModel,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='perfil_profissional',
        help_text="Usuário dono do perfil"
    )

    cpf = models.CharField(max_length=11, null=True, blank=True)
    cnpj = models.CharField(max_length=14, null=True, blank=True)

    endereco = models.CharField(
        max_length=255,
        help_text="Endereço de atendimento"
    )

    cidade = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Cidade de atuação"
    )

    modo_atendimento = models.CharField(
        max_length=20,
        choices=ModoAtendimentoChoices.choices,
        default=ModoAtendimentoChoices.AT_LOCATION,
        help_text="Onde o serviço é prestado"
    )

    especialidades = models.JSONField(default=list, blank=True)
    horarios = models.JSONField(
        default=dict,
        blank=True,
        help_text="Horário por dia da semana"
    )
    portfolio = models.JSONField(default=list, blank=True)

    avaliacao_media = models.FloatField(default=0.0)
    total_avaliacoes = models.PositiveIntegerField(default=0)

    ativo = models.BooleanField(default=True, db_index=True)
    verificado = models.BooleanField(default=False)

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'perfis_profissional'
        verbose_name = 'Perfil Profissional'
        verbose_name_plural = 'Perfis Profissionais'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['cidade', 'ativo'], name='perfis_prof_cidade_ativo_idx'),
        ]

    def __str__(self):
        return f"Profissional {self.usuario_id} ({self.cidade})"


class PerfilEmpresaModel(models.Model):
    """Perfil de empresa prestadora de serviços."""

    usuario = models.OneToOneField(
        UsuarioModel,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='perfil_empresa',
        help_text="Usuário dono do perfil"
    )

    cnpj = models.CharField(
        max_length=14,
        unique=True,
        help_text="CNPJ (apenas dígitos)"
    )

    endereco = models.CharField(max_length=255)
    cidade = models.CharField(max_length=100, db_index=True)
    descricao = models.TextField(null=True, blank=True)

    fotos = models.JSONField(
        default=list,
        blank=True,
        help_text="URLs das fotos do portfólio"
    )

    ativo = models.BooleanField(default=True, db_index=True)
    verificado = models.BooleanField(default=False)

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'perfis_empresa'
        verbose_name = 'Perfil de Empresa'
        verbose_name_plural = 'Perfis de Empresa'
        ordering = ['-criado_em']

    def __str__(self):
        return f"Empresa {self.cnpj}"
