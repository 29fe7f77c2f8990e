"""
Django Models para o domínio de Organizações.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/organizacoes/entities.py.

Relacionamentos:
- OrganizacaoModel: Tabela principal
- MembroOrganizacaoModel: Usuário + papel (N por organização)
- ConviteOrganizacaoModel: Convites por email com validade
"""

from django.db import models
from django.utils import timezone


class PapelOrganizacaoChoices(models.TextChoices):
    """Choices para papel (espelha PapelOrganizacao do Core)."""
    OWNER = 'OWNER', 'Owner'
    ADMIN = 'ADMIN', 'Admin'
    MEMBER = 'MEMBER', 'Membro'


class OrganizacaoModel(models.Model):
    """
    Model Django para persistência de Organizações.

    Fields:
        id: UUID gerado pela Entity
        nome: Nome de exibição
        slug: Identificador único usado na URL
        dono_id: Usuário criador (string para flexibilidade)
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da organização"
    )

    nome = models.CharField(
        max_length=150,
        help_text="Nome da organização"
    )

    slug = models.SlugField(
        max_length=100,
        unique=True,
        help_text="Identificador único na URL"
    )

    descricao = models.TextField(
        null=True,
        blank=True,
        help_text="Descrição livre"
    )

    dono_id = models.CharField(
        max_length=100,
        db_index=True,
        help_text="ID do usuário criador"
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
        db_table = 'organizacoes'
        verbose_name = 'Organização'
        verbose_name_plural = 'Organizações'
        ordering = ['-criado_em']

    def __str__(self):
        return f"{self.nome} ({self.slug})"


class MembroOrganizacaoModel(models.Model):
    """Vínculo usuário ↔ organização com papel."""

    id = models.BigAutoField(primary_key=True)

    organizacao = models.ForeignKey(
        OrganizacaoModel,
        on_delete=models.CASCADE,
        related_name='membros',
        help_text="Organização"
    )

    usuario_id = models.CharField(
        max_length=100,
        db_index=True,
        help_text="ID do usuário membro"
    )

    papel = models.CharField(
        max_length=10,
        choices=PapelOrganizacaoChoices.choices,
        default=PapelOrganizacaoChoices.MEMBER,
        help_text="Papel na organização"
    )

    entrou_em = models.DateTimeField(
        default=timezone.now,
        help_text="Quando o usuário entrou"
    )

    class Meta:
        db_table = 'organizacao_membros'
        verbose_name = 'Membro de Organização'
        verbose_name_plural = 'Membros de Organização'
        ordering = ['entrou_em', 'id']
        constraints = [
            models.UniqueConstraint(
                fields=['organizacao', 'usuario_id'],
                name='membro_unico_por_organizacao'
            ),
        ]

    def __str__(self):
        return f"{self.usuario_id} @ {self.organizacao_id} ({self.papel})"


class ConviteOrganizacaoModel(models.Model):
    """Convite pendente ou aceito."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do convite"
    )

    organizacao = models.ForeignKey(
        OrganizacaoModel,
        on_delete=models.CASCADE,
        related_name='convites',
        help_text="Organização que convida"
    )

    email = models.EmailField(
        db_index=True,
        help_text="Email do convidado"
    )

    papel = models.CharField(
        max_length=10,
        choices=PapelOrganizacaoChoices.choices,
        default=PapelOrganizacaoChoices.MEMBER,
        help_text="Papel que o convidado recebe ao aceitar"
    )

    convidado_por_id = models.CharField(
        max_length=100,
        help_text="ID do usuário que convidou"
    )

    criado_em = models.DateTimeField(default=timezone.now)

    expira_em = models.DateTimeField(
        db_index=True,
        help_text="Validade do convite"
    )

    aceito_em = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Quando o convite foi aceito"
    )

    class Meta:
        db_table = 'organizacao_convites'
        verbose_name = 'Convite de Organização'
        verbose_name_plural = 'Convites de Organização'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['organizacao', 'criado_em'], name='convites_org_criado_idx'),
        ]

    def __str__(self):
        return f"Convite {self.email} → {self.organizacao_id}"
