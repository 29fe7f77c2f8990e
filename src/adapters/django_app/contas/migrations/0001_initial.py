"""
Migration inicial para usuários e perfis.

Cria as tabelas:
- usuarios
- perfis_cliente
- perfis_profissional
- perfis_empresa
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: usuarios
        # =================================================================
        migrations.CreateModel(
            name='UsuarioModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='ID único do usuário'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='Email de login (minúsculas)'
                )),
                ('nome', models.CharField(
                    max_length=150,
                    help_text='Nome de exibição'
                )),
                ('telefone', models.CharField(
                    max_length=20,
                    null=True,
                    blank=True,
                    help_text='Telefone no formato (11) 91234-5678'
                )),
                ('tipo', models.CharField(
                    max_length=20,
                    choices=[
                        ('CLIENT', 'Cliente'),
                        ('PROFESSIONAL', 'Profissional'),
                        ('COMPANY', 'Empresa'),
                    ],
                    db_index=True,
                    help_text='Lado do marketplace'
                )),
                ('email_verificado', models.BooleanField(
                    default=False,
                    help_text='Email confirmado pelo usuário'
                )),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
                ('atualizado_em', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'db_table': 'usuarios',
                'ordering': ['-criado_em'],
                'indexes': [
                    models.Index(
                        fields=['tipo', 'criado_em'],
                        name='usuarios_tipo_criado_idx'
                    ),
                ],
            },
        ),

        # =================================================================
        # Tabela: perfis_cliente
        # =================================================================
        migrations.CreateModel(
            name='PerfilClienteModel',
            fields=[
                ('usuario', models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    primary_key=True,
                    serialize=False,
                    related_name='perfil_cliente',
                    to='contas.usuariomodel',
                    help_text='Usuário dono do perfil'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF (apenas dígitos)'
                )),
                ('enderecos', models.JSONField(
                    default=list,
                    blank=True,
                    help_text='Endereços cadastrados'
                )),
                ('metodos_pagamento', models.JSONField(
                    default=list,
                    blank=True,
                    help_text='Métodos de pagamento cadastrados'
                )),
                ('servicos_favoritos', models.JSONField(
                    default=list,
                    blank=True,
                    help_text='IDs de serviços favoritos'
                )),
                ('preferencias', models.JSONField(
                    default=dict,
                    blank=True,
                    help_text='Notificações, idioma e fuso horário'
                )),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Perfil de Cliente',
                'verbose_name_plural': 'Perfis de Cliente',
                'db_table': 'perfis_cliente',
                'ordering': ['-criado_em'],
            },
        ),

        # =================================================================
        # Tabela: perfis_profissional
        # =================================================================
        migrations.CreateModel(
            name='PerfilProfissionalModel',
            fields=[
                ('usuario', models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    primary_key=True,
                    serialize=False,
                    related_name='perfil_profissional',
                    to='contas.usuariomodel',
                    help_text='Usuário dono do perfil'
                )),
                ('cpf', models.CharField(max_length=11, null=True, blank=True)),
                ('cnpj', models.CharField(max_length=14, null=True, blank=True)),
                ('endereco', models.CharField(
                    max_length=255,
                    help_text='Endereço de atendimento'
                )),
                ('cidade', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Cidade de atuação'
                )),
                ('modo_atendimento', models.CharField(
                    max_length=20,
                    choices=[
                        ('AT_LOCATION', 'No local'),
                        ('AT_DOMICILE', 'A domicílio'),
                        ('BOTH', 'Ambos'),
                    ],
                    default='AT_LOCATION',
                    help_text='Onde o serviço é prestado'
                )),
                ('especialidades', models.JSONField(default=list, blank=True)),
                ('horarios', models.JSONField(
                    default=dict,
                    blank=True,
                    help_text='Horário por dia da semana'
                )),
                ('portfolio', models.JSONField(default=list, blank=True)),
                ('avaliacao_media', models.FloatField(default=0.0)),
                ('total_avaliacoes', models.PositiveIntegerField(default=0)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('verificado', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Perfil Profissional',
                'verbose_name_plural': 'Perfis Profissionais',
                'db_table': 'perfis_profissional',
                'ordering': ['-criado_em'],
                'indexes': [
                    models.Index(
                        fields=['cidade', 'ativo'],
                        name='perfis_prof_cidade_ativo_idx'
                    ),
                ],
            },
        ),

        # =================================================================
        # Tabela: perfis_empresa
        # =================================================================
        migrations.CreateModel(
            name='PerfilEmpresaModel',
            fields=[
                ('usuario', models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    primary_key=True,
                    serialize=False,
                    related_name='perfil_empresa',
                    to='contas.usuariomodel',
                    help_text='Usuário dono do perfil'
                )),
                ('cnpj', models.CharField(
                    max_length=14,
                    unique=True,
                    help_text='CNPJ (apenas dígitos)'
                )),
                ('endereco', models.CharField(max_length=255)),
                ('cidade', models.CharField(max_length=100, db_index=True)),
                ('descricao', models.TextField(null=True, blank=True)),
                ('fotos', models.JSONField(
                    default=list,
                    blank=True,
                    help_text='URLs das fotos do portfólio'
                )),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('verificado', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Perfil de Empresa',
                'verbose_name_plural': 'Perfis de Empresa',
                'db_table': 'perfis_empresa',
                'ordering': ['-criado_em'],
            },
        ),
    ]
