"""
Migration inicial para o domínio de Organizações.

Cria as tabelas:
- organizacoes
- organizacao_membros
- organizacao_convites
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


PAPEIS = [
    ('OWNER', 'Owner'),
    ('ADMIN', 'Admin'),
    ('MEMBER', 'Membro'),
]


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: organizacoes
        # =================================================================
        migrations.CreateModel(
            name='OrganizacaoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da organização'
                )),
                ('nome', models.CharField(
                    max_length=150,
                    help_text='Nome da organização'
                )),
                ('slug', models.SlugField(
                    max_length=100,
                    unique=True,
                    help_text='Identificador único na URL'
                )),
                ('descricao', models.TextField(
                    null=True,
                    blank=True,
                    help_text='Descrição livre'
                )),
                ('dono_id', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='ID do usuário criador'
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
                'verbose_name': 'Organização',
                'verbose_name_plural': 'Organizações',
                'db_table': 'organizacoes',
                'ordering': ['-criado_em'],
            },
        ),

        # =================================================================
        # Tabela: organizacao_membros
        # =================================================================
        migrations.CreateModel(
            name='MembroOrganizacaoModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('organizacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='membros',
                    to='organizacoes.organizacaomodel',
                    help_text='Organização'
                )),
                ('usuario_id', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='ID do usuário membro'
                )),
                ('papel', models.CharField(
                    max_length=10,
                    choices=PAPEIS,
                    default='MEMBER',
                    help_text='Papel na organização'
                )),
                ('entrou_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Quando o usuário entrou'
                )),
            ],
            options={
                'verbose_name': 'Membro de Organização',
                'verbose_name_plural': 'Membros de Organização',
                'db_table': 'organizacao_membros',
                'ordering': ['entrou_em', 'id'],
                'constraints': [
                    models.UniqueConstraint(
                        fields=['organizacao', 'usuario_id'],
                        name='membro_unico_por_organizacao'
                    ),
                ],
            },
        ),

        # =================================================================
        # Tabela: organizacao_convites
        # =================================================================
        migrations.CreateModel(
            name='ConviteOrganizacaoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do convite'
                )),
                ('organizacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='convites',
                    to='organizacoes.organizacaomodel',
                    help_text='Organização que convida'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    db_index=True,
                    help_text='Email do convidado'
                )),
                ('papel', models.CharField(
                    max_length=10,
                    choices=PAPEIS,
                    default='MEMBER',
                    help_text='Papel que o convidado recebe ao aceitar'
                )),
                ('convidado_por_id', models.CharField(
                    max_length=100,
                    help_text='ID do usuário que convidou'
                )),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('expira_em', models.DateTimeField(
                    db_index=True,
                    help_text='Validade do convite'
                )),
                ('aceito_em', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Quando o convite foi aceito'
                )),
            ],
            options={
                'verbose_name': 'Convite de Organização',
                'verbose_name_plural': 'Convites de Organização',
                'db_table': 'organizacao_convites',
                'ordering': ['-criado_em'],
                'indexes': [
                    models.Index(
                        fields=['organizacao', 'criado_em'],
                        name='convites_org_criado_idx'
                    ),
                ],
            },
        ),
    ]
