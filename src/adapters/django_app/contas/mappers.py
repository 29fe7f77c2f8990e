"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- UsuarioEntity ↔ UsuarioModel
- Perfil*Entity ↔ Perfil*Model

Coleções com item padrão são serializadas como lista de dicts e
reconstruídas via ListaComPadrao, que reaplica a política do padrão.
"""

from src.core.usuarios.entities import UsuarioEntity, TipoUsuario
from src.core.perfis.entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
    lista_enderecos,
    lista_metodos,
)
from src.core.perfis.value_objects import (
    Endereco,
    MetodoPagamento,
    PreferenciasCliente,
    ModoAtendimento,
)

from ..shared.tempo import para_banco, para_dominio
from .models import (
    UsuarioModel,
    PerfilClienteModel,
    PerfilProfissionalModel,
    PerfilEmpresaModel,
)


class UsuarioMapper:
    """
    Mapper para conversão entre UsuarioEntity e UsuarioModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    """

    @staticmethod
    def to_model(entity: UsuarioEntity) -> UsuarioModel:
        """
        Converte UsuarioEntity para UsuarioModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return UsuarioModel(
            id=entity.id,
            email=entity.email,
            nome=entity.nome,
            telefone=entity.telefone,
            tipo=entity.tipo.value,
            email_verificado=entity.email_verificado,
            criado_em=para_banco(entity.criado_em),
            atualizado_em=para_banco(entity.atualizado_em),
        )

    @staticmethod
    def to_entity(model: UsuarioModel) -> UsuarioEntity:
        return UsuarioEntity(
            id=model.id,
            email=model.email,
            nome=model.nome,
            telefone=model.telefone,
            tipo=TipoUsuario(model.tipo),
            email_verificado=model.email_verificado,
            criado_em=para_dominio(model.criado_em),
            atualizado_em=para_dominio(model.atualizado_em),
        )


class PerfilClienteMapper:
    """Mapper de PerfilClienteEntity (listas embutidas em JSON)."""

    @staticmethod
    def to_model(entity: PerfilClienteEntity) -> PerfilClienteModel:
        return PerfilClienteModel(
            usuario_id=entity.usuario_id,
            cpf=entity.cpf,
            enderecos=[e.to_dict() for e in entity.enderecos],
            metodos_pagamento=[m.to_dict() for m in entity.metodos_pagamento],
            servicos_favoritos=list(entity.servicos_favoritos),
            preferencias=entity.preferencias.to_dict(),
            criado_em=para_banco(entity.criado_em),
            atualizado_em=para_banco(entity.atualizado_em),
        )

    @staticmethod
    def to_entity(model: PerfilClienteModel) -> PerfilClienteEntity:
        return PerfilClienteEntity(
            usuario_id=model.usuario_id,
            cpf=model.cpf,
            enderecos=lista_enderecos(
                [Endereco.from_dict(e) for e in model.enderecos or []]
            ),
            metodos_pagamento=lista_metodos(
                [MetodoPagamento.from_dict(m) for m in model.metodos_pagamento or []]
            ),
            servicos_favoritos=list(model.servicos_favoritos or []),
            preferencias=PreferenciasCliente.from_dict(model.preferencias),
            criado_em=para_dominio(model.criado_em),
            atualizado_em=para_dominio(model.atualizado_em),
        )


class PerfilProfissionalMapper:

    @staticmethod
    def to_model(entity: PerfilProfissionalEntity) -> PerfilProfissionalModel:
        return PerfilProfissionalModel(
            usuario_id=entity.usuario_id,
            cpf=entity.cpf,
            cnpj=entity.cnpj,
            endereco=entity.endereco,
            cidade=entity.cidade,
            modo_atendimento=entity.modo_atendimento.value,
            especialidades=list(entity.especialidades),
            horarios=dict(entity.horarios),
            portfolio=list(entity.portfolio),
            avaliacao_media=entity.avaliacao_media,
            total_avaliacoes=entity.total_avaliacoes,
            ativo=entity.ativo,
            verificado=entity.verificado,
            criado_em=para_banco(entity.criado_em),
            atualizado_em=para_banco(entity.atualizado_em),
        )

    @staticmethod
    def to_entity(model: PerfilProfissionalModel) -> PerfilProfissionalEntity:
        return PerfilProfissionalEntity(
            usuario_id=model.usuario_id,
            cpf=model.cpf,
            cnpj=model.cnpj,
            endereco=model.endereco,
            cidade=model.cidade,
            modo_atendimento=ModoAtendimento(model.modo_atendimento),
            especialidades=list(model.especialidades or []),
            horarios=dict(model.horarios or {}),
            portfolio=list(model.portfolio or []),
            avaliacao_media=model.avaliacao_media,
            total_avaliacoes=model.total_avaliacoes,
            ativo=model.ativo,
            verificado=model.verificado,
            criado_em=para_dominio(model.criado_em),
            atualizado_em=para_dominio(model.atualizado_em),
        )


class PerfilEmpresaMapper:

    @staticmethod
    def to_model(entity: PerfilEmpresaEntity) -> PerfilEmpresaModel:
        return PerfilEmpresaModel(
            usuario_id=entity.usuario_id,
            cnpj=entity.cnpj,
            endereco=entity.endereco,
            cidade=entity.cidade,
            descricao=entity.descricao,
            fotos=list(entity.fotos),
            ativo=entity.ativo,
            verificado=entity.verificado,
            criado_em=para_banco(entity.criado_em),
            atualizado_em=para_banco(entity.atualizado_em),
        )

    @staticmethod
    def to_entity(model: PerfilEmpresaModel) -> PerfilEmpresaEntity:
        return PerfilEmpresaEntity(
            usuario_id=model.usuario_id,
            cnpj=model.cnpj,
            endereco=model.endereco,
            cidade=model.cidade,
            descricao=model.descricao,
            fotos=list(model.fotos or []),
            ativo=model.ativo,
            verificado=model.verificado,
            criado_em=para_dominio(model.criado_em),
            atualizado_em=para_dominio(model.atualizado_em),
        )
