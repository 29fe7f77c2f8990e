"""
Testes do Domínio de Usuários (entidade e use cases).
"""

import pytest

from src.core.usuarios.entities import UsuarioEntity, TipoUsuario
from src.core.usuarios.dtos import CriarUsuarioInputDTO
from src.core.usuarios.events import UsuarioCriadoEvent
from src.core.usuarios.use_cases import CriarUsuarioService, ObterUsuarioService
from src.core.shared.exceptions import (
    ValidationError,
    ConflictError,
    EntityNotFoundError,
)


class TestUsuarioEntity:

    def test_criar_normaliza_email(self):
        usuario = UsuarioEntity.criar(
            email="  Maria@Exemplo.COM ",
            nome=" Maria ",
            tipo=TipoUsuario.CLIENT,
        )

        assert usuario.email == "maria@exemplo.com"
        assert usuario.nome == "Maria"
        assert usuario.email_verificado is False

    def test_id_externo(self):
        usuario = UsuarioEntity.criar(
            email="a@b.com", nome="Ana", tipo=TipoUsuario.CLIENT, usuario_id="ext-1"
        )
        assert usuario.id == "ext-1"

    @pytest.mark.parametrize("email", ["", "sem-arroba", "a@b", "a @b.com"])
    def test_email_invalido(self, email):
        with pytest.raises(ValidationError) as exc:
            UsuarioEntity.criar(email=email, nome="Ana", tipo=TipoUsuario.CLIENT)
        assert exc.value.field == "email"

    def test_nome_curto(self):
        with pytest.raises(ValidationError) as exc:
            UsuarioEntity.criar(email="a@b.com", nome="A", tipo=TipoUsuario.CLIENT)
        assert exc.value.field == "nome"

    def test_telefone(self):
        usuario = UsuarioEntity.criar(
            email="a@b.com", nome="Ana", tipo=TipoUsuario.CLIENT,
            telefone="(11) 91234-5678",
        )
        assert usuario.telefone == "(11) 91234-5678"

        with pytest.raises(ValidationError):
            UsuarioEntity.criar(
                email="a@b.com", nome="Ana", tipo=TipoUsuario.CLIENT,
                telefone="11912345678",
            )

    @pytest.mark.parametrize("tipo,agendar,oferecer,funcionarios", [
        (TipoUsuario.CLIENT, True, False, False),
        (TipoUsuario.PROFESSIONAL, False, True, False),
        (TipoUsuario.COMPANY, False, True, True),
    ])
    def test_capacidades_por_tipo(self, tipo, agendar, oferecer, funcionarios):
        usuario = UsuarioEntity.criar(email="a@b.com", nome="Ana", tipo=tipo)

        assert usuario.pode_agendar_servicos is agendar
        assert usuario.pode_oferecer_servicos is oferecer
        assert usuario.pode_gerenciar_funcionarios is funcionarios

    def test_tipo_from_string(self):
        assert TipoUsuario.from_string("professional") == TipoUsuario.PROFESSIONAL
        assert TipoUsuario.PROFESSIONAL.tipo_perfil == "professional"

        with pytest.raises(ValidationError):
            TipoUsuario.from_string("ADMIN")

    def test_atualizar_dados_nao_muda_tipo(self):
        usuario = UsuarioEntity.criar(email="a@b.com", nome="Ana", tipo=TipoUsuario.CLIENT)

        usuario.atualizar_dados(nome="Ana Maria")

        assert usuario.nome == "Ana Maria"
        assert usuario.tipo == TipoUsuario.CLIENT


class TestCriarUsuarioService:

    def test_criar_usuario(self, usuario_repo, uow):
        service = CriarUsuarioService(usuario_repo, uow)

        output = service.execute(CriarUsuarioInputDTO(
            email="joao@exemplo.com", nome="João", tipo="client"
        ))

        assert output.tipo == "CLIENT"
        assert usuario_repo.exists(output.id)
        assert uow.committed
        assert len(uow.published) == 1
        assert isinstance(uow.published[0], UsuarioCriadoEvent)
        assert uow.published[0].to_dict()["data"]["tipo"] == "CLIENT"

    def test_email_duplicado(self, usuario_repo, uow, cliente):
        service = CriarUsuarioService(usuario_repo, uow)

        with pytest.raises(ConflictError):
            service.execute(CriarUsuarioInputDTO(
                email="CLIENTE@exemplo.com", nome="Outro", tipo="CLIENT"
            ))

        assert uow.rolled_back
        assert uow.published == []

    def test_tipo_invalido(self, usuario_repo, uow):
        service = CriarUsuarioService(usuario_repo, uow)

        with pytest.raises(ValidationError):
            service.execute(CriarUsuarioInputDTO(
                email="x@exemplo.com", nome="Xavier", tipo="ROOT"
            ))

    def test_from_dict(self):
        dto = CriarUsuarioInputDTO.from_dict({
            "email": "a@b.com", "nome": "Ana", "tipo": "CLIENT", "id": "ext-9"
        })
        assert dto.usuario_id == "ext-9"
        assert dto.telefone is None


class TestObterUsuarioService:

    def test_obter(self, usuario_repo, cliente):
        output = ObterUsuarioService(usuario_repo).execute(cliente.id)

        assert output.email == cliente.email
        assert output.to_dict()["pode_agendar_servicos"] is True

    def test_inexistente(self, usuario_repo):
        with pytest.raises(EntityNotFoundError):
            ObterUsuarioService(usuario_repo).execute("nao-existe")
