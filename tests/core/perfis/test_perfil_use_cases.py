"""
Testes Unitários para Use Cases de Perfis.

Estratégia de Teste:
- Repositórios InMemory e InMemoryUnitOfWork
- Verifica agregado completo devolvido e eventos publicados
- Cenários de erro não publicam eventos
"""

import pytest

from src.core.perfis.use_cases import (
    CriarPerfilClienteService,
    ObterPerfilClienteService,
    RemoverPerfilClienteService,
    AtualizarPreferenciasClienteService,
    AdicionarEnderecoService,
    RemoverEnderecoService,
    AtualizarEnderecoService,
    DefinirEnderecoPadraoService,
    AdicionarMetodoPagamentoService,
    RemoverMetodoPagamentoService,
    AtualizarMetodoPagamentoService,
    DefinirMetodoPagamentoPadraoService,
    AdicionarServicoFavoritoService,
    RemoverServicoFavoritoService,
    CriarPerfilProfissionalService,
    ObterPerfilProfissionalService,
    AdicionarEspecialidadeService,
    RemoverEspecialidadeService,
    CriarPerfilEmpresaService,
    ObterPerfilEmpresaService,
)
from src.core.perfis.dtos import (
    CriarPerfilClienteInputDTO,
    AtualizarPreferenciasInputDTO,
    EnderecoInputDTO,
    MetodoPagamentoInputDTO,
    ItemPerfilInputDTO,
    CriarPerfilProfissionalInputDTO,
    EspecialidadeInputDTO,
    CriarPerfilEmpresaInputDTO,
)
from src.core.perfis.events import (
    PerfilClienteCriadoEvent,
    PerfilClienteRemovidoEvent,
    EnderecoAdicionadoEvent,
    EnderecoRemovidoEvent,
    MetodoPagamentoAdicionadoEvent,
    ServicoFavoritadoEvent,
)
from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    ConflictError,
)


CPF = "111.444.777-35"


def dados_endereco(endereco_id, **kwargs):
    dados = {
        "id": endereco_id,
        "rua": "Rua das Flores",
        "numero": "100",
        "bairro": "Centro",
        "cidade": "São Paulo",
        "estado": "SP",
        "cep": "01310100",
    }
    dados.update(kwargs)
    return dados


@pytest.fixture
def perfil_cliente(cliente, usuario_repo, perfil_cliente_repo, uow):
    CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow).execute(
        CriarPerfilClienteInputDTO(usuario_id=cliente.id, cpf=CPF)
    )
    uow.published.clear()
    return perfil_cliente_repo.get_by_id(cliente.id)


# =============================================================================
# Criar / Obter / Remover
# =============================================================================

class TestCriarPerfilClienteService:

    def test_criar(self, cliente, usuario_repo, perfil_cliente_repo, uow):
        service = CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow)

        output = service.execute(CriarPerfilClienteInputDTO.from_dict(cliente.id, {
            "cpf": CPF,
            "enderecos": [dados_endereco("a"), dados_endereco("b")],
            "preferencias": {"marketing": True},
        }))

        assert output.cpf == "11144477735"
        assert output.cpf_formatado == "111.444.777-35"
        assert output.endereco_padrao_id == "a"
        assert output.preferencias["marketing"] is True
        assert isinstance(uow.published[0], PerfilClienteCriadoEvent)
        assert uow.published[0].total_enderecos == 2

    def test_usuario_inexistente(self, usuario_repo, perfil_cliente_repo, uow):
        service = CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow)

        with pytest.raises(EntityNotFoundError):
            service.execute(CriarPerfilClienteInputDTO(usuario_id="fantasma", cpf=CPF))

    def test_usuario_de_outro_tipo(self, profissional, usuario_repo, perfil_cliente_repo, uow):
        service = CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow)

        with pytest.raises(BusinessRuleViolationError):
            service.execute(CriarPerfilClienteInputDTO(usuario_id=profissional.id, cpf=CPF))

    def test_perfil_duplicado(self, perfil_cliente, usuario_repo, perfil_cliente_repo, uow):
        service = CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow)

        with pytest.raises(ConflictError):
            service.execute(CriarPerfilClienteInputDTO(usuario_id="cliente-1", cpf=CPF))

        assert uow.published == []

    def test_cpf_invalido(self, cliente, usuario_repo, perfil_cliente_repo, uow):
        service = CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow)

        with pytest.raises(ValidationError):
            service.execute(CriarPerfilClienteInputDTO(usuario_id=cliente.id, cpf="12345678900"))

        assert not perfil_cliente_repo.exists(cliente.id)

    def test_from_dict_rejeita_lista_malformada(self):
        with pytest.raises(ValidationError):
            CriarPerfilClienteInputDTO.from_dict("u", {"cpf": CPF, "enderecos": "rua x"})


class TestObterERemoverPerfilCliente:

    def test_obter(self, perfil_cliente, perfil_cliente_repo):
        output = ObterPerfilClienteService(perfil_cliente_repo).execute("cliente-1")
        assert output.usuario_id == "cliente-1"

    def test_obter_inexistente(self, perfil_cliente_repo):
        with pytest.raises(EntityNotFoundError):
            ObterPerfilClienteService(perfil_cliente_repo).execute("x")

    def test_remover(self, perfil_cliente, perfil_cliente_repo, uow):
        RemoverPerfilClienteService(perfil_cliente_repo, uow).execute("cliente-1")

        assert not perfil_cliente_repo.exists("cliente-1")
        assert isinstance(uow.published[0], PerfilClienteRemovidoEvent)
        assert uow.published[0].to_dict()["data"] == {}

    def test_atualizar_preferencias(self, perfil_cliente, perfil_cliente_repo, uow):
        output = AtualizarPreferenciasClienteService(perfil_cliente_repo, uow).execute(
            AtualizarPreferenciasInputDTO(
                usuario_id="cliente-1",
                preferencias={"notificacoes": {"push": False}},
            )
        )

        assert output.preferencias["notificacoes"]["push"] is False
        assert output.preferencias["notificacoes"]["email"] is True


# =============================================================================
# Endereços
# =============================================================================

class TestEnderecoServices:

    def _adicionar(self, repo, uow, endereco_id, **kwargs):
        return AdicionarEnderecoService(repo, uow).execute(
            EnderecoInputDTO(usuario_id="cliente-1", dados=dados_endereco(endereco_id, **kwargs))
        )

    def test_primeiro_endereco_vira_padrao(self, perfil_cliente, perfil_cliente_repo, uow):
        output = self._adicionar(perfil_cliente_repo, uow, "a", e_padrao=False)

        assert output.endereco_padrao_id == "a"
        assert output.enderecos[0]["e_padrao"] is True
        evento = uow.published[0]
        assert isinstance(evento, EnderecoAdicionadoEvent)
        assert evento.e_padrao is True

    def test_primeiro_endereco_de_perfil_novo(self, cliente, usuario_repo, perfil_cliente_repo, uow):
        CriarPerfilClienteService(usuario_repo, perfil_cliente_repo, uow).execute(
            CriarPerfilClienteInputDTO(usuario_id=cliente.id, cpf="11144477735")
        )

        output = AdicionarEnderecoService(perfil_cliente_repo, uow).execute(
            EnderecoInputDTO.from_dict(cliente.id, {
                "id": "a1",
                "rua": "Rua X",
                "numero": "10",
                "bairro": "Centro",
                "cidade": "SP",
                "estado": "SP",
                "cep": "01234567",
                "e_padrao": False,
            })
        )

        assert output.enderecos == [{
            "id": "a1",
            "rua": "Rua X",
            "numero": "10",
            "complemento": None,
            "bairro": "Centro",
            "cidade": "SP",
            "estado": "SP",
            "cep": "01234567",
            "e_padrao": True,
        }]
        assert output.endereco_padrao_id == "a1"

    def test_e_padrao_texto_nao_troca_padrao(self, perfil_cliente, perfil_cliente_repo, uow):
        self._adicionar(perfil_cliente_repo, uow, "a")

        with pytest.raises(ValidationError) as exc:
            self._adicionar(perfil_cliente_repo, uow, "b", e_padrao="false")

        assert exc.value.field == "e_padrao"
        perfil = perfil_cliente_repo.get_by_id("cliente-1")
        assert perfil.obter_endereco_padrao().id == "a"
        assert [e.id for e in perfil.enderecos] == ["a"]

    def test_retorna_agregado_completo(self, perfil_cliente, perfil_cliente_repo, uow):
        self._adicionar(perfil_cliente_repo, uow, "a")
        output = self._adicionar(perfil_cliente_repo, uow, "b")

        assert [e["id"] for e in output.enderecos] == ["a", "b"]

    def test_remover_padrao_promove(self, perfil_cliente, perfil_cliente_repo, uow):
        self._adicionar(perfil_cliente_repo, uow, "a")
        self._adicionar(perfil_cliente_repo, uow, "b")
        uow.published.clear()

        output = RemoverEnderecoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="a")
        )

        assert output.endereco_padrao_id == "b"
        evento = uow.published[0]
        assert isinstance(evento, EnderecoRemovidoEvent)
        assert evento.novo_padrao_id == "b"

    def test_remover_inexistente(self, perfil_cliente, perfil_cliente_repo, uow):
        with pytest.raises(EntityNotFoundError):
            RemoverEnderecoService(perfil_cliente_repo, uow).execute(
                ItemPerfilInputDTO(usuario_id="cliente-1", item_id="x")
            )

        assert uow.published == []

    def test_perfil_inexistente(self, perfil_cliente_repo, uow):
        with pytest.raises(EntityNotFoundError):
            self._adicionar(perfil_cliente_repo, uow, "a")

    def test_atualizar_e_definir_padrao(self, perfil_cliente, perfil_cliente_repo, uow):
        self._adicionar(perfil_cliente_repo, uow, "a")
        self._adicionar(perfil_cliente_repo, uow, "b")

        output = AtualizarEnderecoService(perfil_cliente_repo, uow).execute(
            EnderecoInputDTO(
                usuario_id="cliente-1",
                dados=dados_endereco("ignorado", numero="200"),
                endereco_id="b",
            )
        )
        assert output.enderecos[1]["numero"] == "200"
        assert output.endereco_padrao_id == "a"

        output = DefinirEnderecoPadraoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="b")
        )
        assert output.endereco_padrao_id == "b"
        assert sum(1 for e in output.enderecos if e["e_padrao"]) == 1


# =============================================================================
# Métodos de pagamento e favoritos
# =============================================================================

class TestMetodoPagamentoServices:

    def _adicionar(self, repo, uow, dados):
        return AdicionarMetodoPagamentoService(repo, uow).execute(
            MetodoPagamentoInputDTO(usuario_id="cliente-1", dados=dados)
        )

    def test_adicionar_cartao(self, perfil_cliente, perfil_cliente_repo, uow):
        output = self._adicionar(perfil_cliente_repo, uow, {
            "id": "c1", "tipo": "credit_card", "nome": "Visa",
            "detalhes": {"ultimos4": "4242", "bandeira": "visa"},
        })

        assert output.metodo_pagamento_padrao_id == "c1"
        evento = uow.published[0]
        assert isinstance(evento, MetodoPagamentoAdicionadoEvent)
        assert "detalhes" not in evento.to_dict()["data"]

    def test_cartao_incompleto(self, perfil_cliente, perfil_cliente_repo, uow):
        with pytest.raises(ValidationError):
            self._adicionar(perfil_cliente_repo, uow, {
                "id": "c1", "tipo": "debit_card", "nome": "Débito",
            })

    def test_remover_atualizar_definir(self, perfil_cliente, perfil_cliente_repo, uow):
        self._adicionar(perfil_cliente_repo, uow, {"id": "p1", "tipo": "pix", "nome": "Pix"})
        self._adicionar(perfil_cliente_repo, uow, {"id": "p2", "tipo": "bank_transfer", "nome": "TED"})

        output = AtualizarMetodoPagamentoService(perfil_cliente_repo, uow).execute(
            MetodoPagamentoInputDTO(
                usuario_id="cliente-1",
                dados={"tipo": "pix", "nome": "Pix Nubank"},
                metodo_id="p1",
            )
        )
        assert output.metodos_pagamento[0]["nome"] == "Pix Nubank"
        assert output.metodo_pagamento_padrao_id == "p1"

        output = DefinirMetodoPagamentoPadraoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="p2")
        )
        assert output.metodo_pagamento_padrao_id == "p2"

        output = RemoverMetodoPagamentoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="p2")
        )
        assert output.metodo_pagamento_padrao_id == "p1"


class TestFavoritoServices:

    def test_favoritar_e_desfavoritar(self, perfil_cliente, perfil_cliente_repo, uow):
        output = AdicionarServicoFavoritoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="servico-9")
        )
        assert output.servicos_favoritos == ["servico-9"]
        assert isinstance(uow.published[0], ServicoFavoritadoEvent)

        output = RemoverServicoFavoritoService(perfil_cliente_repo, uow).execute(
            ItemPerfilInputDTO(usuario_id="cliente-1", item_id="servico-9")
        )
        assert output.servicos_favoritos == []

    def test_favorito_duplicado(self, perfil_cliente, perfil_cliente_repo, uow):
        service = AdicionarServicoFavoritoService(perfil_cliente_repo, uow)
        service.execute(ItemPerfilInputDTO(usuario_id="cliente-1", item_id="s"))

        with pytest.raises(ValidationError):
            service.execute(ItemPerfilInputDTO(usuario_id="cliente-1", item_id="s"))

    def test_remover_favorito_inexistente(self, perfil_cliente, perfil_cliente_repo, uow):
        with pytest.raises(EntityNotFoundError):
            RemoverServicoFavoritoService(perfil_cliente_repo, uow).execute(
                ItemPerfilInputDTO(usuario_id="cliente-1", item_id="s")
            )


# =============================================================================
# Profissional / Empresa
# =============================================================================

class TestPerfilProfissionalServices:

    def test_criar_obter_especialidades(
        self, profissional, usuario_repo, perfil_profissional_repo, uow
    ):
        output = CriarPerfilProfissionalService(
            usuario_repo, perfil_profissional_repo, uow
        ).execute(CriarPerfilProfissionalInputDTO.from_dict(profissional.id, {
            "endereco": "Rua A, 1",
            "cidade": "Campinas",
            "modo_atendimento": "AT_DOMICILE",
            "especialidades": ["corte"],
        }))
        assert output.modo_atendimento == "AT_DOMICILE"

        output = AdicionarEspecialidadeService(perfil_profissional_repo, uow).execute(
            EspecialidadeInputDTO(usuario_id=profissional.id, especialidade="barba")
        )
        assert output.especialidades == ["corte", "barba"]

        output = RemoverEspecialidadeService(perfil_profissional_repo, uow).execute(
            EspecialidadeInputDTO(usuario_id=profissional.id, especialidade="corte")
        )
        assert output.especialidades == ["barba"]

        output = ObterPerfilProfissionalService(perfil_profissional_repo).execute(profissional.id)
        assert output.cidade == "Campinas"

    def test_cliente_nao_cria_perfil_profissional(
        self, cliente, usuario_repo, perfil_profissional_repo, uow
    ):
        with pytest.raises(BusinessRuleViolationError):
            CriarPerfilProfissionalService(usuario_repo, perfil_profissional_repo, uow).execute(
                CriarPerfilProfissionalInputDTO(
                    usuario_id=cliente.id,
                    endereco="Rua",
                    cidade="SP",
                    modo_atendimento="BOTH",
                )
            )

    def test_modo_invalido(self, profissional, usuario_repo, perfil_profissional_repo, uow):
        with pytest.raises(ValidationError):
            CriarPerfilProfissionalService(usuario_repo, perfil_profissional_repo, uow).execute(
                CriarPerfilProfissionalInputDTO(
                    usuario_id=profissional.id,
                    endereco="Rua",
                    cidade="SP",
                    modo_atendimento="ONLINE",
                )
            )


class TestPerfilEmpresaServices:

    def test_criar_e_obter(self, empresa, usuario_repo, perfil_empresa_repo, uow):
        output = CriarPerfilEmpresaService(usuario_repo, perfil_empresa_repo, uow).execute(
            CriarPerfilEmpresaInputDTO(
                usuario_id=empresa.id,
                cnpj="11.222.333/0001-81",
                endereco="Av. Brasil, 500",
                cidade="Rio de Janeiro",
            )
        )
        assert output.cnpj_formatado == "11.222.333/0001-81"

        output = ObterPerfilEmpresaService(perfil_empresa_repo).execute(empresa.id)
        assert output.cidade == "Rio de Janeiro"

    def test_obter_inexistente(self, perfil_empresa_repo):
        with pytest.raises(EntityNotFoundError):
            ObterPerfilEmpresaService(perfil_empresa_repo).execute("x")
