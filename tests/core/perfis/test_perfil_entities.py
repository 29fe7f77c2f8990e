"""
Testes Unitários para Entidades e Value Objects de Perfis.

Coverage:
- PerfilClienteEntity (CPF, endereços, pagamentos, favoritos, preferências)
- PerfilProfissionalEntity
- PerfilEmpresaEntity
- Endereco, MetodoPagamento, PreferenciasCliente, horários
"""

import pytest

from src.core.perfis.entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)
from src.core.perfis.value_objects import (
    Endereco,
    MetodoPagamento,
    PreferenciasCliente,
    ModoAtendimento,
    validar_horarios,
)
from src.core.shared.exceptions import ValidationError, EntityNotFoundError


def endereco(endereco_id="end-1", **kwargs):
    dados = {
        "id": endereco_id,
        "rua": "Rua das Flores",
        "numero": "100",
        "bairro": "Centro",
        "cidade": "São Paulo",
        "estado": "SP",
        "cep": "01310-100",
    }
    dados.update(kwargs)
    return Endereco.from_dict(dados)


def pix(metodo_id="pag-1", **kwargs):
    return MetodoPagamento(id=metodo_id, tipo="pix", nome="Pix", **kwargs)


def cartao(metodo_id="card-1", **detalhes):
    return MetodoPagamento(
        id=metodo_id,
        tipo="credit_card",
        nome="Visa final 4242",
        detalhes={"ultimos4": "4242", "bandeira": "visa", **detalhes},
    )


@pytest.fixture
def perfil():
    return PerfilClienteEntity.criar(usuario_id="cliente-1", cpf="111.444.777-35")


def _padroes(itens):
    return [i.id for i in itens if i.e_padrao]


# =============================================================================
# Perfil de Cliente
# =============================================================================

class TestCriarPerfilCliente:

    def test_cpf_normalizado(self, perfil):
        assert perfil.cpf == "11144477735"
        assert len(perfil.enderecos) == 0
        assert perfil.preferencias == PreferenciasCliente()

    def test_cpf_obrigatorio(self):
        with pytest.raises(ValidationError) as exc:
            PerfilClienteEntity.criar(usuario_id="u", cpf="")
        assert exc.value.field == "cpf"

    def test_cpf_com_digito_errado(self):
        """CPF com 11 dígitos mas verificador errado é rejeitado."""
        with pytest.raises(ValidationError) as exc:
            PerfilClienteEntity.criar(usuario_id="u", cpf="11144477734")
        assert exc.value.message == "CPF inválido"

    def test_usuario_obrigatorio(self):
        with pytest.raises(ValidationError):
            PerfilClienteEntity.criar(usuario_id="", cpf="11144477735")

    def test_itens_iniciais_respeitam_invariante(self):
        perfil = PerfilClienteEntity.criar(
            usuario_id="u",
            cpf="11144477735",
            enderecos=[endereco("a"), endereco("b", e_padrao=True)],
            metodos_pagamento=[pix("p1"), pix("p2")],
            servicos_favoritos=["s1", "s1", "s2"],
        )

        assert _padroes(perfil.enderecos) == ["b"]
        assert _padroes(perfil.metodos_pagamento) == ["p1"]
        assert perfil.servicos_favoritos == ["s1", "s2"]


class TestEnderecos:

    def test_primeiro_endereco_vira_padrao(self, perfil):
        perfil.adicionar_endereco(endereco("a", e_padrao=False))

        assert perfil.obter_endereco_padrao().id == "a"

    def test_novo_padrao_desmarca_anterior(self, perfil):
        perfil.adicionar_endereco(endereco("a"))
        perfil.adicionar_endereco(endereco("b", e_padrao=True))

        assert _padroes(perfil.enderecos) == ["b"]

    def test_remover_padrao_promove_primeiro(self, perfil):
        perfil.adicionar_endereco(endereco("a"))
        perfil.adicionar_endereco(endereco("b"))
        perfil.adicionar_endereco(endereco("c"))

        perfil.remover_endereco("a")

        assert _padroes(perfil.enderecos) == ["b"]

    def test_remover_inexistente(self, perfil):
        with pytest.raises(EntityNotFoundError):
            perfil.remover_endereco("x")

    def test_cep_invalido(self, perfil):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_endereco(endereco("a", cep="123"))

        assert exc.value.field == "cep"
        assert len(perfil.enderecos) == 0

    @pytest.mark.parametrize("campo", ["id", "rua", "numero", "bairro", "cidade", "estado", "cep"])
    def test_campos_obrigatorios(self, perfil, campo):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_endereco(endereco("a", **{campo: ""}))
        assert exc.value.field == campo

    @pytest.mark.parametrize("campo,valor", [("id", 1), ("rua", ["Rua X"]), ("complemento", 5)])
    def test_campo_que_nao_e_texto(self, perfil, campo, valor):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_endereco(endereco("a", **{campo: valor}))

        assert exc.value.field == campo
        assert "deve ser texto" in exc.value.message
        assert len(perfil.enderecos) == 0

    @pytest.mark.parametrize("valor", ["false", "true", 1, 0, [True]])
    def test_e_padrao_precisa_ser_booleano(self, valor):
        with pytest.raises(ValidationError) as exc:
            endereco("a", e_padrao=valor)

        assert exc.value.field == "e_padrao"

    def test_e_padrao_nulo_vale_false(self):
        assert endereco("a", e_padrao=None).e_padrao is False

    def test_cep_guardado_sem_hifen(self, perfil):
        perfil.adicionar_endereco(endereco("a"))
        assert perfil.enderecos.obter("a").cep == "01310100"

    def test_atualizar_endereco_padrao_continua_padrao(self, perfil):
        perfil.adicionar_endereco(endereco("a"))
        perfil.adicionar_endereco(endereco("b"))

        perfil.atualizar_endereco("a", endereco("ignorado", rua="Rua Nova"))

        atualizado = perfil.enderecos.obter("a")
        assert atualizado.rua == "Rua Nova"
        assert atualizado.e_padrao is True
        assert [e.id for e in perfil.enderecos] == ["a", "b"]

    def test_definir_padrao(self, perfil):
        perfil.adicionar_endereco(endereco("a"))
        perfil.adicionar_endereco(endereco("b"))

        perfil.definir_endereco_padrao("b")

        assert _padroes(perfil.enderecos) == ["b"]


class TestMetodosPagamento:

    def test_primeiro_metodo_vira_padrao(self, perfil):
        perfil.adicionar_metodo_pagamento(pix("p1"))
        perfil.adicionar_metodo_pagamento(cartao("c1"))

        assert perfil.obter_metodo_pagamento_padrao().id == "p1"

    def test_cartao_exige_ultimos4(self, perfil):
        metodo = cartao("c1")
        metodo.detalhes.pop("ultimos4")

        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_metodo_pagamento(metodo)
        assert exc.value.field == "ultimos4"

    def test_cartao_exige_bandeira(self, perfil):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_metodo_pagamento(cartao("c1", bandeira=""))
        assert exc.value.field == "bandeira"

    def test_tipo_invalido(self, perfil):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_metodo_pagamento(
                MetodoPagamento(id="x", tipo="boleto", nome="Boleto")
            )
        assert exc.value.field == "tipo"

    @pytest.mark.parametrize("campo,valor", [("tipo", ["pix"]), ("id", 7), ("nome", {"x": 1})])
    def test_campo_que_nao_e_texto(self, perfil, campo, valor):
        dados = {"id": "p1", "tipo": "pix", "nome": "Pix", campo: valor}

        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_metodo_pagamento(MetodoPagamento.from_dict(dados))

        assert exc.value.field == campo
        assert len(perfil.metodos_pagamento) == 0

    def test_e_padrao_texto_rejeitado(self):
        with pytest.raises(ValidationError) as exc:
            MetodoPagamento.from_dict({"id": "p1", "tipo": "pix", "nome": "Pix", "e_padrao": "false"})

        assert exc.value.field == "e_padrao"

    def test_bandeira_que_nao_e_texto(self, perfil):
        with pytest.raises(ValidationError) as exc:
            perfil.adicionar_metodo_pagamento(cartao("c1", bandeira=["visa"]))
        assert exc.value.field == "bandeira"

    def test_pix_nao_exige_detalhes(self, perfil):
        perfil.adicionar_metodo_pagamento(pix("p1"))
        assert perfil.possui_metodo_pagamento("p1")

    def test_remover_padrao_promove(self, perfil):
        perfil.adicionar_metodo_pagamento(pix("p1"))
        perfil.adicionar_metodo_pagamento(pix("p2"))

        perfil.remover_metodo_pagamento("p1")

        assert _padroes(perfil.metodos_pagamento) == ["p2"]

    def test_definir_padrao(self, perfil):
        perfil.adicionar_metodo_pagamento(pix("p1"))
        perfil.adicionar_metodo_pagamento(pix("p2"))

        perfil.definir_metodo_pagamento_padrao("p2")

        assert _padroes(perfil.metodos_pagamento) == ["p2"]


class TestFavoritosEPreferencias:

    def test_favoritar(self, perfil):
        perfil.adicionar_servico_favorito("s1")
        assert perfil.e_favorito("s1")

    def test_favorito_duplicado(self, perfil):
        perfil.adicionar_servico_favorito("s1")

        with pytest.raises(ValidationError):
            perfil.adicionar_servico_favorito("s1")

    def test_remover_favorito_inexistente(self, perfil):
        with pytest.raises(EntityNotFoundError):
            perfil.remover_servico_favorito("s1")

    def test_preferencias_mescladas(self, perfil):
        perfil.atualizar_preferencias({"notificacoes": {"sms": True}, "idioma": "en-US"})

        prefs = perfil.preferencias.to_dict()
        assert prefs["notificacoes"] == {"email": True, "sms": True, "push": True}
        assert prefs["idioma"] == "en-US"
        assert prefs["fuso_horario"] == "America/Sao_Paulo"

    def test_preferencia_nao_booleana(self, perfil):
        with pytest.raises(ValidationError):
            perfil.atualizar_preferencias({"marketing": "sim"})

        assert perfil.preferencias.marketing is False


# =============================================================================
# Profissional / Empresa
# =============================================================================

class TestPerfilProfissional:

    def _criar(self, **kwargs):
        dados = dict(
            usuario_id="prof-1",
            endereco="Rua A, 10",
            cidade="Campinas",
            modo_atendimento=ModoAtendimento.BOTH,
        )
        dados.update(kwargs)
        return PerfilProfissionalEntity.criar(**dados)

    def test_criar(self):
        perfil = self._criar(cpf="111.444.777-35", especialidades=["corte", "corte", "barba"])

        assert perfil.cpf == "11144477735"
        assert perfil.cnpj is None
        assert perfil.especialidades == ["corte", "barba"]
        assert perfil.atende_em_domicilio

    def test_documentos_opcionais_mas_validos(self):
        with pytest.raises(ValidationError) as exc:
            self._criar(cnpj="11222333000182")
        assert exc.value.field == "cnpj"

    def test_cidade_obrigatoria(self):
        with pytest.raises(ValidationError):
            self._criar(cidade=" ")

    def test_especialidades(self):
        perfil = self._criar()
        perfil.adicionar_especialidade("manicure")

        with pytest.raises(ValidationError):
            perfil.adicionar_especialidade("manicure")

        perfil.remover_especialidade("manicure")
        with pytest.raises(EntityNotFoundError):
            perfil.remover_especialidade("manicure")

    def test_horarios(self):
        horarios = validar_horarios({"segunda": {"inicio": "08:00", "fim": "18:00"}})
        assert horarios["segunda"]["disponivel"] is True

        with pytest.raises(ValidationError):
            validar_horarios({"segunda": {"inicio": "18:00", "fim": "08:00"}})

        with pytest.raises(ValidationError):
            validar_horarios({"feriado": {"inicio": "08:00", "fim": "10:00"}})

        assert validar_horarios({"domingo": {"disponivel": False}})["domingo"]["disponivel"] is False

    @pytest.mark.parametrize("horario", [
        {"inicio": 800, "fim": "18:00"},
        {"inicio": "08:00", "fim": ["18:00"]},
        {"inicio": "08:00", "fim": "18:00", "disponivel": "sim"},
    ])
    def test_horarios_com_tipos_errados(self, horario):
        with pytest.raises(ValidationError) as exc:
            validar_horarios({"segunda": horario})

        assert exc.value.field == "horarios"

    def test_portfolio(self):
        perfil = self._criar(portfolio=["https://cdn.exemplo.com/a.jpg"])
        perfil.adicionar_item_portfolio("https://cdn.exemplo.com/b.jpg")

        with pytest.raises(ValidationError):
            perfil.adicionar_item_portfolio("https://cdn.exemplo.com/b.jpg")

        perfil.remover_item_portfolio("https://cdn.exemplo.com/a.jpg")
        assert perfil.portfolio == ["https://cdn.exemplo.com/b.jpg"]

        with pytest.raises(EntityNotFoundError):
            perfil.remover_item_portfolio("https://cdn.exemplo.com/a.jpg")

    def test_atualizar_horarios(self):
        perfil = self._criar()

        perfil.atualizar_horarios({"sabado": {"inicio": "09:00", "fim": "13:00"}})
        assert perfil.horarios["sabado"]["fim"] == "13:00"

        with pytest.raises(ValidationError):
            perfil.atualizar_horarios({"sabado": {"inicio": "9h", "fim": "13:00"}})
        assert perfil.horarios["sabado"]["inicio"] == "09:00"

    def test_modo_atendimento_from_string(self):
        assert ModoAtendimento.from_string("at_domicile") == ModoAtendimento.AT_DOMICILE

        with pytest.raises(ValidationError):
            ModoAtendimento.from_string("remoto")


class TestPerfilEmpresa:

    def test_criar(self):
        perfil = PerfilEmpresaEntity.criar(
            usuario_id="empresa-1",
            cnpj="11.222.333/0001-81",
            endereco="Av. Paulista, 1000",
            cidade="São Paulo",
            fotos=["https://cdn.exemplo.com/1.jpg"],
        )

        assert perfil.cnpj == "11222333000181"
        assert perfil.fotos == ["https://cdn.exemplo.com/1.jpg"]

    def test_cnpj_invalido(self):
        with pytest.raises(ValidationError) as exc:
            PerfilEmpresaEntity.criar(
                usuario_id="e", cnpj="11222333000100", endereco="Rua", cidade="SP"
            )
        assert exc.value.field == "cnpj"

    def test_foto_invalida(self):
        with pytest.raises(ValidationError):
            PerfilEmpresaEntity.criar(
                usuario_id="e", cnpj="11222333000181", endereco="Rua", cidade="SP",
                fotos=["nao-e-url"],
            )

    def test_fotos(self):
        perfil = PerfilEmpresaEntity.criar(
            usuario_id="e", cnpj="11222333000181", endereco="Rua", cidade="SP"
        )

        perfil.adicionar_foto("https://cdn.exemplo.com/1.jpg")
        with pytest.raises(ValidationError):
            perfil.adicionar_foto("https://cdn.exemplo.com/1.jpg")

        perfil.remover_foto("https://cdn.exemplo.com/1.jpg")
        assert perfil.fotos == []

        with pytest.raises(EntityNotFoundError):
            perfil.remover_foto("https://cdn.exemplo.com/1.jpg")
