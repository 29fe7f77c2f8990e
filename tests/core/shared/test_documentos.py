"""
Testes para validação de CPF, CNPJ e CEP.
"""

import random

import pytest

from src.core.shared.documentos import (
    somente_digitos,
    validar_cpf,
    validar_cnpj,
    validar_cep,
    formatar_cpf,
    formatar_cnpj,
)


class TestValidarCPF:

    @pytest.mark.parametrize("cpf", [
        "11144477735",
        "111.444.777-35",
        "529.982.247-25",
        "52998224725",
    ])
    def test_cpf_valido(self, cpf):
        assert validar_cpf(cpf) is True

    @pytest.mark.parametrize("cpf", [
        "11144477734",   # 2º dígito errado
        "11144477725",   # 1º dígito errado
        "1114447773",    # 10 dígitos
        "111444777350",  # 12 dígitos
        "",
    ])
    def test_cpf_invalido(self, cpf):
        assert validar_cpf(cpf) is False

    @pytest.mark.parametrize("digito", "0123456789")
    def test_digitos_repetidos_sao_invalidos(self, digito):
        """Sequências como 111.111.111-11 passam no cálculo mas são inválidas."""
        assert validar_cpf(digito * 11) is False

    def test_entrada_nao_string_retorna_false(self):
        assert validar_cpf(None) is False
        assert validar_cpf(11144477735) is False

    def test_caracteres_estranhos_sao_ignorados(self):
        assert validar_cpf(" 111 444 777 35 ") is True


def _cpf_referencia(digitos: str) -> bool:
    """Cálculo direto dos dígitos verificadores (resto * 10 mod 11)."""
    if len(set(digitos)) == 1:
        return False

    numeros = [int(d) for d in digitos]
    for posicao in (9, 10):
        soma = sum(n * peso for n, peso in zip(numeros[:posicao], range(posicao + 1, 1, -1)))
        if (soma * 10) % 11 % 10 != numeros[posicao]:
            return False
    return True


def _cpf_com_digitos(base: str) -> str:
    """Completa 9 dígitos com os verificadores corretos."""
    numeros = [int(d) for d in base]
    for posicao in (9, 10):
        soma = sum(n * peso for n, peso in zip(numeros, range(posicao + 1, 1, -1)))
        numeros.append((soma * 10) % 11 % 10)
    return "".join(str(n) for n in numeros)


class TestValidarCPFContraReferencia:

    def test_strings_aleatorias_de_11_digitos(self):
        rng = random.Random(11)

        for _ in range(2000):
            digitos = "".join(rng.choice("0123456789") for _ in range(11))
            assert validar_cpf(digitos) is _cpf_referencia(digitos), digitos

    def test_cpfs_gerados_sao_validos(self):
        rng = random.Random(35)

        for _ in range(500):
            cpf = _cpf_com_digitos("".join(rng.choice("0123456789") for _ in range(9)))
            if len(set(cpf)) == 1:
                continue

            assert validar_cpf(cpf) is True, cpf
            assert validar_cpf(formatar_cpf(cpf)) is True


class TestValidarCNPJ:

    @pytest.mark.parametrize("cnpj", [
        "11222333000181",
        "11.222.333/0001-81",
        "11.444.777/0001-61",
    ])
    def test_cnpj_valido(self, cnpj):
        assert validar_cnpj(cnpj) is True

    @pytest.mark.parametrize("cnpj", [
        "11222333000182",
        "11222333000191",
        "1122233300018",
        "00000000000000",
        "11111111111111",
        "",
    ])
    def test_cnpj_invalido(self, cnpj):
        assert validar_cnpj(cnpj) is False

    def test_cpf_nao_e_cnpj(self):
        assert validar_cnpj("11144477735") is False
        assert validar_cpf("11222333000181") is False


class TestHelpers:

    def test_somente_digitos(self):
        assert somente_digitos("111.444.777-35") == "11144477735"
        assert somente_digitos(None) == ""

    def test_validar_cep(self):
        assert validar_cep("01310-100") is True
        assert validar_cep("01310100") is True
        assert validar_cep("0131010") is False

    def test_formatar_cpf(self):
        assert formatar_cpf("11144477735") == "111.444.777-35"
        assert formatar_cpf("123") == "123"

    def test_formatar_cnpj(self):
        assert formatar_cnpj("11222333000181") == "11.222.333/0001-81"
