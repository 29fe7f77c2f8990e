"""
Validação de documentos brasileiros (CPF e CNPJ).

Implementação canônica usada por entidades, use cases e adapters.
Nenhuma outra camada reimplementa estas regras.

Funções puras e totais: entradas malformadas retornam False,
nunca lançam exceção.
"""

import re
from typing import Optional

_NAO_DIGITOS = re.compile(r"\D")


def somente_digitos(valor: Optional[str]) -> str:
    """Remove tudo que não for dígito ('111.444.777-35' -> '11144477735')."""
    if not isinstance(valor, str):
        return ""
    return _NAO_DIGITOS.sub("", valor)


def _digitos_repetidos(digitos: str) -> bool:
    return len(set(digitos)) == 1


def _digito_verificador_cpf(digitos: str, peso_inicial: int) -> int:
    soma = sum(
        int(digito) * peso
        for digito, peso in zip(digitos, range(peso_inicial, 1, -1))
    )
    resto = (soma * 10) % 11
    return 0 if resto in (10, 11) else resto


def validar_cpf(cpf: Optional[str]) -> bool:
    """
    Valida CPF incluindo os dois dígitos verificadores.

    Algoritmo:
    1. Remove caracteres não numéricos
    2. Exige 11 dígitos, não todos iguais
    3. 1º dígito: soma de d[0..8] com pesos 10..2, (soma*10) % 11
    4. 2º dígito: soma de d[0..9] com pesos 11..2, mesma regra
    5. Resto 10 ou 11 vale 0

    Args:
        cpf: CPF com ou sem formatação

    Returns:
        True se estruturalmente válido

    Example:
        validar_cpf("111.444.777-35")  # True
        validar_cpf("11111111111")     # False
    """
    digitos = somente_digitos(cpf)

    if len(digitos) != 11 or _digitos_repetidos(digitos):
        return False

    if _digito_verificador_cpf(digitos[:9], 10) != int(digitos[9]):
        return False

    return _digito_verificador_cpf(digitos[:10], 11) == int(digitos[10])


def _digito_verificador_cnpj(digitos: str) -> int:
    # Pesos aplicados da direita para a esquerda: 2, 3, ..., 9, 2, 3, ...
    soma = 0
    peso = 2
    for digito in reversed(digitos):
        soma += int(digito) * peso
        peso = 2 if peso == 9 else peso + 1

    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def validar_cnpj(cnpj: Optional[str]) -> bool:
    """
    Valida CNPJ incluindo os dois dígitos verificadores.

    Algoritmo:
    1. Remove caracteres não numéricos
    2. Exige 14 dígitos, não todos iguais
    3. 1º dígito: d[11] até d[0] com pesos ciclando 2..9
    4. 2º dígito: d[12] até d[0] com o mesmo ciclo
    5. Dígito = 0 se resto < 2, senão 11 - resto

    Example:
        validar_cnpj("11.222.333/0001-81")  # True
        validar_cnpj("00000000000000")      # False
    """
    digitos = somente_digitos(cnpj)

    if len(digitos) != 14 or _digitos_repetidos(digitos):
        return False

    if _digito_verificador_cnpj(digitos[:12]) != int(digitos[12]):
        return False

    return _digito_verificador_cnpj(digitos[:13]) == int(digitos[13])


def validar_cep(cep: Optional[str]) -> bool:
    """CEP válido tem 8 dígitos (com ou sem hífen)."""
    return len(somente_digitos(cep)) == 8


def formatar_cpf(cpf: str) -> str:
    """Formata CPF como 000.000.000-00 (retorna entrada se não tiver 11 dígitos)."""
    d = somente_digitos(cpf)
    if len(d) != 11:
        return cpf
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


def formatar_cnpj(cnpj: str) -> str:
    """Formata CNPJ como 00.000.000/0000-00."""
    d = somente_digitos(cnpj)
    if len(d) != 14:
        return cnpj
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
