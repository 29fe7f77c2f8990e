"""
Value Objects dos Perfis.

- Endereco: endereço de atendimento do cliente
- MetodoPagamento / TipoPagamento: forma de pagamento do cliente
- PreferenciasCliente: notificações, idioma e fuso horário
- ModoAtendimento: onde o profissional atende
- Horários semanais (profissional)

Endereco e MetodoPagamento têm `id` estável e a flag `e_padrao`,
que é gerenciada pela ListaComPadrao do perfil, nunca diretamente.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import re

from src.core.shared.documentos import validar_cep, somente_digitos
from src.core.shared.exceptions import ValidationError


class TipoPagamento(Enum):
    """Tipos de pagamento aceitos (conjunto fechado)."""

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PIX = "pix"
    BANK_TRANSFER = "bank_transfer"

    @classmethod
    def valores(cls) -> set:
        return {tipo.value for tipo in cls}

    @property
    def e_cartao(self) -> bool:
        return self in (TipoPagamento.CREDIT_CARD, TipoPagamento.DEBIT_CARD)


def _ler_e_padrao(data: Dict[str, Any]) -> bool:
    """
    Flag `e_padrao` de um dict de entrada; ausente (ou null) é False.

    Raises:
        ValidationError: Valor que não é booleano (ex.: "false")
    """
    valor = data.get("e_padrao")
    if valor is None:
        return False

    if not isinstance(valor, bool):
        raise ValidationError("e_padrao deve ser booleano", field="e_padrao")

    return valor


def _exigir_texto(valor: Any, campo: str, mensagem: str) -> None:
    """
    Raises:
        ValidationError: `valor` não é texto ou está vazio
    """
    if not isinstance(valor, str):
        raise ValidationError(f"{campo} deve ser texto", field=campo)

    if not valor.strip():
        raise ValidationError(mensagem, field=campo)


class ModoAtendimento(Enum):
    """
    Onde o profissional presta o serviço.

    AT_LOCATION: no local do profissional
    AT_DOMICILE: no domicílio do cliente
    BOTH: ambos
    """

    AT_LOCATION = "AT_LOCATION"
    AT_DOMICILE = "AT_DOMICILE"
    BOTH = "BOTH"

    @classmethod
    def from_string(cls, value: str) -> "ModoAtendimento":
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValidationError(
                "Modo de atendimento inválido",
                field="modo_atendimento"
            )


@dataclass
class Endereco:
    """
    Endereço do cliente.

    Campos obrigatórios: id, rua, numero, bairro, cidade, estado, cep.
    O CEP é normalizado para 8 dígitos na validação.
    """

    id: str = ""
    rua: str = ""
    numero: str = ""
    bairro: str = ""
    cidade: str = ""
    estado: str = ""
    cep: str = ""
    complemento: Optional[str] = None
    e_padrao: bool = False

    # (atributo, mensagem) na ordem em que são verificados
    CAMPOS_OBRIGATORIOS = (
        ("id", "ID do endereço é obrigatório"),
        ("rua", "Rua é obrigatória"),
        ("numero", "Número é obrigatório"),
        ("bairro", "Bairro é obrigatório"),
        ("cidade", "Cidade é obrigatória"),
        ("estado", "Estado é obrigatório"),
        ("cep", "CEP é obrigatório"),
    )

    def validar(self) -> None:
        """
        Raises:
            ValidationError: Campo obrigatório ausente ou CEP inválido
        """
        for campo, mensagem in self.CAMPOS_OBRIGATORIOS:
            _exigir_texto(getattr(self, campo), campo, mensagem)

        if self.complemento is not None and not isinstance(self.complemento, str):
            raise ValidationError("complemento deve ser texto", field="complemento")

        if not validar_cep(self.cep):
            raise ValidationError("CEP inválido", field="cep")

        self.cep = somente_digitos(self.cep)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Endereco":
        return cls(
            id=data.get("id") or "",
            rua=data.get("rua") or "",
            numero=str(data.get("numero") or ""),
            bairro=data.get("bairro") or "",
            cidade=data.get("cidade") or "",
            estado=data.get("estado") or "",
            cep=str(data.get("cep") or ""),
            complemento=data.get("complemento") or None,
            e_padrao=_ler_e_padrao(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "rua": self.rua,
            "numero": self.numero,
            "complemento": self.complemento,
            "bairro": self.bairro,
            "cidade": self.cidade,
            "estado": self.estado,
            "cep": self.cep,
            "e_padrao": self.e_padrao,
        }


@dataclass
class MetodoPagamento:
    """
    Método de pagamento do cliente.

    Cartões (crédito/débito) exigem `ultimos4` (4 dígitos) e
    `bandeira` em `detalhes`. Nenhum dado sensível é armazenado.
    """

    id: str = ""
    tipo: str = ""
    nome: str = ""
    e_padrao: bool = False
    detalhes: Dict[str, Any] = field(default_factory=dict)

    def validar(self) -> None:
        """
        Raises:
            ValidationError: Campo obrigatório ausente, tipo inválido
                ou dados de cartão incompletos
        """
        _exigir_texto(self.id, "id", "ID do método de pagamento é obrigatório")
        _exigir_texto(self.tipo, "tipo", "Tipo do método de pagamento é obrigatório")
        _exigir_texto(self.nome, "nome", "Nome do método de pagamento é obrigatório")

        if self.tipo not in TipoPagamento.valores():
            raise ValidationError(
                "Tipo de método de pagamento inválido", field="tipo"
            )

        if self.tipo_pagamento.e_cartao:
            ultimos4 = str(self.detalhes.get("ultimos4") or "")
            if not re.fullmatch(r"\d{4}", ultimos4):
                raise ValidationError(
                    "Últimos 4 dígitos do cartão são obrigatórios",
                    field="ultimos4"
                )

            bandeira = self.detalhes.get("bandeira")
            if not isinstance(bandeira, str) or not bandeira.strip():
                raise ValidationError(
                    "Bandeira do cartão é obrigatória", field="bandeira"
                )

    @property
    def tipo_pagamento(self) -> TipoPagamento:
        return TipoPagamento(self.tipo)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetodoPagamento":
        detalhes = data.get("detalhes") or {}
        return cls(
            id=data.get("id") or "",
            tipo=data.get("tipo") or "",
            nome=data.get("nome") or "",
            e_padrao=_ler_e_padrao(data),
            detalhes=dict(detalhes) if isinstance(detalhes, dict) else {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "tipo": self.tipo,
            "nome": self.nome,
            "e_padrao": self.e_padrao,
            "detalhes": dict(self.detalhes),
        }


@dataclass
class PreferenciasCliente:
    """
    Preferências do cliente.

    Padrões: email e push ligados, SMS e marketing desligados,
    idioma pt-BR, fuso America/Sao_Paulo.
    """

    notificacao_email: bool = True
    notificacao_sms: bool = False
    notificacao_push: bool = True
    marketing: bool = False
    idioma: str = "pt-BR"
    fuso_horario: str = "America/Sao_Paulo"

    def mesclar(self, dados: Dict[str, Any]) -> "PreferenciasCliente":
        """
        Retorna novas preferências com `dados` aplicados sobre as atuais.

        Aceita o mesmo formato de to_dict(); chaves ausentes mantêm
        o valor atual.

        Raises:
            ValidationError: Tipo de valor incorreto
        """
        if not isinstance(dados, dict):
            raise ValidationError("Preferências inválidas", field="preferencias")

        notificacoes = dados.get("notificacoes") or {}
        if not isinstance(notificacoes, dict):
            raise ValidationError("Notificações inválidas", field="notificacoes")

        novas = PreferenciasCliente(
            notificacao_email=notificacoes.get("email", self.notificacao_email),
            notificacao_sms=notificacoes.get("sms", self.notificacao_sms),
            notificacao_push=notificacoes.get("push", self.notificacao_push),
            marketing=dados.get("marketing", self.marketing),
            idioma=dados.get("idioma", self.idioma),
            fuso_horario=dados.get("fuso_horario", self.fuso_horario),
        )
        novas.validar()
        return novas

    def validar(self) -> None:
        for campo in ("notificacao_email", "notificacao_sms", "notificacao_push", "marketing"):
            if not isinstance(getattr(self, campo), bool):
                raise ValidationError(f"{campo} deve ser booleano", field=campo)

        for campo in ("idioma", "fuso_horario"):
            valor = getattr(self, campo)
            if not isinstance(valor, str) or not valor.strip():
                raise ValidationError(f"{campo} é obrigatório", field=campo)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PreferenciasCliente":
        return cls().mesclar(data or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notificacoes": {
                "email": self.notificacao_email,
                "sms": self.notificacao_sms,
                "push": self.notificacao_push,
            },
            "marketing": self.marketing,
            "idioma": self.idioma,
            "fuso_horario": self.fuso_horario,
        }


DIAS_SEMANA = (
    "segunda", "terca", "quarta", "quinta", "sexta", "sabado", "domingo",
)

_HORA_REGEX = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validar_horarios(horarios: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Valida horários semanais.

    Formato:
        {"segunda": {"inicio": "08:00", "fim": "18:00", "disponivel": True}}

    Dias disponíveis exigem início e fim HH:MM com início < fim.

    Returns:
        Cópia normalizada dos horários

    Raises:
        ValidationError: Dia desconhecido ou horário inválido
    """
    if not isinstance(horarios, dict):
        raise ValidationError("Horários inválidos", field="horarios")

    normalizados = {}
    for dia, horario in horarios.items():
        if dia not in DIAS_SEMANA:
            raise ValidationError(f"Dia da semana inválido: {dia}", field="horarios")

        if not isinstance(horario, dict):
            raise ValidationError(f"Horário de {dia} inválido", field="horarios")

        disponivel = horario.get("disponivel", True)
        inicio = horario.get("inicio") or ""
        fim = horario.get("fim") or ""

        if not isinstance(disponivel, bool):
            raise ValidationError(
                f"Disponibilidade de {dia} deve ser booleana", field="horarios"
            )

        if not isinstance(inicio, str) or not isinstance(fim, str):
            raise ValidationError(
                f"Horário de {dia} deve estar no formato HH:MM", field="horarios"
            )

        if disponivel:
            if not inicio or not fim:
                raise ValidationError(
                    f"Horário de {dia} deve ter início e fim", field="horarios"
                )

            if not _HORA_REGEX.match(inicio) or not _HORA_REGEX.match(fim):
                raise ValidationError(
                    f"Horário de {dia} deve estar no formato HH:MM",
                    field="horarios"
                )

            # HH:MM com zero à esquerda: comparação de strings basta
            if inicio >= fim:
                raise ValidationError(
                    f"Horário de {dia}: início deve ser anterior ao fim",
                    field="horarios"
                )

        normalizados[dia] = {"inicio": inicio, "fim": fim, "disponivel": disponivel}

    return normalizados
