"""
Data Transfer Objects (DTOs) do Domínio de Perfis.

Tipos de DTOs:
- Input DTOs: construídos a partir de JSON não confiável (`from_dict`).
  Apenas a forma é verificada aqui; o conteúdo é validado pelas
  entidades e value objects.
- Output DTOs: agregado completo após a operação (nunca um diff)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.core.shared.documentos import formatar_cpf, formatar_cnpj
from src.core.shared.exceptions import ValidationError

from .entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)


def _objeto(valor: Any, campo: str) -> Dict[str, Any]:
    if not isinstance(valor, dict):
        raise ValidationError(f"{campo} deve ser um objeto", field=campo)
    return valor


def _lista(valor: Any, campo: str) -> tuple:
    if valor is None:
        return ()
    if not isinstance(valor, (list, tuple)):
        raise ValidationError(f"{campo} deve ser uma lista", field=campo)
    return tuple(valor)


# =============================================================================
# INPUT DTOs - Cliente
# =============================================================================

@dataclass(frozen=True)
class CriarPerfilClienteInputDTO:
    """
    DTO de entrada para criar perfil de cliente.

    Attributes:
        usuario_id: Dono do perfil (deve ser usuário CLIENT)
        cpf: CPF com ou sem formatação
        enderecos: Endereços iniciais (dicts)
        metodos_pagamento: Métodos iniciais (dicts)
        servicos_favoritos: IDs de serviços
        preferencias: Preferências parciais (mescladas sobre o padrão)
    """

    usuario_id: str
    cpf: str
    enderecos: tuple = field(default_factory=tuple)
    metodos_pagamento: tuple = field(default_factory=tuple)
    servicos_favoritos: tuple = field(default_factory=tuple)
    preferencias: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, usuario_id: str, data: dict) -> "CriarPerfilClienteInputDTO":
        enderecos = _lista(data.get("enderecos"), "enderecos")
        metodos = _lista(data.get("metodos_pagamento"), "metodos_pagamento")
        preferencias = data.get("preferencias")
        return cls(
            usuario_id=usuario_id,
            cpf=str(data.get("cpf") or ""),
            enderecos=tuple(_objeto(e, "enderecos") for e in enderecos),
            metodos_pagamento=tuple(_objeto(m, "metodos_pagamento") for m in metodos),
            servicos_favoritos=tuple(
                str(s) for s in _lista(data.get("servicos_favoritos"), "servicos_favoritos")
            ),
            preferencias=_objeto(preferencias, "preferencias") if preferencias is not None else None,
        )


@dataclass(frozen=True)
class AtualizarPreferenciasInputDTO:

    usuario_id: str
    preferencias: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, usuario_id: str, data: dict) -> "AtualizarPreferenciasInputDTO":
        return cls(usuario_id=usuario_id, preferencias=_objeto(data, "preferencias"))


@dataclass(frozen=True)
class EnderecoInputDTO:
    """
    DTO para adicionar ou atualizar endereço.

    Attributes:
        usuario_id: Dono do perfil
        dados: Campos do endereço (id, rua, numero, bairro, ...)
        endereco_id: Preenchido apenas na atualização
    """

    usuario_id: str
    dados: Dict[str, Any] = field(default_factory=dict)
    endereco_id: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        usuario_id: str,
        data: dict,
        endereco_id: Optional[str] = None,
    ) -> "EnderecoInputDTO":
        return cls(
            usuario_id=usuario_id,
            dados=dict(_objeto(data, "endereco")),
            endereco_id=endereco_id,
        )


@dataclass(frozen=True)
class MetodoPagamentoInputDTO:
    """DTO para adicionar ou atualizar método de pagamento."""

    usuario_id: str
    dados: Dict[str, Any] = field(default_factory=dict)
    metodo_id: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        usuario_id: str,
        data: dict,
        metodo_id: Optional[str] = None,
    ) -> "MetodoPagamentoInputDTO":
        return cls(
            usuario_id=usuario_id,
            dados=dict(_objeto(data, "metodo_pagamento")),
            metodo_id=metodo_id,
        )


@dataclass(frozen=True)
class ItemPerfilInputDTO:
    """
    Referência a um item dentro do perfil (remover, definir padrão,
    favoritar).

    Attributes:
        usuario_id: Dono do perfil
        item_id: ID do endereço, método de pagamento ou serviço
    """

    usuario_id: str
    item_id: str


# =============================================================================
# INPUT DTOs - Profissional / Empresa
# =============================================================================

@dataclass(frozen=True)
class CriarPerfilProfissionalInputDTO:

    usuario_id: str
    endereco: str
    cidade: str
    modo_atendimento: str
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    especialidades: tuple = field(default_factory=tuple)
    portfolio: tuple = field(default_factory=tuple)
    horarios: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, usuario_id: str, data: dict) -> "CriarPerfilProfissionalInputDTO":
        horarios = data.get("horarios")
        return cls(
            usuario_id=usuario_id,
            endereco=str(data.get("endereco") or ""),
            cidade=str(data.get("cidade") or ""),
            modo_atendimento=str(data.get("modo_atendimento") or ""),
            cpf=data.get("cpf") or None,
            cnpj=data.get("cnpj") or None,
            especialidades=tuple(
                str(e) for e in _lista(data.get("especialidades"), "especialidades")
            ),
            portfolio=tuple(str(p) for p in _lista(data.get("portfolio"), "portfolio")),
            horarios=_objeto(horarios, "horarios") if horarios is not None else None,
        )


@dataclass(frozen=True)
class EspecialidadeInputDTO:

    usuario_id: str
    especialidade: str


@dataclass(frozen=True)
class CriarPerfilEmpresaInputDTO:

    usuario_id: str
    cnpj: str
    endereco: str
    cidade: str
    descricao: Optional[str] = None
    fotos: tuple = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, usuario_id: str, data: dict) -> "CriarPerfilEmpresaInputDTO":
        return cls(
            usuario_id=usuario_id,
            cnpj=str(data.get("cnpj") or ""),
            endereco=str(data.get("endereco") or ""),
            cidade=str(data.get("cidade") or ""),
            descricao=data.get("descricao") or None,
            fotos=tuple(str(f) for f in _lista(data.get("fotos"), "fotos")),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PerfilClienteOutputDTO:
    """
    DTO de saída com o perfil de cliente completo.

    Listas já serializadas na ordem do agregado.
    """

    usuario_id: str
    cpf: str
    cpf_formatado: str
    enderecos: List[Dict[str, Any]]
    metodos_pagamento: List[Dict[str, Any]]
    servicos_favoritos: List[str]
    preferencias: Dict[str, Any]
    endereco_padrao_id: Optional[str]
    metodo_pagamento_padrao_id: Optional[str]
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: PerfilClienteEntity) -> "PerfilClienteOutputDTO":
        endereco_padrao = entity.obter_endereco_padrao()
        metodo_padrao = entity.obter_metodo_pagamento_padrao()
        return cls(
            usuario_id=entity.usuario_id,
            cpf=entity.cpf,
            cpf_formatado=formatar_cpf(entity.cpf),
            enderecos=[e.to_dict() for e in entity.enderecos],
            metodos_pagamento=[m.to_dict() for m in entity.metodos_pagamento],
            servicos_favoritos=list(entity.servicos_favoritos),
            preferencias=entity.preferencias.to_dict(),
            endereco_padrao_id=endereco_padrao.id if endereco_padrao else None,
            metodo_pagamento_padrao_id=metodo_padrao.id if metodo_padrao else None,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "usuario_id": self.usuario_id,
            "cpf": self.cpf,
            "cpf_formatado": self.cpf_formatado,
            "enderecos": self.enderecos,
            "metodos_pagamento": self.metodos_pagamento,
            "servicos_favoritos": self.servicos_favoritos,
            "preferencias": self.preferencias,
            "endereco_padrao_id": self.endereco_padrao_id,
            "metodo_pagamento_padrao_id": self.metodo_pagamento_padrao_id,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }


@dataclass
class PerfilProfissionalOutputDTO:

    usuario_id: str
    cpf: Optional[str]
    cnpj: Optional[str]
    endereco: str
    cidade: str
    modo_atendimento: str
    especialidades: List[str]
    horarios: Dict[str, Any]
    portfolio: List[str]
    avaliacao_media: float
    total_avaliacoes: int
    ativo: bool
    verificado: bool
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: PerfilProfissionalEntity) -> "PerfilProfissionalOutputDTO":
        return cls(
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
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "usuario_id": self.usuario_id,
            "cpf": self.cpf,
            "cnpj": self.cnpj,
            "endereco": self.endereco,
            "cidade": self.cidade,
            "modo_atendimento": self.modo_atendimento,
            "especialidades": self.especialidades,
            "horarios": self.horarios,
            "portfolio": self.portfolio,
            "avaliacao_media": self.avaliacao_media,
            "total_avaliacoes": self.total_avaliacoes,
            "ativo": self.ativo,
            "verificado": self.verificado,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }


@dataclass
class PerfilEmpresaOutputDTO:

    usuario_id: str
    cnpj: str
    cnpj_formatado: str
    endereco: str
    cidade: str
    descricao: Optional[str]
    fotos: List[str]
    ativo: bool
    verificado: bool
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: PerfilEmpresaEntity) -> "PerfilEmpresaOutputDTO":
        return cls(
            usuario_id=entity.usuario_id,
            cnpj=entity.cnpj,
            cnpj_formatado=formatar_cnpj(entity.cnpj),
            endereco=entity.endereco,
            cidade=entity.cidade,
            descricao=entity.descricao,
            fotos=list(entity.fotos),
            ativo=entity.ativo,
            verificado=entity.verificado,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "usuario_id": self.usuario_id,
            "cnpj": self.cnpj,
            "cnpj_formatado": self.cnpj_formatado,
            "endereco": self.endereco,
            "cidade": self.cidade,
            "descricao": self.descricao,
            "fotos": self.fotos,
            "ativo": self.ativo,
            "verificado": self.verificado,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat(),
        }
