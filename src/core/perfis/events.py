"""
Domain Events do Domínio de Perfis.

Eventos:
- PerfilClienteCriadoEvent / PerfilClienteRemovidoEvent
- EnderecoAdicionadoEvent / EnderecoRemovidoEvent / EnderecoPadraoAlteradoEvent
- MetodoPagamentoAdicionadoEvent / MetodoPagamentoRemovidoEvent
- ServicoFavoritadoEvent
- PerfilProfissionalCriadoEvent / PerfilEmpresaCriadoEvent

aggregate_id é sempre o usuario_id dono do perfil.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


@dataclass
class PerfilClienteCriadoEvent(DomainEvent):
    """
    Evento: Perfil de cliente foi criado.

    Handlers típicos:
    - Enviar boas-vindas com sugestões de serviços
    """

    total_enderecos: int = 0
    total_metodos_pagamento: int = 0

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class PerfilClienteRemovidoEvent(DomainEvent):

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"

    def _get_event_data(self) -> Dict[str, Any]:
        return {}


@dataclass
class EnderecoAdicionadoEvent(DomainEvent):
    """
    Evento: Endereço foi adicionado ao perfil.

    Attributes:
        endereco_id: ID do endereço
        cidade: Cidade (para sugestões de profissionais próximos)
        e_padrao: Se virou o endereço padrão
    """

    endereco_id: str = ""
    cidade: str = ""
    e_padrao: bool = False

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class EnderecoRemovidoEvent(DomainEvent):
    """
    Evento: Endereço foi removido.

    Attributes:
        endereco_id: ID removido
        novo_padrao_id: Endereço promovido a padrão (se houve promoção)
    """

    endereco_id: str = ""
    novo_padrao_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class EnderecoPadraoAlteradoEvent(DomainEvent):

    endereco_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class MetodoPagamentoAdicionadoEvent(DomainEvent):
    """
    Evento: Método de pagamento foi adicionado.

    Nunca carrega detalhes do cartão, apenas o tipo.
    """

    metodo_id: str = ""
    tipo: str = ""
    e_padrao: bool = False

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class MetodoPagamentoRemovidoEvent(DomainEvent):

    metodo_id: str = ""
    novo_padrao_id: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class ServicoFavoritadoEvent(DomainEvent):
    """
    Evento: Cliente favoritou um serviço.

    Handlers típicos:
    - Atualizar ranking de popularidade do serviço
    """

    servico_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "PerfilCliente"


@dataclass
class PerfilProfissionalCriadoEvent(DomainEvent):

    cidade: str = ""
    modo_atendimento: str = ""

    @property
    def aggregate_type(self) -> str:
        return "PerfilProfissional"


@dataclass
class PerfilEmpresaCriadoEvent(DomainEvent):

    cnpj: str = ""
    cidade: str = ""

    @property
    def aggregate_type(self) -> str:
        return "PerfilEmpresa"
