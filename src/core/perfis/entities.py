"""
Entidades do Domínio de Perfis.

Entidades:
- PerfilClienteEntity: Dados do cliente (CPF, endereços, pagamentos,
  favoritos, preferências)
- PerfilProfissionalEntity: Profissional autônomo
- PerfilEmpresaEntity: Empresa prestadora de serviços

Cada perfil pertence a exatamente um usuário (1:1, chave usuario_id).

Regras de Negócio Encapsuladas:
- CPF/CNPJ validados pelo módulo canônico de documentos
- Endereços e métodos de pagamento: lista não vazia ⇒ exatamente
  um item padrão (ListaComPadrao)
- Favoritos sem duplicatas
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import re

from src.core.shared.documentos import validar_cpf, validar_cnpj, somente_digitos
from src.core.shared.exceptions import ValidationError, EntityNotFoundError
from src.core.shared.selecao_padrao import ListaComPadrao

from .value_objects import (
    Endereco,
    MetodoPagamento,
    PreferenciasCliente,
    ModoAtendimento,
    validar_horarios,
)


def lista_enderecos(itens: Optional[List[Endereco]] = None) -> ListaComPadrao:
    return ListaComPadrao(itens, nome_item="Endereço")


def lista_metodos(itens: Optional[List[MetodoPagamento]] = None) -> ListaComPadrao:
    return ListaComPadrao(itens, nome_item="Método de pagamento")


def _validar_usuario_id(usuario_id: str) -> None:
    if not usuario_id:
        raise ValidationError("ID do usuário é obrigatório", field="usuario_id")


@dataclass
class PerfilClienteEntity:
    """
    Entidade de Domínio: Perfil de Cliente.

    Agregado com duas listas de seleção única (endereços e métodos de
    pagamento) e um conjunto ordenado de serviços favoritos.

    Invariantes:
    - CPF obrigatório e válido (dígitos verificadores)
    - Lista de endereços não vazia ⇒ exatamente um padrão
    - Lista de métodos de pagamento não vazia ⇒ exatamente um padrão
    - Favoritos únicos

    Operações modificam o agregado in-place; o use case devolve o
    agregado completo, nunca um diff.

    Example:
        perfil = PerfilClienteEntity.criar(
            usuario_id="user-1",
            cpf="111.444.777-35",
        )
        perfil.adicionar_endereco(Endereco(id="a1", rua="Rua X", ...))
        perfil.obter_endereco_padrao().id  # "a1"
    """

    usuario_id: str = ""
    cpf: str = ""
    enderecos: ListaComPadrao = field(default_factory=lista_enderecos)
    metodos_pagamento: ListaComPadrao = field(default_factory=lista_metodos)
    servicos_favoritos: List[str] = field(default_factory=list)
    preferencias: PreferenciasCliente = field(default_factory=PreferenciasCliente)
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        usuario_id: str,
        cpf: str,
        enderecos: Optional[List[Endereco]] = None,
        metodos_pagamento: Optional[List[MetodoPagamento]] = None,
        servicos_favoritos: Optional[List[str]] = None,
        preferencias: Optional[PreferenciasCliente] = None,
    ) -> "PerfilClienteEntity":
        """
        Factory method para criar perfil com validações.

        Dados iniciais passam pelos mesmos métodos de adição usados
        depois da criação, então as invariantes valem desde o início.

        Raises:
            ValidationError: Se usuário, CPF ou itens iniciais inválidos
        """
        _validar_usuario_id(usuario_id)
        cls._validar_cpf(cpf)

        perfil = cls(
            usuario_id=usuario_id,
            cpf=somente_digitos(cpf),
            preferencias=preferencias or PreferenciasCliente(),
        )

        for endereco in enderecos or []:
            perfil.adicionar_endereco(endereco)

        for metodo in metodos_pagamento or []:
            perfil.adicionar_metodo_pagamento(metodo)

        for servico_id in servicos_favoritos or []:
            if not perfil.e_favorito(servico_id):
                perfil.adicionar_servico_favorito(servico_id)

        return perfil

    @classmethod
    def _validar_cpf(cls, cpf: str) -> None:
        if not cpf:
            raise ValidationError("CPF é obrigatório", field="cpf")

        if not validar_cpf(cpf):
            raise ValidationError("CPF inválido", field="cpf")

    # -------------------------------------------------------------------------
    # Endereços
    # -------------------------------------------------------------------------

    def adicionar_endereco(self, endereco: Endereco) -> Endereco:
        """
        Adiciona endereço.

        Primeiro endereço vira padrão; endereço marcado como padrão
        desmarca os demais.

        Raises:
            ValidationError: Campo obrigatório ausente, CEP inválido
                ou id duplicado
        """
        endereco.validar()
        self.enderecos.adicionar(endereco)
        self._atualizar_timestamp()
        return endereco

    def remover_endereco(self, endereco_id: str) -> Endereco:
        """
        Remove endereço; se era o padrão, o primeiro restante assume.

        Raises:
            EntityNotFoundError: Endereço não encontrado
        """
        removido = self.enderecos.remover(endereco_id)
        self._atualizar_timestamp()
        return removido

    def atualizar_endereco(self, endereco_id: str, endereco: Endereco) -> Endereco:
        """Substitui os dados do endereço mantendo id e posição."""
        self.enderecos.obter(endereco_id)
        endereco.id = endereco_id
        endereco.validar()
        atualizado = self.enderecos.atualizar(endereco_id, endereco)
        self._atualizar_timestamp()
        return atualizado

    def definir_endereco_padrao(self, endereco_id: str) -> Endereco:
        endereco = self.enderecos.definir_padrao(endereco_id)
        self._atualizar_timestamp()
        return endereco

    def obter_endereco_padrao(self) -> Optional[Endereco]:
        return self.enderecos.obter_padrao()

    def possui_endereco(self, endereco_id: str) -> bool:
        return self.enderecos.contem(endereco_id)

    # -------------------------------------------------------------------------
    # Métodos de pagamento
    # -------------------------------------------------------------------------

    def adicionar_metodo_pagamento(self, metodo: MetodoPagamento) -> MetodoPagamento:
        """
        Adiciona método de pagamento (mesma política de padrão dos endereços).

        Raises:
            ValidationError: Campo obrigatório ausente, tipo inválido,
                dados de cartão incompletos ou id duplicado
        """
        metodo.validar()
        self.metodos_pagamento.adicionar(metodo)
        self._atualizar_timestamp()
        return metodo

    def remover_metodo_pagamento(self, metodo_id: str) -> MetodoPagamento:
        removido = self.metodos_pagamento.remover(metodo_id)
        self._atualizar_timestamp()
        return removido

    def atualizar_metodo_pagamento(
        self,
        metodo_id: str,
        metodo: MetodoPagamento,
    ) -> MetodoPagamento:
        self.metodos_pagamento.obter(metodo_id)
        metodo.id = metodo_id
        metodo.validar()
        atualizado = self.metodos_pagamento.atualizar(metodo_id, metodo)
        self._atualizar_timestamp()
        return atualizado

    def definir_metodo_pagamento_padrao(self, metodo_id: str) -> MetodoPagamento:
        metodo = self.metodos_pagamento.definir_padrao(metodo_id)
        self._atualizar_timestamp()
        return metodo

    def obter_metodo_pagamento_padrao(self) -> Optional[MetodoPagamento]:
        return self.metodos_pagamento.obter_padrao()

    def possui_metodo_pagamento(self, metodo_id: str) -> bool:
        return self.metodos_pagamento.contem(metodo_id)

    # -------------------------------------------------------------------------
    # Favoritos
    # -------------------------------------------------------------------------

    def adicionar_servico_favorito(self, servico_id: str) -> None:
        """
        Raises:
            ValidationError: ID vazio ou serviço já favoritado
        """
        if not servico_id:
            raise ValidationError("ID do serviço é obrigatório", field="servico_id")

        if servico_id in self.servicos_favoritos:
            raise ValidationError("Serviço já está nos favoritos", field="servico_id")

        self.servicos_favoritos.append(servico_id)
        self._atualizar_timestamp()

    def remover_servico_favorito(self, servico_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Serviço não está nos favoritos
        """
        if servico_id not in self.servicos_favoritos:
            raise EntityNotFoundError(
                "Serviço não está nos favoritos",
                entity_type="ServicoFavorito",
                entity_id=servico_id
            )

        self.servicos_favoritos.remove(servico_id)
        self._atualizar_timestamp()

    def e_favorito(self, servico_id: str) -> bool:
        return servico_id in self.servicos_favoritos

    # -------------------------------------------------------------------------
    # Preferências
    # -------------------------------------------------------------------------

    def atualizar_preferencias(self, dados: Dict[str, Any]) -> PreferenciasCliente:
        """Mescla `dados` nas preferências atuais (chaves ausentes mantidas)."""
        self.preferencias = self.preferencias.mesclar(dados)
        self._atualizar_timestamp()
        return self.preferencias

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __repr__(self) -> str:
        return (
            f"PerfilClienteEntity("
            f"usuario_id={self.usuario_id}, "
            f"enderecos={len(self.enderecos)}, "
            f"metodos_pagamento={len(self.metodos_pagamento)}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerfilClienteEntity):
            return False
        return self.usuario_id == other.usuario_id

    def __hash__(self) -> int:
        return hash(self.usuario_id)


@dataclass
class PerfilProfissionalEntity:
    """
    Entidade de Domínio: Perfil Profissional.

    Invariantes:
    - CPF e CNPJ opcionais, mas válidos quando informados
    - Endereço e cidade obrigatórios
    - Especialidades e itens de portfólio únicos e não vazios
    - Horários disponíveis com início anterior ao fim
    """

    usuario_id: str = ""
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    endereco: str = ""
    cidade: str = ""
    modo_atendimento: ModoAtendimento = ModoAtendimento.AT_LOCATION
    especialidades: List[str] = field(default_factory=list)
    horarios: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    portfolio: List[str] = field(default_factory=list)
    avaliacao_media: float = 0.0
    total_avaliacoes: int = 0
    ativo: bool = True
    verificado: bool = False
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        usuario_id: str,
        endereco: str,
        cidade: str,
        modo_atendimento: ModoAtendimento,
        cpf: Optional[str] = None,
        cnpj: Optional[str] = None,
        especialidades: Optional[List[str]] = None,
        horarios: Optional[Dict[str, Dict[str, Any]]] = None,
        portfolio: Optional[List[str]] = None,
    ) -> "PerfilProfissionalEntity":
        """
        Factory method para criar perfil profissional.

        Raises:
            ValidationError: Se dados inválidos
        """
        _validar_usuario_id(usuario_id)

        if not endereco or not endereco.strip():
            raise ValidationError("Endereço é obrigatório", field="endereco")

        if not cidade or not cidade.strip():
            raise ValidationError("Cidade é obrigatória", field="cidade")

        if not isinstance(modo_atendimento, ModoAtendimento):
            raise ValidationError(
                "Modo de atendimento inválido", field="modo_atendimento"
            )

        if cpf and not validar_cpf(cpf):
            raise ValidationError("CPF inválido", field="cpf")

        if cnpj and not validar_cnpj(cnpj):
            raise ValidationError("CNPJ inválido", field="cnpj")

        perfil = cls(
            usuario_id=usuario_id,
            cpf=somente_digitos(cpf) or None,
            cnpj=somente_digitos(cnpj) or None,
            endereco=endereco.strip(),
            cidade=cidade.strip(),
            modo_atendimento=modo_atendimento,
            horarios=validar_horarios(horarios or {}),
        )

        for especialidade in especialidades or []:
            if especialidade not in perfil.especialidades:
                perfil.adicionar_especialidade(especialidade)

        for item in portfolio or []:
            if item not in perfil.portfolio:
                perfil.adicionar_item_portfolio(item)

        return perfil

    def adicionar_especialidade(self, especialidade: str) -> None:
        if not especialidade or not especialidade.strip():
            raise ValidationError(
                "Especialidade não pode ser vazia", field="especialidade"
            )

        especialidade = especialidade.strip()
        if especialidade in self.especialidades:
            raise ValidationError("Especialidade já existe", field="especialidade")

        self.especialidades.append(especialidade)
        self._atualizar_timestamp()

    def remover_especialidade(self, especialidade: str) -> None:
        if especialidade not in self.especialidades:
            raise EntityNotFoundError(
                "Especialidade não encontrada",
                entity_type="Especialidade",
                entity_id=especialidade
            )

        self.especialidades.remove(especialidade)
        self._atualizar_timestamp()

    def adicionar_item_portfolio(self, item: str) -> None:
        if not item or not item.strip():
            raise ValidationError(
                "Item do portfólio não pode ser vazio", field="portfolio"
            )

        if item in self.portfolio:
            raise ValidationError("Item já existe no portfólio", field="portfolio")

        self.portfolio.append(item)
        self._atualizar_timestamp()

    def remover_item_portfolio(self, item: str) -> None:
        if item not in self.portfolio:
            raise EntityNotFoundError(
                "Item não encontrado no portfólio",
                entity_type="ItemPortfolio",
                entity_id=item
            )

        self.portfolio.remove(item)
        self._atualizar_timestamp()

    def atualizar_horarios(self, horarios: Dict[str, Dict[str, Any]]) -> None:
        self.horarios = validar_horarios(horarios)
        self._atualizar_timestamp()

    @property
    def atende_em_domicilio(self) -> bool:
        return self.modo_atendimento in (ModoAtendimento.AT_DOMICILE, ModoAtendimento.BOTH)

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerfilProfissionalEntity):
            return False
        return self.usuario_id == other.usuario_id

    def __hash__(self) -> int:
        return hash(self.usuario_id)


_URL_REGEX = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


@dataclass
class PerfilEmpresaEntity:
    """
    Entidade de Domínio: Perfil de Empresa.

    Invariantes:
    - CNPJ obrigatório e válido
    - Endereço e cidade obrigatórios
    - Fotos são URLs http(s) únicas
    """

    usuario_id: str = ""
    cnpj: str = ""
    endereco: str = ""
    cidade: str = ""
    descricao: Optional[str] = None
    fotos: List[str] = field(default_factory=list)
    ativo: bool = True
    verificado: bool = False
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    @classmethod
    def criar(
        cls,
        usuario_id: str,
        cnpj: str,
        endereco: str,
        cidade: str,
        descricao: Optional[str] = None,
        fotos: Optional[List[str]] = None,
    ) -> "PerfilEmpresaEntity":
        _validar_usuario_id(usuario_id)

        if not cnpj:
            raise ValidationError("CNPJ é obrigatório", field="cnpj")

        if not validar_cnpj(cnpj):
            raise ValidationError("CNPJ inválido", field="cnpj")

        if not endereco or not endereco.strip():
            raise ValidationError("Endereço é obrigatório", field="endereco")

        if not cidade or not cidade.strip():
            raise ValidationError("Cidade é obrigatória", field="cidade")

        perfil = cls(
            usuario_id=usuario_id,
            cnpj=somente_digitos(cnpj),
            endereco=endereco.strip(),
            cidade=cidade.strip(),
            descricao=descricao,
        )

        for foto in fotos or []:
            if foto not in perfil.fotos:
                perfil.adicionar_foto(foto)

        return perfil

    def adicionar_foto(self, url: str) -> None:
        if not url or not url.strip():
            raise ValidationError("URL da foto não pode ser vazia", field="fotos")

        if not _URL_REGEX.match(url):
            raise ValidationError("URL da foto deve ser válida", field="fotos")

        if url in self.fotos:
            raise ValidationError("Foto já existe no portfólio", field="fotos")

        self.fotos.append(url)
        self._atualizar_timestamp()

    def remover_foto(self, url: str) -> None:
        if url not in self.fotos:
            raise EntityNotFoundError(
                "Foto não encontrada no portfólio",
                entity_type="Foto",
                entity_id=url
            )

        self.fotos.remove(url)
        self._atualizar_timestamp()

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerfilEmpresaEntity):
            return False
        return self.usuario_id == other.usuario_id

    def __hash__(self) -> int:
        return hash(self.usuario_id)
