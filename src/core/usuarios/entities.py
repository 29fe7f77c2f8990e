"""
Entidades do Domínio de Usuários.

Entidades:
- UsuarioEntity: Conta base do marketplace
- TipoUsuario: Lado do marketplace (cliente, profissional, empresa)

O tipo é definido na criação e nunca muda: não existe operação de
transição. Capacidades (agendar, oferecer serviços, gerenciar
funcionários) derivam exclusivamente do tipo.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import re
import uuid

from src.core.shared.exceptions import ValidationError


EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TELEFONE_REGEX = re.compile(r"^\(\d{2}\)\s\d{4,5}-\d{4}$")


class TipoUsuario(Enum):
    """Conjunto fechado de tipos de usuário."""

    CLIENT = "CLIENT"
    PROFESSIONAL = "PROFESSIONAL"
    COMPANY = "COMPANY"

    @classmethod
    def from_string(cls, value: str) -> "TipoUsuario":
        """
        Converte string para enum (case-insensitive).

        Raises:
            ValidationError: Se valor inválido
        """
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValidationError("Tipo de usuário inválido", field="tipo")

    @property
    def tipo_perfil(self) -> str:
        """Nome do perfil associado ("client", "professional", "company")."""
        return self.value.lower()


@dataclass
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário.

    Invariantes:
    - Email no formato nome@dominio.tld
    - Nome com pelo menos 2 caracteres
    - Telefone, quando informado, no formato (11) 91234-5678
    - Tipo imutável após criação

    Example:
        usuario = UsuarioEntity.criar(
            email="maria@exemplo.com",
            nome="Maria",
            tipo=TipoUsuario.CLIENT,
            telefone="(11) 91234-5678",
        )
        usuario.pode_agendar_servicos  # True
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    email: str = ""
    nome: str = ""
    telefone: Optional[str] = None
    tipo: TipoUsuario = TipoUsuario.CLIENT
    email_verificado: bool = False
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: datetime = field(default_factory=datetime.now)

    NOME_MIN_LENGTH: int = 2

    @classmethod
    def criar(
        cls,
        email: str,
        nome: str,
        tipo: TipoUsuario,
        telefone: Optional[str] = None,
        usuario_id: Optional[str] = None,
    ) -> "UsuarioEntity":
        """
        Factory method para criar usuário com validações.

        Args:
            email: Email de login
            nome: Nome de exibição
            tipo: Tipo do usuário (fixo a partir daqui)
            telefone: Telefone opcional
            usuario_id: ID externo (ex: provedor de autenticação)

        Raises:
            ValidationError: Se dados inválidos
        """
        cls._validar_email(email)
        cls._validar_nome(nome)
        cls._validar_telefone(telefone)

        if not isinstance(tipo, TipoUsuario):
            raise ValidationError("Tipo de usuário inválido", field="tipo")

        usuario = cls(
            email=email.strip().lower(),
            nome=nome.strip(),
            telefone=telefone or None,
            tipo=tipo,
        )
        if usuario_id:
            usuario.id = usuario_id
        return usuario

    @classmethod
    def _validar_email(cls, email: str) -> None:
        if not email:
            raise ValidationError("Email é obrigatório", field="email")

        if not EMAIL_REGEX.match(email.strip()):
            raise ValidationError("Email inválido", field="email")

    @classmethod
    def _validar_nome(cls, nome: str) -> None:
        if not nome:
            raise ValidationError("Nome é obrigatório", field="nome")

        if len(nome.strip()) < cls.NOME_MIN_LENGTH:
            raise ValidationError(
                f"Nome deve ter pelo menos {cls.NOME_MIN_LENGTH} caracteres",
                field="nome"
            )

    @classmethod
    def _validar_telefone(cls, telefone: Optional[str]) -> None:
        if telefone and not TELEFONE_REGEX.match(telefone):
            raise ValidationError("Telefone inválido", field="telefone")

    def atualizar_dados(
        self,
        nome: Optional[str] = None,
        telefone: Optional[str] = None,
    ) -> None:
        """Atualiza nome e/ou telefone (tipo e email não mudam aqui)."""
        if nome is not None:
            self._validar_nome(nome)
            self.nome = nome.strip()

        if telefone is not None:
            self._validar_telefone(telefone)
            self.telefone = telefone or None

        self._atualizar_timestamp()

    def verificar_email(self) -> None:
        self.email_verificado = True
        self._atualizar_timestamp()

    def _atualizar_timestamp(self) -> None:
        self.atualizado_em = datetime.now()

    @property
    def e_cliente(self) -> bool:
        return self.tipo == TipoUsuario.CLIENT

    @property
    def e_profissional(self) -> bool:
        return self.tipo == TipoUsuario.PROFESSIONAL

    @property
    def e_empresa(self) -> bool:
        return self.tipo == TipoUsuario.COMPANY

    @property
    def pode_agendar_servicos(self) -> bool:
        """Apenas clientes agendam."""
        return self.e_cliente

    @property
    def pode_oferecer_servicos(self) -> bool:
        """Profissionais e empresas recebem agendamentos."""
        return self.e_profissional or self.e_empresa

    @property
    def pode_gerenciar_funcionarios(self) -> bool:
        return self.e_empresa

    def __repr__(self) -> str:
        return (
            f"UsuarioEntity("
            f"id={self.id[:8]}..., "
            f"email={self.email}, "
            f"tipo={self.tipo.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UsuarioEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
