"""
Shared Domain Components.

Componentes compartilhados entre usuários, perfis e organizações:
- Exceções de domínio
- Validação de CPF/CNPJ (implementação canônica)
- Lista com item padrão (endereços, métodos de pagamento)
- Interfaces (Ports) e base de Domain Events
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    PermissionDeniedError,
    ConflictError,
)
from .documentos import validar_cpf, validar_cnpj, somente_digitos
from .selecao_padrao import ListaComPadrao
from .events import DomainEvent
from .interfaces import UnitOfWork, InMemoryUnitOfWork, EventPublisher

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "PermissionDeniedError",
    "ConflictError",
    "validar_cpf",
    "validar_cnpj",
    "somente_digitos",
    "ListaComPadrao",
    "DomainEvent",
    "UnitOfWork",
    "InMemoryUnitOfWork",
    "EventPublisher",
]
