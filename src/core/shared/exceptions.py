"""
Exceções de Domínio do Marketplace de Serviços.

Exceções tipadas que atravessam as camadas sem conhecer HTTP.
O mapeamento para status code fica no adapter (BaseAPIView).

Hierarquia:
    DomainException (base)
    ├── ValidationError (dados de entrada inválidos - 400)
    ├── EntityNotFoundError (item ou entidade inexistente - 404)
    ├── BusinessRuleViolationError (regra de negócio violada - 422)
    ├── PermissionDeniedError (papel sem permissão - 403)
    └── ConflictError (recurso duplicado - 409)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            perfil.remover_endereco("addr-1")
        except DomainException as e:
            logger.warning(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Carrega o nome do campo que falhou para que o cliente
    da API saiba exatamente o que corrigir.

    Example:
        if not validar_cpf(cpf):
            raise ValidationError("CPF inválido", field="cpf")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade ou item de lista não encontrado.

    Usada tanto para agregados ausentes no repositório quanto para
    itens ausentes dentro de um agregado (endereço, método de pagamento,
    serviço favorito).
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Example:
        if not usuario.e_cliente:
            raise BusinessRuleViolationError(
                "Apenas clientes possuem perfil de cliente",
                rule="perfil_cliente_exige_tipo_cliente"
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class PermissionDeniedError(DomainException):
    """
    Papel do usuário não permite a ação solicitada.

    Attributes:
        papel: Papel do usuário na organização (None se não é membro)
        acao: Ação que foi negada
    """

    def __init__(self, message: str, papel: str = None, acao: str = None):
        self.papel = papel
        self.acao = acao
        super().__init__(message, "PERMISSION_DENIED")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.acao:
            result["acao"] = self.acao
        return result


class ConflictError(DomainException):
    """Recurso já existe (slug, email, CPF ou perfil duplicado)."""

    def __init__(self, message: str):
        super().__init__(message, "CONFLICT")
