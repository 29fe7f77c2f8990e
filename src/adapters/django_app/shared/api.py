"""
Base das API Views JSON.

Compartilhado pelos apps contas e organizacoes.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Identidade do usuário:
- request.user quando autenticado via Django auth
- header X-User-Id caso contrário (autenticação real fica fora daqui)
"""

import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    PermissionDeniedError,
    ConflictError,
    DomainException,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)


USER_ID_HEADER = 'HTTP_X_USER_ID'


def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Monta a resposta padrão da API.

    Chaves com valor None ficam de fora do corpo.
    """
    body = {'success': success, 'data': data, 'error': error, 'meta': meta}
    return JsonResponse(
        {key: value for key, value in body.items() if key == 'success' or value is not None},
        status=status,
    )


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Corpo JSON do request como dict (vazio → {}).

    Raises:
        ValueError: JSON inválido ou não é um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("Corpo da requisição deve ser um objeto JSON")

    return data


def get_user_id(request: HttpRequest) -> Optional[str]:
    """ID do usuário do request, ou None se não identificado."""
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return str(user.pk)

    return request.META.get(USER_ID_HEADER) or None


def require_user_id(request: HttpRequest) -> str:
    """
    Raises:
        PermissionDeniedError: Request sem usuário
    """
    user_id = get_user_id(request)
    if not user_id:
        raise PermissionDeniedError("Usuário não identificado")
    return user_id


# Ordem importa: subclasses de DomainException antes da base
ERROR_STATUS: Tuple[Tuple[Type[Exception], int, Optional[Callable[[Exception], Dict]]], ...] = (
    (ValidationError, 400, lambda e: {'field': getattr(e, 'field', None)}),
    (EntityNotFoundError, 404, None),
    (PermissionDeniedError, 403, None),
    (ConflictError, 409, None),
    (BusinessRuleViolationError, 422, lambda e: {'rule': getattr(e, 'rule', None)}),
    (DomainException, 400, None),
    (ValueError, 400, None),
)


@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Subclasses resolvem services pelo nome do provider no container
    e devolvem qualquer exceção para handle_exception.
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Nova instância do service (providers de services são Factory)."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """Converte exceção em resposta segundo ERROR_STATUS; o resto vira 500."""
        for exc_type, status, meta in ERROR_STATUS:
            if isinstance(e, exc_type):
                return json_response(
                    success=False,
                    error=str(e),
                    status=status,
                    meta=meta(e) if meta else None,
                )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
