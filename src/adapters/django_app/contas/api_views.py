"""
API Views JSON para usuários e perfis.

Endpoints:
- POST /api/usuarios/ - Criar usuário
- GET /api/usuarios/<id>/ - Obter usuário
- POST /api/clientes/ - Criar perfil de cliente
- GET/DELETE /api/clientes/<usuario_id>/ - Obter/remover perfil
- PATCH /api/clientes/<usuario_id>/preferencias/ - Preferências
- POST /api/clientes/<usuario_id>/enderecos/ - Adicionar endereço
- PUT/DELETE /api/clientes/<usuario_id>/enderecos/<id>/ - Atualizar/remover
- POST /api/clientes/<usuario_id>/enderecos/<id>/padrao/ - Definir padrão
- POST /api/clientes/<usuario_id>/pagamentos/ - Adicionar método
- PUT/DELETE /api/clientes/<usuario_id>/pagamentos/<id>/ - Atualizar/remover
- POST /api/clientes/<usuario_id>/pagamentos/<id>/padrao/ - Definir padrão
- POST /api/clientes/<usuario_id>/favoritos/ - Adicionar favorito
- DELETE /api/clientes/<usuario_id>/favoritos/<servico_id>/ - Remover favorito
- POST /api/profissionais/ - Criar perfil profissional
- GET /api/profissionais/<usuario_id>/ - Obter perfil
- POST /api/profissionais/<usuario_id>/especialidades/ - Adicionar
- DELETE /api/profissionais/<usuario_id>/especialidades/<nome>/ - Remover
- POST /api/empresas/ - Criar perfil de empresa
- GET /api/empresas/<usuario_id>/ - Obter perfil
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.usuarios.dtos import CriarUsuarioInputDTO
from src.core.perfis.dtos import (
    CriarPerfilClienteInputDTO,
    AtualizarPreferenciasInputDTO,
    EnderecoInputDTO,
    MetodoPagamentoInputDTO,
    ItemPerfilInputDTO,
    CriarPerfilProfissionalInputDTO,
    EspecialidadeInputDTO,
    CriarPerfilEmpresaInputDTO,
)

from ..shared.api import BaseAPIView, json_response, get_user_id

logger = logging.getLogger(__name__)


# =============================================================================
# Usuários
# =============================================================================

class UsuarioAPIListView(BaseAPIView):
    """POST /api/usuarios/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria usuário.

        Body JSON:
        {
            "email": "string (obrigatório)",
            "nome": "string (obrigatório)",
            "tipo": "CLIENT|PROFESSIONAL|COMPANY (obrigatório)",
            "telefone": "(11) 91234-5678 (opcional)",
            "id": "string (opcional, ID externo)"
        }
        """
        try:
            data = self.parse_body(request)

            criar_service = self.get_service('criar_usuario_service')
            output = criar_service.execute(CriarUsuarioInputDTO.from_dict(data))

            logger.info(f"API: Usuário criado: {output.id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):
    """GET /api/usuarios/<id>/"""

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_usuario_service').execute(pk)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Perfil de Cliente
# =============================================================================

class PerfilClienteAPIListView(BaseAPIView):
    """POST /api/clientes/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria perfil de cliente.

        Body JSON:
        {
            "usuario_id": "string (opcional, default: usuário do request)",
            "cpf": "string (obrigatório)",
            "enderecos": [{...}] (opcional),
            "metodos_pagamento": [{...}] (opcional),
            "servicos_favoritos": ["string"] (opcional),
            "preferencias": {...} (opcional)
        }
        """
        try:
            data = self.parse_body(request)

            usuario_id = data.get('usuario_id') or get_user_id(request) or ''
            input_dto = CriarPerfilClienteInputDTO.from_dict(str(usuario_id), data)

            output = self.get_service('criar_perfil_cliente_service').execute(input_dto)

            logger.info(f"API: Perfil de cliente criado: {output.usuario_id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class PerfilClienteAPIDetailView(BaseAPIView):
    """
    GET /api/clientes/<usuario_id>/ - Obter perfil
    DELETE /api/clientes/<usuario_id>/ - Remover perfil (com endereços
    e métodos de pagamento)
    """

    def get(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            output = self.get_service('obter_perfil_cliente_service').execute(usuario_id)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            self.get_service('remover_perfil_cliente_service').execute(usuario_id)

            logger.info(f"API: Perfil de cliente removido: {usuario_id}")

            return json_response(success=True, data={'usuario_id': usuario_id})

        except Exception as e:
            return self.handle_exception(e)


class PreferenciasAPIView(BaseAPIView):
    """PATCH /api/clientes/<usuario_id>/preferencias/"""

    def patch(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        """
        Mescla preferências.

        Body JSON (todos opcionais):
        {
            "notificacoes": {"email": bool, "sms": bool, "push": bool},
            "marketing": bool,
            "idioma": "pt-BR",
            "fuso_horario": "America/Sao_Paulo"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = AtualizarPreferenciasInputDTO.from_dict(usuario_id, data)
            output = self.get_service('atualizar_preferencias_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class EnderecoAPIListView(BaseAPIView):
    """POST /api/clientes/<usuario_id>/enderecos/"""

    def post(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        """
        Adiciona endereço. O primeiro endereço vira padrão.

        Body JSON:
        {
            "id": "string", "rua": "string", "numero": "string",
            "bairro": "string", "cidade": "string", "estado": "string",
            "cep": "string", "complemento": "string (opcional)",
            "e_padrao": bool (opcional)
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = EnderecoInputDTO.from_dict(usuario_id, data)
            output = self.get_service('adicionar_endereco_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class EnderecoAPIDetailView(BaseAPIView):
    """
    PUT /api/clientes/<usuario_id>/enderecos/<endereco_id>/ - Atualizar
    DELETE /api/clientes/<usuario_id>/enderecos/<endereco_id>/ - Remover
    """

    def put(self, request: HttpRequest, usuario_id: str, endereco_id: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = EnderecoInputDTO.from_dict(usuario_id, data, endereco_id=endereco_id)
            output = self.get_service('atualizar_endereco_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, usuario_id: str, endereco_id: str) -> JsonResponse:
        try:
            input_dto = ItemPerfilInputDTO(usuario_id=usuario_id, item_id=endereco_id)
            output = self.get_service('remover_endereco_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class EnderecoPadraoAPIView(BaseAPIView):
    """POST /api/clientes/<usuario_id>/enderecos/<endereco_id>/padrao/"""

    def post(self, request: HttpRequest, usuario_id: str, endereco_id: str) -> JsonResponse:
        try:
            input_dto = ItemPerfilInputDTO(usuario_id=usuario_id, item_id=endereco_id)
            output = self.get_service('definir_endereco_padrao_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class MetodoPagamentoAPIListView(BaseAPIView):
    """POST /api/clientes/<usuario_id>/pagamentos/"""

    def post(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        """
        Adiciona método de pagamento.

        Body JSON:
        {
            "id": "string",
            "tipo": "credit_card|debit_card|pix|bank_transfer",
            "nome": "string",
            "e_padrao": bool (opcional),
            "detalhes": {"ultimos4": "1234", "bandeira": "visa"} (cartões)
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = MetodoPagamentoInputDTO.from_dict(usuario_id, data)
            output = self.get_service('adicionar_metodo_pagamento_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class MetodoPagamentoAPIDetailView(BaseAPIView):
    """
    PUT /api/clientes/<usuario_id>/pagamentos/<metodo_id>/ - Atualizar
    DELETE /api/clientes/<usuario_id>/pagamentos/<metodo_id>/ - Remover
    """

    def put(self, request: HttpRequest, usuario_id: str, metodo_id: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = MetodoPagamentoInputDTO.from_dict(usuario_id, data, metodo_id=metodo_id)
            output = self.get_service('atualizar_metodo_pagamento_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, usuario_id: str, metodo_id: str) -> JsonResponse:
        try:
            input_dto = ItemPerfilInputDTO(usuario_id=usuario_id, item_id=metodo_id)
            output = self.get_service('remover_metodo_pagamento_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class MetodoPagamentoPadraoAPIView(BaseAPIView):
    """POST /api/clientes/<usuario_id>/pagamentos/<metodo_id>/padrao/"""

    def post(self, request: HttpRequest, usuario_id: str, metodo_id: str) -> JsonResponse:
        try:
            input_dto = ItemPerfilInputDTO(usuario_id=usuario_id, item_id=metodo_id)
            output = self.get_service(
                'definir_metodo_pagamento_padrao_service'
            ).execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class FavoritoAPIListView(BaseAPIView):
    """POST /api/clientes/<usuario_id>/favoritos/"""

    def post(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        """
        Body JSON:
        {
            "servico_id": "string (obrigatório)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = ItemPerfilInputDTO(
                usuario_id=usuario_id,
                item_id=str(data.get('servico_id') or ''),
            )
            output = self.get_service('adicionar_favorito_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class FavoritoAPIDetailView(BaseAPIView):
    """DELETE /api/clientes/<usuario_id>/favoritos/<servico_id>/"""

    def delete(self, request: HttpRequest, usuario_id: str, servico_id: str) -> JsonResponse:
        try:
            input_dto = ItemPerfilInputDTO(usuario_id=usuario_id, item_id=servico_id)
            output = self.get_service('remover_favorito_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Perfil Profissional
# =============================================================================

class PerfilProfissionalAPIListView(BaseAPIView):
    """POST /api/profissionais/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "usuario_id": "string (opcional, default: usuário do request)",
            "endereco": "string", "cidade": "string",
            "modo_atendimento": "AT_LOCATION|AT_DOMICILE|BOTH",
            "cpf": "string (opcional)", "cnpj": "string (opcional)",
            "especialidades": ["string"], "portfolio": ["string"],
            "horarios": {"segunda": {"inicio": "08:00", "fim": "18:00"}}
        }
        """
        try:
            data = self.parse_body(request)

            usuario_id = data.get('usuario_id') or get_user_id(request) or ''
            input_dto = CriarPerfilProfissionalInputDTO.from_dict(str(usuario_id), data)

            output = self.get_service('criar_perfil_profissional_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class PerfilProfissionalAPIDetailView(BaseAPIView):
    """GET /api/profissionais/<usuario_id>/"""

    def get(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            output = self.get_service(
                'obter_perfil_profissional_service'
            ).execute(usuario_id)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class EspecialidadeAPIListView(BaseAPIView):
    """POST /api/profissionais/<usuario_id>/especialidades/"""

    def post(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = EspecialidadeInputDTO(
                usuario_id=usuario_id,
                especialidade=str(data.get('especialidade') or ''),
            )
            output = self.get_service('adicionar_especialidade_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class EspecialidadeAPIDetailView(BaseAPIView):
    """DELETE /api/profissionais/<usuario_id>/especialidades/<nome>/"""

    def delete(self, request: HttpRequest, usuario_id: str, nome: str) -> JsonResponse:
        try:
            input_dto = EspecialidadeInputDTO(usuario_id=usuario_id, especialidade=nome)
            output = self.get_service('remover_especialidade_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Perfil de Empresa
# =============================================================================

class PerfilEmpresaAPIListView(BaseAPIView):
    """POST /api/empresas/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            usuario_id = data.get('usuario_id') or get_user_id(request) or ''
            input_dto = CriarPerfilEmpresaInputDTO.from_dict(str(usuario_id), data)

            output = self.get_service('criar_perfil_empresa_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class PerfilEmpresaAPIDetailView(BaseAPIView):
    """GET /api/empresas/<usuario_id>/"""

    def get(self, request: HttpRequest, usuario_id: str) -> JsonResponse:
        try:
            output = self.get_service('obter_perfil_empresa_service').execute(usuario_id)
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)
