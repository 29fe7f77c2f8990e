"""
API Views JSON para o domínio de Organizações.

Endpoints:
- POST /api/organizacoes/ - Criar organização (usuário vira OWNER)
- GET /api/organizacoes/minhas/ - Organizações do usuário
- POST /api/organizacoes/<id>/convites/ - Convidar membro (OWNER/ADMIN)
- POST /api/organizacoes/convites/<convite_id>/aceitar/ - Aceitar convite
- PATCH /api/organizacoes/<id>/membros/<usuario_id>/ - Alterar papel (OWNER)
- DELETE /api/organizacoes/<id>/membros/<usuario_id>/ - Remover membro (OWNER)
- GET /api/organizacoes/<id>/permissao/?papeis=OWNER,ADMIN - Consulta de papel

Todas as rotas exigem usuário identificado (request.user ou X-User-Id).
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.organizacoes.dtos import (
    CriarOrganizacaoInputDTO,
    ConvidarMembroInputDTO,
    AceitarConviteInputDTO,
    AlterarPapelInputDTO,
    RemoverMembroInputDTO,
)
from src.core.organizacoes.permissoes import PapelOrganizacao

from ..shared.api import BaseAPIView, json_response, require_user_id

logger = logging.getLogger(__name__)


class OrganizacaoAPIListView(BaseAPIView):
    """POST /api/organizacoes/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria organização.

        Body JSON:
        {
            "nome": "string (obrigatório)",
            "slug": "string (obrigatório, ex: salao-da-maria)",
            "descricao": "string (opcional)"
        }
        """
        try:
            dono_id = require_user_id(request)
            data = self.parse_body(request)

            criar_service = self.get_service('criar_organizacao_service')
            output = criar_service.execute(CriarOrganizacaoInputDTO.from_dict(dono_id, data))

            logger.info(f"API: Organização criada: {output.slug}")

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class OrganizacaoAPIMinhasView(BaseAPIView):
    """GET /api/organizacoes/minhas/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            usuario_id = require_user_id(request)

            organizacoes = self.get_service(
                'listar_organizacoes_usuario_service'
            ).execute(usuario_id)

            return json_response(
                success=True,
                data=[o.to_dict() for o in organizacoes],
                meta={'total': len(organizacoes)}
            )

        except Exception as e:
            return self.handle_exception(e)


class ConviteAPIListView(BaseAPIView):
    """POST /api/organizacoes/<organizacao_id>/convites/"""

    def post(self, request: HttpRequest, organizacao_id: str) -> JsonResponse:
        """
        Convida por email.

        Body JSON:
        {
            "email": "string (obrigatório)",
            "papel": "ADMIN|MEMBER (default: MEMBER)"
        }
        """
        try:
            convidado_por_id = require_user_id(request)
            data = self.parse_body(request)

            input_dto = ConvidarMembroInputDTO.from_dict(
                organizacao_id, convidado_por_id, data
            )
            output = self.get_service('convidar_membro_service').execute(input_dto)

            logger.info(f"API: Convite {output.id} enviado para {output.email}")

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ConviteAceitarAPIView(BaseAPIView):
    """POST /api/organizacoes/convites/<convite_id>/aceitar/"""

    def post(self, request: HttpRequest, convite_id: str) -> JsonResponse:
        try:
            input_dto = AceitarConviteInputDTO(
                convite_id=convite_id,
                usuario_id=require_user_id(request),
            )
            output = self.get_service('aceitar_convite_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class MembroAPIDetailView(BaseAPIView):
    """
    PATCH /api/organizacoes/<organizacao_id>/membros/<membro_id>/
    DELETE /api/organizacoes/<organizacao_id>/membros/<membro_id>/
    """

    def patch(self, request: HttpRequest, organizacao_id: str, membro_id: str) -> JsonResponse:
        """
        Altera papel.

        Body JSON:
        {
            "papel": "OWNER|ADMIN|MEMBER (obrigatório)"
        }
        """
        try:
            alterado_por_id = require_user_id(request)
            data = self.parse_body(request)

            if 'papel' not in data:
                return json_response(
                    success=False,
                    error="papel é obrigatório",
                    status=400,
                    meta={'field': 'papel'}
                )

            input_dto = AlterarPapelInputDTO(
                organizacao_id=organizacao_id,
                membro_id=membro_id,
                novo_papel=str(data['papel']),
                alterado_por_id=alterado_por_id,
            )
            output = self.get_service('alterar_papel_membro_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, organizacao_id: str, membro_id: str) -> JsonResponse:
        try:
            input_dto = RemoverMembroInputDTO(
                organizacao_id=organizacao_id,
                membro_id=membro_id,
                removido_por_id=require_user_id(request),
            )
            output = self.get_service('remover_membro_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class PermissaoAPIView(BaseAPIView):
    """GET /api/organizacoes/<organizacao_id>/permissao/?papeis=OWNER,ADMIN"""

    def get(self, request: HttpRequest, organizacao_id: str) -> JsonResponse:
        try:
            usuario_id = require_user_id(request)

            papeis_param = request.GET.get('papeis') or ''
            papeis = [
                PapelOrganizacao.from_string(p.strip())
                for p in papeis_param.split(',') if p.strip()
            ] or list(PapelOrganizacao)

            permitido = self.get_service('verificar_permissao_service').execute(
                organizacao_id=organizacao_id,
                usuario_id=usuario_id,
                papeis_permitidos=papeis,
            )

            return json_response(
                success=True,
                data={
                    'organizacao_id': organizacao_id,
                    'usuario_id': usuario_id,
                    'papeis': [p.value for p in papeis],
                    'permitido': permitido,
                }
            )

        except Exception as e:
            return self.handle_exception(e)
