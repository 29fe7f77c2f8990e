"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- CriarUsuarioService: Registra nova conta
- ObterUsuarioService: Obtém usuário por ID
"""

import logging

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import ConflictError, EntityNotFoundError

from .ports import UsuarioRepository
from .entities import UsuarioEntity, TipoUsuario
from .dtos import CriarUsuarioInputDTO, UsuarioOutputDTO
from .events import UsuarioCriadoEvent


logger = logging.getLogger(__name__)


class CriarUsuarioService:
    """
    Use Case: Registrar um novo usuário.

    Fluxo:
    1. Converter tipo (string → TipoUsuario)
    2. Garantir email e ID únicos
    3. Criar entidade (validações na entidade)
    4. Persistir e disparar UsuarioCriado

    Example:
        service = CriarUsuarioService(usuario_repo, uow)
        output = service.execute(CriarUsuarioInputDTO(
            email="joao@exemplo.com", nome="João", tipo="CLIENT"
        ))
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CriarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            ConflictError: Se email ou ID já cadastrados
        """
        with self.uow:
            tipo = TipoUsuario.from_string(input_dto.tipo)

            usuario = UsuarioEntity.criar(
                email=input_dto.email,
                nome=input_dto.nome,
                tipo=tipo,
                telefone=input_dto.telefone,
                usuario_id=input_dto.usuario_id,
            )

            if self.usuario_repo.get_by_email(usuario.email):
                raise ConflictError("Email já cadastrado")

            if self.usuario_repo.exists(usuario.id):
                raise ConflictError("Usuário já existe")

            self.usuario_repo.save(usuario)

            self.uow.publish_event(
                UsuarioCriadoEvent(
                    aggregate_id=usuario.id,
                    email=usuario.email,
                    nome=usuario.nome,
                    tipo=usuario.tipo.value,
                )
            )

        logger.info(f"Usuário criado: {usuario.id} ({usuario.tipo.value})")
        return UsuarioOutputDTO.from_entity(usuario)


class ObterUsuarioService:
    """
    Use Case: Obter usuário por ID.

    Operação de leitura: não usa UoW.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str) -> UsuarioOutputDTO:
        usuario = self.usuario_repo.get_by_id(usuario_id)

        if not usuario:
            raise EntityNotFoundError(
                "Usuário não encontrado",
                entity_type="Usuario",
                entity_id=usuario_id
            )

        return UsuarioOutputDTO.from_entity(usuario)
