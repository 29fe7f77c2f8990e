"""
Use Cases (Application Services) do Domínio de Perfis.

Use Cases implementados:
- Cliente: criar, obter, remover, preferências, endereços,
  métodos de pagamento e serviços favoritos
- Profissional: criar, obter, adicionar/remover especialidade
- Empresa: criar, obter

Fluxo padrão de escrita:
    with uow:
        perfil = carregar (404 se não existe)
        perfil.operacao(...)      # invariantes na entidade
        repo.save(perfil)
        uow.publish_event(...)    # publicado após commit
    return OutputDTO.from_entity(perfil)
"""

import logging

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    EntityNotFoundError,
    BusinessRuleViolationError,
    ConflictError,
)
from src.core.usuarios.ports import UsuarioRepository
from src.core.usuarios.entities import TipoUsuario

from .ports import (
    PerfilClienteRepository,
    PerfilProfissionalRepository,
    PerfilEmpresaRepository,
)
from .entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)
from .value_objects import (
    Endereco,
    MetodoPagamento,
    PreferenciasCliente,
    ModoAtendimento,
)
from .dtos import (
    CriarPerfilClienteInputDTO,
    AtualizarPreferenciasInputDTO,
    EnderecoInputDTO,
    MetodoPagamentoInputDTO,
    ItemPerfilInputDTO,
    CriarPerfilProfissionalInputDTO,
    EspecialidadeInputDTO,
    CriarPerfilEmpresaInputDTO,
    PerfilClienteOutputDTO,
    PerfilProfissionalOutputDTO,
    PerfilEmpresaOutputDTO,
)
from .events import (
    PerfilClienteCriadoEvent,
    PerfilClienteRemovidoEvent,
    EnderecoAdicionadoEvent,
    EnderecoRemovidoEvent,
    EnderecoPadraoAlteradoEvent,
    MetodoPagamentoAdicionadoEvent,
    MetodoPagamentoRemovidoEvent,
    ServicoFavoritadoEvent,
    PerfilProfissionalCriadoEvent,
    PerfilEmpresaCriadoEvent,
)


logger = logging.getLogger(__name__)


def _exigir_usuario_do_tipo(usuario_repo: UsuarioRepository, usuario_id: str, tipo: TipoUsuario):
    usuario = usuario_repo.get_by_id(usuario_id)

    if not usuario:
        raise EntityNotFoundError(
            "Usuário não encontrado",
            entity_type="Usuario",
            entity_id=usuario_id
        )

    if usuario.tipo != tipo:
        raise BusinessRuleViolationError(
            f"Perfil exige usuário do tipo {tipo.value}",
            rule="perfil_exige_tipo_usuario"
        )

    return usuario


# =============================================================================
# CLIENTE
# =============================================================================

class CriarPerfilClienteService:
    """
    Use Case: Criar perfil de cliente.

    Fluxo:
    1. Usuário deve existir e ser CLIENT
    2. Usuário ainda não pode ter perfil (1:1)
    3. Criar entidade (CPF e itens iniciais validados)
    4. CPF não pode pertencer a outro perfil
    5. Persistir e disparar PerfilClienteCriado
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        perfil_repo: PerfilClienteRepository,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.perfil_repo = perfil_repo
        self.uow = uow

    def execute(self, input_dto: CriarPerfilClienteInputDTO) -> PerfilClienteOutputDTO:
        """
        Raises:
            EntityNotFoundError: Usuário inexistente
            BusinessRuleViolationError: Usuário não é cliente
            ConflictError: Perfil ou CPF já existentes
            ValidationError: CPF ou itens iniciais inválidos
        """
        with self.uow:
            _exigir_usuario_do_tipo(
                self.usuario_repo, input_dto.usuario_id, TipoUsuario.CLIENT
            )

            if self.perfil_repo.exists(input_dto.usuario_id):
                raise ConflictError("Perfil de cliente já existe")

            perfil = PerfilClienteEntity.criar(
                usuario_id=input_dto.usuario_id,
                cpf=input_dto.cpf,
                enderecos=[Endereco.from_dict(e) for e in input_dto.enderecos],
                metodos_pagamento=[
                    MetodoPagamento.from_dict(m) for m in input_dto.metodos_pagamento
                ],
                servicos_favoritos=list(input_dto.servicos_favoritos),
                preferencias=PreferenciasCliente.from_dict(input_dto.preferencias),
            )

            if self.perfil_repo.get_by_cpf(perfil.cpf):
                raise ConflictError("CPF já cadastrado")

            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                PerfilClienteCriadoEvent(
                    aggregate_id=perfil.usuario_id,
                    total_enderecos=len(perfil.enderecos),
                    total_metodos_pagamento=len(perfil.metodos_pagamento),
                )
            )

        logger.info(f"Perfil de cliente criado: {perfil.usuario_id}")
        return PerfilClienteOutputDTO.from_entity(perfil)


class ObterPerfilClienteService:
    """Use Case: Obter perfil de cliente (leitura, sem UoW)."""

    def __init__(self, perfil_repo: PerfilClienteRepository):
        self.perfil_repo = perfil_repo

    def execute(self, usuario_id: str) -> PerfilClienteOutputDTO:
        perfil = self.perfil_repo.get_by_id(usuario_id)

        if not perfil:
            raise EntityNotFoundError(
                "Perfil de cliente não encontrado",
                entity_type="PerfilCliente",
                entity_id=usuario_id
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class _PerfilClienteCommand:
    """Base dos use cases que alteram um perfil de cliente existente."""

    def __init__(self, perfil_repo: PerfilClienteRepository, uow: UnitOfWork):
        self.perfil_repo = perfil_repo
        self.uow = uow

    def _carregar(self, usuario_id: str) -> PerfilClienteEntity:
        perfil = self.perfil_repo.get_by_id(usuario_id)

        if not perfil:
            raise EntityNotFoundError(
                "Perfil de cliente não encontrado",
                entity_type="PerfilCliente",
                entity_id=usuario_id
            )

        return perfil


class RemoverPerfilClienteService(_PerfilClienteCommand):
    """
    Use Case: Remover perfil de cliente.

    Endereços e métodos de pagamento são removidos junto.
    """

    def execute(self, usuario_id: str) -> None:
        with self.uow:
            perfil = self._carregar(usuario_id)
            self.perfil_repo.delete(perfil.usuario_id)

            self.uow.publish_event(
                PerfilClienteRemovidoEvent(aggregate_id=perfil.usuario_id)
            )

        logger.info(f"Perfil de cliente removido: {usuario_id}")


class AtualizarPreferenciasClienteService(_PerfilClienteCommand):

    def execute(self, input_dto: AtualizarPreferenciasInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.atualizar_preferencias(input_dto.preferencias)
            self.perfil_repo.save(perfil)

        return PerfilClienteOutputDTO.from_entity(perfil)


class AdicionarEnderecoService(_PerfilClienteCommand):
    """
    Use Case: Adicionar endereço ao perfil.

    O primeiro endereço sempre vira padrão, mesmo enviado com
    e_padrao=False.

    Example:
        output = service.execute(EnderecoInputDTO(
            usuario_id="user-1",
            dados={"id": "a1", "rua": "Rua X", "numero": "10",
                   "bairro": "Centro", "cidade": "SP", "estado": "SP",
                   "cep": "01234567"},
        ))
        output.endereco_padrao_id  # "a1"
    """

    def execute(self, input_dto: EnderecoInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            endereco = perfil.adicionar_endereco(Endereco.from_dict(input_dto.dados))
            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                EnderecoAdicionadoEvent(
                    aggregate_id=perfil.usuario_id,
                    endereco_id=endereco.id,
                    cidade=endereco.cidade,
                    e_padrao=endereco.e_padrao,
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class RemoverEnderecoService(_PerfilClienteCommand):

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            removido = perfil.remover_endereco(input_dto.item_id)
            self.perfil_repo.save(perfil)

            novo_padrao = perfil.obter_endereco_padrao()
            self.uow.publish_event(
                EnderecoRemovidoEvent(
                    aggregate_id=perfil.usuario_id,
                    endereco_id=removido.id,
                    novo_padrao_id=(
                        novo_padrao.id if removido.e_padrao and novo_padrao else None
                    ),
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class AtualizarEnderecoService(_PerfilClienteCommand):

    def execute(self, input_dto: EnderecoInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.atualizar_endereco(
                input_dto.endereco_id, Endereco.from_dict(input_dto.dados)
            )
            self.perfil_repo.save(perfil)

        return PerfilClienteOutputDTO.from_entity(perfil)


class DefinirEnderecoPadraoService(_PerfilClienteCommand):

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.definir_endereco_padrao(input_dto.item_id)
            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                EnderecoPadraoAlteradoEvent(
                    aggregate_id=perfil.usuario_id,
                    endereco_id=input_dto.item_id,
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class AdicionarMetodoPagamentoService(_PerfilClienteCommand):

    def execute(self, input_dto: MetodoPagamentoInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            metodo = perfil.adicionar_metodo_pagamento(
                MetodoPagamento.from_dict(input_dto.dados)
            )
            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                MetodoPagamentoAdicionadoEvent(
                    aggregate_id=perfil.usuario_id,
                    metodo_id=metodo.id,
                    tipo=metodo.tipo,
                    e_padrao=metodo.e_padrao,
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class RemoverMetodoPagamentoService(_PerfilClienteCommand):

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            removido = perfil.remover_metodo_pagamento(input_dto.item_id)
            self.perfil_repo.save(perfil)

            novo_padrao = perfil.obter_metodo_pagamento_padrao()
            self.uow.publish_event(
                MetodoPagamentoRemovidoEvent(
                    aggregate_id=perfil.usuario_id,
                    metodo_id=removido.id,
                    novo_padrao_id=(
                        novo_padrao.id if removido.e_padrao and novo_padrao else None
                    ),
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class AtualizarMetodoPagamentoService(_PerfilClienteCommand):

    def execute(self, input_dto: MetodoPagamentoInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.atualizar_metodo_pagamento(
                input_dto.metodo_id, MetodoPagamento.from_dict(input_dto.dados)
            )
            self.perfil_repo.save(perfil)

        return PerfilClienteOutputDTO.from_entity(perfil)


class DefinirMetodoPagamentoPadraoService(_PerfilClienteCommand):

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.definir_metodo_pagamento_padrao(input_dto.item_id)
            self.perfil_repo.save(perfil)

        return PerfilClienteOutputDTO.from_entity(perfil)


class AdicionarServicoFavoritoService(_PerfilClienteCommand):
    """
    Use Case: Favoritar serviço.

    Raises:
        ValidationError: ID vazio ou já favoritado
    """

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.adicionar_servico_favorito(input_dto.item_id)
            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                ServicoFavoritadoEvent(
                    aggregate_id=perfil.usuario_id,
                    servico_id=input_dto.item_id,
                )
            )

        return PerfilClienteOutputDTO.from_entity(perfil)


class RemoverServicoFavoritoService(_PerfilClienteCommand):
    """
    Use Case: Desfavoritar serviço.

    Raises:
        EntityNotFoundError: Serviço não está nos favoritos
    """

    def execute(self, input_dto: ItemPerfilInputDTO) -> PerfilClienteOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.remover_servico_favorito(input_dto.item_id)
            self.perfil_repo.save(perfil)

        return PerfilClienteOutputDTO.from_entity(perfil)


# =============================================================================
# PROFISSIONAL
# =============================================================================

class CriarPerfilProfissionalService:
    """
    Use Case: Criar perfil profissional.

    Usuário deve existir, ser PROFESSIONAL e ainda não ter perfil.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        perfil_repo: PerfilProfissionalRepository,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.perfil_repo = perfil_repo
        self.uow = uow

    def execute(self, input_dto: CriarPerfilProfissionalInputDTO) -> PerfilProfissionalOutputDTO:
        with self.uow:
            _exigir_usuario_do_tipo(
                self.usuario_repo, input_dto.usuario_id, TipoUsuario.PROFESSIONAL
            )

            if self.perfil_repo.exists(input_dto.usuario_id):
                raise ConflictError("Perfil profissional já existe")

            perfil = PerfilProfissionalEntity.criar(
                usuario_id=input_dto.usuario_id,
                endereco=input_dto.endereco,
                cidade=input_dto.cidade,
                modo_atendimento=ModoAtendimento.from_string(input_dto.modo_atendimento),
                cpf=input_dto.cpf,
                cnpj=input_dto.cnpj,
                especialidades=list(input_dto.especialidades),
                horarios=input_dto.horarios,
                portfolio=list(input_dto.portfolio),
            )

            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                PerfilProfissionalCriadoEvent(
                    aggregate_id=perfil.usuario_id,
                    cidade=perfil.cidade,
                    modo_atendimento=perfil.modo_atendimento.value,
                )
            )

        logger.info(f"Perfil profissional criado: {perfil.usuario_id}")
        return PerfilProfissionalOutputDTO.from_entity(perfil)


class ObterPerfilProfissionalService:

    def __init__(self, perfil_repo: PerfilProfissionalRepository):
        self.perfil_repo = perfil_repo

    def execute(self, usuario_id: str) -> PerfilProfissionalOutputDTO:
        perfil = self.perfil_repo.get_by_id(usuario_id)

        if not perfil:
            raise EntityNotFoundError(
                "Perfil profissional não encontrado",
                entity_type="PerfilProfissional",
                entity_id=usuario_id
            )

        return PerfilProfissionalOutputDTO.from_entity(perfil)


class _PerfilProfissionalCommand:

    def __init__(self, perfil_repo: PerfilProfissionalRepository, uow: UnitOfWork):
        self.perfil_repo = perfil_repo
        self.uow = uow

    def _carregar(self, usuario_id: str) -> PerfilProfissionalEntity:
        perfil = self.perfil_repo.get_by_id(usuario_id)

        if not perfil:
            raise EntityNotFoundError(
                "Perfil profissional não encontrado",
                entity_type="PerfilProfissional",
                entity_id=usuario_id
            )

        return perfil


class AdicionarEspecialidadeService(_PerfilProfissionalCommand):

    def execute(self, input_dto: EspecialidadeInputDTO) -> PerfilProfissionalOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.adicionar_especialidade(input_dto.especialidade)
            self.perfil_repo.save(perfil)

        return PerfilProfissionalOutputDTO.from_entity(perfil)


class RemoverEspecialidadeService(_PerfilProfissionalCommand):

    def execute(self, input_dto: EspecialidadeInputDTO) -> PerfilProfissionalOutputDTO:
        with self.uow:
            perfil = self._carregar(input_dto.usuario_id)
            perfil.remover_especialidade(input_dto.especialidade)
            self.perfil_repo.save(perfil)

        return PerfilProfissionalOutputDTO.from_entity(perfil)


# =============================================================================
# EMPRESA
# =============================================================================

class CriarPerfilEmpresaService:
    """
    Use Case: Criar perfil de empresa.

    Usuário deve ser COMPANY; CNPJ único entre empresas.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        perfil_repo: PerfilEmpresaRepository,
        uow: UnitOfWork,
    ):
        self.usuario_repo = usuario_repo
        self.perfil_repo = perfil_repo
        self.uow = uow

    def execute(self, input_dto: CriarPerfilEmpresaInputDTO) -> PerfilEmpresaOutputDTO:
        with self.uow:
            _exigir_usuario_do_tipo(
                self.usuario_repo, input_dto.usuario_id, TipoUsuario.COMPANY
            )

            if self.perfil_repo.exists(input_dto.usuario_id):
                raise ConflictError("Perfil de empresa já existe")

            perfil = PerfilEmpresaEntity.criar(
                usuario_id=input_dto.usuario_id,
                cnpj=input_dto.cnpj,
                endereco=input_dto.endereco,
                cidade=input_dto.cidade,
                descricao=input_dto.descricao,
                fotos=list(input_dto.fotos),
            )

            if self.perfil_repo.get_by_cnpj(perfil.cnpj):
                raise ConflictError("CNPJ já cadastrado")

            self.perfil_repo.save(perfil)

            self.uow.publish_event(
                PerfilEmpresaCriadoEvent(
                    aggregate_id=perfil.usuario_id,
                    cnpj=perfil.cnpj,
                    cidade=perfil.cidade,
                )
            )

        logger.info(f"Perfil de empresa criado: {perfil.usuario_id}")
        return PerfilEmpresaOutputDTO.from_entity(perfil)


class ObterPerfilEmpresaService:

    def __init__(self, perfil_repo: PerfilEmpresaRepository):
        self.perfil_repo = perfil_repo

    def execute(self, usuario_id: str) -> PerfilEmpresaOutputDTO:
        perfil = self.perfil_repo.get_by_id(usuario_id)

        if not perfil:
            raise EntityNotFoundError(
                "Perfil de empresa não encontrado",
                entity_type="PerfilEmpresa",
                entity_id=usuario_id
            )

        return PerfilEmpresaOutputDTO.from_entity(perfil)
