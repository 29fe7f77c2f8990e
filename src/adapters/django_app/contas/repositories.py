"""
Repositórios Django para usuários e perfis.

Implementam as interfaces (Ports) definidas em src/core/usuarios/ports.py
e src/core/perfis/ports.py. São DRIVEN ADAPTERS - acionados pelo Core.

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import Any, Dict, Optional
import logging

from django.db import models

from src.core.shared.documentos import somente_digitos
from src.core.usuarios.entities import UsuarioEntity
from src.core.perfis.entities import (
    PerfilClienteEntity,
    PerfilProfissionalEntity,
    PerfilEmpresaEntity,
)

from .models import (
    UsuarioModel,
    PerfilClienteModel,
    PerfilProfissionalModel,
    PerfilEmpresaModel,
)
from .mappers import (
    UsuarioMapper,
    PerfilClienteMapper,
    PerfilProfissionalMapper,
    PerfilEmpresaMapper,
)

logger = logging.getLogger(__name__)


def _campos(model: models.Model) -> Dict[str, Any]:
    """Valores de todas as colunas exceto a PK (defaults do upsert)."""
    return {
        f.attname: getattr(model, f.attname)
        for f in model._meta.concrete_fields
        if not f.primary_key
    }


class DjangoUsuarioRepository:
    """
    Implementação Django do UsuarioRepository.

    Example:
        repo = DjangoUsuarioRepository()
        repo.save(usuario)
        repo.get_by_email("maria@exemplo.com")
    """

    def __init__(self):
        self._mapper = UsuarioMapper()

    def save(self, usuario: UsuarioEntity) -> None:
        """
        Persiste usuário (create ou update).

        Note:
            Usa update_or_create para atomicidade
        """
        logger.debug(f"Saving usuario: {usuario.id}")

        UsuarioModel.objects.update_or_create(
            id=usuario.id,
            defaults=_campos(self._mapper.to_model(usuario))
        )

        logger.info(f"Usuario saved: {usuario.id}")

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        try:
            model = UsuarioModel.objects.get(id=usuario_id)
            return self._mapper.to_entity(model)
        except UsuarioModel.DoesNotExist:
            logger.debug(f"Usuario not found: {usuario_id}")
            return None

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        model = UsuarioModel.objects.filter(
            email=(email or "").strip().lower()
        ).first()
        return self._mapper.to_entity(model) if model else None

    def delete(self, usuario_id: str) -> None:
        """Remove usuário (perfis caem em cascata)."""
        deleted_count, _ = UsuarioModel.objects.filter(id=usuario_id).delete()

        if deleted_count > 0:
            logger.info(f"Usuario deleted: {usuario_id}")

    def exists(self, usuario_id: str) -> bool:
        return UsuarioModel.objects.filter(id=usuario_id).exists()


class DjangoPerfilClienteRepository:
    """
    Implementação Django do PerfilClienteRepository.

    Endereços e métodos de pagamento vivem na mesma linha do perfil,
    então delete() remove tudo de uma vez.
    """

    def __init__(self):
        self._mapper = PerfilClienteMapper()

    def save(self, perfil: PerfilClienteEntity) -> None:
        logger.debug(f"Saving perfil cliente: {perfil.usuario_id}")

        PerfilClienteModel.objects.update_or_create(
            usuario_id=perfil.usuario_id,
            defaults=_campos(self._mapper.to_model(perfil))
        )

        logger.info(f"Perfil cliente saved: {perfil.usuario_id}")

    def get_by_id(self, usuario_id: str) -> Optional[PerfilClienteEntity]:
        try:
            model = PerfilClienteModel.objects.get(usuario_id=usuario_id)
            return self._mapper.to_entity(model)
        except PerfilClienteModel.DoesNotExist:
            logger.debug(f"Perfil cliente not found: {usuario_id}")
            return None

    def get_by_cpf(self, cpf: str) -> Optional[PerfilClienteEntity]:
        model = PerfilClienteModel.objects.filter(
            cpf=somente_digitos(cpf)
        ).first()
        return self._mapper.to_entity(model) if model else None

    def delete(self, usuario_id: str) -> None:
        deleted_count, _ = PerfilClienteModel.objects.filter(
            usuario_id=usuario_id
        ).delete()

        if deleted_count > 0:
            logger.info(f"Perfil cliente deleted: {usuario_id}")
        else:
            logger.debug(f"Perfil cliente not found for deletion: {usuario_id}")

    def exists(self, usuario_id: str) -> bool:
        return PerfilClienteModel.objects.filter(usuario_id=usuario_id).exists()


class DjangoPerfilProfissionalRepository:

    def __init__(self):
        self._mapper = PerfilProfissionalMapper()

    def save(self, perfil: PerfilProfissionalEntity) -> None:
        logger.debug(f"Saving perfil profissional: {perfil.usuario_id}")

        PerfilProfissionalModel.objects.update_or_create(
            usuario_id=perfil.usuario_id,
            defaults=_campos(self._mapper.to_model(perfil))
        )

        logger.info(f"Perfil profissional saved: {perfil.usuario_id}")

    def get_by_id(self, usuario_id: str) -> Optional[PerfilProfissionalEntity]:
        try:
            model = PerfilProfissionalModel.objects.get(usuario_id=usuario_id)
            return self._mapper.to_entity(model)
        except PerfilProfissionalModel.DoesNotExist:
            logger.debug(f"Perfil profissional not found: {usuario_id}")
            return None

    def exists(self, usuario_id: str) -> bool:
        return PerfilProfissionalModel.objects.filter(
            usuario_id=usuario_id
        ).exists()


class DjangoPerfilEmpresaRepository:

    def __init__(self):
        self._mapper = PerfilEmpresaMapper()

    def save(self, perfil: PerfilEmpresaEntity) -> None:
        logger.debug(f"Saving perfil empresa: {perfil.usuario_id}")

        PerfilEmpresaModel.objects.update_or_create(
            usuario_id=perfil.usuario_id,
            defaults=_campos(self._mapper.to_model(perfil))
        )

        logger.info(f"Perfil empresa saved: {perfil.usuario_id}")

    def get_by_id(self, usuario_id: str) -> Optional[PerfilEmpresaEntity]:
        try:
            model = PerfilEmpresaModel.objects.get(usuario_id=usuario_id)
            return self._mapper.to_entity(model)
        except PerfilEmpresaModel.DoesNotExist:
            logger.debug(f"Perfil empresa not found: {usuario_id}")
            return None

    def get_by_cnpj(self, cnpj: str) -> Optional[PerfilEmpresaEntity]:
        model = PerfilEmpresaModel.objects.filter(
            cnpj=somente_digitos(cnpj)
        ).first()
        return self._mapper.to_entity(model) if model else None

    def exists(self, usuario_id: str) -> bool:
        return PerfilEmpresaModel.objects.filter(usuario_id=usuario_id).exists()
