"""
Conversão de datas entre o Core e o ORM.

Entidades do Core trabalham com datetime naive (hora local);
com USE_TZ=True o Django persiste datetime aware. Os mappers
passam por aqui nas duas direções.
"""

from datetime import datetime
from typing import Optional

from django.conf import settings
from django.utils import timezone


def para_banco(valor: Optional[datetime]) -> Optional[datetime]:
    """Datetime do Core → valor aceito pelo ORM."""
    if valor is None or not settings.USE_TZ:
        return valor
    if timezone.is_naive(valor):
        return timezone.make_aware(valor)
    return valor


def para_dominio(valor: Optional[datetime]) -> Optional[datetime]:
    """Datetime do ORM → datetime naive local usado pelas entidades."""
    if valor is None:
        return None
    if timezone.is_aware(valor):
        return timezone.make_naive(valor)
    return valor
