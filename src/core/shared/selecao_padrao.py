"""
Lista com item padrão (seleção única).

Endereços e métodos de pagamento de um perfil compartilham a mesma
forma: uma lista ordenada em que, se não estiver vazia, exatamente
um item tem ``e_padrao = True``. Esta coleção concentra a política
de marcação e promoção em um único lugar.

Política:
- Primeiro item adicionado vira padrão, independente da entrada
- Item adicionado como padrão desmarca os demais (último vence)
- Ao remover o padrão, o primeiro item restante (ordem da lista)
  é promovido
"""

from typing import Generic, Iterator, List, Optional, Protocol, TypeVar

from .exceptions import EntityNotFoundError, ValidationError


class ItemSelecionavel(Protocol):
    """Qualquer item com identificador estável e flag de padrão."""

    id: str
    e_padrao: bool


T = TypeVar("T", bound=ItemSelecionavel)


class ListaComPadrao(Generic[T]):
    """
    Coleção ordenada com no máximo um item padrão.

    Invariante: lista não vazia ⇒ exatamente um item padrão.

    Example:
        enderecos = ListaComPadrao(nome_item="Endereço")
        enderecos.adicionar(casa)       # casa vira padrão
        enderecos.adicionar(trabalho)
        enderecos.remover(casa.id)      # trabalho é promovido
    """

    def __init__(self, itens: Optional[List[T]] = None, nome_item: str = "Item"):
        self._itens: List[T] = []
        self._nome_item = nome_item
        for item in itens or []:
            self.adicionar(item)

    def adicionar(self, item: T) -> T:
        """
        Adiciona item ao final da lista.

        Raises:
            ValidationError: Se já existe item com o mesmo id
        """
        if self.contem(item.id):
            raise ValidationError(
                f"{self._nome_item} com id {item.id} já existe",
                field="id"
            )

        if not self._itens:
            item.e_padrao = True

        if item.e_padrao:
            self._desmarcar_todos()

        self._itens.append(item)
        return item

    def remover(self, item_id: str) -> T:
        """
        Remove item e promove o primeiro restante se necessário.

        Raises:
            EntityNotFoundError: Se item não existe
        """
        indice = self._indice(item_id)
        removido = self._itens.pop(indice)

        if removido.e_padrao and self._itens:
            self._itens[0].e_padrao = True

        return removido

    def atualizar(self, item_id: str, novo: T) -> T:
        """
        Substitui item mantendo posição e id.

        Se o item antigo era o padrão, o novo continua padrão mesmo
        que a entrada diga o contrário.
        """
        indice = self._indice(item_id)
        antigo = self._itens[indice]

        novo.id = antigo.id
        if antigo.e_padrao:
            novo.e_padrao = True

        if novo.e_padrao:
            self._desmarcar_todos()

        self._itens[indice] = novo
        return novo

    def definir_padrao(self, item_id: str) -> T:
        """Torna o item o único padrão da lista."""
        item = self._itens[self._indice(item_id)]
        self._desmarcar_todos()
        item.e_padrao = True
        return item

    def obter(self, item_id: str) -> T:
        return self._itens[self._indice(item_id)]

    def obter_padrao(self) -> Optional[T]:
        return next((item for item in self._itens if item.e_padrao), None)

    def contem(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self._itens)

    def para_lista(self) -> List[T]:
        """Cópia rasa da lista (itens compartilhados)."""
        return list(self._itens)

    def _indice(self, item_id: str) -> int:
        for indice, item in enumerate(self._itens):
            if item.id == item_id:
                return indice

        raise EntityNotFoundError(
            f"{self._nome_item} não encontrado",
            entity_type=self._nome_item,
            entity_id=item_id,
        )

    def _desmarcar_todos(self) -> None:
        for item in self._itens:
            item.e_padrao = False

    def __len__(self) -> int:
        return len(self._itens)

    def __iter__(self) -> Iterator[T]:
        return iter(self._itens)

    def __repr__(self) -> str:
        padrao = self.obter_padrao()
        return (
            f"ListaComPadrao({self._nome_item}, "
            f"itens={len(self._itens)}, "
            f"padrao={padrao.id if padrao else None})"
        )
