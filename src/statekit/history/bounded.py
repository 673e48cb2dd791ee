"""
Histórico FIFO de capacidade fixa.

Inserção sempre no fim; os itens mais antigos são descartados até que
o tamanho respeite a capacidade.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

T = TypeVar("T")

# Capacidade padrão do histórico de eventos
DEFAULT_HISTORY_CAPACITY = 10


class BoundedHistory(Generic[T]):
    """
    Log FIFO limitado.

    Invariante: len(history) <= capacity, sempre.

    Attributes:
        capacity: Quantidade máxima de itens retidos
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        capacity: int = DEFAULT_HISTORY_CAPACITY,
        items: Iterable[T] = (),
    ) -> None:
        _check_capacity(capacity)
        self._items: deque[T] = deque(items, maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Capacidade atual."""
        # maxlen nunca é None: o construtor sempre o define
        return self._items.maxlen  # type: ignore[return-value]

    @capacity.setter
    def capacity(self, value: int) -> None:
        """Altera a capacidade, descartando os mais antigos se necessário."""
        _check_capacity(value)
        self._items = deque(self._items, maxlen=value)

    def push(self, item: T) -> None:
        """Adiciona item no fim, descartando do início se exceder a capacidade."""
        self._items.append(item)

    def to_list(self) -> list[T]:
        """Cópia dos itens, do mais antigo ao mais recente."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return list(self._items)[index]
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedHistory):
            return self.to_list() == other.to_list()
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedHistory(capacity={self.capacity}, items={self.to_list()!r})"


def _check_capacity(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"capacity deve ser inteiro >= 1, recebido: {value!r}")
