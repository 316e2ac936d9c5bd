from abc import ABC
from typing import Generic, TypeVar

K = TypeVar("K")


class Entity(ABC, Generic[K]):
    """主キーで同一性を判定するエンティティの基底クラス

    属性の値（空席数や Version など）が異なっていても、
    同じ型で主キーが一致すれば同じエンティティとみなす。
    """

    def __init__(self, key: K) -> None:
        self._id = key

    @property
    def id(self) -> K:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
