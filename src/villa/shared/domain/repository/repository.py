from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の保存先を抽象化する
    - 戻り値は常にスナップショット（呼び出し側が変更しても保存内容は変わらない）
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する（存在しない場合は None）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """保存されている集約をすべて返す"""
        raise NotImplementedError
