"""
扑克牌数据结构
定义不可变的Card类，支持字符串解析、显示和排序
"""

from dataclasses import dataclass
from typing import Tuple

from .enums import Suit, Rank
from .exceptions import CardParseError


_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


@dataclass(frozen=True)
class Card:
    """
    不可变的扑克牌类
    两张牌当且仅当点数和花色都相同时相等

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADE)
        >>> str(card)
        'Ace Spade'
        >>> card.to_str()
        'As'
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证卡牌的有效性

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def to_str(self) -> str:
        """
        返回卡牌的简短字符串表示
        例如: "As" (黑桃A), "Th" (红桃10)
        """
        return f"{self.rank.short}{self.suit.short}"

    def to_display_str(self) -> str:
        """
        返回卡牌的显示字符串表示（使用花色符号）
        例如: "A♠", "K♥"
        """
        return f"{self.rank.short}{self.suit.symbol}"

    @property
    def sort_key(self) -> Tuple[int, int]:
        """排序键：先按花色声明顺序，再按点数"""
        return (_SUIT_ORDER[self.suit], self.rank.value)

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建Card对象

        支持两种格式:
            "ace spade" / " Ten  Hearts " (点数和花色名称，空白分隔)
            "As" / "10h" (简写)

        Raises:
            CardParseError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        parts = card_str.split()
        if len(parts) == 2:
            rank_str, suit_str = parts
        elif len(parts) == 1 and len(parts[0]) >= 2:
            rank_str, suit_str = parts[0][:-1], parts[0][-1]
        else:
            raise CardParseError(card_str, "Card")

        try:
            return cls(Rank.from_str(rank_str), Suit.from_str(suit_str))
        except CardParseError as e:
            raise CardParseError(card_str, "Card") from e

    def __str__(self) -> str:
        """返回"点数 花色"格式，如"Two Club" """
        return f"{self.rank.display_name} {self.suit.display_name}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"
