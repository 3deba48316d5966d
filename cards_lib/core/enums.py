"""
扑克牌的基础枚举定义
包含花色、点数以及从文本解析的方法
"""

from enum import Enum
from typing import Dict

from .exceptions import CardParseError


def _normalize(text: str, target: str) -> str:
    """去掉首尾空白并转为小写"""
    if not isinstance(text, str):
        raise TypeError(f"{target}解析输入必须是字符串，实际: {type(text)}")
    return text.strip().lower()


class Suit(Enum):
    """扑克牌花色枚举，声明顺序即生成牌组时的顺序"""
    CLUB = "club"         # 梅花
    DIAMOND = "diamond"   # 方块
    HEART = "heart"       # 红桃
    SPADE = "spade"       # 黑桃

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """返回首字母大写的名称，如"Club" """
        return self.value.capitalize()

    @property
    def short(self) -> str:
        """返回单字母简写，如"c" """
        return self.value[0]

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.CLUB: "♣",
            Suit.DIAMOND: "♦",
            Suit.HEART: "♥",
            Suit.SPADE: "♠",
        }
        return symbols[self]

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """
        从字符串创建Suit对象
        忽略大小写和首尾空白，支持"club"、"clubs"和"c"三种写法

        Raises:
            CardParseError: 当字符串不对应任何花色时
        """
        token = _normalize(suit_str, "Suit")
        for suit in cls:
            if token in (suit.value, suit.value + "s", suit.short):
                return suit
        raise CardParseError(suit_str, "Suit")


_RANK_NAMES: Dict[int, str] = {
    2: "two", 3: "three", 4: "four", 5: "five", 6: "six", 7: "seven",
    8: "eight", 9: "nine", 10: "ten", 11: "jack", 12: "queen",
    13: "king", 14: "ace",
}

_RANK_SHORTS: Dict[int, str] = {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}

# 只接受ASCII数字，int()会把其他Unicode数字当成普通数字
_RANK_DIGITS = {str(value) for value in range(2, 11)}


class Rank(Enum):
    """扑克牌点数枚举，数值只用于显示和排序键"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """返回首字母大写的名称，如"Two" """
        return _RANK_NAMES[self.value].capitalize()

    @property
    def short(self) -> str:
        """返回点数的简短表示，如"2"、"T"、"A" """
        return _RANK_SHORTS.get(self.value, str(self.value))

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从字符串创建Rank对象
        支持英文名称("ace")、简写("A"、"T")和数字("10")

        Raises:
            CardParseError: 当字符串不对应任何点数时
        """
        token = _normalize(rank_str, "Rank")
        if token in _RANK_DIGITS:
            return cls(int(token))

        for rank in cls:
            if token == _RANK_NAMES[rank.value] or token == rank.short.lower():
                return rank
        raise CardParseError(rank_str, "Rank")
