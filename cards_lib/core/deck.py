"""
牌组类的实现
包含洗牌、按牌或从顶部发牌、批量发牌和按花色/点数查询
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional, Tuple

from .card import Card
from .config import DeckConfig
from .enums import Suit, Rank
from .exceptions import EmptyDeckError, CardNotFoundError, MissingCriteriaError


def _standard_cards() -> List[Card]:
    """按花色外循环、点数内循环的顺序生成52张牌"""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    一副牌
    有序、可变的卡牌序列，序列的最后一张视为牌顶

    牌组独占自己的卡牌列表，构造时会复制传入的卡牌。
    不支持多线程并发调用，需要时由调用方加锁。

    Examples:
        >>> deck = generate_deck()
        >>> deck.shuffle()
        >>> hand = deck.deal_n(n_cards=5)
        >>> deck.size()
        47
    """

    def __init__(self,
                 cards: Optional[Iterable[Card]] = None,
                 config: Optional[DeckConfig] = None,
                 rng: Optional[random.Random] = None,
                 logger: Optional[logging.Logger] = None):
        """
        初始化牌组

        Args:
            cards: 初始卡牌，为None时生成标准52张牌
            config: 牌组配置，为None时使用默认配置
            rng: 洗牌用的随机数生成器，优先于config中的种子
            logger: 日志记录器
        """
        self.config = config or DeckConfig.default()
        self.logger = logger or logging.getLogger(__name__)
        # 调试模式把发牌记录提升到INFO，不修改任何logger的级别
        self._trace_level = logging.INFO if self.config.debug_mode else logging.DEBUG

        # 为None时洗牌使用random模块的全局随机源
        self._rng = rng or self.config.make_rng()
        self._cards: List[Card] = list(cards) if cards is not None else _standard_cards()

    def shuffle(self) -> None:
        """原地随机打乱牌的顺序"""
        if self._rng is None:
            random.shuffle(self._cards)
        else:
            self._rng.shuffle(self._cards)
        self.logger.log(self._trace_level, "洗牌完成，共%d张", len(self._cards))

    def deal(self, card: Optional[Card] = None) -> Optional[Card]:
        """
        发一张牌

        Args:
            card: 指定要发的牌；为None时从牌顶发牌

        Returns:
            发出的卡牌；指定的牌不在牌组中时返回None

        Raises:
            EmptyDeckError: 从空牌组的牌顶发牌时
        """
        if card is None:
            if not self._cards:
                raise EmptyDeckError("牌组已空，无法发牌")
            dealt = self._cards.pop()
            self.logger.log(self._trace_level, "从牌顶发出 %s，剩余%d张", dealt, len(self._cards))
            return dealt

        for index, candidate in enumerate(self._cards):
            if candidate.rank == card.rank and candidate.suit == card.suit:
                dealt = self._cards.pop(index)
                self.logger.log(self._trace_level, "发出指定的牌 %s，剩余%d张", dealt, len(self._cards))
                return dealt
        return None

    def deal_n(self, cards: Optional[List[Card]] = None, n_cards: int = 0) -> List[Card]:
        """
        发多张牌

        指定cards时按列表顺序逐张发出这些牌，n_cards被忽略；
        否则从牌顶发n_cards张，顺序为出牌顺序。
        任何一张牌无法发出时整批失败，牌组保持不变。

        Args:
            cards: 指定要发的牌
            n_cards: 从牌顶发牌的数量

        Returns:
            发出的卡牌列表

        Raises:
            CardNotFoundError: 指定的牌不在牌组中时
            EmptyDeckError: 牌组中的牌不足n_cards张且配置不允许提前停止时
            ValueError: n_cards为负数时
        """
        if cards is not None:
            requested = list(cards)
            self._check_available(requested)
            return [self.deal(card) for card in requested]

        if n_cards < 0:
            raise ValueError(f"发牌数量不能为负数: {n_cards}")

        remaining = len(self._cards)
        if n_cards > remaining:
            if not self.config.stop_when_exhausted:
                raise EmptyDeckError(f"牌组中只有{remaining}张牌，无法发{n_cards}张")
            self.logger.warning("牌组中只有%d张牌，请求%d张，发完剩余的牌", remaining, n_cards)
            n_cards = remaining

        return [self.deal() for _ in range(n_cards)]

    def _check_available(self, requested: List[Card]) -> None:
        """确认请求的每张牌都在牌组中（重复请求需要对应数量的重复牌）"""
        pool = list(self._cards)
        for card in requested:
            try:
                pool.remove(card)
            except ValueError:
                raise CardNotFoundError(card) from None

    def has_card(self, suit: Optional[Suit] = None, rank: Optional[Rank] = None) -> bool:
        """
        查询牌组中是否有符合条件的牌

        同时指定花色和点数时精确匹配；只指定一个时忽略另一个。

        Raises:
            MissingCriteriaError: 花色和点数都没有指定时
        """
        if suit is None and rank is None:
            raise MissingCriteriaError("has_card至少需要指定花色或点数")

        for card in self._cards:
            if suit is not None and card.suit != suit:
                continue
            if rank is not None and card.rank != rank:
                continue
            return True
        return False

    def size(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    @property
    def remaining_count(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前卡牌的快照，最后一张为牌顶"""
        return tuple(self._cards)

    def peek_top_card(self) -> Optional[Card]:
        """
        查看顶部卡牌但不发出

        Returns:
            顶部卡牌，如果牌组为空则返回None
        """
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"

    def __str__(self) -> str:
        """每张牌一行，格式为"点数 花色" """
        return "".join(f"{card}\n" for card in self._cards)


def generate_deck(config: Optional[DeckConfig] = None) -> Deck:
    """
    生成一副完整的52张牌

    顺序固定：花色按Club、Diamond、Heart、Spade，每种花色内点数从Two到Ace。
    """
    return Deck(_standard_cards(), config=config)
