"""
牌组库异常定义
区分解析异常(输入文本无效)和牌组前置条件异常(空牌组、缺牌、缺少查询条件)
"""


class CardsLibError(Exception):
    """牌组库基础异常类"""
    pass


class CardParseError(CardsLibError, ValueError):
    """
    文本无法解析为花色、点数或卡牌

    Attributes:
        text: 原始输入文本
        target: 目标类型名称，如"Suit"、"Rank"、"Card"
    """

    def __init__(self, text: str, target: str):
        self.text = text
        self.target = target
        super().__init__(f"'{text}' 不是有效的{target}值")


class DeckError(CardsLibError):
    """牌组操作前置条件不满足"""
    pass


class EmptyDeckError(DeckError, IndexError):
    """牌组中的牌不足，无法发牌"""
    pass


class CardNotFoundError(DeckError, LookupError):
    """请求的牌不在牌组中"""

    def __init__(self, card):
        self.card = card
        super().__init__(f"牌组中没有这张牌: {card}")


class MissingCriteriaError(DeckError, ValueError):
    """查询时既没有指定花色也没有指定点数"""
    pass


class DeckConfigError(CardsLibError, ValueError):
    """牌组配置错误异常"""
    pass
