#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含枚举、卡牌、牌组、配置和异常定义
"""

from .enums import Suit, Rank
from .card import Card
from .deck import Deck, generate_deck
from .config import DeckConfig
from .exceptions import (
    CardsLibError, CardParseError, DeckError,
    EmptyDeckError, CardNotFoundError, MissingCriteriaError, DeckConfigError,
)

__all__ = [
    # 枚举类型
    'Suit', 'Rank',

    # 卡牌相关
    'Card', 'Deck', 'generate_deck',

    # 配置相关
    'DeckConfig',

    # 异常类型
    'CardsLibError', 'CardParseError', 'DeckError',
    'EmptyDeckError', 'CardNotFoundError', 'MissingCriteriaError', 'DeckConfigError',
]
