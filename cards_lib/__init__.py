#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
标准52张扑克牌组库
提供牌组生成、洗牌、发牌、查询以及花色/点数解析

模块结构：
- core: 核心基础组件（枚举、卡牌、牌组、配置、异常）
"""

from .core import (
    Suit, Rank,
    Card, Deck, generate_deck,
    DeckConfig,
    CardsLibError, CardParseError, DeckError,
    EmptyDeckError, CardNotFoundError, MissingCriteriaError, DeckConfigError,
)

__version__ = "0.1.0"

__all__ = [
    'Suit', 'Rank',
    'Card', 'Deck', 'generate_deck',
    'DeckConfig',
    'CardsLibError', 'CardParseError', 'DeckError',
    'EmptyDeckError', 'CardNotFoundError', 'MissingCriteriaError', 'DeckConfigError',
]
