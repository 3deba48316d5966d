#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
枚举类型单元测试
测试Suit、Rank的取值、显示和字符串解析
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from cards_lib.core.enums import Suit, Rank
from cards_lib.core.exceptions import CardParseError, CardsLibError


class TestSuit:
    """花色枚举测试"""

    def test_declaration_order(self):
        """测试花色声明顺序"""
        assert list(Suit) == [Suit.CLUB, Suit.DIAMOND, Suit.HEART, Suit.SPADE], "花色顺序应该是梅花、方块、红桃、黑桃"

    def test_display(self):
        """测试花色显示"""
        assert str(Suit.CLUB) == "Club", "梅花应该显示为Club"
        assert Suit.HEART.display_name == "Heart", "红桃应该显示为Heart"
        assert Suit.SPADE.short == "s", "黑桃简写应该是s"
        assert Suit.DIAMOND.symbol == "♦", "方块符号应该正确"

    def test_from_str(self):
        """测试花色解析"""
        assert Suit.from_str("club") == Suit.CLUB, "应该能解析club"
        assert Suit.from_str("Diamond") == Suit.DIAMOND, "应该忽略大小写"
        assert Suit.from_str("SPADE") == Suit.SPADE, "应该能解析全大写"
        assert Suit.from_str(" spade ") == Suit.SPADE, "应该去掉首尾空白"
        assert Suit.from_str("\tHeart\n") == Suit.HEART, "应该去掉制表符和换行"
        assert Suit.from_str("hearts") == Suit.HEART, "应该能解析复数形式"
        assert Suit.from_str("C") == Suit.CLUB, "应该能解析单字母简写"

    def test_from_str_invalid(self):
        """测试无效花色解析"""
        with pytest.raises(CardParseError) as exc_info:
            Suit.from_str("invalid")

        error = exc_info.value
        assert error.text == "invalid", "异常应该记录原始输入"
        assert error.target == "Suit", "异常应该记录目标类型"
        assert "invalid" in str(error) and "Suit" in str(error), "异常信息应该包含输入和类型"
        assert isinstance(error, ValueError), "解析异常应该同时是ValueError"
        assert isinstance(error, CardsLibError), "解析异常应该是库的基础异常"

        for bad in ["", "   ", "x", "clubz"]:
            with pytest.raises(CardParseError):
                Suit.from_str(bad)

    def test_from_str_non_string(self):
        """测试非字符串输入"""
        with pytest.raises(TypeError):
            Suit.from_str(3)


class TestRank:
    """点数枚举测试"""

    def test_declaration_order(self):
        """测试点数声明顺序"""
        ranks = list(Rank)
        assert len(ranks) == 13, "应该有13种点数"
        assert ranks[0] == Rank.TWO and ranks[-1] == Rank.ACE, "点数应该从Two到Ace"
        assert [rank.value for rank in ranks] == list(range(2, 15)), "点数值应该是2到14"

    def test_display(self):
        """测试点数显示"""
        assert str(Rank.TWO) == "Two", "2应该显示为Two"
        assert str(Rank.ACE) == "Ace", "A应该显示为Ace"
        assert Rank.TEN.short == "T", "10的简写应该是T"
        assert Rank.SEVEN.short == "7", "7的简写应该是7"
        assert Rank.QUEEN.display_name == "Queen", "Q应该显示为Queen"

    def test_from_str(self):
        """测试点数解析"""
        assert Rank.from_str(" ACE ") == Rank.ACE, "应该忽略大小写和空白"
        assert Rank.from_str("two") == Rank.TWO, "应该能解析two"
        assert Rank.from_str("Queen") == Rank.QUEEN, "应该能解析Queen"
        assert Rank.from_str("ten") == Rank.TEN, "应该能解析ten"
        assert Rank.from_str("T") == Rank.TEN, "应该能解析简写T"
        assert Rank.from_str("10") == Rank.TEN, "应该能解析数字10"
        assert Rank.from_str("k") == Rank.KING, "应该能解析小写简写"
        assert Rank.from_str("2") == Rank.TWO, "应该能解析数字2"

    def test_every_name_parses(self):
        """测试所有点数的名称都能被解析"""
        for rank in Rank:
            assert Rank.from_str(rank.display_name) == rank, f"{rank.display_name}应该能被解析"
            assert Rank.from_str(rank.display_name.upper()) == rank, f"{rank.display_name}大写应该能被解析"
            assert Rank.from_str(rank.short) == rank, f"{rank.short}应该能被解析"

    def test_from_str_invalid(self):
        """测试无效点数解析"""
        for bad in ["X", "one", "1", "11", "15", "", "ace of spades", "²", "٣", "１０"]:
            with pytest.raises(CardParseError) as exc_info:
                Rank.from_str(bad)
            assert exc_info.value.target == "Rank", "目标类型应该是Rank"
            assert exc_info.value.text == bad, "异常应该记录原始输入"
