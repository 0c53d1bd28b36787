"""
扑克牌相关的核心数据结构.

包含Card和Deck类，提供扑克牌的翻面、显示以及牌组的洗牌、发牌功能.
"""

import random
from typing import List, Optional

from .enums import Suit, Rank
from .exceptions import DeckExhaustedError


class Card:
    """
    表示一张扑克牌.

    花色和点数在创建后不可修改，唯一可变的状态是正反面标记face_up.
    相等性和哈希只依赖花色与点数.
    """

    __slots__ = ('_suit', '_rank', 'face_up')

    def __init__(self, suit: Suit, rank: Rank, face_up: bool = False):
        """
        创建一张牌.

        Args:
            suit: 花色
            rank: 点数
            face_up: 是否正面朝上，默认背面朝上

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
        if not isinstance(rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(rank)}")

        self._suit = suit
        self._rank = rank
        self.face_up = face_up

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    def flip(self) -> None:
        """翻面."""
        self.face_up = not self.face_up

    def display(self) -> str:
        """
        返回扑克牌的显示文本.

        Returns:
            str: 背面朝上时为"Face Down"，否则如"Ace of Spades"
        """
        if not self.face_up:
            return "Face Down"
        return f"{self._rank.display_name} of {self._suit.value}s"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        # 列表格式化时与显示文本一致，如 [Ace of Spades, Face Down]
        return self.display()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._suit == other._suit and self._rank == other._rank

    def __hash__(self) -> int:
        return hash((self._suit, self._rank))


class Deck:
    """
    表示一副52张的扑克牌.

    牌组顶部是列表末尾，发牌即从末尾弹出.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._reset_deck()

    @classmethod
    def stacked(cls, cards: List[Card], rng: Optional[random.Random] = None) -> 'Deck':
        """
        按指定顺序构建牌组（主要用于测试和回放）.

        Args:
            cards: 按发牌顺序排列的牌，第一张最先发出
            rng: 随机数生成器

        Returns:
            Deck: 未洗牌的牌组
        """
        deck = cls(rng)
        deck._cards = list(reversed(cards))
        return deck

    def _reset_deck(self) -> None:
        """
        重置牌组为完整的52张牌，全部背面朝上.

        构建顺序固定：黑桃和方块从A到K，梅花和红桃从K到A.
        """
        self._cards = []
        for suit in Suit:
            ranks = list(Rank)
            if suit in (Suit.CLUB, Suit.HEART):
                ranks.reverse()
            self._cards.extend(Card(suit, rank) for rank in ranks)

    def shuffle(self) -> None:
        """洗牌."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """
        发一张牌.

        Returns:
            Card: 牌组顶部的牌

        Raises:
            DeckExhaustedError: 当牌组为空时
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        return self._cards.pop()

    @property
    def cards_remaining(self) -> int:
        """剩余牌数."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(list(self._cards))

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)}, rng={self._rng})"
