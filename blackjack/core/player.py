"""
二十一点玩家（含庄家）的手牌管理.

玩家只保存名称和手牌；点数每次都从手牌重新计算.
"""

from dataclasses import dataclass, field
from typing import List

from .cards import Card, Deck
from . import rules


@dataclass
class Player:
    """
    二十一点玩家类.

    手牌按发牌顺序排列，一局之内只增不减.
    """

    name: str
    hand: List[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        """
        验证玩家数据的有效性.

        Raises:
            ValueError: 当玩家名称为空时
        """
        if not self.name:
            raise ValueError("玩家名称不能为空")

    def draw_from(self, deck: Deck, face_up: bool) -> Card:
        """
        从牌组摸一张牌加入手牌.

        Args:
            deck: 牌组
            face_up: 摸到的牌是否正面朝上

        Returns:
            Card: 摸到的牌

        Raises:
            DeckExhaustedError: 牌组已空
        """
        card = deck.draw()
        card.face_up = face_up
        self.hand.append(card)
        return card

    @property
    def score(self) -> int:
        """当前点数（只计正面朝上的牌）."""
        return rules.hand_score(self.hand)

    def get_sum(self) -> int:
        return self.score

    @property
    def is_bust(self) -> bool:
        return rules.is_bust(self.score)

    @property
    def is_natural(self) -> bool:
        return rules.is_natural(self.hand)

    def reveal_all(self) -> None:
        """把所有背面朝上的牌翻开."""
        for card in self.hand:
            if not card.face_up:
                card.flip()

    def display(self) -> str:
        """
        返回玩家的显示文本.

        Returns:
            str: 如"Player 1: [Ace of Spades, King of Hearts], Sum: 21"
        """
        return f"{self.name}: {self.hand!r}, Sum: {self.score}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', cards={len(self.hand)}, score={self.score})"
