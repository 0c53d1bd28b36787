"""
pytest配置文件

提供各测试共用的fixture：
- 脚本化的终端输入输出（按预设顺序返回按键，记录所有输出）
- 按指定顺序发牌的牌组
"""

import random
from typing import Callable, Iterable, List

import pytest

from blackjack.core import Card, Deck, Player, Rank, Suit, TerminalInputError


class ScriptedIO:
    """按预设顺序返回按键的GameIO实现，按键用完后视为输入结束."""

    def __init__(self, keys: Iterable[str] = ()):
        self.keys: List[str] = list(keys)
        self.output: List[str] = []
        self.clear_count = 0

    def read_key(self) -> str:
        if not self.keys:
            raise TerminalInputError("Input closed")
        return self.keys.pop(0)

    def show(self, text: str) -> None:
        self.output.append(text)

    def clear(self) -> None:
        self.clear_count += 1

    @property
    def text(self) -> str:
        return "\n".join(self.output)


class NoShuffleRandom(random.Random):
    """洗牌不改变顺序的随机源，用于固定发牌顺序的测试."""

    def shuffle(self, x, *args, **kwargs):
        return None


def make_card(rank: Rank, suit: Suit = Suit.SPADE, face_up: bool = True) -> Card:
    return Card(suit, rank, face_up=face_up)


def make_player(name: str, *ranks: Rank, face_up: bool = True) -> Player:
    player = Player(name)
    for rank in ranks:
        player.hand.append(make_card(rank, face_up=face_up))
    return player


def stacked_deck(*ranks: Rank) -> Deck:
    """按发牌顺序构建牌组；花色轮流分配以保证每张牌不同."""
    suits = list(Suit)
    cards = [Card(suits[i % len(suits)], rank) for i, rank in enumerate(ranks)]
    return Deck.stacked(cards)


@pytest.fixture
def scripted_io() -> Callable[..., ScriptedIO]:
    """创建脚本化终端的工厂."""
    def _factory(*keys: str) -> ScriptedIO:
        return ScriptedIO(keys)
    return _factory


@pytest.fixture
def no_shuffle_rng() -> NoShuffleRandom:
    return NoShuffleRandom()
