"""
游戏相关枚举定义模块.

包含二十一点游戏中使用的枚举类型：花色、点数、游戏阶段和玩家行动.
"""

from enum import Enum, IntEnum, auto
from typing import Optional


class Suit(Enum):
    """
    扑克牌花色枚举.

    声明顺序即牌组构建顺序：黑桃、方块、梅花、红桃.
    """

    SPADE = "Spade"        # 黑桃
    DIAMOND = "Diamond"    # 方块
    CLUB = "Club"          # 梅花
    HEART = "Heart"        # 红桃

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A最小、K最大，仅用于构建牌组的顺序；计分值见rules.card_value.
    """

    ACE = 1
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

    @property
    def display_name(self) -> str:
        """返回点数的显示名称，如"Ace"、"Ten"."""
        return self.name.title()

    def __str__(self) -> str:
        return self.display_name


class GamePhase(Enum):
    """一局游戏的阶段枚举."""

    DEALING = auto()       # 发牌
    PLAYER_TURNS = auto()  # 玩家依次行动
    DEALER_TURN = auto()   # 庄家行动
    SETTLEMENT = auto()    # 结算
    DONE = auto()          # 本局结束


class PlayerAction(Enum):
    """
    玩家行动类型枚举.

    值为对应的按键（不区分大小写）.
    """

    HIT = "h"      # 要牌
    STAND = "s"    # 停牌

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> Optional['PlayerAction']:
        """
        从单个按键解析玩家行动.

        Args:
            key: 读取到的按键字符

        Returns:
            对应的行动，无法识别的按键返回None
        """
        if not key:
            return None
        try:
            return cls(key.lower())
        except ValueError:
            return None
