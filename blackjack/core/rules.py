"""
二十一点计分与结算规则.

所有函数都是纯函数：分数只从当前正面朝上的牌计算，从不缓存.
"""

from typing import Iterable, List, TYPE_CHECKING

from .cards import Card
from .enums import Rank
from .exceptions import GameConfigError

if TYPE_CHECKING:
    from .player import Player


BLACKJACK = 21
DEALER_STAND_THRESHOLD = 17
MIN_PLAYERS = 1
MAX_PLAYERS = 4
DEALER_NAME = "Dealer"

# A先按11计，超过21时再逐张降为1
_SOFT_ACE_REDUCTION = 10

_CARD_VALUES = {
    Rank.ACE: 11,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


def card_value(rank: Rank) -> int:
    """返回点数的计分值（A按11计）."""
    return _CARD_VALUES[rank]


def hand_score(cards: Iterable[Card]) -> int:
    """
    计算一手牌的点数.

    只统计正面朝上的牌。A先按11计，总数超过21时把仍按11计的A逐张降为1.

    Args:
        cards: 手牌

    Returns:
        int: 手牌点数
    """
    score = 0
    aces = 0

    for card in cards:
        if not card.face_up:
            continue
        score += card_value(card.rank)
        if card.rank == Rank.ACE:
            aces += 1

    while score > BLACKJACK and aces > 0:
        score -= _SOFT_ACE_REDUCTION
        aces -= 1

    return score


def is_natural(cards: List[Card]) -> bool:
    """两张牌且点数为21即为"黑杰克"."""
    return len(cards) == 2 and hand_score(cards) == BLACKJACK


def is_bust(score: int) -> bool:
    return score > BLACKJACK


def dealer_should_hit(score: int) -> bool:
    """庄家16点及以下必须要牌，17点及以上停牌（软17不特殊处理）."""
    return score < DEALER_STAND_THRESHOLD


def is_winner(player: 'Player', dealer_score: int) -> bool:
    """
    判断玩家是否赢下本局.

    黑杰克直接获胜（包括庄家也是黑杰克的情况）；
    否则玩家未爆牌，且点数高于庄家或庄家爆牌.

    Args:
        player: 玩家
        dealer_score: 庄家最终点数

    Returns:
        bool: 玩家是否获胜
    """
    score = player.score
    if is_natural(player.hand):
        return True
    return score <= BLACKJACK and (score > dealer_score or is_bust(dealer_score))


def settle(players: List['Player'], dealer: 'Player') -> List['Player']:
    """
    结算本局，返回获胜玩家.

    Args:
        players: 按座位顺序排列的玩家
        dealer: 庄家

    Returns:
        List[Player]: 获胜玩家，保持原有顺序；庄家永远不在其中
    """
    dealer_score = dealer.score
    return [player for player in players if is_winner(player, dealer_score)]


def validate_player_count(num_players: int) -> None:
    """
    校验玩家数量.

    Raises:
        GameConfigError: 玩家数量不在[1, 4]范围内
    """
    if num_players < MIN_PLAYERS:
        raise GameConfigError(f"Must have at least {MIN_PLAYERS} player")
    if num_players > MAX_PLAYERS:
        raise GameConfigError(f"Cannot have more than {MAX_PLAYERS} players")
