"""
二十一点游戏控制器.

这个模块驱动一局完整的二十一点：发牌、玩家依次要牌/停牌、庄家行动和结算。
控制器采用依赖注入设计，随机数生成器、终端输入输出和日志记录器都由调用方传入，
便于在测试中替换。
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..core import (
    Deck, Player, GamePhase, PlayerAction, GameStateError,
    BLACKJACK, DEALER_NAME, dealer_should_hit, settle, validate_player_count
)
from .dto import PlayerSnapshot, RoundSummary


HIT_OR_STAND_PROMPT = "[H]it or [S]tand"
BUST_MESSAGE = "Bust"
DEALER_PLAYING_MESSAGE = "Dealer is playing"
DEALER_HIT_MESSAGE = "Dealer will hit"
DEALER_BUST_MESSAGE = "Dealer went bust"


class GameIO(Protocol):
    """Protocol defining the terminal interface required by the controller.

    The controller never touches the terminal directly; it reads single keys
    and writes lines of text through this interface.
    """

    def read_key(self) -> str:
        """Block until one key is pressed and return it."""
        ...

    def show(self, text: str) -> None:
        """Write one line of text."""
        ...

    def clear(self) -> None:
        """Clear the display."""
        ...


@dataclass(frozen=True)
class RoundResult:
    """一局结束结果.

    Attributes:
        winners: 获胜玩家，保持座位顺序
        players: 本局全部玩家
        dealer: 庄家
    """

    winners: List[Player]
    players: List[Player]
    dealer: Player

    @property
    def has_winners(self) -> bool:
        return bool(self.winners)

    @property
    def dealer_bust(self) -> bool:
        return self.dealer.is_bust

    def to_summary(self) -> RoundSummary:
        """转换为供UI层使用的快照."""
        return RoundSummary(
            dealer=PlayerSnapshot.from_player(self.dealer),
            players=[PlayerSnapshot.from_player(p) for p in self.players],
            winners=[p.name for p in self.winners],
            dealer_bust=self.dealer_bust,
        )


class BlackjackController:
    """二十一点游戏控制器.

    每个控制器实例只负责一局：
    DEALING -> PLAYER_TURNS -> DEALER_TURN -> SETTLEMENT -> DONE。
    牌组和玩家都归本局所有，本局结束后随控制器一起丢弃。
    """

    def __init__(
        self,
        num_players: int,
        io: GameIO,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
        deck: Optional[Deck] = None
    ):
        """初始化控制器.

        Args:
            num_players: 玩家数量，必须在1到4之间
            io: 终端输入输出
            rng: 洗牌用的随机数生成器，为None时使用新的随机源
            logger: 日志记录器，如果为None则创建默认记录器
            deck: 预先排好的牌组，提供时不再洗牌（用于测试和回放）

        Raises:
            GameConfigError: 玩家数量超出范围
        """
        validate_player_count(num_players)

        self._num_players = num_players
        self._io = io
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger(__name__)
        self._deck = deck
        self._dealer: Optional[Player] = None
        self._players: List[Player] = []
        self._phase: Optional[GamePhase] = None

    @property
    def phase(self) -> Optional[GamePhase]:
        """当前阶段，尚未开始时为None."""
        return self._phase

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def dealer(self) -> Optional[Player]:
        return self._dealer

    @property
    def deck(self) -> Optional[Deck]:
        return self._deck

    def play_round(self) -> RoundResult:
        """进行一局完整的游戏.

        Returns:
            本局结果

        Raises:
            GameStateError: 本控制器已经进行过一局
            DeckExhaustedError: 牌组被抽空
            TerminalInputError: 读取按键失败
        """
        if self._phase is not None:
            raise GameStateError("每个控制器只能进行一局游戏")

        self._setup()
        self._deal_initial_cards()
        self._play_player_turns()
        self._play_dealer_turn()
        winners = self._settle()

        self._transition(GamePhase.DONE)
        return RoundResult(winners=winners, players=list(self._players), dealer=self._dealer)

    def _transition(self, phase: GamePhase) -> None:
        self._logger.debug(f"阶段转换: {self._phase.name if self._phase else 'START'} -> {phase.name}")
        self._phase = phase

    def _setup(self) -> None:
        """创建并洗好牌组，创建庄家和玩家."""
        self._transition(GamePhase.DEALING)

        if self._deck is None:
            self._deck = Deck(self._rng)
            self._deck.shuffle()

        self._dealer = Player(DEALER_NAME)
        self._players = [Player(f"Player {i + 1}") for i in range(self._num_players)]
        self._logger.debug(f"新的一局: {self._num_players}名玩家, 牌组剩余{len(self._deck)}张")

    def _deal_initial_cards(self) -> None:
        """每名玩家两张明牌；庄家第一张暗牌、第二张明牌."""
        for player in self._players:
            player.draw_from(self._deck, True)
        self._dealer.draw_from(self._deck, False)

        for player in self._players:
            player.draw_from(self._deck, True)
        self._dealer.draw_from(self._deck, True)

        for player in self._players:
            self._logger.debug(f"发牌完成 {player.display()}")

    def _play_player_turns(self) -> None:
        self._transition(GamePhase.PLAYER_TURNS)
        for player in self._players:
            self._play_player_turn(player)

    def _play_player_turn(self, player: Player) -> None:
        """处理单个玩家的要牌/停牌循环.

        爆牌或恰好21点时自动结束；无法识别的按键会重新提示。
        开局即为黑杰克的玩家同样会被提示。
        """
        self._io.show(self._dealer.display())

        while True:
            self._io.show(player.display())
            self._io.show(HIT_OR_STAND_PROMPT)
            key = self._io.read_key()
            action = PlayerAction.from_key(key)

            if action is None:
                self._logger.debug(f"忽略无效按键: {key!r}")
                continue

            if action == PlayerAction.STAND:
                self._logger.debug(f"{player.name} 停牌, 点数 {player.score}")
                return

            card = player.draw_from(self._deck, True)
            self._logger.debug(f"{player.name} 要牌: {card.display()}, 点数 {player.score}")

            if player.score > BLACKJACK:
                self._io.show(player.display())
                self._io.show(BUST_MESSAGE)
                return

            if player.score == BLACKJACK:
                self._io.show(player.display())
                return

    def _play_dealer_turn(self) -> None:
        """翻开庄家暗牌，16点及以下继续要牌."""
        self._transition(GamePhase.DEALER_TURN)
        self._io.show(DEALER_PLAYING_MESSAGE)

        self._dealer.reveal_all()
        self._io.show(self._dealer.display())

        while dealer_should_hit(self._dealer.score):
            self._io.show(DEALER_HIT_MESSAGE)
            self._dealer.draw_from(self._deck, True)
            self._io.show(self._dealer.display())

        if self._dealer.is_bust:
            self._io.show(DEALER_BUST_MESSAGE)

    def _settle(self) -> List[Player]:
        self._transition(GamePhase.SETTLEMENT)
        winners = settle(self._players, self._dealer)
        self._logger.debug(
            f"结算: 庄家 {self._dealer.score}, 获胜者 {[p.name for p in winners] or '无'}"
        )
        return winners


def play_blackjack(
    num_players: int,
    io: GameIO,
    rng: Optional[random.Random] = None,
    logger: Optional[logging.Logger] = None
) -> RoundResult:
    """进行一局二十一点并返回结果.

    Raises:
        GameConfigError: 玩家数量超出范围
    """
    controller = BlackjackController(num_players, io, rng=rng, logger=logger)
    return controller.play_round()
