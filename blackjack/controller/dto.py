"""数据传输对象定义.

这个模块定义了控制器与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
"""

from typing import List, Optional

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field, ValidationError

from blackjack.core import Player, GameConfigError, MIN_PLAYERS, MAX_PLAYERS


@pydantic_dataclass
class PlayerSnapshot:
    """玩家状态快照.

    包含玩家在某个时刻的手牌显示文本和点数。
    """
    name: str = Field(..., min_length=1, description="玩家名称")
    score: int = Field(..., ge=0, description="正面朝上的牌的点数")
    cards: List[str] = Field(default_factory=list, description="手牌显示文本，背面朝上为Face Down")
    is_bust: bool = Field(False, description="是否爆牌")
    is_natural: bool = Field(False, description="是否为黑杰克")

    @classmethod
    def from_player(cls, player: Player) -> 'PlayerSnapshot':
        return cls(
            name=player.name,
            cards=[card.display() for card in player.hand],
            score=player.score,
            is_bust=player.is_bust,
            is_natural=player.is_natural,
        )


@pydantic_dataclass
class RoundSummary:
    """一局结束后的结果摘要.

    供渲染器显示最终牌桌和获胜者。
    """
    dealer: PlayerSnapshot = Field(..., description="庄家快照")
    players: List[PlayerSnapshot] = Field(..., description="按座位顺序排列的玩家快照")
    winners: List[str] = Field(default_factory=list, description="获胜玩家名称，保持座位顺序")
    dealer_bust: bool = Field(False, description="庄家是否爆牌")


@pydantic_dataclass
class GameConfiguration:
    """游戏配置.

    包含一次游戏会话的基本配置参数。
    """
    num_players: int = Field(1, ge=MIN_PLAYERS, le=MAX_PLAYERS, description="玩家数量")
    seed: Optional[int] = Field(None, description="随机种子，用于可重现的洗牌")
    debug: bool = Field(False, description="是否输出调试日志")

    @classmethod
    def create(cls, **kwargs) -> 'GameConfiguration':
        """创建配置，把校验失败统一转换为GameConfigError.

        Raises:
            GameConfigError: 配置参数无效
        """
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise GameConfigError(f"Invalid game configuration: {e}") from e
