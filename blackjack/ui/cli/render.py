"""二十一点CLI渲染模块.

这个模块负责将一局结束后的快照渲染为命令行显示文本，
实现显示逻辑与核心游戏逻辑的分离。
"""

from blackjack.controller import PlayerSnapshot, RoundSummary


REPLAY_PROMPT = "Any key to start again, [Q]uit"
NO_WINNER_MESSAGE = "No one won"


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的快照数据。
    """

    @staticmethod
    def render_player(player: PlayerSnapshot) -> str:
        """渲染单个玩家.

        Args:
            player: 玩家快照

        Returns:
            如"Player 1: [Ace of Spades, King of Hearts], Sum: 21"
        """
        return f"{player.name}: [{', '.join(player.cards)}], Sum: {player.score}"

    @staticmethod
    def render_winners(summary: RoundSummary) -> str:
        """渲染获胜者.

        Args:
            summary: 本局结果摘要

        Returns:
            获胜者列表，无人获胜时为"No one won"
        """
        if not summary.winners:
            return NO_WINNER_MESSAGE

        winners = [p for p in summary.players if p.name in summary.winners]
        lines = ["Winners:"]
        for player in winners:
            marker = " (Blackjack)" if player.is_natural else ""
            lines.append(f"  {CLIRenderer.render_player(player)}{marker}")
        return "\n".join(lines)
