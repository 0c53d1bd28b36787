"""CLI渲染器单元测试.

测试CLI渲染器把结果快照转换为显示文本。
"""

import pytest

from blackjack.controller import PlayerSnapshot, RoundSummary
from blackjack.ui.cli.render import CLIRenderer, NO_WINNER_MESSAGE, REPLAY_PROMPT


def _summary(winners, dealer_score=18):
    dealer = PlayerSnapshot(
        name="Dealer", score=dealer_score,
        cards=["Ten of Hearts", "Eight of Clubs"],
    )
    players = [
        PlayerSnapshot(name="Player 1", score=21, cards=["Ace of Spades", "King of Diamonds"], is_natural=True),
        PlayerSnapshot(name="Player 2", score=19, cards=["Nine of Spades", "Ten of Clubs"]),
        PlayerSnapshot(name="Player 3", score=17, cards=["Seven of Hearts", "Ten of Spades"]),
    ]
    return RoundSummary(dealer=dealer, players=players, winners=winners)


@pytest.mark.unit
@pytest.mark.fast
class TestCLIRenderer:
    """CLI渲染器测试类."""

    def test_render_player(self):
        player = PlayerSnapshot(name="Dealer", score=10, cards=["Face Down", "King of Hearts"])
        assert CLIRenderer.render_player(player) == "Dealer: [Face Down, King of Hearts], Sum: 10"

    def test_render_no_winners(self):
        assert CLIRenderer.render_winners(_summary([])) == NO_WINNER_MESSAGE
        assert NO_WINNER_MESSAGE == "No one won"

    def test_render_winners_in_seat_order(self):
        text = CLIRenderer.render_winners(_summary(["Player 1", "Player 2"]))
        lines = text.splitlines()

        assert lines[0] == "Winners:"
        assert lines[1] == "  Player 1: [Ace of Spades, King of Diamonds], Sum: 21 (Blackjack)"
        assert lines[2] == "  Player 2: [Nine of Spades, Ten of Clubs], Sum: 19"
        assert "Player 3" not in text

    def test_replay_prompt(self):
        assert REPLAY_PROMPT == "Any key to start again, [Q]uit"
