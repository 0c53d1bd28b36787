"""二十一点CLI游戏界面.

这个模块提供会话循环：每局开始前清屏，结束后显示获胜者并询问是否再来一局。
"""

import logging
import random
import sys
from typing import Optional

import click

from blackjack.core import BlackjackError, TerminalInputError
from blackjack.controller import BlackjackController, GameConfiguration, GameIO
from .input_handler import TerminalIO
from .render import CLIRenderer, REPLAY_PROMPT


QUIT_KEYS = ('q', 'Q')


class BlackjackCLI:
    """二十一点CLI游戏界面.

    按顺序逐局进行，同一时间只有一局。
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        io: Optional[GameIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """初始化CLI游戏.

        Args:
            config: 游戏配置，默认单人游戏
            io: 终端输入输出，默认使用click终端
            logger: 日志记录器
        """
        self.config = config or GameConfiguration()
        self.io = io or TerminalIO()
        self.logger = logger or logging.getLogger(__name__)
        # 整个会话共用一个随机源，固定种子时整个会话可重现
        self.rng = random.Random(self.config.seed)

    def run(self) -> int:
        """运行会话循环.

        Returns:
            已完成的局数
        """
        rounds = 0

        while True:
            self.io.clear()

            controller = BlackjackController(
                self.config.num_players, self.io, rng=self.rng, logger=self.logger
            )
            result = controller.play_round()
            rounds += 1
            self.logger.debug(f"第 {rounds} 局结束")

            self.io.show(CLIRenderer.render_winners(result.to_summary()))

            self.io.show(REPLAY_PROMPT)
            try:
                key = self.io.read_key()
            except TerminalInputError:
                # 输入在两局之间结束，视为退出
                self.logger.debug("输入已结束，会话退出")
                break
            if key in QUIT_KEYS:
                break

        return rounds


@click.command()
@click.option('--players', '-p', type=int, default=1, show_default=True,
              help='Number of players at the table (1-4).')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducible shuffles.')
@click.option('--debug', is_flag=True, default=False,
              help='Enable debug logging.')
def main(players: int, seed: Optional[int], debug: bool) -> None:
    """Play Blackjack against the dealer."""
    try:
        config = GameConfiguration.create(num_players=players, seed=seed, debug=debug)
        logging.basicConfig(
            level=logging.DEBUG if config.debug else logging.INFO, format='%(message)s'
        )
        BlackjackCLI(config).run()
    except KeyboardInterrupt:
        click.echo("\nGame interrupted")
    except TerminalInputError as e:
        click.echo(f"Input error: {e}", err=True)
        sys.exit(1)
    except BlackjackError as e:
        click.echo(f"Game error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
