"""二十一点CLI输入处理模块.

这个模块负责读取单个按键和清屏，是核心逻辑与终端之间唯一的接触点。
交互式终端使用click读取按键；非交互式模式（管道输入）逐字符读取stdin。
"""

import sys

import click

from blackjack.core import TerminalInputError


# 管道输入中按行分隔的按键，换行本身不算按键
LINE_BREAKS = ("\n", "\r")


class CLIInputHandler:
    """CLI输入处理器.

    终端读取失败统一转换为TerminalInputError，由会话循环负责优雅退出。
    """

    @staticmethod
    def read_key() -> str:
        """读取一个按键.

        Returns:
            按下的键

        Raises:
            TerminalInputError: 输入结束或终端不可用
            KeyboardInterrupt: 用户按下Ctrl-C
        """
        if not sys.stdin.isatty():
            return CLIInputHandler._read_piped_key()

        try:
            return click.getchar()
        except EOFError as e:
            raise TerminalInputError("Input closed") from e
        except OSError as e:
            raise TerminalInputError(f"Cannot read from terminal: {e}") from e

    @staticmethod
    def _read_piped_key() -> str:
        """非交互式模式，从stdin读取下一个字符（跳过换行符）."""
        while True:
            try:
                ch = sys.stdin.read(1)
            except OSError as e:
                raise TerminalInputError(f"Cannot read from stdin: {e}") from e

            if not ch:
                raise TerminalInputError("Input closed")
            if ch in LINE_BREAKS:
                continue
            return ch

    @staticmethod
    def clear_screen() -> None:
        """清空屏幕（非交互式模式下不输出控制字符）."""
        if sys.stdout.isatty():
            click.clear()


class TerminalIO:
    """基于click的终端输入输出，实现控制器需要的GameIO接口."""

    def read_key(self) -> str:
        return CLIInputHandler.read_key()

    def show(self, text: str) -> None:
        click.echo(text)

    def clear(self) -> None:
        CLIInputHandler.clear_screen()
