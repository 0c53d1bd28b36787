"""CLI输入处理器单元测试.

测试按键读取（交互式与管道输入）、清屏以及终端错误的转换。
"""

import io
from unittest.mock import patch, MagicMock

import pytest

from blackjack.core import TerminalInputError
from blackjack.ui.cli.input_handler import CLIInputHandler, TerminalIO


def _tty():
    stream = MagicMock()
    stream.isatty.return_value = True
    return stream


@pytest.mark.unit
@pytest.mark.fast
class TestCLIInputHandler:
    """CLI输入处理器测试类."""

    def test_piped_input_skips_line_breaks(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', io.StringIO("\r\n\nh")):
            assert CLIInputHandler.read_key() == "h"

    def test_piped_space_is_a_key(self):
        """空格也是一个按键（例如“任意键再来一局”）。"""
        with patch('blackjack.ui.cli.input_handler.sys.stdin', io.StringIO(" \nq")):
            keys = [CLIInputHandler.read_key() for _ in range(2)]
        assert keys == [" ", "q"]

    def test_piped_input_reads_one_key_at_a_time(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', io.StringIO("hs\nq\n")):
            keys = [CLIInputHandler.read_key() for _ in range(3)]
        assert keys == ["h", "s", "q"]

    def test_piped_input_eof(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', io.StringIO("\n")):
            with pytest.raises(TerminalInputError):
                CLIInputHandler.read_key()

    def test_interactive_uses_getchar(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', _tty()), \
                patch('blackjack.ui.cli.input_handler.click.getchar', return_value="H") as getchar:
            assert CLIInputHandler.read_key() == "H"
        getchar.assert_called_once()

    @pytest.mark.parametrize("error", [EOFError(), OSError("no tty")])
    def test_interactive_errors_become_terminal_input_error(self, error):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', _tty()), \
                patch('blackjack.ui.cli.input_handler.click.getchar', side_effect=error):
            with pytest.raises(TerminalInputError):
                CLIInputHandler.read_key()

    def test_keyboard_interrupt_propagates(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdin', _tty()), \
                patch('blackjack.ui.cli.input_handler.click.getchar', side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                CLIInputHandler.read_key()

    def test_clear_screen_on_terminal(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdout', _tty()), \
                patch('blackjack.ui.cli.input_handler.click.clear') as clear:
            CLIInputHandler.clear_screen()
        clear.assert_called_once()

    def test_clear_screen_skipped_when_piped(self):
        with patch('blackjack.ui.cli.input_handler.sys.stdout', io.StringIO()), \
                patch('blackjack.ui.cli.input_handler.click.clear') as clear:
            CLIInputHandler.clear_screen()
        clear.assert_not_called()


@pytest.mark.unit
@pytest.mark.fast
class TestTerminalIO:
    """终端输入输出测试类."""

    def test_show_echoes_line(self, capsys):
        TerminalIO().show("No one won")
        assert capsys.readouterr().out == "No one won\n"

    def test_read_key_delegates(self):
        with patch.object(CLIInputHandler, 'read_key', return_value="s"):
            assert TerminalIO().read_key() == "s"

    def test_clear_delegates(self):
        with patch.object(CLIInputHandler, 'clear_screen') as clear:
            TerminalIO().clear()
        clear.assert_called_once()
