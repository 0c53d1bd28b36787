"""二十一点CLI用户界面模块.

这个包提供命令行界面的二十一点游戏实现，包括：
- CLI会话循环和入口命令
- 渲染器（显示逻辑）
- 输入处理器（按键读取和清屏）
"""

from .cli_game import BlackjackCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler, TerminalIO

__all__ = [
    'BlackjackCLI',
    'main',
    'CLIRenderer',
    'CLIInputHandler',
    'TerminalIO'
]
