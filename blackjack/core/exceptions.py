"""
二十一点游戏业务异常定义
区分配置错误、不变量被破坏以及终端输入失败
"""


class BlackjackError(Exception):
    """二十一点游戏基础异常类"""
    pass


class GameConfigError(BlackjackError):
    """游戏配置错误异常（如玩家数量超出范围）"""
    pass


class DeckExhaustedError(BlackjackError):
    """牌组已空却仍尝试发牌"""
    pass


class GameStateError(BlackjackError):
    """游戏状态错误异常"""
    pass


class TerminalInputError(BlackjackError):
    """终端按键读取失败（EOF、终端不可用等）"""
    pass
