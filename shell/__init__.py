"""交互模块 - 会话、偏好存储和输入历史"""
from .history import InputHistory
from .preferences import PreferenceStore
from .session import ChatSession, parse_plot_input, HELP_TEXT, NOT_A_COMMAND

__all__ = [
    'InputHistory', 'PreferenceStore', 'ChatSession',
    'parse_plot_input', 'HELP_TEXT', 'NOT_A_COMMAND'
]
