"""聊天式计算器会话 - 命令分发、表达式求值和绘图"""
import logging
import os
import re

from config.config import PLOT_CONFIG, PREFERENCE_CONFIG, SHELL_CONFIG, THEME_CONFIG
from core import CalcError, evaluate_expression
from plotting import DomainSampler, PixelTransform, PlotRenderer, split_segments
from shell.history import InputHistory
from utils.formatting import format_result

logger = logging.getLogger(__name__)

HELP_TEXT = '\n'.join([
    'RetroCalc - commands:',
    '  help       - show this message',
    '  clear      - clear screen',
    '  glitch on  - enable visual glitches',
    '  glitch off - disable visual glitches',
    '  scan on    - enable scan sweep',
    '  scan off   - disable scan sweep',
    '',
    'Math:',
    '  Operators: +  -  *  /  ^  ( )',
    '  Notes: ^ is exponent and is right-associative; unary minus is supported.',
    '  Constants: pi ~ 3.14159, e ~ 2.71828',
    '',
    'Examples:',
    '  2*(3+4)^2               -> 98',
    '  3^3^2                   -> 3^(3^2) = 3^9 = 19683',
    '  -4*(2+pi)               -> negative times parentheses',
    '  (2.5+0.5)*8/5           -> decimals and precedence',
    '  (1+2+3+4)/4             -> average of 1..4',
    '  2^(-3)                  -> 0.125 (negative exponent)',
    '  (2^3)^2 vs 2^(3^2)      -> 64 vs 512 (associativity)',
    '  10/(2*(3-1))            -> nested parentheses',
    '  2*pi*3                  -> circle circumference for r=3',
    '  e^(1)                   -> Euler\'s number',
    '  (3 + -2) * 5            -> unary minus in the middle',
    '',
    'Plotting:',
    '  Use x as the variable. Forms accepted:',
    '    plot y=2*x+1',
    '    y=0.5*x^2 - 3',
    '    28*x+4',
    '  Try: plot y=28*x+4',
    f'  Range: x in [{PLOT_CONFIG["x_min"]:g}, {PLOT_CONFIG["x_max"]:g}]',
    '',
    'Theme:',
    '  theme green  - green phosphor (default)',
    '  theme amber  - amber phosphor',
])

PLOT_USAGE = 'Plot usage: plot y=2*x+1  |  y=x^2-3  |  2*x^2+1'

# handle_command 的返回值：不是命令，按表达式求值
NOT_A_COMMAND = object()

_PLOT_PREFIX = re.compile(r'^plot\s+', re.IGNORECASE)
_Y_PREFIX = re.compile(r'^y\s*=\s*', re.IGNORECASE)
_PLOT_CHARS = re.compile(r'[()x\d+\-*/^.pie]', re.IGNORECASE)


def parse_plot_input(text):
    """
    接受 'plot y=...'、'plot ...'、'y=...' 或直接含x的表达式
    Returns:
        表达式字符串；不是x的函数时返回None
    """
    expr = text.strip()
    expr = _PLOT_PREFIX.sub('', expr, count=1)
    expr = _Y_PREFIX.sub('', expr, count=1)
    if not _PLOT_CHARS.search(expr) or not re.search('x', expr, re.IGNORECASE):
        return None
    return expr


class ChatSession:
    """
    一次交互会话：对话记录、输入历史和显示偏好
    preferences 为 None 时不做持久化
    """

    def __init__(self, preferences=None, plot_dir=None, plot_config=None, history=None):
        self.preferences = preferences
        self.plot_config = dict(PLOT_CONFIG, **(plot_config or {}))
        self.plot_dir = plot_dir or self.plot_config['output_dir']
        self.messages = []  # [(role, text)]
        self.history = history if history is not None else InputHistory()
        self.sampler = DomainSampler()
        self._plot_count = 0

        self.theme = self._load_pref(PREFERENCE_CONFIG['theme_key'])
        if self.theme not in THEME_CONFIG or self.theme == 'default':
            self.theme = THEME_CONFIG['default']
        self.glitch_enabled = self._load_pref(PREFERENCE_CONFIG['glitch_key']) == 'on'
        self.scan_enabled = self._load_pref(PREFERENCE_CONFIG['scan_key']) == 'on'

    def _load_pref(self, key):
        if self.preferences is None:
            return PREFERENCE_CONFIG['defaults'][key]
        return self.preferences.get_or_default(key)

    def _save_pref(self, key, value):
        if self.preferences is not None:
            self.preferences.set(key, value)

    def append_message(self, role, text):
        self.messages.append((role, text))

    def greet(self):
        for line in SHELL_CONFIG['greeting']:
            self.append_message('assistant', line)
        return list(SHELL_CONFIG['greeting'])

    def clear(self):
        self.messages.clear()

    # ---------- 命令 ----------

    def set_theme(self, theme):
        self.theme = theme
        self._save_pref(PREFERENCE_CONFIG['theme_key'], theme)
        return f'Theme: {theme.upper()}'

    def set_glitch(self, enabled):
        self.glitch_enabled = enabled
        self._save_pref(PREFERENCE_CONFIG['glitch_key'], 'on' if enabled else 'off')
        return 'Glitch: ON' if enabled else 'Glitch: OFF'

    def set_scan(self, enabled):
        self.scan_enabled = enabled
        self._save_pref(PREFERENCE_CONFIG['scan_key'], 'on' if enabled else 'off')
        return 'Scan sweep: ON' if enabled else 'Scan sweep: OFF'

    def handle_command(self, text):
        """
        Returns:
            回复文本；None 表示无需回复（clear / 绘图成功前已记录）；
            NOT_A_COMMAND 表示应按普通表达式求值
        """
        c = text.strip().lower()
        if c in ('help', '?'):
            return HELP_TEXT
        if c in ('clear', 'cls'):
            self.clear()
            return None
        if c == 'glitch on':
            return self.set_glitch(True)
        if c == 'glitch off':
            return self.set_glitch(False)
        if c == 'scan on':
            return self.set_scan(True)
        if c == 'scan off':
            return self.set_scan(False)
        if c == 'theme amber':
            return self.set_theme('amber')
        if c == 'theme green':
            return self.set_theme('green')
        if c.startswith('plot ') or re.match(r'^y\s*=', c) or 'x' in c:
            expr = parse_plot_input(text)
            if not expr:
                return PLOT_USAGE
            return self.plot(expr)
        return NOT_A_COMMAND

    # ---------- 求值与绘图 ----------

    def plot(self, expr):
        cfg = self.plot_config
        try:
            points = self.sampler.sample(
                expr, (cfg['x_min'], cfg['x_max']), cfg['width'], cfg['height']
            )
        except (CalcError, ValueError) as e:
            logger.warning(f"Plot failed for {expr!r}: {e}")
            return f'Error plotting: {e}'

        if not split_segments(points):
            return 'Error plotting: no finite values in range'

        transform = PixelTransform(cfg['x_min'], cfg['x_max'], cfg['width'], cfg['height'])
        self._plot_count += 1
        output_path = os.path.join(self.plot_dir, f'plot_{self._plot_count:03d}.png')
        renderer = PlotRenderer(theme=self.theme, grid_step=cfg['grid_step'], dpi=cfg['dpi'])
        renderer.render(expr, points, transform, output_path)
        return f'plot y = {expr} -> {output_path}'

    def evaluate(self, text):
        try:
            result = evaluate_expression(text)
        except CalcError as e:
            logger.debug(f"Evaluation failed for {text!r}: {e}")
            return f'Error: {e}'
        return format_result(result)

    def submit(self, text):
        """
        处理一行用户输入
        Returns:
            回复文本，或 None（空输入 / clear）
        """
        if not text.strip():
            return None
        self.history.push(text)
        self.append_message('user', text)

        reply = self.handle_command(text)
        if reply is None:
            return None
        if reply is NOT_A_COMMAND:
            reply = self.evaluate(text)

        self.append_message('assistant', reply)
        return reply
