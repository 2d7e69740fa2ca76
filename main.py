"""主程序入口 - 表达式求值、函数绘图和交互式会话"""
import argparse
import logging
import os
import sys

from config.config import *
from core import CalcError, evaluate_expression
from plotting import DomainSampler, PixelTransform, PlotRenderer, split_segments
from shell import ChatSession, InputHistory, PreferenceStore
from utils.formatting import format_result

# 设置日志
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_expression(expr):
    """求值单个表达式并打印结果"""
    try:
        result = evaluate_expression(expr)
    except CalcError as e:
        logger.error(f"Failed to evaluate {expr!r}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(format_result(result))
    return 0


def run_plot(expr, args):
    """采样并渲染一条曲线"""
    sampler = DomainSampler()
    try:
        points = sampler.sample(expr, (args.x_min, args.x_max), args.width, args.height)
    except (CalcError, ValueError) as e:
        logger.error(f"Failed to plot {expr!r}: {e}")
        print(f"Error plotting: {e}", file=sys.stderr)
        return 1

    segments = split_segments(points)
    if not segments:
        print("Error plotting: no finite values in range", file=sys.stderr)
        return 1

    transform = PixelTransform(args.x_min, args.x_max, args.width, args.height)
    renderer = PlotRenderer(theme=args.theme)
    output_path = renderer.render(expr, points, transform, args.output)
    print(f"plot y = {expr} -> {output_path} ({len(segments)} segments)")
    return 0


def _readline_history():
    """readline 可用时由它提供上下键浏览，历史只由会话写入"""
    try:
        import readline
    except ImportError:
        logger.warning("readline is not available, input history navigation is disabled")
        return InputHistory()
    readline.set_auto_history(False)
    return InputHistory(backend=readline)


def run_interactive(args):
    """交互式聊天循环"""
    preferences = PreferenceStore(args.prefs_path)
    session = ChatSession(
        preferences=preferences,
        history=_readline_history(),
        plot_dir=os.path.dirname(args.output) or PLOT_CONFIG['output_dir'],
        plot_config={
            'x_min': args.x_min, 'x_max': args.x_max,
            'width': args.width, 'height': args.height,
        },
    )
    if args.theme:
        session.set_theme(args.theme)

    for line in session.greet():
        print(f"calc> {line}")

    while True:
        try:
            text = input(SHELL_CONFIG['prompt'])
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if text.strip().lower() in ('exit', 'quit'):
            break
        reply = session.submit(text)
        if reply is not None:
            for line in reply.split('\n'):
                print(f"calc> {line}")
    return 0


def main(args):
    validate_config()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.expr is not None:
        return run_expression(args.expr)
    if args.plot is not None:
        return run_plot(args.plot, args)
    return run_interactive(args)


def build_parser():
    parser = argparse.ArgumentParser(description="RetroCalc - terminal calculator and function plotter")
    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Plot an expression in x and exit"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=os.path.join(PLOT_CONFIG['output_dir'], "plot.png"),
        help="Path of the PNG written by --plot"
    )
    parser.add_argument(
        "--x_min",
        type=float,
        default=PLOT_CONFIG['x_min'],
        help="Left end of the plotted x range"
    )
    parser.add_argument(
        "--x_max",
        type=float,
        default=PLOT_CONFIG['x_max'],
        help="Right end of the plotted x range"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=PLOT_CONFIG['width'],
        help="Canvas width in pixels (one sample per pixel)"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=PLOT_CONFIG['height'],
        help="Canvas height in pixels"
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=["green", "amber"],
        default=None,
        help="Colour theme"
    )
    parser.add_argument(
        "--prefs_path",
        type=str,
        default=PREFERENCE_CONFIG['path'],
        help="Preference file used by the interactive session"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def _cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    _cli()
