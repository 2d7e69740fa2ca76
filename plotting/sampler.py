"""plotting/sampler.py - 在x区间上采样函数，生成像素坐标点"""
from typing import NamedTuple, Union
import logging

import numpy as np
import pandas as pd

from config.config import PLOT_CONFIG
from core import parse_expression, evaluate_expression, RPNEvaluator

logger = logging.getLogger(__name__)


class _Break:
    """路径断点：该处函数值非有限"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'BREAK'

    def __reduce__(self):
        return (_Break, ())


BREAK = _Break()


class SamplePoint(NamedTuple):
    domain_x: float
    pixel_x: float
    pixel_y: Union[float, _Break]

    @property
    def is_break(self):
        return self.pixel_y is BREAK


class PixelTransform:
    """
    定义域 → 像素的仿射变换
    y定义域垂直居中，并与画布宽高比一致
    """

    def __init__(self, x_min, x_max, width, height):
        if x_max <= x_min:
            raise ValueError(f"Empty domain: x_min={x_min}, x_max={x_max}")
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.width = width
        self.height = height

        x_range = self.x_max - self.x_min
        self.y_min = -((height / width) * x_range) / 2
        self.y_max = -self.y_min

    def x_to_px(self, x):
        return (x - self.x_min) * self.width / (self.x_max - self.x_min)

    def y_to_px(self, y):
        return self.height - ((y - self.y_min) * self.height / (self.y_max - self.y_min))


class DomainSampler:
    """对一个表达式在 [x_min, x_max] 上等距采样"""

    def __init__(self, reuse_parse=True):
        # reuse_parse=False 时每个点都重新走完整流水线
        self.reuse_parse = reuse_parse

    def sample(self, expr, domain, pixel_width, pixel_height=None):
        """
        Args:
            expr: 表达式字符串（使用变量x）
            domain: (x_min, x_max) 或 {'x_min': ..., 'x_max': ...}
            pixel_width: 画布宽度，同时也是采样点数（>= 2）
            pixel_height: 画布高度，默认取 PLOT_CONFIG
        Returns:
            SamplePoint 列表
        Raises:
            LexError / ExpressionSyntaxError / EvalError: 表达式结构错误时在产生任何点之前抛出
        """
        if pixel_width < 2:
            raise ValueError(f"pixel_width must be >= 2, got {pixel_width}")
        if pixel_height is None:
            pixel_height = PLOT_CONFIG['height']

        x_min, x_max = _unpack_domain(domain)
        transform = PixelTransform(x_min, x_max, pixel_width, pixel_height)

        # 先在代表点上探测一次，结构错误直接抛出
        rpn = parse_expression(expr)
        RPNEvaluator.evaluate(rpn, {'x': x_min})

        step = (x_max - x_min) / (pixel_width - 1)
        xs = x_min + np.arange(pixel_width) * step
        xs[-1] = x_max

        if self.reuse_parse:
            ys = RPNEvaluator.evaluate(rpn, {'x': xs})
        else:
            ys = np.array([evaluate_expression(expr, {'x': float(x)}) for x in xs])

        points = []
        for x, y in zip(xs, ys):
            px = float(transform.x_to_px(x))
            if np.isfinite(y):
                points.append(SamplePoint(float(x), px, float(transform.y_to_px(y))))
            else:
                points.append(SamplePoint(float(x), px, BREAK))

        n_breaks = sum(1 for p in points if p.is_break)
        logger.debug(f"Sampled {expr!r}: {len(points)} points, {n_breaks} breaks")
        return points


def _unpack_domain(domain):
    if isinstance(domain, dict):
        return float(domain['x_min']), float(domain['x_max'])
    x_min, x_max = domain
    return float(x_min), float(x_max)


def sample(expr, domain, pixel_width, pixel_height=None):
    """DomainSampler().sample 的快捷方式"""
    return DomainSampler().sample(expr, domain, pixel_width, pixel_height)


def split_segments(points):
    """按BREAK把采样点切分为若干段 [(pixel_x, pixel_y), ...]"""
    segments = []
    current = []
    for point in points:
        if point.is_break:
            if current:
                segments.append(current)
            current = []
        else:
            current.append((point.pixel_x, point.pixel_y))
    if current:
        segments.append(current)
    return segments


def points_to_frame(points):
    """
    把采样点转为DataFrame
    BREAK 的 pixel_y 记为 NaN，segment 记为 -1
    """
    df = pd.DataFrame({
        'domain_x': [p.domain_x for p in points],
        'pixel_x': [p.pixel_x for p in points],
        'pixel_y': [np.nan if p.is_break else p.pixel_y for p in points],
    })
    is_break = df['pixel_y'].isna()
    # 每个断点之后开始新的一段
    segment_id = (is_break != is_break.shift(fill_value=True)) & ~is_break
    df['segment'] = segment_id.cumsum() - 1
    df.loc[is_break, 'segment'] = -1
    return df
