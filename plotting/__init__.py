"""绘图模块 - 定义域采样和曲线渲染"""
from .sampler import (
    BREAK, SamplePoint, PixelTransform, DomainSampler,
    sample, split_segments, points_to_frame
)
from .renderer import PlotRenderer

__all__ = [
    'BREAK', 'SamplePoint', 'PixelTransform', 'DomainSampler',
    'sample', 'split_segments', 'points_to_frame', 'PlotRenderer'
]
