"""
plotting/renderer.py - 把采样点绘制为PNG（网格、坐标轴、曲线和辉光）
"""
import logging
import math
import os

import matplotlib

matplotlib.use('Agg')  # 无界面后端
from matplotlib.figure import Figure

from config.config import PLOT_CONFIG, THEME_CONFIG
from plotting.sampler import split_segments

logger = logging.getLogger(__name__)


class PlotRenderer:
    """
    像素坐标系下的曲线渲染器
    坐标原点在左上角，与采样器输出的像素坐标一致
    """

    def __init__(self, theme=None, grid_step=None, dpi=None):
        theme = theme or THEME_CONFIG['default']
        if theme not in THEME_CONFIG or theme == 'default':
            raise ValueError(f"Unknown theme: {theme}")
        self.theme = theme
        self.colors = THEME_CONFIG[theme]
        self.grid_step = grid_step or PLOT_CONFIG['grid_step']
        self.dpi = dpi or PLOT_CONFIG['dpi']

    def _grid_lines(self, transform):
        """返回 (竖线像素x列表, 横线像素y列表)"""
        step = self.grid_step
        xs = []
        gx = math.ceil(transform.x_min)
        while gx <= math.floor(transform.x_max):
            xs.append(round(transform.x_to_px(gx)) + 0.5)
            gx += step
        ys = []
        gy = math.ceil(transform.y_min)
        while gy <= math.floor(transform.y_max):
            ys.append(round(transform.y_to_px(gy)) + 0.5)
            gy += step
        return xs, ys

    def build_figure(self, expr, points, transform):
        width, height = transform.width, transform.height
        fig = Figure(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()
        fig.patch.set_facecolor(self.colors['background'])

        # 网格
        grid_xs, grid_ys = self._grid_lines(transform)
        for px in grid_xs:
            ax.plot([px, px], [0, height], color=self.colors['grid'], linewidth=1)
        for py in grid_ys:
            ax.plot([0, width], [py, py], color=self.colors['grid'], linewidth=1)

        # 坐标轴
        if transform.x_min <= 0 <= transform.x_max:
            x0 = round(transform.x_to_px(0)) + 0.5
            ax.plot([x0, x0], [0, height], color=self.colors['axis'], linewidth=1)
        if transform.y_min <= 0 <= transform.y_max:
            y0 = round(transform.y_to_px(0)) + 0.5
            ax.plot([0, width], [y0, y0], color=self.colors['axis'], linewidth=1)

        # 曲线：每段单独描边，再叠加辉光
        segments = split_segments(points)
        for segment in segments:
            seg_x = [p[0] for p in segment]
            seg_y = [p[1] for p in segment]
            ax.plot(seg_x, seg_y, color=self.colors['stroke'], linewidth=2)
            ax.plot(seg_x, seg_y, color=self.colors['glow'], linewidth=1)

        ax.text(4, 14, f"plot y = {expr}", color=self.colors['stroke'],
                fontsize=9, family='monospace')
        return fig, len(segments)

    def render(self, expr, points, transform, output_path):
        """
        绘制并保存PNG
        Returns:
            输出文件路径
        """
        fig, n_segments = self.build_figure(expr, points, transform)
        out_dir = os.path.dirname(output_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        fig.savefig(output_path, dpi=self.dpi, facecolor=fig.get_facecolor())
        logger.info(f"Plot for {expr!r} saved to {output_path} ({n_segments} segments)")
        return output_path
