"""配置文件"""
import os

# 绘图参数
PLOT_CONFIG = {
    "width": 640,  # 画布宽度（像素），也是采样点数
    "height": 280,
    "x_min": -10.0,
    "x_max": 10.0,
    "grid_step": 1,
    "dpi": 100,
    "output_dir": "plots",
}

# 主题配色
THEME_CONFIG = {
    "default": "green",
    "green": {
        "background": (0.03, 0.05, 0.03, 0.75),
        "grid": (0.4, 0.8, 0.4, 0.18),
        "axis": (0.4, 0.8, 0.4, 0.6),
        "stroke": "#9cff9c",
        "glow": (0.21, 1.0, 0.21, 0.25),
    },
    "amber": {
        "background": (0.06, 0.04, 0.01, 0.75),
        "grid": (1.0, 0.69, 0.2, 0.18),
        "axis": (1.0, 0.69, 0.2, 0.6),
        "stroke": "#ffc46b",
        "glow": (1.0, 0.7, 0.0, 0.25),
    },
}

# 偏好存储
PREFERENCE_CONFIG = {
    "path": os.path.join(os.path.expanduser("~"), ".retrocalc", "preferences.json"),
    "retention_days": 365,
    "theme_key": "retrocalc.theme",
    "glitch_key": "retrocalc.glitch",
    "scan_key": "retrocalc.scan",
    "defaults": {
        "retrocalc.theme": "green",
        "retrocalc.glitch": "on",
        "retrocalc.scan": "on",
    },
}

# 交互界面
SHELL_CONFIG = {
    "prompt": "you> ",
    "greeting": [
        "RETROCALC READY. Type an expression or `help`.",
        "Commands: help, clear, glitch on/off, scan on/off",
        "Theme: theme green | theme amber",
    ],
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert PLOT_CONFIG["width"] >= 2, "采样至少需要2个点"
    assert PLOT_CONFIG["height"] > 0, "画布高度必须为正"
    assert PLOT_CONFIG["x_max"] > PLOT_CONFIG["x_min"], "x范围不能为空"
    assert PLOT_CONFIG["grid_step"] > 0, "网格间距必须为正"
    assert THEME_CONFIG["default"] in THEME_CONFIG, "默认主题未定义"
    assert PREFERENCE_CONFIG["retention_days"] >= 365, "偏好至少保留365天"
    return True
