#!/usr/bin/env python3
"""流れ場の可視化スクリプト（角度グリッドをquiverで表示）"""

import sys
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from flowfield import config
from flowfield.physics.flow_field import FlowField


def plot_flow_field(width: int = config.SCREEN_WIDTH, height: int = config.SCREEN_HEIGHT,
                    output_png: str = "flow_field.png"):
    """
    流れ場の向きを矢印で描画して保存

    Args:
        width: 画面幅（px）
        height: 画面高さ（px）
        output_png: 出力PNGファイル名
    """
    field = FlowField(width, height)
    print(f"流れ場: {field.cols}x{field.rows}セル (curve={field.curve}, zoom={field.zoom})")

    angles = field.angles.reshape(field.rows, field.cols)
    centers_x = (np.arange(field.cols) + 0.5) * field.cell_size
    centers_y = (np.arange(field.rows) + 0.5) * field.cell_size
    xs, ys = np.meshgrid(centers_x, centers_y)

    fig, ax = plt.subplots(figsize=(12, 12 * height / width))
    ax.quiver(xs, ys, np.cos(angles), np.sin(angles), angles, cmap='magma', pivot='mid')

    # 画面座標系（+yが下）に合わせる
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_title(f'Flow field ({field.cols}x{field.rows}, cell={field.cell_size}px)')

    output_path = project_root / output_png
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    print(f"グラフ保存: {output_path}")


if __name__ == "__main__":
    plot_flow_field()
