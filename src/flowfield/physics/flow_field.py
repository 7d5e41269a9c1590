"""流れ場 (角度グリッド)"""

import math
import numpy as np
from flowfield import config


def build_angles(rows: int, cols: int, curve: float, zoom: float) -> np.ndarray:
    """
    セル座標から角度グリッドを生成

    angle = (cos(x·zoom) + sin(y·zoom)) · curve

    Args:
        rows: 行数
        cols: 列数
        curve: 曲がり係数
        zoom: ズーム係数

    Returns:
        行優先（y外側、x内側）に並んだ角度配列 (ラジアン)、長さ rows*cols
    """
    ys, xs = np.meshgrid(np.arange(rows), np.arange(cols), indexing="ij")
    angles = (np.cos(xs * zoom) + np.sin(ys * zoom)) * curve
    return angles.astype(float).ravel()


class FlowField:
    """
    静的な流れ場

    - 画面をセルに分割し、各セルに進行方向の角度を割り当てる
    - 生成後は変更しない（リサイズ時は作り直す）
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = config.CELL_SIZE,
        curve: float = config.FLOW_CURVE,
        zoom: float = config.FLOW_ZOOM,
    ):
        self.cell_size = cell_size
        self.curve = curve
        self.zoom = zoom
        self.rows = int(height // cell_size)
        self.cols = int(width // cell_size)

        self.angles = build_angles(self.rows, self.cols, curve, zoom)
        self.angles.setflags(write=False)

    def __len__(self) -> int:
        return len(self.angles)

    def __getitem__(self, index: int) -> float:
        return float(self.angles[index])

    def cell_of(self, x: float, y: float) -> tuple[int, int]:
        """画面座標 → セル座標"""
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)

    def cell_index(self, cell_x: int, cell_y: int) -> int:
        """セル座標 → 線形インデックス"""
        return cell_y * self.cols + cell_x

    def angle_at(self, x: float, y: float) -> float:
        """
        画面座標での流れの角度を取得

        画面外に流れ出たパーティクルは最寄りの端のセルにクランプする。
        セルが1つもない場合（画面がセルより小さい）は 0.0 を返す。

        Args:
            x: X座標 (px)
            y: Y座標 (px)

        Returns:
            角度 (ラジアン)
        """
        if self.rows == 0 or self.cols == 0:
            return 0.0

        cell_x, cell_y = self.cell_of(x, y)
        cell_x = min(max(cell_x, 0), self.cols - 1)
        cell_y = min(max(cell_y, 0), self.rows - 1)
        return float(self.angles[self.cell_index(cell_x, cell_y)])
