"""軌跡ビュー レンダラー"""

import numpy as np
import pygame
from flowfield import config
from flowfield.entities.particle import ParticleState
from flowfield.entities.particle_system import ParticleSystem


def direction_segment(center_x: float, center_y: float, angle: float,
                      length: float) -> tuple[tuple[int, int], tuple[int, int]]:
    """
    セル中心を通る向き付き線分を計算

    Args:
        center_x: 中心X座標（px）
        center_y: 中心Y座標（px）
        angle: 角度（ラジアン、画面座標系: +yが下）
        length: 線分の長さ（px）

    Returns:
        (始点, 終点)
    """
    half = length / 2
    dx = half * np.cos(angle)
    dy = half * np.sin(angle)
    start = (int(round(center_x - dx)), int(round(center_y - dy)))
    end = (int(round(center_x + dx)), int(round(center_y + dy)))
    return start, end


class TrailViewRenderer:
    """
    パーティクル軌跡のレンダラー

    毎フレーム画面をクリアし、パーティクルシステムに描画と更新を任せる。
    DEBUG_MODE時は流れ場の向きと統計を重ねて表示する。
    """

    def __init__(self, font_loader):
        """
        Args:
            font_loader: フォント取得関数 (size: int) -> pygame.font.Font
        """
        self.font_loader = font_loader
        self.debug = config.DEBUG_MODE

    def render(self, screen: pygame.Surface, system: ParticleSystem, fps: float = 0.0):
        """1フレーム描画（クリア → 描画+更新 → デバッグ表示）"""
        screen.fill(config.COLOR_BACKGROUND)

        if self.debug:
            self._draw_flow_field(screen, system)

        system.render(screen)

        if self.debug:
            self._draw_stats(screen, system, fps)

    def _draw_flow_field(self, screen, system):
        """流れ場の向きをセルごとに描画"""
        field = system.flow_field
        half_cell = field.cell_size / 2
        for cell_y in range(field.rows):
            for cell_x in range(field.cols):
                angle = field[field.cell_index(cell_x, cell_y)]
                start, end = direction_segment(
                    cell_x * field.cell_size + half_cell,
                    cell_y * field.cell_size + half_cell,
                    angle,
                    config.DEBUG_ARROW_LENGTH,
                )
                pygame.draw.line(screen, config.COLOR_DEBUG_ARROW, start, end, 1)
                pygame.draw.circle(screen, config.COLOR_DEBUG_ARROW, end, 2)

    def _draw_stats(self, screen, system, fps):
        """FPSとライフサイクル統計を表示"""
        font = self.font_loader(16)
        counts = system.count_states()
        text = (
            f"FPS: {fps:.1f}  "
            f"grid: {system.cols}x{system.rows}  "
            f"growing: {counts[ParticleState.GROWING]}  "
            f"shrinking: {counts[ParticleState.SHRINKING]}  "
            f"reset: {counts[ParticleState.RESET]}"
        )
        text_surface = font.render(text, True, config.COLOR_DEBUG_TEXT)
        screen.blit(text_surface, (10, 10))
