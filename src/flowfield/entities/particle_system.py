"""パーティクルシステム（流れ場 + パーティクル群の所有者）"""

import numpy as np
import pygame
from flowfield import config
from flowfield.entities.particle import Particle, ParticleState
from flowfield.physics.flow_field import FlowField


class ParticleSystem:
    """
    流れ場と固定数のパーティクルを所有する

    リサイズ時は部分更新せず、流れ場もパーティクルもすべて作り直す。
    """

    def __init__(
        self,
        width: int,
        height: int,
        particle_count: int = config.PARTICLE_COUNT,
        rng: np.random.Generator = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cell_size = config.CELL_SIZE
        self.particle_count = particle_count
        self.width = width
        self.height = height
        self.flow_field: FlowField = None
        self.particles: list[Particle] = []
        self._init()

    def _init(self):
        """流れ場とパーティクルを生成"""
        self.flow_field = FlowField(self.width, self.height, self.cell_size)
        self.particles = [
            Particle(self.width, self.height, self.rng)
            for _ in range(self.particle_count)
        ]

    @property
    def rows(self) -> int:
        return self.flow_field.rows

    @property
    def cols(self) -> int:
        return self.flow_field.cols

    def resize(self, width: int, height: int):
        """画面サイズ変更（再構築と同等）"""
        self.width = width
        self.height = height
        self._init()

    def render(self, surface: pygame.Surface):
        """
        全パーティクルを描画してから更新

        描画はupdate前の状態（このフレームの移動は次フレームに表示される）。
        """
        for particle in self.particles:
            particle.draw(surface)
            particle.update(self.flow_field, self.width, self.height, self.rng)

    def update(self):
        """描画せずに全パーティクルを1フレーム進める（ヘッドレス実行用）"""
        for particle in self.particles:
            particle.update(self.flow_field, self.width, self.height, self.rng)

    def count_states(self) -> dict[ParticleState, int]:
        """ライフサイクル状態ごとのパーティクル数"""
        counts = {state: 0 for state in ParticleState}
        for particle in self.particles:
            counts[particle.state] += 1
        return counts

    def mean_trail_length(self) -> float:
        """軌跡長の平均"""
        if not self.particles:
            return 0.0
        return float(np.mean([len(p.trail) for p in self.particles]))
