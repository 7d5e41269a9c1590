"""軌跡パーティクル (ステートマシン)"""

import math
from collections import deque
from enum import Enum, auto

import numpy as np
import pygame
from flowfield import config
from flowfield.physics.flow_field import FlowField


class ParticleState(Enum):
    """パーティクルのライフサイクル状態"""
    GROWING = auto()    # 移動しながら軌跡を伸ばす
    SHRINKING = auto()  # 停止し、軌跡を末尾から消していく
    RESET = auto()      # 軌跡が1点になった → 次のupdateで再配置


class Particle:
    """
    流れ場に沿って移動し、軌跡を残すパーティクル

    - 速度倍率・軌跡最大長・色は生成時に決まり、リセット後も変わらない
    - 所属するParticleSystemへの参照は持たない（流れ場と画面サイズは引数で受け取る）
    """

    def __init__(self, width: int, height: int, rng: np.random.Generator = None):
        rng = rng if rng is not None else np.random.default_rng()

        self.x = float(math.floor(rng.random() * width))
        self.y = float(math.floor(rng.random() * height))
        self.speed_x = 0.0
        self.speed_y = 0.0
        self.angle = 0.0

        self.speed_modifier = int(rng.integers(config.SPEED_MODIFIER_MIN, config.SPEED_MODIFIER_MAX + 1))
        self.max_length = int(rng.integers(config.TRAIL_LENGTH_MIN, config.TRAIL_LENGTH_MAX + 1))
        self.trail = deque([(self.x, self.y)], maxlen=self.max_length)
        self.timer = self.max_length * config.TIMER_FACTOR
        self.color = config.PARTICLE_COLORS[int(rng.integers(len(config.PARTICLE_COLORS)))]

    @property
    def state(self) -> ParticleState:
        """次のupdate()が実行する遷移"""
        if self.timer > 1:
            return ParticleState.GROWING
        if len(self.trail) > 1:
            return ParticleState.SHRINKING
        return ParticleState.RESET

    def update(self, flow_field: FlowField, width: int, height: int, rng: np.random.Generator = None):
        """
        1フレーム分の状態を更新

        Args:
            flow_field: 角度を参照する流れ場
            width: 画面幅（リセット時の再配置範囲）
            height: 画面高さ
            rng: 乱数生成器（リセット時のみ使用）
        """
        self.timer -= 1

        if self.timer >= 1:
            self.angle = flow_field.angle_at(self.x, self.y)
            self.speed_x = math.cos(self.angle)
            self.speed_y = math.sin(self.angle)
            self.x += self.speed_x * self.speed_modifier
            self.y += self.speed_y * self.speed_modifier

            # maxlen付きdequeなので、最大長を超えた分は先頭から自動で1つ落ちる
            self.trail.append((self.x, self.y))
        elif len(self.trail) > 1:
            self.trail.popleft()
        else:
            self.reset(width, height, rng)

    def reset(self, width: int, height: int, rng: np.random.Generator = None):
        """ランダムな位置に再配置（速度倍率・最大長・色は維持）"""
        rng = rng if rng is not None else np.random.default_rng()

        self.x = float(math.floor(rng.random() * width))
        self.y = float(math.floor(rng.random() * height))
        self.trail = deque([(self.x, self.y)], maxlen=self.max_length)
        self.timer = self.max_length * config.TIMER_FACTOR

    def draw(self, surface: pygame.Surface, line_width: int = config.LINE_WIDTH):
        """軌跡を折れ線で描画（状態は変更しない）"""
        # 1点だけの軌跡は線にならない
        if len(self.trail) < 2:
            return
        pygame.draw.lines(surface, self.color, False, list(self.trail), line_width)
