"""ParticleSystemのテスト"""

import numpy as np
import pygame
pygame.init()

from flowfield import config
from flowfield.entities.particle import ParticleState
from flowfield.entities.particle_system import ParticleSystem


def test_construct_300x300():
    """300x300 → 10x10の流れ場、パーティクル1000個"""
    system = ParticleSystem(300, 300, rng=np.random.default_rng(0))
    assert system.cell_size == 30
    assert (system.rows, system.cols) == (10, 10)
    assert len(system.flow_field) == 100
    assert system.flow_field[0] == config.FLOW_CURVE
    assert len(system.particles) == config.PARTICLE_COUNT == 1000


def test_particles_start_in_bounds():
    """全パーティクルが画面内に生成される"""
    system = ParticleSystem(300, 200, rng=np.random.default_rng(1))
    for p in system.particles:
        assert 0 <= p.x < 300 and 0 <= p.y < 200
        assert len(p.trail) == 1


def test_resize_rebuilds_everything():
    """リサイズで流れ場とパーティクルを作り直す"""
    system = ParticleSystem(300, 300, rng=np.random.default_rng(2))
    old_field = system.flow_field
    old_ids = {id(p) for p in system.particles}
    for _ in range(5):
        system.update()

    system.resize(640, 455)

    assert (system.width, system.height) == (640, 455)
    assert (system.rows, system.cols) == (15, 21)
    assert len(system.flow_field) == 15 * 21
    assert system.flow_field is not old_field
    assert len(system.particles) == 1000
    assert not old_ids & {id(p) for p in system.particles}
    for p in system.particles:
        assert len(p.trail) == 1
        assert p.timer == 2 * p.max_length
        assert 0 <= p.x < 640 and 0 <= p.y < 455


def test_render_draws_before_update():
    """描画はupdate前の軌跡（初回フレームは1点なので何も描かれない）"""
    system = ParticleSystem(300, 300, particle_count=50, rng=np.random.default_rng(3))
    surface = pygame.Surface((300, 300))
    surface.fill((0, 0, 0))

    system.render(surface)

    assert not np.any(pygame.surfarray.array3d(surface))
    for p in system.particles:
        assert len(p.trail) == 2
        assert p.timer == 2 * p.max_length - 1


def test_render_second_frame_draws_trails():
    """2フレーム目は前フレームで伸びた軌跡が描かれる"""
    system = ParticleSystem(300, 300, particle_count=50, rng=np.random.default_rng(4))
    surface = pygame.Surface((300, 300))
    surface.fill((0, 0, 0))

    system.render(surface)
    system.render(surface)

    assert np.any(pygame.surfarray.array3d(surface))


def test_count_states_totals():
    """状態ごとの数の合計はパーティクル数"""
    system = ParticleSystem(300, 300, particle_count=200, rng=np.random.default_rng(5))
    counts = system.count_states()
    assert counts[ParticleState.GROWING] == 200

    for _ in range(300):
        system.update()
    counts = system.count_states()
    assert sum(counts.values()) == 200
    assert counts[ParticleState.SHRINKING] > 0


def test_trail_invariant_over_many_frames():
    """長時間実行しても軌跡長は 1..最大長"""
    system = ParticleSystem(300, 300, particle_count=100, rng=np.random.default_rng(6))
    for _ in range(500):
        system.update()
        for p in system.particles:
            assert 1 <= len(p.trail) <= p.max_length


def test_mean_trail_length():
    """初期状態の軌跡長平均は1"""
    system = ParticleSystem(300, 300, particle_count=10, rng=np.random.default_rng(7))
    assert system.mean_trail_length() == 1.0
    assert ParticleSystem(300, 300, particle_count=0).mean_trail_length() == 0.0
