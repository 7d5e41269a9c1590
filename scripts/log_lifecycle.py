#!/usr/bin/env python3
"""ライフサイクルロギングスクリプト（描画なしでパーティクル群を進めて統計を記録）"""

import csv
import sys
import numpy as np
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from flowfield import config
from flowfield.entities.particle import ParticleState
from flowfield.entities.particle_system import ParticleSystem


def run_simulation(frames: int = 1200, output_csv: str = "lifecycle_log.csv", seed: int = 0):
    """
    ヘッドレスでパーティクルシステムを実行してログを記録

    Args:
        frames: 実行フレーム数
        output_csv: 出力CSVファイル名
        seed: 乱数シード
    """
    system = ParticleSystem(
        config.SCREEN_WIDTH,
        config.SCREEN_HEIGHT,
        rng=np.random.default_rng(seed),
    )

    csv_path = project_root / output_csv
    csv_file = open(csv_path, 'w', newline='')
    csv_writer = csv.writer(csv_file)

    csv_writer.writerow([
        'frame',
        'time',
        'growing',
        'shrinking',
        'reset',
        'trail_mean',
        'trail_max',
        'out_of_bounds',
    ])

    print(f"シミュレーション開始: {frames}フレーム ({system.cols}x{system.rows}セル)")
    print(f"出力先: {csv_path}")

    for frame in range(frames):
        counts = system.count_states()
        trail_lengths = [len(p.trail) for p in system.particles]
        out_of_bounds = sum(
            1 for p in system.particles
            if not (0 <= p.x < system.width and 0 <= p.y < system.height)
        )

        csv_writer.writerow([
            frame,
            f"{frame / config.FPS:.3f}",
            counts[ParticleState.GROWING],
            counts[ParticleState.SHRINKING],
            counts[ParticleState.RESET],
            f"{np.mean(trail_lengths):.3f}",
            max(trail_lengths),
            out_of_bounds,
        ])

        system.update()

        if frame % 300 == 0:
            print(f"  frame={frame}: 軌跡平均={np.mean(trail_lengths):.1f} 画面外={out_of_bounds}")

    csv_file.close()
    print(f"\nシミュレーション完了")
    print(f"ログファイル: {csv_path}")

    return csv_path


if __name__ == "__main__":
    csv_path = run_simulation()
    print(f"\n解析を開始するには:")
    print(f"  python scripts/analyze_lifecycle.py {csv_path}")
