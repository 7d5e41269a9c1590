#!/usr/bin/env python3
"""ライフサイクルログ解析スクリプト（状態数と軌跡長の推移を可視化）"""

import sys
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path


def analyze_lifecycle(csv_path: str):
    """
    ライフサイクルログを解析してグラフを保存

    Args:
        csv_path: ログCSVファイルのパス
    """
    print(f"ログファイル読込: {csv_path}")
    df = pd.read_csv(csv_path)

    print(f"\n=== データサマリー ===")
    print(f"総フレーム数: {len(df)}")
    print(f"シミュレーション時間: {df['time'].iloc[-1]:.1f}秒")

    for state in ['growing', 'shrinking', 'reset']:
        print(f"  {state:10s}: 平均 {df[state].mean():7.1f} / 最大 {df[state].max():5d}")

    print(f"\n=== 軌跡長 ===")
    print(f"平均: {df['trail_mean'].mean():.1f}")
    print(f"最大: {df['trail_max'].max()}")

    # 画面外に流れ出たパーティクルの割合
    total = df[['growing', 'shrinking', 'reset']].sum(axis=1)
    ratio = (df['out_of_bounds'] / total).mean()
    print(f"\n画面外パーティクル割合（平均）: {ratio * 100:.1f}%")

    fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax = axes[0]
    ax.plot(df['time'], df['growing'], label='growing', color='#9622c7')
    ax.plot(df['time'], df['shrinking'], label='shrinking', color='#cd72f2')
    ax.plot(df['time'], df['reset'], label='reset', color='#4c026b')
    ax.set_ylabel('Particles')
    ax.set_title('Lifecycle states')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(df['time'], df['trail_mean'], label='mean trail length', color='#730d9c')
    ax.plot(df['time'], df['out_of_bounds'], label='out of bounds', color='gray', linestyle='--')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Count / points')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    output_path = Path(csv_path).with_suffix('.png')
    plt.savefig(output_path, dpi=150)
    print(f"\nグラフ保存: {output_path}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("使い方: python scripts/analyze_lifecycle.py <csv_path>")
        sys.exit(1)

    analyze_lifecycle(sys.argv[1])
