"""FlowField 設定・定数"""

# 画面設定
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "FlowField: Particle Trails"

# 流れ場パラメータ
CELL_SIZE = 30        # px (グリッド1マスの一辺)
FLOW_CURVE = 5.0      # 角度の曲がり係数
FLOW_ZOOM = 0.09      # セル座標のズーム係数 (小さいほど緩やかな流れ)

# パーティクルパラメータ
PARTICLE_COUNT = 1000
SPEED_MODIFIER_MIN = 1    # 速度倍率の下限（含む）
SPEED_MODIFIER_MAX = 5    # 速度倍率の上限（含む）
TRAIL_LENGTH_MIN = 10     # 軌跡最大長の下限（含む）
TRAIL_LENGTH_MAX = 209    # 軌跡最大長の上限（含む）
TIMER_FACTOR = 2          # 寿命タイマー = 軌跡最大長 × この値

# カラー定義
COLOR_BACKGROUND = (0, 0, 0)
PARTICLE_COLORS = ("#4c026b", "#730d9c", "#9622c7", "#b44ae0", "#cd72f2")
LINE_WIDTH = 1            # px

# デバッグ設定
DEBUG_MODE = False
DEBUG_SAMPLING_INTERVAL = 1.0   # 秒 (デバッグ出力の間隔)
DEBUG_ARROW_LENGTH = 12         # px (流れ場オーバーレイの矢印長)
COLOR_DEBUG_ARROW = (60, 60, 90)
COLOR_DEBUG_TEXT = (200, 200, 200)
