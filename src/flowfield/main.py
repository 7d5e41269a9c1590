"""FlowField メインエントリーポイント"""

import pygame
from flowfield import config
from flowfield.entities.particle import ParticleState
from flowfield.entities.particle_system import ParticleSystem
from flowfield.rendering.trail_view import TrailViewRenderer


def _get_font(size: int) -> pygame.font.Font:
    """デフォルトフォントを取得（キャッシュなし、毎回生成）"""
    return pygame.font.Font(None, size)


def handle_event(event: pygame.event.Event, system: ParticleSystem) -> bool:
    """
    イベントを1件処理する

    リサイズは次フレームの描画前に反映される（同一スレッドで一括処理）。

    Returns:
        ループを継続する場合 True
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False
    if event.type == pygame.VIDEORESIZE:
        # 最小化などで0pxが来ても流れ場が作れるようにする
        width = max(1, event.w)
        height = max(1, event.h)
        system.resize(width, height)
        if config.DEBUG_MODE:
            print(f"[DEBUG] resize: {width}x{height} grid={system.cols}x{system.rows}")
    return True


def main():
    """メインループ"""
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(config.WINDOW_TITLE)
    clock = pygame.time.Clock()

    system = ParticleSystem(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
    renderer = TrailViewRenderer(_get_font)

    # デバッグ出力の時刻管理
    elapsed = 0.0
    debug_last_output_time = 0.0

    running = True
    while running:
        # --- イベント処理 ---
        for event in pygame.event.get():
            if not handle_event(event, system):
                running = False
        if not running:
            break

        # リサイズ後はディスプレイSurfaceが差し替わる
        screen = pygame.display.get_surface()

        # --- 描画 + 更新 ---
        renderer.render(screen, system, clock.get_fps())
        pygame.display.flip()

        dt = clock.tick(config.FPS) / 1000.0
        elapsed += dt

        # デバッグ出力（サンプリング間隔ごと）
        if config.DEBUG_MODE and (elapsed - debug_last_output_time) >= config.DEBUG_SAMPLING_INTERVAL:
            counts = system.count_states()
            print(
                f"[DEBUG] t={elapsed:.1f}s fps={clock.get_fps():.1f} "
                f"growing={counts[ParticleState.GROWING]} "
                f"shrinking={counts[ParticleState.SHRINKING]} "
                f"reset={counts[ParticleState.RESET]} "
                f"trail_mean={system.mean_trail_length():.1f}"
            )
            debug_last_output_time = elapsed

    pygame.quit()


if __name__ == "__main__":
    main()
