"""Sun Arc - interactive demo of the sunarc controller.

A simulated day advances continuously. The host refreshes the arc every five
seconds, and the keys below exercise the background/foreground handling.

Controls:
  B       Toggle background / foreground
  J       Jump the clock forward 15% of the day
  N       Toggle night
  R       Restart the day
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from sunarc import ArcConfig, KeyframePlayer, SunArc, SunPhase
from sunarc.bus import ANIMATION_PLAN, LABEL_ALPHA, MARKER_ALPHA, MARKER_MOVED, PHASE_CHANGED

from ui.arc import draw_arc, draw_marker, draw_time_label
from ui.constants import (
    ARC_H,
    ARC_W,
    DAY_BG,
    DAY_INK,
    DAY_LENGTH,
    FPS,
    MARKER_SIZE,
    NIGHT_BG,
    NIGHT_INK,
    REFRESH_INTERVAL,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_DIM,
)


class DemoState:
    """Holds the controller, the runner and what the view currently shows."""

    def __init__(self) -> None:
        config = ArcConfig(bounding_width=ARC_W, bounding_height=ARC_H, marker_size=MARKER_SIZE)
        self.arc = SunArc(config)
        self.player = KeyframePlayer(on_complete=self.arc.animation_complete)

        self.clock_time = 0.0
        self.night = False
        self.backgrounded = False
        self.since_refresh = REFRESH_INTERVAL

        # View state, driven only by bus signals
        self.marker_position = self.arc.mapper.locate(0.0)
        self.marker_alpha = 0.0
        self.label_alpha = 1.0
        self.moon_visible = True

        bus = self.arc.bus
        bus.subscribe(ANIMATION_PLAN, lambda name, data: self.player.start(data["plan"]))
        bus.subscribe(MARKER_MOVED, self._on_marker_moved)
        bus.subscribe(MARKER_ALPHA, self._on_marker_alpha)
        bus.subscribe(LABEL_ALPHA, self._on_label_alpha)
        bus.subscribe(PHASE_CHANGED, self._on_phase_changed)

    @property
    def fraction(self) -> float:
        return min(self.clock_time / DAY_LENGTH, 1.0)

    @property
    def sun_phase(self) -> SunPhase:
        if self.night or self.fraction >= 1.0:
            return SunPhase.NIGHT
        return SunPhase.DUSK if self.fraction > 0.85 else SunPhase.DAY

    def _on_marker_moved(self, signal: str, data: dict) -> None:
        if not self.player.playing:
            self.marker_position = data["position"]

    def _on_marker_alpha(self, signal: str, data: dict) -> None:
        self.marker_alpha = data["alpha"]

    def _on_label_alpha(self, signal: str, data: dict) -> None:
        self.label_alpha = data["alpha"]

    def _on_phase_changed(self, signal: str, data: dict) -> None:
        directive = data["directive"]
        self.moon_visible = directive.moon_visible
        if directive.parked_at is not None:
            self.player.stop()

    def toggle_background(self) -> None:
        self.backgrounded = not self.backgrounded
        if self.backgrounded:
            self.player.stop()
            self.arc.cancel_animation()
            self.arc.report_backgrounded()
        else:
            self.arc.report_foregrounded(self.fraction)

    def step(self, dt: float) -> None:
        self.clock_time += dt
        self.since_refresh += dt
        if self.since_refresh >= REFRESH_INTERVAL:
            self.since_refresh = 0.0
            self.arc.update_interface(self.fraction, self.sun_phase)

        if not self.backgrounded:
            position = self.player.advance(dt)
            if position is not None and self.player.playing:
                self.marker_position = position
        self.arc.advance(dt)

    def time_text(self) -> str:
        minutes = int(6 * 60 + self.fraction * 12 * 60)
        return f"{minutes // 60:02d}:{minutes % 60:02d}"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Sun Arc - sunarc demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    state = DemoState()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_b:
                    state.toggle_background()
                elif event.key == pygame.K_j:
                    state.clock_time += DAY_LENGTH * 0.15
                elif event.key == pygame.K_n:
                    state.night = not state.night
                elif event.key == pygame.K_r:
                    state.clock_time = 0.0

        # --- Tick ---
        state.step(dt)

        # --- Render ---
        dark = state.moon_visible
        background = NIGHT_BG if dark else DAY_BG
        ink = NIGHT_INK if dark else DAY_INK
        screen.fill(background)

        draw_arc(screen, state.arc.mapper, ink)
        draw_marker(
            screen,
            state.marker_position,
            state.marker_alpha,
            state.moon_visible,
            ink,
            background,
        )
        if state.label_alpha > 0 and not dark:
            draw_time_label(screen, font, state.marker_position, state.time_text(), ink)

        pygame.draw.rect(screen, STATUS_BG, (0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H))
        text = font.render(
            f"{state.arc.gate.state}  day {state.fraction:.0%}", True, TEXT_DIM
        )
        screen.blit(text, (8, SCREEN_H - STATUS_H + 10))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
