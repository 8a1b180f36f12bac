"""
Arcade window for playing the duel
Start screen -> playfield -> end screen, looping until the window closes
"""

from __future__ import annotations

from typing import Optional

import arcade
from PIL import Image

from game.configs.duel_config import BANNERS, OPPONENTS, WINDOW_CONFIG
from .entities import Side
from .gradients import linear_gradient
from .session import DuelSession, Phase
from .styles import left_style
from .utils import clamp

# arcade key symbol -> key identifier used by the bindings
KEY_NAMES = {
    arcade.key.W: "w",
    arcade.key.S: "s",
    arcade.key.D: "d",
    arcade.key.UP: "ArrowUp",
    arcade.key.DOWN: "ArrowDown",
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
}

SELECT_KEYS = [arcade.key.KEY_1, arcade.key.KEY_2, arcade.key.KEY_3,
               arcade.key.KEY_4, arcade.key.KEY_5]


def gradient_texture(name: str, width: int, height: int, start, end, horizontal: bool = False) -> arcade.Texture:
    pixels = linear_gradient(width, height, start, end, horizontal=horizontal)
    return arcade.Texture(Image.fromarray(pixels, mode="RGBA"), hash=name)


class DuelWindow(arcade.Window):
    """Arcade window rendering a DuelSession and feeding it key events"""

    def __init__(self, session: DuelSession, title: str = WINDOW_CONFIG["title"],
                 update_rate: float = WINDOW_CONFIG["update_rate"]):
        super().__init__(int(session.width), int(session.height), title, update_rate=update_rate)
        self.session = session

        # Colors
        self.LEFT_GLOW = (255, 87, 34)
        self.RIGHT_GLOW = (0, 188, 212)
        self.TRAIL_C = (255, 255, 0)
        self.EXPLOSION_C = (255, 165, 0)
        self.TEXT_C = (255, 255, 255)
        self.SCREEN_BG = (18, 18, 22)

        w, h = int(session.width), int(session.height)
        bar_w = session.rules.start_health * 2
        self._background = gradient_texture("duel-bg", w, h, (10, 10, 10), (34, 34, 34))
        self._left_bar = gradient_texture("duel-bar-left", bar_w, 10, (0, 255, 0), (0, 128, 0), horizontal=True)
        self._right_bar = gradient_texture("duel-bar-right", bar_w, 10, (255, 0, 0), (139, 0, 0), horizontal=True)

    def to_arcade_bottom(self, y: float, h: float) -> float:
        """Top-left y of a box -> arcade bottom edge"""
        return self.height - (y + h)

    def to_arcade_y(self, y: float) -> float:
        return self.height - y

    # ----------------------------
    # Events
    # ----------------------------

    def on_update(self, delta_time: float):
        self.session.advance(delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return

        phase = self.session.phase
        if phase is Phase.IDLE:
            if symbol in SELECT_KEYS:
                idx = SELECT_KEYS.index(symbol)
                if idx < len(OPPONENTS):
                    self.session.start(OPPONENTS[idx])
        elif phase is Phase.RUNNING:
            name = KEY_NAMES.get(symbol)
            if name is not None:
                self.session.key_down(name)
        elif symbol in (arcade.key.RETURN, arcade.key.ENTER, arcade.key.R):
            self.session.reset()

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.session.key_up(name)

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear(self.SCREEN_BG)
        phase = self.session.phase
        if phase is Phase.IDLE:
            self._draw_start_screen()
        elif phase is Phase.RUNNING:
            self._draw_playfield()
        else:
            self._draw_end_screen()

    def _draw_start_screen(self):
        cx = self.width / 2
        arcade.draw_text("Choose your SAVIOUR", cx, self.height * 0.7, self.TEXT_C, 28,
                         anchor_x="center")
        for i, name in enumerate(OPPONENTS):
            arcade.draw_text(f"[{i + 1}]  {name}", cx, self.height * 0.55 - i * 32, self.TEXT_C, 18,
                             anchor_x="center")
        arcade.draw_text("Left: W/S move, D fire    Right: Up/Down move, Left fire",
                         cx, 40, (180, 180, 180), 12, anchor_x="center")

    def _draw_end_screen(self):
        outcome = self.session.outcome
        banner = outcome.banner if outcome is not None else ""
        arcade.draw_text(banner, self.width / 2, self.height / 2, self.TEXT_C, 32,
                         anchor_x="center", anchor_y="center")
        arcade.draw_text("Press Enter to play again", self.width / 2, self.height / 2 - 50,
                         (180, 180, 180), 14, anchor_x="center")

    def _draw_playfield(self):
        world = self.session.world
        arcade.draw_texture_rect(self._background, arcade.LBWH(0, 0, self.width, self.height))

        # Players
        for p, glow in ((world.left, self.LEFT_GLOW), (world.right, self.RIGHT_GLOW)):
            bottom = self.to_arcade_bottom(p.y, p.height)
            arcade.draw_lrbt_rectangle_filled(p.x, p.x + p.width, bottom, bottom + p.height, (40, 40, 48))
            arcade.draw_lrbt_rectangle_outline(p.x, p.x + p.width, bottom, bottom + p.height, glow, 3)

        # Projectiles
        left_color = left_style().color
        right_color = self.session.opponent_style.color
        for b in world.projectiles:
            color = left_color if b.owner is Side.LEFT else right_color
            bottom = self.to_arcade_bottom(b.y, b.height)
            arcade.draw_lrbt_rectangle_filled(b.x, b.x + b.width, bottom, bottom + b.height, color)

        # Trails
        for t in world.trails:
            alpha = int(clamp(t.alpha, 0.0, 1.0) * 255)
            arcade.draw_circle_filled(t.x, self.to_arcade_y(t.y), t.radius, (*self.TRAIL_C, alpha))

        # Explosions
        for e in world.explosions:
            alpha = int(clamp(e.alpha, 0.0, 1.0) * 255)
            arcade.draw_circle_filled(e.x, self.to_arcade_y(e.y), e.radius, (*self.EXPLOSION_C, alpha))

        self._draw_hud()

    def _draw_hud(self):
        world = self.session.world
        labels = BANNERS["labels"]
        right_x = self.width - 240

        for p, texture, x in ((world.left, self._left_bar, 20), (world.right, self._right_bar, right_x)):
            bar_w = p.health * 2
            if bar_w > 0:
                arcade.draw_texture_rect(texture, arcade.LBWH(x, self.height - 30, bar_w, 10))

        arcade.draw_text(labels["left"], 20, self.height - 15, self.TEXT_C, 12)
        arcade.draw_text(labels["right"], right_x, self.height - 15, self.TEXT_C, 12)


def run_window(session: Optional[DuelSession] = None, opponent: Optional[str] = None, **window_kwargs):
    """Open the window and block until it is closed"""
    if session is None:
        session = DuelSession()
    if opponent is not None:
        session.start(opponent)
    window = DuelWindow(session, **window_kwargs)
    arcade.run()
    return window
