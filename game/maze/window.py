"""
Arcade front-end for One More Step.

Draws MazeGame snapshots, shows the title / how-to-play / win / lose
screens, maps key presses to moves and plays sound effects.

Run:
    python -m game.maze.window
"""

from __future__ import annotations

import argparse
import random
import time
from typing import Optional

import arcade

from . import layout
from .audio import Audio
from .entities import GameState
from .simulation import MazeGame
from .utils import shake_offset

MOVE_KEYS = {
    arcade.key.W: "up",
    arcade.key.UP: "up",
    arcade.key.S: "down",
    arcade.key.DOWN: "down",
    arcade.key.A: "left",
    arcade.key.LEFT: "left",
    arcade.key.D: "right",
    arcade.key.RIGHT: "right",
}

PLAY_KEYS = (arcade.key.RETURN, arcade.key.ENTER, arcade.key.SPACE)


class ArcadeAudio(Audio):
    """Plays arcade's bundled sound resources"""

    SOUNDS = {
        "move": ":resources:sounds/jump1.wav",
        "hit": ":resources:sounds/hurt1.wav",
        "win": ":resources:sounds/upgrade1.wav",
        "lose": ":resources:sounds/gameover1.wav",
    }
    VOLUMES = {"move": 0.2, "hit": 0.5, "win": 0.6, "lose": 0.6}

    def __init__(self, muted: bool = False):
        super().__init__(muted)
        assert set(self.SOUNDS) == set(self.EFFECTS), "SOUNDS must cover every effect"
        self._cache = {}

    def _emit(self, effect: str):
        sound = self._cache.get(effect)
        if sound is False:
            # Load failed before; stay quiet instead of retrying every frame
            return
        if sound is None:
            try:
                sound = arcade.load_sound(self.SOUNDS[effect])
            except Exception:
                self._cache[effect] = False
                raise
            self._cache[effect] = sound
        arcade.play_sound(sound, volume=self.VOLUMES[effect])


class MazeWindow(arcade.Window):
    """Arcade window for playing (or watching) a MazeGame"""

    def __init__(self, game: MazeGame, drive: bool = True, title: str = "One More Step"):
        super().__init__(layout.WIDTH, layout.HEIGHT, title)
        self.game = game
        # When False something else (e.g. MazeEnv) ticks the game
        self.drive = drive
        self.show_instructions = False
        self._jitter = random.Random()

        # Colors
        self.BG = (15, 15, 30)
        self.WALL_C = (42, 42, 78)
        self.GOAL_C = (102, 255, 102)
        self.GOAL_INNER_C = (153, 255, 153)
        self.GOAL_GLOW_C = (102, 255, 102, 77)
        self.HAZARD_C = (255, 50, 50, 178)
        self.HAZARD_GLOW_C = (255, 100, 100, 77)
        self.PIG_C = (255, 179, 217)
        self.PIG_EAR_C = (255, 153, 204)
        self.PIG_SNOUT_C = (255, 133, 179)
        self.TEXT_C = (230, 230, 240)
        self.DIM_C = (150, 150, 170)

        self.background_color = self.BG

    # ----------------------------
    # Frame callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.drive:
            self.game.tick()

    def on_draw(self):
        self.clear()
        snap = self.game.snapshot()

        if snap.state is GameState.TITLE:
            if self.show_instructions:
                self._draw_instructions()
            else:
                self._draw_title()
            return

        self._draw_scene(snap)
        self._draw_hud(snap.hud)

        if snap.state is GameState.WON:
            self._draw_result("YOU MADE IT!", [
                f"Steps: {snap.hud['steps']}",
                f"Time: {snap.hud['time']}",
                f"Energy left: {snap.hud['energy']}",
            ], self.GOAL_C)
        elif snap.state is GameState.LOST:
            self._draw_result("OUT OF ENERGY", [
                f"Steps: {snap.hud['steps']}",
                f"Time: {snap.hud['time']}",
            ], (255, 90, 90))

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        state = self.game.state

        if symbol in MOVE_KEYS:
            self.game.move(MOVE_KEYS[symbol])
        elif symbol == arcade.key.R:
            self.game.restart()
        elif symbol == arcade.key.M:
            self.game.audio.toggle_mute()
        elif symbol in PLAY_KEYS and state is not GameState.PLAYING:
            self.show_instructions = False
            self.game.start()
        elif symbol == arcade.key.H and state is GameState.TITLE:
            self.show_instructions = True
        elif symbol == arcade.key.ESCAPE:
            self.show_instructions = False
            self.game.go_to_title()

    # ----------------------------
    # Drawing helpers (game coords are y-down)
    # ----------------------------

    def _rect(self, x, y, w, h, color, ox=0.0, oy=0.0):
        left = x + ox
        top = self.height - (y + oy)
        arcade.draw_lrbt_rectangle_filled(left, left + w, top - h, top, color)

    def _circle(self, x, y, r, color, ox=0.0, oy=0.0):
        arcade.draw_circle_filled(x + ox, self.height - (y + oy), r, color)

    def _text(self, text, y, color=None, size=16, bold=False):
        arcade.draw_text(text, self.width / 2, self.height - y, color or self.TEXT_C,
                         size, anchor_x="center", anchor_y="center", bold=bold)

    def _draw_scene(self, snap):
        ox, oy = shake_offset(snap.shake, self._jitter)

        for w in snap.walls:
            self._rect(w.x, w.y, w.width, w.height, self.WALL_C, ox, oy)

        # Goal with pulsing glow
        g = snap.goal
        pulse = g.pulse(time.time())
        self._rect(g.x - pulse, g.y - pulse, g.size + pulse * 2, g.size + pulse * 2,
                   self.GOAL_GLOW_C, ox, oy)
        self._rect(g.x, g.y, g.size, g.size, self.GOAL_C, ox, oy)
        self._rect(g.x + 5, g.y + 5, g.size - 10, g.size - 10, self.GOAL_INNER_C, ox, oy)

        for h in snap.hazards:
            self._rect(h.x - 2, h.y - 2, h.width + 4, h.height + 4, self.HAZARD_GLOW_C, ox, oy)
            self._rect(h.x, h.y, h.width, h.height, self.HAZARD_C, ox, oy)

        self._draw_pig(snap.player, ox, oy)

        for p in snap.particles:
            alpha = int(max(0.0, min(1.0, p.life)) * 255)
            self._rect(p.x, p.y, p.size, p.size, (*p.color, alpha), ox, oy)

    def _draw_pig(self, p, ox, oy):
        s = p.size
        self._rect(p.x, p.y, s, s, self.PIG_C, ox, oy)
        # ears
        self._circle(p.x + 8, p.y + 5, 5, self.PIG_EAR_C, ox, oy)
        self._circle(p.x + s - 8, p.y + 5, 5, self.PIG_EAR_C, ox, oy)
        # eyes
        self._rect(p.x + 8, p.y + 12, 4, 4, arcade.color.BLACK, ox, oy)
        self._rect(p.x + s - 12, p.y + 12, 4, 4, arcade.color.BLACK, ox, oy)
        # snout
        self._rect(p.x + 10, p.y + 20, 10, 6, self.PIG_SNOUT_C, ox, oy)
        self._rect(p.x + 12, p.y + 22, 2, 2, arcade.color.BLACK, ox, oy)
        self._rect(p.x + 16, p.y + 22, 2, 2, arcade.color.BLACK, ox, oy)

    def _draw_hud(self, hud):
        mute = "  [muted]" if self.game.audio.muted else ""
        txt = (f"Energy: {hud['energy']}   "
               f"Steps: {hud['steps']}   "
               f"Time: {hud['time']}{mute}")
        arcade.draw_text(txt, 28, self.height - 14, self.TEXT_C, 12, anchor_y="center")

    def _draw_title(self):
        self._text("ONE MORE STEP", 200, self.GOAL_C, 40, bold=True)
        self._text("Every step costs energy. Reach the goal before it runs out.", 280)
        self._text("ENTER - play      H - how to play", 360, self.DIM_C)

    def _draw_instructions(self):
        self._text("HOW TO PLAY", 140, self.GOAL_C, 28, bold=True)
        lines = [
            "WASD / arrow keys: move one tile",
            "Each move costs 1 energy",
            "Touching a red hazard costs 10 energy every frame",
            "Reach the green tile to win",
            "R: restart    M: mute    ESC: back",
        ]
        for i, line in enumerate(lines):
            self._text(line, 220 + i * 40)
        self._text("ENTER - play", 460, self.DIM_C)

    def _draw_result(self, heading, lines, color):
        arcade.draw_lrbt_rectangle_filled(150, self.width - 150, 170, self.height - 170,
                                          (10, 10, 20, 220))
        self._text(heading, 220, color, 30, bold=True)
        for i, line in enumerate(lines):
            self._text(line, 280 + i * 32)
        self._text("ENTER - play again    ESC - title", 400, self.DIM_C, 14)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Play One More Step")
    parser.add_argument("--mute", action="store_true", help="Start with sound muted")
    parser.add_argument("--seed", type=int, default=None, help="Seed for confetti / shake randomness")
    args = parser.parse_args(argv)

    game = MazeGame(audio=ArcadeAudio(muted=args.mute), rng=random.Random(args.seed))
    MazeWindow(game)
    arcade.run()


if __name__ == "__main__":
    main()
