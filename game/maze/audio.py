"""
Sound effect hooks used by the simulation.

The base class is silent. Window code subclasses it and overrides
`_emit` to actually play something. A failing `_emit` is reported as a
warning and never reaches the simulation.
"""

import warnings


class Audio:
    """Fire-and-forget sound effects with a mute flag"""

    EFFECTS = ("move", "hit", "win", "lose")

    def __init__(self, muted: bool = False):
        self.muted = muted

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def play_move(self):
        self._play("move")

    def play_hit(self):
        self._play("hit")

    def play_win(self):
        self._play("win")

    def play_lose(self):
        self._play("lose")

    def _play(self, effect: str):
        if effect not in self.EFFECTS:
            raise ValueError(f"Unknown sound effect: {effect}")
        if self.muted:
            return
        try:
            self._emit(effect)
        except Exception as exc:
            warnings.warn(f"Could not play '{effect}' sound: {exc}", RuntimeWarning)

    def _emit(self, effect: str):
        pass
