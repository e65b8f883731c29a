"""Tests for state transitions, reset, timer and snapshots."""

import dataclasses

import pytest

from game.maze.entities import GameState
from game.maze.simulation import MazeGame, TRANSITIONS


class TestTransitions:

    def test_initial_state_is_title(self, audio, clock):
        assert MazeGame(audio=audio, clock=clock).state is GameState.TITLE

    def test_start_enters_playing(self, audio, clock):
        g = MazeGame(audio=audio, clock=clock)
        g.start()
        assert g.state is GameState.PLAYING

    def test_restart_ignored_on_title(self, audio, clock):
        g = MazeGame(audio=audio, clock=clock)
        assert not g.restart()
        assert g.state is GameState.TITLE

    def test_go_to_title(self, game):
        game.go_to_title()
        assert game.state is GameState.TITLE

    @pytest.mark.parametrize("state", [GameState.WON, GameState.LOST])
    def test_start_from_terminal_states(self, game, state):
        game.state = state
        game.start()
        assert game.state is GameState.PLAYING

    @pytest.mark.parametrize("state", [GameState.WON, GameState.LOST])
    def test_restart_from_terminal_states(self, game, state):
        game.state = state
        assert game.restart()
        assert game.state is GameState.PLAYING

    def test_win_and_lose_only_from_playing(self, audio, clock):
        g = MazeGame(audio=audio, clock=clock)
        assert not g._transition("win")
        assert not g._transition("lose")
        assert g.state is GameState.TITLE

    def test_table_covers_every_target(self):
        targets = {target for _, target in TRANSITIONS.values()}
        assert targets == set(GameState)


class TestReset:

    def test_restart_resets_everything(self, game, clock):
        for _ in range(3):
            game.attempt_move(1, 0)
        for _ in range(20):
            game.tick()
        clock.advance(12)
        game.tick()
        assert game.elapsed_time == 12
        game.shake = 4.0
        game.particles.append(object())

        game.restart()

        assert (game.player.x, game.player.y) == (50, 550)
        assert game.player.energy == 100
        assert game.player.steps == 0
        assert [(h.x, h.direction) for h in game.hazards] == [
            (100, 1), (300, -1), (500, 1)]
        assert game.particles == []
        assert game.shake == 0.0
        assert game.elapsed_time == 0
        assert game.start_time == 12

    def test_restart_after_hazard_flip(self, game):
        for _ in range(200):
            game.tick()
        assert game.hazards[2].direction == -1

        game.restart()
        assert game.hazards[2].x == 500
        assert game.hazards[2].direction == 1


class TestTimerAndHud:

    def test_elapsed_time_sampled_on_tick(self, game, clock):
        clock.advance(65.5)
        game.tick()
        assert game.elapsed_time == 65
        assert game.hud() == {"energy": 100, "steps": 0, "time": "1:05"}

    def test_hud_tracks_moves(self, game):
        game.attempt_move(0, -1)
        assert game.hud()["energy"] == 99
        assert game.hud()["steps"] == 1


class TestSnapshot:

    def test_snapshot_is_a_copy(self, game):
        snap = game.snapshot()
        snap.player.x = 999
        snap.hazards[0].x = 999
        assert game.player.x == 50
        assert game.hazards[0].x == 100

    def test_snapshot_is_frozen(self, game):
        snap = game.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.shake = 3.0

    def test_snapshot_contents(self, game):
        snap = game.snapshot()
        assert snap.state is GameState.PLAYING
        assert len(snap.walls) == 7
        assert len(snap.hazards) == 3
        assert snap.particles == ()


class TestAudio:

    def test_muted_audio_plays_nothing(self, game, audio):
        assert audio.toggle_mute()
        game.attempt_move(1, 0)
        assert audio.played == []

        assert not audio.toggle_mute()
        game.attempt_move(1, 0)
        assert audio.played == ["move"]

    def test_unknown_effect_rejected(self, audio):
        with pytest.raises(ValueError):
            audio._play("explode")


class TestFailingAudio:
    """Sound failures warn and never leave a round unresolved."""

    def test_failing_move_sound_still_loses(self, broken_game):
        broken_game.player.energy = 1

        with pytest.warns(RuntimeWarning, match="move"):
            assert broken_game.attempt_move(1, 0)

        assert broken_game.player.energy == 0
        assert broken_game.state is GameState.LOST
        assert broken_game.audio.attempts == ["move", "lose"]

    def test_failing_move_sound_still_wins(self, broken_game):
        broken_game.player.x, broken_game.player.y = 730, 110

        with pytest.warns(RuntimeWarning):
            broken_game.attempt_move(0, -1)

        assert broken_game.state is GameState.WON
        assert len(broken_game.particles) == 50

    def test_failing_hit_sound_still_loses(self, broken_game):
        broken_game.player.x, broken_game.player.y = 130, 195
        broken_game.player.energy = 10

        with pytest.warns(RuntimeWarning, match="hit"):
            broken_game.tick()

        assert broken_game.player.energy == 0
        assert broken_game.state is GameState.LOST
        assert broken_game.audio.attempts == ["hit", "lose"]
