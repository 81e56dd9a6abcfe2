"""Game flow of the zombie arena: states, waves, upgrades, scores and the HUD text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from arcadelab.arena import create_background, create_horde
from arcadelab.geometry import Quad, Rect
from arcadelab.pickup import Pickup, PickupKind
from arcadelab.weapons import Gun
from arcadelab.zombie import Zombie

POINTS_PER_KILL = 10
ARENA_SIZE_PER_WAVE = 500
ZOMBIES_PER_WAVE = 5
DEFAULT_SCORES_PATH = "gamedata/scores.txt"

_LEADING_INT = re.compile(r"[+-]?\d+")


class GameState(Enum):
    """The state the arena game is in."""

    PAUSED = "paused"
    LEVELING_UP = "leveling_up"
    GAME_OVER = "game_over"
    PLAYING = "playing"


class Upgrade(Enum):
    """The upgrades offered between waves, numbered as on the level-up screen."""

    FIRE_RATE = 1
    CLIP_SIZE = 2
    MAX_HEALTH = 3
    RUN_SPEED = 4
    HEALTH_PICKUP = 5
    AMMO_PICKUP = 6

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Upgrade.FIRE_RATE: "Increased rate of fire",
    Upgrade.CLIP_SIZE: "Increased clip size(next reload)",
    Upgrade.MAX_HEALTH: "Increased max health",
    Upgrade.RUN_SPEED: "Increased run speed",
    Upgrade.HEALTH_PICKUP: "More and better health pickups",
    Upgrade.AMMO_PICKUP: "More and better ammo pickups",
}

LEVEL_UP_TEXT = "\n".join(f"{upgrade.value}- {upgrade.description}" for upgrade in Upgrade)
PAUSED_TEXT = "Press Enter \nto continue"
GAME_OVER_TEXT = "Press Enter to play"


@dataclass
class Scoreboard:
    """The current score and the best score seen so far."""

    score: int = 0
    hi_score: int = 0

    def record_kill(self) -> None:
        """Award the points for a kill, raising the high score if it is beaten."""
        self.score += POINTS_PER_KILL
        if self.score >= self.hi_score:
            self.hi_score = self.score

    def reset(self) -> None:
        """Start a new game's score; the high score is kept."""
        self.score = 0


def load_hi_score(path: str | Path) -> int:
    """Read the high score from ``path``; 0 if the file is missing or unreadable."""
    try:
        text = Path(path).read_text()
    except OSError:
        return 0
    match = _LEADING_INT.match(text.lstrip())
    return int(match.group()) if match else 0


def save_hi_score(path: str | Path, hi_score: int) -> None:
    """Write the high score to ``path``, creating its directory if needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(str(hi_score))


def wave_arena(wave: int) -> Rect:
    """Return the arena for a wave; it grows with each wave."""
    if wave < 1:
        raise ValueError(f"waves are numbered from 1, got {wave}")
    size = ARENA_SIZE_PER_WAVE * wave
    return Rect(0, 0, size, size)


def wave_zombie_count(wave: int) -> int:
    """Return how many zombies a wave holds."""
    if wave < 1:
        raise ValueError(f"waves are numbered from 1, got {wave}")
    return ZOMBIES_PER_WAVE * wave


@dataclass(frozen=True)
class HudText:
    """The strings shown on the heads-up display."""

    ammo: str
    score: str
    hi_score: str
    wave: str
    zombies: str


def hud_text(
    bullets_in_clip: int,
    bullets_spare: int,
    score: int,
    hi_score: int,
    wave: int,
    zombies_alive: int,
) -> HudText:
    """Format the heads-up display strings."""
    return HudText(
        ammo=f"{bullets_in_clip}/{bullets_spare}",
        score=f"Score:{score}",
        hi_score=f"Hi Score:{hi_score}",
        wave=f"Wave:{wave}",
        zombies=f"Zombies:{zombies_alive}",
    )


class ArenaSession:
    """Drives the arena game from one state to the next.

    If ``scores_path`` is given, the high score is loaded from it at the start
    and saved to it when the player dies.
    """

    def __init__(self, scores_path: str | Path | None = None, gun: Gun | None = None) -> None:
        self.scores_path = Path(scores_path) if scores_path is not None else None
        self.state = GameState.GAME_OVER
        self.wave = 0
        hi_score = load_hi_score(self.scores_path) if self.scores_path is not None else 0
        self.scoreboard = Scoreboard(hi_score=hi_score)
        self.gun = gun if gun is not None else Gun()
        self.health_pickup = Pickup(PickupKind.HEALTH)
        self.ammo_pickup = Pickup(PickupKind.AMMO)
        self.max_health_upgrades = 0
        self.speed_upgrades = 0
        self.arena = Rect()
        self.background: list[Quad] = []
        self.tile_size = 0
        self.zombies: list[Zombie] = []
        self.zombies_alive = 0

    def press_return(self) -> GameState:
        """Pause, resume, or start a new game, depending on the state."""
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
        elif self.state is GameState.GAME_OVER:
            self.state = GameState.LEVELING_UP
            self.wave = 0
            self.scoreboard.reset()
            self.gun.reset()
            self.max_health_upgrades = 0
            self.speed_upgrades = 0
        return self.state

    def choose_upgrade(self, upgrade: Upgrade | int) -> bool:
        """Apply an upgrade and start the next wave.

        Only has an effect while levelling up; returns True if it did.
        """
        if self.state is not GameState.LEVELING_UP:
            return False
        upgrade = Upgrade(upgrade)
        if upgrade is Upgrade.FIRE_RATE:
            self.gun.upgrade_fire_rate()
        elif upgrade is Upgrade.CLIP_SIZE:
            self.gun.upgrade_clip_size()
        elif upgrade is Upgrade.MAX_HEALTH:
            self.max_health_upgrades += 1
        elif upgrade is Upgrade.RUN_SPEED:
            self.speed_upgrades += 1
        elif upgrade is Upgrade.HEALTH_PICKUP:
            self.health_pickup.upgrade()
        else:
            self.ammo_pickup.upgrade()
        self.state = GameState.PLAYING
        self._start_wave()
        return True

    def _start_wave(self) -> None:
        self.wave += 1
        self.arena = wave_arena(self.wave)
        self.background, self.tile_size = create_background(self.arena)
        self.zombies = create_horde(wave_zombie_count(self.wave), self.arena)
        self.zombies_alive = len(self.zombies)
        self.health_pickup.set_arena(self.arena)
        self.ammo_pickup.set_arena(self.arena)

    def zombie_killed(self) -> bool:
        """Score a kill; return True if it cleared the wave."""
        self.scoreboard.record_kill()
        self.zombies_alive -= 1
        if self.zombies_alive == 0:
            self.state = GameState.LEVELING_UP
            return True
        return False

    def player_died(self) -> None:
        """End the game, saving the high score if a scores file is set."""
        if self.scores_path is not None:
            save_hi_score(self.scores_path, self.scoreboard.hi_score)
        self.state = GameState.GAME_OVER

    def hud(self) -> HudText:
        """Return the heads-up display strings for the current session."""
        return hud_text(
            self.gun.bullets_in_clip,
            self.gun.bullets_spare,
            self.scoreboard.score,
            self.scoreboard.hi_score,
            self.wave,
            self.zombies_alive,
        )