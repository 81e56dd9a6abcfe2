import pytest

from arcadelab.session import (
    LEVEL_UP_TEXT,
    POINTS_PER_KILL,
    ArenaSession,
    GameState,
    HudText,
    Scoreboard,
    Upgrade,
    hud_text,
    load_hi_score,
    save_hi_score,
    wave_arena,
    wave_zombie_count,
)


def _playing_session(tmp_path=None, upgrade=Upgrade.FIRE_RATE):
    session = ArenaSession(scores_path=tmp_path)
    session.press_return()
    session.choose_upgrade(upgrade)
    return session


def test_scoreboard_kill_raises_score_and_hi_score():
    board = Scoreboard()
    board.record_kill()
    assert board.score == POINTS_PER_KILL
    assert board.hi_score == board.score


def test_scoreboard_keeps_higher_hi_score():
    board = Scoreboard(hi_score=1000)
    board.record_kill()
    assert board.score == POINTS_PER_KILL
    assert board.hi_score == 1000


def test_scoreboard_reset_keeps_hi_score():
    board = Scoreboard()
    board.record_kill()
    board.record_kill()
    best = board.hi_score
    board.reset()
    assert board.score == 0
    assert board.hi_score == best


def test_hi_score_round_trip(tmp_path):
    path = tmp_path / "gamedata" / "scores.txt"
    save_hi_score(path, 370)
    assert load_hi_score(path) == 370


def test_load_hi_score_missing_file(tmp_path):
    assert load_hi_score(tmp_path / "nothing.txt") == 0


def test_load_hi_score_unreadable_contents(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("not a number")
    assert load_hi_score(path) == 0


def test_load_hi_score_reads_leading_number(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("  250 extra\n")
    assert load_hi_score(path) == 250


def test_wave_arena_grows_with_wave():
    first = wave_arena(1)
    third = wave_arena(3)
    assert (first.left, first.top) == (0, 0)
    assert first.width == 500
    assert first.width == first.height
    assert third.width == 3 * first.width


def test_wave_zombie_count():
    assert wave_zombie_count(1) == 5
    assert wave_zombie_count(4) == 4 * wave_zombie_count(1)


@pytest.mark.parametrize("bad", [0, -1])
def test_waves_start_at_one(bad):
    with pytest.raises(ValueError):
        wave_arena(bad)
    with pytest.raises(ValueError):
        wave_zombie_count(bad)


def test_hud_text_format():
    text = hud_text(6, 24, 30, 90, 2, 7)
    assert text == HudText("6/24", "Score:30", "Hi Score:90", "Wave:2", "Zombies:7")


def test_level_up_text_lists_every_upgrade():
    lines = LEVEL_UP_TEXT.split("\n")
    assert len(lines) == len(Upgrade)
    assert lines[0] == "1- Increased rate of fire"
    assert lines[-1] == "6- More and better ammo pickups"


def test_session_starts_in_game_over():
    session = ArenaSession()
    assert session.state is GameState.GAME_OVER
    assert session.wave == 0


def test_return_from_game_over_goes_to_leveling_up():
    session = ArenaSession()
    assert session.press_return() is GameState.LEVELING_UP


def test_upgrade_ignored_outside_leveling_up():
    session = ArenaSession()
    assert session.choose_upgrade(Upgrade.FIRE_RATE) is False
    assert session.state is GameState.GAME_OVER
    assert session.gun.fire_rate == 1


def test_choose_upgrade_starts_wave():
    session = _playing_session()
    assert session.state is GameState.PLAYING
    assert session.wave == 1
    assert session.arena == wave_arena(1)
    assert len(session.zombies) == wave_zombie_count(1)
    assert session.zombies_alive == len(session.zombies)
    assert all(zombie.alive for zombie in session.zombies)
    assert session.health_pickup.spawned
    assert session.ammo_pickup.spawned
    assert session.tile_size == 50


def test_fire_rate_upgrade():
    session = _playing_session(upgrade=Upgrade.FIRE_RATE)
    assert session.gun.fire_rate == 2


def test_clip_size_upgrade_accepts_number():
    session = ArenaSession()
    session.press_return()
    assert session.choose_upgrade(2) is True
    assert session.gun.clip_size == 12


def test_pickup_upgrades():
    health = _playing_session(upgrade=Upgrade.HEALTH_PICKUP)
    assert health.health_pickup.value > health.ammo_pickup.kind.start_value
    assert health.health_pickup.value > health.health_pickup.kind.start_value
    ammo = _playing_session(upgrade=Upgrade.AMMO_PICKUP)
    assert ammo.ammo_pickup.value > ammo.ammo_pickup.kind.start_value
    assert ammo.health_pickup.value == ammo.health_pickup.kind.start_value


def test_player_upgrades_are_counted():
    session = _playing_session(upgrade=Upgrade.MAX_HEALTH)
    assert session.max_health_upgrades == 1
    assert session.speed_upgrades == 0


def test_return_pauses_and_resumes():
    session = _playing_session()
    assert session.press_return() is GameState.PAUSED
    assert session.press_return() is GameState.PLAYING


def test_killing_every_zombie_ends_wave():
    session = _playing_session()
    count = session.zombies_alive
    results = [session.zombie_killed() for _ in range(count)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert session.state is GameState.LEVELING_UP
    assert session.scoreboard.score == count * POINTS_PER_KILL


def test_next_wave_is_bigger():
    session = _playing_session()
    for _ in range(session.zombies_alive):
        session.zombie_killed()
    session.choose_upgrade(Upgrade.RUN_SPEED)
    assert session.wave == 2
    assert len(session.zombies) == wave_zombie_count(2)
    assert session.speed_upgrades == 1


def test_player_died_saves_hi_score(tmp_path):
    path = tmp_path / "scores.txt"
    session = _playing_session(path)
    session.zombie_killed()
    session.player_died()
    assert session.state is GameState.GAME_OVER
    assert load_hi_score(path) == session.scoreboard.hi_score


def test_hi_score_loaded_at_start(tmp_path):
    path = tmp_path / "scores.txt"
    save_hi_score(path, 120)
    session = ArenaSession(scores_path=path)
    assert session.scoreboard.hi_score == 120
    assert session.hud().hi_score == "Hi Score:120"


def test_new_game_resets_progress():
    session = _playing_session(upgrade=Upgrade.CLIP_SIZE)
    session.zombie_killed()
    session.gun.add_ammo(12)
    session.player_died()
    best = session.scoreboard.hi_score
    session.press_return()
    assert session.state is GameState.LEVELING_UP
    assert session.wave == 0
    assert session.scoreboard.score == 0
    assert session.scoreboard.hi_score == best
    assert session.gun.clip_size == 6
    assert session.gun.bullets_spare == 24


def test_session_hud_matches_state():
    session = _playing_session()
    hud = session.hud()
    assert hud.wave == "Wave:1"
    assert hud.zombies == f"Zombies:{session.zombies_alive}"
    assert hud.ammo == f"{session.gun.bullets_in_clip}/{session.gun.bullets_spare}"