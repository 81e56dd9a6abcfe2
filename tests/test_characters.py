import pytest

from arcadelab.characters import CHARACTER_SPEED, Bob, Key, PlayableCharacter, Thomas
from arcadelab.geometry import Vector2
from arcadelab.textures import TextureCache


def make(cls):
    character = cls(size=Vector2(40, 80))
    character.spawn(Vector2(100, 200), 300)
    return character


def test_abstract_base_cannot_be_created():
    with pytest.raises(TypeError):
        PlayableCharacter()


def test_jump_durations_from_source():
    assert Thomas().jump_duration == 0.45
    assert Bob().jump_duration == 0.25


def test_spawn_sets_position_and_gravity():
    thomas = make(Thomas)
    assert thomas.position == Vector2(100, 200)
    assert thomas.gravity == 300
    assert thomas.bounds().left == 100
    assert thomas.bounds().top == 200


def test_thomas_jump_starts_once():
    thomas = make(Thomas)
    assert thomas.handle_input({Key.W}) is True
    assert thomas.is_jumping
    assert thomas.handle_input({Key.W}) is False
    assert thomas.is_jumping


def test_releasing_jump_key_starts_fall():
    bob = make(Bob)
    assert bob.handle_input(set()) is False
    assert bob.is_falling
    assert not bob.is_jumping
    assert bob.handle_input({Key.UP}) is False


def test_keys_are_per_character():
    thomas = make(Thomas)
    bob = make(Bob)
    thomas.handle_input({Key.LEFT, Key.D})
    bob.handle_input({Key.LEFT, Key.D})
    assert not thomas.left_pressed and thomas.right_pressed
    assert bob.left_pressed and not bob.right_pressed


def test_update_moves_right_by_speed():
    thomas = make(Thomas)
    thomas.handle_input({Key.D, Key.W})
    thomas.is_jumping = False
    thomas.update(0.5)
    assert thomas.position.x == pytest.approx(100 + CHARACTER_SPEED * 0.5)
    assert thomas.position.y == pytest.approx(200)


def test_jump_rises_then_falls():
    thomas = make(Thomas)
    thomas.handle_input({Key.W})
    thomas.update(0.1)
    assert thomas.position.y < 200
    thomas.update(1.0)
    assert not thomas.is_jumping
    assert thomas.is_falling


def test_body_parts_follow_bounds():
    bob = make(Bob)
    bob.update(0.0)
    r = bob.bounds()
    assert bob.feet.top == pytest.approx(r.top + r.height + 1)
    assert bob.feet.width == pytest.approx(r.width - 6)
    assert bob.head.top == pytest.approx(r.top + r.height * 0.3)
    assert bob.head.height == 15
    assert bob.right.left == pytest.approx(r.left + r.width - 2)
    assert bob.left.left == pytest.approx(r.left + 1)


def test_stop_falling_places_on_surface():
    bob = make(Bob)
    bob.handle_input(set())
    bob.stop_falling(500)
    assert bob.position.y == pytest.approx(500 - bob.bounds().height)
    assert not bob.is_falling


def test_stop_falling_ignored_while_jumping():
    thomas = make(Thomas)
    thomas.handle_input({Key.W})
    thomas.stop_falling(500)
    assert thomas.position.y == 200


def test_stop_right_and_left():
    thomas = make(Thomas)
    thomas.stop_right(300)
    assert thomas.position.x == pytest.approx(300 - thomas.bounds().width)
    thomas.stop_left(300)
    assert thomas.position.x == pytest.approx(300 + thomas.bounds().width)


def test_stop_jump():
    thomas = make(Thomas)
    thomas.handle_input({Key.W})
    thomas.stop_jump()
    assert not thomas.is_jumping
    assert thomas.is_falling


def test_center_is_middle_of_bounds():
    thomas = make(Thomas)
    r = thomas.bounds()
    assert thomas.center() == Vector2(r.left + r.width / 2, r.top + r.height / 2)


def test_texture_loaded_through_cache():
    cache = TextureCache(loader=lambda name: name.upper())
    bob = Bob(cache, size=Vector2(10, 10))
    assert bob.sprite.texture == "GRAPHICS/BOB.PNG"
    assert "graphics/bob.png" in cache