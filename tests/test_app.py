import pygame
import pytest

from arcadelab.app import GameWindow
from arcadelab.game import Engine
from arcadelab.textures import TextureCache

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)

LEVEL = "\n".join(["000000"] * 6) + "\n"


def _load(filename):
    if filename.endswith("background.png"):
        surface = pygame.Surface((10, 10))
        surface.fill(RED)
    elif filename.endswith("tiles_sheet.png"):
        surface = pygame.Surface((50, 250), pygame.SRCALPHA)
    elif filename.endswith("thomas.png"):
        surface = pygame.Surface((50, 100))
        surface.fill(BLUE)
    else:
        surface = pygame.Surface((50, 50))
        surface.fill(GREEN)
    return surface


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    textures = TextureCache(_load)
    engine = Engine(textures, level_loader=lambda path: LEVEL)
    win = GameWindow(size=(200, 200), textures=textures, engine=engine)
    yield win
    pygame.quit()


def test_draw_full_view(window):
    window.engine.update(0.0)
    window.draw()
    assert window.screen.get_at((0, 0)) == RED + (255,)
    assert window.screen.get_at((199, 199)) == WHITE + (255,)
    # Bob is drawn over Thomas at the shared start point.
    assert window.screen.get_at((80, 55)) == GREEN + (255,)


def test_draw_split_view(window):
    window.engine.update(0.0)
    window.engine.split_screen = True
    window.draw()
    assert window.screen.get_at((0, 0)) == RED + (255,)
    assert window.screen.get_at((100, 0)) == RED + (255,)
    assert window.screen.get_at((99, 150)) == WHITE + (255,)


def test_run_stops_on_escape(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    frames = window.run()
    assert frames == 1
    assert window.engine.running is False
    assert window.engine.character1 is False
    assert window.engine.levels.current_level == 1


def test_run_stops_on_quit(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.run() == 1
    assert window.engine.running is False


def test_textures_loaded_once(window):
    assert "graphics/background.png" in window.textures
    assert window.textures.get("graphics/background.png") is window.background