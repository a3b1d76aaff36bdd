import pygame
import pytest

from solong.cli import main


def _xpm(color_hex):
    return (
        "/* XPM */\n"
        "static char * tile_xpm[] = {\n"
        '"2 2 1 1",\n'
        f'"a c #{color_hex}",\n'
        '"aa",\n'
        '"aa"};\n'
    )


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _add_textures(directory):
    textures = directory / "textures"
    textures.mkdir()
    for name in ("grass.xpm", "empty.xpm", "collectible.xpm", "character.xpm"):
        (textures / name).write_text(_xpm("336699"), encoding="ascii")


def _add_map(directory, text="111\n1P1\n1C1\n111\n"):
    path = directory / "level.ber"
    path.write_text(text, encoding="utf-8")
    return str(path)


def _feed(monkeypatch, events):
    stream = iter(events)
    monkeypatch.setattr(pygame.event, "wait", lambda *args, **kwargs: next(stream))


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().out == ""


def test_map_not_rectangle(workdir, capsys):
    path = _add_map(workdir, "111\n1P\n")
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nMap is not rectangle\n"


def test_missing_textures(workdir, capsys):
    path = _add_map(workdir)
    assert main([path]) == 1
    assert capsys.readouterr().out == "Error\nFailed to load wall.xpm\n"


def test_escape_exits(workdir, monkeypatch, capsys):
    _add_textures(workdir)
    path = _add_map(workdir)
    _feed(
        monkeypatch,
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
        ],
    )
    assert main([path]) == 0
    assert capsys.readouterr().out.endswith("Exit with ESC\n")


def test_window_close_exits(workdir, monkeypatch, capsys):
    _add_textures(workdir)
    path = _add_map(workdir)
    _feed(monkeypatch, [pygame.event.Event(pygame.QUIT)])
    assert main([path]) == 0
    assert capsys.readouterr().out.endswith("Window Closed\n")