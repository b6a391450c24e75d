import pytest

from cubcaster.elements import (
    ElementError,
    parse_rgb,
    parse_texture_path,
    validate_colors,
    validate_textures,
)
from cubcaster.scene import Scene


def make_scene(**overrides):
    values = dict(
        north="NO ./n.xpm",
        south="SO ./s.xpm",
        west="WE ./w.xpm",
        east="EA ./e.xpm",
        floor="F 220,100,0",
        ceiling="C 225,30,0",
        map_lines=["111"],
    )
    values.update(overrides)
    return Scene(**values)


def test_parse_rgb_plain():
    assert parse_rgb("F 220,100,0") == (220, 100, 0)


def test_parse_rgb_surrounding_spaces():
    assert parse_rgb("C    1,2,3   ") == (1, 2, 3)


def test_parse_rgb_limits():
    assert parse_rgb("F 0,255,0") == (0, 255, 0)


@pytest.mark.parametrize(
    "line",
    [
        "F220,100,0",
        "F 256,0,0",
        "F 1,2",
        "F 1,,2",
        "F -1,2,3",
        "F 1, 2,3",
        "F a,b,c",
        "F 1,2,3,4",
        "F",
        "F ",
    ],
)
def test_parse_rgb_rejects(line):
    with pytest.raises(ElementError):
        parse_rgb(line)


def test_texture_path_existing_file(tmp_path):
    texture = tmp_path / "wall.xpm"
    texture.write_text("x")
    assert parse_texture_path(f"NO {texture}") == str(texture)


def test_texture_path_without_check():
    assert parse_texture_path("SO ./textures/south.xpm", False) == "./textures/south.xpm"


def test_texture_path_tab_separator():
    assert parse_texture_path("WE\t./a.xpm", False) == "./a.xpm"


@pytest.mark.parametrize(
    "line",
    [
        "NO./a.xpm",
        "NO",
        "NO ./a.png",
        "NO ./a.xpm ",
        "NO .xpm",
        "NO ./a.xpm.xpm",
    ],
)
def test_texture_path_rejects(line):
    with pytest.raises(ElementError):
        parse_texture_path(line, False)


def test_texture_path_missing_file(tmp_path):
    with pytest.raises(ElementError):
        parse_texture_path(f"NO {tmp_path / 'absent.xpm'}", True)


def test_validate_colors_returns_ceiling_then_floor():
    ceiling, floor = validate_colors(make_scene())
    assert ceiling == (225, 30, 0)
    assert floor == (220, 100, 0)


def test_validate_colors_reports_ceiling_first():
    scene = make_scene(ceiling="C 1,2", floor="F x")
    with pytest.raises(ElementError, match="check ceiling"):
        validate_colors(scene)


def test_validate_colors_reports_floor():
    with pytest.raises(ElementError, match="check floor"):
        validate_colors(make_scene(floor="F 300,0,0"))


def test_validate_textures_paths():
    textures = validate_textures(make_scene(), False)
    assert textures == {
        "south": "./s.xpm",
        "north": "./n.xpm",
        "west": "./w.xpm",
        "east": "./e.xpm",
    }


def test_validate_textures_checks_south_first():
    scene = make_scene(north="NO bad", south="SO bad", west="WE bad", east="EA bad")
    with pytest.raises(ElementError, match="check south texture"):
        validate_textures(scene, False)


def test_validate_textures_reports_east():
    with pytest.raises(ElementError, match="check east texture"):
        validate_textures(make_scene(east="EA ./e.png"), False)


def test_validate_textures_checks_files(tmp_path):
    paths = {}
    for name in ("n", "s", "w", "e"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("x")
        paths[name] = str(path)
    scene = make_scene(
        north=f"NO {paths['n']}",
        south=f"SO {paths['s']}",
        west=f"WE {paths['w']}",
        east=f"EA {paths['e']}",
    )
    textures = validate_textures(scene, True)
    assert textures["north"] == paths["n"]
    assert textures["east"] == paths["e"]
    with pytest.raises(ElementError, match="check south texture"):
        validate_textures(make_scene(), True)