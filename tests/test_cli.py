from minirt.camera import Camera
from minirt.cli import check_extension, main, move_origin
from minirt.vector import Vec

SCENE = (
    "map 4 3\n"
    "A 0.2 255,255,255\n"
    "C 0,0,5 0,0,-10 70\n"
    "L 0,5,5 0.6 255,255,255\n"
    "sp 0,0,0 1 255,0,0\n"
)


def _camera():
    return Camera.look(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, -10.0), 70.0, 1.5)


def test_check_extension():
    assert check_extension("scene.rt") is True
    assert check_extension("scene.txt") is False
    assert check_extension("rt") is False


def test_move_origin_up():
    camera = _camera()
    assert move_origin(camera, 13) == Vec(0.0, 5.0, 5.0)
    assert camera.origin == Vec(0.0, 5.0, 5.0)


def test_move_origin_unknown_key():
    camera = _camera()
    assert move_origin(camera, 99) is None
    assert camera.origin == Vec(0.0, 0.0, 5.0)


def test_main_without_input(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "no file input\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.rt")]) == 1
    assert capsys.readouterr().out == "error not specified yet : 2\n"


def test_main_wrong_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text(SCENE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "it's not .rt file"


def test_main_parse_error(tmp_path, capsys):
    path = tmp_path / "scene.rt"
    path.write_text("A 0.2\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "parsing error\n"


def test_main_renders_image(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE)
    out = tmp_path / "out.ppm"
    assert main([str(path), "-o", str(out)]) == 0
    data = out.read_bytes()
    assert data.startswith(b"P6\n4 3\n255\n")
    assert len(data) == len(b"P6\n4 3\n255\n") + 4 * 3 * 3


def test_main_moves_camera(tmp_path, capsys):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE)
    out = tmp_path / "out.ppm"
    assert main([str(path), "-o", str(out), "--move", "w"]) == 0
    assert capsys.readouterr().out.startswith("cam side :  is...x is 0.00 y is 5.00")
    assert out.exists()