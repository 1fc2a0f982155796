import pytest
from PIL import Image

from media import MediaCache, loadOBJ, parseOBJ


CUBE_FACE_OBJ = """\
# a single quad
o quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4//1
f -4 -3 -2
"""


def test_dummy_image_is_checkerboard():
    media = MediaCache()
    img = media.image("nope.png")
    assert img.size == (2, 2)
    assert img.getpixel((0, 0)) == (255, 0, 255, 255)
    assert img.getpixel((1, 1)) == (255, 0, 255, 255)
    assert img.getpixel((0, 1)) == (0, 0, 0, 255)
    assert img.getpixel((1, 0)) == (0, 0, 0, 255)
    assert media.image("other.png") is img


def test_parse_obj():
    mesh = parseOBJ(CUBE_FACE_OBJ.splitlines())
    assert len(mesh.vertices) == 4
    assert mesh.vertices[2] == (1.0, 1.0, 0.0)
    assert mesh.texcoords[1] == (1.0, 0.0)
    assert mesh.normals == [(0.0, 0.0, 1.0)]
    assert mesh.faces[0] == [(0, 0, 0), (1, 1, 0), (2, 2, 0), (3, None, 0)]
    assert mesh.faces[1] == [(0, None, None), (1, None, None), (2, None, None)]


@pytest.mark.parametrize("text", [
    "v 0 0 0\nf 0 1 1\n",
    "v 0 0 0\nf 1 1\n",
    "v a b c\n",
    "v 0 0\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 5\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -5 1 2\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nf 1/2 2/1 3/1\n",
    "v 0 0 0\nv 1 0 0\nv 0 1 0\nf //1 2 3\n",
])
def test_parse_obj_errors(text):
    with pytest.raises(ValueError):
        parseOBJ(text.splitlines())


def test_fetch_media(tmp_path):
    nested = tmp_path / "mods" / "default" / "textures"
    nested.mkdir(parents=True)
    Image.new("RGB", (16, 16), (10, 20, 30)).save(str(nested / "default_stone.png"))
    (nested / "broken.png").write_bytes(b"not a png")
    models = tmp_path / "mods" / "doors" / "models"
    models.mkdir(parents=True)
    (models / "door_a.obj").write_text(CUBE_FACE_OBJ)

    media = MediaCache()
    media.fetchMedia(str(tmp_path))

    stone = media.image("default_stone.png")
    assert stone.mode == "RGBA"
    assert stone.getpixel((0, 0)) == (10, 20, 30, 255)
    assert media.image("broken.png") is media.dummy_image
    assert media.mesh("door_a.obj") == loadOBJ(str(models / "door_a.obj"))
    assert media.mesh("door_b.obj") is None


def test_fetch_media_skips_malformed_mesh(tmp_path, caplog):
    (tmp_path / "good.obj").write_text(CUBE_FACE_OBJ)
    (tmp_path / "bad.obj").write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 9\n")

    media = MediaCache()
    media.fetchMedia(str(tmp_path))

    assert "skipping unreadable mesh" in caplog.text
    assert "bad.obj" not in media.meshes
    assert media.mesh("bad.obj") is None
    assert len(media.mesh("good.obj").faces) == 2
