import logging
import os
import os.path
from collections import namedtuple

from PIL import Image, UnidentifiedImageError


log = logging.getLogger(__name__)

Mesh = namedtuple("Mesh", "vertices texcoords normals faces")


def _objIndex(token, count, required=False):
    """Zero-based index of a 1-based (or negative, from the end) OBJ index"""
    if token == "":
        if required:
            raise ValueError("face vertex without a position index")
        return None
    i = int(token)
    if i == 0:
        raise ValueError("OBJ indices start at 1")
    index = count + i if i < 0 else i - 1
    if not 0 <= index < count:
        raise ValueError("index %d out of range, %d defined" % (i, count))
    return index


def _coords(args, count):
    if len(args) < count:
        raise ValueError("expected %d coordinates, got %d" % (count, len(args)))
    return tuple(float(a) for a in args[:count])


def parseOBJ(lines):
    vertices = []
    texcoords = []
    normals = []
    faces = []
    for lineno, line in enumerate(lines, 1):
        parts = line.split("#", 1)[0].split()
        if not parts:
            continue
        kind, args = parts[0], parts[1:]
        try:
            if kind == "v":
                vertices.append(_coords(args, 3))
            elif kind == "vt":
                texcoords.append(_coords(args, 2))
            elif kind == "vn":
                normals.append(_coords(args, 3))
            elif kind == "f":
                if len(args) < 3:
                    raise ValueError("face needs at least 3 vertices")
                face = []
                for arg in args:
                    refs = arg.split("/") + ["", ""]
                    face.append((
                        _objIndex(refs[0], len(vertices), required=True),
                        _objIndex(refs[1], len(texcoords)),
                        _objIndex(refs[2], len(normals)),
                    ))
                faces.append(face)
            # groups, objects, materials and smoothing are not needed
        except ValueError as e:
            raise ValueError("line %d: %s" % (lineno, e)) from e
    return Mesh(vertices, texcoords, normals, faces)


def loadOBJ(path):
    with open(path, "r", encoding="utf-8") as f:
        return parseOBJ(f)


def makeDummyImage():
    dummy = Image.new("RGBA", (2, 2))
    dummy.putpixel((0, 0), (255, 0, 255, 255))
    dummy.putpixel((0, 1), (0, 0, 0, 255))
    dummy.putpixel((1, 0), (0, 0, 0, 255))
    dummy.putpixel((1, 1), (255, 0, 255, 255))
    return dummy


class MediaCache(object):
    """Textures and meshes by file name, loaded once per run"""

    def __init__(self):
        self.images = {}
        self.meshes = {}
        self.dummy_image = makeDummyImage()

    def fetchMedia(self, path):
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for name in sorted(files):
                full_path = os.path.join(root, name)
                ext = os.path.splitext(name)[1].lower()
                if ext == ".png":
                    try:
                        with Image.open(full_path) as img:
                            self.images[name] = img.convert("RGBA")
                    except (OSError, UnidentifiedImageError) as e:
                        log.warning("skipping unreadable image %s: %s", full_path, e)
                elif ext == ".obj":
                    log.debug("loading mesh %s", full_path)
                    try:
                        self.meshes[name] = loadOBJ(full_path)
                    except (OSError, ValueError) as e:
                        log.warning("skipping unreadable mesh %s: %s", full_path, e)

    def image(self, name):
        if name in self.images:
            return self.images[name]
        log.info("unknown image: %s", name)
        return self.dummy_image

    def mesh(self, name):
        if name in self.meshes:
            return self.meshes[name]
        log.info("unknown mesh: %s", name)
        return None
