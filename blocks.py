"""Isometric node images built from flat textures with Pillow.

Every builder returns a NODE_SIZE x NODE_SIZE RGBA image in which the node
center sits at the middle of the image, the top face is the upper rhombus
and the +x and +z faces are the lower left and lower right parallelograms.
"""
import math

from PIL import Image, ImageDraw, ImageStat

from constants import NODE_SIZE, MAX_LIGHT, MIN_BRIGHTNESS


HALF = NODE_SIZE // 2
QUARTER = NODE_SIZE // 4

LEFT_SIDE_BRIGHTNESS = 0.8
RIGHT_SIDE_BRIGHTNESS = 0.65


def _transform(texture, data):
    texture = texture.convert("RGBA")
    return texture.transform(
        (NODE_SIZE, NODE_SIZE),
        Image.Transform.AFFINE,
        data,
        resample=Image.Resampling.NEAREST,
    )


def _top(texture, offset=0):
    w, h = texture.size
    # inverse mapping of the rhombus (0,q) (h,0) (2h,q) (h,2q), see module docstring
    return _transform(texture, (
        w / NODE_SIZE, -w / HALF, w * (QUARTER + offset) / HALF,
        h / NODE_SIZE, h / HALF, -h * (QUARTER + offset) / HALF,
    ))


def _left(texture):
    w, h = texture.size
    return _transform(texture, (
        w / HALF, 0, 0,
        -h / NODE_SIZE, h / HALF, -h * QUARTER / HALF,
    ))


def _right(texture):
    w, h = texture.size
    return _transform(texture, (
        w / HALF, 0, -w,
        h / NODE_SIZE, h / HALF, -h * (HALF + QUARTER) / HALF,
    ))


def brighten(image, factor):
    """Scale the color channels of an RGBA image, keeping its alpha"""
    image = image.convert("RGBA")
    alpha = image.getchannel("A")
    rgb = image.convert("RGB").point(lambda c: min(255, int(c * factor)))
    rgb.putalpha(alpha)
    return rgb


def shade(image, light):
    light = max(0, min(MAX_LIGHT, light))
    if light == MAX_LIGHT:
        return image
    return brighten(image, MIN_BRIGHTNESS + (1.0 - MIN_BRIGHTNESS) * light / MAX_LIGHT)


def build_block(top, side):
    """Draw a full cube, top and two visible sides"""
    img = Image.new("RGBA", (NODE_SIZE, NODE_SIZE))
    if side is not None:
        img.alpha_composite(brighten(_left(side), LEFT_SIDE_BRIGHTNESS))
        img.alpha_composite(brighten(_right(side), RIGHT_SIDE_BRIGHTNESS))
    if top is not None:
        img.alpha_composite(_top(top))
    return img


def build_flat(bottom):
    """A flat node lying on the ground, like a lily pad"""
    img = Image.new("RGBA", (NODE_SIZE, NODE_SIZE))
    img.alpha_composite(_top(bottom, offset=HALF))
    return img


def build_sprite(side):
    """An upright texture facing the viewer, like a flower"""
    img = Image.new("RGBA", (NODE_SIZE, NODE_SIZE))
    sprite = side.convert("RGBA").resize((HALF + QUARTER, HALF + QUARTER), Image.Resampling.NEAREST)
    img.alpha_composite(sprite, ((NODE_SIZE - sprite.width) // 2, NODE_SIZE - sprite.height - QUARTER // 2))
    return img


def project(vertex):
    x, y, z = vertex
    return HALF + HALF * (z - x), HALF + QUARTER * (x + z - 2 * y)


def _normal(points):
    (ax, ay, az), (bx, by, bz), (cx, cy, cz) = points[:3]
    ux, uy, uz = bx - ax, by - ay, bz - az
    vx, vy, vz = cx - ax, cy - ay, cz - az
    nx, ny, nz = uy * vz - uz * vy, uz * vx - ux * vz, ux * vy - uy * vx
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length == 0:
        return None
    return nx / length, ny / length, nz / length


def build_mesh(mesh, texture):
    """Flat shaded mesh in node units, colored with the texture's mean color"""
    img = Image.new("RGBA", (NODE_SIZE, NODE_SIZE))
    draw = ImageDraw.Draw(img)
    stat = ImageStat.Stat(texture.convert("RGBA"))
    color = tuple(int(c) for c in stat.mean[:3])

    polygons = []
    for face in mesh.faces:
        points = [mesh.vertices[v] for v, vt, vn in face]
        normal = _normal(points)
        if normal is None:
            continue
        depth = sum(x + y + z for x, y, z in points) / len(points)
        brightness = RIGHT_SIDE_BRIGHTNESS + (1.0 - RIGHT_SIDE_BRIGHTNESS) * abs(normal[1])
        polygons.append((depth, [project(p) for p in points], brightness))

    # back to front
    polygons.sort(key=lambda p: p[0])
    for depth, points, brightness in polygons:
        fill = tuple(min(255, int(c * brightness)) for c in color) + (255, )
        draw.polygon(points, fill=fill)
    return img


def alpha_over(canvas, image, position, mask=None):
    if mask is None:
        mask = image
    canvas.paste(image, position, mask)
