"""Command-line entry points producing the example images and simulations."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator

from raytrace.camera import Camera
from raytrace.canvas import Canvas
from raytrace.colors import Color
from raytrace.light import PointLight, lighting
from raytrace.material import Material
from raytrace.matrix import identity
from raytrace.projectile import Environment, Projectile, tick
from raytrace.ray import Ray
from raytrace.render import render
from raytrace.shading import intersect
from raytrace.shapes import sphere
from raytrace.transformations import scale, translate, view_transform
from raytrace.tuples import point, vector
from raytrace.world import World, default_world

_WHITE = Color(1.0, 1.0, 1.0)
_TRAJECTORY_COLOR = Color(0.8, 0.3, 0.3)


def _to_index(value: float) -> int:
    """Round half away from zero, saturating negative values to 0."""
    if value <= 0.0:
        return 0
    return int(math.floor(value + 0.5))


def _environment() -> Environment:
    return Environment(gravity=vector(0.0, -0.1, 0.0), wind=vector(-0.01, 0.0, 0.0))


def _flight(projectile: Projectile, environment: Environment) -> Iterator[Projectile]:
    """Yield each state after a tick until the projectile reaches the ground."""
    while projectile.position.y > 0.0:
        projectile = tick(environment, projectile)
        yield projectile


def simulate_projectile() -> list[Projectile]:
    """States of a projectile launched from (0, 1, 0) until it lands."""
    start = Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 5.0, 0.0).normalize(),
    )
    return list(_flight(start, _environment()))


def draw_trajectory(canvas: Canvas, projectile: Projectile) -> Color | None:
    """Plot the projectile's position, with y measured up from the canvas bottom."""
    x = _to_index(projectile.position.x)
    y = canvas.height - _to_index(projectile.position.y)
    return canvas.write_pixel(x, y, _TRAJECTORY_COLOR)


def trajectory_canvas() -> tuple[Canvas, int]:
    """Draw a projectile's flight; return the canvas and the number of ticks."""
    start = Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 1.8, 0.0).normalize() * 11.25,
    )
    canvas = Canvas(900, 550)
    ticks = 0
    for state in _flight(start, _environment()):
        ticks += 1
        draw_trajectory(canvas, state)
    return canvas, ticks


def clock_canvas() -> Canvas:
    """Twelve white dots at the hour positions of a clock face."""
    canvas = Canvas(400, 400)
    origin = point(0.0, 0.0, 0.0)
    for hour in range(12):
        transform = (
            identity(4)
            .translate(150.0, 0.0, 0.0)
            .rotate_z(-hour * math.pi / 6.0)
            .translate(200.0, 200.0, 0.0)
        )
        mark = transform @ origin
        canvas.write_pixel(_to_index(mark.x), _to_index(mark.y), _WHITE)
    return canvas


def sphere_canvas(size: int = 250) -> Canvas:
    """Cast rays from a fixed eye at a lit sphere and shade what they hit."""
    ray_origin = point(0.0, 0.0, -5.0)
    wall_z = 10.0
    wall_size = 7.0
    pixel_size = wall_size / size
    half = wall_size / 2.0

    canvas = Canvas(size, size)
    shape = sphere()
    shape.material = Material(color=Color(1.0, 0.2, 1.0), specular=0.1)
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))

    for y in range(size):
        world_y = half - pixel_size * y
        for x in range(size):
            world_x = -half + pixel_size * x
            target = point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (target - ray_origin).normalize())
            hit = intersect(shape, ray).hit()
            if hit is None:
                continue
            position = ray.position(hit.t)
            normal = hit.scene_object.normal_at(position)
            eye = ray.direction * -1.0
            color = lighting(hit.scene_object.material, light, position, eye, normal, False)
            canvas.write_pixel(x, y, color)
    return canvas


def capstone_world() -> World:
    """Three spheres in a room built from flattened spheres."""
    world = World()

    floor_material = Material(color=Color(1.0, 0.9, 0.9), specular=0.0)

    floor = sphere()
    floor.transform = scale(10.0, 0.01, 10.0)
    floor.material = floor_material
    world.objects.append(floor)

    left_wall = sphere()
    left_wall.material = floor_material
    left_wall.transform = (
        scale(10.0, 0.01, 10.0)
        .rotate_x(math.pi / 2.0)
        .rotate_y(-math.pi / 4.0)
        .translate(0.0, 0.0, 5.0)
    )
    world.objects.append(left_wall)

    right_wall = sphere()
    right_wall.material = floor_material
    right_wall.transform = (
        scale(10.0, 0.01, 10.0)
        .rotate_x(math.pi / 2.0)
        .rotate_y(math.pi / 4.0)
        .translate(0.0, 0.0, 5.0)
    )
    world.objects.append(right_wall)

    middle_material = Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3)
    middle = sphere()
    middle.transform = translate(-0.5, 1.0, 0.5)
    middle.material = middle_material
    world.objects.append(middle)

    right = sphere()
    right.transform = scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5)
    right.material = middle_material
    world.objects.append(right)

    left = sphere()
    left.transform = scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75)
    left.material = Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3)
    world.objects.append(left)

    world.light_sources.append(PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))
    return world


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytrace", description="Ray tracer examples.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("projectile", help="print a projectile's flight")

    for name, default, help_text in (
        ("trajectory", "output.ppm", "draw a projectile's flight as PPM"),
        ("clock", "clock.ppm", "draw a clock face as PPM"),
        ("sphere", "sphere.png", "draw a single shaded sphere as PNG"),
        ("capstone", "world.png", "render a room with three spheres as PNG"),
        ("render", "render.png", "render the default world as PNG"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("-o", "--output", default=default)
        if name == "sphere":
            command.add_argument("--size", type=int, default=250)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "projectile":
        states = simulate_projectile()
        for state in states:
            print(state)
        print(f"Done after {len(states)} ticks")
    elif args.command == "trajectory":
        canvas, ticks = trajectory_canvas()
        canvas.write_ppm(args.output)
        print(f"Done after {ticks} ticks")
    elif args.command == "clock":
        clock_canvas().write_ppm(args.output)
    elif args.command == "sphere":
        print("Drawing")
        canvas = sphere_canvas(args.size)
        print("Flushing image to file")
        canvas.write_png(args.output)
    elif args.command == "capstone":
        camera = Camera(1000, 500, math.pi / 3.0)
        camera.transform = view_transform(
            point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)
        )
        render(camera, capstone_world()).write_png(args.output)
    elif args.command == "render":
        camera = Camera(640, 360, math.pi / 2.0)
        camera.transform = view_transform(
            point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)
        )
        render(camera, default_world()).write_png(args.output)
    return 0