"""Phong shading with point lights, ambient light and hard shadows."""

from __future__ import annotations

from typing import Iterable

from .ray import EPSILON, HitRecord, Ray, make_ray
from .scene import PointLight, Scene
from .shapes import hit_world
from .vector import Color, Vec

LUMEN = 3
_SHININESS = 64
_SPECULAR_STRENGTH = 0.5


def in_shadow(objects: Iterable, light_ray: Ray, light_len: float) -> bool:
    """Whether anything lies on ``light_ray`` before ``light_len``."""
    rec = HitRecord(tmin=0.0, tmax=light_len)
    return hit_world(objects, light_ray, rec)


def point_light_color(scene: Scene, ray: Ray, rec: HitRecord, light: PointLight) -> Color:
    """The contribution of one point light at the hit point in ``rec``."""
    to_light = light.origin - rec.p
    light_len = to_light.length()
    light_ray = make_ray(rec.p + rec.normal * EPSILON, to_light)
    if in_shadow(scene.objects, light_ray, light_len):
        return Vec(0.0, 0.0, 0.0)
    light_dir = to_light.unit()
    kd = max(rec.normal.dot(light_dir), 0.0)
    diffuse = light.color * kd
    view_dir = (-ray.direction).unit()
    reflect_dir = (-light_dir).reflect(rec.normal)
    spec = max(view_dir.dot(reflect_dir), 0.0) ** _SHININESS
    specular = light.color * _SPECULAR_STRENGTH * spec
    brightness = light.bright_ratio * LUMEN
    return (scene.ambient + diffuse + specular) * brightness


def phong_lighting(scene: Scene, ray: Ray, rec: HitRecord) -> Color:
    """The shaded colour at the hit point, clamped to at most one per channel."""
    total = Vec(0.0, 0.0, 0.0)
    for light in scene.lights:
        total = total + point_light_color(scene, ray, rec, light)
    total = total + scene.ambient
    return total.hadamard(rec.albedo).minimum(Vec(1.0, 1.0, 1.0))