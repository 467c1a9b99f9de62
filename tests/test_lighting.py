import pytest

from minirt.lighting import in_shadow, phong_lighting, point_light_color
from minirt.ray import HitRecord, Ray
from minirt.scene import PointLight, Scene
from minirt.shapes import Plane, Sphere, hit_world
from minirt.vector import Vec

WHITE = Vec(1.0, 1.0, 1.0)


def floor_scene():
    scene = Scene()
    scene.add_object(Plane(Vec(0.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0), WHITE))
    ray = Ray(Vec(0.0, 5.0, 0.0), Vec(0.0, -1.0, 0.0))
    rec = HitRecord.fresh()
    assert hit_world(scene.objects, ray, rec)
    return scene, ray, rec


def test_in_shadow_with_blocker():
    blocker = Sphere(Vec(0.0, 2.0, 0.0), 0.5, WHITE)
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0))
    assert in_shadow([blocker], ray, 5.0) is True


def test_in_shadow_blocker_beyond_light():
    blocker = Sphere(Vec(0.0, 10.0, 0.0), 0.5, WHITE)
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0))
    assert in_shadow([blocker], ray, 5.0) is False


def test_in_shadow_no_objects():
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0))
    assert in_shadow([], ray, 5.0) is False


def test_point_light_straight_above():
    scene, ray, rec = floor_scene()
    light = PointLight(Vec(0.0, 3.0, 0.0), WHITE, 1.0)
    color = point_light_color(scene, ray, rec, light)
    assert tuple(color) == pytest.approx((4.5, 4.5, 4.5))


def test_point_light_scales_with_brightness():
    scene, ray, rec = floor_scene()
    dim = point_light_color(scene, ray, rec, PointLight(Vec(1.0, 3.0, 0.5), WHITE, 0.25))
    bright = point_light_color(scene, ray, rec, PointLight(Vec(1.0, 3.0, 0.5), WHITE, 0.5))
    assert tuple(bright) == pytest.approx(tuple(dim * 2))


def test_point_light_blocked_gives_black():
    scene, ray, rec = floor_scene()
    scene.add_object(Sphere(Vec(0.0, 1.5, 0.0), 0.5, WHITE))
    light = PointLight(Vec(0.0, 3.0, 0.0), WHITE, 1.0)
    assert point_light_color(scene, ray, rec, light) == Vec(0.0, 0.0, 0.0)


def test_light_below_floor_is_shadowed():
    scene, ray, rec = floor_scene()
    light = PointLight(Vec(0.0, -3.0, 0.0), WHITE, 1.0)
    assert point_light_color(scene, ray, rec, light) == Vec(0.0, 0.0, 0.0)


def test_phong_without_lights_is_ambient_times_albedo():
    scene, ray, rec = floor_scene()
    scene.ambient = Vec(0.2, 0.3, 0.4)
    assert tuple(phong_lighting(scene, ray, rec)) == pytest.approx(tuple(scene.ambient))


def test_phong_clamps_to_one():
    scene, ray, rec = floor_scene()
    scene.add_light(PointLight(Vec(0.0, 3.0, 0.0), WHITE, 1.0))
    assert phong_lighting(scene, ray, rec) == Vec(1.0, 1.0, 1.0)


def test_phong_channels_never_exceed_one():
    scene, ray, rec = floor_scene()
    scene.ambient = Vec(0.1, 0.1, 0.1)
    rec.albedo = Vec(0.3, 0.6, 0.9)
    scene.add_light(PointLight(Vec(4.0, 1.0, -2.0), WHITE, 0.05))
    result = phong_lighting(scene, ray, rec)
    assert all(0.0 <= channel <= 1.0 for channel in result)
    assert result.x <= result.y <= result.z