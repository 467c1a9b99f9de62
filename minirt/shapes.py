"""Scene geometry: spheres, planes and capped cylinders, and ray intersection."""

from __future__ import annotations

import dataclasses
import math
import struct
from dataclasses import dataclass
from typing import Iterable, Protocol

from .ray import EPSILON, HitRecord, Ray
from .vector import Color, Point, Vec


def _f32(value: float) -> float:
    """Round a value to single precision."""
    if math.isnan(value) or math.isinf(value):
        return value
    return struct.unpack("f", struct.pack("f", value))[0]


class _Hittable(Protocol):
    albedo: Color

    def hit(self, ray: Ray, rec: HitRecord) -> bool: ...


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Point
    radius: float
    albedo: Color

    @property
    def radius_squared(self) -> float:
        return self.radius * self.radius

    def hit(self, ray: Ray, rec: HitRecord) -> bool:
        """Record the nearest intersection inside the record's t range."""
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius_squared
        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return False
        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        if root < rec.tmin or rec.tmax < root:
            root = (-half_b + sqrtd) / a
            if root < rec.tmin or rec.tmax < root:
                return False
        rec.albedo = self.albedo
        rec.t = root
        rec.p = ray.at(root)
        rec.normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray)
        return True


@dataclass(frozen=True, slots=True)
class Plane:
    """An infinite plane through a point with a given normal."""

    center: Point
    direction: Vec
    albedo: Color

    def hit(self, ray: Ray, rec: HitRecord) -> bool:
        """Record the intersection if it lies inside the record's t range."""
        denominator = _f32(ray.direction.dot(self.direction))
        if abs(denominator) < EPSILON:
            return False
        numerator = (self.center - ray.origin).dot(self.direction)
        root = _f32(numerator / denominator)
        if root < rec.tmin or rec.tmax < root:
            return False
        rec.t = root
        rec.p = ray.at(root)
        rec.normal = self.direction
        rec.albedo = self.albedo
        return True


@dataclass(frozen=True, slots=True)
class Cylinder:
    """A capped cylinder centred on a point, along a unit axis."""

    center: Point
    direction: Vec
    diameter: float
    height: float
    albedo: Color

    @property
    def radius(self) -> float:
        return self.diameter / 2

    def within_bounds(self, point: Point) -> bool:
        """Whether a point lies between the two caps."""
        hit_height = (point - self.center).dot(self.direction)
        return abs(hit_height) <= self.height / 2

    def side_normal(self, point: Point, hit_height: float) -> Vec:
        """The unit normal from the axis point at ``hit_height`` towards ``point``."""
        hit_center = self.center + self.direction * hit_height
        return (point - hit_center).unit()

    def hit_cap(self, ray: Ray, rec: HitRecord, height: float) -> bool:
        """Intersect the cap disc lying ``height`` along the axis from the centre."""
        circle_center = self.center + self.direction * height
        denominator = ray.direction.dot(self.direction)
        if denominator == 0:
            return False
        root = _f32((circle_center - ray.origin).dot(self.direction) / denominator)
        distance = _f32((circle_center - ray.at(root)).length())
        if abs(self.radius) < abs(distance):
            return False
        if root < rec.tmin or rec.tmax < root:
            return False
        rec.t = root
        rec.p = ray.at(root)
        rec.tmax = rec.t
        rec.normal = self.direction if height > 0 else -self.direction
        rec.set_face_normal(ray)
        rec.albedo = self.albedo
        return True

    def hit_side(self, ray: Ray, rec: HitRecord) -> bool:
        """Intersect the curved surface between the caps."""
        u_cross = ray.direction.cross(self.direction)
        delta_p = ray.origin - self.center
        dp_cross = delta_p.cross(self.direction)
        a = u_cross.length_squared()
        if a == 0:
            return False
        half_b = u_cross.dot(dp_cross)
        c = dp_cross.length_squared() - self.radius**2
        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return False
        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        if root < rec.tmin or rec.tmax < root:
            root = (-half_b + sqrtd) / a
            if root < rec.tmin or rec.tmax < root:
                return False
        if not self.within_bounds(ray.at(root)):
            return False
        rec.t = root
        rec.p = ray.at(root)
        # The normal is measured from the axis point one unit from the centre.
        rec.normal = self.side_normal(rec.p, 1.0)
        rec.set_face_normal(ray)
        rec.albedo = self.albedo
        return True

    def hit(self, ray: Ray, rec: HitRecord) -> bool:
        """Intersect both caps and the side; true if any of them was hit."""
        half = self.height / 2
        top = self.hit_cap(ray, rec, half)
        bottom = self.hit_cap(ray, rec, -half)
        side = self.hit_side(ray, rec)
        return top or bottom or side


def hit_world(objects: Iterable[_Hittable], ray: Ray, rec: HitRecord) -> bool:
    """Find the nearest hit among ``objects``; ``rec`` is updated only on a hit."""
    temp = dataclasses.replace(rec)
    hit_anything = False
    for obj in objects:
        if obj.hit(ray, temp):
            hit_anything = True
            temp.tmax = temp.t
    if hit_anything:
        for f in dataclasses.fields(HitRecord):
            setattr(rec, f.name, getattr(temp, f.name))
    return hit_anything