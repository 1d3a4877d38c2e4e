# src/geometry/world.py
from typing import Iterable, List, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray


class HittableList(Hittable):
    """
    An ordered list of Hittable objects. Every object is tested; the hit with
    the smallest t inside the requested window wins.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
