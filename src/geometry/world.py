# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An ordered list of Hittable objects that is itself Hittable.

    `hit` is a linear scan keeping the closest record. On equal `t` the
    object added first wins, so results depend on insertion order.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objs: Iterable[Hittable]):
        self.objects.extend(objs)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None and (hit_record is None or rec.t < hit_record.t):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, start_time: float, end_time: float) -> Optional[AABB]:
        # Seeded from the first real box: an AABB at the origin is not a
        # neutral element for merge.
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(start_time, end_time)
            if obj_box is None:
                continue
            box = obj_box if box is None else box.merge(obj_box)
        return box


World = HittableList
