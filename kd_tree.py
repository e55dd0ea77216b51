from functools import cmp_to_key
from typing import Optional, Sequence, Tuple

from kd_point import KDPoint, DistanceCalculator, squared_distance


class KDTreeError(Exception):
    pass


class EmptyTreeError(KDTreeError, LookupError):
    pass


class DimensionMismatchError(KDTreeError, ValueError):
    pass


class KDTreeNode:
    def __init__(self, point: KDPoint, left: Optional['KDTreeNode'] = None, right: Optional['KDTreeNode'] = None):
        self.point = point
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(points: Sequence[KDPoint], dst_fn: DistanceCalculator, depth: int = 0) -> Optional[KDTreeNode]:
    """Median split on axis depth % k, sorting a copy of each slice."""
    if len(points) == 0:
        return None

    axis = depth % points[0].dimensions()
    ordered = sorted(points, key=cmp_to_key(lambda a, b: dst_fn(a, b, axis)))
    median = len(ordered) // 2

    return KDTreeNode(
        ordered[median],
        build_tree(ordered[:median], dst_fn, depth + 1),
        build_tree(ordered[median + 1:], dst_fn, depth + 1),
    )


class KDTree:
    def __init__(self, points: Optional[Sequence[KDPoint]], dst_fn: DistanceCalculator):
        if dst_fn is None:
            raise ValueError("dst_fn cannot be None")
        points = list(points) if points is not None else []
        self.dst_fn = dst_fn
        self.dimensions = points[0].dimensions() if points else None
        self.root = build_tree(points, dst_fn)
        self.size = len(points)

    def __len__(self):
        return self.size

    def _check_dimensions(self, point: KDPoint):
        if self.dimensions is not None and point.dimensions() != self.dimensions:
            raise DimensionMismatchError(
                f"point has {point.dimensions()} dimensions, tree has {self.dimensions}"
            )

    def insert(self, point: KDPoint) -> KDTreeNode:
        self._check_dimensions(point)
        dimensions = point.dimensions()
        new_node = KDTreeNode(point)

        if self.root is None:
            self.root = new_node
            self.dimensions = dimensions
        else:
            node, depth = self.root, 0
            while True:
                axis = depth % dimensions
                if self.dst_fn(point, node.point, axis) < 0:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
                depth += 1

        self.size += 1
        return new_node

    def nearest_node(self, target: KDPoint) -> KDTreeNode:
        return self._search(target)[1]

    def nearest_neighbor(self, target: KDPoint) -> KDPoint:
        return self.nearest_node(target).point

    def nearest_neighbor_with_distance(self, target: KDPoint) -> Tuple[KDPoint, float]:
        best_dist, best_node = self._search(target)
        return best_node.point, best_dist

    def _search(self, target: KDPoint) -> Tuple[float, KDTreeNode]:
        if self.root is None:
            raise EmptyTreeError("nearest neighbor query on an empty tree")
        self._check_dimensions(target)
        dst_fn = self.dst_fn
        dimensions = target.dimensions()

        best_dist = float('inf')
        best_node = None
        # (node, depth, None) descends; (node, depth, (d, delta, opposite_branch)) runs once the near side is done
        stack = [(self.root, 0, None)]
        while stack:
            node, depth, pending = stack.pop()

            if pending is None:
                if node is None:
                    continue
                axis = depth % dimensions
                d = squared_distance(target, node.point, dst_fn)
                delta = dst_fn(target, node.point, axis)

                if delta < 0:
                    next_branch, opposite_branch = node.left, node.right
                else:
                    next_branch, opposite_branch = node.right, node.left

                stack.append((node, depth, (d, delta, opposite_branch)))
                stack.append((next_branch, depth + 1, None))
                continue

            d, delta, opposite_branch = pending
            if best_node is None or d < best_dist:
                best_dist = d
                best_node = node

            # Squared distance to the splitting plane against the squared best radius
            if delta * delta < best_dist:
                stack.append((opposite_branch, depth + 1, None))

        return best_dist, best_node
