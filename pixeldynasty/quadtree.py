"""Quadtree spatial index over axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pygame

MAX_ENTITIES = 4
MAX_LEVELS = 3
OUTLINE_COLOR = (0, 0, 190, 100)


@dataclass(frozen=True)
class Rect:
    """Integer rectangle: top-left corner plus width and height."""

    x: int
    y: int
    w: int
    h: int

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles are non-empty and share interior area."""
        if self.empty or other.empty:
            return False
        if min(self.x + self.w, other.x + other.w) <= max(self.x, other.x):
            return False
        return min(self.y + self.h, other.y + other.h) > max(self.y, other.y)


class Quadtree:
    """A node holding items that expose a ``position`` Rect."""

    def __init__(self, level: int, bounds: Rect) -> None:
        self.level = level
        self.bounds = bounds
        self.items: list[Any] = []
        self.nodes: list[Quadtree] = []

    def clear(self) -> None:
        self.items.clear()
        for node in self.nodes:
            node.clear()
        self.nodes.clear()

    def split(self) -> None:
        """Create the four children: top-right, top-left, bottom-left, bottom-right."""
        sub_w = self.bounds.w // 2
        sub_h = self.bounds.h // 2
        x, y = self.bounds.x, self.bounds.y
        level = self.level + 1
        self.nodes = [
            Quadtree(level, Rect(x + sub_w, y, sub_w, sub_h)),
            Quadtree(level, Rect(x, y, sub_w, sub_h)),
            Quadtree(level, Rect(x, y + sub_h, sub_w, sub_h)),
            Quadtree(level, Rect(x + sub_w, y + sub_h, sub_w, sub_h)),
        ]

    def get_index(self, rect: Rect) -> int:
        """Quadrant that wholly holds ``rect``, or -1 if it straddles a midline."""
        vertical_mid = self.bounds.x + self.bounds.w // 2
        horizontal_mid = self.bounds.y + self.bounds.h // 2

        top = rect.y + rect.h < horizontal_mid
        bottom = rect.y > horizontal_mid
        left = rect.x + rect.w < vertical_mid
        right = rect.x > vertical_mid

        if top and right:
            return 0
        if top and left:
            return 1
        if bottom and left:
            return 2
        if bottom and right:
            return 3
        return -1

    def insert(self, item: Any) -> None:
        if self.nodes:
            index = self.get_index(item.position)
            if index != -1:
                self.nodes[index].insert(item)
                return

        self.items.append(item)

        if len(self.items) > MAX_ENTITIES and self.level < MAX_LEVELS:
            if not self.nodes:
                self.split()
            kept = []
            for held in self.items:
                index = self.get_index(held.position)
                if index == -1:
                    kept.append(held)
                else:
                    self.nodes[index].insert(held)
            self.items = kept

    def retrieve(self, area: Rect) -> list[Any]:
        """Items in children intersecting ``area``, followed by this node's own."""
        found: list[Any] = []
        for node in self.nodes:
            if node.bounds.intersects(area):
                found.extend(node.retrieve(area))
        found.extend(self.items)
        return found

    def draw(self, surface: pygame.Surface) -> None:
        """Outline this node and all descendants on ``surface``."""
        b = self.bounds
        pygame.draw.rect(surface, OUTLINE_COLOR, pygame.Rect(b.x, b.y, b.w, b.h), 1)
        for node in self.nodes:
            node.draw(surface)