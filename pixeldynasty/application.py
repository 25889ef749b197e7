"""Window, input state, assets and drawing for the sand simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

import pygame

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
WINDOW_NAME = "Pixel Dynasty: Sand Simulation!"
RENDER_SCALE = 16


@dataclass
class Color:
    """RGBA colour with 0-255 channels."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)


ColorLike = Union[Color, pygame.Color, tuple]


def _to_pygame_color(color: ColorLike) -> pygame.Color:
    if isinstance(color, Color):
        return pygame.Color(*color.rgba)
    return pygame.Color(color)


class Application:
    """The single game window.

    Drawing happens on a low-resolution canvas whose pixels are shown
    ``RENDER_SCALE`` times larger in the window.
    """

    _instance: ClassVar[Application | None] = None

    def __init__(self) -> None:
        pygame.display.init()
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_NAME)
        self.canvas = pygame.Surface(
            (WINDOW_WIDTH // RENDER_SCALE, WINDOW_HEIGHT // RENDER_SCALE)
        )
        self.images: dict[str, pygame.Surface] = {}
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.done = False
        self.mb_left = False
        self.mb_right = False
        self.mouse_position: tuple[int, int] = (0, 0)
        self.background_color = Color(0, 0, 0, 255)

    @classmethod
    def get_instance(cls) -> Application:
        """Return the shared application, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # Input

    def input(self) -> None:
        """Process pending window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.done = True
            elif event.type == pygame.MOUSEMOTION:
                x, y = event.pos
                self.mouse_position = (x // RENDER_SCALE, y // RENDER_SCALE)
            elif event.type == pygame.KEYDOWN:
                self._input_pressed(event)
            elif event.type == pygame.KEYUP:
                self._input_released(event)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == pygame.BUTTON_LEFT:
                    self.mb_left = True
                elif event.button == pygame.BUTTON_RIGHT:
                    self.mb_right = True
            elif event.type == pygame.MOUSEBUTTONUP:
                self.mb_left = False
                self.mb_right = False

    def _input_released(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_ESCAPE:
            self.done = True

    def _input_pressed(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_w:
            print("hola", end="")

    # Assets

    def add_texture(self, id: str, path: str) -> None:
        """Load an image under ``id``; report and skip it if it cannot be read."""
        try:
            texture = pygame.image.load(path).convert_alpha()
        except (pygame.error, OSError):
            print(f"Error! couldn't load image: {id}")
            return
        self.images[id] = texture

    def get_texture(self, id: str) -> pygame.Surface | None:
        return self.images.get(id)

    def add_sound(self, id: str, path: str) -> None:
        """Load a sound under ``id``; report and skip it if it cannot be read."""
        try:
            sound = pygame.mixer.Sound(path)
        except (pygame.error, OSError):
            print(f"Error! couldnt load sound: {id}")
            return
        self.sounds[id] = sound

    def get_sound(self, id: str) -> pygame.mixer.Sound | None:
        return self.sounds.get(id)

    # Rendering

    def display(self) -> None:
        """Clear the canvas to the background colour."""
        self.canvas.fill(_to_pygame_color(self.background_color))

    def draw_everything(self) -> None:
        """Scale the canvas onto the window and present it."""
        scaled = pygame.transform.scale(self.canvas, self.window.get_size())
        self.window.blit(scaled, (0, 0))
        pygame.display.flip()

    def draw_rectangle(
        self, x: int, y: int, width: int, height: int, color: ColorLike
    ) -> None:
        """Fill a rectangle on the canvas, blending by the colour's alpha."""
        fill = _to_pygame_color(color)
        if fill.a == 255:
            self.canvas.fill(fill, pygame.Rect(x, y, width, height))
            return
        if width <= 0 or height <= 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(fill)
        self.canvas.blit(overlay, (x, y))

    def render_image(
        self,
        image: pygame.Surface,
        x: int,
        y: int,
        w: int | None = None,
        h: int | None = None,
    ) -> None:
        """Draw ``image`` at (x, y), stretched to w x h when both are given."""
        if w is not None and h is not None:
            image = pygame.transform.scale(image, (w, h))
        self.canvas.blit(image, (x, y))

    def close(self) -> None:
        """Release assets and the window."""
        self.images.clear()
        self.sounds.clear()
        pygame.display.quit()
        if Application._instance is self:
            Application._instance = None