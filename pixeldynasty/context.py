"""Start-up and shut-down of the game's media subsystems."""

from __future__ import annotations

import sys
from typing import Protocol

import pygame

from pixeldynasty.application import Application

AUDIO_FREQUENCY = 44100
AUDIO_SIZE = -16
AUDIO_CHANNELS = 2
AUDIO_BUFFER = 2048

SOUNDS = (
    ("pixel", "Resources/Sound/pixel.ogg"),
    ("delete", "Resources/Sound/delete.ogg"),
)


class SoundLoader(Protocol):
    def add_sound(self, id: str, path: str) -> None: ...


def load_sounds(app: SoundLoader) -> None:
    """Register the game's sound effects with ``app``."""
    for sound_id, path in SOUNDS:
        app.add_sound(sound_id, path)


def initialize() -> Application:
    """Start pygame and the mixer, create the window and load sounds."""
    pygame.mixer.pre_init(
        frequency=AUDIO_FREQUENCY,
        size=AUDIO_SIZE,
        channels=AUDIO_CHANNELS,
        buffer=AUDIO_BUFFER,
    )
    pygame.init()
    if pygame.mixer.get_init() is None:
        print(f"Audio init error: {pygame.get_error()}", file=sys.stderr)

    app = Application.get_instance()
    load_sounds(app)
    return app


def shutdown() -> None:
    """Close the window, if any, and stop every pygame subsystem."""
    app = Application._instance
    if app is not None:
        app.close()
    pygame.mixer.quit()
    pygame.quit()