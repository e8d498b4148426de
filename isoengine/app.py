"""The game loop: engine state, the demo level and the command entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Callable, Optional, Sequence

from .block import Block
from .character import Character
from .clock import Clock
from .collider_3d import Collider3DWorld
from .event_manager import EventManager
from .input_manager import AppResult, InputEvent, InputManager
from .input_map import InputMap, load_input_map
from .renderer import Renderer
from .resource_manager import ResourceManager
from .sprite_renderer import SpriteRegistry
from .updatable_object import UpdateRegistry

log = logging.getLogger(__name__)

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 800
TEXTURE_NAME = "astronaut"
DEFAULT_INPUT_MAP = "inputMaps/character_controller_1.csv"

Overlay = Callable[[Any, float], Any]


class Engine:
    """All per-game state and the work done each frame."""

    def __init__(
        self,
        surface: Any = None,
        resources: Optional[ResourceManager] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.renderer = Renderer(surface=surface)
        self.clock = clock if clock is not None else Clock()
        self.events = EventManager()
        self.input = InputManager(self.events)
        self.resources = resources if resources is not None else ResourceManager()
        self.updates = UpdateRegistry()
        self.sprites = SpriteRegistry()
        self.colliders = Collider3DWorld(self.renderer)
        self.overlay: Optional[Overlay] = None

    @property
    def fps(self) -> float:
        """Frames per second implied by the last frame time."""
        dt = self.clock.deltatime
        return 1.0 / dt if dt > 0 else 0.0

    def handle_event(self, event: InputEvent) -> AppResult:
        """Pass one input event to the input manager."""
        return self.input.analyse_inputs(event)

    def iterate(self, now_ms: Optional[int] = None) -> AppResult:
        """Run one frame: update, collide and draw."""
        self.clock.tick(now_ms)
        self.renderer.reset_lightness()
        surface = self.renderer.surface
        if surface is not None:
            shade = max(0, min(255, int(50 * self.renderer.lightness)))
            surface.fill((shade, shade, shade))

        self.input.analyse_axis()
        self.updates.update_all()
        self.colliders.check_all_collisions()

        if surface is not None:
            self.sprites.display_all(surface, self.resources)
            if self.overlay is not None:
                self.overlay(surface, self.fps)
        return AppResult.CONTINUE

    def quit(self) -> None:
        """Release every resource and registration."""
        self.resources.cleanup()
        self.updates.cleanup()
        self.sprites.cleanup()
        self.events.cleanup()
        self.colliders.cleanup()


def populate_level(engine: Engine) -> tuple[Character, list[Block]]:
    """Place the character and the walls of the demo room."""
    character = Character(
        0,
        0,
        7,
        7,
        events=engine.events,
        colliders=engine.colliders,
        sprites=engine.sprites,
        updates=engine.updates,
        clock=engine.clock,
    )
    cells = [(x, 9) for x in range(10)]
    cells += [(0, y) for y in range(1, 9)]
    cells += [(9, y) for y in range(1, 9)]
    cells += [(x, y) for y in range(3, 5) for x in range(3, 5)]
    blocks = [
        Block(
            x,
            y,
            0,
            colliders=engine.colliders,
            sprites=engine.sprites,
            updates=engine.updates,
        )
        for x, y in cells
    ]
    return character, blocks


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="isoengine", description="Run the isometric demo room."
    )
    parser.add_argument("--input-map", default=DEFAULT_INPUT_MAP)
    parser.add_argument("--base-path", default=None)
    parser.add_argument("--windowed", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    import pygame

    pygame.init()
    engine: Optional[Engine] = None
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        try:
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), flags)
        except pygame.error as exc:
            log.error("Couldn't create window: %s", exc)
            return 1
        pygame.display.set_caption("isoengine")

        engine = Engine(surface=surface, resources=ResourceManager(args.base_path))
        engine.renderer.window = pygame.display
        if engine.resources.get_texture(TEXTURE_NAME) is None:
            log.error("Failed to load texture: %s", TEXTURE_NAME)
            return 1

        log.info("Number of joysticks: %d", pygame.joystick.get_count())

        try:
            input_map = load_input_map(args.input_map)
        except OSError:
            log.error("Unable to open input map at %s", args.input_map)
            input_map = InputMap()
        engine.input.activate_map(input_map)
        populate_level(engine)

        font = pygame.font.Font(None, 24)

        def draw_fps(target: Any, fps: float) -> None:
            text = font.render(f"FPS: {fps:.1f}", True, (255, 255, 255))
            target.blit(text, (10, 10))

        engine.overlay = draw_fps

        running = True
        while running:
            for event in pygame.event.get():
                result = engine.handle_event(InputEvent.from_pygame(event))
                if result is not AppResult.CONTINUE:
                    running = False
                    break
            if running:
                engine.iterate()
                pygame.display.flip()
        return 0
    finally:
        if engine is not None:
            engine.quit()
        pygame.quit()