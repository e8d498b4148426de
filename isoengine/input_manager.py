"""Routes window and keyboard events to named events through input maps."""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

from .event_manager import EventManager
from .input_map import InputMap

log = logging.getLogger(__name__)


class AppResult(enum.Enum):
    """What the main loop should do after handling something."""

    CONTINUE = "continue"
    SUCCESS = "success"
    FAILURE = "failure"


class InputEventType(enum.Enum):
    """Kinds of input event the manager understands."""

    QUIT = "quit"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    GAMEPAD_ADDED = "gamepad_added"
    GAMEPAD_BUTTON_DOWN = "gamepad_button_down"
    JOYSTICK_BUTTON_DOWN = "joystick_button_down"
    JOYSTICK_REMOVED = "joystick_removed"
    OTHER = "other"


@dataclass(frozen=True)
class InputEvent:
    """A backend-independent input event."""

    type: InputEventType
    key: int = 0
    which: int = 0
    button: int = 0

    @classmethod
    def from_pygame(cls, event: Any) -> InputEvent:
        """Convert a pygame event; unknown types become OTHER."""
        import pygame

        kinds = {
            pygame.QUIT: InputEventType.QUIT,
            pygame.KEYDOWN: InputEventType.KEY_DOWN,
            pygame.KEYUP: InputEventType.KEY_UP,
            pygame.CONTROLLERDEVICEADDED: InputEventType.GAMEPAD_ADDED,
            pygame.CONTROLLERBUTTONDOWN: InputEventType.GAMEPAD_BUTTON_DOWN,
            pygame.JOYBUTTONDOWN: InputEventType.JOYSTICK_BUTTON_DOWN,
            pygame.JOYDEVICEREMOVED: InputEventType.JOYSTICK_REMOVED,
        }
        which = getattr(event, "device_index", getattr(event, "instance_id", 0))
        return cls(
            type=kinds.get(event.type, InputEventType.OTHER),
            key=getattr(event, "key", 0),
            which=which,
            button=getattr(event, "button", 0),
        )


class InputManager:
    """Dispatches key presses and releases to events of the active maps."""

    def __init__(self, events: EventManager) -> None:
        self.events = events
        self._active_maps: list[InputMap] = []
        self._pressed: defaultdict[int, bool] = defaultdict(bool)

    def activate_map(self, input_map: InputMap) -> None:
        """Start routing keys through ``input_map``."""
        self._active_maps.append(input_map)

    def deactivate_map(self, input_map: InputMap) -> None:
        """Stop routing keys through every activation of ``input_map``."""
        self._active_maps = [m for m in self._active_maps if m is not input_map]

    def is_pressed(self, key: int) -> bool:
        """Whether ``key`` was last seen going down."""
        return self._pressed[key]

    def analyse_inputs(self, event: InputEvent) -> AppResult:
        """Handle one input event and tell the loop whether to go on."""
        if event.type is InputEventType.QUIT:
            return AppResult.SUCCESS
        if not self._active_maps:
            return AppResult.CONTINUE

        if event.type is InputEventType.KEY_DOWN:
            if self._pressed[event.key]:
                return AppResult.CONTINUE
            self._pressed[event.key] = True
            log.debug("KeyDown: %d", event.key)
            for input_map in tuple(self._active_maps):
                name = input_map.key_down_events.get(event.key)
                if name is not None:
                    self.events.invoke(name)
        elif event.type is InputEventType.KEY_UP:
            log.debug("KeyUp: %d", event.key)
            self._pressed[event.key] = False
            for input_map in tuple(self._active_maps):
                name = input_map.key_up_events.get(event.key)
                if name is not None:
                    self.events.invoke(name)
        elif event.type is InputEventType.GAMEPAD_ADDED:
            log.info("Controller connected: %d", event.which)
        elif event.type in (
            InputEventType.GAMEPAD_BUTTON_DOWN,
            InputEventType.JOYSTICK_BUTTON_DOWN,
        ):
            log.info("Gamepad %d pressed", event.button)
        elif event.type is InputEventType.JOYSTICK_REMOVED:
            log.info("Joystick removed")
        return AppResult.CONTINUE

    def analyse_axis(self) -> dict[str, float]:
        """Return the current axis values; input maps bind no axes."""
        return {}