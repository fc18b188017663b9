from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from craftmind import config
from craftmind import logger as logger_mod

log = logger_mod.get_logger()


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float


class Renderer(Protocol):
    """The 3D viewer the camera drives (world streaming + offscreen rendering)."""

    def load_world(
        self, world: Any, version: str, center: Vec3, view_distance: int
    ) -> None: ...

    def look_at(self, x: float, y: float, z: float) -> None: ...

    def render_jpeg(self, width: int, height: int) -> bytes: ...


class Camera:
    """Take screenshots of a bot's surroundings.

    The viewpoint sits just above the bot's head. Screenshots are written to
    ``<BOTS_DIR>/<username>/screenshots/<name>.jpg``.
    """

    def __init__(
        self,
        bot: Any,
        renderer: Renderer,
        *,
        settle_s: float = config.CAMERA_SETTLE_SECONDS,
        root_dir: str | os.PathLike[str] | None = None,
    ):
        self.bot = bot
        self.renderer = renderer
        self.view_distance = config.CAMERA_VIEW_DISTANCE
        self.width = config.CAMERA_WIDTH
        self.height = config.CAMERA_HEIGHT
        self.settle_s = settle_s
        self.root_dir = Path(root_dir or config.BOTS_DIR)

        pos = bot.entity.position
        self.center = Vec3(pos.x, pos.y + config.CAMERA_EYE_OFFSET, pos.z)
        log.info(f"center : {self.center}")
        self.renderer.load_world(
            bot.world, bot.version, self.center, self.view_distance
        )

    @property
    def screenshot_dir(self) -> Path:
        return self.root_dir / self.bot.username / config.SCREENSHOTS_DIR_NAME

    def take_picture(self, name: str, x: float, y: float, z: float) -> Path:
        self.renderer.look_at(x, y, z)
        log.info("Waiting for world to load")
        time.sleep(self.settle_s)
        buf = self.renderer.render_jpeg(self.width, self.height)

        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        path = self.screenshot_dir / f"{name}.jpg"
        path.write_bytes(buf)
        log.info(f"saved {name}")
        return path
