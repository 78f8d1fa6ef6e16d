from __future__ import annotations

import pygame

from .primitives import SoftPrimitives
from .render_common import gather_draw_list, gather_shadows
from .scene_draw import draw_scene


def draw_frame(render_surf: pygame.Surface, session, camera) -> None:
    draw_scene(
        SoftPrimitives(render_surf),
        camera,
        gather_draw_list(session, camera),
        gather_shadows(session, camera),
    )
