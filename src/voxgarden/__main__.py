from __future__ import annotations

import argparse
import logging
import math
import sys

import pygame

from . import config
from .camera import OrbitCamera
from .hud import draw_plant_info, draw_status
from .primitives import SoftPrimitives
from .render_soft import draw_frame
from .session import Session

log = logging.getLogger(__name__)

ORBIT_SPEED = math.radians(60.0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="voxgarden", add_help=True)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the plant shape generator.")
    parser.add_argument(
        "--render-scale",
        type=int,
        choices=(1, 2, 4),
        default=2,
        help="Internal scene scale divisor relative to window (1=full, 2=half, 4=quarter).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log target and arrival events.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = Session(seed=args.seed)
    session.warm()
    log.info("garden ready: %d plants, seed=%s", len(session.catalog), args.seed)

    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("voxgarden")
    render_w = max(1, config.WIDTH // args.render_scale)
    render_h = max(1, config.HEIGHT // args.render_scale)
    render_surf = pygame.Surface((render_w, render_h))
    camera = OrbitCamera(render_w, render_h)
    hud = SoftPrimitives(screen)
    clock = pygame.time.Clock()

    def to_ground(pos):
        return camera.pick_ground(pos[0] / args.render_scale, pos[1] / args.render_scale)

    while True:
        dt = clock.get_time() / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                pygame.quit()
                sys.exit()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                hit = to_ground(event.pos)
                if hit is not None:
                    session.click(hit)
            elif event.type == pygame.MOUSEMOTION:
                session.hover(to_ground(event.pos))

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT] or keys[pygame.K_a]:
            camera.orbit(-ORBIT_SPEED * dt)
        if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
            camera.orbit(ORBIT_SPEED * dt)

        session.tick(dt)

        draw_frame(render_surf, session, camera)
        scaled = pygame.transform.scale(render_surf, (config.WIDTH, config.HEIGHT))
        screen.blit(scaled, (0, 0))
        # HUD at native window resolution so text stays crisp.
        draw_plant_info(hud, session.active_plant())
        draw_status(hud, clock.get_fps(), session.avatar.state.value)
        pygame.display.flip()

        clock.tick(config.FPS_LIMIT)


if __name__ == "__main__":
    main()
