#!/usr/bin/env python3
"""Lance la GUI EdgeDrop (prototype basé sur pygame).

Ce script fournit une boucle d'évènements minimale s'appuyant sur
`edgedrop.gui.app.EdgeDropApp`. Le temps réel est mesuré ici puis injecté
dans la session via `update(dt)`.

Raccourcis clavier principaux:
- ESPACE       : poser la tuile
- W / HAUT     : décaler « + »
- S / BAS      : décaler « - »
- A / GAUCHE   : tourner à gauche
- D / DROITE   : tourner à droite
- B            : boost de rang
- 0            : journaliser l'historique des poses
- R            : rejouer (après une fin de partie)
- ESC          : quitter
"""

from __future__ import annotations

import argparse
import logging
import sys

import pygame

from edgedrop.engine.rules import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from edgedrop.gui.app import EdgeDropApp
from edgedrop.gui.renderer import SCREEN_HEIGHT, SCREEN_WIDTH


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="EdgeDrop — puzzle à insertion périphérique")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="dimension N du plateau")
    parser.add_argument("--seed", type=int, default=None, help="graine des emplacements aléatoires")
    parser.add_argument("--debug", action="store_true", help="journalisation DEBUG")
    args = parser.parse_args(argv)

    if args.size < MIN_BOARD_SIZE:
        parser.error(f"--size doit être >= {MIN_BOARD_SIZE}")

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("EdgeDrop")

    app = EdgeDropApp(screen=screen)
    app.start_new_game(size=args.size, seed=args.seed)

    clock = pygame.time.Clock()
    running = True
    while running:
        dt = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                app.handle_key(event.key)

        app.update(dt)
        app.render()
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
