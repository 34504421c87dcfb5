"""Orchestrateur principal de la GUI EdgeDrop.

Ce module fournit un modèle testable indépendant de la boucle pygame:
- un objet `EdgeDropApp` coordonnant GameSession, clavier et rendu,
- un état d'interface (`UIState`) synthétisant les textes du HUD et
  l'instantané de session à afficher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pygame

from edgedrop.app.controls import Intent, apply_intent
from edgedrop.app.events import GameOverEvent, LinesClearedEvent, RankChangedEvent
from edgedrop.app.session import GameSession, Mode
from edgedrop.engine.rules import DEFAULT_BOARD_SIZE
from edgedrop.engine.snapshot import SessionSnapshot
from edgedrop.gui.keymap import intent_for_key
from edgedrop.gui.renderer import COLOR_BG, COLOR_BOOST, BoardRenderer, SCREEN_HEIGHT, SCREEN_WIDTH

__all__ = ["UIState", "EdgeDropApp"]

MAX_MESSAGES = 4


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation GUI."""

    snapshot: SessionSnapshot
    instructions: str
    score_text: str
    rank_text: str
    multiplier_text: str
    boost_fraction: float
    messages: tuple[str, ...]


class EdgeDropApp:
    """Orchestrateur de la GUI.

    Cette classe ne gère pas la boucle pygame directement mais fournit
    les opérations nécessaires à l'UI:
    - démarrer une partie,
    - traduire les touches en intentions,
    - faire avancer le temps,
    - exposer un état synthétique prêt à rendre.
    """

    def __init__(
        self,
        *,
        session: Optional[GameSession] = None,
        screen: Optional[pygame.Surface] = None,
    ) -> None:
        self.session = session
        self.screen = screen
        self._renderer: Optional[BoardRenderer] = None
        self._messages: List[str] = []
        self._unsubscribe = None

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def start_new_game(
        self,
        *,
        size: int = DEFAULT_BOARD_SIZE,
        seed: Optional[int] = None,
        clearing: bool = True,
    ) -> None:
        """Initialise une nouvelle session et (ré)instancie le rendu."""

        if self._unsubscribe is not None:
            self._unsubscribe()
        self.session = GameSession(size, seed=seed, clearing=clearing)
        self._unsubscribe = self.session.event_bus.subscribe(self._on_event)
        self._messages = []

        if self.screen is None:
            # Crée une surface si non fournie (utile hors tests)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self._renderer = BoardRenderer(self.screen, size)

    @property
    def renderer(self) -> BoardRenderer:
        if self._renderer is None:
            raise RuntimeError("BoardRenderer indisponible tant que la partie n'est pas démarrée")
        return self._renderer

    def _require_session(self) -> GameSession:
        if self.session is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self.session

    def _on_event(self, event: object) -> None:
        if isinstance(event, LinesClearedEvent):
            self._push_message(f"{event.count} ligne(s) ! +{event.points}")
        elif isinstance(event, RankChangedEvent):
            self._push_message(f"Rang {event.previous} -> {event.current}")
        elif isinstance(event, GameOverEvent):
            self._push_message(f"Partie terminée, score {event.score}")

    def _push_message(self, text: str) -> None:
        self._messages.append(text)
        del self._messages[:-MAX_MESSAGES]

    # ------------------------------------------------------------------
    # Entrées & temps
    # ------------------------------------------------------------------

    def handle_key(self, key: int) -> bool:
        """Applique la touche si elle est liée ; retourne True si l'état a changé."""

        intent = intent_for_key(key)
        if intent is None:
            return False
        return apply_intent(self._require_session(), intent)

    def trigger(self, intent: Intent) -> bool:
        return apply_intent(self._require_session(), intent)

    def update(self, dt: float) -> None:
        self._require_session().tick(dt)

    # ------------------------------------------------------------------
    # État d'interface & rendu
    # ------------------------------------------------------------------

    def get_ui_state(self) -> UIState:
        session = self._require_session()
        snapshot = session.snapshot()

        if snapshot.mode == Mode.GAME_OVER.value:
            instructions = "Plus de place ! [R] pour rejouer"
        else:
            instructions = "[ESPACE] poser  [W/S] décaler  [A/D] tourner  [B] boost"

        boost = snapshot.rank_boost
        return UIState(
            snapshot=snapshot,
            instructions=instructions,
            score_text=f"Score {snapshot.score}",
            rank_text=f"Rang {snapshot.rank}",
            multiplier_text=f"{snapshot.current_multiplier:.1f}x",
            boost_fraction=0.0 if boost is None or boost.total_time <= 0 else boost.remaining_time / boost.total_time,
            messages=tuple(self._messages),
        )

    def render(self) -> None:
        ui_state = self.get_ui_state()
        snapshot = ui_state.snapshot
        renderer = self.renderer

        renderer.screen.fill(COLOR_BG)
        renderer.render_board(snapshot.display_board, snapshot.rotation)
        active = snapshot.drop if snapshot.enable_input else None
        renderer.render_spawners(active)

        renderer.render_text(ui_state.instructions, (20, 20))
        renderer.render_text(ui_state.score_text, (20, 60))
        renderer.render_text(ui_state.rank_text, (20, 90))
        renderer.render_progress(snapshot.percent_to_next_rank, pygame.Rect(20, 118, 160, 12))
        renderer.render_text(ui_state.multiplier_text, (20, 140))
        if ui_state.boost_fraction > 0:
            renderer.render_progress(ui_state.boost_fraction, pygame.Rect(20, 168, 160, 12), COLOR_BOOST)

        y_offset = SCREEN_HEIGHT - 30 * MAX_MESSAGES
        for message in ui_state.messages:
            renderer.render_text(message, (20, y_offset))
            y_offset += 30
