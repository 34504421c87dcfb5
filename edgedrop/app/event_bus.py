"""Bus d'évènements minimaliste pour la couche application."""

from __future__ import annotations

from typing import Callable, Iterable, List

Subscriber = Callable[[object], None]


class EventBus:
    """Publie des évènements de session aux observateurs enregistrés.

    La diffusion est synchrone : chaque publication appelle immédiatement les
    abonnés (audio, effets de score, HUD) dans l'ordre d'enregistrement. Une
    exception levée par un abonné interrompt la diffusion et remonte à
    l'appelant de la commande de session.
    """

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Enregistre un abonné et retourne une fonction de désinscription."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, event: object) -> None:
        """Diffuse l'évènement à tous les abonnés courants."""

        # Copie : un abonné peut se désinscrire pendant la diffusion
        for callback in list(self._subscribers):
            callback(event)

    def publish_all(self, events: Iterable[object]) -> None:
        """Diffuse une suite d'évènements dans l'ordre donné."""

        for event in events:
            self.publish(event)
