"""GUI package — présentation pygame de EdgeDrop.

Ce package consomme uniquement l'API publique de `GameSession` :
commandes discrètes en entrée, instantanés en lecture.

Modules:
- keymap: correspondance touches pygame -> intentions abstraites
- renderer: rendu du plateau (projection d'affichage), des lanceurs et du HUD
- app: modèle d'application testable sans boucle pygame
"""

__all__ = [
    "keymap",
    "renderer",
    "app",
]
