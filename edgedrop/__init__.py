"""EdgeDrop — moteur de puzzle à insertion périphérique.

Packages:
- engine: logique pure (adressage périmètre, insertion, grille, score)
- app: session de jeu, bus d'évènements, intentions de contrôle
- gui: couche de présentation pygame (consomme uniquement l'API session)
"""

__version__ = "0.1.0"
