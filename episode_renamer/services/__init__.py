"""
Couche application (cas d'utilisation).

- sanitizer : nettoyage des noms et chemins
- path_builder : calcul des destinations films/series
- classifier : aiguillage selon le type de media
- reconciler : deplacement/copie/abandon par fichier
- workflow : orchestration du traitement d'une arborescence

Les services dependent des ports de core/, jamais des adaptateurs.
"""
