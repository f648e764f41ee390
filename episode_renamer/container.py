"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI,
y compris le journal loguru injecte dans les services.
"""

from dependency_injector import containers, providers
from loguru import logger as loguru_logger

from .adapters.file_system import FileSystemAdapter
from .adapters.tagging.mp4_tag_reader import Mp4TagReader
from .config import Settings
from .services.classifier import Classifier
from .services.path_builder import PathBuilder
from .services.reconciler import Reconciler
from .services.workflow import RenameWorkflow


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        workflow = container.rename_workflow()
        summary = workflow.run(source, options)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Journal partage, injecte explicitement dans les services
    logger = providers.Object(loguru_logger)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    tag_reader = providers.Singleton(Mp4TagReader)

    # Services sans etat
    path_builder = providers.Singleton(PathBuilder)

    classifier = providers.Factory(
        Classifier,
        path_builder=path_builder,
        logger=logger,
    )

    reconciler = providers.Factory(
        Reconciler,
        file_system=file_system,
        logger=logger,
    )

    rename_workflow = providers.Factory(
        RenameWorkflow,
        file_system=file_system,
        tag_reader=tag_reader,
        classifier=classifier,
        reconciler=reconciler,
        logger=logger,
    )
