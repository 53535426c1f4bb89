# english_inflect/shared/container.py
from dependency_injector import containers, providers

from english_inflect.core.engine import Engine
from english_inflect.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Supplies the process-wide default Engine used by the module-level API.

    The engine is built lazily on first use; tests can ``override`` the
    provider or ``reset`` it to get a fresh instance.
    """

    config = providers.Object(settings)

    initial_flags = providers.Callable(
        lambda cfg: cfg.initial_classical_flags(),
        cfg=config,
    )

    default_engine = providers.ThreadSafeSingleton(
        Engine,
        flags=initial_flags,
    )


# Global Container Instance
container = Container()
