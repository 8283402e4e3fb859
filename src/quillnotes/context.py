"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelOptionRepository
from .logging_config import get_logger
from .services.options import OptionService
from .services.options_init import (
    init_document_options,
    init_not_synced_options,
    init_startup_options,
)

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Explicitly wired option store and the infrastructure behind it."""

    config: BaseConfig
    engine: Any
    session_factory: Callable[[], Session]
    option_repo: SQLModelOptionRepository
    options: OptionService


def is_initialized(options: OptionService) -> bool:
    """Return True once the instance has been bootstrapped."""

    return options.get_option_or_null("documentId") is not None


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the option store and fill in missing defaults.

    Order: engine and schema, session factory, repository, service, startup
    defaulting. A store without a document identity has not been bootstrapped
    yet; defaulting is left to ``bootstrap_instance`` in that case.
    """

    if config is None:
        config = BaseConfig()

    engine, session_factory = bootstrap_database(config)

    option_repo = SQLModelOptionRepository(session_factory)
    options = OptionService(option_repo)

    if is_initialized(options):
        created = init_startup_options(options, config=config)
        logger.info("Option store ready", extra={"defaults_created": len(created)})
    else:
        logger.info("Option store is empty; waiting for instance bootstrap")

    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        option_repo=option_repo,
        options=options,
    )


def bootstrap_instance(
    context: AppContext,
    *,
    initialized: bool = True,
    sync_server_host: str = "",
    sync_proxy: str = "",
) -> None:
    """Create identity and local-only options for a brand-new instance.

    Must run once, when the instance is created. Raises RuntimeError if the
    store already holds a document identity.
    """

    if is_initialized(context.options):
        raise RuntimeError("Instance is already initialized")

    init_document_options(context.options)
    init_not_synced_options(
        context.options,
        initialized,
        sync_server_host=sync_server_host,
        sync_proxy=sync_proxy,
    )
    init_startup_options(context.options, config=context.config)
    logger.info("Bootstrapped new instance", extra={"initialized": initialized})
