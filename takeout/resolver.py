"""Content resolution: remote first, then the local fallback list."""

import logging

from takeout.config import Config
from takeout.errors import ContentSourceError, ExhaustedSources
from takeout.models import Origin, ResolvedContent
from takeout.sources import BaseSource, LocalSource, RemoteSource

logger = logging.getLogger(__name__)


async def resolve_sources(remote: BaseSource, local: BaseSource) -> ResolvedContent:
    """Try ``remote`` once, then ``local`` once.

    Source errors never propagate; they are logged and recorded on the
    result. When both fail the result is tagged ``Origin.EXHAUSTED``.
    """
    failures: list[str] = []

    for source, origin in ((remote, Origin.REMOTE), (local, Origin.LOCAL)):
        try:
            affirmations = await source.fetch()
        except ContentSourceError as e:
            logger.warning("%s source failed (%s): %s", source.name, type(e).__name__, e)
            failures.append(f"{source.name}: {type(e).__name__}: {e}")
            continue
        return ResolvedContent(
            affirmations=tuple(affirmations), origin=origin, failures=failures,
        )

    logger.error("No affirmations available from any source: %s", "; ".join(failures))
    return ResolvedContent(origin=Origin.EXHAUSTED, failures=failures)


async def resolve_content(config: Config) -> ResolvedContent:
    """Resolve the affirmation list using the configured endpoint and fallback."""
    logger.info("Resolving affirmations from %s", config.endpoint)
    remote = RemoteSource(
        config.endpoint,
        timeout=config.api.timeout,
        column_index=config.api.column_index,
    )
    local = LocalSource(config.resolved_fallback_path)
    return await resolve_sources(remote, local)


def require_content(content: ResolvedContent) -> tuple[str, ...]:
    """Return the affirmations, raising ``ExhaustedSources`` if there are none."""
    if content.exhausted:
        raise ExhaustedSources("; ".join(content.failures) or "No affirmations available")
    return content.affirmations
