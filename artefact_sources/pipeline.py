"""
Fetches the prebuilt API archive from the first configured source that has it.
"""

import logging
from pathlib import Path

from .config import get_settings
from .core.exceptions import ArtefactError
from .core.matching import MatchingPolicy
from .models.build import BuildConfig
from .sources.base import ArtefactSource
from .sources.factory import SourceFactory

logger = logging.getLogger(__name__)


class ArtefactPipeline:
    """
    Runs resolve, download and extract for each source in configured order.

    Sources are processed one at a time and the first one that completes all
    three steps wins. A failing source is logged and the next one is tried.
    """

    def __init__(
        self,
        build_config: BuildConfig,
        matching_policy: MatchingPolicy,
        platform: str,
        destination: str | Path,
        factory: SourceFactory | None = None,
        cleanup_archive: bool | None = None,
    ) -> None:
        self.build_config = build_config
        self.matching_policy = matching_policy
        self.platform = platform
        self.destination = Path(destination)
        self.factory = factory or SourceFactory()
        if cleanup_archive is None:
            cleanup_archive = get_settings().cleanup_archive
        self.cleanup_archive = cleanup_archive

    async def fetch_from(self, source: ArtefactSource) -> Path:
        """Resolve, download and extract from a single source."""
        url = await source.resolve_download_url(self.matching_policy, self.platform)
        archive_path = await source.download(url, self.destination)
        await source.extract(archive_path, self.destination)

        if self.cleanup_archive:
            archive_path.unlink(missing_ok=True)
            logger.debug(f"Removed archive {archive_path}")

        return self.destination

    async def run(self) -> Path:
        """
        Fetch the artefact for ``platform`` into ``destination``.

        Returns:
            The destination folder holding the extracted files

        Raises:
            ArtefactError: If no configured source produced the artefact
        """
        if not self.build_config.source_urls:
            raise ArtefactError("No source URLs configured")

        sources = self.factory.from_build_config(self.build_config)
        failures: list[str] = []

        try:
            for source_url, source in sources.items():
                logger.info(f"Fetching {self.platform} artefact from {source_url}")
                try:
                    result = await self.fetch_from(source)
                except ArtefactError as e:
                    logger.warning(f"Source {source_url} failed: {e}")
                    failures.append(f"{source_url}: {e}")
                    continue

                logger.info(f"Artefact for {self.platform} extracted to {result}")
                return result
        finally:
            for source in sources.values():
                await source.close()

        raise ArtefactError(
            f"Failed to fetch artefact for platform {self.platform} from any "
            f"source:\n  " + "\n  ".join(failures)
        )
