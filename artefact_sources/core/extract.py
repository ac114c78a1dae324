"""
OS-dispatched extraction of zip archives through the platform unpacking tool.
"""

import asyncio
import logging
import platform
from pathlib import Path

from .exceptions import ExtractionFailed

logger = logging.getLogger(__name__)


def build_extract_command(
    system: str, file_path: str, destination_folder: str
) -> list[str] | None:
    """Return the unpack command for ``system``, or None if unsupported."""
    if system in ("Linux", "Darwin"):
        return ["unzip", "-o", file_path, "-d", destination_folder]
    if system == "Windows":
        return [
            "powershell",
            "-Command",
            f'Expand-Archive -Path "{file_path}" '
            f'-DestinationPath "{destination_folder}" -Force',
        ]
    return None


class ArchiveExtractor:
    """
    Unpacks zip archives with ``unzip`` on POSIX and ``Expand-Archive`` on
    Windows. Existing files in the destination are overwritten.
    """

    def __init__(self, system: str | None = None) -> None:
        self.system = system or platform.system()

    async def extract(
        self, file_path: str | Path, destination_folder: str | Path
    ) -> None:
        """
        Extract ``file_path`` into ``destination_folder``.

        Raises:
            ExtractionFailed: On non-zero exit, a missing tool, or an
                unsupported operating system
        """
        command = build_extract_command(
            self.system, str(file_path), str(destination_folder)
        )
        if command is None:
            logger.error(f"Unsupported platform: {self.system}")
            raise ExtractionFailed(
                str(file_path), reason=f"Unsupported platform: {self.system}"
            )

        logger.debug(f"Running {command[0]} for {file_path}")
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            logger.error(f"Extraction tool not available: {command[0]}")
            raise ExtractionFailed(
                str(file_path), reason=f"{command[0]} is not installed"
            ) from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            stderr_text = stderr.decode("utf-8", errors="replace")
            logger.error(f"Failed to extract zip file: {stderr_text}")
            raise ExtractionFailed(str(file_path), stderr=stderr_text)

        logger.info("Extraction completed.")
