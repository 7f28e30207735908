"""
Request-scoped temporary audio files.
"""

import os
import time
import uuid
from pathlib import Path
from typing import List, Union

from ytsummarizer.models.schemas import TemporaryAudioFile
from ytsummarizer.utils.logger import logging


class TempFileManager:
    """Allocates unique audio paths under one directory and removes them again."""

    def __init__(self, directory: Union[str, Path]):
        """
        Initialize the manager, creating the directory if it does not exist.

        Args:
            directory: Directory that holds the temporary audio files
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def reserve(self, suffix: str = ".mp3") -> TemporaryAudioFile:
        """
        Produce a fresh path for one request's audio file.

        Nothing is written to disk; the downloader creates the file.

        Args:
            suffix: File extension including the dot

        Returns:
            TemporaryAudioFile with a path unique within the process
        """
        unique_suffix = f"{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:12]}"
        path = self.directory / f"audio-{unique_suffix}{suffix}"
        logging.debug(f"Reserved temporary audio path: {path}")
        return TemporaryAudioFile(path=str(path))

    def release(self, path: Union[str, Path]) -> None:
        """
        Delete a reserved file and any downloader leftovers sharing its stem.

        Never raises: a failed cleanup is logged and must not replace the
        result or error of the request that owned the file.

        Args:
            path: Path previously returned by reserve()
        """
        path = Path(path)
        candidates = {path}
        try:
            candidates.update(path.parent.glob(f"{path.stem}.*"))
        except OSError as e:
            logging.error(f"Error listing leftovers for {path}: {e}")

        for candidate in candidates:
            try:
                if candidate.is_file():
                    os.remove(candidate)
                    logging.info(f"Successfully cleaned up file: {candidate}")
            except OSError as e:
                logging.error(f"Error cleaning up file {candidate}: {e}")

    def directory_exists(self) -> bool:
        return self.directory.is_dir()

    def list_files(self) -> List[Path]:
        """Files currently present in the temporary directory."""
        if not self.directory_exists():
            return []
        return sorted(p for p in self.directory.iterdir() if p.is_file())
