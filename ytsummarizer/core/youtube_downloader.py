"""
YouTube audio acquisition adapters.
"""

import asyncio
import os
import shutil
import threading
from pathlib import Path
from typing import List

from pytubefix import YouTube

from ytsummarizer.core.interfaces import AudioAcquirer
from ytsummarizer.exceptions import AcquisitionError
from ytsummarizer.models.schemas import DownloadConfig, DownloaderBackend
from ytsummarizer.utils.logger import logging


class YtDlpAcquirer(AudioAcquirer):
    """Downloads audio by running the external yt-dlp binary."""

    def __init__(self, config: DownloadConfig):
        """
        Initialize the acquirer with configuration.

        Args:
            config: Configuration for download operations
        """
        self.config = config

    def build_command(self, binary: str, url: str, dest_path: str) -> List[str]:
        """
        Build the yt-dlp command line for one download.

        yt-dlp names its output from a template, so the reserved extension is
        swapped for %(ext)s; audio extraction then lands on dest_path itself.
        """
        output_template = str(Path(dest_path).with_suffix("")) + ".%(ext)s"
        cmd = [
            binary,
            "--extract-audio",
            "--audio-format", self.config.audio_format,
            "--audio-quality", str(self.config.audio_quality),
            "--output", output_template,
            "--no-check-certificates",
            "--no-warnings",
            "--prefer-free-formats",
            "--no-playlist",
        ]

        if self.config.cookies_file:
            if os.path.isfile(self.config.cookies_file):
                cmd += ["--cookies", self.config.cookies_file]
            else:
                logging.warning(f"Cookies file not found, continuing without it: {self.config.cookies_file}")

        for header in self.config.headers:
            cmd += ["--add-header", header]

        cmd.append(url)
        return cmd

    async def acquire(self, url: str, dest_path: str) -> None:
        binary = shutil.which(self.config.binary)
        if binary is None:
            raise AcquisitionError(f"yt-dlp not found at '{self.config.binary}'. Please install it first.")

        cmd = self.build_command(binary, url, dest_path)
        logging.info(f"Downloading audio from {url} with yt-dlp")
        logging.debug(f"yt-dlp command: {cmd}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise AcquisitionError(f"Could not start yt-dlp: {e}", cause=e) from e

        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=self.config.timeout)
        except asyncio.TimeoutError:
            raise AcquisitionError(f"Audio download timed out after {self.config.timeout:g}s")
        finally:
            # Timeout or cancellation: the child must not keep writing.
            if process.returncode is None:
                await _kill(process)

        if process.returncode != 0:
            lines = stderr.decode("utf-8", errors="replace").strip().splitlines()
            reason = lines[-1] if lines else f"exit code {process.returncode}"
            logging.error(f"yt-dlp failed for {url}: {reason}")
            raise AcquisitionError(f"Failed to download audio: {reason}")

        logging.info(f"Audio saved to: {dest_path}")


class PytubefixAcquirer(AudioAcquirer):
    """
    Downloads the highest-bitrate audio stream in-process with pytubefix.

    The download runs in a worker thread that cannot be interrupted. It writes
    to a .part file and only renames it onto the reserved path if the request
    is still waiting, so a download that finishes late leaves nothing behind.
    """

    def __init__(self, config: DownloadConfig):
        self.config = config

    def _download(self, url: str, dest_path: str, abandoned: threading.Event, lock: threading.Lock) -> None:
        yt = YouTube(url)
        audio_stream = yt.streams.filter(only_audio=True).order_by('abr').last()
        if audio_stream is None:
            raise AcquisitionError(f"No audio stream available for {url}")

        dest = Path(dest_path)
        part = dest.with_name(dest.name + ".part")
        logging.info(f"Downloading audio: {yt.title}")
        try:
            audio_stream.download(
                output_path=str(dest.parent),
                filename=part.name,
                timeout=self.config.timeout,
                max_retries=0,
            )
            with lock:
                if not abandoned.is_set():
                    os.replace(part, dest)
                    return
            logging.warning(f"Discarding audio that finished after the request gave up: {dest_path}")
        finally:
            part.unlink(missing_ok=True)

    async def acquire(self, url: str, dest_path: str) -> None:
        abandoned = threading.Event()
        lock = threading.Lock()
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._download, url, dest_path, abandoned, lock),
                timeout=self.config.timeout,
            )
        except AcquisitionError:
            raise
        except asyncio.TimeoutError:
            raise AcquisitionError(f"Audio download timed out after {self.config.timeout:g}s")
        except Exception as e:
            logging.error(f"Error downloading audio: {str(e)}")
            raise AcquisitionError(f"Failed to download audio: {e}", cause=e) from e
        finally:
            with lock:
                abandoned.set()

        logging.info(f"Audio saved to: {dest_path}")


async def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        # Exited between the returncode check and the kill.
        pass
    await process.wait()


def build_acquirer(config: DownloadConfig) -> AudioAcquirer:
    """Return the acquirer for the configured backend."""
    if config.backend == DownloaderBackend.PYTUBEFIX:
        return PytubefixAcquirer(config)
    return YtDlpAcquirer(config)
