"""Synchronisation of registry databases into local JSON files."""

from __future__ import annotations

from collections.abc import Iterable

from .download import download_file
from .folder import Folder
from .parser import Parser
from .sources import SOURCES, Source
from .storage import JsonStorage


class Rir:
    """Downloads registry dumps and stores their objects under a working folder.

    The working folder holds ``download``, ``extract`` and ``database``
    sub-folders; each source gets its own folder inside them.
    """

    def __init__(self, folder: Folder, sources: Iterable[Source] | None = None) -> None:
        self.download_folder = folder.subfolder("download")
        self.extract_folder = folder.subfolder("extract")
        self.database_folder = folder.subfolder("database")
        self.sources = tuple(SOURCES if sources is None else sources)

    def sync(self) -> None:
        """Download and parse every source's dumps, writing fresh JSON files."""
        for source in self.sources:
            download_dir = self.download_folder.subfolder(source.name)
            database_dir = self.database_folder.subfolder(source.name)
            with JsonStorage(database_dir) as storage:
                parser = Parser(storage)
                for url in source.http_databases:
                    file_path = download_file(download_dir.path, url)
                    parser.parse_gz_file(file_path)
                download_dir.clear()