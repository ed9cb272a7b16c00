from typing import BinaryIO

from b64map.config.settings import Settings
from b64map.framer.reader import DocumentReader
from b64map.logging.logger import Log
from b64map.transformer.transformer import Transformer
from b64map.worker.models import RunStatistics


class Worker:
    """Driver loop: next document -> transform -> count -> report."""

    def __init__(
        self,
        reader: DocumentReader,
        transformer: Transformer,
        settings: Settings,
    ) -> None:
        self._reader = reader
        self._transformer = transformer
        self._settings = settings

    def run(self, source: BinaryIO) -> RunStatistics:
        """Transform every document in ``source``, strictly one after another.

        Framing and transformation errors propagate to the caller untouched;
        the run stops at the first one.
        """
        stats = RunStatistics()
        progress_every = self._settings.progress_every
        Log.debug(f"Worker started, running {' '.join(self._transformer.command)}")

        for document in self._reader.read_documents(source):
            stats.documents += 1
            self._transformer.transform(document)
            if progress_every > 0 and stats.documents % progress_every == 0:
                Log.info(f"written {stats.documents} docs in {stats.elapsed()}")

        Log.info(f"processed {stats.documents} documents in {stats.elapsed()}")
        return stats
