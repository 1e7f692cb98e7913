# services/transfer.py

"""
Доставка файла экспорта и получение файла импорта.

Два варианта на каждую сторону: «веб» (содержимое остаётся в памяти,
хост сам отдаёт или принимает его) и «нативный» (файл на диске,
выбор файла и отправка делегируются хосту через callback).
Ядро трекера от выбранного варианта не зависит.
"""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"

class ExportTransportError(Exception):
    """Не удалось передать файл экспорта"""
    pass

class ImportSourceError(Exception):
    """Не удалось прочитать выбранный файл"""
    pass

# ===== INTERFACES =====

class ExportTransport(ABC):
    @abstractmethod
    def deliver(self, filename: str, payload: bytes) -> str:
        """Передать файл; возвращает описание места назначения"""

class ImportSource(ABC):
    @abstractmethod
    def fetch(self) -> Optional[bytes]:
        """Содержимое выбранного файла или None, если выбор отменён"""

# ===== WEB =====

@dataclass(frozen=True)
class DownloadedBlob:
    filename: str
    mime_type: str
    content: bytes

    def open(self) -> io.BytesIO:
        return io.BytesIO(self.content)

class BlobDownloader(ExportTransport):
    """Файл остаётся в памяти, хост отдаёт его браузеру"""

    def __init__(self, mime_type: str = JSON_MIME_TYPE):
        self.mime_type = mime_type
        self.downloads: List[DownloadedBlob] = []

    @property
    def last(self) -> Optional[DownloadedBlob]:
        return self.downloads[-1] if self.downloads else None

    def deliver(self, filename: str, payload: bytes) -> str:
        self.downloads.append(DownloadedBlob(filename, self.mime_type, payload))
        logger.info(f"Prepared download {filename} ({len(payload)} bytes)")
        return filename

class BlobPicker(ImportSource):
    """Содержимое загруженного пользователем файла"""

    def __init__(self, content: Optional[bytes] = None):
        self.content = content

    def fetch(self) -> Optional[bytes]:
        return self.content

# ===== NATIVE =====

class FileSystemExporter(ExportTransport):
    """Запись файла в каталог экспорта и передача пути в share-callback"""

    def __init__(self, export_dir: Path, share: Optional[Callable[[Path], None]] = None):
        self.export_dir = Path(export_dir)
        self.share = share

    def deliver(self, filename: str, payload: bytes) -> str:
        target = self.export_dir / filename
        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as e:
            raise ExportTransportError(f"Cannot write {target}: {e}") from e
        logger.info(f"Export file written: {target}")

        if self.share is not None:
            try:
                self.share(target)
            except Exception as e:
                raise ExportTransportError(f"Sharing {target} failed: {e}") from e
        return str(target)

class DocumentPicker(ImportSource):
    """Чтение файла, выбранного пользователем через диалог хоста"""

    def __init__(self, chooser: Callable[[], Optional[Path]]):
        self.chooser = chooser

    def fetch(self) -> Optional[bytes]:
        path = self.chooser()
        if path is None:
            return None
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise ImportSourceError(f"Cannot read {path}: {e}") from e
