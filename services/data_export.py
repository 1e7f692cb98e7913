# services/data_export.py

import json
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from pydantic import ValidationError as SchemaError

from core.models import AppState
from core.state import TrackerStore
from services.transfer import ExportTransport, ExportTransportError, ImportSource, ImportSourceError
from shared.models import ExportDocument
from ui.messages import (
    Notice, export_failure_notice, export_success_notice,
    import_failure_notice, import_success_notice
)

logger = logging.getLogger(__name__)

EXPORT_FIELDS = ("dailyData", "weightData", "startDate")

class ImportParseError(Exception):
    """Файл импорта не является корректным документом"""
    pass

@dataclass(frozen=True)
class ImportedData:
    """Результат разбора файла импорта"""
    state: AppState
    defaulted_fields: Tuple[str, ...] = ()

def export_filename(app_name: str, today: str) -> str:
    return f"{app_name}_data_{today}.json"

def export_document(state: AppState, indent: int = 2) -> str:
    """Документ экспорта без настройки темы"""
    document = ExportDocument.from_state(state)
    return json.dumps(document.model_dump(by_alias=True), ensure_ascii=False, indent=indent)

def import_document(blob: Union[str, bytes], today: str) -> ImportedData:
    if isinstance(blob, bytes):
        try:
            blob = blob.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ImportParseError(f"Import file is not UTF-8 text: {e}") from e

    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise ImportParseError(f"Import file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ImportParseError(f"Import document must be an object, got {type(data).__name__}")

    try:
        document = ExportDocument.model_validate(data)
    except SchemaError as e:
        raise ImportParseError(f"Import document has invalid fields: {e}") from e

    defaulted = tuple(name for name in EXPORT_FIELDS if data.get(name) in (None, ""))
    if defaulted:
        logger.info(f"Import document lacks {', '.join(defaulted)}; using defaults")

    return ImportedData(state=document.to_state(today), defaulted_fields=defaulted)

class DataTransferService:
    """Экспорт и импорт данных с уведомлением пользователя об итоге"""

    def __init__(self, store: TrackerStore, app_name: str = "onepunchman", indent: int = 2):
        self.store = store
        self.app_name = app_name
        self.indent = indent

    def export_data(self, transport: ExportTransport) -> Notice:
        filename = export_filename(self.app_name, self.store.today)
        payload = export_document(self.store.state, self.indent).encode("utf-8")
        try:
            destination = transport.deliver(filename, payload)
        except ExportTransportError as e:
            logger.error(f"Export failed: {e}")
            return export_failure_notice(e)

        logger.info(f"Exported data as {filename}")
        return export_success_notice(destination)

    def import_data(self, source: ImportSource) -> Optional[Notice]:
        try:
            blob = source.fetch()
        except ImportSourceError as e:
            logger.error(f"Import failed: {e}")
            return import_failure_notice(e)

        if blob is None:
            logger.info("Import cancelled by user")
            return None

        try:
            imported = import_document(blob, self.store.today)
        except ImportParseError as e:
            logger.warning(f"Import rejected: {e}")
            return import_failure_notice()

        self.store.apply_import(imported.state)
        return import_success_notice()
