import logging
from dataclasses import dataclass
from typing import Callable, Optional

from config import AppConfig, config as default_config
from core.database import AutoSaver, BlobStore, FileBlobStore, load_state
from core.state import TrackerStore
from services.data_export import DataTransferService
from utils.datetime_utils import resolve_timezone, today_key
from utils.logger import setup_logger

logger = logging.getLogger(__name__)

@dataclass
class TrackerApplication:
    """Корень приложения: владеет контейнером состояния и его сохранением"""
    config: AppConfig
    store: TrackerStore
    autosaver: AutoSaver
    transfer: DataTransferService

    async def shutdown(self) -> None:
        await self.autosaver.shutdown()

def build_application(cfg: Optional[AppConfig] = None,
                      blob_store: Optional[BlobStore] = None,
                      clock: Optional[Callable[[], str]] = None,
                      configure_logging: bool = True) -> TrackerApplication:
    cfg = cfg or default_config
    if configure_logging:
        setup_logger(cfg)

    if clock is None:
        tz = resolve_timezone(cfg.tracker.timezone)
        clock = lambda: today_key(tz)

    if blob_store is None:
        cfg.ensure_directories()
        blob_store = FileBlobStore(cfg.storage.data_dir)

    # Загрузка блокирует до первого отображения
    state = load_state(blob_store, clock(), cfg.storage.storage_key)

    store = TrackerStore(
        state,
        clock=clock,
        window_days=cfg.tracker.window_days,
        default_weight=cfg.tracker.default_weight
    )

    autosaver = AutoSaver(blob_store, cfg.storage.storage_key, max_workers=cfg.storage.max_workers)
    store.subscribe(autosaver)

    transfer = DataTransferService(store, app_name=cfg.export.app_name, indent=cfg.export.indent)

    logger.info(f"Tracker application ready ({cfg.environment.value})")
    return TrackerApplication(config=cfg, store=store, autosaver=autosaver, transfer=transfer)
