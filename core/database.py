#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
One Punch Tracker v1.0 - Local Storage
Хранилище состояния: один JSON-документ под фиксированным ключом,
фоновое сохранение после каждого изменения.

Версия: 1.0.0
Дата: 2026-10-19
"""

import json
import asyncio
import shutil
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Any
import logging

from pydantic import ValidationError as SchemaError

from core.models import AppState
from shared.models import StoredStateDocument

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "onePunchManData"

# ===== EXCEPTIONS =====

class StorageError(Exception):
    """Базовое исключение для ошибок хранилища"""
    pass

class StorageReadError(StorageError):
    """Документ не читается или повреждён"""
    pass

class StorageWriteError(StorageError):
    """Не удалось записать документ"""
    pass

# ===== BLOB STORES =====

class BlobStore(ABC):
    """Простое key-value хранилище строк"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Содержимое по ключу или None, если записи нет"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Перезаписать содержимое по ключу"""

class MemoryBlobStore(BlobStore):
    """Хранилище в памяти"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

class FileBlobStore(BlobStore):
    """Один файл <key>.json на ключ в каталоге данных"""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.file_lock = threading.RLock()

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        with self.file_lock:
            if not path.exists():
                return None
            try:
                return path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                raise StorageReadError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        with self.file_lock:
            # Атомарное сохранение через временный файл
            temp_file = path.with_suffix('.tmp')
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                temp_file.write_text(value, encoding='utf-8')
                shutil.move(str(temp_file), str(path))
            except OSError as e:
                if temp_file.exists():
                    temp_file.unlink()
                raise StorageWriteError(f"Cannot write {path}: {e}") from e

# ===== SERIALIZATION =====

def dump_state(state: AppState) -> str:
    document = StoredStateDocument.from_state(state)
    return json.dumps(document.model_dump(by_alias=True), ensure_ascii=False)

def parse_state(raw: str, today: str) -> AppState:
    """Разбор сохранённого документа; ошибки формата -> StorageReadError"""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageReadError(f"Stored state is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise StorageReadError(f"Stored state must be an object, got {type(data).__name__}")

    try:
        document = StoredStateDocument.model_validate(data)
    except SchemaError as e:
        raise StorageReadError(f"Stored state has invalid fields: {e}") from e

    return document.to_state(today)

def save_state(store: BlobStore, state: AppState, key: str = DEFAULT_STORAGE_KEY) -> bool:
    """Сохранить состояние целиком. Ошибки только логируются"""
    try:
        store.set(key, dump_state(state))
        return True
    except (StorageWriteError, OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save state: {e}")
        return False

def load_state(store: BlobStore, today: str, key: str = DEFAULT_STORAGE_KEY) -> AppState:
    """Загрузить состояние; при отсутствии или повреждении данных - значения по умолчанию"""
    try:
        raw = store.get(key)
        if not raw:
            logger.info("No stored state found, starting with empty state")
            return AppState.empty(today)
        state = parse_state(raw, today)
    except StorageReadError as e:
        logger.warning(f"Stored state is unreadable, falling back to defaults: {e}")
        return AppState.empty(today)

    logger.info(f"Loaded state with {len(state.daily_data)} training days "
                f"and {len(state.weight_data)} weight samples")
    return state

# ===== AUTOSAVE =====

@dataclass
class SaveStats:
    """Статистика сохранений"""
    save_count: int = 0
    error_count: int = 0
    skipped_count: int = 0
    last_save: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'save_count': self.save_count,
            'error_count': self.error_count,
            'skipped_count': self.skipped_count,
            'last_save': self.last_save
        }

class AutoSaver:
    """
    Фоновое сохранение: одна запись в работе плюс последний ожидающий снимок.

    request_save() только запоминает снимок и никогда не пишет на диск сам.
    Если сохранение уже идёт, следующий снимок заменяет предыдущий ожидающий,
    так что после завершения текущей записи на диск попадает самое свежее
    состояние. Внутри event loop запись идёт через run_in_executor,
    без него снимки разбирает задача в том же пуле потоков.
    """

    def __init__(self, store: BlobStore, key: str = DEFAULT_STORAGE_KEY,
                 executor: Optional[Executor] = None, max_workers: int = 1):
        self.store = store
        self.key = key
        self.executor = executor or ThreadPoolExecutor(max_workers=max_workers)
        self._owns_executor = executor is None
        self.stats = SaveStats()
        self._lock = threading.Lock()
        self._pending: Optional[AppState] = None
        self._task: Optional[asyncio.Task] = None
        self._future: Optional[Future] = None
        self._draining = False

    def __call__(self, state: AppState) -> None:
        self.request_save(state)

    @property
    def is_saving(self) -> bool:
        return self._task_running or self._draining

    @property
    def _task_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def request_save(self, state: AppState) -> None:
        with self._lock:
            if self._pending is not None:
                self.stats.skipped_count += 1
            self._pending = state

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._submit_drain()
            return

        if not self._task_running:
            self._task = loop.create_task(self._drain())

    def _submit_drain(self) -> None:
        with self._lock:
            if self._draining:
                return
            self._draining = True
            future = self._future = self.executor.submit(self._drain_in_thread)
        future.add_done_callback(self._on_drain_done)

    def _on_drain_done(self, future: Future) -> None:
        error = future.exception()
        if error is not None:
            with self._lock:
                self._draining = False
            logger.error(f"Background autosave crashed: {error}")

    def _take_pending(self) -> Optional[AppState]:
        with self._lock:
            state, self._pending = self._pending, None
            if state is None:
                self._draining = False
            return state

    def _drain_in_thread(self) -> None:
        while True:
            state = self._take_pending()
            if state is None:
                return
            self._record(save_state(self.store, state, self.key))
            logger.debug("Background autosave finished")

    def _record(self, ok: bool) -> None:
        with self._lock:
            if ok:
                self.stats.save_count += 1
                self.stats.last_save = datetime.now().isoformat()
            else:
                self.stats.error_count += 1

    async def _drain(self) -> None:
        loop = asyncio.get_running_loop()
        while True:
            with self._lock:
                state, self._pending = self._pending, None
            if state is None:
                return
            ok = await loop.run_in_executor(self.executor, save_state, self.store, state, self.key)
            self._record(ok)
            logger.debug(f"Autosave finished (ok={ok})")

    async def flush(self) -> None:
        """Дождаться записи всех ожидающих снимков"""
        while True:
            if self._draining and self._future is not None:
                await asyncio.wrap_future(self._future)
            elif self._task_running:
                await self._task
            elif self._pending is not None:
                self._task = asyncio.get_running_loop().create_task(self._drain())
            else:
                return

    async def shutdown(self) -> None:
        await self.flush()
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        logger.info(f"Autosaver stopped: {self.stats.to_dict()}")

# ===== EXPORT =====

__all__ = [
    'DEFAULT_STORAGE_KEY',
    'StorageError',
    'StorageReadError',
    'StorageWriteError',
    'BlobStore',
    'MemoryBlobStore',
    'FileBlobStore',
    'dump_state',
    'parse_state',
    'save_state',
    'load_state',
    'SaveStats',
    'AutoSaver'
]
