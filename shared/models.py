from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional

from core.models import AppState, DailyRecord, EXERCISE_KEYS
from utils.validators import is_valid_weight

# Схемы JSON-документов: хранилище и файл экспорта.
# Лишние поля игнорируются, null трактуется как отсутствие значения.

class ExportDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    daily_data: Dict[str, Dict[str, bool]] = Field(default_factory=dict, alias="dailyData")
    weight_data: Dict[str, float] = Field(default_factory=dict, alias="weightData")
    start_date: Optional[str] = Field(None, alias="startDate")

    @field_validator('daily_data', mode='before')
    @classmethod
    def known_exercises_only(cls, v):
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {
            day: (
                {k: flags[k] for k in EXERCISE_KEYS if flags.get(k) is not None}
                if isinstance(flags, dict) else flags
            )
            for day, flags in v.items()
        }

    @field_validator('weight_data', mode='before')
    @classmethod
    def drop_empty_weights(cls, v):
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {day: value for day, value in v.items() if value is not None}

    @field_validator('weight_data')
    @classmethod
    def positive_weights_only(cls, v):
        # Вес в журнале всегда конечный и больше нуля
        return {day: value for day, value in v.items() if is_valid_weight(value)}

    @classmethod
    def from_state(cls, state: AppState):
        return cls.model_validate(state.to_dict())

    def to_state(self, today: str, dark_mode: bool = False) -> AppState:
        return AppState(
            start_date=self.start_date or today,
            daily_data={d: DailyRecord.from_dict(flags) for d, flags in self.daily_data.items()},
            weight_data=dict(self.weight_data),
            dark_mode=dark_mode
        )

class StoredStateDocument(ExportDocument):
    dark_mode: bool = Field(False, alias="darkMode")

    @field_validator('dark_mode', mode='before')
    @classmethod
    def null_as_light(cls, v):
        return False if v is None else v

    def to_state(self, today: str, dark_mode: Optional[bool] = None) -> AppState:
        return super().to_state(today, self.dark_mode if dark_mode is None else dark_mode)
