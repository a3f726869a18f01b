import os
from pydantic import BaseModel, Field


class Settings(BaseModel):
    LOG_LEVEL: str = Field(
        "INFO", description="Level for the package logger (DEBUG, INFO, ...)."
    )
    DEBOUNCE_DELAY_MS: float = Field(
        100.0,
        ge=0,
        description="Default debounce window in milliseconds when none is given.",
    )

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        delay = os.getenv("FUNTILS_DEBOUNCE_DELAY_MS")
        if delay:
            values["DEBOUNCE_DELAY_MS"] = delay

        return cls(**values)


settings = Settings.load()
