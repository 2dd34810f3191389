from pydantic_settings import BaseSettings, SettingsConfigDict

from voicetask.schemas import TaskPriority


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = "INFO"

    # Applied when a parse result without a detected priority becomes a task
    default_priority: TaskPriority = TaskPriority.MEDIUM


settings = Settings()
