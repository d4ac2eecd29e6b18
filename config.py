# config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_file: str = "student-api.log"
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("STUDENT_API_HOST", Settings.host),
        port=int(os.getenv("STUDENT_API_PORT", Settings.port)),
        log_file=os.getenv("STUDENT_API_LOG_FILE", Settings.log_file),
        log_level=os.getenv("STUDENT_API_LOG_LEVEL", Settings.log_level).upper(),
    )
