# app/core/config.py

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

# Carrega variáveis de ambiente do arquivo .env
load_dotenv()

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


class Settings:
    """Configuração da API lida do ambiente (.env)."""

    def __init__(self):
        self.supabase_url: Optional[str] = os.getenv("SUPABASE_URL")
        self.supabase_anon_key: Optional[str] = os.getenv("SUPABASE_ANON_KEY")

        self.locations_table: str = os.getenv("LOCATIONS_TABLE", "locations")

        # Reflete o status do Supabase no status HTTP da resposta
        self.mirror_upstream_status: bool = _env_bool("MIRROR_UPSTREAM_STATUS")
        # Rejeita ids não numéricos com 400 antes de consultar o banco
        self.strict_id_parsing: bool = _env_bool("STRICT_ID_PARSING")

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def log_level_number(self) -> int:
        # Nível desconhecido vira INFO
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


@lru_cache
def get_settings() -> Settings:
    return Settings()
