"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre grupos/ambientes va aquí: apuesta de best hand,
buy-in por defecto y orden inicial de la tabla.
"""

from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from pokernight.models.standings import SortDirection


class StandingsConfig(BaseModel):
    """Parámetros del motor de standings (se pasa explícito a los servicios)"""

    best_hand_bet_amount: float = 5  # Lo que pone cada participante del best hand
    default_buyin: float = 20  # Si el juego no trae buy-in
    default_sort_field: str = "points"
    default_sort_direction: SortDirection = SortDirection.DESC

    class Config:
        frozen = True


class Settings(BaseSettings):
    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:5173"  # URLs separadas por coma

    # ==================== Reglas del juego ====================
    # Puntos = cantidad de jugadores que terminaron detrás tuyo
    # Ejemplo: 6 jugadores, 1ro = 5 puntos, 2do = 4 puntos, etc.
    best_hand_bet_amount: float = 5
    default_buyin: float = 20

    # Orden por defecto de la tabla de posiciones
    default_sort_field: str = "points"
    default_sort_direction: SortDirection = SortDirection.DESC

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo

    def standings_config(self) -> StandingsConfig:
        return StandingsConfig(
            best_hand_bet_amount=self.best_hand_bet_amount,
            default_buyin=self.default_buyin,
            default_sort_field=self.default_sort_field,
            default_sort_direction=self.default_sort_direction,
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
