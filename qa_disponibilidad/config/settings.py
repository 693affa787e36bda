from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./qa_disponibilidad.db"
    app_env: str = "development"
    max_horas_mensuales: float = Field(default=180, gt=0)
    perfil_pais: str = "CO"
    zona_horaria: str = "America/Bogota"
    log_level: str = "INFO"


settings = Settings()
