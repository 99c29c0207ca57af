from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # PostgreSQL 관련 설정
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "revu"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""

    # 지정 시 POSTGRES_* 대신 사용 (테스트용 sqlite 등)
    DATABASE_URL: Optional[str] = None

    # JWT 관련 설정
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

settings = Settings()
