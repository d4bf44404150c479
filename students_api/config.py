from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DATA_FILE: str = "data/students.json"
    SECRET_KEY: str = "super-secret-key-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    LOG_LEVEL: str = "INFO"

    # демо-логин, базы пользователей нет
    DEMO_USERNAME: str = "testuser"
    DEMO_PASSWORD: str = "password123"
    DEMO_ROLE: str = "student-admin"

    SESSION_COOKIE_NAME: str = "sessionId"
    SESSION_TOKEN: str = "dummy-session-id"
    COOKIE_USERNAME: str = "cookieUser"
    COOKIE_ROLE: str = "cookie-tester"

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
