from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/db.sqlite3"
    data_dir: str = "./data"
    # origin of the login page, not of this API
    cors_origins: list[str] = ["http://localhost:5500", "http://127.0.0.1:5500"]
    seed_username: str = ""  # empty = no seed user
    seed_password: str = ""
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
