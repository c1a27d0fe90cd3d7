from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "blog-bootstrap"
    environment: str = "local"
    log_level: str = "INFO"

    mongo_scheme: str = "mongodb"
    mongo_port: int = 27017
    mongo_host: str = "localhost"
    mongo_db: str = "blog_db"
    mongo_password: str | None = None
    mongo_params: str | None = None
    mongo_user: str | None = None
    mongo_tls: bool = False
    mongo_timeout_ms: int = 10000

    init_schema_on_startup: bool = True
    seed_on_startup: bool = False

    seed_admin_username: str = "admin"
    seed_admin_email: str = "admin@example.com"
    seed_admin_password: str = "changeme"
    seed_admin_password_hash: str | None = None

    model_config = SettingsConfigDict(env_file=(".env",), case_sensitive=True)

    @property
    def mongo_uri(self) -> str:
        return self.mongo_uri_for(self.mongo_db)

    def mongo_uri_for(self, db: str) -> str:
        auth = ""
        if self.mongo_user and self.mongo_password:
            auth = f"{self.mongo_user}:{self.mongo_password}@"
        host = self.mongo_host
        if self.mongo_scheme == "mongodb":
            host = f"{host}:{self.mongo_port}"
        params = f"?{self.mongo_params}" if self.mongo_params else ""
        return f"{self.mongo_scheme}://{auth}{host}/{db}{params}"


settings = Settings()
