from urllib.parse import quote

from pydantic_settings import BaseSettings

REQUIRED_GOOGLE_SETTINGS = (
    "GOOGLE_PROJECT_ID",
    "GOOGLE_PRIVATE_KEY_ID",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_CLIENT_EMAIL",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_SHEET_ID",
)


class Settings(BaseSettings):
    # Service account credentials (copied from the JSON key file)
    GOOGLE_PROJECT_ID: str | None = None
    GOOGLE_PRIVATE_KEY_ID: str | None = None
    GOOGLE_PRIVATE_KEY: str | None = None
    GOOGLE_CLIENT_EMAIL: str | None = None
    GOOGLE_CLIENT_ID: str | None = None

    # Target spreadsheet (the long id in the sheet URL)
    GOOGLE_SHEET_ID: str | None = None

    ENV: str = "dev"  # "dev" or "prod"

    # --- RATE LIMITING ---
    REDIS_URL: str | None = None
    SUBMISSION_RATE_LIMIT: str = "10/minute"

    FRONTEND_URL: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def missing_google_settings(self) -> list[str]:
        return [name for name in REQUIRED_GOOGLE_SETTINGS if not getattr(self, name)]

    def formatted_private_key(self) -> str:
        """
        Keys pasted into .env files usually arrive quoted and with literal
        "\\n" sequences instead of real newlines.
        """
        key = (self.GOOGLE_PRIVATE_KEY or "").strip()
        if len(key) >= 2 and key.startswith('"') and key.endswith('"'):
            key = key[1:-1]
        return key.replace("\\n", "\n")

    def service_account_info(self) -> dict:
        client_email = self.GOOGLE_CLIENT_EMAIL or ""
        return {
            "type": "service_account",
            "project_id": self.GOOGLE_PROJECT_ID,
            "private_key_id": self.GOOGLE_PRIVATE_KEY_ID,
            "private_key": self.formatted_private_key(),
            "client_email": client_email,
            "client_id": self.GOOGLE_CLIENT_ID,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "client_x509_cert_url": (
                "https://www.googleapis.com/robot/v1/metadata/x509/"
                + quote(client_email, safe="")
            ),
        }


settings = Settings()
