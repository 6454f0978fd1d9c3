import dotenv
from pydantic.v1 import BaseSettings


class EnvSettings(BaseSettings):
    # legacy client api endpoint
    api_url: str = "https://www.cloudflare.com/api_json.html"

    # credentials, falls back to the keyring when unset
    api_key: str | None = None
    email: str | None = None

    # seconds
    timeout: float = 30.0

    # debug
    verbose: bool = False

    class Config:
        env_file = dotenv.find_dotenv(usecwd=True)
        env_prefix = "cf_"


env = EnvSettings()
