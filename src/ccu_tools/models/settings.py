from urllib.parse import urlsplit

import dotenv
from pydantic.v1 import BaseSettings, validator


class EnvSettings(BaseSettings):
    # github
    github_owner: str = ""
    github_repo: str = ""
    github_api_url: str = "https://api.github.com"
    github_token: str | None = None

    # akamai ccu
    ccu_endpoint: str = "https://api.ccu.akamai.com/ccu/v2/queues/default"
    akamai_username: str = ""
    akamai_password: str | None = None

    # ordered mapping of repo path prefix -> ARL base, last match wins
    path_map: dict[str, str] = {}

    # extra fields sent with each purge request
    purge_options: dict[str, str] = {"action": "remove", "domain": "production"}

    user_agent: str = "ccu-tools Akamai cache clear"
    timeout: float = 30.0

    # debug
    verbose: bool = False
    debug: bool = False

    @validator("github_api_url", "ccu_endpoint")
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def github_repo_slug(self) -> str:
        return f"{self.github_owner}/{self.github_repo}"

    @property
    def ccu_api_root(self) -> str:
        parts = urlsplit(self.ccu_endpoint)
        return f"{parts.scheme}://{parts.netloc}"

    class Config:
        env_file = dotenv.find_dotenv(usecwd=True)
        env_prefix = "ccu_"


env = EnvSettings()
