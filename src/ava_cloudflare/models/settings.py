from pathlib import Path

import dotenv
from pydantic.v1 import BaseSettings

from ava_cloudflare.models.purge import Credentials


class EnvSettings(BaseSettings):
    enabled: bool = False

    # zone credentials, token needs the cache_purge:edit permission
    zone_id: str = ""
    api_token: str = ""

    # host storage root, logs go under {storage_path}/logs
    storage_path: Path = Path("storage")

    # debug
    verbose: bool = False

    @property
    def is_configured(self) -> bool:
        return bool(self.zone_id) and bool(self.api_token)

    @property
    def is_active(self) -> bool:
        return self.enabled and self.is_configured

    @property
    def log_file(self) -> Path:
        return self.storage_path / "logs" / "cloudflare.log"

    @property
    def zone_id_display(self) -> str | None:
        if not self.zone_id:
            return None
        return f"{self.zone_id[:8]}..."

    def api_token_display(self, mask: str = "••••") -> str | None:
        if not self.api_token:
            return None
        return f"{mask}{self.api_token[-4:]}"

    def credentials(self) -> Credentials:
        return Credentials(zone_id=self.zone_id, api_token=self.api_token)

    class Config:
        env_file = dotenv.find_dotenv(usecwd=True)
        env_prefix = "ava_cloudflare_"


env = EnvSettings()
