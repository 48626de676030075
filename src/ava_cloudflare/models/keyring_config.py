from __future__ import annotations

import enum
import json
import logging

import keyring
from keyring.errors import KeyringError

from ava_cloudflare.models.settings import EnvSettings

logger = logging.getLogger(__name__)


class ConfigKey(enum.StrEnum):
    ZONE_ID = "ZONE_ID"
    API_TOKEN = "API_TOKEN"

    @property
    def field(self) -> str:
        """Matching EnvSettings field."""
        return self.value.lower()


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "ava-cloudflare"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """
        Load the stored zone credentials.
        An unavailable keyring or an unreadable entry loads as empty.
        """
        try:
            json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        except KeyringError as e:
            logger.warning("Keyring unavailable: %s", e)
            return cls()
        if json_str is None:
            return cls()

        try:
            stored = json.loads(json_str)
            if not isinstance(stored, dict):
                raise ValueError(f"expected an object, got {type(stored).__name__}")
            return cls({ConfigKey(k): str(v) for k, v in stored.items()})
        except ValueError as e:
            logger.warning("Ignoring unreadable keyring entry: %s", e)
            return cls()

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def apply_to(self, settings: EnvSettings) -> EnvSettings:
        """Fill in settings left empty by the environment."""
        return settings.copy(
            update={key.field: getattr(settings, key.field) or self.get(key, "") for key in ConfigKey}
        )

    def source_of(self, key: ConfigKey, settings: EnvSettings) -> str | None:
        """Where the effective value of a key comes from."""
        if getattr(settings, key.field):
            return "environment"
        if self.get(key):
            return "keyring"
        return None
