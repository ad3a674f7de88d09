from __future__ import annotations

import enum
import json
import keyring


class ConfigKey(enum.StrEnum):
    GITHUB_TOKEN = "GITHUB_TOKEN"
    AKAMAI_PASSWORD = "AKAMAI_PASSWORD"


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "ccu-tools"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the configuration from the keyring."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        return cls(**json.loads(json_str))

    def get_with_prompt(self, key: ConfigKey, override: str | None = None) -> str:
        """Get a secret, preferring an explicit override (usually from the environment)."""
        if override:
            return override
        if self.get(key):
            return self[key]

        import rich
        import typer

        rich.print(f"[red]Error:[/red] Required config key '{key.value}' not set. "
                   f"Please run 'ccu-tools config set {key.value} {{value}}' "
                   f"or set CCU_{key.value} in the environment.")

        raise typer.Exit(1)

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def to_keys_json(self) -> str:
        """Render the stored keys with their values masked."""
        result = {}
        for key in ConfigKey:
            if key in self:
                # set, or explicitly empty
                result[key] = "********" if self[ConfigKey(key)] else ""
            else:
                result[key] = "(not set)"

        return json.dumps(result, indent=2)
