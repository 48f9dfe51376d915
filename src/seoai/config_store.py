"""
Config Store for seo-ai.

Persists provider API keys and the active LLM provider in a small JSON file
under the user's config directory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from seoai.config import (
    CONFIG_DIR_ENV,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_DIR,
    LLM_PROVIDERS,
    IMAGE_PROVIDERS,
    PROVIDER_KEY_NAMES,
)
from seoai.exceptions import ProviderConfigError


def resolve_provider(key_name: str) -> str:
    """
    Map a key name as typed by the user to a provider name.

    Both the environment-style name (``OPENAI_API_KEY``) and the bare provider
    name (``openai``) are accepted.

    Raises:
        ProviderConfigError: If the name matches no known provider.
    """
    name = key_name.strip()
    if name in PROVIDER_KEY_NAMES:
        return PROVIDER_KEY_NAMES[name]
    if name.lower() in LLM_PROVIDERS + IMAGE_PROVIDERS:
        return name.lower()
    raise ProviderConfigError(f"Invalid provider: {key_name}")


class ConfigStore:
    """
    Key-value store of provider name to API key, plus the active provider.

    The file layout is ``{"active_provider": str | null, "keys": {provider: key}}``.
    Every operation reads and writes the file synchronously.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the config store.

        Args:
            config_dir (Optional[Path]): Directory holding ``config.json``. Defaults to
                ``$SEO_AI_CONFIG_DIR`` or ``~/.config/seo-ai``.
        """
        if config_dir is None:
            config_dir = Path(os.getenv(CONFIG_DIR_ENV) or DEFAULT_CONFIG_DIR)
        self.config_dir = Path(config_dir)
        self.path = self.config_dir / CONFIG_FILE_NAME
        self.logger = logging.getLogger(__name__)

    def _load(self) -> Dict:
        if not self.path.exists():
            return {"active_provider": None, "keys": {}}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            self.logger.warning(f"Ignoring unreadable config file {self.path}: {e}")
            return {"active_provider": None, "keys": {}}
        if not isinstance(data, dict) or not isinstance(data.get("keys", {}), dict):
            self.logger.warning(f"Ignoring malformed config file {self.path}")
            return {"active_provider": None, "keys": {}}
        data.setdefault("active_provider", None)
        data.setdefault("keys", {})
        return data

    def _save(self, data: Dict) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, provider: str, default: str = "") -> str:
        """Return the stored key for ``provider`` or ``default`` when there is none."""
        return self._load()["keys"].get(provider, default)

    def set(self, provider: str, value: str) -> None:
        """
        Store ``value`` as the key for ``provider``.

        Storing an LLM provider key also makes that provider active.
        """
        if provider not in LLM_PROVIDERS + IMAGE_PROVIDERS:
            raise ProviderConfigError(f"Invalid provider: {provider}")
        data = self._load()
        data["keys"][provider] = value
        if provider in LLM_PROVIDERS:
            data["active_provider"] = provider
        self._save(data)

    def delete(self, provider: str) -> None:
        data = self._load()
        data["keys"].pop(provider, None)
        if data["active_provider"] == provider:
            data["active_provider"] = None
        self._save(data)

    def clear(self) -> None:
        self._save({"active_provider": None, "keys": {}})

    def get_active_provider(self) -> Optional[str]:
        """Return the active LLM provider, or None when no provider is configured."""
        return self._load()["active_provider"]

    def set_active_provider(self, provider: str) -> None:
        """
        Make ``provider`` the active LLM provider.

        Raises:
            ProviderConfigError: If the provider is not an LLM provider or has no key.
        """
        if provider not in LLM_PROVIDERS:
            raise ProviderConfigError(f"Invalid provider: {provider}")
        data = self._load()
        if not data["keys"].get(provider):
            raise ProviderConfigError(f"No key found for {provider}")
        data["active_provider"] = provider
        self._save(data)

    def as_dict(self) -> Dict:
        return self._load()
