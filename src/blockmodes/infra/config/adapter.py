from __future__ import annotations

from typing import Any

from blockmodes.schemas import MODE_NAMES, CipherConfig


class ConfigAdapter:
    """Typed accessor over a loaded configuration mapping.

    Cipher settings resolve in the order:

    **cipher -> general -> built-in defaults**

    Args:
        config (dict[str, Any]): Loaded configuration mapping, optionally with
            ``general`` and ``cipher`` tables.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_cipher_config(self) -> CipherConfig:
        """Build a CipherConfig by merging general and cipher tables.

        Returns:
            CipherConfig: Resolved cipher configuration.

        Raises:
            ValueError: If ``default_mode`` names an unknown mode.
        """
        cfg = {**self._gen_cfg(), **self._cipher_cfg()}

        mode = str(cfg.get("default_mode", "cbc")).lower()
        if mode not in MODE_NAMES:
            raise ValueError(f"Unknown cipher mode in config: {mode!r}")

        return CipherConfig(
            default_mode=mode,
            strict_padding=bool(cfg.get("strict_padding", False)),
        )

    def _gen_cfg(self) -> dict[str, Any]:
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _cipher_cfg(self) -> dict[str, Any]:
        cipher = self._config.get("cipher")
        return cipher if isinstance(cipher, dict) else {}
