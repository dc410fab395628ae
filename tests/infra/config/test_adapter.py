import tomllib

import pytest

from blockmodes import decrypt, encrypt
from blockmodes.infra.config import ConfigAdapter
from blockmodes.schemas import CipherConfig


@pytest.fixture
def sample_config() -> dict:
    """Construct a representative configuration mapping for tests."""
    return {
        "general": {
            "default_mode": "ecb",
            "strict_padding": False,
        },
        "cipher": {
            "default_mode": "CTR",
        },
    }


def test_get_config_returns_copy_of_mapping(sample_config):
    adapter = ConfigAdapter(sample_config)
    assert adapter.get_config() == sample_config
    assert adapter.get_config() is not sample_config


def test_cipher_table_overrides_general(sample_config):
    cfg = ConfigAdapter(sample_config).get_cipher_config()
    assert cfg == CipherConfig(default_mode="ctr", strict_padding=False)


def test_general_used_when_cipher_table_missing():
    cfg = ConfigAdapter(
        {"general": {"default_mode": "ecb", "strict_padding": True}}
    ).get_cipher_config()
    assert cfg.default_mode == "ecb"
    assert cfg.strict_padding is True


def test_defaults_when_empty():
    assert ConfigAdapter({}).get_cipher_config() == CipherConfig()


def test_non_table_sections_ignored():
    cfg = ConfigAdapter({"general": "oops", "cipher": 3}).get_cipher_config()
    assert cfg == CipherConfig()


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        ConfigAdapter({"cipher": {"default_mode": "ofb"}}).get_cipher_config()


def test_parsed_toml_table_drives_dispatch():
    raw = tomllib.loads("[cipher]\ndefault_mode = 'ctr'\nstrict_padding = true\n")

    cfg = ConfigAdapter(raw).get_cipher_config()
    assert cfg == CipherConfig(default_mode="ctr", strict_padding=True)
    key = bytes(range(16))
    nonce = bytes(range(8))

    ct = encrypt(b"configured", key, config=cfg, rng=lambda n: nonce[:n])
    assert ct[:16] == nonce + bytes(8)
    assert decrypt(ct, key, config=cfg) == b"configured"
