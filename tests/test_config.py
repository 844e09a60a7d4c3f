from cryptoadvance.txoutproof.config import (
    DEFAULT_CONFIG,
    BaseConfig,
    DevelopmentConfig,
    TestConfig,
    _get_bool_env_var,
)
from cryptoadvance.txoutproof.merkle_tree import STRATEGIES
from cryptoadvance.txoutproof.util.reflection import get_class


def test_get_bool_env_var(monkeypatch):
    monkeypatch.setenv("TXOUTPROOF_SOMETHING", "False")
    assert not _get_bool_env_var("TXOUTPROOF_SOMETHING")
    monkeypatch.setenv("TXOUTPROOF_SOMETHING", "false")
    assert not _get_bool_env_var("TXOUTPROOF_SOMETHING")
    monkeypatch.setenv("TXOUTPROOF_SOMETHING", "yes")
    assert _get_bool_env_var("TXOUTPROOF_SOMETHING")
    monkeypatch.setenv("TXOUTPROOF_SOMETHING", "")
    assert not _get_bool_env_var("TXOUTPROOF_SOMETHING")
    monkeypatch.delenv("TXOUTPROOF_SOMETHING")
    assert not _get_bool_env_var("TXOUTPROOF_SOMETHING")
    assert _get_bool_env_var("TXOUTPROOF_SOMETHING", "True")


def test_default_config():
    assert get_class(DEFAULT_CONFIG) is BaseConfig
    assert BaseConfig.DEFAULT_STRATEGY in STRATEGIES
    assert TestConfig.DEFAULT_STRATEGY == "full-height"
    assert DevelopmentConfig.DEBUG
    assert DevelopmentConfig.LOGFORMAT != BaseConfig.LOGFORMAT


def test_label_hash_chars():
    class MyConfig(BaseConfig):
        LABEL_HASH_CHARS = "12"

    assert MyConfig.label_hash_chars() == 12
    assert TestConfig.label_hash_chars() == 8
    MyConfig.LABEL_HASH_CHARS = "twelve"
    assert MyConfig.label_hash_chars() == 8
