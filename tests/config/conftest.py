"""
Shared fixtures for config module tests.
"""
import logging

import pytest
import yaml


@pytest.fixture
def valid_config():
    """Complete valid configuration."""
    return {
        'decrypter': {
            'key': 'd41d8cd98f00b204e9800998ecf8427e',
        },
        'logging': {
            'level': 'INFO',
            'console': True,
            'file': None,
        },
    }


@pytest.fixture
def temp_config_file(tmp_path, valid_config):
    """Create temporary config file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump(valid_config))
    return config_file


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
