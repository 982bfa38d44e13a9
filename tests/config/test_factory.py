import pytest

from rpgm_decrypter.config.factory import create_decrypter
from rpgm_decrypter.config.loader import load_config
from rpgm_decrypter.config.validator import validate_config
from rpgm_decrypter.core.constants import DEFAULT_KEY
from rpgm_decrypter.core.errors import InvalidKeyLengthError
from rpgm_decrypter.core.file_types import FileType


@pytest.mark.unit
def test_create_decrypter_with_key():
    key = "00112233445566778899aabbccddeeff"
    assert create_decrypter({"decrypter": {"key": key}}).key == key


@pytest.mark.unit
def test_create_decrypter_default_alias():
    assert create_decrypter({"decrypter": {"key": "default"}}).key == DEFAULT_KEY


@pytest.mark.unit
@pytest.mark.parametrize("config", [{}, {"decrypter": {"key": None}}])
def test_create_decrypter_without_key(config):
    assert create_decrypter(config).has_key is False


@pytest.mark.unit
def test_create_decrypter_bad_key():
    with pytest.raises(InvalidKeyLengthError):
        create_decrypter({"decrypter": {"key": "abc"}})


@pytest.mark.integration
def test_config_file_to_decryption(tmp_path, png_plain, encrypt_asset):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("decrypter:\n  key: default\n")

    config = load_config(config_path)
    validate_config(config)
    decrypter = create_decrypter(config)

    assert decrypter.decrypt(encrypt_asset(png_plain, DEFAULT_KEY), FileType.PNG) == png_plain
