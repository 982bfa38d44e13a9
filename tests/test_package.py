import pytest

import rpgm_decrypter
from rpgm_decrypter import DEFAULT_KEY, Decrypter, FileType


@pytest.mark.integration
def test_public_api_decrypts_by_extension(png_plain, make_ogg, encrypt_asset):
    decrypter = Decrypter()
    ogg = make_ogg()

    png = decrypter.decrypt(encrypt_asset(png_plain), FileType.from_extension(".rpgmvp"))
    audio = decrypter.decrypt(encrypt_asset(ogg), FileType.from_extension("ogg_"))

    assert png == png_plain
    assert audio == ogg
    assert decrypter.key == DEFAULT_KEY


@pytest.mark.unit
def test_version():
    assert isinstance(rpgm_decrypter.__version__, str)
