import pytest

from gemini_images.core.exceptions import ConfigurationError
from gemini_images.core.utils.env import get_env, get_first_env, parse_bool_env


def test_get_env_required_missing(monkeypatch):
    monkeypatch.delenv("GEMINI_IMAGES_TEST_VALUE", raising=False)

    with pytest.raises(ConfigurationError) as exc:
        get_env("GEMINI_IMAGES_TEST_VALUE", required=True)

    assert exc.value.key == "GEMINI_IMAGES_TEST_VALUE"


def test_get_first_env_skips_blank_values(monkeypatch):
    monkeypatch.setenv("FIRST_KEY", "   ")
    monkeypatch.setenv("SECOND_KEY", " value ")

    assert get_first_env("FIRST_KEY", "SECOND_KEY") == "value"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("YES", True), ("on", True), ("0", False), ("no", False), ("", False), (None, False)],
)
def test_parse_bool_env(raw, expected):
    assert parse_bool_env(raw) is expected


def test_parse_bool_env_rejects_garbage():
    with pytest.raises(ConfigurationError):
        parse_bool_env("maybe")
