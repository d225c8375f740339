"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from gemini_images import cli
from gemini_images.features.image.service import GeminiImageGenerator
from helpers.gemini_fakes import JPEG_BYTES, PNG_BYTES, StatusError, make_response, image_part, text_part


@pytest.fixture
def patched_cli(monkeypatch, fake_client, sleep_recorder):
    created = {}

    def _create_generator(api_key=None, default_config=None, retry_config=None):
        created["api_key"] = api_key
        created["default_config"] = default_config
        return GeminiImageGenerator(default_config=default_config, client=fake_client, sleep=sleep_recorder)

    monkeypatch.setattr(cli, "create_generator", _create_generator)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    return created


@pytest.mark.parametrize(
    "output, expected",
    [
        (None, (False, Path("./output"), "generated.png")),
        ("renders", (False, Path("renders"), "generated.png")),
        ("renders/tree.PNG", (True, Path("renders"), "tree.PNG")),
        ("tree.webp", (True, Path("."), "tree.webp")),
    ],
)
def test_parse_output_path(output, expected):
    assert tuple(cli.parse_output_path(output, "generated.png")) == expected


def test_summarize_single_line():
    assert cli.summarize_prompt("pixel art tree") == "pixel art tree"

    summary = cli.summarize_prompt("x" * 80)
    assert len(summary) == 60
    assert summary.endswith("...")


def test_summarize_prefers_key_lines():
    prompt = "Knight sprite sheet\nCharacter: armored knight\nnoise line\nAction: swinging sword\nStyle: pixel art"

    assert cli.summarize_prompt(prompt) == "Character: armored knight, Action: swinging sword"


def test_summarize_falls_back_to_first_lines():
    assert cli.summarize_prompt("first line\n\n second line \nthird") == "first line, second line"


def test_generate_writes_image_and_metadata(tmp_path, fake_client, patched_cli):
    fake_client.queue(make_response(image_part(PNG_BYTES), text_part("Here you go")))
    output = tmp_path / "tree.png"

    exit_code = cli.main(
        ["generate", "pixel art tree", "--output", str(output), "--model", "pro", "--image-size", "2K", "--api-key", "k"]
    )

    assert exit_code == 0
    assert output.read_bytes() == PNG_BYTES
    metadata = (tmp_path / "tree.md").read_text(encoding="utf-8")
    assert "**Model:** gemini-3-pro-image-preview" in metadata
    assert "Size: 2K" in metadata
    assert patched_cli["api_key"] == "k"
    assert patched_cli["default_config"].image_size == "2K"


def test_edit_uses_default_filename(tmp_path, fake_client, patched_cli):
    source = tmp_path / "hero.png"
    source.write_bytes(PNG_BYTES)
    fake_client.queue(make_response(image_part(JPEG_BYTES)))
    out_dir = tmp_path / "edits"

    exit_code = cli.main(["edit", str(source), "add a hat", "--output", str(out_dir), "--no-metadata"])

    assert exit_code == 0
    # Saved under the extension matching the returned bytes
    assert (out_dir / "edited-hero.jpg").read_bytes() == JPEG_BYTES
    assert not (out_dir / "edited-hero.md").exists()


def test_compose_records_source_images(tmp_path, fake_client, patched_cli):
    sources = []
    for name in ("hero.png", "sword.png"):
        path = tmp_path / name
        path.write_bytes(PNG_BYTES)
        sources.append(str(path))
    fake_client.queue(make_response(image_part(PNG_BYTES)))

    exit_code = cli.main(["compose", *sources, "hero holding sword", "--output", str(tmp_path)])

    assert exit_code == 0
    parts = fake_client.models.calls[0].contents[0].parts
    assert len(parts) == 3
    metadata = (tmp_path / "composed.md").read_text(encoding="utf-8")
    assert "hero.png" in metadata and "sword.png" in metadata


def test_compose_needs_two_images(tmp_path, fake_client, patched_cli):
    source = tmp_path / "hero.png"
    source.write_bytes(PNG_BYTES)

    assert cli.main(["compose", str(source), "alone"]) == 1
    assert fake_client.models.calls == []


def test_no_image_in_response_fails(tmp_path, fake_client, patched_cli):
    fake_client.queue(make_response(text_part("I cannot draw that")))

    assert cli.main(["generate", "something", "--output", str(tmp_path)]) == 1
    assert not any(tmp_path.iterdir())


def test_service_errors_exit_with_one(tmp_path, fake_client, patched_cli):
    fake_client.queue(StatusError(400, "INVALID_ARGUMENT"))

    assert cli.main(["generate", "something", "--output", str(tmp_path)]) == 1


def test_unsupported_config_exits_with_one(tmp_path, fake_client, patched_cli):
    exit_code = cli.main(["generate", "tree", "--model", "flash", "--image-size", "4K", "--output", str(tmp_path)])

    assert exit_code == 1
    assert fake_client.models.calls == []


def test_missing_api_key_exits_with_one(monkeypatch, clear_api_keys):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)

    assert cli.main(["generate", "tree"]) == 1


def test_usage_errors_exit_with_one():
    with pytest.raises(SystemExit) as exc:
        cli.main(["generate"])

    assert exc.value.code == 1
