import base64
from types import SimpleNamespace

from gemini_images.core.providers.image.utils.gemini.responses import parse_result
from helpers.gemini_fakes import PNG_BYTES, empty_response, image_part, make_response, text_part


def test_single_image_part():
    response = make_response(image_part(PNG_BYTES, "image/png"))

    result = parse_result(response)

    assert result.image_data == PNG_BYTES
    assert result.mime_type == "image/png"
    assert result.text is None
    assert result.raw is response


def test_text_parts_are_concatenated_in_order():
    response = make_response(text_part("Here is "), image_part(), text_part("your cube."))

    result = parse_result(response)

    assert result.text == "Here is your cube."
    assert result.has_image


def test_first_image_wins():
    response = make_response(image_part(b"first", "image/png"), image_part(b"second", "image/jpeg"))

    result = parse_result(response)

    assert result.image_data == b"first"
    assert result.mime_type == "image/png"


def test_base64_inline_data_is_decoded():
    encoded = base64.b64encode(PNG_BYTES).decode()

    assert parse_result(make_response(image_part(encoded))).image_data == PNG_BYTES


def test_no_candidates_is_empty_result():
    response = empty_response()

    result = parse_result(response)

    assert not result.has_image
    assert result.text is None
    assert result.raw is response


def test_only_first_candidate_is_read():
    response = SimpleNamespace(
        candidates=[
            SimpleNamespace(content=SimpleNamespace(parts=[text_part("no image here")])),
            SimpleNamespace(content=SimpleNamespace(parts=[image_part()])),
        ]
    )

    result = parse_result(response)

    assert result.text == "no image here"
    assert result.image_data is None
