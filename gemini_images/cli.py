"""Command-line interface for Gemini image generation.

Usage:
    gemini-images generate "<prompt>" [options]
    gemini-images edit <image> "<prompt>" [options]
    gemini-images compose <img1> <img2> ... "<prompt>" [options]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import NamedTuple, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from gemini_images.config.image import SUPPORTED_ASPECT_RATIOS, SUPPORTED_IMAGE_SIZES
from gemini_images.core.exceptions import ServiceError
from gemini_images.core.logging import setup_logging
from gemini_images.core.providers.registry import resolve_model_name
from gemini_images.core.pydantic_schemas import (
    GenerationResult,
    ImageEditRequest,
    ImageGenerationConfig,
    ImageMetadata,
    MultiImageRequest,
    TextToImageRequest,
)
from gemini_images.features.image.files import (
    IMAGE_EXTENSIONS,
    load_image,
    load_images,
    save_image_to_file,
)
from gemini_images.features.image.service import GeminiImageGenerator, create_generator

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "./output"
SUMMARY_LIMIT = 60
_KEY_LINE = re.compile(r"^(Action|Direction|Scene|Character|Style):", re.IGNORECASE)


class OutputTarget(NamedTuple):
    is_file: bool
    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


class CliError(Exception):
    """Raised for invalid command usage detected after parsing."""


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors share the generic failure exit code
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(err_console.file)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_output_path(output: Optional[str], default_filename: str) -> OutputTarget:
    """Treat ``output`` as a file when it has an image extension, else a directory."""

    if not output:
        return OutputTarget(False, Path(DEFAULT_OUTPUT_DIR), default_filename)

    path = Path(output)
    if path.suffix.lower() in IMAGE_EXTENSIONS:
        return OutputTarget(True, path.parent, path.name)
    return OutputTarget(False, path, default_filename)


def _truncate(text: str) -> str:
    if len(text) > SUMMARY_LIMIT:
        return text[: SUMMARY_LIMIT - 3] + "..."
    return text


def summarize_prompt(prompt: str) -> str:
    """Shorten a prompt for display.

    Multi-line prompts prefer their ``Action:``/``Direction:``/``Scene:``/
    ``Character:``/``Style:`` lines; otherwise the first two lines are used.
    """

    lines = [line.strip() for line in prompt.splitlines() if line.strip()]
    if not lines:
        return ""
    if len(lines) == 1:
        return _truncate(lines[0])

    key_lines = [line for line in lines if _KEY_LINE.match(line)]
    selected = key_lines[:2] if key_lines else lines[:2]
    return _truncate(", ".join(selected))


def _build_config(args: argparse.Namespace) -> ImageGenerationConfig:
    return ImageGenerationConfig(
        model=args.model,
        aspect_ratio=args.aspect_ratio,
        image_size=args.image_size,
    )


def _finish(
    result: GenerationResult,
    target: OutputTarget,
    generator: GeminiImageGenerator,
    args: argparse.Namespace,
    prompt: str,
    source_ids: Sequence[str] = (),
) -> int:
    if not result.has_image:
        err_console.print("[red]Error: No image data received[/red]")
        if result.text:
            err_console.print(f"\nModel response: {escape(result.text)}")
        return 1

    metadata = None
    if not args.no_metadata:
        config = generator.resolve_config()
        metadata = ImageMetadata(
            prompt=prompt,
            model=resolve_model_name(config.model),
            aspect_ratio=config.aspect_ratio,
            image_size=config.image_size,
            source_ids=list(source_ids),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    saved_path = save_image_to_file(result, target.path, metadata)
    console.print(f"[green]✓ Image saved to[/green] {saved_path}")
    if result.text:
        console.print(f"\nModel response: {escape(result.text)}")
    return 0


async def run_generate(args: argparse.Namespace, generator: GeminiImageGenerator) -> int:
    target = parse_output_path(args.output, "generated.png")

    console.print(f'Generating: "{summarize_prompt(args.prompt)}"')
    result = await generator.generate_from_text(TextToImageRequest(prompt=args.prompt))
    return _finish(result, target, generator, args, args.prompt)


async def run_edit(args: argparse.Namespace, generator: GeminiImageGenerator) -> int:
    target = parse_output_path(args.output, f"edited-{Path(args.image).stem}.png")
    image = await load_image(args.image)

    console.print(f'Editing: "{summarize_prompt(args.prompt)}"')
    result = await generator.edit_image(ImageEditRequest(image=image, prompt=args.prompt))
    return _finish(result, target, generator, args, args.prompt, [args.image])


async def run_compose(args: argparse.Namespace, generator: GeminiImageGenerator) -> int:
    if len(args.inputs) < 3:
        raise CliError("at least 2 images and a prompt are required")

    *image_paths, prompt = args.inputs
    target = parse_output_path(args.output, "composed.png")
    images = await load_images(image_paths)

    console.print(f'Composing ({len(image_paths)} images): "{summarize_prompt(prompt)}"')
    result = await generator.compose_from_multiple_images(MultiImageRequest(images=images, prompt=prompt))
    return _finish(result, target, generator, args, prompt, image_paths)


_COMMANDS = {
    "generate": run_generate,
    "edit": run_edit,
    "compose": run_compose,
}


async def run_command(args: argparse.Namespace) -> int:
    generator = create_generator(api_key=args.api_key, default_config=_build_config(args))
    return await _COMMANDS[args.cmd](args, generator)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--model", help="Model id or alias (default: gemini-3-pro-image-preview)")
    common.add_argument("--aspect-ratio", choices=SUPPORTED_ASPECT_RATIOS, help="Aspect ratio (default: 1:1)")
    common.add_argument(
        "--image-size",
        choices=SUPPORTED_IMAGE_SIZES,
        help="Image size (default: 1K; 2K/4K need the Pro model)",
    )
    common.add_argument("--output", help=f"Output file or directory (default: {DEFAULT_OUTPUT_DIR}/)")
    common.add_argument("--api-key", help="Gemini API key (or set GEMINI_API_KEY)")
    common.add_argument("--no-metadata", action="store_true", help="Do not write the .md metadata file")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    p = _ArgumentParser(
        prog="gemini-images",
        description="Gemini Images - generate, edit and compose images with Gemini",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    generate = sub.add_parser("generate", parents=[common], help="Generate an image from a text description")
    generate.add_argument("prompt", help="Text description of the image")

    edit = sub.add_parser("edit", parents=[common], help="Transform an existing image with instructions")
    edit.add_argument("image", help="Path or URL of the image to edit")
    edit.add_argument("prompt", help="Editing instructions")

    compose = sub.add_parser("compose", parents=[common], help="Combine multiple images with instructions")
    compose.add_argument(
        "inputs",
        nargs="+",
        metavar="IMAGE... PROMPT",
        help="Two or more image paths or URLs followed by the prompt",
    )

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI; returns the process exit code."""

    p = build_arg_parser()
    args = p.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        exit_code = asyncio.run(run_command(args))
    except (ServiceError, CliError, OSError) as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        return 1

    if exit_code == 0:
        console.print("\n[green]✓ Done![/green]")
    return exit_code


__all__ = [
    "OutputTarget",
    "build_arg_parser",
    "main",
    "parse_output_path",
    "summarize_prompt",
]
