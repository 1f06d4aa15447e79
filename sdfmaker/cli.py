"""Command line for turning grayscale images into signed distance fields."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from sdfmaker.algorithms import create_algorithm
from sdfmaker.channels import MultiChannelInput
from sdfmaker.errors import SDFError
from sdfmaker.field import SDF

_PathArg = str | PathLike | None


def _default_output(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}.sdf.png")


def process_single(
    input: str | PathLike,
    output: _PathArg = None,
    alpha: _PathArg = None,
    normal: _PathArg = None,
    ao: _PathArg = None,
    curvature: _PathArg = None,
    method: str = "jfa",
    threshold: int = 128,
    max_distance: float = 32.0,
) -> SDF:
    """Generate a distance field from one image set, save it and return it.

    Without ``alpha`` the main input is used as the alpha channel. Without
    ``output`` the field is written next to the input as ``<name>.sdf.png``.
    """
    start = time.perf_counter()
    input_path = Path(input)
    print(f"Processing SDF with method: {method}")

    channels = MultiChannelInput()
    if alpha is not None:
        print(f"Loading alpha channel: {alpha}")
        channels.load_alpha(alpha)
    else:
        print(f"Loading input as alpha channel: {input_path}")
        channels.load_alpha(input_path)

    if normal is not None:
        print(f"Loading normal channel: {normal}")
        channels.load_normal(normal)
    if ao is not None:
        print(f"Loading AO channel: {ao}")
        channels.load_ao(ao)
    if curvature is not None:
        print(f"Loading curvature channel: {curvature}")
        channels.load_curvature(curvature)

    channels.validate()
    width, height = channels.dimensions()
    print(f"Image dimensions: {width}x{height}")

    algorithm = create_algorithm(method, threshold, max_distance)

    print("Generating SDF...")
    field = algorithm.process(channels)

    sdf = SDF.from_raw_data(field.data, field.width, field.height, field.max_distance)
    sdf.metadata.algorithm = algorithm.name
    sdf.metadata.threshold = threshold
    sdf.metadata.processing_time = time.perf_counter() - start
    sdf.metadata.source_file = str(input_path)

    output_path = Path(output) if output is not None else _default_output(input_path)
    print(f"Saving SDF to: {output_path}")
    sdf.save(output_path, True)

    print(f"Processing completed in {time.perf_counter() - start:.2f}s")
    return sdf


def _byte(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"threshold must be between 0 and 255, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdf-maker",
        description="Convert grayscale images into 2D signed distance fields.",
    )
    commands = parser.add_subparsers(dest="command")

    process = commands.add_parser("process", help="Process a single image file")
    process.add_argument("input", metavar="INPUT", type=Path, help="Input image file")
    process.add_argument("-o", "--output", type=Path, help="Output SDF file")
    process.add_argument("--alpha", type=Path, help="Alpha/mask channel input")
    process.add_argument("--normal", type=Path, help="Normal map input")
    process.add_argument("--ao", type=Path, help="Ambient occlusion input")
    process.add_argument("--curvature", type=Path, help="Curvature map input")
    process.add_argument("-m", "--method", default="jfa", help="Processing method")
    process.add_argument(
        "-t", "--threshold", type=_byte, default=128, help="Threshold value for edge detection"
    )
    process.add_argument(
        "--max-distance", type=float, default=32.0, help="Maximum distance to calculate"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command != "process":
        parser.print_help()
        return 1

    try:
        process_single(
            args.input,
            args.output,
            args.alpha,
            args.normal,
            args.ao,
            args.curvature,
            args.method,
            args.threshold,
            args.max_distance,
        )
    except SDFError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        suggestion = exc.recovery_suggestion()
        if suggestion:
            print(f"Suggestion: {suggestion}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())