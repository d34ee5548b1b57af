"""
Image Processing CLI Commands for PyFastPix

Command line front-ends for the resampling engine: each command reads an
image file, runs one operation and writes a PNG.

Author: B.G.
"""

import logging
import sys
from pathlib import Path

import click
import numpy as np

import pyfastpix as pf
from pyfastpix import constants as cte


def _setup_logging(verbose):
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")


def _observer(verbose):
    return pf.diagnostics.log_phase if verbose else None


def _write_result(png, input_image, output_image, preview, title):
    Path(output_image).write_bytes(png)
    if preview:
        original = pf.io.load_image(input_image)
        result = pf.io.decode(png)
        pf.visu.save_comparison(
            preview, original, result.rgba(), result.width, result.height, title=title
        )
        click.echo(f"Preview written to '{preview}'")
    click.echo(f"Processed '{input_image}' -> '{output_image}'")


_preview_option = click.option(
    "--preview",
    type=click.Path(),
    default=None,
    help="Also save a side-by-side original/result figure to this path",
)
_verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
_width_option = click.option(
    "--width", "-W", default=cte.TARGET_WIDTH, show_default=True, type=int, help="Output width"
)
_height_option = click.option(
    "--height", "-H", default=cte.TARGET_HEIGHT, show_default=True, type=int, help="Output height"
)
_sigma_option = click.option(
    "--sigma",
    "-s",
    default=cte.DEFAULT_SIGMA,
    show_default=True,
    type=float,
    help="Gaussian standard deviation",
)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@_width_option
@_height_option
@_preview_option
@_verbose_option
def image_downscale(input_image, output_image, width, height, preview, verbose):
    """
    Cover-scale INPUT_IMAGE onto a fixed canvas with bilinear sampling.

    The image is scaled so it fills the canvas, the excess is cropped around
    the centre, and the result is saved as PNG to OUTPUT_IMAGE.

    Examples:

        pfp-downscale photo.jpg small.png

        pfp-downscale photo.jpg thumb.png -W 128 -H 128 --preview cmp.png
    """
    _setup_logging(verbose)
    try:
        data = Path(input_image).read_bytes()
        png = pf.pipeline.process_downscale_image(
            data, size=(width, height), observer=_observer(verbose)
        )
        _write_result(png, input_image, output_image, preview, "downscale")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@_sigma_option
@click.option(
    "--kernel-size",
    "-k",
    default=cte.KERNEL_SIZE,
    show_default=True,
    type=int,
    help="Odd side length of the Gaussian kernel",
)
@_preview_option
@_verbose_option
def image_blur(input_image, output_image, sigma, kernel_size, preview, verbose):
    """Gaussian-blur INPUT_IMAGE at full size and save it to OUTPUT_IMAGE."""
    _setup_logging(verbose)
    try:
        data = Path(input_image).read_bytes()
        png = pf.pipeline.process_blur_image(
            data, sigma=sigma, kernel_size=kernel_size, observer=_observer(verbose)
        )
        _write_result(png, input_image, output_image, preview, "blur")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@_sigma_option
@_width_option
@_height_option
@click.option(
    "--backend",
    "-b",
    type=click.Choice(["structured", "fast", "parallel"]),
    default="structured",
    show_default=True,
    help="Pixel backing: structured words, raw bytes, or the Taichi kernel",
)
@_preview_option
@_verbose_option
def image_antialias(input_image, output_image, sigma, width, height, backend, preview, verbose):
    """
    Downscale INPUT_IMAGE with Gaussian antialiasing.

    Each output pixel interpolates four Gaussian-blurred source samples.
    The structured and fast backends give identical bytes; the parallel
    backend runs the same scan as a Taichi kernel.
    """
    _setup_logging(verbose)
    size = (width, height)
    observer = _observer(verbose)
    try:
        data = Path(input_image).read_bytes()
        if backend == "parallel":
            from pyfastpix.rastermanip import parallel

            parallel.init_backend()
            png = pf.pipeline.process_downscale_antialias_parallel(
                data, sigma=sigma, size=size, observer=observer
            )
        elif backend == "fast":
            png = pf.pipeline.process_downscale_antialias_fast(
                data, sigma=sigma, size=size, observer=observer
            )
        else:
            png = pf.pipeline.process_downscale_antialias(
                data, sigma=sigma, size=size, observer=observer
            )
        _write_result(png, input_image, output_image, preview, f"antialias ({backend})")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option(
    "--boost",
    default=cte.GREEN_BOOST,
    show_default=True,
    type=int,
    help="Amount added to the green channel",
)
@_preview_option
@_verbose_option
def image_greenify(input_image, output_image, boost, preview, verbose):
    """Boost the green channel of INPUT_IMAGE and save it to OUTPUT_IMAGE."""
    _setup_logging(verbose)
    try:
        data = Path(input_image).read_bytes()
        png = pf.pipeline.process_greenify_image(
            data, boost=boost, observer=_observer(verbose)
        )
        _write_result(png, input_image, output_image, preview, "greenify")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_npy", type=click.Path())
@_width_option
@_height_option
@_verbose_option
def image_normalize(input_image, output_npy, width, height, verbose):
    """
    Convert INPUT_IMAGE to a planar float32 model input saved as OUTPUT_NPY.

    The array holds 3 * width * height values: all red, then all green, then
    all blue, each scaled to [0, 1].
    """
    _setup_logging(verbose)
    try:
        data = Path(input_image).read_bytes()
        planes = pf.pipeline.preprocess_for_model(
            data, size=(width, height), observer=_observer(verbose)
        )
        np.save(output_npy, planes)
        click.echo(f"Saved {planes.size} values ({width}x{height}x3) to '{output_npy}'")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = [
    "image_downscale",
    "image_blur",
    "image_antialias",
    "image_greenify",
    "image_normalize",
]
