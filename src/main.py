# main.py
import logging
import random
import sys

import click

from camera.viewport import Viewport
from geometry.scenes import SCENES
from renderer.raytracer import DEFAULT_SEED, MAX_DEPTH, Renderer
from renderer.tone_mapping import to_rgb8
from renderer.image_io import load_image, save_image

logger = logging.getLogger(__name__)


def render_to_file(scene: str, width: int, height: int, output: str,
                   seed: int = DEFAULT_SEED, max_depth: int = MAX_DEPTH,
                   time: float = 0.0):
    """
    Render one of the preset scenes and write it to output.
    Returns the 8-bit image that was written.
    """
    world = SCENES[scene]()
    logger.info("Scene '%s' with %d objects", scene, len(world))

    renderer = Renderer(width, height, max_depth=max_depth, time=time,
                        normals=(scene == "normals"))
    grid = renderer.render(Viewport(), world, random.Random(seed))
    rgb8 = to_rgb8(grid)
    save_image(rgb8, output)
    return rgb8


def open_preview(path: str, title: str):
    """
    Window showing the image as it was written to path, compression included.
    """
    # pygame is only pulled in when a window is requested.
    from renderer.preview import Preview
    return Preview(load_image(path), title=title)


@click.command()
@click.option("--width", type=click.IntRange(min=1), default=200, show_default=True)
@click.option("--height", type=click.IntRange(min=1), default=100, show_default=True)
@click.option("--scene", type=click.Choice(sorted(SCENES)), default="materials", show_default=True)
@click.option("--time", "time_", type=click.FLOAT, default=0.0, show_default=True,
              help="Time stamped on every primary ray.")
@click.option("--seed", type=click.INT, default=DEFAULT_SEED, show_default=True)
@click.option("--max-depth", type=click.IntRange(min=1), default=MAX_DEPTH, show_default=True)
@click.option("--output", type=click.Path(dir_okay=False), default="out_img.jpg", show_default=True)
@click.option("--preview/--no-preview", default=False, help="Show the result in a window.")
@click.option("--verbose", is_flag=True, help="Log row progress.")
def main(width, height, scene, time_, seed, max_depth, output, preview, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        render_to_file(scene, width, height, output, seed=seed,
                       max_depth=max_depth, time=time_)
    except (OSError, ValueError) as e:
        logger.exception("Rendering failed: %s", e)
        sys.exit(1)

    if preview:
        open_preview(output, title=f"{scene} ({width}x{height})").run()


if __name__ == "__main__":
    main()
