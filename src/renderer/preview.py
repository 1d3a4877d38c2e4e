# renderer/preview.py
import logging

import numpy as np
import pygame

from renderer.tone_mapping import pack_rgb

logger = logging.getLogger(__name__)

# Channel masks matching the 0xRRGGBB packing.
RGB_MASKS = (0xFF0000, 0x00FF00, 0x0000FF, 0)


class Preview:
    """
    Shows a finished render in a window until it is closed or Escape is pressed.
    """
    def __init__(self, rgb8: np.ndarray, title: str = "Ray Caster", scale: int = 1):
        self.height, self.width = rgb8.shape[:2]
        self.scale = max(1, scale)
        self.title = title
        self.packed = pack_rgb(rgb8)

    def make_surface(self) -> pygame.Surface:
        # surfarray indexes pixels as [x, y], hence the transpose.
        surface = pygame.Surface((self.width, self.height), depth=32, masks=RGB_MASKS)
        pygame.surfarray.blit_array(surface, self.packed.T)
        if self.scale != 1:
            surface = pygame.transform.scale(
                surface, (self.width * self.scale, self.height * self.scale))
        return surface

    def run(self):
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width * self.scale, self.height * self.scale))
            pygame.display.set_caption(self.title)
            screen.blit(self.make_surface(), (0, 0))
            pygame.display.flip()
            logger.info("Preview open; close the window or press Escape to exit")

            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                clock.tick(30)
        finally:
            pygame.quit()
