"""Pygame-based preview window. Shows an upscaled view of a Bitmap."""

import pygame

from rasterbmp import config
from rasterbmp.canvas import Bitmap


class Simulator:
    """Opens a window that displays the Bitmap contents, upscaled to be visible."""

    def __init__(self, bitmap: Bitmap, scale: int = config.PREVIEW_SCALE,
                 title: str = "Bitmap Preview"):
        self.bitmap = bitmap
        self.scale = scale
        self.width = bitmap.width * scale
        self.height = bitmap.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def update(self) -> bool:
        """Blit bitmap to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # Pillow already flips rows so the bottom row lands at the bottom
        img = self.bitmap.to_image()
        surface = pygame.image.frombuffer(img.tobytes(), img.size, "RGBA")

        # Upscale to the display window
        self.screen.blit(pygame.transform.scale(surface, (self.width, self.height)), (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = config.FPS) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
