from __future__ import annotations

import numpy as np
from PIL import Image

from hex2bmp.models.image_model import ImageData
from hex2bmp.services.color_service import ColorConverter


class PreviewService:
    def __init__(self, color_converter: ColorConverter | None = None) -> None:
        self._colors = color_converter or ColorConverter()

    def render(self, image: ImageData) -> Image.Image:
        """
        Растр RGBA для предпросмотра.
        Пиксели без данных остаются прозрачными (0, 0, 0, 0).
        """
        total = image.width * image.height
        count = min(total, len(image.data))
        rgba = np.zeros((total, 4), dtype=np.uint8)
        if count:
            rgba[:count, :3] = self._colors.to_rgb888_array(image.data[:count])
            rgba[:count, 3] = 255
        return Image.fromarray(rgba.reshape(image.height, image.width, 4))
