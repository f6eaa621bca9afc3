#!/usr/bin/env python3
"""
Panel display module for the temperature converter
Draws the current conversion onto an image with Pillow
"""

import io
import logging
from typing import Dict, Optional
from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

FONT_BOLD = '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf'
FONT_REGULAR = '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf'

# Dark blue panel, matches the web page background
BACKGROUND = (23, 35, 77)
FOREGROUND = (255, 255, 255)
SECONDARY = (160, 170, 190)


class ConverterDisplay:
    """Renders the converter panel to an image"""

    def __init__(self, width: int = 320, height: int = 160):
        self.width = width
        self.height = height
        self.last_image: Optional[Image.Image] = None

        # Load fonts
        try:
            self.font_large = ImageFont.truetype(FONT_BOLD, 28)
            self.font_medium = ImageFont.truetype(FONT_BOLD, 18)
            self.font_small = ImageFont.truetype(FONT_REGULAR, 12)
        except OSError:
            logger.debug("DejaVu fonts not found, using default font")
            self.font_large = ImageFont.load_default()
            self.font_medium = ImageFont.load_default()
            self.font_small = ImageFont.load_default()

    def create_display_image(self, state: Dict) -> Image.Image:
        """Create an image for the given state snapshot"""
        image = Image.new('RGB', (self.width, self.height), BACKGROUND)
        draw = ImageDraw.Draw(image)

        draw.text((10, 8), "Temperature Converter", font=self.font_medium, fill=FOREGROUND)

        # Source side
        from_str = f"{state['source_unit']}: {state['input_value']:.2f} {state['source_symbol']}"
        draw.text((10, 45), from_str, font=self.font_small, fill=SECONDARY)

        draw.line([(10, 68), (self.width - 10, 68)], fill=SECONDARY, width=1)

        # Converted value (large)
        draw.text((10, 78), state['display_value'], font=self.font_large, fill=FOREGROUND)
        draw.text((10, self.height - 22), f"to {state['target_unit']}",
                  font=self.font_small, fill=SECONDARY)

        return image

    def update(self, state: Dict) -> bool:
        """Redraw the panel for a new state; usable as a store subscriber"""
        try:
            self.last_image = self.create_display_image(state)
            return True
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error updating display: {e}")
            return False

    def render_png(self) -> Optional[bytes]:
        """PNG bytes of the last drawn panel, or None if nothing was drawn"""
        if self.last_image is None:
            return None
        buffer = io.BytesIO()
        self.last_image.save(buffer, format='PNG')
        return buffer.getvalue()

    def clear(self):
        """Forget the last drawn panel"""
        self.last_image = None
