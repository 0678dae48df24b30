"""
Pillow Backend
Font metrics for the stats line and rasterising a DrawPlan onto an image
"""

from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from .plan import ALIGN_LEFT, ALIGN_RIGHT, Circle, DrawPlan, TextRun

FONT_PATHS = {
    'bold': "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    'regular': "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
}

# Text runs are anchored on their baseline
ANCHORS = {
    ALIGN_LEFT: 'ls',
    ALIGN_RIGHT: 'rs',
}


@lru_cache(maxsize=64)
def load_font(size: float, bold: bool = False):
    """Load font with fallback to Pillow's bundled default font"""
    path = FONT_PATHS['bold' if bold else 'regular']
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        return ImageFont.load_default(size)


def measure_width(text: str, font_size: float) -> float:
    """Horizontal advance of text at font_size"""
    return load_font(font_size).getlength(text)


def measure_bold_width(text: str, font_size: float) -> float:
    return load_font(font_size, bold=True).getlength(text)


def draw_circle(draw: ImageDraw.ImageDraw, circle: Circle):
    bbox = [
        circle.x - circle.radius,
        circle.y - circle.radius,
        circle.x + circle.radius,
        circle.y + circle.radius,
    ]
    draw.ellipse(bbox, fill=circle.color)


def draw_text(draw: ImageDraw.ImageDraw, run: TextRun):
    font = load_font(run.font_size, run.bold)
    draw.text((run.x, run.y), run.text, font=font, fill=run.color, anchor=ANCHORS.get(run.align, ANCHORS[ALIGN_LEFT]))


def draw_plan(plan: DrawPlan, width: int, height: int) -> Image.Image:
    """
    Rasterise a draw plan.

    Args:
        plan: output of lifedots.engine.render
        width, height: image size in pixels, normally the render viewport

    Returns:
        RGBA PIL Image
    """
    image = Image.new('RGBA', (int(width), int(height)), plan.background)
    draw = ImageDraw.Draw(image)

    for item in plan.items:
        if isinstance(item, Circle):
            draw_circle(draw, item)
        else:
            draw_text(draw, item)

    return image
