"""
Windows 3.1 style eye icon for the tray and the packaged app.
Run standalone to write icon.ico / icon.png, or call create_eye_icon() for the tray.
"""
import math

from PIL import Image, ImageDraw

# Windows 3.1 16-color palette
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
TEAL = (0, 128, 128, 255)
DARK_TEAL = (0, 80, 80, 255)
LIGHT_CYAN = (128, 192, 192, 255)
GRAY = (128, 128, 128, 255)
SILVER = (192, 192, 192, 255)

# Greyed variant while reminders are stopped
PAUSED = {TEAL: (100, 110, 110, 255), DARK_TEAL: (70, 80, 80, 255), LIGHT_CYAN: (140, 150, 150, 255)}

ICON_SIZES = [16, 32, 48, 64, 128, 256]


def _lens_points(cx, cy, half_w, half_h, steps=48):
    """Outline of an almond-shaped eye: two circular arcs meeting at the corners."""
    pts = []
    for i in range(steps + 1):
        t = math.pi * i / steps
        pts.append((cx - half_w * math.cos(t), cy - half_h * math.sin(t)))
    for i in range(1, steps):
        t = math.pi * i / steps
        pts.append((cx + half_w * math.cos(t), cy + half_h * math.sin(t)))
    return pts


def create_eye_icon(size: int = 64, paused: bool = False) -> Image.Image:
    """Draw the icon at ``size`` px (designed on a 64px grid)."""
    pal = (lambda c: PAUSED.get(c, c)) if paused else (lambda c: c)
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    s = size / 64
    w = max(1, int(2 * s))

    cx, cy = size / 2, size / 2
    half_w, half_h = 29 * s, 17 * s

    # Drop shadow, then the white of the eye with a black outline
    shadow = [(x + s, y + s) for x, y in _lens_points(cx, cy, half_w, half_h)]
    draw.polygon(shadow, fill=GRAY)
    draw.polygon(_lens_points(cx, cy, half_w, half_h), fill=WHITE, outline=BLACK)
    draw.line(_lens_points(cx, cy, half_w, half_h) + [(cx - half_w, cy)], fill=BLACK, width=w)

    # Iris with bevel: light upper-left, dark lower-right
    r = 13 * s
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=pal(TEAL), outline=BLACK, width=w)
    for a_deg in range(200, 345, 2):
        a = math.radians(a_deg)
        draw.point((cx + (r - 2 * s) * math.cos(a), cy + (r - 2 * s) * math.sin(a)), fill=pal(LIGHT_CYAN))
    for a_deg in range(20, 165, 2):
        a = math.radians(a_deg)
        draw.point((cx + (r - 2 * s) * math.cos(a), cy + (r - 2 * s) * math.sin(a)), fill=pal(DARK_TEAL))

    # Pupil and highlight
    pr = 6 * s
    draw.ellipse([cx - pr, cy - pr, cx + pr, cy + pr], fill=BLACK)
    hr = max(1, 2 * s)
    draw.ellipse([cx - pr + s, cy - pr + s, cx - pr + s + 2 * hr, cy - pr + s + 2 * hr], fill=WHITE)

    # Paused: a lid line across the eye. Running: lashes along the upper lid
    if paused:
        draw.line([(cx - half_w, cy), (cx + half_w, cy)], fill=SILVER, width=w)
    else:
        for dx in (-14, -5, 5, 14):
            x = cx + dx * s
            top = cy - half_h * math.sqrt(max(0.0, 1 - (dx * s / half_w) ** 2))
            draw.line([(x, top), (x + dx * s * 0.2, top - 6 * s)], fill=BLACK, width=w)

    return img


def generate_icon(directory: str = ".") -> list:
    """Write icon.ico and icon.png into ``directory``; returns the paths."""
    import os
    images = [create_eye_icon(s) for s in ICON_SIZES]
    ico = os.path.join(directory, "icon.ico")
    png = os.path.join(directory, "icon.png")
    # ICO: largest first, smaller ones appended
    images[-1].save(ico, format="ICO", append_images=images[:-1])
    images[-1].save(png, format="PNG")
    return [ico, png]


if __name__ == "__main__":
    paths = generate_icon()
    print(f"Generated {', '.join(paths)}")
