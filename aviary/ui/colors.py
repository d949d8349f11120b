"""Room palette and color helpers for the UI."""


class RoomColors:
    """Dusky aviary palette."""

    BG_TOP = "#1f3b2d"
    BG_BOTTOM = "#0e1f17"

    PRIMARY = "#2e7d32"
    PRIMARY_LIGHT = "#60ad5e"
    PRIMARY_DARK = "#005005"

    BRASS = "#c9a227"
    WOOD = "#6d4c41"
    CAGE_BAR = "#b0bec5"

    TEXT_PRIMARY = "#f1f8e9"
    TEXT_MUTED = "#a5b8a8"

    DIGIT_BG = "#263238"
    DIGIT_TEXT = "#eceff1"

    OVERLAY_SCRIM = "rgba(0, 0, 0, 0.55)"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def hex_to_rgba(color: str, opacity: float) -> str:
    """Turn ``#RRGGBB`` plus an opacity into a Qt stylesheet ``rgba()`` value."""
    color = color.strip()
    alpha = max(0.0, min(1.0, float(opacity)))
    if not (color.startswith("#") and len(color) == 7):
        return color
    try:
        r, g, b = int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    except ValueError:
        return color
    return f"rgba({r}, {g}, {b}, {int(round(alpha * 255))})"


def parse_scale(value: str) -> float:
    """Read the factor out of a ``scale(<n>)`` transform, defaulting to 1."""
    text = value.strip()
    if not (text.startswith("scale(") and text.endswith(")")):
        return 1.0
    try:
        return float(text[len("scale("):-1])
    except ValueError:
        return 1.0
