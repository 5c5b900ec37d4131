from __future__ import annotations
from dataclasses import dataclass


@dataclass
class OverlayConfig:
    """
    Налаштування підсумку кадру та оверлею.
    Передається явно; default_config — для звичайного використання.
    """
    # ---- геометрія -----------------------------------------------------
    hull_backend: str = "internal"   # "internal" | "scipy"
    dedupe: bool = False             # прибирати збіжні дотики перед розрахунком

    # ---- оверлей (пікселі) ---------------------------------------------
    touch_radius: float = 50
    center_radius: float = 30

    # ---- кольори ARGB --------------------------------------------------
    background_color: int = 0x60000000
    touch_color: int = 0xd0204a87
    analysis_color: int = 0xd0888a85
    text_color: int = 0xffeeecee

    # ---- текст статусу -------------------------------------------------
    text_precision: int = 1


def argb_to_rgba(color: int) -> tuple[float, float, float, float]:
    """0xAARRGGBB -> (r, g, b, a) у [0, 1] (формат matplotlib)."""
    a = (color >> 24) & 0xff
    r = (color >> 16) & 0xff
    g = (color >> 8) & 0xff
    b = color & 0xff
    return (r / 255, g / 255, b / 255, a / 255)


default_config = OverlayConfig()
