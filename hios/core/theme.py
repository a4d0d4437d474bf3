from __future__ import annotations
from typing import Dict, Optional

from pydantic import BaseModel

from .constants import DEFAULT_THEME, THEME_MODES

FONT_FAMILY = "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"
ACCENT_COLOR = "#f59e0b"


class Palette(BaseModel):
    mode: str
    primary: str
    success: str
    warning: str
    error: str
    info: str
    bg_container: str
    bg_layout: str
    text: str
    text_secondary: str
    border: str
    accent: str = ACCENT_COLOR
    font_family: str = FONT_FAMILY
    font_size: int = 14
    border_radius: int = 6


LIGHT = Palette(
    mode="light",
    primary="#0066cc",
    success="#52c41a",
    warning="#faad14",
    error="#ff4d4f",
    info="#1890ff",
    bg_container="#ffffff",
    bg_layout="#f5f5f5",
    text="#1a1a1a",
    text_secondary="#666666",
    border="rgba(0,0,0,0.06)",
)

DARK = Palette(
    mode="dark",
    primary="#4096ff",
    success="#73d13d",
    warning="#ffc53d",
    error="#ff7875",
    info="#69b1ff",
    bg_container="#1a1a1a",
    bg_layout="#0d0d0d",
    text="#e6e6e6",
    text_secondary="#999999",
    border="rgba(255,255,255,0.08)",
)

PALETTES: Dict[str, Palette] = {"light": LIGHT, "dark": DARK}


def normalize_mode(mode: Optional[str]) -> str:
    """Unknown or empty modes fall back to the default theme."""
    candidate = (mode or "").strip().lower()
    return candidate if candidate in THEME_MODES else DEFAULT_THEME

def toggle_mode(mode: str) -> str:
    return "light" if normalize_mode(mode) == "dark" else "dark"

def get_palette(mode: str) -> Palette:
    return PALETTES[normalize_mode(mode)]

def build_theme_css(palette: Palette, accent: Optional[str] = None) -> str:
    """CSS custom properties consumed by assets/style.css."""
    variables = {
        "--hios-primary": palette.primary,
        "--hios-success": palette.success,
        "--hios-warning": palette.warning,
        "--hios-error": palette.error,
        "--hios-info": palette.info,
        "--hios-bg-container": palette.bg_container,
        "--hios-bg-layout": palette.bg_layout,
        "--hios-text": palette.text,
        "--hios-text-secondary": palette.text_secondary,
        "--hios-border": palette.border,
        "--hios-accent": accent or palette.accent,
        "--hios-radius": f"{palette.border_radius}px",
        "--hios-font-size": f"{palette.font_size}px",
        "--hios-font-family": palette.font_family,
    }
    body = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return f":root {{\n{body}\n}}\n.stApp {{ background: var(--hios-bg-layout); color: var(--hios-text); }}"
