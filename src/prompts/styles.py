"""Visual style presets and supported output languages."""

from __future__ import annotations

from typing import Dict, List, Optional

DEFAULT_LANGUAGE = "English"
CUSTOM_STYLE = "Custom"

DEFAULT_REPO_STYLE = "Modern Data Flow"
DEFAULT_ARTICLE_STYLE = "Modern Editorial"

REPO_STYLES: Dict[str, str] = {
    "Modern Data Flow": (
        'Replicate "Androidify Data Flow" aesthetic. Light blue (#eef8fe) solid background. '
        "Colorful, flat vector icons. Smooth, bright blue curved arrows."
    ),
    "Hand-Drawn Blueprint": (
        "Technical architectural blueprint. Dark blue background with white/light blue "
        "hand-drawn lines. Looks like a sketch on drafting paper."
    ),
    "Corporate Minimal": (
        "Clean, corporate, minimalist. White background, lots of whitespace. Use a limited, "
        "professional color palette (greys, navy blues)."
    ),
    "Neon Cyberpunk": (
        "Dark mode cyberpunk. Black background with glowing neon pink, cyan, and violet lines "
        "and nodes. High contrast, futuristic look."
    ),
}

ARTICLE_STYLES: Dict[str, str] = {
    "Modern Editorial": (
        "Modern, flat vector illustration style. Clean, professional, and editorial (like a "
        "high-end tech magazine). Cohesive, mature color palette."
    ),
    "Fun & Playful": (
        "Fun, playful, vibrant 2D vector illustrations. Use bright colors, rounded shapes, "
        "and a friendly tone."
    ),
    "Clean Minimalist": (
        "Ultra-minimalist. Lots of whitespace, thin lines, limited color palette (1-2 accent "
        "colors max). Very sophisticated and airy."
    ),
    "Dark Mode Tech": (
        "Dark mode technical aesthetic. Dark slate/black background with bright, glowing "
        "accent colors (cyan, lime green) for data points."
    ),
}

# (label, value passed to the model)
LANGUAGES: List[tuple[str, str]] = [
    ("English (US)", "English"),
    ("Arabic (Egypt)", "Arabic"),
    ("German (Germany)", "German"),
    ("Spanish (Mexico)", "Spanish"),
    ("French (France)", "French"),
    ("Hindi (India)", "Hindi"),
    ("Indonesian (Indonesia)", "Indonesian"),
    ("Italian (Italy)", "Italian"),
    ("Japanese (Japan)", "Japanese"),
    ("Korean (South Korea)", "Korean"),
    ("Portuguese (Brazil)", "Portuguese"),
    ("Russian (Russia)", "Russian"),
    ("Ukrainian (Ukraine)", "Ukrainian"),
    ("Vietnamese (Vietnam)", "Vietnamese"),
    ("Chinese (China)", "Chinese"),
]


def resolve_style(style: Optional[str], presets: Dict[str, str], default: str) -> tuple[str, str]:
    """Map a preset name or free-text style to (name, guideline text).

    Empty input and the bare "Custom" marker fall back to the default preset.
    """
    name = (style or "").strip()
    if not name or name == CUSTOM_STYLE:
        return default, presets[default]
    if name in presets:
        return name, presets[name]
    return name, name


def normalize_language(language: Optional[str]) -> str:
    return (language or "").strip() or DEFAULT_LANGUAGE
