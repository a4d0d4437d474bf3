from pathlib import Path

# --- Project Paths ---
# Defines the absolute root path of the site checkout.
ROOT_DIR = Path(__file__).resolve().parents[2]
CONFIG_DIR = ROOT_DIR / "config"
PROJECTS_DIR = ROOT_DIR / "projects"
I18N_DIR = ROOT_DIR / "i18n"
ASSETS_DIR = ROOT_DIR / "assets"

# --- Locales ---
SUPPORTED_LOCALES = ("en", "es", "de", "it")
DEFAULT_LANGUAGE = "en"

# --- Theme ---
THEME_MODES = ("light", "dark")
DEFAULT_THEME = "dark"

# --- Catalog Conventions ---
README_FILENAME = "README.md"
PICS_DIRNAME = "pics"
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
CODE_EXTENSIONS = frozenset({".ino", ".cpp", ".h"})
IMAGES_URL_PREFIX = "/images"
DOWNLOADS_URL_PREFIX = "/downloads"
DEFAULT_PROJECT_STATUS = "prototype"

# Identifier for the "all" option of the tools filter.
ALL_TOOLS_ID = "all"
