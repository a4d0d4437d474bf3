from __future__ import annotations
from typing import Dict, Any, Iterator, Optional

import streamlit as st

from .utils import read_yaml_file
from .constants import I18N_DIR, DEFAULT_LANGUAGE, SUPPORTED_LOCALES


@st.cache_data(show_spinner=False)
def _load_bundle(locale: str) -> Dict[str, Any]:
    """Loads the translation bundle of one locale; a missing bundle is empty."""
    path = I18N_DIR / f"{locale}.yaml"
    if not path.exists():
        return {}
    return read_yaml_file(path)

def normalize_locale(code: Optional[str]) -> str:
    """Returns the code if it is a supported locale, otherwise the default one."""
    candidate = (code or "").strip().lower()
    if candidate in SUPPORTED_LOCALES:
        return candidate
    return DEFAULT_LANGUAGE

def _lookup_chain(lang: str) -> Iterator[str]:
    """Locales to consult for a request: the requested one, then the default."""
    locale = normalize_locale(lang)
    yield locale
    if locale != DEFAULT_LANGUAGE:
        yield DEFAULT_LANGUAGE

def t(key: str, lang: str, default: Optional[str] = None) -> str:
    """
    Translates a dotted key such as 'projects.title'.

    Unsupported locales are treated as the default locale. Falls back to
    `default`, then to the key itself, when no bundle has a string for it.
    """
    path = key.split(".")
    for locale in _lookup_chain(lang):
        value = _resolve(_load_bundle(locale), path)
        if isinstance(value, (str, int, float)) and value != "":
            return str(value)
    return default or key

def _resolve(bundle: Dict[str, Any], path: list) -> Optional[Any]:
    node: Any = bundle
    for part in path:
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node
