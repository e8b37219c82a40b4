from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class Language(StrEnum):
    afrikaans = "afrikaans"
    english = "english"
    korean = "korean"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AssetLoadError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class WordList:
    """Word list for one language, as shipped under `assets/`."""

    language: Language
    words: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True, slots=True)
class GameAssets:
    word_lists: dict[Language, WordList]

    @property
    def languages(self) -> tuple[Language, ...]:
        return tuple(lang for lang in Language if lang in self.word_lists)

    def load_words(self, language: Language | str) -> tuple[str, ...]:
        lang = _coerce_language(language)
        word_list = self.word_lists.get(lang)
        if word_list is None:
            raise AssetLoadError(f"No word list for language: {lang.value}")
        return word_list.words


def _coerce_language(language: Language | str) -> Language:
    if isinstance(language, Language):
        return language
    try:
        return Language(language.strip().casefold())
    except ValueError as e:
        raise AssetLoadError(f"Unknown language: {language}") from e


def word_list_path(*, root: Path, language: Language) -> Path:
    return root / "assets" / f"{language.value}_words.txt"


def load_word_list(path: Path, *, language: Language) -> WordList:
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise AssetLoadError(f"Asset file not found: {path}") from e

    words = tuple(line.strip() for line in raw.splitlines() if line.strip())
    if not words:
        raise AssetLoadError(f"Empty word list: {path}")
    return WordList(language=language, words=words)


def load_words(language: Language | str, *, root: Path) -> tuple[str, ...]:
    lang = _coerce_language(language)
    return load_word_list(word_list_path(root=root, language=lang), language=lang).words


def load_game_assets(*, root: Path) -> GameAssets:
    """Load every language whose word list is present under `<root>/assets/`.

    Languages without a file are left out, so the home screen only offers what
    can actually be played. Set TYPEDEFENDER_STRICT_ASSETS=1 to require all of
    them.
    """

    strict = os.getenv("TYPEDEFENDER_STRICT_ASSETS", "").strip().lower() in {"1", "true", "yes"}

    word_lists: dict[Language, WordList] = {}
    for lang in Language:
        try:
            word_lists[lang] = load_word_list(word_list_path(root=root, language=lang), language=lang)
        except AssetLoadError:
            if strict:
                raise

    if not word_lists:
        raise AssetLoadError(f"No word lists found under {root / 'assets'}")
    return GameAssets(word_lists=word_lists)
