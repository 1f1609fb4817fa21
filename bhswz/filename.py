"""Guess the original file name of an entry from its content."""

from __future__ import annotations

import re

_LEVEL_DESC = re.compile(r'^<LevelDesc AssetDir=".+?"\s+LevelName="(.+?)".*?>')
_CUTSCENE_TYPE = re.compile(r'^<CutsceneType CutsceneName="(.+?)".*?>')
_GENERAL_XML = re.compile(r"<(\w+)>")
_GENERAL_CSV = re.compile(r"^(\w+)\r?\n")


def get_swz_file_name(file_content: str) -> str | None:
    """Return a file name for the entry, or None if it cannot be inferred."""
    if match := _LEVEL_DESC.search(file_content):
        return f"LevelDesc_{match[1]}.xml"
    if match := _CUTSCENE_TYPE.search(file_content):
        return f"CutsceneType_{match[1]}.xml"
    if match := _GENERAL_XML.search(file_content):
        return f"{match[1]}.xml"
    if match := _GENERAL_CSV.search(file_content):
        return f"{match[1]}.csv"
    return None