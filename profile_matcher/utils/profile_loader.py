"""
Profile loader utilities. Profiles are plain UTF-8 text.

Functions:
- list_profile_files(dirpath)
- read_profile_lines(path) -> list of profiles, one per non-blank line
- load_profiles(path) -> list of profiles from a file or a directory
"""
from pathlib import Path
from typing import List

_VALID_EXT = {".txt"}

SAMPLE_USER_PROFILES = [
    "Experienced software developer with expertise in Python and machine learning, seeking remote positions.",
    "Recent graduate with a degree in finance and strong analytical skills, looking for entry-level positions in banking.",
]

SAMPLE_EMPLOYER_PROFILES = [
    "Tech startup seeking skilled developers with experience in web development and cloud computing.",
    "Financial institution looking for motivated graduates with a background in finance and a willingness to learn.",
]


def list_profile_files(dirpath: Path) -> List[Path]:
    dirpath = Path(dirpath)
    files = []
    if not dirpath.is_dir():
        return []
    for p in sorted(dirpath.iterdir()):
        if p.is_file() and p.suffix.lower() in _VALID_EXT:
            files.append(p)
    return files


def read_profile_lines(path: Path) -> List[str]:
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


def load_profiles(path: Path) -> List[str]:
    """
    A file holds one profile per line; a directory holds one profile per .txt
    file, with its whitespace collapsed to single spaces.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"profile source not found: {path}")
    if path.is_dir():
        profiles = []
        for p in list_profile_files(path):
            text = " ".join(p.read_text(encoding="utf-8").split())
            if text:
                profiles.append(text)
        return profiles
    return read_profile_lines(path)
