"""Project Files — migration and packaging metadata point at real sources.

Invariants:
    - alembic.ini carries no connection URL; migrations read it from Settings
    - The package readme exists at the repository root
"""

import configparser
from pathlib import Path

import pytest

BACKEND = Path(__file__).resolve().parents[2]
ROOT = BACKEND.parent


def test_alembic_ini_has_no_database_url():
    parser = configparser.ConfigParser()
    parser.read(BACKEND / "alembic.ini")
    assert parser.has_section("alembic")
    assert not parser.has_option("alembic", "sqlalchemy.url")


def test_package_readme_is_user_documentation():
    tomllib = pytest.importorskip("tomllib")
    with open(ROOT / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)["project"]
    assert project["readme"] == "README.md"
    assert (ROOT / project["readme"]).is_file()
