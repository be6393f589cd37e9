"""
Slug normalisation tests
"""

import pytest

from auto_translate.utils import slugify


@pytest.mark.parametrize("text, expected", [
    ("Ma Belle Page!", "ma-belle-page"),
    ("Élan  Vital", "elan-vital"),
    ("  --Déjà vu--  ", "deja-vu"),
    ("Straße 42", "strae-42"),
    ("already-a-slug", "already-a-slug"),
    ("!!!", ""),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_custom_separator():
    assert slugify("Hallo Welt", separator="_") == "hallo_welt"
