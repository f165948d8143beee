"""Unit tests for keyword category inference."""

import pytest
from lfm.match.classifier import CategoryClassifier
from lfm.models import ItemCategory


@pytest.mark.parametrize("text,expected", [
    ("พวงกุญแจ", ItemCategory.KEYS),
    ("iPhone 13 สีดำ", ItemCategory.PHONE),
    ("เอกสาร", ItemCategory.DOCUMENTS),
    ("BLACK WALLET", ItemCategory.WALLET),
    ("เสื้อกันหนาวสีเทา", ItemCategory.CLOTHING),
    ("นาฬิกา casio", ItemCategory.ACCESSORIES),
])
def test_classifies_known_keywords(text, expected):
    assert CategoryClassifier().classify(text) == expected


def test_first_declared_category_wins():
    classifier = CategoryClassifier()
    # "กระเป๋า" (bag) also hits, wallet is declared first
    assert classifier.classify("กระเป๋าสตางค์สีดำ") == ItemCategory.WALLET
    # "บัตร" is listed under wallet before documents
    assert classifier.classify("บัตรนักเรียน") == ItemCategory.WALLET


@pytest.mark.parametrize("text", ["something random", "", "   ", None])
def test_unknown_text_returns_none(text):
    assert CategoryClassifier().classify(text) is None


def test_alternate_table():
    classifier = CategoryClassifier(((ItemCategory.BAG, ("Tote",)),))
    assert classifier.classify("Canvas tote") == ItemCategory.BAG
    assert classifier.classify("wallet") is None
