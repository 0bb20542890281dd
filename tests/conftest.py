import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tukant.app.services.rhyme_service import RhymeDictionary
from tukant.config import RhymeConfig
from tukant.core import PhoneticCache, build_index


# Four "-ाम" rhymes, each from its own poem; "नाम" shares a poem with "धाम".
AAM_CORPUS = [
    {"title": "राम", "url": "/poems/1/", "author": "तुलसीदास", "text": "राम"},
    {"title": "श्याम", "url": "/poems/2/", "text": "श्याम"},
    {"title": "धाम", "url": "/poems/3/", "author": "सूरदास", "text": "धाम नाम"},
    {"title": "काम", "url": "/poems/4/", "author": "बिहारी", "text": "काम"},
]

VERSE_CORPUS = AAM_CORPUS + [
    {
        "title": "चरण वंदना",
        "url": "/poems/5/",
        "author": "मीराबाई",
        "text": "हरि के चरण कमल मन भाए,\nमरन जीवन सब तेरे हाथ।",
    },
]


@pytest.fixture
def config() -> RhymeConfig:
    return RhymeConfig()


@pytest.fixture
def aam_index(config):
    return build_index(AAM_CORPUS, config)


@pytest.fixture
def verse_index(config):
    return build_index(VERSE_CORPUS, config)


@pytest.fixture
def cache() -> PhoneticCache:
    return PhoneticCache()


@pytest.fixture
def dictionary(config) -> RhymeDictionary:
    """Engine loaded with the verse corpus."""

    return RhymeDictionary(VERSE_CORPUS, config=config)
