"""Shared test fixtures."""

import pytest

from lemmata.assets import MemoryAssets
from lemmata.compression import compress
from lemmata.languages import Language
from lemmata.registry import Registry


# Small synthetic dictionary (lemma<TAB>form), independent of bundled data.
SAMPLE_TEXT = "\n".join([
    "go\tgoes",
    "go\twent",
    "wolf\twolves",
    "leaf\tleaves",
    "leave\tleaves",
    "Paris\tParis",
    "paris\tparis",
    "run\tRan",
    "run\tran",
    "ranch\tRan",
]) + "\n"


def make_blob(text: str = SAMPLE_TEXT) -> bytes:
    return compress(text)


@pytest.fixture
def sample_blob() -> bytes:
    return make_blob()


@pytest.fixture
def synthetic_registry(sample_blob) -> Registry:
    """A registry that only knows English, backed by SAMPLE_TEXT."""
    assets = MemoryAssets({Language.ENGLISH.asset_path: sample_blob})
    return Registry(assets, paths={Language.ENGLISH: Language.ENGLISH.asset_path})


@pytest.fixture
def bundled_registry() -> Registry:
    return Registry.default()
