"""Shared pytest fixtures for test suite."""

import io
import json

import pytest

from globegif.config import Settings
from globegif.features import decode_collection
from tests.util_geojson import collection, square


@pytest.fixture
def limb_square():
    """Land box centered on lon 90, straddling the limb of the lon_0=0 view."""
    return square(80, -10, 100, 10, name="limb")


@pytest.fixture
def limb_features(limb_square):
    return decode_collection(io.BytesIO(json.dumps(collection(limb_square)).encode("utf-8")))


@pytest.fixture
def geojson_file(tmp_path, limb_square):
    path = tmp_path / "land.geojson"
    path.write_text(json.dumps(collection(limb_square)), encoding="utf-8")
    return path


@pytest.fixture
def small_settings(tmp_path):
    """Few small frames, for tests that only need the pipeline shape."""
    return Settings(output=str(tmp_path / "out.gif"), size=48, step=90.0)
