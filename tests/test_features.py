import io
import json

import pytest

from globegif.errors import GeometryError, InputError
from globegif.features import decode_collection, load_features

from tests.util_geojson import collection, square


def _stream(obj):
    return io.BytesIO(json.dumps(obj).encode("utf-8"))


class TestDecodeCollection:
    def test_polygon_feature(self):
        features = decode_collection(_stream(collection(square(0, 0, 10, 10, name="box"))))
        assert len(features) == 1
        assert features[0].name == "box"
        rings = list(features[0].rings())
        assert len(rings) == 1
        assert rings[0][0] == (0.0, 0.0)
        assert rings[0][-1] == (0.0, 0.0)

    def test_polygon_with_hole(self):
        feature = {
            "type": "Feature",
            "properties": {},
            "geometry": {
                "type": "Polygon",
                "coordinates": [
                    [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
                    [[2, 2], [4, 2], [4, 4], [2, 2]],
                ],
            },
        }
        rings = list(decode_collection(_stream(collection(feature)))[0].rings())
        assert len(rings) == 2
        assert rings[1][0] == (2.0, 2.0)

    def test_multipolygon_and_collection(self):
        multi = {
            "type": "Feature",
            "properties": {"ADMIN": "Islands"},
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [
                    [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                    [[[5, 5], [6, 5], [6, 6], [5, 5]]],
                ],
            },
        }
        mixed = {
            "type": "Feature",
            "properties": None,
            "geometry": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
                    {"type": "Point", "coordinates": [3, 4]},
                ],
            },
        }
        a, b = decode_collection(_stream(collection(multi, mixed)))
        assert a.name == "Islands"
        assert len(list(a.rings())) == 2
        assert b.name == "feature-1"
        assert list(b.rings()) == [[(0.0, 0.0), (1.0, 1.0)], [(3.0, 4.0)]]

    def test_rings_are_fresh_each_time(self):
        feature = decode_collection(_stream(collection(square(0, 0, 1, 1))))[0]
        first = next(feature.rings())
        first[0] = (99.0, 99.0)
        assert next(feature.rings())[0] == (0.0, 0.0)

    def test_zero_features(self):
        with pytest.raises(InputError, match="No feature found"):
            decode_collection(_stream(collection()))

    def test_not_a_collection(self):
        with pytest.raises(InputError):
            decode_collection(_stream(square(0, 0, 1, 1)))

    def test_invalid_json(self):
        with pytest.raises(InputError):
            decode_collection(io.BytesIO(b"{not json"))

    def test_bad_geometry_is_fatal(self):
        bad = {"type": "Feature", "properties": {}, "geometry": {"type": "Blob", "coordinates": []}}
        with pytest.raises(GeometryError):
            decode_collection(_stream(collection(square(0, 0, 1, 1), bad)))

    def test_missing_geometry_is_fatal(self):
        bad = {"type": "Feature", "properties": {"name": "ghost"}, "geometry": None}
        with pytest.raises(GeometryError, match="ghost"):
            decode_collection(_stream(collection(bad)))


class TestLoadFeatures:
    def test_reads_file(self, geojson_file):
        features = load_features(str(geojson_file))
        assert [f.name for f in features] == ["limb"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError):
            load_features(str(tmp_path / "missing.geojson"))
