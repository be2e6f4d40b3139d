"""Tests for the GeoJSON feature dataclasses."""

from geodraw.geometry.features import DrawFeature, EditTargetMetadata, Geometry


class TestGeometry:
    def test_point(self):
        geometry = Geometry.point(13.4, 52.5)
        assert geometry.is_point
        assert not geometry.is_polygon
        assert geometry.to_dict() == {"type": "Point", "coordinates": [13.4, 52.5]}

    def test_polygon_from_tuples(self):
        geometry = Geometry.polygon([[(0, 0), (1, 0), (1, 1), (0, 0)]])
        assert geometry.is_polygon
        assert geometry.coordinates == [[[0, 0], [1, 0], [1, 1], [0, 0]]]

    def test_from_dict_copies_coordinates(self):
        raw = {"type": "Point", "coordinates": [1, 2]}
        geometry = Geometry.from_dict(raw)
        raw["coordinates"][0] = 99
        assert geometry.coordinates == [1, 2]


class TestDrawFeature:
    def test_to_dict(self, square_feature):
        data = square_feature.to_dict()
        assert data["type"] == "Feature"
        assert data["id"] == "square"
        assert data["geometry"]["type"] == "Polygon"
        assert data["properties"] == {}

    def test_to_dict_without_id(self):
        assert "id" not in DrawFeature(geometry=Geometry.point(0, 0)).to_dict()

    def test_from_dict(self, square_feature):
        assert DrawFeature.from_dict(square_feature.to_dict()) == square_feature

    def test_from_dict_numeric_id_and_missing_geometry(self):
        feature = DrawFeature.from_dict({"type": "Feature", "id": 7, "geometry": None})
        assert feature.id == "7"
        assert feature.geometry is None
        assert feature.properties == {}

    def test_snapshot_is_deep(self, square_feature):
        snapshot = square_feature.snapshot()
        snapshot.geometry.coordinates[0][0][0] = 5.0
        assert square_feature.geometry.coordinates[0][0][0] == 0.0

    def test_with_id(self, point_feature):
        renamed = point_feature.with_id("new")
        assert renamed.id == "new"
        assert point_feature.id == "point"


def test_edit_target_metadata():
    metadata = EditTargetMetadata(location_id="loc-1", version=2, type="point")
    assert metadata.version == 2
