from roadpick.layers import FeatureCollection, line_feature, point_feature
from roadpick.palette import PALETTE, WIDTHS, edge_style, node_style, palette_index


def test_palette_index_wraps():
    n = len(PALETTE)
    assert [palette_index(i) for i in range(n + 2)] == list(range(n)) + [0, 1]


def test_edge_style_is_pure_function_of_index():
    n = len(PALETTE)
    assert edge_style(3) == edge_style(3 + n) == edge_style(3 + 2 * n)
    assert edge_style(0) == {"color": "rgb(0, 153, 51)", "width": WIDTHS[0]}
    assert edge_style(0) != edge_style(1)


def test_node_and_edge_share_hue():
    r, g, b = PALETTE[palette_index(10)]
    assert edge_style(10)["color"] == f"rgb({r}, {g}, {b})"
    assert node_style(10)["circle-stroke-color"] == f"rgba({r}, {g}, {b}, 1)"


def test_collection_clear_and_bulk_add():
    fc = FeatureCollection("nodes")
    fc.add_feature(point_feature((1.0, 2.0), edge_id=0))
    fc.clear()
    fc.clear()
    assert len(fc) == 0

    fc.add_features([point_feature((1.0, 2.0), edge_id=0), point_feature((3.0, 4.0), edge_id=1)])
    assert [f.edge_id for f in fc] == [0, 1]


def test_collection_geojson_carries_style():
    fc = FeatureCollection("segments")
    fc.add_features([line_feature([(8.0, 47.0), (8.1, 47.1)], edge_id=2)])

    data = fc.to_geojson(edge_style)

    assert data["type"] == "FeatureCollection"
    (feature,) = data["features"]
    assert feature["geometry"]["type"] == "LineString"
    assert [list(c) for c in feature["geometry"]["coordinates"]] == [[8.0, 47.0], [8.1, 47.1]]
    assert feature["properties"]["edge_id"] == 2
    assert feature["properties"]["style"] == edge_style(2)


def test_unstyled_feature_has_no_style_key():
    data = point_feature((1.0, 2.0), click_id=4).to_geojson(edge_style)
    assert data["properties"] == {"click_id": 4}
