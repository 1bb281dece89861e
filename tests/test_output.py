from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from lxml import etree

from escher_documents import pathway_map, two_node_map

from eschermap import EscherMap, PlotOptions
from eschermap.__main__ import main
from eschermap.output import GeoJSONBackend, RenderBackend, SVGBackend

SVG = "{http://www.w3.org/2000/svg}"


class RecordingBackend(RenderBackend):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def draw_points(self, points) -> None:
        self.calls.append("points")

    def draw_polyline(self, polyline) -> None:
        self.calls.append("polyline")

    def draw_arrow(self, arrow) -> None:
        self.calls.append("arrow")

    def draw_text(self, text) -> None:
        self.calls.append("text")


class DrawOrderTests(unittest.TestCase):
    def test_edges_before_nodes_before_text(self) -> None:
        backend = RecordingBackend()
        options = PlotOptions(annotation_show_text=True,
                              reaction_directions={"AtoB": ({"A": -1, "B": 1}, "forward")})
        EscherMap(pathway_map()).draw(backend, options)
        self.assertEqual(backend.calls, ["polyline", "polyline", "arrow", "points", "text"])


class SVGBackendTests(unittest.TestCase):
    def render(self, document, options=None, **kwds):
        svg = EscherMap(document).draw(SVGBackend(**kwds), options)
        return etree.fromstring(svg)

    def test_elements(self) -> None:
        root = self.render(two_node_map())
        self.assertEqual(root.tag, f"{SVG}svg")
        self.assertEqual(len(root.findall(f"{SVG}circle")), 2)
        (polyline,) = root.findall(f"{SVG}polyline")
        self.assertIsNone(polyline.get("stroke-dasharray"))
        self.assertEqual(polyline.get("stroke"), "black")
        self.assertEqual(len(root.findall(f"{SVG}rect")), 1)

    def test_dotted_line(self) -> None:
        root = self.render(two_node_map(), PlotOptions(reaction_edge_colors={"other": "red"}))
        (polyline,) = root.findall(f"{SVG}polyline")
        self.assertEqual(polyline.get("stroke-dasharray"), "2.00,4.00")

    def test_svg_y_axis_matches_map(self) -> None:
        root = self.render(pathway_map(), PlotOptions(metabolite_show_text=True), transparent=True)
        self.assertEqual(root.findall(f"{SVG}rect"), [])
        texts = root.findall(f"{SVG}text")
        self.assertEqual([text.text for text in texts], ["A", "B"])
        self.assertEqual(texts[0].get("y"), "5.00")

    def test_view_box(self) -> None:
        root = self.render(two_node_map(), view_box=(-10.0, -10.0, 40.0, 30.0))
        self.assertEqual(root.get("viewBox"), "-10.00 -10.00 40.00 30.00")

    def test_arrows_are_polygons(self) -> None:
        options = PlotOptions(reaction_directions={"AtoB": ({"A": -1, "B": 1}, "bidirectional")})
        root = self.render(pathway_map(), options)
        self.assertEqual(len(root.findall(f"{SVG}polygon")), 2)


class GeoJSONBackendTests(unittest.TestCase):
    def test_features(self) -> None:
        options = PlotOptions(reaction_directions={"AtoB": ({"A": -1, "B": 1}, "forward")},
                              annotation_show_text=True)
        collection = EscherMap(pathway_map()).draw(GeoJSONBackend(), options)
        self.assertEqual(collection["type"], "FeatureCollection")
        kinds = [feature["properties"]["kind"] for feature in collection["features"]]
        self.assertEqual(kinds, ["reaction", "reaction", "arrow", "metabolite", "metabolite",
                                 "annotation-label", "annotation-label"])
        geometry_types = [feature["geometry"]["type"] for feature in collection["features"]]
        self.assertEqual(geometry_types[:4], ["LineString", "LineString", "Polygon", "Point"])
        json.dumps(collection)


class CommandLineTests(unittest.TestCase):
    def test_writes_svg(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            map_path = Path(td) / "map.json"
            map_path.write_text(json.dumps(two_node_map()))
            options_path = Path(td) / "options.yaml"
            options_path.write_text("metabolite_show_text: true\n")
            fluxes_path = Path(td) / "fluxes.json"
            fluxes_path.write_text(json.dumps({"R1": 3.0}))
            output = Path(td) / "map.svg"
            main(["--map", str(map_path), "--output", str(output), "--options", str(options_path),
                  "--fluxes", str(fluxes_path)])
            root = etree.parse(str(output)).getroot()
        self.assertEqual(root.get("viewBox"), "-10.00 -10.00 40.00 30.00")
        (polyline,) = root.findall(f"{SVG}polyline")
        self.assertEqual(polyline.get("stroke-width"), "2.00")
        self.assertEqual(polyline.get("stroke"), "#67000d")
        self.assertEqual(len(root.findall(f"{SVG}text")), 2)

    def test_edge_weights_set_widths(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            map_path = Path(td) / "map.json"
            map_path.write_text(json.dumps(two_node_map()))
            fluxes_path = Path(td) / "fluxes.json"
            fluxes_path.write_text(json.dumps({"R1": 3.0}))
            weights_path = Path(td) / "weights.json"
            weights_path.write_text(json.dumps({"R1": 0.25}))
            output = Path(td) / "map.svg"
            main(["--map", str(map_path), "--output", str(output),
                  "--fluxes", str(fluxes_path), "--edge-weights", str(weights_path)])
            root = etree.parse(str(output)).getroot()
        (polyline,) = root.findall(f"{SVG}polyline")
        self.assertEqual(polyline.get("stroke-width"), "5.50")

    def test_writes_geojson(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            map_path = Path(td) / "map.json"
            map_path.write_text(json.dumps(two_node_map()))
            output = Path(td) / "map.json.geojson"
            main(["--map", str(map_path), "--output", str(output), "--format", "geojson"])
            collection = json.loads(output.read_text())
        self.assertEqual(len(collection["features"]), 3)

    def test_bad_map_exits(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            map_path = Path(td) / "map.json"
            map_path.write_text(json.dumps({"nodes": {}}))
            with self.assertRaises(SystemExit) as context:
                main(["--map", str(map_path), "--output", str(Path(td) / "out.svg")])
        self.assertEqual(context.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
