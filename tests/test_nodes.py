from __future__ import annotations

import unittest
from unittest import mock

from escher_documents import marker, metabolite

import eschermap.nodes
from eschermap.annotations import extract_annotations
from eschermap.nodes import extract_nodes


class ExtractNodesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.nodes = {
            "1": metabolite(3.0, 10.0, "glc", label_x=4.0, label_y=2.0),
            "2": metabolite(7.0, 1.0, "atp", primary=False),
            "3": marker(5.0, 5.0),
            "4": {"node_type": "metabolite", "x": 1.0, "bigg_id": "nope"},
            "5": {"node_type": "metabolite", "x": 2.0, "y": 4.0, "node_is_primary": True},
        }

    def test_y_axis_is_inverted(self) -> None:
        extraction = extract_nodes(self.nodes)
        self.assertEqual(extraction.positions["1"], (3.0, -10.0))
        glc = extraction.metabolites[0]
        self.assertEqual(glc.position, (3.0, -10.0))
        self.assertEqual(glc.label_position, (4.0, -2.0))

    def test_node_without_y_is_skipped(self) -> None:
        extraction = extract_nodes(self.nodes)
        self.assertNotIn("4", extraction.positions)
        self.assertNotIn("4", [m.internal_id for m in extraction.metabolites])

    def test_skipped_nodes_are_a_warning(self) -> None:
        with mock.patch.object(eschermap.nodes, "log") as log:
            extract_nodes(self.nodes)
        log.warning.assert_called_once_with("Skipped nodes without a position", count=1)

    def test_markers_only_have_positions(self) -> None:
        extraction = extract_nodes(self.nodes)
        self.assertEqual(extraction.positions["3"], (5.0, -5.0))
        self.assertEqual(extraction.marker_ids, ["3"])
        self.assertNotIn("3", extraction.labels)
        self.assertEqual([m.internal_id for m in extraction.metabolites], ["1", "2", "5"])

    def test_labels(self) -> None:
        extraction = extract_nodes(self.nodes)
        self.assertEqual(extraction.labels, {"1": "glc", "2": "atp"})
        unlabelled = extraction.metabolites[2]
        self.assertIsNone(unlabelled.label)
        self.assertIsNone(unlabelled.label_position)

    def test_configured_identifier_field(self) -> None:
        extraction = extract_nodes(self.nodes, identifier="name")
        self.assertEqual(extraction.labels, {"1": "GLC", "2": "ATP"})

    def test_default_sizes_and_colour(self) -> None:
        extraction = extract_nodes(self.nodes, primary_size=8.0, secondary_size=2.0, node_color="grey")
        sizes = {m.internal_id: m.display_size for m in extraction.metabolites}
        self.assertEqual(sizes, {"1": 8.0, "2": 2.0, "5": 8.0})
        self.assertEqual({m.display_color for m in extraction.metabolites}, {"grey"})

    def test_overrides(self) -> None:
        extraction = extract_nodes(self.nodes, node_sizes={"atp": 12.0, "other": 1.0},
                                   node_colors={"glc": "red"})
        by_id = {m.internal_id: m for m in extraction.metabolites}
        self.assertEqual(by_id["2"].display_size, 12.0)
        self.assertEqual(by_id["1"].display_size, 5.0)
        self.assertEqual(by_id["1"].display_color, "red")
        self.assertEqual(by_id["2"].display_color, "black")


class ExtractAnnotationsTests(unittest.TestCase):
    def test_positions_and_defaults(self) -> None:
        annotations = extract_annotations({
            "1": {"x": 5.0, "y": 3.0, "text": "TCA cycle"},
            "2": {"text": "origin"},
            "3": {},
        })
        self.assertEqual(len(annotations), 3)
        self.assertEqual(annotations[0].position, (5.0, -3.0))
        self.assertEqual(annotations[0].text, "TCA cycle")
        self.assertEqual(annotations[1].position, (0.0, 0.0))
        self.assertEqual(annotations[2].text, "")


if __name__ == "__main__":
    unittest.main()
