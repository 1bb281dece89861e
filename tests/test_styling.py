from __future__ import annotations

import unittest

from escher_documents import PROJECT_ROOT  # noqa: F401

from eschermap.styling import reaction_missing_data, resolve_node_size, resolve_style


class ResolveStyleTests(unittest.TestCase):
    def test_override_wins(self) -> None:
        self.assertEqual(resolve_style("A", {"A": 5}, 1), 5)

    def test_fallback_for_unknown_identifier(self) -> None:
        self.assertEqual(resolve_style("B", {"A": 5}, 1), 1)

    def test_missing_identifier_uses_fallback(self) -> None:
        self.assertEqual(resolve_style(None, {"A": 5}, 1), 1)

    def test_node_size_tiers(self) -> None:
        self.assertEqual(resolve_node_size("A", {"A": 9.0}, True, 5.0, 3.0), 9.0)
        self.assertEqual(resolve_node_size("B", {"A": 9.0}, True, 5.0, 3.0), 5.0)
        self.assertEqual(resolve_node_size("B", {"A": 9.0}, False, 5.0, 3.0), 3.0)


class MissingDataTests(unittest.TestCase):
    def test_no_overrides_means_all_have_data(self) -> None:
        self.assertFalse(reaction_missing_data("R1", {}, {}))
        self.assertFalse(reaction_missing_data(None, {}, {}))

    def test_presence_in_either_map_is_data(self) -> None:
        self.assertFalse(reaction_missing_data("R1", {}, {"R1": 3}))
        self.assertFalse(reaction_missing_data("R1", {"R1": "red"}, {}))

    def test_absent_from_both_maps_is_missing(self) -> None:
        self.assertTrue(reaction_missing_data("R2", {}, {"R1": 3}))
        self.assertTrue(reaction_missing_data(None, {"R1": "red"}, {}))


if __name__ == "__main__":
    unittest.main()
