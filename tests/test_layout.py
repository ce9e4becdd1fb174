import unittest

from game import (
    DEFAULT_LEVEL,
    SPAWN_WEIGHTS,
    Collector,
    Plain,
    Spawner,
    Wall,
    Water,
    build_layout,
    build_level,
    collector_coords,
    spawner_coords,
    wall_coords,
)


class TestLayout(unittest.TestCase):
    def test_given_default_level_when_inspecting_then_six_by_six_field(self):
        layout = DEFAULT_LEVEL.layout
        spawners = spawner_coords(layout)
        self.assertEqual([c for c, _ in spawners], [(x, 6) for x in range(6)])
        self.assertTrue(all(contents == SPAWN_WEIGHTS for _, contents in spawners))
        self.assertEqual(collector_coords(layout), [(x, 0) for x in range(6)])
        self.assertEqual(len(wall_coords(layout)), 2 * (8 + 9) - 4)
        self.assertEqual(len(layout), 30 + 36 + 6)
        self.assertEqual(layout.bounds(), ((-1, -1), (6, 7)))

    def test_given_default_level_when_fill_area_then_all_plain_rows_above_collectors(self):
        fill = DEFAULT_LEVEL.fill_area
        self.assertEqual(len(fill), 30)
        self.assertEqual({y for _, y in fill}, {1, 2, 3, 4, 5})
        for c in fill:
            self.assertIsInstance(DEFAULT_LEVEL.layout.get(c), Plain)

    def test_given_spawn_weights_when_counting_then_plain_ingredients_doubled(self):
        self.assertEqual(SPAWN_WEIGHTS.count(Water()), 2)
        self.assertEqual(len(SPAWN_WEIGHTS), 7)

    def test_given_custom_size_when_build_layout_then_geometry_follows(self):
        layout = build_layout(3, 2, (Water(),))
        self.assertIsInstance(layout.get((0, 0)), Collector)
        self.assertIsInstance(layout.get((2, 1)), Plain)
        self.assertEqual(layout.get((1, 2)), Spawner((Water(),)))
        self.assertIsInstance(layout.get((-1, 0)), Wall)
        self.assertIsInstance(layout.get((3, 3)), Wall)
        self.assertIsNone(layout.get((1, 4)))

    def test_given_custom_level_when_built_then_fill_area_excludes_collectors(self):
        level = build_level(3, 2, (Water(),))
        self.assertEqual(level.fill_area, ((0, 1), (1, 1), (2, 1)))
        self.assertEqual(level.fill_weights, (Water(),))
        self.assertEqual(level.view_bounds(), ((-1, -1), (3, 3)))


if __name__ == '__main__':
    unittest.main(verbosity=2)
