import unittest

from game import Grid, draw_box, line_rect


def _sample():
    return Grid.from_list([
        ((0, 0), 'a'),
        ((-3, 5), 'b'),
        ((7, -2), 'c'),
        ((2, 2), 'd'),
    ])


class TestGrid(unittest.TestCase):
    def test_given_box_size_when_draw_box_then_every_cell_filled(self):
        g = draw_box('T', (3, 4))
        self.assertEqual(len(g), 12)
        self.assertEqual(g.num_rows(), 4)
        self.assertEqual(g.num_cols(), 3)
        self.assertEqual(g.get((2, 3)), 'T')
        self.assertIsNone(g.get((3, 0)))

    def test_given_rect_size_when_line_rect_then_only_perimeter_present(self):
        g = line_rect('T', (5, 8))
        self.assertEqual(len(g), 2 * 5 + 2 * 8 - 4)
        self.assertNotIn((1, 1), g)
        self.assertNotIn((2, 3), g)
        for corner in [(0, 0), (4, 0), (0, 7), (4, 7)]:
            self.assertIn(corner, g)
        self.assertEqual(g.get((2, 7)), 'T')
        self.assertEqual(g.get((4, 3)), 'T')
        self.assertEqual(g.num_rows(), 8)
        self.assertEqual(g.num_cols(), 5)

    def test_given_thin_rect_when_line_rect_then_same_as_box(self):
        self.assertEqual(line_rect('x', (4, 1)), draw_box('x', (4, 1)))
        self.assertEqual(line_rect('x', (1, 3)), draw_box('x', (1, 3)))

    def test_given_offsets_when_translating_back_and_forth_then_identity(self):
        g = _sample()
        for dx, dy in [(0, 0), (1, 2), (-5, 3), (100, -100)]:
            self.assertEqual(g.translate((dx, dy)).translate((-dx, -dy)), g)
        moved = g.translate((1, 2))
        self.assertEqual(moved.get((1, 2)), 'a')
        self.assertIsNone(moved.get((0, 0)))
        self.assertEqual(len(moved), len(g))

    def test_given_grid_when_rotating_four_times_then_identity(self):
        g = _sample()
        self.assertEqual(g.rot_cv().rot_cv().rot_cv().rot_cv(), g)
        self.assertEqual(g.rot_ccv().rot_ccv().rot_ccv().rot_ccv(), g)
        self.assertEqual(g.rot_cv().rot_ccv(), g)
        self.assertNotEqual(g.rot_cv(), g)

    def test_given_single_cell_when_rotating_then_follows_quarter_turn(self):
        g = Grid.from_list([((1, 0), 'x')])
        self.assertEqual(g.rot_cv().get((0, -1)), 'x')
        self.assertEqual(g.rot_ccv().get((0, 1)), 'x')

    def test_given_grid_when_put_then_original_untouched(self):
        g = Grid.from_list([((0, 0), 'a')])
        g2 = g.put((1, 1), 'b')
        self.assertIsNone(g.get((1, 1)))
        self.assertEqual(g2.get((1, 1)), 'b')
        g3 = g2.put((1, 1), 'c')
        self.assertEqual(g3.get((1, 1)), 'c')
        self.assertEqual(len(g3), 2)

    def test_given_missing_key_when_remove_then_same_grid(self):
        g = Grid.from_list([((0, 0), 'a')])
        self.assertIs(g.remove((5, 5)), g)
        self.assertEqual(len(g.remove((0, 0))), 0)

    def test_given_two_values_when_swap_then_exchanged(self):
        g = Grid.from_list([((0, 0), 'a'), ((1, 0), 'b')])
        s = g.swap((0, 0), (1, 0))
        self.assertEqual(s.get((0, 0)), 'b')
        self.assertEqual(s.get((1, 0)), 'a')
        self.assertEqual(g.get((0, 0)), 'a')

    def test_given_one_side_absent_when_swap_then_absence_moves_too(self):
        g = Grid.from_list([((0, 0), 'a')])
        s = g.swap((0, 0), (1, 0))
        self.assertNotIn((0, 0), s)
        self.assertEqual(s.get((1, 0)), 'a')
        self.assertEqual(len(s), 1)
        self.assertEqual(Grid().swap((0, 0), (1, 0)), Grid())

    def test_given_entries_when_list_roundtrip_then_equal(self):
        g = _sample()
        self.assertEqual(Grid.from_list(g.to_list()), g)
        self.assertEqual(len(g.to_list()), 4)

    def test_given_empty_and_disjoint_grids_when_measuring_then_bounding_box_extents(self):
        self.assertEqual(Grid().num_rows(), 0)
        self.assertEqual(Grid().num_cols(), 0)
        self.assertIsNone(Grid().bounds())
        g = Grid.from_list([((0, 0), 1), ((3, 5), 2)])
        self.assertEqual(g.num_rows(), 6)
        self.assertEqual(g.num_cols(), 4)
        self.assertEqual(g.bounds(), ((0, 0), (3, 5)))

    def test_given_two_grids_when_overlay_then_later_wins(self):
        a = Grid.from_list([((0, 0), 'a'), ((1, 0), 'a')])
        b = Grid.from_list([((1, 0), 'b')])
        merged = a.overlay(b)
        self.assertEqual(merged.get((0, 0)), 'a')
        self.assertEqual(merged.get((1, 0)), 'b')

    def test_given_grid_when_filter_and_map_then_values_transformed(self):
        g = draw_box(1, (2, 2))
        self.assertEqual(len(g.filter(lambda c, v: c[0] == 0)), 2)
        self.assertEqual(set(v for _, v in g.map_values(lambda v: v + 1).items()), {2})

    def test_given_equal_grids_when_hashing_then_same_hash(self):
        self.assertEqual(hash(_sample()), hash(Grid(dict(_sample().items()))))


if __name__ == '__main__':
    unittest.main(verbosity=2)
