import unittest

from game import Seed, initial_seed, pick_random, seed_debug_repr, step_int


class TestRandomSampler(unittest.TestCase):
    def test_given_same_seed_when_stepping_then_same_draw_and_next_seed(self):
        a = step_int(initial_seed(42), 0, 9)
        b = step_int(initial_seed(42), 0, 9)
        self.assertEqual(a, b)

    def test_given_many_seeds_when_stepping_then_within_inclusive_range(self):
        seed = initial_seed(1)
        seen = set()
        for _ in range(500):
            value, seed = step_int(seed, 3, 5)
            self.assertTrue(3 <= value <= 5)
            seen.add(value)
        self.assertEqual(seen, {3, 4, 5})

    def test_given_empty_list_when_pick_random_then_none_and_seed_kept(self):
        seed = initial_seed(9)
        picked, after = pick_random(seed, [])
        self.assertIsNone(picked)
        self.assertEqual(after, seed)

    def test_given_items_when_pick_random_then_member_and_seed_advances(self):
        seed = initial_seed(9)
        items = ['a', 'b', 'c', 'd', 'e', 'f', 'g']
        counts = {k: 0 for k in items}
        for _ in range(700):
            picked, nxt = pick_random(seed, items)
            self.assertIn(picked, items)
            self.assertNotEqual(nxt, seed)
            counts[picked] += 1
            seed = nxt
        self.assertTrue(all(n > 0 for n in counts.values()))

    def test_given_same_seed_when_drawing_sequences_then_reproducible(self):
        def run(seed):
            out = []
            for _ in range(20):
                item, seed = pick_random(seed, list(range(10)))
                out.append(item)
            return out, seed

        self.assertEqual(run(initial_seed(77)), run(initial_seed(77)))
        self.assertNotEqual(run(initial_seed(77))[0], run(initial_seed(78))[0])

    def test_given_negative_value_when_initial_seed_then_masked_to_64_bits(self):
        self.assertEqual(initial_seed(-1), Seed((1 << 64) - 1))

    def test_given_seed_when_debug_repr_then_opaque_string(self):
        text = seed_debug_repr(initial_seed(255))
        self.assertTrue(text.startswith('seed:'))
        self.assertIn('ff', text)


if __name__ == '__main__':
    unittest.main(verbosity=2)
