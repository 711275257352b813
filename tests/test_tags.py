from __future__ import annotations

import importlib.util
import unittest


NUMPY_AVAILABLE = importlib.util.find_spec("numpy") is not None


@unittest.skipUnless(NUMPY_AVAILABLE, "numpy is required for tag group tests")
class TagGroupTests(unittest.TestCase):
    def test_equal_ignores_order(self) -> None:
        from tsexpr import TagGroup

        a = TagGroup({"host": "a", "env": "prod"})
        b = TagGroup([("env", "prod"), ("host", "a")])
        self.assertTrue(a.equal(b))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertFalse(a.equal(TagGroup({"host": "a"})))

    def test_subset(self) -> None:
        from tsexpr import TagGroup

        small = TagGroup({"host": "a"})
        large = TagGroup({"host": "a", "env": "prod"})
        self.assertTrue(small.subset(large))
        self.assertFalse(large.subset(small))
        self.assertFalse(TagGroup({"host": "b"}).subset(large))
        self.assertTrue(TagGroup().subset(large))

    def test_empty_group(self) -> None:
        from tsexpr import TagGroup

        self.assertTrue(TagGroup().is_empty)
        self.assertTrue(TagGroup(None).is_empty)
        self.assertFalse(TagGroup({"host": "a"}).is_empty)
        self.assertEqual(str(TagGroup()), "{}")

    def test_tags_render_sorted(self) -> None:
        from tsexpr import TagGroup

        group = TagGroup({"host": "a", "env": "prod"})
        self.assertEqual(group.tags(), "env=prod,host=a")
        self.assertEqual(str(group), "{env=prod,host=a}")

    def test_parse(self) -> None:
        from tsexpr import TagGroup, TagParseError

        self.assertEqual(TagGroup.parse("host=a,env=prod"), {"host": "a", "env": "prod"})
        with self.assertRaises(TagParseError):
            TagGroup.parse("host")
        with self.assertRaises(TagParseError):
            TagGroup.parse("host=a,host=b")
        with self.assertRaises(ValueError):
            TagGroup.parse("")


@unittest.skipUnless(NUMPY_AVAILABLE, "numpy is required for tag group tests")
class ReplaceTagsTests(unittest.TestCase):
    def test_wildcard_is_substituted(self) -> None:
        from tsexpr import TagGroup, replace_tags

        text = 'avg(q("avg:cpu{host=*}", "5m")) > 10'
        got = replace_tags(text, TagGroup({"host": "web01"}))
        self.assertEqual(got, 'avg(q("avg:cpu{host=web01}", "5m")) > 10')

    def test_missing_keys_keep_their_value(self) -> None:
        from tsexpr import TagGroup, replace_tags

        got = replace_tags("cpu{host=*,env=*}", TagGroup({"host": "a"}))
        self.assertEqual(got, "cpu{env=*,host=a}")

    def test_non_tag_spans_untouched(self) -> None:
        from tsexpr import TagGroup, replace_tags

        self.assertEqual(replace_tags("x{not tags}", TagGroup({"host": "a"})), "x{not tags}")
        self.assertEqual(replace_tags("1 + 2", TagGroup({"host": "a"})), "1 + 2")

    def test_empty_group_is_identity(self) -> None:
        from tsexpr import TagGroup, replace_tags

        self.assertEqual(replace_tags("cpu{host=*}", TagGroup()), "cpu{host=*}")


if __name__ == "__main__":
    unittest.main()
