import copy
import pickle
import unittest

from oxide import Option, Some, NONE, from_nullable, Ok, Err, OptionError, OptionKind, UnwrapError


class Probe:
    def __init__(self, ret=None):
        self.calls = 0; self.ret = ret

    def __call__(self, *args):
        self.calls += 1
        return self.ret


def option(is_none: bool) -> Option[str]:
    return NONE if is_none else Some("some")


class TestSome(unittest.TestCase):
    def setUp(self):
        self.some = option(False)

    def test_queries(self):
        self.assertTrue(isinstance(self.some, Option))
        self.assertTrue(self.some.is_some())
        self.assertFalse(self.some.is_none())

    def test_unwrap_family(self):
        self.assertEqual(self.some.unwrap(), "some")
        self.assertEqual(self.some.expect("boom"), "some")
        self.assertEqual(self.some.unwrap_or("or"), "some")
        self.assertEqual(self.some.get_or_else("or"), "some")
        p = Probe("or")
        self.assertEqual(self.some.unwrap_or_else(p), "some")
        self.assertEqual(p.calls, 0)

    def test_map(self):
        self.assertEqual(self.some.map(lambda d: "mapped " + d).unwrap(), "mapped some")
        self.assertEqual(Some(2).map(lambda x: x + 1), Some(3))

    def test_map_does_not_mutate_aliases(self):
        original = Some(1)
        alias = original
        mapped = alias.map(lambda x: x + 100)
        self.assertEqual(original.unwrap(), 1)
        self.assertEqual(alias.unwrap(), 1)
        self.assertEqual(mapped.unwrap(), 101)
        self.assertIsNot(mapped, original)

    def test_map_or_and_map_or_else(self):
        self.assertEqual(self.some.map_or("or", lambda d: d.upper()), "SOME")
        p = Probe("or")
        self.assertEqual(self.some.map_or_else(p, lambda d: d + "!"), "some!")
        self.assertEqual(p.calls, 0)

    def test_and_or(self):
        self.assertEqual(self.some.and_(Some("new some")).unwrap(), "new some")
        self.assertIs(self.some.and_(NONE), NONE)
        self.assertEqual(self.some.or_(Some("new some")).unwrap(), "some")
        p = Probe(Some("x"))
        self.assertIs(self.some.or_else(p), self.some)
        self.assertEqual(p.calls, 0)

    def test_and_then(self):
        def half(x: int) -> Option[int]:
            return Some(x // 2) if x % 2 == 0 else NONE

        self.assertEqual(Some(8).and_then(half), half(8))
        self.assertEqual(Some(8).and_then(half).and_then(half), Some(2))
        self.assertIs(Some(3).and_then(half), NONE)
        self.assertEqual(Some(8).flat_map(half), Some(4))

    def test_filter(self):
        self.assertEqual(Some(4).filter(lambda x: x % 2 == 0), Some(4))
        self.assertIs(Some(3).filter(lambda x: x % 2 == 0), NONE)

    def test_ok_or(self):
        self.assertEqual(self.some.ok_or("e").unwrap(), "some")
        p = Probe("e")
        self.assertEqual(self.some.ok_or_else(p), Ok("some"))
        self.assertEqual(p.calls, 0)

    def test_some_of_python_none_is_present(self):
        self.assertTrue(Some(None).is_some())
        self.assertNotEqual(Some(None), NONE)


class TestNone(unittest.TestCase):
    def setUp(self):
        self.none = option(True)

    def test_queries(self):
        self.assertFalse(self.none.is_some())
        self.assertTrue(self.none.is_none())

    def test_unwrap_raises_empty(self):
        with self.assertRaises(OptionError) as cm:
            self.none.unwrap()
        self.assertEqual(cm.exception.kind, OptionKind.EMPTY)
        self.assertEqual(str(cm.exception), "Attempted to unwrap a None value!")
        self.assertIsInstance(cm.exception, UnwrapError)

    def test_expect_uses_message_verbatim(self):
        with self.assertRaises(OptionError) as cm:
            self.none.expect("config value missing")
        self.assertEqual(cm.exception.message, "config value missing")
        self.assertEqual(cm.exception.kind, OptionKind.EMPTY)

    def test_defaults(self):
        self.assertEqual(self.none.unwrap_or("99"), "99")
        self.assertEqual(self.none.get_or_else(5), 5)
        p = Probe("88")
        self.assertEqual(self.none.unwrap_or_else(p), "88")
        self.assertEqual(p.calls, 1)

    def test_map_never_calls(self):
        p = Probe("x")
        self.assertTrue(self.none.map(p).is_none())
        self.assertEqual(p.calls, 0)

    def test_map_or_and_map_or_else(self):
        p = Probe("mapped")
        self.assertEqual(self.none.map_or("99", p), "99")
        self.assertEqual(self.none.map_or_else(lambda: "77", p), "77")
        self.assertEqual(p.calls, 0)

    def test_and_or(self):
        self.assertIs(self.none.and_(Some(1)), NONE)
        self.assertEqual(self.none.or_(Some("other")), Some("other"))
        self.assertEqual(self.none.or_else(lambda: Some("lazy")), Some("lazy"))

    def test_and_then_and_filter_short_circuit(self):
        p = Probe(Some(1))
        self.assertIs(self.none.and_then(p), NONE)
        q = Probe(True)
        self.assertIs(self.none.filter(q), NONE)
        self.assertEqual(p.calls, 0)
        self.assertEqual(q.calls, 0)

    def test_ok_or(self):
        self.assertEqual(self.none.ok_or("e").unwrap_err(), "e")
        p = Probe("lazy")
        self.assertEqual(self.none.ok_or_else(p), Err("lazy"))
        self.assertEqual(p.calls, 1)

    def test_singleton(self):
        self.assertEqual(repr(NONE), "NONE")
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)
        self.assertEqual(len({NONE, Some(1).and_(NONE)}), 1)

    def test_singleton_cannot_be_mutated(self):
        with self.assertRaises(AttributeError):
            NONE.value = 5  # type: ignore[attr-defined]
        self.assertFalse(hasattr(NONE, "value"))
        self.assertFalse(hasattr(NONE, "__dict__"))


class TestFromNullable(unittest.TestCase):
    def test_from_nullable(self):
        self.assertIs(from_nullable(None), NONE)
        self.assertEqual(from_nullable(0), Some(0))
        self.assertEqual(from_nullable(None).get_or_else(5), 5)


if __name__ == "__main__":
    unittest.main()
