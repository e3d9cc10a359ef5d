import math
import unittest

import shape_schema as ss
from shape_schema import UNDEFINED, TypeMismatch, TypeMismatchError


def path_string(*path):
    return TypeMismatch(path=path, actual_value=0, expected_schema="string").path_string()


class PathStringTests(unittest.TestCase):
    def test_empty_path_is_root(self):
        self.assertEqual(path_string(), "root")

    def test_empty_string_steps_are_bracketed(self):
        self.assertEqual(path_string("foo", "", "", "bar"), "root.foo[''][''].bar")

    def test_identifiers_use_dot_access(self):
        self.assertEqual(path_string("foo"), "root.foo")
        self.assertEqual(path_string("foo", "bar", "baz"), "root.foo.bar.baz")
        self.assertEqual(path_string("$id", "_id2", "__", "$$"), "root.$id._id2.__.$$")

    def test_non_identifiers_are_quoted(self):
        self.assertEqual(
            path_string("invalid space", "  ", " 34", "1a", "foo\n"),
            "root['invalid space']['  '][' 34']['1a']['foo\n']",
        )

    def test_numbers_are_bare_indices(self):
        self.assertEqual(path_string("foo", "bar", 1), "root.foo.bar[1]")
        self.assertEqual(
            path_string(23, 0, math.nan, math.inf, -45, 2.0, 1.5),
            "root[23][0][NaN][Infinity][-45][2][1.5]",
        )

    def test_example_from_nested_validation(self):
        mismatch = ss.validate(
            {"foo": {"bar": {"twenty two": [{"prop": "string"}]}}},
            {"foo": {"bar": {"twenty two": [{"prop": "str"}, {"prop": -23}]}}},
        )
        self.assertEqual(mismatch.path_string(), "root.foo.bar['twenty two'][1].prop")


class ErrorStringTests(unittest.TestCase):
    def test_value_is_rendered_as_json(self):
        mismatch = ss.validate("number", True)
        self.assertEqual(
            mismatch.to_error_string(),
            "value (true) at 'root' failed to match to the given schema (number)",
        )

    def test_nested_value_and_object_schema(self):
        mismatch = ss.validate({"a": {"b": "string"}}, {"a": [1, None]})
        self.assertEqual(
            mismatch.to_error_string(),
            "value ([1,null]) at 'root.a' failed to match to the given schema "
            "({\n    \"b\": string\n})",
        )

    def test_undefined_value_segment_is_omitted(self):
        mismatch = ss.validate({"num": "number"}, {})
        self.assertEqual(
            mismatch.to_error_string(),
            "value at 'root.num' failed to match to the given schema (number)",
        )

    def test_unserialisable_value_segment_is_omitted(self):
        for value in (lambda: None, {1, 2}):
            msg = TypeMismatch(path=(), actual_value=value, expected_schema="string").to_error_string()
            self.assertTrue(msg.startswith("value at 'root'"), msg)

    def test_non_finite_numbers_render_as_null(self):
        msg = TypeMismatch(path=(), actual_value=[math.nan, math.inf], expected_schema="string").to_error_string()
        self.assertTrue(msg.startswith("value ([null,null]) at 'root'"), msg)
        msg = TypeMismatch(path=(), actual_value=math.nan, expected_schema="string").to_error_string()
        self.assertTrue(msg.startswith("value (null) at 'root'"), msg)

    def test_cyclic_value_segment_is_omitted(self):
        cyclic = {}
        cyclic["self"] = cyclic
        msg = TypeMismatch(path=(), actual_value=cyclic, expected_schema="string").to_error_string()
        self.assertTrue(msg.startswith("value at 'root'"), msg)

    def test_undefined_members_follow_json_rules(self):
        msg = TypeMismatch(path=(), actual_value={"a": UNDEFINED, "b": [UNDEFINED]},
                           expected_schema="string").to_error_string()
        self.assertTrue(msg.startswith('value ({"b":[null]})'), msg)

    def test_dataframe_value(self):
        import pandas as pd

        mismatch = ss.validate("string", pd.DataFrame({"a": [1]}))
        self.assertIn('"columns":["a"]', mismatch.to_error_string())

    def test_str_is_error_string(self):
        mismatch = ss.validate("number", "x")
        self.assertEqual(str(mismatch), mismatch.to_error_string())


class TypeMismatchRecordTests(unittest.TestCase):
    def test_immutable(self):
        mismatch = TypeMismatch(path=("a",), actual_value=1, expected_schema="string")
        with self.assertRaises(AttributeError):
            mismatch.path = ()

    def test_path_is_a_snapshot(self):
        mismatch = ss.validate({"a": [{"b": "string"}]}, {"a": [{"b": 1}]})
        self.assertIsInstance(mismatch.path, tuple)
        self.assertEqual(mismatch.path, ("a", 0, "b"))

    def test_error_wraps_mismatch(self):
        mismatch = TypeMismatch(path=(), actual_value=1, expected_schema="string")
        err = TypeMismatchError(mismatch)
        self.assertIs(err.type_mismatch, mismatch)
        self.assertEqual(str(err), mismatch.to_error_string())
