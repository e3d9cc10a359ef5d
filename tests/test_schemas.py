import unittest

import pandas as pd

import shape_schema as ss
from shape_schema import UNDEFINED, SchemaSet


class CompositionTests(unittest.TestCase):
    def test_schema_is_identity(self):
        definition = {"id": "number"}
        self.assertIs(ss.schema(definition), definition)

    def test_union_keeps_order(self):
        u = ss.union("number", {"a": "string"}, ["boolean"])
        self.assertIsInstance(u, SchemaSet)
        self.assertEqual(list(u), ["number", {"a": "string"}, ["boolean"]])
        self.assertIs(ss.schema_set, ss.union)

    def test_union_is_not_flattened(self):
        inner = ss.union("number")
        self.assertEqual(list(ss.union(inner, "string")), [inner, "string"])

    def test_optional(self):
        self.assertEqual(ss.optional("number"), ss.union("undefined", "number"))
        self.assertTrue(ss.test(ss.optional("number"), UNDEFINED))
        self.assertTrue(ss.test(ss.optional("number"), 1))
        self.assertFalse(ss.test(ss.optional("number"), None))

    def test_nullable(self):
        self.assertEqual(ss.nullable("number"), ss.union(ss.is_null, "number"))
        self.assertTrue(ss.test(ss.nullable("number"), None))
        self.assertFalse(ss.test(ss.nullable("number"), UNDEFINED))

    def test_optional_nullable(self):
        schema = ss.optional_nullable({"id": "number"})
        self.assertEqual(list(schema), [ss.is_null, "undefined", {"id": "number"}])
        for value in (None, UNDEFINED, {"id": 1}):
            self.assertTrue(ss.test(schema, value), value)
        self.assertFalse(ss.test(schema, {"id": "1"}))

    def test_optional_property_may_be_absent(self):
        self.assertTrue(ss.test({"email": ss.optional("string")}, {}))
        self.assertFalse(ss.test({"email": ss.optional("string")}, {"email": None}))


class PredicateSchemaTests(unittest.TestCase):
    def test_is_int(self):
        for value in (0, -3, 2.0, 2**40):
            self.assertTrue(ss.is_int(value), value)
        for value in (1.5, float("inf"), float("nan"), True, "1", None, 2**60):
            self.assertFalse(ss.is_int(value), value)

    def test_is_positive_int(self):
        self.assertTrue(ss.is_positive_int(1))
        self.assertFalse(ss.is_positive_int(0))
        self.assertFalse(ss.is_positive_int(-1))
        self.assertFalse(ss.is_positive_int(1.5))

    def test_is_plain_object(self):
        self.assertTrue(ss.is_plain_object({}))
        self.assertTrue(ss.is_plain_object(len))
        self.assertTrue(ss.is_plain_object([]))
        self.assertFalse(ss.is_plain_object(None))
        self.assertFalse(ss.is_plain_object(UNDEFINED))
        self.assertFalse(ss.is_plain_object("str"))

    def test_is_dataframe(self):
        self.assertTrue(ss.test({"frame": ss.is_dataframe}, {"frame": pd.DataFrame()}))
        self.assertFalse(ss.is_dataframe({"a": [1]}))
