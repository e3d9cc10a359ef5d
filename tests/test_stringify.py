import re
import unittest

import shape_schema as ss
from shape_schema import stringify_schema


def is_even(value):
    return value % 2 == 0


class StringifySchemaTests(unittest.TestCase):
    def test_atoms_are_verbatim(self):
        self.assertEqual(stringify_schema("number"), "number")
        self.assertEqual(stringify_schema("anything goes"), "anything goes")

    def test_union_joins_members(self):
        self.assertEqual(stringify_schema(ss.optional("number")), "undefined | number")
        self.assertEqual(
            stringify_schema(ss.optional_nullable("string")),
            "<is_null> | undefined | string",
        )

    def test_pattern(self):
        self.assertEqual(stringify_schema(re.compile(r"^\d+$")), r"/^\d+$/")

    def test_predicates_render_their_name(self):
        self.assertEqual(stringify_schema(is_even), "<is_even>")
        self.assertEqual(stringify_schema(ss.is_positive_int), "<is_positive_int>")
        self.assertEqual(stringify_schema(lambda v: True), "<lambda>")

    def test_unnamed_callable(self):
        class Check:
            def __call__(self, value):
                return True

        self.assertEqual(stringify_schema(Check()), "<anonymous>")

    def test_arrays(self):
        self.assertEqual(stringify_schema([]), "[]")
        self.assertEqual(stringify_schema(["number", "string"]), "[number, string]")

    def test_object_is_indented(self):
        schema = {
            "id": "number",
            "name": ss.optional("string"),
            "inner": {"flag": "boolean"},
            "empty": {},
        }
        self.assertEqual(
            stringify_schema(schema),
            "{\n"
            '    "id": number,\n'
            '    "name": undefined | string,\n'
            '    "inner": {\n'
            '        "flag": boolean\n'
            "    },\n"
            '    "empty": {}\n'
            "}",
        )
