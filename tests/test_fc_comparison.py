# -*- coding: utf-8 -*-
"""
tests.test_fc_comparison

Typed constraint comparison and the shape ancestry table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from tortoise import Tortoise

from managerkit.core.formcustomization import FieldKind, FormTarget, ShapeId, values_equal
from managerkit.core.formcustomization.comparison import coerce_int, to_int
from managerkit.core.models import MODEL_MODULES, FormCustomizationSet


@pytest.mark.parametrize(
    ("stored", "constraint", "expected"),
    [
        (5, "5", True),
        (5, " 5 ", True),
        (5, "5.0", True),
        (5, "6", False),
        (0, "", False),
        (None, "", True),
        (True, "1", True),
        (5, "five", False),
    ],
)
def test_integer_comparison(stored, constraint, expected) -> None:
    assert values_equal(FieldKind.INTEGER, stored, constraint) is expected


@pytest.mark.parametrize(
    ("stored", "constraint", "expected"),
    [
        (True, "1", True),
        (True, "yes", True),
        (False, "0", True),
        (False, "", True),
        (False, "false", True),
        (True, "0", False),
        (None, "1", False),
    ],
)
def test_boolean_comparison(stored, constraint, expected) -> None:
    assert values_equal(FieldKind.BOOLEAN, stored, constraint) is expected


@pytest.mark.parametrize(
    ("stored", "constraint", "expected"),
    [
        (5.0, "5", True),
        (Decimal("2.50"), "2.5", True),
        (2.5, "2", False),
        (None, " ", True),
        (0.0, "", False),
        (1.5, "abc", False),
    ],
)
def test_number_comparison(stored, constraint, expected) -> None:
    assert values_equal(FieldKind.NUMBER, stored, constraint) is expected


def test_float_field_matches_integer_text_constraint() -> None:
    target = FormTarget(shape=ShapeId.DOCUMENT, fields={"price": 5.0})

    assert target.kind_of("price") is FieldKind.NUMBER
    assert values_equal(target.kind_of("price"), target.get("price"), "5")


def test_string_comparison_is_exact() -> None:
    assert values_equal(FieldKind.STRING, "News", "News")
    assert not values_equal(FieldKind.STRING, "News", "news")
    assert values_equal(FieldKind.STRING, None, "")
    assert values_equal(FieldKind.STRING, True, "1")


def test_integer_coercion_helpers() -> None:
    assert to_int("12") == 12
    assert to_int("1.5") is None
    assert coerce_int("abc") == 0
    assert coerce_int(" 7 ") == 7


def test_field_kind_inference() -> None:
    assert FieldKind.infer(True) is FieldKind.BOOLEAN
    assert FieldKind.infer(3) is FieldKind.INTEGER
    assert FieldKind.infer(3.5) is FieldKind.NUMBER
    assert FieldKind.infer(Decimal("3.5")) is FieldKind.NUMBER
    assert FieldKind.infer("3") is FieldKind.STRING
    assert FieldKind.infer(None) is FieldKind.STRING


class TestShapes:
    def test_resolve_known_and_unknown_names(self) -> None:
        assert ShapeId.resolve("modWebLink") is ShapeId.WEBLINK
        assert ShapeId.resolve(" modDocument ") is ShapeId.DOCUMENT
        assert ShapeId.resolve("modChunk") is None
        assert ShapeId.resolve("") is None

    def test_every_shape_is_a_resource(self) -> None:
        for shape in ShapeId:
            assert shape.is_a(ShapeId.RESOURCE)

    def test_siblings_are_unrelated(self) -> None:
        assert not ShapeId.DOCUMENT.is_a(ShapeId.WEBLINK)
        assert not ShapeId.RESOURCE.is_a(ShapeId.DOCUMENT)
        assert ShapeId.RESOURCE.parent is None
        assert ShapeId.SYMLINK.parent is ShapeId.RESOURCE


class TestFormTarget:
    def test_declared_kind_wins_over_inferred(self) -> None:
        target = FormTarget(
            shape=ShapeId.DOCUMENT,
            fields={"template": "3", "published": 1},
            field_kinds={"published": FieldKind.BOOLEAN},
        )

        assert target.template == "3"
        assert target.kind_of("published") is FieldKind.BOOLEAN
        assert target.kind_of("template") is FieldKind.STRING
        assert target.get("missing", "x") == "x"

    @pytest.mark.asyncio
    async def test_from_model_types_fields_from_orm_definition(self) -> None:
        await Tortoise.init(db_url="sqlite://:memory:", modules={"manager": MODEL_MODULES})
        try:
            rule_set = FormCustomizationSet(action="resource/update", template=4, active=True)
            target = FormTarget.from_model(rule_set, ShapeId.RESOURCE)
        finally:
            await Tortoise.close_connections()

        assert target.template == 4
        assert target.kind_of("template") is FieldKind.INTEGER
        assert target.kind_of("active") is FieldKind.BOOLEAN
        assert target.kind_of("action") is FieldKind.STRING
        assert values_equal(target.kind_of("active"), target.get("active"), "1")


# The End
