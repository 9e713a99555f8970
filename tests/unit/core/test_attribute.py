# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordkit import AttributeDefinition, SerializeRule
from recordkit.core import AccessMode, storage_getter


@pytest.mark.parametrize(
    "serialize, rule",
    [
        (True, SerializeRule.AS_IS),
        ("yes", SerializeRule.AS_IS),
        (False, SerializeRule.OMIT),
        (None, SerializeRule.OMIT),
        (str.upper, SerializeRule.TRANSFORM),
    ],
)
def test_serialize_rule(serialize, rule):
    definition = AttributeDefinition(name="value", serialize=serialize)
    assert definition.serialize_rule is rule


def test_serialized_applies_transform():
    definition = AttributeDefinition(name="age", serialize=lambda value: value * 2)
    assert definition.serialized(21) == 42


def test_serialized_as_is():
    definition = AttributeDefinition(name="age")
    value = {"nested": True}
    assert definition.serialized(value) is value


def test_has_default_tracks_explicit_defaults():
    assert not AttributeDefinition(name="a").has_default
    assert AttributeDefinition(name="a", default=None).has_default
    assert AttributeDefinition(name="a", default=0).has_default


def test_from_options_maps_get_and_set():
    def getter(record):
        return 1

    def setter(record, value):
        pass

    definition = AttributeDefinition.from_options("a", {"get": getter, "set": setter})
    assert definition.getter is getter
    assert definition.setter is setter
    assert definition.access is AccessMode.READ_WRITE


def test_definition_is_frozen():
    definition = AttributeDefinition(name="a")
    with pytest.raises(ValidationError):
        definition.enumerable = False


def test_as_property():
    definition = AttributeDefinition(name="a", getter=storage_getter("a"))
    prop = definition.as_property()
    assert isinstance(prop, property)
    assert prop.fset is None
    assert "'a'" in prop.__doc__


@pytest.mark.parametrize(
    "readable, writable, mode",
    [
        (True, True, AccessMode.READ_WRITE),
        (True, False, AccessMode.READ),
        (False, True, AccessMode.WRITE),
        (False, False, AccessMode.NONE),
    ],
)
def test_access_mode_from_capabilities(readable, writable, mode):
    assert AccessMode.from_capabilities(readable, writable) is mode
