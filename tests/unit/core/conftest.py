# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Type

import pytest

from recordkit import Model, SchemaBuilder


def set_age(record: Model, value) -> None:
    record.attributes["age"] = int(value)


def declare_person(attr: SchemaBuilder) -> None:
    attr.accessor("first_name")
    attr.accessor("last_name")
    attr.accessor(
        "age",
        default=10,
        serialize=lambda value: value * 2,
        set=set_age,
    )
    attr.property(
        "full_name",
        serialize=False,
        get=lambda record: f"{record.first_name} {record.last_name}",
    )


@pytest.fixture
def person_kind() -> Type[Model]:
    return Model.extend(declare_person, name="Person")


@pytest.fixture
def john(person_kind: Type[Model]) -> Model:
    return person_kind({"first_name": "John", "last_name": "Cleese"})
