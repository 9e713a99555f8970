# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordkit import Model, ModelSettings


def test_default_settings():
    """Test that ModelSettings can be instantiated with default values."""
    settings = ModelSettings()
    assert settings.copy_defaults is True
    assert settings.atomic_update is False


def test_settings_are_frozen():
    settings = ModelSettings()
    with pytest.raises(ValidationError):
        settings.atomic_update = True


def test_settings_reject_unknown_fields():
    with pytest.raises(ValidationError):
        ModelSettings(atomic=True)


def test_shared_defaults_without_copy():
    """Test that copy_defaults=False hands out the declared default object."""
    tags = []
    Tagged = Model.extend(
        lambda attr: attr.accessor("tags", default=tags),
        name="Tagged",
        settings=ModelSettings(copy_defaults=False),
    )
    assert Tagged().tags is tags
    assert Tagged.settings.copy_defaults is False


def test_class_statement_settings():
    class Strict(
        Model,
        declare=lambda attr: attr.accessor("name"),
        settings=ModelSettings(atomic_update=True),
    ):
        pass

    assert Strict.settings.atomic_update is True
