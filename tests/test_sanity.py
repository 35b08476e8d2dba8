"""Checks that every public name the package advertises actually resolves."""

from __future__ import annotations

import importlib

import pytest

import candyland


@pytest.mark.parametrize("module_name", candyland.__all__)
def test_package_exports_resolve(module_name: str) -> None:
    module = importlib.import_module(f"candyland.{module_name}")

    for name in getattr(module, "__all__", ()):
        assert hasattr(module, name), f"{module_name}.{name}"


@pytest.mark.parametrize("module_name", ["candyland.scoreboard", "candyland.simulation", "candyland.cli.main"])
def test_tooling_modules_import(module_name: str) -> None:
    assert importlib.import_module(module_name)
